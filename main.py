"""
アプリケーションのエントリーポイント。

このスクリプトは、ログ設定を行ったうえでPyQt6アプリケーションを初期化し、
メインウィンドウであるMainWindowを生成・表示して、イベントループを開始します。
また、プロジェクトのルートディレクトリをPythonのパスに追加し、
他のモジュール（ui, servicesなど）を正しくインポートできるように設定します。
"""
import logging
import sys
import os
from PyQt6.QtWidgets import QApplication

# このファイル(main.py)があるディレクトリをモジュール検索パスに追加します。
current_dir: str = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.append(current_dir)

from ui.main_window import MainWindow
from utils.constants import LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL


def configure_logging() -> int:
    """環境変数で指定されたレベルでログ出力を設定する。不正な値の場合は既定値を使用する。

    Returns:
        int: 設定したログレベル。
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # ハンドラ設定済みの場合もレベルを反映する
    logging.getLogger().setLevel(level)
    return level


def main() -> int:
    """アプリケーションを起動し、イベントループの終了コードを返す。"""
    configure_logging()

    # 1. PyQtアプリケーションインスタンスを作成します。
    app: QApplication = QApplication(sys.argv)

    # 2. メインウィンドウを作成して表示します。
    window: MainWindow = MainWindow()
    window.show()

    # 3. ウィンドウが閉じられるまでイベントループを実行します。
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
