# ui/screens/add_memo_screen.py
"""
メモ追加画面のUIコンポーネントを提供します。
"""
import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLineEdit, QPlainTextEdit

from services.memo_store import MemoStore
from ui.components import AppBar
from ui.navigation import Router
from ui.widgets import MemoEditorConfig
from utils.constants import ADD_SCREEN_TITLE, SAVE_BUTTON_TEXT, TITLE_PLACEHOLDER, CONTENT_PLACEHOLDER

logger = logging.getLogger(__name__)


class AddMemoScreen(QWidget):
    """
    新しいメモを入力する画面。

    入力内容は保存ボタンが押されるまでストアに反映されない。
    タイトルが空（空白のみを含む）の場合、保存操作は何もせずに無視される。
    """

    def __init__(self, store: MemoStore, router: Router, config: Optional[MemoEditorConfig] = None,
                 parent: Optional[QWidget] = None) -> None:
        """
        AddMemoScreenのコンストラクタ。

        Args:
            store (MemoStore): メモのストア。
            router (Router): 画面遷移に使用するルーター。
            config (Optional[MemoEditorConfig]): 見た目の設定。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.store: MemoStore = store
        self.router: Router = router
        self.config: MemoEditorConfig = config or MemoEditorConfig()

        # --- UI要素の型定義 ---
        self.app_bar: AppBar
        self.title_edit: QLineEdit
        self.content_edit: QPlainTextEdit

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)
        padding = self.config.horizontal_padding
        layout.setContentsMargins(padding, 0, padding, padding)
        layout.setSpacing(12)

        self.app_bar = AppBar(ADD_SCREEN_TITLE, self.config)
        layout.addWidget(self.app_bar)

        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText(TITLE_PLACEHOLDER)
        self.title_edit.setFont(self.config.get_font())
        layout.addWidget(self.title_edit)

        self.content_edit = QPlainTextEdit()
        self.content_edit.setPlaceholderText(CONTENT_PLACEHOLDER)
        self.content_edit.setFont(self.config.get_font())
        self.content_edit.setMinimumHeight(self.config.min_content_height(self.config.add_content_min_lines))
        layout.addWidget(self.content_edit, 1)

    def setup_connections(self) -> None:
        """UI要素のシグナルとスロットを接続する。"""
        self.app_bar.add_action(SAVE_BUTTON_TEXT, self.save)

    def save(self) -> bool:
        """
        入力内容をトリムし、タイトルが空でなければメモを追加して前の画面に戻る。

        Returns:
            bool: メモを追加した場合はTrue、タイトルが空で無視した場合はFalse。
        """
        title = self.title_edit.text().strip()
        content = self.content_edit.toPlainText().strip()
        if not title:
            logger.debug("タイトルが空のため保存を無視しました")
            return False
        self.store.add(title, content)
        self.router.pop_back_stack()
        return True
