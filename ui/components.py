# ui/components.py
"""
メモ画面で再利用されるカスタムUIコンポーネントを提供します。

- AppBar: 画面上部のタイトルと右寄せのテキストボタン群からなるバー。
- MemoListItem: メモ一覧の1行（タイトル・本文プレビュー・区切り線）。
"""
from __future__ import annotations
from typing import Callable, Dict, Optional

from PyQt6.QtWidgets import QLabel, QWidget, QHBoxLayout, QVBoxLayout, QPushButton, QFrame
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent

from models.memo_models import Memo
from ui.widgets import MemoEditorConfig


class AppBar(QWidget):
    """
    画面上部に表示するバー。左にタイトル、右にアクションボタンを並べる。
    """
    def __init__(self, title: str, config: MemoEditorConfig, title_size: int = 0,
                 parent: Optional[QWidget] = None) -> None:
        """
        AppBarのコンストラクタ。

        Args:
            title (str): バーに表示するタイトル。
            config (MemoEditorConfig): フォントや色の設定。
            title_size (int): タイトルのフォントサイズ。0の場合は設定値を使用する。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.config: MemoEditorConfig = config
        self.actions_by_text: Dict[str, QPushButton] = {}

        self.title_label: QLabel = QLabel(title)
        self.title_label.setFont(config.get_font(title_size or config.app_bar_title_size, bold=True))
        self.title_label.setStyleSheet(f"color: {config.text_color.name()};")

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 16, 0, 12)
        self._layout.addWidget(self.title_label)
        self._layout.addStretch()

    def add_action(self, text: str, slot: Callable[[], object]) -> QPushButton:
        """
        右端にテキストボタンを追加する。

        Args:
            text (str): ボタンの表示文字列。
            slot (Callable): クリック時に呼ばれる関数。

        Returns:
            QPushButton: 追加されたボタン。
        """
        button = QPushButton(text)
        button.setFlat(True)
        button.setStyleSheet(f"color: {self.config.text_color.name()};")
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        button.clicked.connect(lambda _checked=False: slot())
        self._layout.addWidget(button)
        self.actions_by_text[text] = button
        return button


class MemoListItem(QWidget):
    """
    メモ一覧の1行を表すウィジェット。
    行のどこをクリックしても 'clicked' シグナルでメモのIDを送信する。

    本文が空白のみの場合、プレビューは表示しない。
    """
    clicked = pyqtSignal(str)

    def __init__(self, memo: Memo, config: MemoEditorConfig, parent: Optional[QWidget] = None) -> None:
        """
        MemoListItemのコンストラクタ。

        Args:
            memo (Memo): 表示するメモ。
            config (MemoEditorConfig): フォントや色の設定。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.memo_id: str = memo.id
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 10, 0, 10)
        layout.setSpacing(4)

        self.title_label: QLabel = QLabel(memo.title)
        self.title_label.setFont(config.get_font(config.item_title_size, bold=True))
        self.title_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        layout.addWidget(self.title_label)

        self.preview_label: Optional[QLabel] = None
        if memo.content.strip():
            self.preview_label = QLabel(memo.content)
            self.preview_label.setFont(config.get_font(config.item_preview_size))
            self.preview_label.setStyleSheet(f"color: {config.preview_color.name()};")
            self.preview_label.setWordWrap(True)
            self.preview_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
            layout.addWidget(self.preview_label)

        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setStyleSheet(f"color: {config.divider_color.name()};")
        layout.addWidget(divider)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """
        マウスの左ボタンが離されたときに clicked シグナルを発する。
        子ラベルはマウスイベントを透過するため、行全体がクリック対象になる。
        """
        if event.button() == Qt.MouseButton.LeftButton:
            self._emit_clicked()
        super().mouseReleaseEvent(event)

    def _emit_clicked(self) -> None:
        self.clicked.emit(self.memo_id)
