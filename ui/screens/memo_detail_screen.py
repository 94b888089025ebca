# ui/screens/memo_detail_screen.py
"""
メモ詳細（編集）画面のUIコンポーネントを提供します。

このモジュールには、既存のメモを表示・編集・削除するための
MemoDetailScreen クラスが含まれています。
"""
import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLineEdit, QPlainTextEdit, QLabel, QPushButton
from PyQt6.QtCore import Qt

from models.memo_models import Memo
from services.memo_store import MemoStore
from ui.components import AppBar
from ui.navigation import Router
from ui.widgets import MemoEditorConfig
from utils.constants import (DETAIL_SCREEN_TITLE, SAVE_BUTTON_TEXT, DELETE_BUTTON_TEXT,
                             BACK_BUTTON_TEXT, NOT_FOUND_MESSAGE)

logger = logging.getLogger(__name__)


class MemoDetailScreen(QWidget):
    """
    メモ詳細画面のメインウィジェット。

    表示時にIDでメモを検索し、見つからなければ「見つかりません」表示と戻るボタンのみを表示します。
    見つかった場合はタイトルと本文を編集欄に一度だけ読み込みます。編集欄はストアと
    連動せず、保存ボタンが押されたときにのみストアへ反映されます。
    """

    def __init__(self, store: MemoStore, router: Router, memo_id: str,
                 config: Optional[MemoEditorConfig] = None, parent: Optional[QWidget] = None) -> None:
        """
        MemoDetailScreenのコンストラクタ。

        Args:
            store (MemoStore): メモのストア。
            router (Router): 画面遷移に使用するルーター。
            memo_id (str): 表示するメモのID。
            config (Optional[MemoEditorConfig]): 見た目の設定。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.store: MemoStore = store
        self.router: Router = router
        self.memo_id: str = memo_id
        self.config: MemoEditorConfig = config or MemoEditorConfig()

        # --- 表示対象のメモ（表示時点の値） ---
        self.memo: Optional[Memo] = self.store.find(memo_id)

        # --- UI要素の型定義 ---
        self.app_bar: Optional[AppBar] = None
        self.title_edit: Optional[QLineEdit] = None
        self.content_edit: Optional[QPlainTextEdit] = None
        self.not_found_label: Optional[QLabel] = None
        self.back_button: Optional[QPushButton] = None

        if self.memo is None:
            self.setup_not_found_ui()
        else:
            self.setup_ui(self.memo)
            self.setup_connections()

    def is_found(self) -> bool:
        """表示対象のメモが存在したかどうかを返す。"""
        return self.memo is not None

    def setup_not_found_ui(self) -> None:
        """メモが見つからなかった場合の表示を構築する。"""
        logger.debug("メモが見つかりません: id=%r", self.memo_id)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 48, 16, 16)
        layout.setSpacing(12)

        self.not_found_label = QLabel(NOT_FOUND_MESSAGE)
        self.not_found_label.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(self.not_found_label)

        self.back_button = QPushButton(BACK_BUTTON_TEXT)
        self.back_button.setFlat(True)
        self.back_button.clicked.connect(lambda _checked=False: self.go_back())
        layout.addWidget(self.back_button, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch()

    def setup_ui(self, memo: Memo) -> None:
        """
        編集用のUIを構築し、メモの現在の内容を編集欄に読み込む。

        Args:
            memo (Memo): 表示するメモ。
        """
        layout = QVBoxLayout(self)
        padding = self.config.horizontal_padding
        layout.setContentsMargins(padding, 0, padding, padding)
        layout.setSpacing(12)

        self.app_bar = AppBar(DETAIL_SCREEN_TITLE, self.config)
        layout.addWidget(self.app_bar)

        self.title_edit = QLineEdit(memo.title)
        self.title_edit.setFont(self.config.get_font())
        layout.addWidget(self.title_edit)

        self.content_edit = QPlainTextEdit(memo.content)
        self.content_edit.setFont(self.config.get_font())
        self.content_edit.setMinimumHeight(self.config.min_content_height(self.config.detail_content_min_lines))
        layout.addWidget(self.content_edit, 1)

    def setup_connections(self) -> None:
        """アプリバーのボタンを接続する。"""
        self.app_bar.add_action(DELETE_BUTTON_TEXT, self.delete)
        self.app_bar.add_action(SAVE_BUTTON_TEXT, self.save)

    def delete(self) -> None:
        """メモを削除して前の画面に戻る。"""
        if self.memo is None:
            return
        self.store.delete(self.memo.id)
        self.router.pop_back_stack()

    def save(self) -> bool:
        """
        編集内容をトリムし、タイトルが空でなければメモを更新して前の画面に戻る。

        Returns:
            bool: メモを更新した場合はTrue、タイトルが空で無視した場合はFalse。
        """
        if self.memo is None:
            return False
        title = self.title_edit.text().strip()
        content = self.content_edit.toPlainText().strip()
        if not title:
            logger.debug("タイトルが空のため保存を無視しました: id=%s", self.memo.id)
            return False
        self.store.update(self.memo.id, title, content)
        self.router.pop_back_stack()
        return True

    def go_back(self) -> None:
        """前の画面に戻る。"""
        self.router.pop_back_stack()
