# ui/screens/home_screen.py
"""
メモ一覧画面のUIコンポーネントを提供します。

このモジュールには、ストアのスナップショットを購読してメモ一覧を表示する
MemoListScreen クラスが含まれています。
"""
from typing import Optional, List

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QScrollArea
from PyQt6.QtCore import Qt

from models.memo_models import MemoSnapshot
from services.memo_store import MemoStore
from ui.components import AppBar, MemoListItem
from ui.navigation import Router
from ui.widgets import MemoEditorConfig
from utils.constants import APP_TITLE, ADD_BUTTON_TEXT, EMPTY_LIST_MESSAGE, ROUTE_ADD
from utils.route_utils import detail_route


class MemoListScreen(QWidget):
    """
    メモ一覧画面のメインウィジェット。

    ストアの並び順（新しいものが先頭）でメモのタイトルと本文プレビューを表示し、
    項目のクリックで詳細画面へ、追加ボタンで追加画面へ遷移します。
    メモが1件もない場合は案内メッセージを表示します。
    """

    def __init__(self, store: MemoStore, router: Router, config: Optional[MemoEditorConfig] = None,
                 parent: Optional[QWidget] = None) -> None:
        """
        MemoListScreenのコンストラクタ。

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

        # --- 表示中の項目 ---
        self.items: List[MemoListItem] = []

        # --- UI要素の型定義 ---
        self.app_bar: AppBar
        self.empty_label: QLabel
        self.scroll_area: QScrollArea
        self.list_layout: QVBoxLayout

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)
        padding = self.config.horizontal_padding
        layout.setContentsMargins(padding, 0, padding, 0)

        self.app_bar = AppBar(APP_TITLE, self.config, self.config.home_title_size)
        layout.addWidget(self.app_bar)

        self.empty_label = QLabel(EMPTY_LIST_MESSAGE)
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)
        layout.addWidget(self.empty_label)

        self.scroll_area = self._create_list_area()
        layout.addWidget(self.scroll_area, 1)

    def _create_list_area(self) -> QScrollArea:
        """メモ項目を縦に並べるスクロール領域を作成する。"""
        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setFrameShape(QScrollArea.Shape.NoFrame)

        container = QWidget()
        self.list_layout = QVBoxLayout(container)
        self.list_layout.setContentsMargins(0, 0, 0, 96)
        self.list_layout.setSpacing(self.config.item_spacing)
        self.list_layout.addStretch()
        scroll_area.setWidget(container)
        return scroll_area

    def setup_connections(self) -> None:
        """ボタンの接続とストアの購読を行う。"""
        self.app_bar.add_action(ADD_BUTTON_TEXT, self.open_add_screen)
        self.store.subscribe(self.render)

    def dispose(self) -> None:
        """画面が破棄されるときにストアの購読を解除する。"""
        self.store.unsubscribe(self.render)

    def render(self, memos: MemoSnapshot) -> None:
        """
        スナップショットの内容で一覧を作り直す。

        Args:
            memos (MemoSnapshot): 表示するメモ一覧。
        """
        for item in self.items:
            self.list_layout.removeWidget(item)
            item.deleteLater()
        self.items = []

        for memo in memos:
            item = MemoListItem(memo, self.config)
            item.clicked.connect(self.open_detail_screen)
            # 末尾のストレッチより前に挿入する
            self.list_layout.insertWidget(self.list_layout.count() - 1, item)
            self.items.append(item)

        is_empty = not memos
        self.empty_label.setVisible(is_empty)
        self.scroll_area.setVisible(not is_empty)

    def open_add_screen(self) -> None:
        """メモ追加画面へ遷移する。"""
        self.router.navigate(ROUTE_ADD)

    def open_detail_screen(self, memo_id: str) -> None:
        """
        指定されたメモの詳細画面へ遷移する。

        Args:
            memo_id (str): 表示するメモのID。
        """
        self.router.navigate(detail_route(memo_id))
