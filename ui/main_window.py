# ui/main_window.py
"""
アプリケーションのメインウィンドウを提供します。

メモのストアとルーターを1つずつ生成し、各画面へコンストラクタ経由で渡します。
"""
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget

from services.memo_store import MemoStore
from ui.navigation import BackStackEntry, NavHost, Router
from ui.screens.add_memo_screen import AddMemoScreen
from ui.screens.home_screen import MemoListScreen
from ui.screens.memo_detail_screen import MemoDetailScreen
from ui.widgets import MemoEditorConfig
from utils.constants import APP_TITLE, WINDOW_GEOMETRY, ROUTE_HOME, ROUTE_ADD, ROUTE_DETAIL, START_ROUTE


class MainWindow(QMainWindow):
    """
    メモ帳アプリのメインウィンドウ。

    中央ウィジェットとしてNavHostを配置し、ルート "home" / "add" / "detail/{id}" を
    それぞれ一覧・追加・詳細画面に対応づけます。
    """

    def __init__(self, store: Optional[MemoStore] = None, config: Optional[MemoEditorConfig] = None,
                 parent: Optional[QWidget] = None) -> None:
        """
        MainWindowのコンストラクタ。

        Args:
            store (Optional[MemoStore]): 使用するストア。省略時は新しく生成する。
            config (Optional[MemoEditorConfig]): 画面の見た目の設定。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.setWindowTitle(APP_TITLE)
        self.setGeometry(*WINDOW_GEOMETRY)

        self.store: MemoStore = store or MemoStore(self)
        self.config: MemoEditorConfig = config or MemoEditorConfig()
        self.router: Router = Router([ROUTE_HOME, ROUTE_ADD, ROUTE_DETAIL], START_ROUTE, self)

        self.nav_host: NavHost = NavHost(self.router, {
            ROUTE_HOME: self._create_home_screen,
            ROUTE_ADD: self._create_add_screen,
            ROUTE_DETAIL: self._create_detail_screen,
        })
        self.nav_host.setStyleSheet(f"background-color: {self.config.background_color.name()};")
        self.setCentralWidget(self.nav_host)

    def _create_home_screen(self, entry: BackStackEntry) -> QWidget:
        return MemoListScreen(self.store, self.router, self.config)

    def _create_add_screen(self, entry: BackStackEntry) -> QWidget:
        return AddMemoScreen(self.store, self.router, self.config)

    def _create_detail_screen(self, entry: BackStackEntry) -> QWidget:
        # 引数が欠けている場合は空文字列（該当なし）として扱う
        memo_id = entry.arguments.get("id", "")
        return MemoDetailScreen(self.store, self.router, memo_id, self.config)
