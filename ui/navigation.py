# ui/navigation.py
"""
画面遷移を管理するルーターと、その状態を表示するホストウィジェットを提供します。

- Router: ルート文字列のバックスタックを保持し、push（navigate）と pop（pop_back_stack）を行う。
- NavHost: Routerのバックスタックに合わせて画面ウィジェットを生成・破棄するQStackedWidget。
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QStackedWidget, QWidget

from utils.route_utils import match_route

logger = logging.getLogger(__name__)


class UnknownRouteError(ValueError):
    """登録されていないルートへの遷移が要求されたときに送出される例外。"""


@dataclass(frozen=True)
class BackStackEntry:
    """バックスタック上の1つの遷移先。

    Attributes:
        route (str): 遷移時に指定されたルート文字列（例: "detail/abc"）。
        pattern (str): 一致したルートパターン（例: "detail/{id}"）。
        arguments (Dict[str, str]): ルートから取り出した引数。
    """
    route: str
    pattern: str
    arguments: Dict[str, str] = field(default_factory=dict)


class Router(QObject):
    """
    ルートのバックスタックを管理するナビゲーションコントローラ。

    開始ルートは常にスタックの最下部に残り、pop_back_stackで取り除かれることはない。

    Signals:
        entry_pushed (pyqtSignal): 新しいエントリがスタックに積まれたときに、そのエントリを送信する。
        entry_popped (pyqtSignal): エントリがスタックから取り除かれたときに、そのエントリを送信する。
    """
    entry_pushed = pyqtSignal(object)
    entry_popped = pyqtSignal(object)

    def __init__(self, patterns: List[str], start_route: str, parent: Optional[QObject] = None) -> None:
        """
        Routerのコンストラクタ。

        Args:
            patterns (List[str]): 遷移可能なルートパターンの一覧。
            start_route (str): 開始ルート。
            parent (Optional[QObject]): 親オブジェクト。
        """
        super().__init__(parent)
        self.patterns: List[str] = list(patterns)
        self._back_stack: List[BackStackEntry] = [self._resolve(start_route)]

    @property
    def current_entry(self) -> BackStackEntry:
        """現在表示中（スタック最上部）のエントリを返す。"""
        return self._back_stack[-1]

    @property
    def back_stack(self) -> Tuple[BackStackEntry, ...]:
        """バックスタックのコピーを最下部から順に返す。"""
        return tuple(self._back_stack)

    def navigate(self, route: str) -> BackStackEntry:
        """
        指定されたルートへ遷移し、エントリをスタックに積む。

        Args:
            route (str): 遷移先のルート文字列。

        Returns:
            BackStackEntry: 積まれたエントリ。

        Raises:
            UnknownRouteError: ルートがどのパターンにも一致しない場合。
        """
        entry = self._resolve(route)
        self._back_stack.append(entry)
        logger.debug("遷移: %s (スタック数 %d)", route, len(self._back_stack))
        self.entry_pushed.emit(entry)
        return entry

    def pop_back_stack(self) -> bool:
        """
        スタック最上部のエントリを取り除き、1つ前の画面に戻る。

        Returns:
            bool: 戻った場合はTrue。開始ルートのみが残っている場合はFalse。
        """
        if len(self._back_stack) <= 1:
            logger.debug("開始ルートのため戻れません: %s", self.current_entry.route)
            return False
        entry = self._back_stack.pop()
        logger.debug("戻る: %s -> %s", entry.route, self.current_entry.route)
        self.entry_popped.emit(entry)
        return True

    def _resolve(self, route: str) -> BackStackEntry:
        """ルート文字列を登録済みパターンと照合してエントリを作成する。"""
        matched = match_route(route, self.patterns)
        if matched is None:
            logger.warning("未登録のルートです: %s", route)
            raise UnknownRouteError(f"未登録のルートです: {route}")
        return BackStackEntry(route=route, pattern=matched.pattern, arguments=dict(matched.arguments))


ScreenFactory = Callable[[BackStackEntry], QWidget]


class NavHost(QStackedWidget):
    """
    Routerのバックスタックに対応する画面を積み重ねて表示するウィジェット。

    積まれたエントリごとに画面を生成し、取り除かれたエントリの画面は
    dispose()（定義されている場合）を呼んで購読を解除してから破棄する。
    スタックの下にある画面は破棄されず、入力途中の内容を保持する。
    """

    def __init__(self, router: Router, factories: Dict[str, ScreenFactory], parent: Optional[QWidget] = None) -> None:
        """
        NavHostのコンストラクタ。

        Args:
            router (Router): 表示対象のルーター。
            factories (Dict[str, ScreenFactory]): ルートパターンごとの画面生成関数。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.router: Router = router
        self.factories: Dict[str, ScreenFactory] = factories

        for entry in self.router.back_stack:
            self._push_screen(entry)

        self.router.entry_pushed.connect(self._push_screen)
        self.router.entry_popped.connect(self._pop_screen)

    def current_screen(self) -> Optional[QWidget]:
        """現在表示中の画面ウィジェットを返す。"""
        return self.currentWidget()

    def _push_screen(self, entry: BackStackEntry) -> None:
        screen = self.factories[entry.pattern](entry)
        self.addWidget(screen)
        self.setCurrentWidget(screen)

    def _pop_screen(self, entry: BackStackEntry) -> None:
        screen = self.widget(self.count() - 1)
        if screen is None:
            return
        self.removeWidget(screen)
        dispose = getattr(screen, "dispose", None)
        if callable(dispose):
            dispose()
        screen.deleteLater()
        self.setCurrentIndex(self.count() - 1)
