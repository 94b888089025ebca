import os
import sys

import pytest

# ヘッドレス環境でQtを実行できるようにする（PyQt6のインポートより前に設定する）
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from services.memo_store import MemoStore
from ui.navigation import Router
from utils.constants import ROUTE_HOME, ROUTE_ADD, ROUTE_DETAIL


@pytest.fixture(scope="session")
def qapp():
    """テストセッション全体で共有するQApplication。"""
    app = QApplication.instance() or QApplication(sys.argv[:1])
    yield app


@pytest.fixture
def store(qapp) -> MemoStore:
    return MemoStore()


@pytest.fixture
def router(qapp) -> Router:
    return Router([ROUTE_HOME, ROUTE_ADD, ROUTE_DETAIL], ROUTE_HOME)
