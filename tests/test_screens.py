"""一覧・追加・詳細画面とメインウィンドウの配線のテスト。"""

import pytest

from services.memo_store import MemoStore
from ui.main_window import MainWindow
from ui.navigation import Router
from ui.screens.add_memo_screen import AddMemoScreen
from ui.screens.home_screen import MemoListScreen
from ui.screens.memo_detail_screen import MemoDetailScreen


@pytest.fixture
def on_add(router: Router) -> Router:
    router.navigate("add")
    return router


class TestMemoListScreen:
    def test_empty_state(self, store: MemoStore, router: Router):
        screen = MemoListScreen(store, router)
        assert not screen.empty_label.isHidden()
        assert screen.scroll_area.isHidden()
        assert screen.items == []

    def test_renders_in_store_order_and_follows_changes(self, store: MemoStore, router: Router):
        screen = MemoListScreen(store, router)
        store.add("Groceries", "milk, eggs")
        store.add("Call mom", "")

        assert [item.title_label.text() for item in screen.items] == ["Call mom", "Groceries"]
        assert screen.items[0].preview_label is None
        assert screen.items[1].preview_label.text() == "milk, eggs"
        assert screen.empty_label.isHidden()

    def test_blank_content_has_no_preview(self, store: MemoStore, router: Router):
        screen = MemoListScreen(store, router)
        store.add("title", "   ")
        assert screen.items[0].preview_label is None

    def test_item_click_opens_detail(self, store: MemoStore, router: Router):
        store.add("a", "")
        memo_id = store.memos[0].id
        screen = MemoListScreen(store, router)

        screen.items[0].clicked.emit(memo_id)

        assert router.current_entry.route == f"detail/{memo_id}"
        assert router.current_entry.arguments == {"id": memo_id}

    def test_add_action_opens_add_screen(self, store: MemoStore, router: Router):
        screen = MemoListScreen(store, router)
        screen.app_bar.actions_by_text["追加"].click()
        assert router.current_entry.route == "add"

    def test_dispose_unsubscribes(self, store: MemoStore, router: Router):
        screen = MemoListScreen(store, router)
        screen.dispose()
        store.add("a", "")
        assert screen.items == []

    def test_app_bar_uses_text_color(self, store: MemoStore, router: Router):
        screen = MemoListScreen(store, router)
        color = screen.config.text_color.name()
        assert color in screen.app_bar.title_label.styleSheet()
        assert color in screen.app_bar.actions_by_text["追加"].styleSheet()


class TestAddMemoScreen:
    def test_save_trims_and_goes_back(self, store: MemoStore, on_add: Router):
        screen = AddMemoScreen(store, on_add)
        screen.title_edit.setText("  Trip  ")
        screen.content_edit.setPlainText("  Paris  ")

        assert screen.save() is True

        assert [(m.title, m.content) for m in store.memos] == [("Trip", "Paris")]
        assert on_add.current_entry.route == "home"

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_ignored(self, store: MemoStore, on_add: Router, title: str):
        screen = AddMemoScreen(store, on_add)
        screen.title_edit.setText(title)
        screen.content_edit.setPlainText("body")

        assert screen.save() is False

        assert store.memos == ()
        assert on_add.current_entry.route == "add"

    def test_save_button(self, store: MemoStore, on_add: Router):
        screen = AddMemoScreen(store, on_add)
        screen.title_edit.setText("note")
        screen.app_bar.actions_by_text["保存"].click()
        assert store.memos[0].title == "note"


class TestMemoDetailScreen:
    @pytest.fixture
    def memo_id(self, store: MemoStore, router: Router) -> str:
        store.add("Groceries", "milk, eggs")
        memo_id = store.memos[0].id
        router.navigate(f"detail/{memo_id}")
        return memo_id

    def test_seeds_fields_from_memo(self, store: MemoStore, router: Router, memo_id: str):
        screen = MemoDetailScreen(store, router, memo_id)
        assert screen.is_found()
        assert screen.title_edit.text() == "Groceries"
        assert screen.content_edit.toPlainText() == "milk, eggs"

    def test_edits_are_not_committed_before_save(self, store: MemoStore, router: Router, memo_id: str):
        screen = MemoDetailScreen(store, router, memo_id)
        screen.title_edit.setText("changed")
        assert store.find(memo_id).title == "Groceries"

    def test_save_updates_and_goes_back(self, store: MemoStore, router: Router, memo_id: str):
        store.add("Call mom", "")
        screen = MemoDetailScreen(store, router, memo_id)
        screen.title_edit.setText(" Groceries v2 ")
        screen.content_edit.setPlainText(" milk ")

        assert screen.save() is True

        assert store.memos[0].title == "Call mom"
        assert (store.memos[1].title, store.memos[1].content) == ("Groceries v2", "milk")
        assert store.memos[1].id == memo_id
        assert router.current_entry.route == "home"

    def test_blank_title_is_ignored(self, store: MemoStore, router: Router, memo_id: str):
        screen = MemoDetailScreen(store, router, memo_id)
        screen.title_edit.setText("  ")

        assert screen.save() is False

        assert store.find(memo_id).title == "Groceries"
        assert router.current_entry.route == f"detail/{memo_id}"

    def test_delete_removes_and_goes_back(self, store: MemoStore, router: Router, memo_id: str):
        screen = MemoDetailScreen(store, router, memo_id)
        screen.app_bar.actions_by_text["削除"].click()

        assert store.find(memo_id) is None
        assert router.current_entry.route == "home"

    def test_not_found(self, store: MemoStore, router: Router):
        router.navigate("detail/")
        screen = MemoDetailScreen(store, router, "")

        assert not screen.is_found()
        assert screen.not_found_label is not None
        assert screen.title_edit is None
        assert screen.save() is False

        screen.back_button.click()
        assert router.current_entry.route == "home"


class TestMainWindow:
    def test_full_flow(self, qapp):
        window = MainWindow()
        home = window.nav_host.current_screen()
        assert isinstance(home, MemoListScreen)

        home.open_add_screen()
        add_screen = window.nav_host.current_screen()
        assert isinstance(add_screen, AddMemoScreen)
        add_screen.title_edit.setText("Groceries")
        add_screen.save()

        assert window.nav_host.current_screen() is home
        assert [item.title_label.text() for item in home.items] == ["Groceries"]

        memo_id = window.store.memos[0].id
        home.open_detail_screen(memo_id)
        detail = window.nav_host.current_screen()
        assert isinstance(detail, MemoDetailScreen)
        assert detail.memo_id == memo_id

        detail.delete()
        assert window.nav_host.current_screen() is home
        assert home.items == []
        assert not home.empty_label.isHidden()

    def test_detail_without_id_shows_not_found(self, qapp):
        window = MainWindow()
        window.router.navigate("detail")
        detail = window.nav_host.current_screen()
        assert isinstance(detail, MemoDetailScreen)
        assert detail.memo_id == ""
        assert not detail.is_found()
