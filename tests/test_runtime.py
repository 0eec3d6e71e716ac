"""
Tests for the browser runtime driving pages from another thread.
"""

import pytest

from fakes import FAST_SETTINGS, FakeClient, make_recipes, wait_until
from streamlit_app.browser.favorites import FavoritesStore
from streamlit_app.browser.pages import ABOUT, HOME
from streamlit_app.browser.runtime import BrowserRuntime
from streamlit_app.browser.storage import MemoryStorage


def _find(node, predicate):
    if predicate(node):
        return node
    for child in node["children"]:
        found = _find(child, predicate)
        if found is not None:
            return found
    return None


@pytest.fixture
def runtime():
    client = FakeClient({"eggs": [make_recipes("eggs", 3)]})
    runtime = BrowserRuntime(FavoritesStore(MemoryStorage()), client, monitor_settings=FAST_SETTINGS)
    runtime.start()
    yield runtime
    runtime.shutdown()


class TestBrowserRuntime:
    """Test cases for BrowserRuntime."""

    def test_start_and_navigate(self, runtime):
        assert runtime.running
        assert runtime.navigate(HOME) == HOME

        snapshot = runtime.snapshot()

        assert [child["id"] for child in snapshot["children"]] == ["search-form", "recipes-container"]
        assert runtime.describe()["destination"] == HOME

    def test_submit_and_favorite_through_events(self, runtime):
        """Test that events dispatched by id reach the page on the loop thread."""
        runtime.navigate(HOME)

        assert runtime.dispatch("search-form", "submit", "eggs") is None
        wait_until(lambda: runtime.describe()["search_status"] == "exhausted")

        info = runtime.describe()
        assert info["result_count"] == 3
        assert info["polling"] is False

        heart = _find(runtime.snapshot(), lambda node: node["tag"] == "i")
        assert runtime.dispatch(heart["id"], "click") is True
        assert runtime.describe()["favorites_count"] == 1

    def test_event_for_missing_element_is_dropped(self, runtime):
        runtime.navigate(ABOUT)
        assert runtime.dispatch("no-such-element", "click") is None

    def test_unknown_destination_raises(self, runtime):
        with pytest.raises(ValueError):
            runtime.navigate("settings")

    def test_scroll_to_bottom(self, runtime):
        runtime.navigate(ABOUT)
        runtime.scroll_to_bottom()
        assert runtime.viewport.scroll_top == runtime.call(lambda: runtime.viewport.max_scroll)


class TestRuntimeLifecycle:
    """Test cases for start and shutdown."""

    def test_shutdown_tears_down_and_stops(self):
        runtime = BrowserRuntime(FavoritesStore(MemoryStorage()), FakeClient())
        runtime.start()
        runtime.navigate(HOME)

        runtime.shutdown()

        assert not runtime.running
        assert runtime.router.current_page is None
        assert runtime.root.is_empty
        with pytest.raises(RuntimeError):
            runtime.snapshot()

    def test_call_before_start_raises(self):
        runtime = BrowserRuntime(FavoritesStore(MemoryStorage()), FakeClient())
        with pytest.raises(RuntimeError):
            runtime.navigate(HOME)
