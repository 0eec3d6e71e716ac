"""
Tests for the element tree.
"""

from streamlit_app.browser.dom import Element


class TestElementTree:
    """Test cases for tree structure and queries."""

    def test_append_sets_parent(self):
        parent = Element("div")
        child = parent.append_child(Element("span", "hi"))
        assert child.parent is parent
        assert parent.children == [child]

    def test_append_moves_child_between_parents(self):
        first, second = Element("div"), Element("div")
        child = first.append_child(Element("span"))

        second.append_child(child)

        assert first.children == []
        assert child.parent is second

    def test_clear_detaches_children_and_text(self):
        parent = Element("div", "message")
        child = parent.append_child(Element("span"))

        parent.clear()

        assert parent.is_empty
        assert child.parent is None

    def test_find_and_find_all(self):
        root = Element("div", id="root")
        card = root.append_child(Element("div", classes=["recipe"]))
        icon = card.append_child(Element("i", id="heart", classes=["fav-button"]))

        assert root.find("heart") is icon
        assert root.find("missing") is None
        assert root.find_all("recipe") == [card]

    def test_ids_are_unique(self):
        assert Element("div").id != Element("div").id

    def test_text_content_joins_descendants(self):
        root = Element("div", "Title")
        root.append_child(Element("span", "3 ingredients"))
        assert root.text_content == "Title 3 ingredients"

    def test_layout_height_sums_subtree(self):
        root = Element("div", height=80)
        list_view = root.append_child(Element("div"))
        for _ in range(3):
            list_view.append_child(Element("div", height=120))
        assert root.layout_height() == 440


class TestElementEvents:
    """Test cases for event handlers."""

    def test_dispatch_returns_handler_result(self):
        button = Element("button")
        button.on("click", lambda: "clicked")
        assert button.dispatch("click") == "clicked"

    def test_dispatch_passes_arguments(self):
        form = Element("form")
        received = []
        form.on("submit", received.append)

        form.dispatch("submit", "eggs")

        assert received == ["eggs"]

    def test_dispatch_without_handler_is_noop(self):
        assert Element("div").dispatch("click") is None

    def test_off_removes_handler(self):
        button = Element("button")
        button.on("click", lambda: "clicked")
        button.off("click")
        assert button.dispatch("click") is None


class TestSnapshot:
    """Test cases for Element.snapshot."""

    def test_snapshot_is_plain_data(self):
        root = Element("div", id="root", classes=["recipe"], attrs={"href": "https://x.test"})
        icon = root.append_child(Element("i", id="heart"))
        icon.on("click", lambda: None)

        snapshot = root.snapshot()

        assert snapshot["id"] == "root"
        assert snapshot["classes"] == ["recipe"]
        assert snapshot["attrs"] == {"href": "https://x.test"}
        assert snapshot["children"][0]["events"] == ["click"]

    def test_snapshot_is_detached_from_tree(self):
        root = Element("div", classes=["a"])
        snapshot = root.snapshot()
        snapshot["classes"].append("b")
        assert root.classes == ["a"]
