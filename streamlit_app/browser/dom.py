"""
In-process element tree that pages and components mount into.

Pages never talk to Streamlit directly. They build a tree of Elements under a
single root, register click/submit handlers on them and empty or append to
containers as their state changes. The Streamlit shell renders a snapshot of
the tree and forwards user events back by element id.

Each element carries a layout height (px) so the Viewport can tell how far
the visible window is from the bottom of the content.
"""

import itertools
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

_element_ids = itertools.count(1)


class Element:
    """
    A node of the visual tree.

    Attributes:
        tag: Element kind ("div", "form", "input", "button", "a", "img", "i", ...)
        text: Text content of this node (children not included)
        id: Stable identifier, unique per process unless given explicitly
        classes: CSS-like class names
        attrs: Extra attributes (href, src, placeholder, value, ...)
        height: Own layout height in px, children add theirs
    """

    def __init__(
        self,
        tag: str,
        text: str = "",
        *,
        id: Optional[str] = None,
        classes: Optional[List[str]] = None,
        attrs: Optional[Dict[str, Any]] = None,
        height: int = 0,
    ) -> None:
        self.tag = tag
        self.text = text
        self.id = id or f"el-{next(_element_ids)}"
        self.classes: List[str] = list(classes or [])
        self.attrs: Dict[str, Any] = dict(attrs or {})
        self.height = height
        self.children: List["Element"] = []
        self.parent: Optional["Element"] = None
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def __repr__(self) -> str:
        return f"<Element {self.tag}#{self.id} children={len(self.children)}>"

    # Tree structure

    def append_child(self, child: "Element") -> "Element":
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: "Element") -> None:
        if child in self.children:
            self.children.remove(child)
            child.parent = None

    def clear(self) -> None:
        """Detach every child and drop this node's own text."""
        for child in self.children:
            child.parent = None
        self.children = []
        self.text = ""

    def iter(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            yield from child.iter()

    def find(self, element_id: str) -> Optional["Element"]:
        for element in self.iter():
            if element.id == element_id:
                return element
        return None

    def find_all(self, class_name: str) -> List["Element"]:
        return [element for element in self.iter() if class_name in element.classes]

    @property
    def is_empty(self) -> bool:
        return not self.children and not self.text

    @property
    def text_content(self) -> str:
        parts = [element.text for element in self.iter() if element.text]
        return " ".join(parts)

    def layout_height(self) -> int:
        return self.height + sum(child.layout_height() for child in self.children)

    # Classes

    def has_class(self, class_name: str) -> bool:
        return class_name in self.classes

    def set_classes(self, *class_names: str) -> None:
        self.classes = list(class_names)

    # Events

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self._handlers[event] = handler

    def off(self, event: str) -> None:
        self._handlers.pop(event, None)

    def dispatch(self, event: str, *args: Any) -> Any:
        """
        Call the handler registered for `event`.

        Returns:
            Whatever the handler returns (possibly a coroutine), or None when
            no handler is registered.
        """
        handler = self._handlers.get(event)
        if handler is None:
            logger.debug("No %s handler on %s", event, self.id)
            return None
        return handler(*args)

    # Rendering

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict copy of this subtree, safe to hand to another thread."""
        return {
            "tag": self.tag,
            "id": self.id,
            "text": self.text,
            "classes": list(self.classes),
            "attrs": dict(self.attrs),
            "events": sorted(self._handlers),
            "children": [child.snapshot() for child in self.children],
        }
