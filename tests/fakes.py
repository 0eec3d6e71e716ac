"""
Test doubles shared by the browser tests.
"""

import asyncio
import threading
import time
from typing import Callable, Dict, List, Optional, Set, Tuple

from recipes.models import Recipe
from streamlit_app.browser.errors import NetworkError
from streamlit_app.browser.scroll import MonitorSettings

# Short timings so polling tests finish quickly
FAST_SETTINGS = MonitorSettings(interval=0.01, settle_delay=0.02, threshold=450)


def make_recipes(prefix: str, count: int, start: int = 1) -> List[Recipe]:
    return [
        Recipe(
            title=f"{prefix.title()} Recipe {i}",
            href=f"https://recipes.test/{prefix}-{i}",
            ingredients="eggs, flour, milk",
            thumbnail=f"https://recipes.test/img/{prefix}-{i}.jpg",
        )
        for i in range(start, start + count)
    ]


class FakeClient:
    """
    In-memory query client.

    Args:
        pages: Query -> list of page batches (page 1 first); pages past the end are empty
        failures: (query, page) pairs that raise NetworkError once
        delays: Query -> seconds to block before answering
    """

    def __init__(
        self,
        pages: Optional[Dict[str, List[List[Recipe]]]] = None,
        failures: Optional[Set[Tuple[str, int]]] = None,
        delays: Optional[Dict[str, float]] = None,
    ) -> None:
        self.pages = pages or {}
        self.failures = set(failures or ())
        self.delays = delays or {}
        self.calls: List[Tuple[str, int]] = []
        self._lock = threading.Lock()

    def search(self, query: str, page: int) -> List[Recipe]:
        with self._lock:
            self.calls.append((query, page))
        delay = self.delays.get(query, 0)
        if delay:
            time.sleep(delay)
        with self._lock:
            if (query, page) in self.failures:
                self.failures.discard((query, page))
                raise NetworkError(f"page {page} unavailable")
        batches = self.pages.get(query, [])
        if 1 <= page <= len(batches):
            return list(batches[page - 1])
        return []


async def wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Yield to the event loop until `predicate()` holds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("Condition not met in time")
        await asyncio.sleep(0.005)


def wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Blocking variant of wait_for for code running on another thread."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("Condition not met in time")
        time.sleep(0.01)
