"""
Infinite scroll: viewport model and proximity monitor.

The directory doesn't report a total, so the Search page paginates by
proximity instead of page links: a recurring check looks at how far the
visible window is from the bottom of the content and asks for the next page
when it gets close.

The monitor is a cancellable asyncio task with an explicit `loading` guard:
- tick every `interval` seconds;
- when not loading and within `threshold` px of the bottom, set the guard and
  run `on_near_bottom()` in its own task;
- release the guard `settle_delay` seconds after that call completes, giving
  the new items time to extend the content before the next check.

stop() cancels the ticking task, a pending guard release and an in-flight
load, so nothing fires after the owning page has been torn down.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .dom import Element

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.25
SETTLE_DELAY_SECONDS = 0.5
PROXIMITY_THRESHOLD_PX = 450
WINDOW_HEIGHT_PX = 900


@dataclass(frozen=True)
class MonitorSettings:
    interval: float = POLL_INTERVAL_SECONDS
    settle_delay: float = SETTLE_DELAY_SECONDS
    threshold: int = PROXIMITY_THRESHOLD_PX


class Viewport:
    """
    Scroll position of the visible window over the root element's content.

    Attributes:
        root: Element whose layout height is the scrollable content height
        window_height: Visible window height in px
        scroll_top: Requested scroll offset in px (clamped when read)
    """

    def __init__(self, root: Element, window_height: int = WINDOW_HEIGHT_PX) -> None:
        self.root = root
        self.window_height = window_height
        self.scroll_top = 0

    @property
    def content_height(self) -> int:
        return self.root.layout_height()

    @property
    def max_scroll(self) -> int:
        return max(0, self.content_height - self.window_height)

    def scroll_to(self, y: int) -> None:
        self.scroll_top = max(0, int(y))

    def scroll_to_bottom(self) -> None:
        self.scroll_top = self.max_scroll

    def distance_from_bottom(self) -> int:
        """Content below the visible window, in px (negative when content is shorter than the window)."""
        scroll_top = min(self.scroll_top, self.max_scroll)
        return self.content_height - (scroll_top + self.window_height)


class ProximityMonitor:
    """
    Recurring near-bottom check that triggers loading the next page.

    Attributes:
        viewport: Viewport to measure
        on_near_bottom: Coroutine function loading more content
        loading: Guard, True from trigger until settle_delay after the load completes
    """

    def __init__(
        self,
        viewport: Viewport,
        on_near_bottom: Callable[[], Awaitable[object]],
        interval: float = POLL_INTERVAL_SECONDS,
        settle_delay: float = SETTLE_DELAY_SECONDS,
        threshold: int = PROXIMITY_THRESHOLD_PX,
    ) -> None:
        self.viewport = viewport
        self.on_near_bottom = on_near_bottom
        self.interval = interval
        self.settle_delay = settle_delay
        self.threshold = threshold
        self.loading = False
        self._task: Optional[asyncio.Task] = None
        self._load_task: Optional[asyncio.Task] = None
        self._release_handle: Optional[asyncio.TimerHandle] = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking. Must be called from a running event loop."""
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        """Cancel ticking, a pending guard release and an in-flight load. Idempotent."""
        if self._task is not None:
            if not self._task.done():
                self._task.cancel()
            self._task = None
        if self._release_handle is not None:
            self._release_handle.cancel()
            self._release_handle = None
        if self._load_task is not None:
            # stop() may be called from inside the load itself (e.g. results exhausted)
            if not self._load_task.done() and self._load_task is not asyncio.current_task():
                self._load_task.cancel()
            self._load_task = None
        self.loading = False

    def check(self) -> Optional[asyncio.Task]:
        """
        Run one proximity check.

        Returns:
            The task running on_near_bottom() if a load was triggered, else None
        """
        if self.loading:
            return None
        if self.viewport.distance_from_bottom() > self.threshold:
            return None

        self.loading = True
        self._load_task = asyncio.get_running_loop().create_task(self._load())
        return self._load_task

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.check()

    async def _load(self) -> None:
        try:
            await self.on_near_bottom()
        except Exception:
            logger.exception("Loading more content failed")
        finally:
            if self.active:
                loop = asyncio.get_running_loop()
                self._release_handle = loop.call_later(self.settle_delay, self._release)
            else:
                self.loading = False

    def _release(self) -> None:
        self._release_handle = None
        self._load_task = None
        self.loading = False
