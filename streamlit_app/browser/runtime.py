"""
Browser runtime: the event loop the page framework lives on.

Pages, timers and fetches all run on one asyncio loop in a daemon thread,
one runtime per Streamlit session. The Streamlit script thread never touches
page objects directly; it goes through this class, which hops onto the loop
and waits for the answer:

    runtime.navigate("favorites")
    runtime.dispatch(element_id, "click")
    tree = runtime.snapshot()

That keeps every mutation of pages, views and favorites on a single thread.
"""

import asyncio
import logging
import threading
from typing import Any, Callable, Dict, Optional

from .dom import Element
from .favorites import FavoritesStore
from .pages import NavigationBar, SearchPage
from .router import Router
from .scroll import WINDOW_HEIGHT_PX, MonitorSettings, Viewport
from .search_controller import QueryClient

logger = logging.getLogger(__name__)

DEFAULT_CALL_TIMEOUT = 10.0


class BrowserRuntime:
    """
    Owns the loop thread, the root element and everything mounted on it.

    Attributes:
        root: The visual mount point
        viewport: Scroll model over `root`
        navigation: Shared navigation highlight
        favorites: The session's favorites store
        router: Page router
    """

    def __init__(
        self,
        favorites: FavoritesStore,
        client: QueryClient,
        monitor_settings: Optional[MonitorSettings] = None,
        window_height: int = WINDOW_HEIGHT_PX,
    ) -> None:
        self.root = Element("div", id="router-view")
        self.viewport = Viewport(self.root, window_height=window_height)
        self.navigation = NavigationBar()
        self.favorites = favorites
        self.router = Router(
            self.root,
            favorites,
            client,
            self.viewport,
            navigation=self.navigation,
            monitor_settings=monitor_settings,
        )
        self.loop = asyncio.new_event_loop()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and self.loop.is_running()

    def start(self) -> None:
        if self._thread is not None:
            return
        started = threading.Event()

        def run_loop() -> None:
            asyncio.set_event_loop(self.loop)
            self.loop.call_soon(started.set)
            self.loop.run_forever()

        self._thread = threading.Thread(target=run_loop, name="browser-runtime", daemon=True)
        self._thread.start()
        started.wait(DEFAULT_CALL_TIMEOUT)

    def call(self, fn: Callable[..., Any], *args: Any, timeout: float = DEFAULT_CALL_TIMEOUT) -> Any:
        """
        Run `fn(*args)` on the loop thread and return its result.

        Raises:
            RuntimeError: If the runtime isn't running
        """
        if not self.running:
            raise RuntimeError("Browser runtime is not running")

        async def invoke() -> Any:
            return fn(*args)

        future = asyncio.run_coroutine_threadsafe(invoke(), self.loop)
        return future.result(timeout)

    def dispatch(self, element_id: str, event: str, *args: Any) -> Any:
        """
        Deliver an event to the element with `element_id`.

        Coroutine results are scheduled as tasks on the loop; tasks and
        futures are not returned across threads.

        Returns:
            The handler's plain result, or None
        """

        def deliver() -> Any:
            element = self.root.find(element_id)
            if element is None:
                logger.debug("Event %s for missing element %s dropped", event, element_id)
                return None
            result = element.dispatch(event, *args)
            if asyncio.iscoroutine(result):
                self.loop.create_task(result)
                return None
            if isinstance(result, asyncio.Future):
                return None
            return result

        return self.call(deliver)

    def navigate(self, destination: str) -> str:
        return self.call(lambda: self.router.navigate(destination).destination)

    def snapshot(self) -> Dict[str, Any]:
        return self.call(self.root.snapshot)

    def scroll_to_bottom(self) -> None:
        self.call(self.viewport.scroll_to_bottom)

    def describe(self) -> Dict[str, Any]:
        """Summary of the current page for the shell (active destination, search progress, favorites)."""

        def collect() -> Dict[str, Any]:
            page = self.router.current_page
            info: Dict[str, Any] = {
                "destination": self.navigation.active,
                "favorites_count": len(self.favorites.collection),
                "favorites_degraded": self.favorites.degraded,
                "polling": False,
                "search_status": None,
                "cursor": None,
                "result_count": 0,
            }
            if isinstance(page, SearchPage) and page.controller.state is not None:
                info.update(
                    polling=page.polling,
                    search_status=page.controller.status.value,
                    cursor=page.controller.cursor,
                    result_count=len(page.controller.state.results),
                )
            return info

        return self.call(collect)

    def shutdown(self, timeout: float = DEFAULT_CALL_TIMEOUT) -> None:
        """Tear down the current page, cancel outstanding tasks and stop the loop."""
        if self._thread is None:
            return

        async def close() -> None:
            self.router.close()
            tasks = [task for task in asyncio.all_tasks() if task is not asyncio.current_task()]
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        if self.running:
            asyncio.run_coroutine_threadsafe(close(), self.loop).result(timeout)
            self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout)
        self._thread = None
        if not self.loop.is_running():
            self.loop.close()
