"""
Pages: the units the router mounts and tears down.

A page is built against the shared root element and mounts itself during
construction. Every variant honours the same teardown contract, even the ones
without timers:

1. destroy every owned component,
2. cancel polling and any pending task,
3. leave the root element empty.

teardown() is idempotent. Pages share rendering by composing a
RecipeListView, not by inheriting from each other.

Variants:
- SearchPage: search form + result list; polling starts on the first submission
- FavoritesPage: the favorites snapshot, no network
- AboutPage: static text
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from recipes.models import Recipe

from .components import MESSAGE_HEIGHT, Component, RecipeListView, SearchFormComponent
from .dom import Element
from .favorites import FavoritesStore
from .scroll import MonitorSettings, ProximityMonitor, Viewport
from .search_controller import QueryClient, SearchController

logger = logging.getLogger(__name__)

HOME = "home"
FAVORITES = "favorites"
ABOUT = "about"
DESTINATIONS = (HOME, FAVORITES, ABOUT)

ABOUT_TEXT = (
    "Search recipes by the ingredients you have. Prefix an ingredient with + "
    "to require it or - to exclude it, e.g. +eggs,-onions,flour. Tap the heart "
    "on a recipe to keep it in your favorites."
)


class NavigationBar:
    """Shared navigation state; marks which destination is active."""

    def __init__(self) -> None:
        self.active: Optional[str] = None

    def highlight(self, destination: str) -> None:
        self.active = destination

    def is_active(self, destination: str) -> bool:
        return self.active == destination


class Page(ABC):
    """
    Base class of all pages.

    Attributes:
        destination: Navigation destination this page is shown for
        root: Element the page mounts into
        favorites: The session's favorites store
        navigation: Shared navigation bar
        components: Owned components, destroyed on teardown
    """
    destination: str = ""

    def __init__(self, root: Element, favorites: FavoritesStore, navigation: NavigationBar) -> None:
        self.root = root
        self.favorites = favorites
        self.navigation = navigation
        self.components: Dict[str, Component] = {}
        self.torn_down = False
        self.setup()
        self.navigation.highlight(self.destination)

    @abstractmethod
    def setup(self) -> None:
        """Build and mount the page's components."""
        pass

    def teardown(self) -> None:
        for component in self.components.values():
            component.destroy()
        self.components = {}
        self.root.clear()
        self.torn_down = True


class SearchPage(Page):
    """
    Search form and incrementally loaded results.

    Each submission stops the previous poller, clears the list, starts a new
    ProximityMonitor and fetches page 1. Later pages are requested by the
    monitor and appended in page order.
    """
    destination = HOME

    def __init__(
        self,
        root: Element,
        favorites: FavoritesStore,
        navigation: NavigationBar,
        client: QueryClient,
        viewport: Viewport,
        monitor_settings: Optional[MonitorSettings] = None,
    ) -> None:
        self.client = client
        self.viewport = viewport
        self.monitor_settings = monitor_settings or MonitorSettings()
        self.monitor: Optional[ProximityMonitor] = None
        self._submit_task: Optional[asyncio.Task] = None
        super().__init__(root, favorites, navigation)

    def setup(self) -> None:
        self.controller = SearchController(self.client, on_results=self._show_results)
        self.search_form = SearchFormComponent(on_submit=self.handle_submit)
        self.list_view = RecipeListView(self.favorites, on_empty=self.stop_polling)
        self.components = {"search_form": self.search_form, "recipes": self.list_view}

        self.search_form.mount(self.root)
        self.list_view.mount(self.root)

    @property
    def polling(self) -> bool:
        return self.monitor is not None and self.monitor.active

    def handle_submit(self, query: str) -> Optional[asyncio.Task]:
        """
        Form submit handler. Schedules the search and returns its task.

        Must be called from the event loop thread.
        """
        if self.torn_down:
            return None
        if self._submit_task is not None and not self._submit_task.done():
            self._submit_task.cancel()
        self._submit_task = asyncio.get_running_loop().create_task(self.submit(query))
        return self._submit_task

    async def submit(self, query: str) -> bool:
        """Start a new search for `query`. Returns True if page 1 arrived."""
        if self.torn_down:
            return False
        self.stop_polling()
        self.list_view.clear()

        settings = self.monitor_settings
        self.monitor = ProximityMonitor(
            self.viewport,
            self.controller.request_more,
            interval=settings.interval,
            settle_delay=settings.settle_delay,
            threshold=settings.threshold,
        )
        self.monitor.start()
        return await self.controller.submit_query(query)

    def stop_polling(self) -> None:
        if self.monitor is not None:
            self.monitor.stop()
            self.monitor = None

    def _show_results(self, batch: List[Recipe], page: int) -> None:
        self.list_view.append(batch)
        if self.controller.exhausted:
            logger.debug("No more results after page %d, polling stopped", page)
            self.stop_polling()

    def teardown(self) -> None:
        self.stop_polling()
        if self._submit_task is not None:
            if not self._submit_task.done():
                self._submit_task.cancel()
            self._submit_task = None
        self.controller.close()
        super().teardown()


class FavoritesPage(Page):
    """The favorites list, rendered straight from the store."""
    destination = FAVORITES

    def setup(self) -> None:
        self.list_view = RecipeListView(self.favorites)
        self.components = {"recipes": self.list_view}
        self.list_view.mount(self.root)
        self.list_view.append([record.to_recipe() for record in self.favorites.list()])


class AboutPage(Page):
    """Static information."""
    destination = ABOUT

    def setup(self) -> None:
        self.header = Element("div", ABOUT_TEXT, id="about", classes=["about"], height=MESSAGE_HEIGHT)
        self.root.append_child(self.header)
