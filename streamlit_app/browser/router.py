"""
Router: switches the page mounted in the root element.

navigate() always tears the current page down before building the next one,
so at most one page (and its poller) is alive at any time.
"""

import logging
from typing import Callable, Dict, Optional

from .dom import Element
from .favorites import FavoritesStore
from .pages import ABOUT, FAVORITES, HOME, AboutPage, FavoritesPage, NavigationBar, Page, SearchPage
from .scroll import MonitorSettings, Viewport
from .search_controller import QueryClient

logger = logging.getLogger(__name__)

# Alternative names accepted by navigate()
ALIASES = {"search": HOME}


class Router:
    """
    Attributes:
        root: Element pages mount into
        current_page: The live page, None before the first navigation
    """

    def __init__(
        self,
        root: Element,
        favorites: FavoritesStore,
        client: QueryClient,
        viewport: Viewport,
        navigation: Optional[NavigationBar] = None,
        monitor_settings: Optional[MonitorSettings] = None,
    ) -> None:
        self.root = root
        self.favorites = favorites
        self.client = client
        self.viewport = viewport
        self.navigation = navigation or NavigationBar()
        self.monitor_settings = monitor_settings or MonitorSettings()
        self.current_page: Optional[Page] = None

    def _page_factories(self) -> Dict[str, Callable[[], Page]]:
        return {
            HOME: lambda: SearchPage(
                self.root,
                self.favorites,
                self.navigation,
                self.client,
                self.viewport,
                monitor_settings=self.monitor_settings,
            ),
            FAVORITES: lambda: FavoritesPage(self.root, self.favorites, self.navigation),
            ABOUT: lambda: AboutPage(self.root, self.favorites, self.navigation),
        }

    def navigate(self, destination: str) -> Page:
        """
        Tear down the current page and mount the one for `destination`.

        Raises:
            ValueError: If the destination is unknown (the current page is left alone)
        """
        key = ALIASES.get(destination, destination)
        factory = self._page_factories().get(key)
        if factory is None:
            raise ValueError(f"Unknown destination: {destination!r}")

        if self.current_page is not None:
            self.current_page.teardown()
            self.current_page = None

        self.viewport.scroll_to(0)
        self.current_page = factory()
        logger.info("Navigated to %s", key)
        return self.current_page

    def close(self) -> None:
        if self.current_page is not None:
            self.current_page.teardown()
            self.current_page = None
