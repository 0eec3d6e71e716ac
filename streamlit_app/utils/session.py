"""
Session management utilities for Streamlit pages.

Each browser session gets one BrowserRuntime, kept in st.session_state so it
survives Streamlit reruns. The runtime owns the router and the page
currently mounted; the script only renders it and forwards events. The
favorites store is a cached resource shared by all sessions.
"""

import logging

import streamlit as st

from api.config import FrontendConfig, ScrollConfig
from streamlit_app.browser.favorites import FavoritesStore
from streamlit_app.browser.pages import HOME
from streamlit_app.browser.runtime import BrowserRuntime
from streamlit_app.browser.scroll import MonitorSettings
from streamlit_app.browser.storage import get_storage
from streamlit_app.utils.api_client import RecipeQueryClient

logger = logging.getLogger(__name__)

RUNTIME_KEY = "browser_runtime"


@st.cache_resource
def get_favorites_store() -> FavoritesStore:
    """
    The favorites store shared by every session of this server.

    Favorites go to DATABASE_URL when it is set and reachable, otherwise to
    JSON files under FAVORITES_DIR.
    """
    storage = get_storage(
        database_url=FrontendConfig.get_database_url(),
        directory=FrontendConfig.get_favorites_dir(),
    )
    return FavoritesStore.open(storage)


def create_runtime() -> BrowserRuntime:
    """Build and start a runtime from configuration, with the Home page mounted."""
    settings = MonitorSettings(
        interval=ScrollConfig.get_poll_interval(),
        settle_delay=ScrollConfig.get_settle_delay(),
        threshold=ScrollConfig.get_proximity_threshold(),
    )
    runtime = BrowserRuntime(
        get_favorites_store(),
        RecipeQueryClient(),
        monitor_settings=settings,
        window_height=ScrollConfig.get_viewport_height(),
    )
    runtime.start()
    runtime.navigate(HOME)
    logger.info("Browser runtime started")
    return runtime


def get_or_create_runtime() -> BrowserRuntime:
    """
    Get the session's runtime, creating it on first use.

    A runtime whose loop thread died is replaced.
    """
    runtime = st.session_state.get(RUNTIME_KEY)
    if runtime is None or not runtime.running:
        runtime = create_runtime()
        st.session_state[RUNTIME_KEY] = runtime
    return runtime
