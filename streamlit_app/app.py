"""
Recipe Browser - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up the page
configuration and the global layout: sidebar navigation, backend status and
the router view.

Navigation is handled by the session's BrowserRuntime rather than Streamlit's
`pages/` folder: Search, Favorites and About are mounted into one view, and
the previous page is torn down (polling included) before the next one is
built. The view is a fragment that re-renders on a timer so results loaded in
the background show up without user interaction.
"""

import sys
from pathlib import Path

# Add project root to path so we can import api.config and streamlit_app.*
# regardless of how the app is run
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from streamlit_app.browser.pages import ABOUT, FAVORITES, HOME
from streamlit_app.ui.feedback import render_backend_status, show_error
from streamlit_app.ui.layout import page_header
from streamlit_app.ui.render import render_tree
from streamlit_app.ui.styles import load_global_styles
from streamlit_app.utils.api_client import get_health_status
from streamlit_app.utils.session import get_or_create_runtime

# How often the router view re-renders to pick up background loads
VIEW_REFRESH_SECONDS = 1.0

NAV_ITEMS = [
    (HOME, "Search", "🔍"),
    (FAVORITES, "Favorites", "❤️"),
    (ABOUT, "About", "ℹ️"),
]

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Browser",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="expanded"
)

load_global_styles()

runtime = get_or_create_runtime()
info = runtime.describe()

with st.sidebar:
    st.markdown("### 🍳 **Recipe Browser**")

    st.divider()

    for destination, label, icon in NAV_ITEMS:
        is_active = info["destination"] == destination
        if st.button(
            f"{icon} {label}",
            key=f"nav-{destination}",
            use_container_width=True,
            type="primary" if is_active else "secondary",
        ):
            if not is_active:
                runtime.navigate(destination)
            st.rerun()

    st.divider()

    st.caption(f"{info['favorites_count']} favorites saved")

    with st.expander("System status", expanded=False):
        render_backend_status(get_health_status())

page_header(
    "Recipe Browser",
    subtitle="Find recipes by the ingredients you have."
)

if info["favorites_degraded"]:
    show_error(
        "Your favorites couldn't be saved.",
        hint="They are kept for this session only.",
    )


@st.fragment(run_every=VIEW_REFRESH_SECONDS)
def router_view() -> None:
    view_runtime = get_or_create_runtime()
    render_tree(view_runtime.snapshot(), view_runtime.dispatch)

    view_info = view_runtime.describe()
    if view_info["search_status"] == "fetching":
        st.caption("Loading more recipes…")
    if view_info["polling"]:
        if st.button("Load more", key="load-more", use_container_width=True):
            view_runtime.scroll_to_bottom()


router_view()
