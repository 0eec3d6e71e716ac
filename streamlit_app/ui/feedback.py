"""
Standardized feedback utilities for errors and status indicators.

Provides reusable components for displaying errors and backend status
consistently across the app.
"""

from typing import Any, Dict, Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def render_backend_status(status: Optional[Dict[str, Any]]) -> None:
    """
    Display backend connection status as a status pill.

    Args:
        status: Dictionary from get_health_status() or None if backend unreachable.

    Shows:
        - 🟢 "Backend online" plus the recipe source if status["status"] == "ok"
        - 🔴 "Backend offline / unreachable" otherwise
    """
    if status and status.get("status") == "ok":
        st.success("🟢 Backend online")
        source = status.get("recipe_source")
        if source:
            st.caption(f"Recipe source: {source}")
    else:
        st.error("🔴 Backend offline / unreachable")
