"""
UI Styling and Rendering Module.

This module provides global CSS styling, feedback helpers and the snapshot
renderer for the Recipe Browser Streamlit app.
"""
