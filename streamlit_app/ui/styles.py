"""
Global CSS Styling for the Recipe Browser.

This module provides load_global_styles() to inject consistent styling:
typography, the recipe card grid and the favorite toggle.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Browser app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles recipe cards with rounded corners and subtle borders
    - Makes the favorite toggle a compact icon button
    - Keeps the sidebar navigation clean and compact
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        /* Global font family */
        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        h1 {
            font-size: 2.5rem !important;
            margin-bottom: 1rem !important;
        }

        p, .stMarkdown p {
            line-height: 1.6 !important;
            margin-bottom: 0.5rem !important;
        }

        /* Buttons - rounded pills */
        .stButton > button {
            border-radius: 50px !important;
            box-shadow: 0 2px 6px rgba(192, 57, 43, 0.12) !important;
            transition: all 0.3s ease !important;
            font-weight: 600 !important;
        }

        .stButton > button:hover {
            box-shadow: 0 3px 10px rgba(192, 57, 43, 0.2) !important;
            transform: translateY(-1px) !important;
        }

        /* Main app container */
        .main .block-container {
            max-width: 1100px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        [data-testid="stSidebar"] {
            padding-top: 1rem !important;
        }

        /* Recipe cards */
        .recipe-card-title a {
            font-size: 1.1rem !important;
            font-weight: 700 !important;
            color: #2c3e50 !important;
            text-decoration: none !important;
        }

        .recipe-card-title a:hover {
            color: #c0392b !important;
        }

        .recipe-card-ingredients {
            color: #666 !important;
            font-size: 0.9rem !important;
        }

        .recipe-card-placeholder {
            font-size: 3rem;
            text-align: center;
        }

        /* Empty and about messages */
        .recipe-message {
            color: #666 !important;
            font-size: 1rem !important;
            padding: 0.75rem 0 !important;
        }

        /* Page header */
        .rb-page-header {
            margin-bottom: 1.25rem !important;
        }

        .rb-page-header h1 {
            margin-bottom: 0.25rem !important;
        }

        .rb-page-header .subtitle {
            color: #666 !important;
            font-size: 1rem !important;
            font-weight: 400 !important;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
