"""
Renders element-tree snapshots with Streamlit widgets.

The browser runtime hands over a plain-dict snapshot of the mounted page
(see Element.snapshot()). Known shapes get dedicated widgets:

- form (the search form) -> st.form with a text input and submit button
- div.recipe (a recipe card) -> image, title link, ingredient count, heart button
- anything else -> its text as markdown, then its children

User actions go back through `dispatch(element_id, event, *args)`.
"""

import html
from typing import Any, Callable, Dict, Optional

import streamlit as st

Snapshot = Dict[str, Any]
Dispatch = Callable[..., Any]

FAVORITED_LABEL = "♥"
NOT_FAVORITED_LABEL = "♡"


def find_child(node: Snapshot, tag: str) -> Optional[Snapshot]:
    """First descendant of `node` with the given tag, depth first."""
    for child in node.get("children", []):
        if child["tag"] == tag:
            return child
        found = find_child(child, tag)
        if found is not None:
            return found
    return None


def favorite_label(button: Snapshot) -> str:
    return FAVORITED_LABEL if "fas" in button.get("classes", []) else NOT_FAVORITED_LABEL


def render_tree(node: Snapshot, dispatch: Dispatch) -> None:
    if node["tag"] == "form":
        render_search_form(node, dispatch)
        return
    if "recipe" in node.get("classes", []):
        render_recipe_card(node, dispatch)
        return

    if node.get("text"):
        st.markdown(f'<div class="recipe-message">{html.escape(node["text"])}</div>', unsafe_allow_html=True)
    for child in node.get("children", []):
        render_tree(child, dispatch)


def render_search_form(node: Snapshot, dispatch: Dispatch) -> None:
    search_input = find_child(node, "input") or {"id": "search-input", "attrs": {}}
    attrs = search_input.get("attrs", {})

    with st.form(key=node["id"], clear_on_submit=False):
        value = st.text_input(
            "Ingredients",
            value=attrs.get("value", ""),
            placeholder=attrs.get("placeholder", ""),
            key=f"{search_input['id']}-widget",
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("Search", type="primary")

    if submitted:
        dispatch(node["id"], "submit", value)


def render_recipe_card(node: Snapshot, dispatch: Dispatch) -> None:
    href = node.get("attrs", {}).get("href", "")
    image = find_child(node, "img") or {"attrs": {}}
    button = find_child(node, "i")
    title = next((c for c in node.get("children", []) if "recipe-title" in c.get("classes", [])), None)
    ingredients = next((c for c in node.get("children", []) if "recipe-ingredients" in c.get("classes", [])), None)

    with st.container(border=True):
        col_image, col_body, col_fav = st.columns([1, 4, 1])

        with col_image:
            src = image["attrs"].get("src", "")
            # Relative paths refer to a static asset that isn't served here
            if src.startswith(("http://", "https://")):
                st.image(src)
            else:
                st.markdown('<div class="recipe-card-placeholder">🍽️</div>', unsafe_allow_html=True)

        with col_body:
            title_text = html.escape(title["text"]) if title else ""
            st.markdown(
                f'<div class="recipe-card-title"><a href="{html.escape(href, quote=True)}" '
                f'target="_blank">{title_text}</a></div>',
                unsafe_allow_html=True,
            )
            if ingredients:
                st.markdown(
                    f'<div class="recipe-card-ingredients">{html.escape(ingredients["text"])}</div>',
                    unsafe_allow_html=True,
                    help=ingredients.get("attrs", {}).get("title") or None,
                )

        with col_fav:
            if button is not None:
                st.button(
                    favorite_label(button),
                    key=f"fav-{button['id']}",
                    on_click=dispatch,
                    args=(button["id"], "click"),
                )
