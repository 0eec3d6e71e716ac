"""
Shared fixtures for the test suite.
"""

import pytest

from recipes.models import Recipe
from streamlit_app.browser.dom import Element
from streamlit_app.browser.favorites import FavoritesStore
from streamlit_app.browser.pages import NavigationBar
from streamlit_app.browser.scroll import Viewport
from streamlit_app.browser.storage import MemoryStorage


@pytest.fixture
def recipe() -> Recipe:
    return Recipe(
        title="Classic Omelette",
        href="https://recipes.test/classic-omelette",
        ingredients="eggs, butter, salt",
        thumbnail="https://recipes.test/img/classic-omelette.jpg",
    )


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def favorites(memory_storage) -> FavoritesStore:
    return FavoritesStore.open(memory_storage)


@pytest.fixture
def root() -> Element:
    return Element("div", id="router-view")


@pytest.fixture
def viewport(root) -> Viewport:
    return Viewport(root, window_height=900)


@pytest.fixture
def navigation() -> NavigationBar:
    return NavigationBar()
