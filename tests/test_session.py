"""
Tests for the Streamlit session helpers.
"""

import os
from unittest.mock import patch

import pytest

from recipes.models import Recipe
from streamlit_app.browser.storage import JsonFileStorage
from streamlit_app.utils.session import get_favorites_store


@pytest.fixture
def favorites_dir(tmp_path):
    get_favorites_store.clear()
    with patch.dict(os.environ, {"FAVORITES_DIR": str(tmp_path), "DATABASE_URL": ""}):
        yield tmp_path
    get_favorites_store.clear()


class TestFavoritesStoreSharing:
    """Test cases for get_favorites_store."""

    def test_sessions_share_one_store(self, favorites_dir):
        first = get_favorites_store()
        second = get_favorites_store()

        first.add(Recipe(title="Soup", href="/r/soup"))

        assert second is first
        assert second.contains("/r/soup")
        assert isinstance(first.storage, JsonFileStorage)
        assert first.storage.directory == favorites_dir
