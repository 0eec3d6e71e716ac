"""
Tests for environment-driven configuration.
"""

import os
from pathlib import Path
from unittest.mock import patch

from api.config import FrontendConfig, ScrollConfig, UpstreamConfig


class TestConfig:
    """Test cases for the configuration getters."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        assert UpstreamConfig.get_source() == "recipepuppy"
        assert FrontendConfig.get_backend_url() == "http://localhost:8000"
        assert FrontendConfig.get_favorites_dir() == Path("data")
        assert FrontendConfig.get_database_url() is None
        assert ScrollConfig.get_poll_interval() == 0.25
        assert ScrollConfig.get_settle_delay() == 0.5
        assert ScrollConfig.get_proximity_threshold() == 450
        assert ScrollConfig.get_viewport_height() == 900

    @patch.dict(os.environ, {"BACKEND_URL": "https://api.example.org/"})
    def test_backend_url_trailing_slash_removed(self):
        assert FrontendConfig.get_backend_url() == "https://api.example.org"

    @patch.dict(os.environ, {"DATABASE_URL": ""})
    def test_empty_database_url_means_file_storage(self):
        assert FrontendConfig.get_database_url() is None

    @patch.dict(os.environ, {"SCROLL_PROXIMITY_THRESHOLD": "lots", "SCROLL_POLL_INTERVAL": "0.1"})
    def test_invalid_numbers_fall_back_to_defaults(self, caplog):
        assert ScrollConfig.get_proximity_threshold() == 450
        assert ScrollConfig.get_poll_interval() == 0.1
        assert "SCROLL_PROXIMITY_THRESHOLD" in caplog.text
