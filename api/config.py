"""
Configuration management for the Recipe Browser.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early in both the backend (api/main.py)
and the frontend (streamlit_app/app.py) so .env is loaded before any other code
reads environment variables.

In production .env usually does not exist; load_dotenv() is then a no-op and
the platform environment is used.

Environment Variables:
- RECIPE_SOURCE: Optional, "recipepuppy" (default) or "sample"
- RECIPE_API_URL: Optional, defaults to "http://www.recipepuppy.com/api/"
- RECIPE_API_TIMEOUT: Optional, upstream request timeout in seconds (default 10)
- BACKEND_URL: Optional, backend URL for the browser (defaults to http://localhost:8000)
- BACKEND_TIMEOUT: Optional, browser -> backend timeout in seconds (default 10)
- FAVORITES_DIR: Optional, directory for the favorites file (default "data")
- DATABASE_URL: Optional, store favorites via SQLAlchemy instead of a file
- SCROLL_POLL_INTERVAL: Optional, proximity check interval in seconds (default 0.25)
- SCROLL_SETTLE_DELAY: Optional, delay before the next page may load (default 0.5)
- SCROLL_PROXIMITY_THRESHOLD: Optional, distance from bottom in px that triggers loading (default 450)
- VIEWPORT_HEIGHT: Optional, visible window height in px (default 900)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    # api/config.py -> api/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid value for %s=%r, using default %s", name, raw, default)
        return default


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid value for %s=%r, using default %s", name, raw, default)
        return default


class UpstreamConfig:
    """Configuration for the recipe directory the backend proxies."""

    @staticmethod
    def get_source() -> str:
        """
        Get the recipe source identifier.

        Returns:
            Source string (default: "recipepuppy")
        """
        return os.getenv("RECIPE_SOURCE", "recipepuppy")

    @staticmethod
    def get_base_url() -> str:
        """
        Get the recipe directory endpoint.

        Returns:
            URL string (default: "http://www.recipepuppy.com/api/")
        """
        return os.getenv("RECIPE_API_URL", "http://www.recipepuppy.com/api/")

    @staticmethod
    def get_timeout() -> float:
        return _get_float("RECIPE_API_TIMEOUT", 10.0)


class FrontendConfig:
    """Configuration for the Streamlit browser frontend."""

    @staticmethod
    def get_backend_url() -> str:
        """
        Get the backend API base URL.

        Returns:
            Backend URL with trailing slash removed (default: http://localhost:8000)
        """
        return os.getenv("BACKEND_URL", "http://localhost:8000").rstrip("/")

    @staticmethod
    def get_backend_timeout() -> float:
        return _get_float("BACKEND_TIMEOUT", 10.0)

    @staticmethod
    def get_favorites_dir() -> Path:
        """
        Get the directory holding the favorites file.

        Returns:
            Path (default: ./data)
        """
        return Path(os.getenv("FAVORITES_DIR", "data"))

    @staticmethod
    def get_database_url() -> Optional[str]:
        """
        Get the database URL for favorites storage.

        Returns:
            Database URL or None if favorites should be stored in a file
        """
        return os.getenv("DATABASE_URL") or None


class ScrollConfig:
    """Timing and geometry of the infinite-scroll proximity monitor."""

    @staticmethod
    def get_poll_interval() -> float:
        return _get_float("SCROLL_POLL_INTERVAL", 0.25)

    @staticmethod
    def get_settle_delay() -> float:
        return _get_float("SCROLL_SETTLE_DELAY", 0.5)

    @staticmethod
    def get_proximity_threshold() -> int:
        return _get_int("SCROLL_PROXIMITY_THRESHOLD", 450)

    @staticmethod
    def get_viewport_height() -> int:
        return _get_int("VIEWPORT_HEIGHT", 900)
