"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls from the browser to the FastAPI backend go through it.

Key principles:
- Queries are sanitized here, right before they leave the browser
- Transport problems become NetworkError, bad bodies become ParseError
- The search controller catches both; nothing here crashes a page
- get_health_status() degrades to None instead of raising

# NOTE: The directory reports no total count. An empty page is the only
    end-of-results signal, so search() returns [] rather than None for it.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
import streamlit as st
from pydantic import ValidationError

from api.config import FrontendConfig
from recipes.models import Recipe
from recipes.query import sanitize_query
from streamlit_app.browser.errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


def get_backend_url() -> str:
    """
    Get the backend API base URL.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000.
    """
    return FrontendConfig.get_backend_url()


class RecipeQueryClient:
    """
    Fetches pages of search results from the backend.

    Safe to call from worker threads: the search controller runs search() off
    the event loop. Overlapping requests for different pages are fine; not
    issuing two requests for the same page is the caller's job.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or get_backend_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else FrontendConfig.get_backend_timeout()
        self.session = session or requests.Session()

    def search(self, query: str, page: int) -> List[Recipe]:
        """
        Fetch one page of recipes for a query.

        Args:
            query: Raw user query; sanitized before sending
            page: Page number (1-indexed)

        Returns:
            Recipes on that page, in directory order (empty past the last page)

        Raises:
            NetworkError: Connection failure, timeout or non-2xx response
            ParseError: Body is not JSON, has no `results` list, or holds invalid records
        """
        params: Dict[str, Any] = {"ingredients": sanitize_query(query), "page": page}

        try:
            response = self.session.get(f"{self.base_url}/search", params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Search timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else "unknown"
            raise NetworkError(f"Search failed with HTTP {status_code}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Search request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError("Search response is not valid JSON") from e

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise ParseError("Search response has no 'results' list")

        try:
            return [Recipe.model_validate(item) for item in data["results"]]
        except ValidationError as e:
            raise ParseError(f"Search response holds an invalid recipe: {e}") from e


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid hitting backend too frequently
def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        The /health payload (with "status" == "ok"), or None if the backend is
        unreachable or unhealthy.
    """
    try:
        response = requests.get(f"{get_backend_url()}/health", timeout=5)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        logger.debug("Backend health check failed: %s", e)
        return None
    except ValueError:
        return None

    if isinstance(data, dict) and data.get("status") == "ok":
        return data
    return None
