"""
RecipePuppy connector.

This connector queries a RecipePuppy-compatible directory API:

    GET {RECIPE_API_URL}?i=<ingredients>&p=<page>

and normalizes the `results` array of the JSON response into Recipe models.
RecipePuppy does not send CORS headers, which is why the browser frontend
talks to our backend and the backend talks to the directory.

The connector:
- Uses a requests.Session for connection reuse
- Sends the ingredient query and 1-based page number
- Skips records without an href (they can't be favorited or linked)
- Raises UpstreamError on network errors, non-2xx responses and bad bodies

Base URL defaults to http://www.recipepuppy.com/api/ and can be overridden via
the RECIPE_API_URL environment variable.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from api.config import UpstreamConfig
from recipes.models import Recipe, recipe_from_raw

from .base import BaseConnector, UpstreamError

logger = logging.getLogger(__name__)


class RecipePuppyConnector(BaseConnector):
    """
    Connector for the RecipePuppy recipe directory.

    Attributes:
        base_url: Directory endpoint URL
        timeout: Request timeout in seconds
    """
    source = "recipepuppy"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: Directory endpoint (optional, reads RECIPE_API_URL if not provided)
            timeout: Request timeout in seconds (optional, reads RECIPE_API_TIMEOUT)
            session: requests.Session to use (optional, a new one is created)
        """
        self.base_url = base_url or UpstreamConfig.get_base_url()
        self.timeout = timeout if timeout is not None else UpstreamConfig.get_timeout()
        self.session = session or requests.Session()

    def search_recipes(self, ingredients: str, page: int = 1) -> List[Recipe]:
        """
        Fetch one page of recipes from RecipePuppy.

        Args:
            ingredients: Sanitized ingredient query
            page: Page number (1-indexed)

        Returns:
            List of normalized Recipe models (empty past the last page)

        Raises:
            UpstreamError: If the request fails or the body isn't the expected JSON.
        """
        params: Dict[str, Any] = {"i": ingredients, "p": page}

        try:
            logger.debug("RecipePuppy request: %s params=%s", self.base_url, params)
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise UpstreamError(f"Recipe directory timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else "unknown"
            raise UpstreamError(f"Recipe directory returned HTTP {status_code}") from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Recipe directory unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Recipe directory returned a non-JSON body") from e

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise UpstreamError("Recipe directory response has no 'results' list")

        recipes: List[Recipe] = []
        for item in data["results"]:
            try:
                recipe = recipe_from_raw(item)
            except ValidationError as e:
                logger.debug("Skipping malformed recipe record: %s", e)
                continue
            if recipe is not None:
                recipes.append(recipe)

        logger.debug("RecipePuppy page %d for %r: %d recipes", page, ingredients, len(recipes))
        return recipes
