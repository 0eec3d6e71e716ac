"""
Recipe directory search used by the backend proxy.

This module picks the configured connector, sanitizes the incoming query
(the browser already sanitizes, but the backend does not trust its callers)
and returns one page of results in the wire shape the browser expects:

    {"results": [{"title", "href", "ingredients", "thumbnail"}, ...]}

Search flow: browser -> GET /search -> directory_search() -> connector.search_recipes() -> Recipe -> dict
"""

import logging
from typing import Any, Dict, Optional

from api.config import UpstreamConfig
from recipes.query import sanitize_query

from .connectors.base import BaseConnector
from .connectors.recipe_puppy_connector import RecipePuppyConnector
from .connectors.sample_connector import SampleConnector

logger = logging.getLogger(__name__)


# Using a function to get the classes dynamically so that patches in tests work correctly
def _get_connector_map():
    """Get the connector map, accessing classes dynamically for test compatibility."""
    return {
        "recipepuppy": RecipePuppyConnector,
        "sample": SampleConnector,
    }


def available_sources() -> list:
    return sorted(_get_connector_map())


def get_connector(source: Optional[str] = None) -> BaseConnector:
    """
    Instantiate the connector for a recipe source.

    Args:
        source: Source identifier (optional, reads RECIPE_SOURCE if not provided)

    Returns:
        Connector instance

    Raises:
        ValueError: If the source is unknown
    """
    source = (source or UpstreamConfig.get_source()).strip().lower()
    connector_cls = _get_connector_map().get(source)
    if connector_cls is None:
        raise ValueError(
            f"Unknown recipe source: '{source}'. Valid sources: {', '.join(available_sources())}"
        )
    return connector_cls()


def directory_search(
    ingredients: str,
    page: int = 1,
    connector: Optional[BaseConnector] = None,
) -> Dict[str, Any]:
    """
    Fetch one page of recipes from the recipe directory.

    Args:
        ingredients: Ingredient query (raw or sanitized)
        page: Page number (1-indexed)
        connector: Connector to use (optional, the configured source otherwise)

    Returns:
        Dictionary with a "results" list of recipe dictionaries

    Raises:
        UpstreamError: If the connector fails to reach the directory
    """
    query = sanitize_query(ingredients)
    connector = connector or get_connector()

    logger.info("Directory search source=%s query=%r page=%d", connector.source, query, page)
    recipes = connector.search_recipes(query, page=page)

    return {"results": [recipe.model_dump() for recipe in recipes]}
