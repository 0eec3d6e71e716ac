"""
Sample connector backed by the bundled static recipe directory.

Behaves like the remote directory: filters by the "+required,-excluded,plain"
ingredient syntax, serves fixed-size 1-based pages and returns an empty list
past the last page. No network access, so it never raises UpstreamError.
"""

import logging
from typing import List

from recipes.models import Recipe
from recipes.query import parse_ingredient_query
from recipes.sample_data import get_all_recipes

from .base import BaseConnector

logger = logging.getLogger(__name__)

SAMPLE_PAGE_SIZE = 10


class SampleConnector(BaseConnector):
    """Connector serving the static sample directory."""
    source = "sample"

    def __init__(self, page_size: int = SAMPLE_PAGE_SIZE) -> None:
        self.page_size = page_size

    def search_recipes(self, ingredients: str, page: int = 1) -> List[Recipe]:
        if page < 1 or self.page_size <= 0:
            return []

        query = parse_ingredient_query(ingredients)
        matches = [r for r in get_all_recipes() if query.matches(r.ingredients)]

        start = (page - 1) * self.page_size
        page_items = matches[start:start + self.page_size]
        logger.debug(
            "Sample directory page %d for %r: %d of %d matches",
            page, ingredients, len(page_items), len(matches),
        )
        return page_items
