"""
Base connector abstract class for recipe directory integrations.

Every recipe source the backend can proxy implements this interface. The
interface is deliberately small: the directory is an opaque paginated query
API that takes an ingredient query and a 1-based page number and returns an
ordered page of recipes. No total count is reported, so callers infer the
end of results from an empty page.

All connectors must:
- Set the `source` attribute (e.g., "recipepuppy", "sample")
- Provide a search_recipes method that normalizes records into Recipe models
- Raise UpstreamError when the directory can't be reached or answers garbage
"""

from abc import ABC, abstractmethod
from typing import List

from recipes.models import Recipe


class UpstreamError(Exception):
    """
    Exception raised when a recipe directory request fails.

    Raised for connection errors, timeouts, non-2xx responses and response
    bodies that can't be parsed. The API layer maps it to HTTP 502.
    """


class BaseConnector(ABC):
    """
    Abstract base class for all recipe directory connectors.

    Attributes:
        source: String identifier for the recipe source
    """
    source: str

    @abstractmethod
    def search_recipes(self, ingredients: str, page: int = 1) -> List[Recipe]:
        """
        Fetch one page of recipes matching an ingredient query.

        Args:
            ingredients: Sanitized ingredient query (e.g., "+eggs,-onions,flour")
            page: Page number (1-indexed)

        Returns:
            Ordered list of Recipe models; empty when the page is past the end.

        Raises:
            UpstreamError: If the directory request fails.
        """
        pass
