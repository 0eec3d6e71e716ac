"""
FastAPI application for the Recipe Browser backend.

The browser cannot call the recipe directory directly (no CORS headers), so
this backend proxies it:
- GET /search: One page of recipes for an ingredient query
- GET /health: Health check and active configuration
- GET /: API information

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time

from fastapi import FastAPI, Query, HTTPException, status

from api.config import UpstreamConfig
from api.schemas import HealthResponse, RecipeOut, SearchResponse
from recipes.connectors.base import UpstreamError
from recipes.search import directory_search, get_connector

logger = logging.getLogger(__name__)

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

API_NAME = "Recipe Browser API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Backend proxy for searching a recipe directory by ingredients"

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    tags_metadata=[
        {
            "name": "search",
            "description": "Search the recipe directory one page at a time.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)


@app.get(
    "/search",
    response_model=SearchResponse,
    tags=["search"],
    summary="Search recipes by ingredients",
)
def search(
    ingredients: str = Query(
        "",
        description="Ingredient query, e.g. '+eggs,-onions,flour'. Characters outside [a-zA-Z+,-] are dropped.",
    ),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
) -> SearchResponse:
    """
    Fetch one page of recipes from the configured recipe directory.

    The directory does not report a total count; an empty `results` list
    means there are no further pages.

    Args:
        ingredients: Ingredient query ("+x" requires, "-x" excludes)
        page: Page number (1-indexed)

    Returns:
        SearchResponse with the page's recipes

    Raises:
        HTTPException 500: If the configured recipe source is invalid
        HTTPException 502: If the recipe directory can't be reached

    Example:
        ```bash
        GET /search?ingredients=%2Beggs,-onions&page=2
        ```
    """
    try:
        connector = get_connector()
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e

    try:
        search_response = directory_search(ingredients, page=page, connector=connector)
    except UpstreamError as e:
        logger.warning("Directory search failed (page=%d): %s", page, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error connecting to the recipe directory: {str(e)}",
        ) from e

    results = [RecipeOut(**r) for r in search_response.get("results", [])]
    return SearchResponse(results=results)


@app.get("/health", response_model=HealthResponse, tags=["health"])
def health() -> HealthResponse:
    """
    Health check endpoint for monitoring and status checks.

    Always returns 200 OK if the endpoint is reachable; it does not probe the
    recipe directory.
    """
    return HealthResponse(
        status="ok",
        recipe_source=UpstreamConfig.get_source(),
        uptime_seconds=round(time.time() - _APP_START_TIME, 3),
    )


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name and version
    """
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
