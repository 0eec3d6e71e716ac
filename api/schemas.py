"""
Pydantic schemas for FastAPI request and response models.

The schemas include:
- RecipeOut: One recipe record as the browser receives it
- SearchResponse: One page of results (no total count, the directory has none)
- HealthResponse: Backend health and active configuration

# NOTE: RecipeOut must stay in sync with recipes.models.Recipe. The browser
    validates every record it receives against Recipe.
"""

from typing import List

from pydantic import BaseModel, Field, ConfigDict


class RecipeOut(BaseModel):
    """A recipe record from the directory, normalized."""
    title: str = Field(..., description="Recipe title (trimmed)")
    href: str = Field(..., description="Recipe URL, the identity key for favorites")
    ingredients: str = Field(..., description="Comma-joined ingredient list")
    thumbnail: str = Field(..., description="Thumbnail URL or default image reference")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Classic Omelette",
                "href": "https://recipes.example.org/classic-omelette",
                "ingredients": "eggs, butter, salt, pepper, chives",
                "thumbnail": "https://recipes.example.org/img/classic-omelette.jpg",
            }
        }
    )


class SearchResponse(BaseModel):
    """
    Response for GET /search.

    End of results is signalled by an empty `results` list.
    """
    results: List[RecipeOut] = Field(default_factory=list, description="Recipes on the requested page")


class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok' when the backend is serving")
    recipe_source: str = Field(..., description="Active recipe source")
    uptime_seconds: float = Field(..., ge=0, description="Seconds since the backend started")
