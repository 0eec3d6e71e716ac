"""
Recipe models shared by the backend proxy and the browser frontend.

The recipe directory has no recipe IDs, so `href` is the identity key used for
favoriting. Upstream records are normalized on the way in: titles are trimmed
and an empty thumbnail falls back to DEFAULT_THUMBNAIL.

# NOTE: FavoriteRecord is a snapshot, decoupled from any live Recipe, so a
    favorite keeps rendering even if the directory later drops that href.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Shown when the directory has no image for a recipe
DEFAULT_THUMBNAIL = "images/default-food.png"


def _normalize_thumbnail(value: Any) -> str:
    if value is None:
        return DEFAULT_THUMBNAIL
    value = str(value).strip()
    return value or DEFAULT_THUMBNAIL


class Recipe(BaseModel):
    """
    A single search result from the recipe directory.

    Attributes:
        title: Recipe title (whitespace trimmed)
        thumbnail: Image URL, or DEFAULT_THUMBNAIL when the directory has none
        ingredients: Comma-joined ingredient list as returned by the directory
        href: Link to the recipe page; unique within a result set
    """
    title: str = Field(..., description="Recipe title")
    thumbnail: str = Field(default=DEFAULT_THUMBNAIL, description="Thumbnail URL or default image reference")
    ingredients: str = Field(default="", description="Comma-joined ingredient list")
    href: str = Field(..., min_length=1, description="Recipe URL, used as identity key")

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", mode="before")
    @classmethod
    def _trim_title(cls, value: Any) -> str:
        return str(value or "").strip()

    @field_validator("thumbnail", mode="before")
    @classmethod
    def _default_thumbnail(cls, value: Any) -> str:
        return _normalize_thumbnail(value)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients_to_str(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v).strip() for v in value if str(v).strip())
        return str(value)

    @property
    def ingredient_count(self) -> int:
        """Number of comma-separated ingredients (the directory often truncates the list)."""
        return len([part for part in self.ingredients.split(",") if part.strip()])


class FavoriteRecord(BaseModel):
    """Persisted snapshot of a favorited recipe."""
    href: str = Field(..., min_length=1)
    thumbnail: str = Field(default=DEFAULT_THUMBNAIL)
    ingredients: str = Field(default="")
    title: str = Field(default="")

    model_config = ConfigDict(extra="ignore")

    @field_validator("thumbnail", mode="before")
    @classmethod
    def _default_thumbnail(cls, value: Any) -> str:
        return _normalize_thumbnail(value)

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "FavoriteRecord":
        return cls(
            href=recipe.href,
            thumbnail=recipe.thumbnail,
            ingredients=recipe.ingredients,
            title=recipe.title,
        )

    def to_recipe(self) -> Recipe:
        return Recipe(
            title=self.title,
            thumbnail=self.thumbnail,
            ingredients=self.ingredients,
            href=self.href,
        )


def recipe_from_raw(item: Any) -> Optional[Recipe]:
    """
    Build a Recipe from a raw directory record, or None if it has no href.

    Args:
        item: Raw record (dict) from an upstream response

    Returns:
        Normalized Recipe, or None when the record can't be identified
    """
    if not isinstance(item, dict):
        return None
    href = str(item.get("href") or "").strip()
    if not href:
        return None
    return Recipe(
        title=item.get("title"),
        thumbnail=item.get("thumbnail"),
        ingredients=item.get("ingredients"),
        href=href,
    )
