"""
Components the pages are composed of.

A component builds an element subtree once, mounts it under a parent element
and releases it on destroy(). Components hold no reference to the page that
owns them; they are wired to it through callbacks.

- SearchFormComponent: query input + submit button
- RecipeListView: the accumulated results, re-rendered on every append
- RecipeCard: one recipe with its favorite toggle
"""

import logging
from typing import Callable, List, Optional, Protocol

from recipes.models import Recipe

from .dom import Element

logger = logging.getLogger(__name__)

FORM_HEIGHT = 80
CARD_HEIGHT = 120
MESSAGE_HEIGHT = 40

NO_RESULTS_TEXT = "No recipes found"
SEARCH_PLACEHOLDER = "Ex: +eggs,-onions,flour,sugar"

FAVORITED_ICON = ("fas", "fa-heart", "fav-button")
NOT_FAVORITED_ICON = ("far", "fa-heart", "fav-button")


class FavoriteActions(Protocol):
    """What a recipe card needs from the favorites store."""

    def contains(self, href: str) -> bool:
        ...

    def add(self, recipe: Recipe) -> None:
        ...

    def remove(self, href: str) -> None:
        ...


class Component:
    """Base for components: one root element, mount and destroy."""

    def __init__(self) -> None:
        self.element = self.create_element()
        self.destroyed = False

    def create_element(self) -> Element:
        raise NotImplementedError

    def mount(self, parent: Element) -> None:
        parent.append_child(self.element)

    def destroy(self) -> None:
        self.element.clear()
        if self.element.parent is not None:
            self.element.parent.remove_child(self.element)
        self.destroyed = True


class SearchFormComponent(Component):
    """
    Query input with a submit button.

    The submit handler receives the input's current value. The shell sets the
    value (via the "submit" event argument) when the user submits the form.
    """

    def __init__(self, on_submit: Optional[Callable[[str], object]] = None) -> None:
        self.on_submit = on_submit
        super().__init__()

    def create_element(self) -> Element:
        form = Element("form", id="search-form", height=FORM_HEIGHT)
        self.input = form.append_child(Element(
            "input",
            id="search-input",
            attrs={"name": "search-input", "placeholder": SEARCH_PLACEHOLDER, "value": ""},
        ))
        form.append_child(Element("button", "Search", attrs={"type": "submit"}))
        form.on("submit", self._handle_submit)
        return form

    @property
    def value(self) -> str:
        return self.input.attrs.get("value", "")

    def _handle_submit(self, value: Optional[str] = None):
        if value is not None:
            self.input.attrs["value"] = value
        if self.on_submit is None:
            return None
        return self.on_submit(self.value)

    def destroy(self) -> None:
        self.element.off("submit")
        super().destroy()


class RecipeCard(Component):
    """
    One recipe: image and title linking to the recipe, ingredient count and a
    favorite toggle.

    Clicking the toggle checks the current state through `favorites`, calls
    the opposite action and flips only this card's icon.
    """

    def __init__(self, recipe: Recipe, favorites: FavoriteActions) -> None:
        self.recipe = recipe
        self.favorites = favorites
        super().__init__()

    def create_element(self) -> Element:
        recipe = self.recipe
        card = Element("div", classes=["recipe"], height=CARD_HEIGHT, attrs={"href": recipe.href})

        image_link = card.append_child(Element("a", attrs={"href": recipe.href, "target": "_blank"}))
        image_link.append_child(Element("img", attrs={"src": recipe.thumbnail, "alt": recipe.title}))
        self.favorite_button = image_link.append_child(Element("i", classes=list(self._icon())))
        self.favorite_button.on("click", self.toggle_favorite)

        card.append_child(Element("a", recipe.title, classes=["recipe-title"],
                                  attrs={"href": recipe.href, "target": "_blank"}))
        card.append_child(Element("div", f"{recipe.ingredient_count} ingredients",
                                  classes=["recipe-ingredients"], attrs={"title": recipe.ingredients}))
        return card

    @property
    def is_favorited(self) -> bool:
        return self.favorites.contains(self.recipe.href)

    def _icon(self):
        return FAVORITED_ICON if self.is_favorited else NOT_FAVORITED_ICON

    def toggle_favorite(self) -> bool:
        """Add or remove this recipe. Returns the new favorited state."""
        if self.is_favorited:
            self.favorites.remove(self.recipe.href)
            self.favorite_button.set_classes(*NOT_FAVORITED_ICON)
            return False
        self.favorites.add(self.recipe)
        self.favorite_button.set_classes(*FAVORITED_ICON)
        return True


class RecipeListView(Component):
    """
    Renders an accumulated sequence of recipes.

    append() concatenates and redraws the whole list. Rendering an empty list
    shows NO_RESULTS_TEXT and calls `on_empty`, there is nothing further to
    append. After destroy() the view ignores appends, so late responses
    can't write into a detached view.
    """

    def __init__(self, favorites: FavoriteActions, on_empty: Optional[Callable[[], None]] = None) -> None:
        self.favorites = favorites
        self.on_empty = on_empty
        self.recipes: List[Recipe] = []
        self.cards: List[RecipeCard] = []
        super().__init__()

    def create_element(self) -> Element:
        return Element("div", id="recipes-container")

    @property
    def showing_no_results(self) -> bool:
        return self.element.text == NO_RESULTS_TEXT

    def clear(self) -> None:
        self.recipes = []
        self.cards = []
        self.element.clear()
        self.element.height = 0

    def append(self, recipes: List[Recipe]) -> None:
        if self.destroyed:
            logger.debug("Ignoring %d recipes for a destroyed list view", len(recipes))
            return
        self.recipes = self.recipes + list(recipes)
        self.render()

    def render(self) -> None:
        self.element.clear()
        self.element.height = 0

        if not self.recipes:
            self.element.text = NO_RESULTS_TEXT
            self.element.height = MESSAGE_HEIGHT
            if self.on_empty is not None:
                self.on_empty()

        self.cards = [RecipeCard(recipe, self.favorites) for recipe in self.recipes]
        for card in self.cards:
            card.mount(self.element)

    def destroy(self) -> None:
        self.recipes = []
        self.cards = []
        super().destroy()
