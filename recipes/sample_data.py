"""
Sample Recipe Directory.

A small, static recipe directory used when RECIPE_SOURCE=sample. It lets the
backend and the browser run end to end without network access (handy for
local development and demos). Records have the same shape as the remote
directory: title, href, comma-joined ingredients and an optional thumbnail.

# NOTE: Some titles carry stray whitespace and some thumbnails are empty on
    purpose, the remote directory does the same and the models normalize both.
"""

from typing import List

from recipes.models import Recipe

_BASE_URL = "https://recipes.example.org"


def _recipe(slug: str, title: str, ingredients: str, thumbnail: str = "") -> Recipe:
    return Recipe(
        title=title,
        href=f"{_BASE_URL}/{slug}",
        ingredients=ingredients,
        thumbnail=thumbnail,
    )


_RECIPES: List[Recipe] = [
    _recipe("classic-omelette", "Classic Omelette", "eggs, butter, salt, pepper, chives",
            f"{_BASE_URL}/img/classic-omelette.jpg"),
    _recipe("french-toast", "French Toast\n", "bread, eggs, milk, cinnamon, butter, maple syrup",
            f"{_BASE_URL}/img/french-toast.jpg"),
    _recipe("pancakes", "Buttermilk Pancakes", "flour, buttermilk, eggs, sugar, baking powder, butter"),
    _recipe("shakshuka", " Shakshuka", "eggs, tomatoes, onions, garlic, paprika, cumin, olive oil",
            f"{_BASE_URL}/img/shakshuka.jpg"),
    _recipe("egg-fried-rice", "Egg Fried Rice", "rice, eggs, soy sauce, spring onions, peas, sesame oil"),
    _recipe("quiche-lorraine", "Quiche Lorraine", "flour, butter, eggs, cream, bacon, onions, gruyere",
            f"{_BASE_URL}/img/quiche-lorraine.jpg"),
    _recipe("carbonara", "Spaghetti Carbonara", "spaghetti, eggs, pecorino, guanciale, pepper"),
    _recipe("sponge-cake", "Victoria Sponge", "flour, sugar, butter, eggs, jam, cream",
            f"{_BASE_URL}/img/sponge-cake.jpg"),
    _recipe("shortbread", "Shortbread", "flour, butter, sugar"),
    _recipe("banana-bread", "Banana Bread", "bananas, flour, sugar, eggs, butter, baking soda",
            f"{_BASE_URL}/img/banana-bread.jpg"),
    _recipe("lentil-soup", "Hearty Lentil Soup", "red lentils, carrots, celery, onions, garlic, cumin"),
    _recipe("tomato-soup", "Roasted Tomato Soup", "tomatoes, onions, garlic, olive oil, basil, stock",
            f"{_BASE_URL}/img/tomato-soup.jpg"),
    _recipe("guacamole", "Guacamole", "avocados, lime, onions, cilantro, jalapeno, salt"),
    _recipe("hummus", "Hummus", "chickpeas, tahini, lemon, garlic, olive oil",
            f"{_BASE_URL}/img/hummus.jpg"),
    _recipe("pesto-pasta", "Pesto Pasta", "pasta, basil, pine nuts, parmesan, garlic, olive oil"),
    _recipe("mac-and-cheese", "Mac and Cheese", "macaroni, cheddar, milk, butter, flour, mustard",
            f"{_BASE_URL}/img/mac-and-cheese.jpg"),
    _recipe("grilled-cheese", "Grilled Cheese Sandwich", "bread, cheddar, butter"),
    _recipe("caesar-salad", "Caesar Salad", "romaine, parmesan, croutons, eggs, anchovies, lemon, garlic"),
    _recipe("chicken-curry", "Chicken Curry", "chicken, onions, garlic, ginger, tomatoes, curry powder, yogurt",
            f"{_BASE_URL}/img/chicken-curry.jpg"),
    _recipe("beef-stew", "Beef Stew", "beef, potatoes, carrots, onions, stock, thyme, flour"),
    _recipe("veggie-stir-fry", "Veggie Stir-Fry", "broccoli, bell peppers, carrots, soy sauce, ginger, garlic",
            f"{_BASE_URL}/img/veggie-stir-fry.jpg"),
    _recipe("overnight-oats", "Overnight Oats", "oats, milk, yogurt, honey, berries"),
    _recipe("apple-crumble", "Apple Crumble", "apples, flour, butter, sugar, cinnamon",
            f"{_BASE_URL}/img/apple-crumble.jpg"),
    _recipe("chocolate-mousse", "Chocolate Mousse", "dark chocolate, eggs, sugar, cream"),
    _recipe("potato-gratin", "Potato Gratin", "potatoes, cream, garlic, gruyere, butter, nutmeg",
            f"{_BASE_URL}/img/potato-gratin.jpg"),
]


def get_all_recipes() -> List[Recipe]:
    """
    Get all recipes in the sample directory.

    Returns:
        List of all Recipe objects, in directory order
    """
    return _RECIPES.copy()
