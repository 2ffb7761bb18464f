"""Static fallback images used when every live provider comes back empty.

Lookup order:
1. DISH_KEYWORD_IMAGES, first keyword found in the recipe name
2. CUISINE_IMAGES, exact match on the cuisine
3. CATEGORY_IMAGES, first category keyword found in the recipe name
4. GENERIC_FOOD_IMAGE

No network I/O; resolve_fallback() always returns a URL.
"""

from types import MappingProxyType


_UNSPLASH = "https://images.unsplash.com/photo-{}?w=500&h=300&fit=crop"

# Dish keyword -> image. Insertion order is the match order.
DISH_KEYWORD_IMAGES = MappingProxyType({
    # Proteins
    "chicken": _UNSPLASH.format("1598103442097-8138fb71fb3d"),
    "beef": _UNSPLASH.format("1546833999-b9f581a1996d"),
    "pork": _UNSPLASH.format("1544025162-d76694265947"),
    "fish": _UNSPLASH.format("1544943910-4c1dc44aab44"),
    "salmon": _UNSPLASH.format("1467003909585-2f8a72700288"),
    "shrimp": _UNSPLASH.format("1565680018434-b513d5573b07"),
    "lamb": _UNSPLASH.format("1529692236671-f1f6cf9683ba"),
    # Popular dishes
    "pasta": _UNSPLASH.format("1621996346565-e3dbc353d843"),
    "spaghetti": _UNSPLASH.format("1621996346565-e3dbc353d843"),
    "pizza": _UNSPLASH.format("1565299624946-b28f40a0ca4b"),
    "burger": _UNSPLASH.format("1568901346375-23c9450c58cd"),
    "sandwich": _UNSPLASH.format("1553909489-cd47e0ef937f"),
    "soup": _UNSPLASH.format("1547592180-85f173990554"),
    "salad": _UNSPLASH.format("1512621776951-a57141f2eefd"),
    "steak": _UNSPLASH.format("1546833999-b9f581a1996d"),
    "tacos": _UNSPLASH.format("1565299507177-b0ac66763828"),
    "curry": _UNSPLASH.format("1565557623262-b51c2513a641"),
    "risotto": _UNSPLASH.format("1476124369491-e7addf5db371"),
    "lasagna": _UNSPLASH.format("1621996346565-e3dbc353d843"),
    "burrito": _UNSPLASH.format("1565299507177-b0ac66763828"),
    # Desserts
    "cake": _UNSPLASH.format("1578985545062-69928b1d9587"),
    "pie": _UNSPLASH.format("1464349095431-e9a21285b5f3"),
    "cookies": _UNSPLASH.format("1499636136210-6f4ee915583e"),
    "brownies": _UNSPLASH.format("1606313564200-e75d5e30476c"),
    "ice cream": _UNSPLASH.format("1563805042-7684c019e1cb"),
    "chocolate": _UNSPLASH.format("1511381939415-e44015466834"),
    # Breakfast
    "pancakes": _UNSPLASH.format("1506084868230-bb9d95c24759"),
    "waffles": _UNSPLASH.format("1562376552-0d160a2f238d"),
    "eggs": _UNSPLASH.format("1525351484163-7529414344d8"),
    "bacon": _UNSPLASH.format("1528607929212-2636ec44b982"),
    "toast": _UNSPLASH.format("1509440159596-0249088772ff"),
    # Cuisine-specific dishes
    "ramen": _UNSPLASH.format("1569718212165-3a8278d5f624"),
    "sushi": _UNSPLASH.format("1571091718767-18b5b1457add"),
    "pad thai": _UNSPLASH.format("1559847844-d721426d6edc"),
    "biryani": _UNSPLASH.format("1563379091339-03246963d7d3"),
    "paella": _UNSPLASH.format("1534080564583-6be75777b70a"),
    "dumplings": _UNSPLASH.format("1569718212165-3a8278d5f624"),
    "noodles": _UNSPLASH.format("1569718212165-3a8278d5f624"),
    # Staples
    "cheese": _UNSPLASH.format("1553909489-cd47e0ef937f"),
    "rice": _UNSPLASH.format("1563379091339-03246963d7d3"),
})

# Cuisine -> image, exact match on the lowercased cuisine
CUISINE_IMAGES = MappingProxyType({
    "italian": _UNSPLASH.format("1565299624946-b28f40a0ca4b"),
    "mexican": _UNSPLASH.format("1565299507177-b0ac66763828"),
    "asian": _UNSPLASH.format("1563379091339-03246963d7d3"),
    "indian": _UNSPLASH.format("1565557623262-b51c2513a641"),
    "mediterranean": _UNSPLASH.format("1540189549336-e6e99c3679fe"),
    "american": _UNSPLASH.format("1568901346375-23c9450c58cd"),
    "french": _UNSPLASH.format("1546833999-b9f581a1996d"),
    "thai": _UNSPLASH.format("1559847844-d721426d6edc"),
    "chinese": _UNSPLASH.format("1569718212165-3a8278d5f624"),
    "japanese": _UNSPLASH.format("1571091718767-18b5b1457add"),
    "greek": _UNSPLASH.format("1540189549336-e6e99c3679fe"),
    "korean": _UNSPLASH.format("1563379091339-03246963d7d3"),
    "spanish": _UNSPLASH.format("1534080564583-6be75777b70a"),
    "vietnamese": _UNSPLASH.format("1559847844-d721426d6edc"),
})

# Recipe category keyword -> image, substring match on the recipe name
CATEGORY_IMAGES = MappingProxyType({
    "pasta": _UNSPLASH.format("1621996346565-e3dbc353d843"),
    "pizza": _UNSPLASH.format("1565299624946-b28f40a0ca4b"),
    "burger": _UNSPLASH.format("1568901346375-23c9450c58cd"),
    "soup": _UNSPLASH.format("1547592180-85f173990554"),
    "salad": _UNSPLASH.format("1512621776951-a57141f2eefd"),
    "chicken": _UNSPLASH.format("1598103442097-8138fb71fb3d"),
    "beef": _UNSPLASH.format("1546833999-b9f581a1996d"),
    "fish": _UNSPLASH.format("1544943910-4c1dc44aab44"),
    "dessert": _UNSPLASH.format("1551024506-0bccd828d307"),
    "cake": _UNSPLASH.format("1578985545062-69928b1d9587"),
    "bread": _UNSPLASH.format("1509440159596-0249088772ff"),
})

GENERIC_FOOD_IMAGE = _UNSPLASH.format("1482049016688-2d3e1b311543")


def _as_text(value) -> str:
    return value if isinstance(value, str) else ""


def find_dish_image(recipe_name: str):
    """First dish-keyword image whose keyword appears in the name, else None."""
    name = _as_text(recipe_name).lower()
    for keyword, url in DISH_KEYWORD_IMAGES.items():
        if keyword in name:
            return url
    return None


def find_cuisine_or_category_image(recipe_name: str, cuisine: str = ""):
    """Cuisine image by exact match, then category image by substring, else None."""
    cuisine_key = _as_text(cuisine).strip().lower()
    if cuisine_key in CUISINE_IMAGES:
        return CUISINE_IMAGES[cuisine_key]

    name = _as_text(recipe_name).lower()
    for category, url in CATEGORY_IMAGES.items():
        if category in name:
            return url
    return None


def resolve_fallback(recipe_name: str, cuisine: str = "") -> str:
    """Pick a deterministic image without touching the network.

    A dish keyword in the name wins over the cuisine, even when the cuisine is
    more specific ("Thai chicken" gets the chicken image).

    Args:
        recipe_name: Recipe name as requested.
        cuisine: Optional cuisine.

    Returns:
        Image URL, never empty.
    """
    return (
        find_dish_image(recipe_name)
        or find_cuisine_or_category_image(recipe_name, cuisine)
        or GENERIC_FOOD_IMAGE
    )
