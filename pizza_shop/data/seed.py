# pizza_shop/data/seed.py
from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import NotFoundError
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)

MENU_COLLECTION = "menu"

PIZZA_PRICE = {"small": 12.99, "medium": 14.99, "large": 16.99, "x-large": 18.99}
MEAT_PRICE = {"small": 1.00, "medium": 1.50, "large": 2.00, "x-large": 2.50}
VEGGIE_PRICE = {"small": 0.50, "medium": 1.00, "large": 1.50, "x-large": 2.00}
SALAD_PRICE = {"regular": 5.00, "large": 6.50}
DRESSING_PRICE = {"regular": 1.50, "large": 2.00}

TOPPINGS = [
    {"id": "pepperoni-topping", "name": "Pepperoni", "type": "topping", "price": MEAT_PRICE},
    {"id": "italian-sausage-topping", "name": "Italian Sausage", "type": "topping", "price": MEAT_PRICE},
    {"id": "chicken-sausage-topping", "name": "Chicken Sausage", "type": "topping", "price": MEAT_PRICE},
    {"id": "bacon-topping", "name": "Bacon", "type": "topping", "price": MEAT_PRICE},
    {"id": "mushrooms-topping", "name": "Mushrooms", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "black-olives-topping", "name": "Black Olives", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "roasted-garlic-topping", "name": "Roasted Garlic", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "green-peppers-topping", "name": "Green Peppers", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "tomatoes-topping", "name": "Tomatoes", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "spinach-topping", "name": "Spinach", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "jalapenos-topping", "name": "Jalapenos", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "pine-nuts-topping", "name": "Pine Nuts", "type": "topping", "price": VEGGIE_PRICE},
    {"id": "fresh-basil-topping", "name": "Fresh Basil", "type": "topping", "price": VEGGIE_PRICE},
]

DRESSINGS = [
    {"id": "house-dressing", "name": "House Dressing", "type": "dressing", "price": DRESSING_PRICE},
    {"id": "caesar-dressing", "name": "Caesar Dressing", "type": "dressing", "price": DRESSING_PRICE},
    {"id": "blue-cheese-dressing", "name": "Blue Cheese Dressing", "type": "dressing", "price": DRESSING_PRICE},
    {"id": "ranch-dressing", "name": "Ranch Dressing", "type": "dressing", "price": DRESSING_PRICE},
    {"id": "italian-dressing", "name": "Italian Dressing", "type": "dressing", "price": DRESSING_PRICE},
]

TOPPING_IDS = [t["id"] for t in TOPPINGS]
DRESSING_IDS = [d["id"] for d in DRESSINGS]

PIZZAS = [
    {
        "id": "big-bear-special",
        "name": "The Big Bear Special",
        "desc": "A couple of whole salmon and whatever else was in the walk-in.",
        "price": PIZZA_PRICE,
    },
    {
        "id": "cheese-pizza",
        "name": "Cheese Pizza",
        "desc": "Nothing but cheese.",
        "price": {"small": 9.99, "medium": 11.99, "large": 13.99, "x-large": 15.99},
    },
    {
        "id": "combination-pizza",
        "name": "Combination Pizza",
        "desc": "Pepperoni, italian sausage, mushrooms, olives and green peppers.",
        "price": PIZZA_PRICE,
    },
    {
        "id": "the-leslie",
        "name": "The Leslie",
        "desc": "Pepperoni, bacon, roasted garlic and pine nuts.",
        "price": PIZZA_PRICE,
    },
    {
        "id": "the-full-stack",
        "name": "The Full Stack",
        "desc": "Simpler to list what this pizza doesn't have on it.",
        "price": PIZZA_PRICE,
    },
    {
        "id": "build-your-own",
        "name": "The Proprietary (build your own)",
        "desc": "Starts with cheese, then every wish is its command.",
        "price": PIZZA_PRICE,
    },
]

SALADS = [
    {"id": "garden-salad", "name": "Garden Salad"},
    {"id": "greek-salad", "name": "Greek Salad"},
    {"id": "caesar-salad", "name": "Caesar Salad"},
    {"id": "spinach-salad", "name": "Spinach Salad"},
]

BEVERAGES = [
    {"id": "san-pellegrino", "name": "San Pellegrino", "type": "beverage", "price": {"regular": 2.50}},
    {"id": "water", "name": "Water", "type": "beverage", "price": {"regular": 1.00}},
    {"id": "cola", "name": "Cola", "type": "beverage", "price": {"regular": 1.50}},
    {"id": "pale-ale", "name": "Sierra Nevada Pale Ale", "type": "beverage", "price": {"regular": 2.00}},
]


def menu_items() -> list[dict]:
    pizzas = [{**p, "type": "pizza", "add": TOPPING_IDS} for p in PIZZAS]
    salads = [
        {**s, "type": "salad", "price": SALAD_PRICE, "add": DRESSING_IDS} for s in SALADS
    ]
    return [*pizzas, *TOPPINGS, *salads, *DRESSINGS, *BEVERAGES]


def seed_menu(store: FileStore) -> int:
    """Replace the stored menu with the current one."""
    # stale items are removed, never merged
    for key in store.list(MENU_COLLECTION):
        try:
            store.delete(MENU_COLLECTION, key)
        except NotFoundError:
            pass

    items = menu_items()
    for item in items:
        store.create(MENU_COLLECTION, item["id"], item)

    logger.info(f"Seeded {len(items)} menu items")
    return len(items)
