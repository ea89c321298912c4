# pizza_shop/data/models/menu_item.py
from typing import Dict, List, Optional

from pizza_shop.data.models.base import RecordModel

ITEM_SIZES = ("small", "medium", "large", "x-large", "regular")
ITEM_TYPES = ("pizza", "topping", "salad", "dressing", "beverage")
# types that only exist attached to another item
ADDITION_TYPES = ("topping", "dressing")


class MenuItem(RecordModel):
    id: str
    name: str
    type: str
    price: Dict[str, float]
    desc: Optional[str] = None
    add: Optional[List[str]] = None
