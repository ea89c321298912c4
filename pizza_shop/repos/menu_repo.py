# pizza_shop/repos/menu_repo.py
from typing import Dict, List

from pizza_shop.data.models.menu_item import MenuItem
from pizza_shop.data.seed import MENU_COLLECTION
from pizza_shop.data.storage import FileStore
from pizza_shop.repos.record_repo import RecordRepo


class MenuRepo:
    def __init__(self, store: FileStore):
        self.records = RecordRepo.for_model(store, MENU_COLLECTION, MenuItem)

    def get_item(self, item_id: str) -> MenuItem:
        return self.records.load(item_id)

    def list_items(self) -> List[MenuItem]:
        return [self.records.load(key) for key in self.records.keys()]

    def grouped(self) -> Dict[str, List[dict]]:
        items = self.list_items()

        def of_type(item_type: str) -> List[dict]:
            return [i.to_record() for i in items if i.type == item_type]

        return {
            "pizza": of_type("pizza"),
            "toppings": of_type("topping"),
            "salads": of_type("salad"),
            "dressings": of_type("dressing"),
            "beverages": of_type("beverage"),
        }
