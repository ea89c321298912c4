# pizza_shop/data/models/cart.py
from typing import List

from pydantic import Field

from pizza_shop.data.models.base import RecordModel
from pizza_shop.data.models.cart_item import CartItem
from pizza_shop.domain.identity import canonical_item, hash_item

# separates parent and addition hashes in a composite item id
ID_DELIMITER = ":"


class CartModel(RecordModel):
    id: str
    user_id: str
    items: List[CartItem] = Field(default_factory=list)

    def add_item(self, item: CartItem) -> CartItem:
        # additions are sorted before they are stored so ids never depend on client order
        item = canonical_item(item)
        self.items.append(item)
        return item

    def remove_item(self, composite_id: str) -> bool:
        """
        Remove by content hash.

        `<hash>` removes a top-level item, `<hash>:<hash>` removes an addition
        from inside the matching top-level item. Any other shape matches nothing.
        Returns False when nothing matched.
        """
        parts = [p for p in composite_id.split(ID_DELIMITER) if p]

        if not parts or len(parts) > 2:
            return False

        if len(parts) == 1:
            return _remove_by_hash(self.items, parts[0])

        item_id, addition_id = parts
        for item in self.items:
            if hash_item(item) == item_id:
                return _remove_by_hash(item.add or [], addition_id)

        return False

    def clear(self) -> None:
        self.items.clear()


def _remove_by_hash(items: List[CartItem], item_hash: str) -> bool:
    for index, item in enumerate(items):
        if hash_item(item) == item_hash:
            del items[index]
            return True
    return False
