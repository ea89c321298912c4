# pizza_shop/data/models/cart_item.py
from typing import List, Optional

from pydantic import BaseModel


class CartItem(BaseModel):
    """A cart line; `add` holds additions (one level deep, priced at this item's size)."""

    id: str
    size: Optional[str] = None
    add: Optional[List["CartItem"]] = None

    def to_record(self) -> dict:
        return self.model_dump(exclude_none=True)
