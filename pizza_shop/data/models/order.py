# pizza_shop/data/models/order.py
from typing import Any, Dict, List

from pizza_shop.data.models.base import RecordModel


class OrderModel(RecordModel):
    id: str
    user_id: str
    charge_id: str
    total: float
    items: List[Dict[str, Any]]
    created: int
