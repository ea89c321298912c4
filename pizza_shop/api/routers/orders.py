# pizza_shop/api/routers/orders.py
from typing import Any, Dict

from fastapi import APIRouter, Depends

from pizza_shop.api.deps import get_payment_client, request_data
from pizza_shop.api.validators import order as validators
from pizza_shop.data.storage import FileStore, get_store
from pizza_shop.services.order_service import OrderService
from pizza_shop.services.payment_client import PaymentClient

router = APIRouter(prefix="/order", tags=["order"])


def get_service(store: FileStore = Depends(get_store),
                payment_client: PaymentClient = Depends(get_payment_client)) -> OrderService:
    return OrderService(store, payment_client)


@router.post("")
def place_order(data: Dict[str, Any] = Depends(request_data),
                svc: OrderService = Depends(get_service)):
    """Charge the cart total to the card and email a receipt."""
    token_id, ccinfo = validators.post(data)
    return svc.checkout(token_id, ccinfo)
