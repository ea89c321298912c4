# pizza_shop/api/routers/cart.py
from typing import Any, Dict

from fastapi import APIRouter, Depends

from pizza_shop.api.deps import request_data
from pizza_shop.api.validators import cart as validators
from pizza_shop.data.storage import FileStore, get_store
from pizza_shop.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(store: FileStore = Depends(get_store)) -> CartService:
    return CartService(store)


@router.post("")
def add_items(data: Dict[str, Any] = Depends(request_data),
              svc: CartService = Depends(get_service)):
    token_id, items = validators.post(data)
    return {"cart": svc.add_items(token_id, items)}


@router.get("")
def get_cart(data: Dict[str, Any] = Depends(request_data),
             svc: CartService = Depends(get_service)):
    token_id = validators.get(data)
    return {"cart": svc.get_cart(token_id)}


@router.delete("")
def remove_item(data: Dict[str, Any] = Depends(request_data),
                svc: CartService = Depends(get_service)):
    token_id, item_id = validators.delete(data)
    return {"cart": svc.remove_item(token_id, item_id)}
