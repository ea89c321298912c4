# pizza_shop/api/deps.py
import json
from typing import Any, Dict

from fastapi import Depends, Request

from pizza_shop.data.storage import FileStore, get_store
from pizza_shop.services.payment_client import PaymentClient
from pizza_shop.services.token_service import TokenService


async def request_data(request: Request) -> Dict[str, Any]:
    """headers / query / payload of the request, as the validators read them."""
    body = await request.body()

    try:
        payload = json.loads(body) if body else {}
    except ValueError:
        payload = {}

    return {
        "headers": dict(request.headers),
        "query": dict(request.query_params),
        "payload": payload,
    }


def get_token_service(store: FileStore = Depends(get_store)) -> TokenService:
    return TokenService(store)


def get_payment_client() -> PaymentClient:
    return PaymentClient()
