# pizza_shop/services/payment_client.py
import uuid
from decimal import Decimal
from typing import Any, Dict

import requests

from pizza_shop.domain.errors import PaymentError
from pizza_shop.utils.retry import http_retry
from pizza_shop.utils.settings import HTTP_TIMEOUT, STRIPE_API_URL, STRIPE_SECRET_KEY
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentClient:
    """
    Card charges through a Stripe-style API.

    The card is first exchanged for a single-use card token, then charged.
    Both requests carry an idempotency key, so a retried request is
    applied once. Gateway refusals raise PaymentError with the gateway's own
    message and code.
    """

    def __init__(self, base_url: str | None = None, secret_key: str | None = None,
                 timeout: float = HTTP_TIMEOUT):
        self.base_url = (base_url or STRIPE_API_URL).rstrip("/")
        self.secret_key = secret_key if secret_key is not None else STRIPE_SECRET_KEY
        self.timeout = timeout

    def charge(self, amount: Decimal, payer: str, ccinfo: Dict[str, Any]) -> Dict[str, Any]:
        key = uuid.uuid4().hex
        card_token = self._card_token(ccinfo, f"{key}-token")

        result = self._post("/v1/charges", {
            "amount": to_cents(amount),
            "currency": "usd",
            "source": card_token["id"],
            "description": f"Charge for {payer}",
        }, f"{key}-charge")

        logger.info(f"Charged {amount} USD to {payer}")
        return {"chargeId": result.get("id"), **result}

    def _card_token(self, ccinfo: Dict[str, Any], idempotency_key: str) -> Dict[str, Any]:
        card = {f"card[{key}]": value for key, value in ccinfo.items()}
        return self._post("/v1/tokens", card, idempotency_key)

    @http_retry()
    def _send(self, path: str, data: Dict[str, Any], idempotency_key: str) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.info(f"PaymentClient POST {url}")
        return requests.post(
            url,
            data=data,
            auth=(self.secret_key, ""),
            headers={"Idempotency-Key": idempotency_key},
            timeout=self.timeout,
        )

    def _post(self, path: str, data: Dict[str, Any], idempotency_key: str) -> Dict[str, Any]:
        try:
            resp = self._send(path, data, idempotency_key)
        except requests.RequestException as e:
            logger.error(f"Payment gateway unreachable: {e}")
            raise PaymentError("payment service unavailable", "gateway_unavailable") from e

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if resp.status_code >= 400:
            error = body.get("error") or {}
            raise PaymentError(
                error.get("message") or "payment declined",
                error.get("code") or str(resp.status_code),
            )

        return body


def to_cents(amount: Decimal) -> int:
    return int((Decimal(amount) * 100).to_integral_value())
