# pizza_shop/services/mail_client.py
from typing import Any, Dict

import requests

from pizza_shop.domain.errors import MailError
from pizza_shop.utils.retry import http_retry
from pizza_shop.utils.settings import (
    HTTP_TIMEOUT,
    MAIL_FROM,
    MAILGUN_API_KEY,
    MAILGUN_API_URL,
    MAILGUN_DOMAIN,
)
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)


class MailClient:
    def __init__(self, base_url: str | None = None, domain: str | None = None,
                 api_key: str | None = None, timeout: float = HTTP_TIMEOUT):
        self.base_url = (base_url or MAILGUN_API_URL).rstrip("/")
        self.domain = domain or MAILGUN_DOMAIN
        self.api_key = api_key if api_key is not None else MAILGUN_API_KEY
        self.timeout = timeout

    @http_retry()
    def _send(self, data: Dict[str, Any]) -> requests.Response:
        url = f"{self.base_url}/v3/{self.domain}/messages"
        logger.info(f"MailClient POST {url}")
        return requests.post(url, data=data, auth=("api", self.api_key), timeout=self.timeout)

    def send(self, to: str, subject: str, body: str) -> Dict[str, Any]:
        try:
            resp = self._send({"from": MAIL_FROM, "to": to, "subject": subject, "text": body})
        except requests.RequestException as e:
            raise MailError(f"mail service unavailable: {e}") from e

        try:
            payload = resp.json()
        except ValueError:
            payload = {}

        if resp.status_code >= 400:
            raise MailError(payload.get("message") or f"mail rejected ({resp.status_code})")

        return {"messageId": payload.get("id"), **payload}
