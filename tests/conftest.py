"""
Shared fixtures.

Settings are read from the environment at import time, so the test
environment is prepared before anything from pizza_shop is imported:
Celery runs tasks eagerly and the default data/log directories point at a
throwaway directory. Every test still gets its own FileStore through the
`store` fixture, which the API picks up via dependency_overrides.
"""
import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="pizza-shop-tests-")
os.environ["DATA_DIR"] = os.path.join(_TMP, "data")
os.environ["LOG_DIR"] = os.path.join(_TMP, "logs")
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["HASHING_SECRET"] = "test-secret"

from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from pizza_shop.api.deps import get_payment_client
from pizza_shop.data.seed import seed_menu
from pizza_shop.data.storage import FileStore, get_store
from pizza_shop.domain.errors import PaymentError
from pizza_shop.main import app
from pizza_shop.repos.log_store import LogStore
from pizza_shop.services.mail_client import MailClient

TEST_EMAIL = "a@b.com"
TEST_PASSWORD = "pw1234567890"


class FakePaymentClient:
    """Stands in for the card gateway; records every charge it accepts."""

    def __init__(self):
        self.charges = []
        self.decline = None

    def charge(self, amount: Decimal, payer: str, ccinfo: dict) -> dict:
        if self.decline is not None:
            raise self.decline
        self.charges.append({"amount": amount, "payer": payer, "ccinfo": ccinfo})
        charge_id = f"ch_{len(self.charges)}"
        return {"chargeId": charge_id, "id": charge_id, "status": "succeeded"}

    def decline_with(self, message: str, code: str = "card_declined") -> None:
        self.decline = PaymentError(message, code)


@pytest.fixture
def store(tmp_path):
    """A fresh file store with the menu already seeded."""
    s = FileStore(str(tmp_path / "data"))
    seed_menu(s)
    return s


@pytest.fixture
def log_store(tmp_path):
    return LogStore(str(tmp_path / "logs"))


@pytest.fixture
def payment_client():
    return FakePaymentClient()


@pytest.fixture
def mail_send():
    """Receipts never reach the mail provider."""
    with patch.object(MailClient, "send", return_value={"messageId": "msg-1"}) as mock_send:
        yield mock_send


@pytest.fixture
def test_client(store, payment_client, mail_send):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_payment_client] = lambda: payment_client

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def user_payload():
    return {
        "email": TEST_EMAIL,
        "firstName": "Ada",
        "lastName": "Bear",
        "password": TEST_PASSWORD,
        "address": {
            "line1": "1 Forest Rd",
            "city": "Portland",
            "state": "OR",
            "zip": "97201",
        },
    }


@pytest.fixture
def registered_user(test_client, user_payload):
    response = test_client.post("/users", json=user_payload)
    assert response.status_code == 200, response.text
    return response.json()["user"]


@pytest.fixture
def token(test_client, registered_user):
    """Id of a fresh bearer token for the registered user."""
    response = test_client.post(
        "/tokens", json={"email": TEST_EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]["id"]


@pytest.fixture
def cheese_with_pepperoni():
    return {"id": "cheese-pizza", "size": "medium", "add": [{"id": "pepperoni-topping"}]}


@pytest.fixture
def ccinfo():
    return {"number": 4242424242424242, "exp_month": 12, "exp_year": date.today().year + 1, "cvc": 123}
