"""
Component tests for POST /order.

The card gateway is replaced by FakePaymentClient through
dependency_overrides and MailClient.send is patched for every test, so the
receipt task (run eagerly by Celery) never leaves the process.
"""
from decimal import Decimal
from unittest.mock import patch

from kombu.exceptions import OperationalError

from conftest import TEST_EMAIL
from pizza_shop.domain.errors import MailError
from pizza_shop.repos.order_repo import OrderRepo
from pizza_shop.services.notification_service import RECEIPT_SUBJECT


def auth(token_id):
    return {"token": token_id}


def fill_cart(client, token_id, *items):
    response = client.post("/cart", json={"items": list(items)}, headers=auth(token_id))
    assert response.status_code == 200, response.text


class TestOrderApi:
    def test_order_charges_total_and_clears_cart(
        self, test_client, token, store, payment_client, mail_send, ccinfo, cheese_with_pepperoni
    ):
        fill_cart(test_client, token, cheese_with_pepperoni)

        response = test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth(token))

        assert response.status_code == 200
        assert response.json() == {"message": "order successful"}

        [charge] = payment_client.charges
        assert charge["amount"] == Decimal("13.49")
        assert charge["payer"] == TEST_EMAIL
        assert charge["ccinfo"]["number"] == ccinfo["number"]

        cart = test_client.get("/cart", headers=auth(token)).json()["cart"]
        assert cart == {"total": 0, "items": []}

        [order_id] = store.list("orders")
        order = OrderRepo(store).get_order(order_id)
        assert order.user_id == TEST_EMAIL
        assert order.charge_id == "ch_1"
        assert order.total == 13.49
        assert order.items[0]["name"] == "Cheese Pizza"

    def test_receipt_is_mailed(self, test_client, token, mail_send, ccinfo, cheese_with_pepperoni):
        fill_cart(test_client, token, cheese_with_pepperoni)

        test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth(token))

        mail_send.assert_called_once()
        to, subject, body = mail_send.call_args.args
        assert to == TEST_EMAIL
        assert subject == RECEIPT_SUBJECT
        assert "Cheese Pizza" in body
        assert "Pepperoni: $1.50" in body
        assert "Total: $13.49" in body
        assert "card ending in 4242" in body

    def test_mail_failure_does_not_fail_order(self, test_client, token, mail_send, ccinfo, cheese_with_pepperoni):
        fill_cart(test_client, token, cheese_with_pepperoni)
        mail_send.side_effect = MailError("mail rejected (401)")

        response = test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth(token))

        assert response.status_code == 200

    def test_broker_outage_does_not_fail_order(self, test_client, token, ccinfo, cheese_with_pepperoni):
        fill_cart(test_client, token, cheese_with_pepperoni)

        with patch("pizza_shop.services.notification_service.send_receipt_task") as task:
            task.delay.side_effect = OperationalError("broker down")
            response = test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth(token))

        assert response.status_code == 200

    def test_declined_card_keeps_cart(
        self, test_client, token, store, payment_client, mail_send, ccinfo, cheese_with_pepperoni
    ):
        fill_cart(test_client, token, cheese_with_pepperoni)
        payment_client.decline_with("Your card was declined.")

        response = test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth(token))

        assert response.status_code == 400
        assert response.json() == {"error": "Your card was declined."}
        assert len(test_client.get("/cart", headers=auth(token)).json()["cart"]["items"]) == 1
        assert store.list("orders") == []
        mail_send.assert_not_called()

    def test_empty_cart(self, test_client, token, payment_client, ccinfo):
        response = test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth(token))

        assert response.status_code == 400
        assert response.json() == {"error": "cart is empty"}
        assert payment_client.charges == []

    def test_card_validation(self, test_client, token, ccinfo):
        ccinfo["exp_month"] = 13
        ccinfo["cvc"] = "123"

        response = test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth(token))

        assert response.status_code == 400
        assert [e["name"] for e in response.json()["errors"]] == ["exp_month", "cvc"]

    def test_ccinfo_is_required(self, test_client, token):
        response = test_client.post("/order", json={}, headers=auth(token))

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"check": "is_object", "name": "ccinfo", "error": "ccinfo must be an object"}
        ]

    def test_requires_valid_token(self, test_client, registered_user, ccinfo):
        response = test_client.post("/order", json={"ccinfo": ccinfo}, headers=auth("x" * 32))

        assert response.status_code == 403

    def test_empty_ccinfo_reports_every_card_field(self, test_client, token, payment_client, cheese_with_pepperoni):
        fill_cart(test_client, token, cheese_with_pepperoni)

        response = test_client.post("/order", json={"ccinfo": {}}, headers=auth(token))

        assert response.status_code == 400
        assert [e["name"] for e in response.json()["errors"]] == ["number", "exp_month", "exp_year", "cvc"]
        assert payment_client.charges == []
