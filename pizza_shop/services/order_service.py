# pizza_shop/services/order_service.py
from decimal import Decimal
from typing import Any, Dict, List

from pizza_shop.data.models.order import OrderModel
from pizza_shop.data.models.user import UserModel
from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import NotFoundError, ShopError
from pizza_shop.domain.pricing import SummaryItem, cart_total
from pizza_shop.repos.cart_repo import CartRepo
from pizza_shop.repos.order_repo import OrderRepo
from pizza_shop.repos.user_repo import UserRepo
from pizza_shop.services.cart_service import CartService
from pizza_shop.services.notification_service import NotificationService
from pizza_shop.services.payment_client import PaymentClient
from pizza_shop.services.token_service import TokenService
from pizza_shop.utils.security import random_string
from pizza_shop.utils.time_ms import now_ms
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)

WIDTH = 80


def receipt_text(summary: List[SummaryItem], total: Decimal, user: UserModel,
                 card_number: Any) -> str:
    """Fixed-width plain text receipt."""
    lines = []
    for item in summary:
        line = f"{item.name}\n  {item.size}\n  ${item.price:.2f}\n"
        if item.add:
            extras = ", ".join(f"{sub.name}: ${sub.price:.2f}" for sub in item.add)
            line = f"{line} With: {extras}\n"
        lines.append(line)

    address = ""
    if user.address is not None:
        address = "\n  ".join(v for v in user.address.to_record().values() if v)

    card_ending = str(card_number)[-4:]
    rule = "-" * WIDTH

    return "\n".join([
        " " * WIDTH,
        "Thanks for your order!".center(WIDTH),
        " " * WIDTH,
        f"Delivering to:\n\n  {user.first_name} {user.last_name}\n  {address}\n",
        "Your order:\n",
        rule,
        *lines,
        rule,
        f"Total: ${total:.2f}  (card ending in {card_ending})",
        rule,
        "\n",
    ])


class OrderService:
    """
    Checkout.

    1. authorize the token and price the cart
    2. charge the card (gateway refusals go back to the client)
    3. record the order and empty the cart
    4. queue the receipt email (best-effort)
    """

    def __init__(self, store: FileStore, payment_client: PaymentClient,
                 notification_service: NotificationService | None = None,
                 token_service: TokenService | None = None):
        self.tokens = token_service or TokenService(store)
        self.carts = CartRepo(store)
        self.users = UserRepo(store)
        self.repo = OrderRepo(store)
        self.cart_service = CartService(store, self.tokens)
        self.payment_client = payment_client
        self.notification_service = notification_service or NotificationService()

    def checkout(self, token_id: str, ccinfo: Dict[str, Any]) -> Dict[str, Any]:
        token = self.tokens.authorize(token_id)

        try:
            cart = self.carts.get_cart(token.user_id)
        except NotFoundError:
            raise ShopError("cart is empty", status_code=400)

        if not cart.items:
            raise ShopError("cart is empty", status_code=400)

        summary = self.cart_service.summarize(cart)
        total = cart_total(summary)

        try:
            user = self.users.get_user(token.user_id)
        except NotFoundError:
            raise NotFoundError("user not found", status_code=500)

        charge = self.payment_client.charge(total, token.user_id, ccinfo)

        order = OrderModel(
            id=random_string(20),
            user_id=token.user_id,
            charge_id=str(charge.get("chargeId")),
            total=float(total),
            items=[s.to_dict() for s in summary],
            created=now_ms(),
        )
        self.repo.create_order(order)

        cart.clear()
        self.carts.save_cart(cart)

        logger.info(f"Order {order.id} placed by {token.user_id} for {total}")

        message = receipt_text(summary, total, user, ccinfo.get("number"))
        self.notification_service.send_receipt(token.user_id, message)

        return {"message": "order successful"}
