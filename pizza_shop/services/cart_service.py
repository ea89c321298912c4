# pizza_shop/services/cart_service.py
from typing import Any, Dict, List

from pizza_shop.data.models.cart import CartModel
from pizza_shop.data.models.cart_item import CartItem
from pizza_shop.data.models.menu_item import ADDITION_TYPES, MenuItem
from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import NotFoundError, ValidationFailed
from pizza_shop.domain.pricing import SummaryItem, cart_total, summarize
from pizza_shop.repos.cart_repo import CartRepo
from pizza_shop.repos.menu_repo import MenuRepo
from pizza_shop.services.token_service import TokenService
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Cart use cases for the token's owner.

    commands (add, remove, clear) load the cart, mutate it and save it back;
    every answer is the freshly priced cart view.
    """

    def __init__(self, store: FileStore, token_service: TokenService | None = None):
        self.repo = CartRepo(store)
        self.menu = MenuRepo(store)
        self.tokens = token_service or TokenService(store)

    #query
    def get_cart(self, token_id: str) -> Dict[str, Any]:
        token = self.tokens.authorize(token_id)
        cart = self.repo.get_or_new_cart(token.user_id)
        return self.view(cart)

    def summarize(self, cart: CartModel) -> List[SummaryItem]:
        return summarize(cart.items, self.menu.get_item)

    def view(self, cart: CartModel) -> Dict[str, Any]:
        summary = self.summarize(cart)
        return {
            "total": float(cart_total(summary)),
            "items": [s.to_dict() for s in summary],
        }

    #commands
    def add_items(self, token_id: str, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        token = self.tokens.authorize(token_id)

        cart_items = [CartItem.model_validate(i) for i in items]
        self._check_against_menu(cart_items)

        # created lazily when the user has no cart yet
        cart = self.repo.get_or_new_cart(token.user_id)
        for item in cart_items:
            cart.add_item(item)

        self.repo.save_cart(cart)

        logger.info(f"Added {len(cart_items)} items to cart of {token.user_id}")
        return self.view(cart)

    def remove_item(self, token_id: str, item_id: str | None) -> Dict[str, Any]:
        """Remove one item (or one addition) by content hash; no id clears the cart."""
        token = self.tokens.authorize(token_id)

        try:
            cart = self.repo.get_cart(token.user_id)
        except NotFoundError:
            raise NotFoundError("no items in cart", status_code=400)

        if item_id is None:
            cart.clear()
            logger.info(f"Cleared cart of {token.user_id}")
        elif cart.remove_item(item_id):
            logger.info(f"Removed item {item_id} from cart of {token.user_id}")
        else:
            logger.info(f"Item {item_id} not in cart of {token.user_id}")

        self.repo.save_cart(cart)
        return self.view(cart)

    def _check_against_menu(self, items: List[CartItem]) -> None:
        errors = []

        def error(name: str, message: str) -> None:
            errors.append({"check": "menu", "name": name, "error": message})

        for item in items:
            menu_item = self._menu_item(item.id)

            if menu_item is None:
                error("item.id", f"unknown menu item {item.id!r}")
                continue

            if menu_item.type in ADDITION_TYPES:
                error("item.id", f"{item.id!r} can only be added to another item")
                continue

            if item.size not in menu_item.price:
                error("item.size", f"{item.id!r} is not available in size {item.size!r}")

            allowed = menu_item.add or []
            for addition in item.add or []:
                if addition.id not in allowed:
                    error("item.add", f"{addition.id!r} cannot be added to {item.id!r}")
                elif self._menu_item(addition.id) is None:
                    error("item.add", f"unknown menu item {addition.id!r}")

        if errors:
            raise ValidationFailed(errors)

    def _menu_item(self, item_id: str) -> MenuItem | None:
        try:
            return self.menu.get_item(item_id)
        except NotFoundError:
            return None
