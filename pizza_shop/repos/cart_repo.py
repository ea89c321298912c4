# pizza_shop/repos/cart_repo.py
from pizza_shop.data.models.cart import CartModel
from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import NotFoundError
from pizza_shop.repos.record_repo import RecordRepo


class CartRepo:
    """Carts are keyed by the owner's user id (email)."""

    def __init__(self, store: FileStore):
        self.records = RecordRepo.for_model(store, "carts", CartModel)

    def get_cart(self, user_id: str) -> CartModel:
        return self.records.load(user_id)

    def get_or_new_cart(self, user_id: str) -> CartModel:
        try:
            return self.get_cart(user_id)
        except NotFoundError:
            return CartModel(id=user_id, user_id=user_id)

    def save_cart(self, cart: CartModel) -> CartModel:
        return self.records.save(cart.user_id, cart)

    def delete_cart(self, user_id: str) -> None:
        self.records.delete(user_id)
