from pizza_shop.data.models.cart_item import CartItem
from pizza_shop.data.models.cart import CartModel
from pizza_shop.data.models.menu_item import MenuItem
from pizza_shop.data.models.order import OrderModel
from pizza_shop.data.models.token import TokenModel
from pizza_shop.data.models.user import Address, UserModel, set_password

__all__ = [
    "Address",
    "CartItem",
    "CartModel",
    "MenuItem",
    "OrderModel",
    "TokenModel",
    "UserModel",
    "set_password",
]
