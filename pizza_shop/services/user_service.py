# pizza_shop/services/user_service.py
from typing import Any, Dict

from pizza_shop.data.models.cart import CartModel
from pizza_shop.data.models.token import TokenModel
from pizza_shop.data.models.user import UserModel, set_password
from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import (
    AlreadyExistsError,
    AuthorizationError,
    NotFoundError,
    ShopError,
)
from pizza_shop.repos.cart_repo import CartRepo
from pizza_shop.repos.user_repo import UserRepo
from pizza_shop.services.token_service import TokenService
from pizza_shop.utils.settings import TOKEN_TTL_MS
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)

# one message for every login failure
LOGIN_FAILURE = "authorization failure"


class UserService:
    def __init__(self, store: FileStore, token_service: TokenService | None = None):
        self.repo = UserRepo(store)
        self.carts = CartRepo(store)
        self.tokens = token_service or TokenService(store)

    def create_user(self, record: Dict[str, Any]) -> Dict[str, Any]:
        email = record["email"]

        if self.repo.user_exists(email):
            raise AlreadyExistsError("user already exists")

        data = {k: v for k, v in record.items() if k != "password"}
        user = set_password(UserModel.model_validate(data), record["password"])
        self.repo.save_user(user)

        # every user starts with an empty cart
        self.carts.save_cart(CartModel(id=email, user_id=email))

        logger.info(f"Created user {email}")
        return user.public()

    def login(self, email: str, password: str) -> TokenModel:
        try:
            user = self.repo.get_user(email)
        except NotFoundError:
            raise ShopError(LOGIN_FAILURE, status_code=400)

        if not user.check_password(password):
            raise ShopError(LOGIN_FAILURE, status_code=400)

        return self.tokens.create(email, TOKEN_TTL_MS)

    def get_user(self, email: str, token_id: str) -> Dict[str, Any]:
        self._authorize_for(email, token_id)

        try:
            return self.repo.get_user(email).public()
        except NotFoundError:
            raise NotFoundError("user not found")

    def update_user(self, token_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partial update for the token's owner.

        A new email moves the user record and the cart to the new key and
        re-points the token at it.
        """
        token = self.tokens.authorize(token_id)

        if not fields:
            raise ShopError("no update fields specified", status_code=400)

        try:
            user = self.repo.get_user(token.user_id)
        except NotFoundError:
            raise NotFoundError("user not found", status_code=400)

        new_email = fields.get("email")
        if new_email and new_email != user.email:
            user = self._change_email(user, new_email, token)

        changes = {k: v for k, v in fields.items() if k not in ("email", "password")}
        updated = UserModel.model_validate({**user.to_record(), **changes})

        if fields.get("password"):
            updated = set_password(updated, fields["password"])

        self.repo.save_user(updated)

        logger.info(f"Updated user {updated.email}")
        return updated.public()

    def delete_user(self, email: str, token_id: str) -> None:
        self._authorize_for(email, token_id)

        if not self.repo.user_exists(email):
            raise NotFoundError("user not found", status_code=400)

        try:
            self.carts.delete_cart(email)
        except NotFoundError:
            pass

        try:
            self.tokens.delete(token_id)
        except NotFoundError:
            logger.warning(f"Token for {email} already gone")

        self.repo.delete_user(email)
        logger.info(f"Deleted user {email}")

    def _authorize_for(self, email: str, token_id: str) -> TokenModel:
        token = self.tokens.authorize(token_id)
        if token.user_id != email:
            raise AuthorizationError()
        return token

    def _change_email(self, user: UserModel, new_email: str, token: TokenModel) -> UserModel:
        old_email = user.email

        if self.repo.user_exists(new_email):
            raise AlreadyExistsError("user already exists")

        moved = user.model_copy(update={"email": new_email})
        cart = self.carts.get_or_new_cart(old_email)

        self.repo.save_user(moved)
        self.carts.save_cart(cart.model_copy(update={"id": new_email, "user_id": new_email}))
        self.tokens.reassign(token, new_email)

        try:
            self.carts.delete_cart(old_email)
        except NotFoundError:
            pass
        self.repo.delete_user(old_email)

        logger.info(f"Moved user {old_email} to {new_email}")
        return moved
