# pizza_shop/data/models/user.py
from typing import Optional

from pizza_shop.data.models.base import RecordModel
from pizza_shop.utils.security import hash_password, verify_password


class Address(RecordModel):
    line1: str
    line2: Optional[str] = None
    city: str
    state: str
    zip: str


class UserModel(RecordModel):
    email: str
    first_name: str
    last_name: str
    address: Optional[Address] = None
    password_hash: Optional[str] = None

    def check_password(self, password: str | None) -> bool:
        return verify_password(password, self.password_hash)

    def public(self) -> dict:
        data = self.to_record()
        data.pop("passwordHash", None)
        return data


def set_password(user: UserModel, password: str) -> UserModel:
    """Return a copy of `user` holding the digest of `password`."""
    return user.model_copy(update={"password_hash": hash_password(password)})
