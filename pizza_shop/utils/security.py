# pizza_shop/utils/security.py
import hashlib
import hmac
import secrets
import string

from pizza_shop.utils.settings import HASHING_SECRET

CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def hash_password(password: str) -> str:
    """HMAC-SHA256 hex digest of the password, keyed with HASHING_SECRET."""
    if not isinstance(password, str) or not password:
        raise ValueError("password must be a non-empty string")

    return hmac.new(
        HASHING_SECRET.encode(), password.encode(), hashlib.sha256
    ).hexdigest()


def verify_password(password: str | None, password_hash: str | None) -> bool:
    if not password or not password_hash:
        return False
    return hmac.compare_digest(hash_password(password), password_hash)


def random_string(length: int) -> str:
    if length <= 0:
        raise ValueError("length must be positive and non-zero")
    return "".join(secrets.choice(CHARSET) for _ in range(length))
