# pizza_shop/domain/errors.py
from typing import Any, Dict, List


class ShopError(Exception):
    """Base error; status_code is the HTTP status the API answers with."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(ShopError):
    status_code = 400

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__("validation failed")
        self.errors = errors


class AuthorizationError(ShopError):
    status_code = 403

    def __init__(self, message: str = "not authorized"):
        super().__init__(message)


class TokenExpiredError(ShopError):
    status_code = 400

    def __init__(self, message: str = "token is expired"):
        super().__init__(message)


class NotFoundError(ShopError):
    status_code = 404


class AlreadyExistsError(ShopError):
    status_code = 400


class PaymentError(ShopError):
    status_code = 400

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code


class MailError(ShopError):
    status_code = 502


class IntegrityError(ShopError):
    """Stored data no longer agrees with the menu (missing item or price)."""

    status_code = 500


class StorageError(ShopError):
    status_code = 500
