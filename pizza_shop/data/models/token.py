# pizza_shop/data/models/token.py
from typing import Optional

from pizza_shop.data.models.base import RecordModel
from pizza_shop.utils.time_ms import now_ms

TOKEN_LENGTH = 32


class TokenModel(RecordModel):
    """Bearer token; id is None until the token has been saved."""

    id: Optional[str] = None
    user_id: str
    expires: int

    def verify(self, now: int | None = None) -> bool:
        if self.id is None:
            return False
        return self.expires > (now_ms() if now is None else now)

    def extend(self, ms: int) -> "TokenModel":
        self.expires = now_ms() + ms
        return self
