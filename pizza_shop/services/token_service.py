# pizza_shop/services/token_service.py
import json
from typing import Dict

from pizza_shop.data.models.token import TOKEN_LENGTH, TokenModel
from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import (
    AuthorizationError,
    NotFoundError,
    StorageError,
    TokenExpiredError,
)
from pizza_shop.repos.log_store import LogStore
from pizza_shop.repos.token_repo import TokenRepo
from pizza_shop.utils.security import random_string
from pizza_shop.utils.time_ms import now_ms
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)


class TokenService:
    """
    Bearer token lifecycle: create -> valid -> expired -> deleted.

    Callers never learn whether a rejected token was expired or never
    existed; authorize() answers both with the same AuthorizationError.
    """

    def __init__(self, store: FileStore, log_store: LogStore | None = None):
        self.repo = TokenRepo(store)
        self.log_store = log_store

    def create(self, user_id: str, ttl_ms: int) -> TokenModel:
        token = TokenModel(
            id=random_string(TOKEN_LENGTH),
            user_id=user_id,
            expires=now_ms() + ttl_ms,
        )
        self.repo.save_token(token)

        logger.info(f"Created token for {user_id}")
        return token

    def load(self, token_id: str) -> TokenModel:
        return self.repo.get_token(token_id)

    def verify(self, token_id: str | None) -> bool:
        """True only for an existing, unexpired token. Never raises."""
        if not token_id:
            return False

        try:
            return self.load(token_id).verify()
        except (NotFoundError, StorageError, ValueError):
            return False

    def authorize(self, token_id: str) -> TokenModel:
        try:
            token = self.load(token_id)
        except NotFoundError:
            raise AuthorizationError()

        if not token.verify():
            raise AuthorizationError()

        return token

    def extend(self, token_id: str, ms: int) -> TokenModel:
        try:
            token = self.load(token_id)
        except NotFoundError:
            raise AuthorizationError()

        if not token.verify():
            raise TokenExpiredError()

        token.extend(ms)
        self.repo.save_token(token)

        logger.info(f"Extended token for {token.user_id}")
        return token

    def reassign(self, token: TokenModel, user_id: str) -> TokenModel:
        token.user_id = user_id
        return self.repo.save_token(token)

    def delete(self, token_id: str) -> None:
        self.repo.delete_token(token_id)
        logger.info("Deleted token")

    def sweep_expired(self, now: int | None = None) -> int:
        """
        Reaper pass: delete every expired token.

        A token removed by someone else between listing and deletion counts
        as already swept.
        """
        now = now_ms() if now is None else now
        deleted = 0

        for token_id in self.repo.list_token_ids():
            try:
                token = self.load(token_id)
            except NotFoundError:
                continue
            except (StorageError, ValueError) as e:
                logger.warning(f"Skipping unreadable token {token_id}: {e}")
                continue

            if token.verify(now):
                continue

            try:
                self.delete(token_id)
            except NotFoundError:
                continue

            deleted += 1
            self._audit(token, now)

        logger.info(f"Token sweep removed {deleted} expired tokens")
        return deleted

    def _audit(self, token: TokenModel, now: int) -> None:
        if self.log_store is None:
            return

        entry: Dict = {"token": token.to_record(), "timestamp": now}
        try:
            self.log_store.append(token.id, json.dumps(entry))
        except OSError as e:
            logger.warning(f"Error writing token log {token.id}: {e}")
