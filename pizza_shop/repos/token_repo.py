# pizza_shop/repos/token_repo.py
from typing import List

from pizza_shop.data.models.token import TokenModel
from pizza_shop.data.storage import FileStore
from pizza_shop.repos.record_repo import RecordRepo


class TokenRepo:
    def __init__(self, store: FileStore):
        self.records = RecordRepo.for_model(store, "tokens", TokenModel)

    def get_token(self, token_id: str) -> TokenModel:
        return self.records.load(token_id)

    def save_token(self, token: TokenModel) -> TokenModel:
        return self.records.save(token.id, token)

    def delete_token(self, token_id: str) -> None:
        self.records.delete(token_id)

    def list_token_ids(self) -> List[str]:
        return self.records.keys()
