# pizza_shop/repos/user_repo.py
from pizza_shop.data.models.user import UserModel
from pizza_shop.data.storage import FileStore
from pizza_shop.repos.record_repo import RecordRepo


class UserRepo:
    def __init__(self, store: FileStore):
        self.records = RecordRepo.for_model(store, "users", UserModel)

    def get_user(self, email: str) -> UserModel:
        return self.records.load(email)

    def user_exists(self, email: str) -> bool:
        return self.records.exists(email)

    def save_user(self, user: UserModel) -> UserModel:
        return self.records.save(user.email, user)

    def delete_user(self, email: str) -> None:
        self.records.delete(email)
