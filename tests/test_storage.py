import os

import pytest

from pizza_shop.data.models import UserModel
from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import AlreadyExistsError, NotFoundError, StorageError
from pizza_shop.repos.record_repo import RecordRepo
from pizza_shop.repos.user_repo import UserRepo


@pytest.fixture
def empty_store(tmp_path):
    return FileStore(str(tmp_path / "store"))


class TestFileStore:
    def test_create_read_update_delete(self, empty_store):
        empty_store.create("things", "one", {"n": 1})
        assert empty_store.read("things", "one") == {"n": 1}

        empty_store.update("things", "one", {"n": 2})
        assert empty_store.read("things", "one") == {"n": 2}

        empty_store.delete("things", "one")
        with pytest.raises(NotFoundError):
            empty_store.read("things", "one")

    def test_create_refuses_to_overwrite(self, empty_store):
        empty_store.create("things", "one", {"n": 1})
        with pytest.raises(AlreadyExistsError):
            empty_store.create("things", "one", {"n": 2})
        assert empty_store.read("things", "one") == {"n": 1}

    def test_update_and_delete_missing(self, empty_store):
        with pytest.raises(NotFoundError):
            empty_store.update("things", "nope", {})
        with pytest.raises(NotFoundError):
            empty_store.delete("things", "nope")

    def test_list_is_sorted_and_tolerates_missing_collection(self, empty_store):
        assert empty_store.list("things") == []

        for key in ("b", "a", "c"):
            empty_store.create("things", key, {})

        assert empty_store.list("things") == ["a", "b", "c"]

    def test_corrupt_record_is_a_storage_error(self, empty_store):
        empty_store.create("things", "bad", {})
        with open(os.path.join(empty_store.base_dir, "things", "bad.json"), "w") as f:
            f.write("{not json")

        with pytest.raises(StorageError):
            empty_store.read("things", "bad")

    @pytest.mark.parametrize("key", ["", "../escape", ".hidden"])
    def test_unsafe_keys_are_rejected(self, empty_store, key):
        with pytest.raises(NotFoundError):
            empty_store.read("things", key)


class TestRecordRepo:
    def test_save_creates_then_merges(self, empty_store):
        repo = RecordRepo(empty_store, "things", serialize=dict, deserialize=dict)

        repo.save("one", {"a": 1, "b": 1})
        repo.save("one", {"b": 2})

        assert repo.load("one") == {"a": 1, "b": 2}
        assert repo.exists("one")
        assert not repo.exists("two")
        assert repo.keys() == ["one"]

    def test_model_records_round_trip_with_camel_case(self, empty_store):
        users = UserRepo(empty_store)
        user = UserModel(email="a@b.com", first_name="Ada", last_name="Bear")

        users.save_user(user)

        assert empty_store.read("users", "a@b.com") == {
            "email": "a@b.com",
            "firstName": "Ada",
            "lastName": "Bear",
        }
        assert users.get_user("a@b.com") == user
