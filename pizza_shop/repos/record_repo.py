# pizza_shop/repos/record_repo.py
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from pizza_shop.data.storage import FileStore
from pizza_shop.domain.errors import NotFoundError

T = TypeVar("T")


class RecordRepo(Generic[T]):
    """
    One collection of the file store, typed through a serialize/deserialize pair.

    save() is read-modify-write: fields already on disk are kept unless the
    new record overwrites them (last write wins); missing records are created.
    """

    def __init__(
        self,
        store: FileStore,
        collection: str,
        serialize: Callable[[T], Dict[str, Any]],
        deserialize: Callable[[Dict[str, Any]], T],
    ):
        self.store = store
        self.collection = collection
        self.serialize = serialize
        self.deserialize = deserialize

    @classmethod
    def for_model(cls, store: FileStore, collection: str, model: Type[T]) -> "RecordRepo[T]":
        return cls(
            store,
            collection,
            serialize=lambda record: record.model_dump(by_alias=True, exclude_none=True),
            deserialize=model.model_validate,
        )

    def load(self, key: str) -> T:
        return self.deserialize(self.store.read(self.collection, key))

    def exists(self, key: str) -> bool:
        try:
            self.store.read(self.collection, key)
        except NotFoundError:
            return False
        return True

    def save(self, key: str, record: T) -> T:
        data = self.serialize(record)

        try:
            existing = self.store.read(self.collection, key)
        except NotFoundError:
            existing = None

        if existing is None:
            self.store.create(self.collection, key, data)
        else:
            self.store.update(self.collection, key, {**existing, **data})

        return record

    def delete(self, key: str) -> None:
        self.store.delete(self.collection, key)

    def keys(self) -> List[str]:
        return self.store.list(self.collection)
