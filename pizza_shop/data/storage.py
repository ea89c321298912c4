# pizza_shop/data/storage.py
import json
import os
from typing import Any, Dict, List

from pizza_shop.domain.errors import AlreadyExistsError, NotFoundError, StorageError
from pizza_shop.utils.settings import DATA_DIR
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)


class FileStore:
    """
    Flat JSON document store.

    <base_dir>/<collection>/<key>.json holds one record. Missing records
    raise NotFoundError, disk and decode failures raise StorageError (the
    original error is logged, not passed on).
    """

    def __init__(self, base_dir: str | None = None):
        self.base_dir = base_dir or DATA_DIR
        os.makedirs(self.base_dir, exist_ok=True)

    def _dir(self, collection: str) -> str:
        return os.path.join(self.base_dir, collection)

    def _path(self, collection: str, key: str) -> str:
        if not key or os.sep in key or key.startswith("."):
            raise NotFoundError(f"invalid key {key!r} in {collection}")
        return os.path.join(self._dir(collection), f"{key}.json")

    def create(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        path = self._path(collection, key)

        try:
            os.makedirs(self._dir(collection), exist_ok=True)
            # "x" refuses to overwrite an existing record
            with open(path, "x", encoding="utf-8") as f:
                json.dump(data, f)
        except FileExistsError:
            raise AlreadyExistsError(f"{collection}/{key} already exists")
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error creating {collection}/{key}: {e}")
            raise StorageError(f"error writing {collection}/{key}") from e

    def read(self, collection: str, key: str) -> Dict[str, Any]:
        path = self._path(collection, key)

        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            raise NotFoundError(f"{collection}/{key} not found")
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {collection}/{key}: {e}")
            raise StorageError(f"error reading {collection}/{key}") from e

    def update(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        path = self._path(collection, key)

        if not os.path.exists(path):
            raise NotFoundError(f"{collection}/{key} not found")

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error updating {collection}/{key}: {e}")
            raise StorageError(f"error writing {collection}/{key}") from e

    def delete(self, collection: str, key: str) -> None:
        path = self._path(collection, key)

        try:
            os.remove(path)
        except FileNotFoundError:
            raise NotFoundError(f"{collection}/{key} not found")
        except OSError as e:
            logger.error(f"Error deleting {collection}/{key}: {e}")
            raise StorageError(f"error deleting {collection}/{key}") from e

    def list(self, collection: str) -> List[str]:
        try:
            names = os.listdir(self._dir(collection))
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(f"Error listing {collection}: {e}")
            raise StorageError(f"error listing {collection}") from e

        return sorted(n[: -len(".json")] for n in names if n.endswith(".json"))


def get_store():
    """FastAPI dependency: the store every request works against."""
    yield FileStore(DATA_DIR)
