# pizza_shop/repos/log_store.py
import gzip
import os
from datetime import datetime, timezone
from typing import List

from pizza_shop.utils.settings import LOG_DIR
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)

LOG_EXT = ".log"
ARCHIVE_EXT = ".log.gz"


class LogStore:
    """
    Append-only audit logs, one file per subject (e.g. a token id).

    rotate() archives every live log into a gzip file stamped with the
    rotation time and truncates the live file.
    """

    def __init__(self, base_dir: str | None = None):
        self.base_dir = base_dir or LOG_DIR
        os.makedirs(self.base_dir, exist_ok=True)

    def _path(self, name: str, ext: str = LOG_EXT) -> str:
        return os.path.join(self.base_dir, f"{name}{ext}")

    def append(self, name: str, line: str) -> None:
        with open(self._path(name), "a", encoding="utf-8") as f:
            f.write(line + "\n")

    def list(self, include_compressed: bool = False) -> List[str]:
        names = []
        for file_name in sorted(os.listdir(self.base_dir)):
            if file_name.endswith(ARCHIVE_EXT):
                if include_compressed:
                    names.append(file_name[: -len(ARCHIVE_EXT)])
            elif file_name.endswith(LOG_EXT):
                names.append(file_name[: -len(LOG_EXT)])
        return names

    def compress(self, log_id: str, archive_id: str) -> None:
        with open(self._path(log_id), "rb") as src:
            data = src.read()
        with gzip.open(self._path(archive_id, ARCHIVE_EXT), "wb") as dst:
            dst.write(data)

    def decompress(self, archive_id: str) -> str:
        with gzip.open(self._path(archive_id, ARCHIVE_EXT), "rb") as f:
            return f.read().decode("utf-8")

    def truncate(self, log_id: str) -> None:
        with open(self._path(log_id), "w", encoding="utf-8"):
            pass

    def rotate(self) -> int:
        """Archive and truncate every live log; returns how many were rotated."""
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        rotated = 0

        for log_id in self.list():
            # empty logs have nothing to archive
            if os.path.getsize(self._path(log_id)) == 0:
                continue

            try:
                self.compress(log_id, f"{log_id}_{stamp}")
                self.truncate(log_id)
                rotated += 1
            except OSError as e:
                logger.error(f"Error rotating log {log_id}: {e}")

        logger.info(f"Rotated {rotated} log files")
        return rotated
