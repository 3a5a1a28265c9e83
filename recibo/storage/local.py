import logging
from pathlib import Path

from recibo.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    """Writes emitted receipts into a directory on disk.

    Every receipt is saved under the same filename, so a new one replaces
    the previous file; the replacement is logged.
    """

    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return (self.base_dir / key).resolve()

    def save(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists():
            logger.info("Replacing previous %s (%d bytes)", key, path.stat().st_size)
        path.write_bytes(data)
        logger.debug("Saved %s (%d bytes) to %s", key, len(data), path)
        return str(path)
