"""File storage for uploaded images.

Keys are POSIX-style relative paths such as ``"territories/preview_image-1716-42.png"``.
Database rows keep only the filename; the entity's upload directory is the
key prefix.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from ..config import UPLOAD_ROOT, PUBLIC_BASE_URL

logger = logging.getLogger(__name__)


class Storage:
    """Interface used by the upload and cleanup code."""

    def put(self, key: str, data: bytes) -> str:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        """Remove ``key``; return False when it did not exist."""
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        raise NotImplementedError

    def url(self, key: str) -> str:
        return f"{PUBLIC_BASE_URL}/uploads/{key}"


class LocalStorage(Storage):
    """Stores files under a root directory on local disk."""

    def __init__(self, root: str | os.PathLike):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def path(self, key: str) -> Path:
        p = (self.root / key).resolve()
        # Keys come from generated filenames, but never let one escape the root
        if self.root not in p.parents:
            raise ValueError(f"Invalid storage key: {key!r}")
        return p

    def put(self, key: str, data: bytes) -> str:
        p = self.path(key)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        return str(p)

    def delete(self, key: str) -> bool:
        p = self.path(key)
        if not p.exists():
            return False
        p.unlink()
        return True

    def exists(self, key: str) -> bool:
        return self.path(key).is_file()


def storage_key(directory: str, filename: str) -> str:
    return f"{directory}/{filename}"


def remove_quietly(storage: Storage, keys) -> int:
    """Best-effort delete of ``keys``; failures are logged, never raised.

    Returns how many files were actually removed.
    """
    removed = 0
    for key in keys:
        try:
            if storage.delete(key):
                removed += 1
            else:
                logger.info(f"File already missing, nothing to remove: {key}")
        except OSError as e:
            logger.warning(f"Could not remove file {key}: {e}")
    return removed


_default_storage: Optional[LocalStorage] = None


def get_storage() -> Storage:
    """Dependency returning the process-wide local storage."""
    global _default_storage
    if _default_storage is None:
        _default_storage = LocalStorage(UPLOAD_ROOT)
    return _default_storage
