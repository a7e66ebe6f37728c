"""Validation and staging of uploaded image files."""
import logging
import random
import time
from dataclasses import dataclass
from pathlib import PurePath
from typing import List

from fastapi import HTTPException
from PIL import Image
from starlette.datastructures import UploadFile

from .images import CONTENT_TYPES, FORMAT_EXTENSIONS, detect_image_format
from .storage import Storage, remove_quietly, storage_key

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}


@dataclass
class ImageUpload:
    """An uploaded image that passed validation, held in memory until staged."""
    field: str
    original_name: str
    content_type: str
    extension: str
    data: bytes


def _mb(n: int) -> str:
    return f"{n / (1024 * 1024):g} MB"


def read_image_upload(upload: UploadFile, *, field: str, max_bytes: int) -> ImageUpload:
    """Read and validate one uploaded file; raise HTTP 400 naming the violated rule.

    Reads the spooled file synchronously, so call it from a worker thread.
    """
    name = upload.filename or field
    content_type = (upload.content_type or "").lower()
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"File '{name}' has type '{content_type or 'unknown'}'. "
                   f"Only image files (jpeg, jpg, png, gif, webp) are allowed.",
        )

    upload.file.seek(0)
    data = upload.file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(status_code=400, detail=f"File '{name}' exceeds the {_mb(max_bytes)} size limit.")
    if not data:
        raise HTTPException(status_code=400, detail=f"File '{name}' is empty.")

    try:
        fmt = detect_image_format(data)
    except Image.DecompressionBombError:
        raise HTTPException(status_code=400, detail=f"File '{name}' exceeds the maximum image dimensions.")
    if fmt not in FORMAT_EXTENSIONS:
        raise HTTPException(status_code=400, detail=f"File '{name}' is not a valid image.")

    extension = PurePath(name).suffix.lower()
    if extension not in CONTENT_TYPES:
        extension = FORMAT_EXTENSIONS[fmt]

    return ImageUpload(
        field=field,
        original_name=name,
        content_type=content_type,
        extension=extension,
        data=data,
    )


def read_image_uploads(uploads: List[UploadFile], *, field: str, max_bytes: int) -> List[ImageUpload]:
    """Validate every file before any of them is written."""
    return [read_image_upload(u, field=field, max_bytes=max_bytes) for u in uploads]


def generate_filename(prefix: str, extension: str) -> str:
    """'<prefix>-<epoch ms>-<random>.ext', e.g. 'images-1747562303143-565192879.jpeg'."""
    millis = int(time.time() * 1000)
    return f"{prefix}-{millis}-{random.randint(0, 10**9)}{extension}"


class StagedFiles:
    """Files written ahead of a database commit.

    Call ``discard()`` when the commit fails so no orphaned file is left behind.
    """

    def __init__(self, storage: Storage):
        self.storage = storage
        self.keys: List[str] = []

    def write(self, directory: str, upload: ImageUpload) -> str:
        filename = generate_filename(upload.field, upload.extension)
        key = storage_key(directory, filename)
        self.storage.put(key, upload.data)
        self.keys.append(key)
        return filename

    def discard(self) -> None:
        if self.keys:
            logger.info(f"Discarding {len(self.keys)} staged upload(s)")
            remove_quietly(self.storage, self.keys)
            self.keys = []
