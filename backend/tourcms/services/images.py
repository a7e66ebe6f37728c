from io import BytesIO
from typing import Optional
from PIL import Image, UnidentifiedImageError

# Pillow format name -> file extension used when the upload has none
FORMAT_EXTENSIONS = {
    "JPEG": ".jpg",
    "PNG": ".png",
    "GIF": ".gif",
    "WEBP": ".webp",
}

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def detect_image_format(data: bytes) -> Optional[str]:
    """Return the Pillow format name ('JPEG', 'PNG', ...) or None if the bytes are not an image.

    Images over Pillow's pixel limit raise ``Image.DecompressionBombError``.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return None
    return fmt


def content_type_for(filename: str) -> Optional[str]:
    """Content type from the extension of ``filename``."""
    dot = filename.rfind(".")
    if dot == -1:
        return None
    return CONTENT_TYPES.get(filename[dot:].lower())
