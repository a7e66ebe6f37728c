"""Gallery image rows: ordering, upload-and-register, metadata updates."""
import logging
from pathlib import PurePath
from typing import List, Optional, Sequence

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from .resources import Resource
from .uploads import ImageUpload, StagedFiles

logger = logging.getLogger(__name__)


def _parent_column(image_model):
    return getattr(image_model, image_model.__parent_key__)


def next_display_order(db: Session, image_model, parent_id: int) -> int:
    """One past the highest display order in the parent's gallery (1 when empty)."""
    current = (
        db.query(func.max(image_model.display_order))
        .filter(_parent_column(image_model) == parent_id)
        .scalar()
    )
    return (current or 0) + 1


def parse_display_orders(values: Sequence) -> List[Optional[int]]:
    out = []
    for v in values:
        if v is None or (isinstance(v, str) and not v.strip()):
            out.append(None)
            continue
        try:
            out.append(int(v))
        except (TypeError, ValueError):
            raise HTTPException(status_code=400, detail=f"display_orders: invalid integer {v!r}")
    return out


def _at(values: Sequence, i: int):
    return values[i] if i < len(values) else None


def add_gallery_images(
    db: Session,
    resource: Resource,
    parent_id: int,
    uploads: List[ImageUpload],
    staged: StagedFiles,
    alt_texts: Sequence = (),
    descriptions: Sequence = (),
    display_orders: Sequence[Optional[int]] = (),
    locations: Sequence = (),
):
    """Write ``uploads`` to storage and add one image row per file.

    Nothing is committed; the caller commits or discards ``staged``.
    """
    image_model = resource.image_model
    # Only season images record where the photo was taken
    has_location = hasattr(image_model, "location")
    next_order = next_display_order(db, image_model, parent_id)
    rows = []
    for i, upload in enumerate(uploads):
        explicit = _at(display_orders, i)
        order = explicit if explicit is not None else next_order
        next_order = max(next_order, order + 1)

        filename = staged.write(resource.upload_dir, upload)
        img = image_model(
            **{image_model.__parent_key__: parent_id},
            image_path=filename,
            alt_text=_at(alt_texts, i) or PurePath(upload.original_name).stem,
            description=_at(descriptions, i),
            display_order=order,
        )
        if has_location:
            img.location = _at(locations, i)
        db.add(img)
        rows.append(img)
    db.flush()
    logger.info(f"Added {len(rows)} image(s) to {resource.label} {parent_id}")
    return rows


def list_gallery(db: Session, resource: Resource, parent_id: int):
    image_model = resource.image_model
    return (
        db.query(image_model)
        .filter(_parent_column(image_model) == parent_id)
        .order_by(image_model.display_order.asc(), image_model.id.asc())
        .all()
    )


def get_image_or_404(db: Session, resource: Resource, image_id: int):
    img = db.get(resource.image_model, image_id)
    if img is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return img
