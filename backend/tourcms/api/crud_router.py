"""CRUD and gallery endpoints generated from a ``Resource``."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from ..db import get_db
from ..services.crud import (
    column_values,
    delete_entity,
    ensure_parents_exist,
    ensure_unique_slug,
    get_by_slug_or_404,
    get_or_404,
    list_rows,
    serialize,
    serialize_image,
    validate_payload,
    validate_schema,
)
from ..services.gallery import add_gallery_images, get_image_or_404, list_gallery, parse_display_orders
from ..services.resources import Resource
from ..services.storage import Storage, get_storage, remove_quietly, storage_key
from ..services.uploads import StagedFiles, read_image_upload, read_image_uploads
from .forms import as_list, parse_body
from .schemas_common import ImageUpdateIn

logger = logging.getLogger(__name__)


def build_router(resource: Resource) -> APIRouter:
    router = APIRouter(prefix=f"/api/{resource.name}", tags=list(resource.tags) or [resource.name])
    has_gallery = resource.image_model is not None

    def gallery_uploads(files):
        uploads = list(files.get(resource.gallery_field, []))
        if resource.gallery_field != "images":
            uploads += files.get("images", [])
        return uploads

    def read_files(files):
        """Validate every uploaded file up front; nothing is written yet."""
        featured = None
        if resource.image_field and files.get(resource.image_field):
            featured = read_image_upload(
                files[resource.image_field][0],
                field=resource.image_field,
                max_bytes=resource.max_image_bytes,
            )
        images = []
        if has_gallery:
            images = read_image_uploads(
                gallery_uploads(files), field=resource.gallery_field, max_bytes=resource.max_image_bytes
            )
        return featured, images

    def image_meta(data):
        return {
            "alt_texts": as_list(data.get("alt_texts")),
            "descriptions": as_list(data.get("descriptions")),
            "display_orders": parse_display_orders(as_list(data.get("display_orders"))),
            "locations": as_list(data.get("locations")),
        }

    @router.get("")
    def list_items(
        request: Request,
        search: Optional[str] = Query(None, description="Case-insensitive substring match"),
        status: Optional[str] = Query(None),
        page: int = Query(1, ge=1),
        limit: int = Query(50, ge=1, le=200),
        db: Session = Depends(get_db),
        storage: Storage = Depends(get_storage),
    ):
        rows, total = list_rows(db, resource, dict(request.query_params), search, status, page, limit)
        return {
            "items": [serialize(resource, r, storage) for r in rows],
            "total": total,
            "page": page,
            "limit": limit,
        }

    if resource.sluggable:
        @router.get("/slug/{slug}")
        def get_item_by_slug(slug: str, db: Session = Depends(get_db), storage: Storage = Depends(get_storage)):
            return serialize(resource, get_by_slug_or_404(db, resource, slug), storage)

    @router.post("", status_code=201)
    def create_item(
        body=Depends(parse_body),
        db: Session = Depends(get_db),
        storage: Storage = Depends(get_storage),
    ):
        data, files = body
        payload = validate_payload(resource, data)
        ensure_unique_slug(db, resource, payload)
        ensure_parents_exist(db, resource, payload)
        featured, images = read_files(files)
        meta = image_meta(data)

        staged = StagedFiles(storage)
        try:
            row = resource.model(**column_values(resource.model, payload))
            if featured is not None:
                setattr(row, resource.image_field, staged.write(resource.upload_dir, featured))
            db.add(row)
            db.flush()
            if resource.apply_relations:
                resource.apply_relations(db, row, payload)
            if images:
                add_gallery_images(db, resource, row.id, images, staged, **meta)
            db.commit()
        except Exception:
            db.rollback()
            staged.discard()
            raise

        logger.info(f"Created {resource.label} {row.id}")
        return serialize(resource, get_or_404(db, resource, row.id), storage)

    if has_gallery:
        @router.put("/images/{image_id}")
        def update_image(
            image_id: int,
            body=Depends(parse_body),
            db: Session = Depends(get_db),
            storage: Storage = Depends(get_storage),
        ):
            img = get_image_or_404(db, resource, image_id)
            data, _ = body
            changes = validate_schema(ImageUpdateIn, data).model_dump(exclude_unset=True)
            for key, value in column_values(resource.image_model, changes).items():
                setattr(img, key, value)
            db.commit()
            db.refresh(img)
            return serialize_image(resource, img, storage)

        @router.delete("/images/{image_id}")
        def delete_image(image_id: int, db: Session = Depends(get_db), storage: Storage = Depends(get_storage)):
            img = get_image_or_404(db, resource, image_id)
            key = storage_key(resource.upload_dir, img.image_path)
            db.delete(img)
            db.commit()
            removed = remove_quietly(storage, [key])
            logger.info(f"Deleted {resource.label} image {image_id}")
            return {"success": True, "message": "Image deleted successfully", "file_removed": bool(removed)}

        @router.get("/{item_id}/images")
        def list_images(item_id: int, db: Session = Depends(get_db), storage: Storage = Depends(get_storage)):
            get_or_404(db, resource, item_id)
            return [serialize_image(resource, img, storage) for img in list_gallery(db, resource, item_id)]

        @router.post("/{item_id}/images", status_code=201)
        def upload_images(
            item_id: int,
            body=Depends(parse_body),
            db: Session = Depends(get_db),
            storage: Storage = Depends(get_storage),
        ):
            get_or_404(db, resource, item_id)
            data, files = body
            uploads = gallery_uploads(files)
            if not uploads:
                raise HTTPException(status_code=400, detail="No images uploaded")
            images = read_image_uploads(uploads, field=resource.gallery_field, max_bytes=resource.max_image_bytes)

            staged = StagedFiles(storage)
            try:
                rows = add_gallery_images(db, resource, item_id, images, staged, **image_meta(data))
                db.commit()
            except Exception:
                db.rollback()
                staged.discard()
                raise

            return {
                "success": True,
                "message": f"{len(rows)} image(s) uploaded",
                "images": [serialize_image(resource, img, storage) for img in rows],
            }

    @router.get("/{item_id}")
    def get_item(item_id: int, db: Session = Depends(get_db), storage: Storage = Depends(get_storage)):
        return serialize(resource, get_or_404(db, resource, item_id), storage)

    @router.put("/{item_id}")
    def update_item(
        item_id: int,
        body=Depends(parse_body),
        db: Session = Depends(get_db),
        storage: Storage = Depends(get_storage),
    ):
        row = get_or_404(db, resource, item_id)
        data, files = body
        payload = validate_payload(resource, data, row)
        ensure_unique_slug(db, resource, payload, row)
        ensure_parents_exist(db, resource, payload)
        featured, images = read_files(files)
        meta = image_meta(data)

        replaced = None
        staged = StagedFiles(storage)
        try:
            for key, value in column_values(resource.model, payload).items():
                setattr(row, key, value)
            if featured is not None:
                replaced = getattr(row, resource.image_field)
                setattr(row, resource.image_field, staged.write(resource.upload_dir, featured))
            if resource.apply_relations:
                resource.apply_relations(db, row, payload)
            if images:
                add_gallery_images(db, resource, row.id, images, staged, **meta)
            db.commit()
        except Exception:
            db.rollback()
            staged.discard()
            raise

        if replaced:
            remove_quietly(storage, [storage_key(resource.upload_dir, replaced)])
        logger.info(f"Updated {resource.label} {item_id}")
        return serialize(resource, get_or_404(db, resource, item_id), storage)

    @router.delete("/{item_id}")
    def delete_item(item_id: int, db: Session = Depends(get_db), storage: Storage = Depends(get_storage)):
        row = get_or_404(db, resource, item_id)
        keys = []
        try:
            delete_entity(db, resource, row, keys)
            db.commit()
        except Exception:
            db.rollback()
            raise
        removed = remove_quietly(storage, keys)
        return {
            "success": True,
            "message": f"{resource.label} deleted successfully",
            "files_removed": removed,
        }

    return router
