"""Generic data access for the content types described by ``Resource``."""
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy import exists, func, inspect, or_
from sqlalchemy.orm import Session, joinedload, selectinload

from ..utils.text import slugify
from .resources import Resource, get_resource
from .storage import Storage, storage_key

logger = logging.getLogger(__name__)


def serialize_sa_row(row):
    """Serialize SQLAlchemy row to dict with best-effort normalization."""
    if row is None:
        return None
    mapper = inspect(row.__class__)
    data = {}
    for col in mapper.columns:
        v = getattr(row, col.key)
        if hasattr(v, "isoformat"):
            v = v.isoformat()
        elif v.__class__.__name__ in ("Decimal",):
            v = float(v)
        data[col.key] = v
    return data


def serialize_image(resource: Resource, img, storage: Storage) -> dict:
    data = serialize_sa_row(img)
    data["url"] = storage.url(storage_key(resource.upload_dir, img.image_path))
    return data


def serialize(resource: Resource, row, storage: Storage) -> dict:
    """Row -> response dict with parent names, image URLs and gallery."""
    data = serialize_sa_row(row)
    for key, rel, attr in resource.names:
        parent = getattr(row, rel)
        data[key] = getattr(parent, attr) if parent is not None else None
    if resource.image_field:
        filename = getattr(row, resource.image_field)
        data[f"{resource.image_field}_url"] = (
            storage.url(storage_key(resource.upload_dir, filename)) if filename else None
        )
    if resource.image_model is not None:
        data["images"] = [serialize_image(resource, img, storage) for img in row.images]
    if resource.serialize_extra:
        resource.serialize_extra(row, data)
    return data


# ---- Validation ----

def _validation_message(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    msg = err.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


def validate_schema(schema, data):
    """``schema.model_validate`` with the first error turned into an HTTP 400."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=_validation_message(e))


def validate_payload(resource: Resource, data: Dict[str, Any], row=None) -> Dict[str, Any]:
    """Validate request data with the resource schema.

    On create every schema field is returned. On update (``row`` given) the
    submitted fields are validated together with the row's current values and
    only the submitted ones are returned.
    """
    fields = resource.schema.model_fields
    submitted = {k: v for k, v in data.items() if k in fields}
    if row is None:
        merged = submitted
    else:
        columns = column_names(resource.model)
        merged = {k: getattr(row, k) for k in fields if k in columns}
        merged.update(submitted)
    result = validate_schema(resource.schema, merged).model_dump()
    if row is None:
        return result
    return {k: result[k] for k in submitted}


def column_names(model) -> set:
    return {c.key for c in inspect(model).column_attrs}


def column_values(model, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Payload entries that map to columns; None is dropped for NOT NULL columns."""
    columns = {c.key: c for c in inspect(model).columns}
    out = {}
    for key, value in payload.items():
        col = columns.get(key)
        if col is None:
            continue
        if value is None and not col.nullable:
            continue
        out[key] = value
    return out


def slug_exists(db: Session, model, slug: str, exclude_id: Optional[int] = None) -> bool:
    cond = model.slug == slug
    if exclude_id is not None:
        cond = cond & (model.id != exclude_id)
    return db.query(exists().where(cond)).scalar()


def ensure_unique_slug(db: Session, resource: Resource, payload: Dict[str, Any], row=None) -> None:
    """Derive a missing slug from the title/name, then reject duplicates."""
    if not resource.sluggable:
        return
    # Updates that do not submit a slug keep the stored one
    if row is not None and "slug" not in payload:
        return
    slug = payload.get("slug")
    if not slug:
        title = payload.get(resource.title_field)
        if title is None and row is not None:
            title = getattr(row, resource.title_field)
        slug = slugify(title)
        if not slug:
            raise HTTPException(status_code=400, detail=f"slug: could not be derived from {resource.title_field}")
        payload["slug"] = slug
    if slug_exists(db, resource.model, slug, exclude_id=row.id if row is not None else None):
        raise HTTPException(status_code=400, detail="Slug already exists.")


def ensure_parents_exist(db: Session, resource: Resource, payload: Dict[str, Any]) -> None:
    for fk, parent_name in resource.parents.items():
        parent_id = payload.get(fk)
        if parent_id is None:
            continue
        parent = get_resource(parent_name)
        if db.get(parent.model, parent_id) is None:
            raise HTTPException(status_code=400, detail=f"{parent.label} {parent_id} does not exist.")


# ---- Reads ----

def _load_options(resource: Resource):
    opts = [joinedload(getattr(resource.model, rel)) for _, rel, _ in resource.names]
    if resource.image_model is not None:
        opts.append(selectinload(resource.model.images))
    return opts


def get_or_404(db: Session, resource: Resource, item_id: int):
    row = (
        db.query(resource.model)
        .options(*_load_options(resource))
        .filter(resource.model.id == item_id)
        .one_or_none()
    )
    if row is None:
        raise HTTPException(status_code=404, detail=f"{resource.label} not found")
    return row


def get_by_slug_or_404(db: Session, resource: Resource, slug: str):
    row = (
        db.query(resource.model)
        .options(*_load_options(resource))
        .filter(resource.model.slug == slug)
        .one_or_none()
    )
    if row is None:
        raise HTTPException(status_code=404, detail=f"{resource.label} not found")
    return row


def escape_like(text: str) -> str:
    """Make ``%`` and ``_`` match literally in a LIKE pattern escaped with backslash."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _coerce_filter(column, raw: str):
    python_type = column.type.python_type
    if python_type is bool:
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes"):
            return True
        if lowered in ("0", "false", "no"):
            return False
        raise ValueError(raw)
    if python_type in (int, float):
        return python_type(raw)
    return raw


def list_rows(
    db: Session,
    resource: Resource,
    params: Dict[str, str],
    search: Optional[str] = None,
    status: Optional[str] = None,
    page: int = 1,
    limit: int = 50,
):
    """Filtered, paginated rows plus the total count before pagination."""
    model = resource.model
    qs = db.query(model)

    for param, column in resource.filters.items():
        raw = params.get(param)
        if raw is None or raw == "":
            continue
        choices = resource.filter_choices.get(param)
        if choices and raw not in choices:
            raise HTTPException(status_code=400, detail=f"Invalid value for '{param}': {raw!r}")
        col = getattr(model, column)
        try:
            value = _coerce_filter(col, raw)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid value for '{param}': {raw!r}")
        qs = qs.filter(col == value)

    if status and resource.has_status:
        qs = qs.filter(model.status == status)

    if search and resource.search_fields:
        needle = f"%{escape_like(search.strip().lower())}%"
        qs = qs.filter(or_(*[
            func.lower(getattr(model, f)).like(needle, escape="\\") for f in resource.search_fields
        ]))

    total = qs.count()

    order = []
    for name in resource.order_by:
        if name.startswith("-"):
            order.append(getattr(model, name[1:]).desc())
        else:
            order.append(getattr(model, name).asc())

    rows = (
        qs.options(*_load_options(resource))
        .order_by(*order)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return rows, total


# ---- Deletes ----

def delete_entity(db: Session, resource: Resource, row, keys: List[str]) -> None:
    """Delete ``row`` with its children and gallery rows.

    File keys to remove after the commit are appended to ``keys``. Nothing is
    committed here.
    """
    for child_name, fk in resource.children:
        child = get_resource(child_name)
        for child_row in db.query(child.model).filter(getattr(child.model, fk) == row.id).all():
            delete_entity(db, child, child_row, keys)

    for child_name, fk in resource.detach:
        child = get_resource(child_name)
        db.query(child.model).filter(getattr(child.model, fk) == row.id).update(
            {fk: None}, synchronize_session="fetch"
        )

    image_model = resource.image_model
    if image_model is not None:
        parent_col = getattr(image_model, image_model.__parent_key__)
        for img in db.query(image_model).filter(parent_col == row.id).all():
            keys.append(storage_key(resource.upload_dir, img.image_path))
            db.delete(img)

    if resource.image_field:
        filename = getattr(row, resource.image_field)
        if filename:
            keys.append(storage_key(resource.upload_dir, filename))

    if resource.before_delete:
        resource.before_delete(db, row)

    db.flush()
    db.delete(row)
    db.flush()
    logger.info(f"Deleted {resource.label} {row.id}")
