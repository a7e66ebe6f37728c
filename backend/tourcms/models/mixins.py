"""Column sets and capability markers shared by the content tables.

A model's capabilities are read from the mixins it inherits:

* ``Identifiable``: integer primary key ``id``.
* ``Sluggable``: unique ``slug`` column; slug checks apply.
* ``HasGallery``: owns a ``*_images`` table named by ``__gallery__``.

Gallery tables inherit ``GalleryImageMixin`` and name their parent key in
``__parent_key__``.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text


def utcnow():
    return datetime.now(timezone.utc)


class Identifiable:
    id = Column(Integer, primary_key=True, index=True)


class Sluggable:
    slug = Column(String(255), nullable=False, unique=True, index=True)


class HasGallery:
    # Set to the image model class on each concrete model
    __gallery__ = None


class Timestamped:
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class SeoFields:
    meta_title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)


class GalleryImageMixin:
    __parent_key__ = None

    id = Column(Integer, primary_key=True, index=True)
    image_path = Column(String(255), nullable=False)  # filename only
    alt_text = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)


def is_sluggable(model) -> bool:
    return issubclass(model, Sluggable)


def gallery_of(model):
    """Return the image model for a gallery-owning model, else None."""
    if issubclass(model, HasGallery):
        return model.__gallery__
    return None
