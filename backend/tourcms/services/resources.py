"""Descriptions of the content types served by the generic CRUD routers."""
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel

from ..config import MAX_IMAGE_BYTES
from ..models.mixins import gallery_of, is_sluggable


@dataclass
class Resource:
    name: str                       # URL path segment, also the registry key
    label: str                      # human name used in messages
    model: type
    schema: Type[BaseModel]
    upload_dir: Optional[str] = None
    image_field: Optional[str] = None
    title_field: str = "name"       # source of derived slugs
    filters: Dict[str, str] = field(default_factory=dict)   # query param -> column
    filter_choices: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    search_fields: Tuple[str, ...] = ()
    order_by: Tuple[str, ...] = ("id",)
    # (response key, relationship, attribute), e.g. ("state_name", "state", "name")
    names: Tuple[Tuple[str, str, str], ...] = ()
    # foreign key column -> parent resource name
    parents: Dict[str, str] = field(default_factory=dict)
    # (child resource name, foreign key column) deleted along with a row
    children: Tuple[Tuple[str, str], ...] = ()
    # (child resource name, foreign key column) set to NULL when a row is deleted
    detach: Tuple[Tuple[str, str], ...] = ()
    gallery_field: str = "images"
    max_image_bytes: int = MAX_IMAGE_BYTES
    # (db, row, payload) -> None; applies values that are not plain columns
    apply_relations: Optional[Callable] = None
    # (row, data) -> None; adds extra keys to a serialized row
    serialize_extra: Optional[Callable] = None
    # (db, row) -> None; runs before the row itself is deleted
    before_delete: Optional[Callable] = None
    tags: Tuple[str, ...] = ()

    @property
    def sluggable(self) -> bool:
        return is_sluggable(self.model)

    @property
    def image_model(self):
        return gallery_of(self.model)

    @property
    def has_status(self) -> bool:
        return hasattr(self.model, "status")


_registry: Dict[str, Resource] = {}


def register(resource: Resource) -> Resource:
    _registry[resource.name] = resource
    return resource


def get_resource(name: str) -> Resource:
    return _registry[name]


def all_resources():
    return list(_registry.values())
