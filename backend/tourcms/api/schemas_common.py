import json
from typing import List, Optional
from pydantic import BaseModel, constr, field_validator

from ..utils.text import is_valid_slug


Name = constr(strip_whitespace=True, min_length=1, max_length=255)


class SlugIn(BaseModel):
    """Optional slug; derived from the title/name when missing."""
    slug: Optional[constr(strip_whitespace=True, max_length=255)] = None

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v):
        if v is None or v == "":
            return None
        if not is_valid_slug(v):
            raise ValueError("Slug can only contain lowercase letters, numbers, and hyphens")
        return v


class SeoIn(BaseModel):
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None


class ImageUpdateIn(BaseModel):
    alt_text: Optional[str] = None
    description: Optional[str] = None
    display_order: Optional[int] = None
    location: Optional[str] = None  # season images only


def parse_json_field(v):
    """Multipart forms send JSON columns as strings."""
    if isinstance(v, str):
        if not v.strip():
            return None
        try:
            return json.loads(v)
        except ValueError:
            raise ValueError("must be valid JSON")
    return v


def parse_id_list(v) -> Optional[List[int]]:
    """Accepts [1, 2], '[1, 2]', '1,2', '1' or repeated form fields."""
    if v is None:
        return None
    if isinstance(v, str):
        v = v.strip()
        if v.startswith("["):
            v = parse_json_field(v)
        elif not v:
            return []
        else:
            v = [p for p in v.split(",") if p.strip()]
    if not isinstance(v, (list, tuple)):
        v = [v]
    return [int(x) for x in v]
