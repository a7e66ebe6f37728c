from typing import Optional
from pydantic import BaseModel, constr, field_validator

from ..models.content_models import INSTITUTION_KINDS
from .schemas_common import Name, SeoIn, SlugIn


class CultureIn(SlugIn, SeoIn):
    subdistrict_id: int
    title: Name
    description: Optional[str] = None


class InstitutionIn(SlugIn, SeoIn):
    subdistrict_id: int
    kind: str
    name: Name
    description: Optional[str] = None
    address: Optional[str] = None
    contact: Optional[constr(max_length=255)] = None

    @field_validator("kind")
    @classmethod
    def check_kind(cls, v):
        v = (v or "").strip().lower()
        if v not in INSTITUTION_KINDS:
            raise ValueError(f"must be one of: {', '.join(INSTITUTION_KINDS)}")
        return v


class SeasonalGuideIn(BaseModel):
    subdistrict_id: int
    season: constr(strip_whitespace=True, min_length=1, max_length=64)
    title: Name
    description: Optional[str] = None


class WildlifeSanctuaryIn(SlugIn, SeoIn):
    title: Name
    location: Optional[constr(max_length=255)] = None
    description: Optional[str] = None
