from typing import Optional
from pydantic import BaseModel, conint, constr

from .schemas_common import Name, SeoIn, SlugIn


class StateIn(SlugIn, SeoIn):
    name: Name
    capital: Optional[str] = None
    emoji: Optional[constr(max_length=16)] = None
    description: Optional[str] = None
    activities: Optional[str] = None


class DistrictIn(SlugIn, SeoIn):
    state_id: int
    name: Name
    description: Optional[str] = None


class SubdistrictIn(SlugIn, SeoIn):
    district_id: int
    title: Name
    description: Optional[str] = None


class VillageIn(SlugIn):
    subdistrict_id: int
    name: Name
    description: Optional[str] = None
    population: Optional[conint(ge=0)] = None
    highlights: Optional[str] = None


class PlaceIn(SlugIn, SeoIn):
    state_id: int
    name: Name
    short_description: Optional[str] = None
    content: Optional[str] = None
    status: Optional[constr(pattern=r"^(draft|published)$")] = "published"


class SeasonIn(BaseModel):
    district_id: int
    season_name: constr(strip_whitespace=True, min_length=1, max_length=64)
    description: Optional[str] = None


class TerritoryIn(SlugIn, SeoIn):
    title: constr(strip_whitespace=True, min_length=2, max_length=255)
    capital: constr(strip_whitespace=True, min_length=2, max_length=255)
    famous_for: Optional[constr(max_length=1000)] = None


class TerritoryDistrictIn(SlugIn, SeoIn):
    territory_id: int
    name: Name
    description: Optional[str] = None


class TerritorySubdistrictIn(SlugIn, SeoIn):
    territory_district_id: int
    title: Name
    description: Optional[str] = None


class TerritoryVillageIn(SlugIn):
    territory_subdistrict_id: int
    name: Name
    description: Optional[str] = None
    population: Optional[conint(ge=0)] = None
    highlights: Optional[str] = None
