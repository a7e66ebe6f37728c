from typing import Any, List, Optional
from pydantic import AliasChoices, BaseModel, Field, confloat, constr, field_validator

from .schemas_common import Name, SeoIn, SlugIn, parse_id_list, parse_json_field


class TourPackageIn(SlugIn, SeoIn):
    state_id: Optional[int] = None
    name: Name
    location: Optional[constr(max_length=255)] = None
    category: Optional[constr(max_length=128)] = None
    short_description: Optional[str] = None
    description: Optional[str] = None

    price: confloat(ge=0)
    quad_price: Optional[confloat(ge=0)] = None
    double_price: Optional[confloat(ge=0)] = None

    duration: Optional[constr(max_length=64)] = None
    itinerary: Optional[List[Any]] = None
    hotels: Optional[List[Any]] = None
    inclusion: Optional[str] = None
    exclusion: Optional[str] = None

    status: Optional[constr(pattern=r"^(draft|published)$")] = "published"
    is_active: Optional[bool] = True
    is_featured: Optional[bool] = False

    # Not a column: replaces the package's amenity set when given
    amenity_ids: Optional[List[int]] = None

    @field_validator("itinerary", "hotels", mode="before")
    @classmethod
    def parse_json(cls, v):
        return parse_json_field(v)

    @field_validator("amenity_ids", mode="before")
    @classmethod
    def parse_ids(cls, v):
        return parse_id_list(v)


class AmenityIn(BaseModel):
    name: Name
    icon: Optional[constr(max_length=64)] = None
    description: Optional[str] = None


class AmenityIdsIn(BaseModel):
    amenity_ids: List[int]

    @field_validator("amenity_ids", mode="before")
    @classmethod
    def parse_ids(cls, v):
        return parse_id_list(v) or []


class EnquiryIn(BaseModel):
    name: Name
    email: constr(strip_whitespace=True, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: constr(strip_whitespace=True, min_length=5, max_length=32)
    # The public site posts camelCase keys
    package_name: Optional[str] = Field(None, validation_alias=AliasChoices("package_name", "packageName"))
    date: Optional[str] = None
    persons: Optional[int] = None
    package_type: Optional[str] = Field(None, validation_alias=AliasChoices("package_type", "packageType"))
    message: Optional[str] = None


class WeatherOut(BaseModel):
    city: str
    temperature: float
    climate_description: str
    icon: Optional[str] = None
