from typing import Any, List, Optional
from pydantic import BaseModel, confloat, conint, constr, field_validator, model_validator

from ..models.hotel_models import ACCOMMODATION_TYPES
from .schemas_common import Name, SeoIn, SlugIn, parse_json_field

Time = constr(strip_whitespace=True, pattern=r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")


def _check_rooms(total, available):
    if total is not None and available is not None and available > total:
        raise ValueError("Available rooms cannot be greater than total rooms")


class HotelIn(SlugIn, SeoIn):
    state_id: Optional[int] = None
    name: Name
    accommodation_type: Optional[str] = "hotel"
    location: Optional[constr(max_length=255)] = None
    address: Optional[str] = None
    phone_number: Optional[constr(strip_whitespace=True, max_length=20)] = None
    description: Optional[str] = None

    star_rating: Optional[confloat(ge=0, le=5)] = None
    price_per_night: Optional[confloat(ge=0)] = None
    total_rooms: Optional[conint(ge=0)] = None
    available_rooms: Optional[conint(ge=0)] = None

    check_in_time: Optional[Time] = None
    check_out_time: Optional[Time] = None
    latitude: Optional[confloat(ge=-90, le=90)] = None
    longitude: Optional[confloat(ge=-180, le=180)] = None

    @field_validator("accommodation_type")
    @classmethod
    def check_type(cls, v):
        v = (v or "hotel").strip().lower()
        if v not in ACCOMMODATION_TYPES:
            raise ValueError(f"must be one of: {', '.join(ACCOMMODATION_TYPES)}")
        return v

    @model_validator(mode="after")
    def check_rooms(self):
        _check_rooms(self.total_rooms, self.available_rooms)
        return self


class HotelRoomIn(BaseModel):
    hotel_id: int
    type: constr(strip_whitespace=True, min_length=1, max_length=50)
    total_rooms: conint(ge=0)
    available_rooms: conint(ge=0)
    peak_season_price: Optional[confloat(ge=0)] = None
    off_season_price: Optional[confloat(ge=0)] = None
    amenities: Optional[List[Any]] = None
    description: Optional[str] = None

    @field_validator("amenities", mode="before")
    @classmethod
    def parse_amenities(cls, v):
        return parse_json_field(v)

    @model_validator(mode="after")
    def check_rooms(self):
        _check_rooms(self.total_rooms, self.available_rooms)
        return self
