"""Every content type served under /api, described once."""
from ..config import MAX_PACKAGE_IMAGE_BYTES
from ..models.content_models import INSTITUTION_KINDS, Culture, Institution, SeasonalGuide, WildlifeSanctuary
from ..models.geo_models import (
    District,
    Place,
    Season,
    State,
    Subdistrict,
    Territory,
    TerritoryDistrict,
    TerritorySubdistrict,
    TerritoryVillage,
    Village,
)
from ..models.hotel_models import ACCOMMODATION_TYPES, Hotel, HotelRoom
from ..models.package_models import PackageAmenity, TourPackage
from ..services.packages import add_amenity_summary, apply_package_amenities, unlink_amenity
from ..services.resources import Resource, register
from .schemas_content import CultureIn, InstitutionIn, SeasonalGuideIn, WildlifeSanctuaryIn
from .schemas_geo import (
    DistrictIn,
    PlaceIn,
    SeasonIn,
    StateIn,
    SubdistrictIn,
    TerritoryDistrictIn,
    TerritoryIn,
    TerritorySubdistrictIn,
    TerritoryVillageIn,
    VillageIn,
)
from .schemas_hotels import HotelIn, HotelRoomIn
from .schemas_packages import AmenityIn, TourPackageIn


# ---- States and their hierarchy ----

STATES = register(Resource(
    name="states",
    label="State",
    model=State,
    schema=StateIn,
    upload_dir="states",
    image_field="image",
    search_fields=("name", "capital", "description"),
    order_by=("name",),
    children=(("districts", "state_id"), ("places", "state_id")),
    detach=(("tour-packages", "state_id"), ("hotels", "state_id")),
))

DISTRICTS = register(Resource(
    name="districts",
    label="District",
    model=District,
    schema=DistrictIn,
    upload_dir="districts",
    image_field="featured_image",
    filters={"state_id": "state_id"},
    search_fields=("name", "description"),
    order_by=("name",),
    names=(("state_name", "state", "name"),),
    parents={"state_id": "states"},
    children=(("subdistricts", "district_id"), ("seasons", "district_id")),
))

SUBDISTRICTS = register(Resource(
    name="subdistricts",
    label="Subdistrict",
    model=Subdistrict,
    schema=SubdistrictIn,
    upload_dir="subdistricts",
    image_field="featured_image",
    title_field="title",
    filters={"district_id": "district_id"},
    search_fields=("title", "description"),
    order_by=("title",),
    names=(("district_name", "district", "name"),),
    parents={"district_id": "districts"},
    children=(
        ("villages", "subdistrict_id"),
        ("cultures", "subdistrict_id"),
        ("education-healthcare", "subdistrict_id"),
        ("seasonal-guides", "subdistrict_id"),
    ),
))

VILLAGES = register(Resource(
    name="villages",
    label="Village",
    model=Village,
    schema=VillageIn,
    upload_dir="state-villages",
    image_field="featured_image",
    filters={"subdistrict_id": "subdistrict_id"},
    search_fields=("name", "description", "highlights"),
    order_by=("name",),
    names=(("subdistrict_name", "subdistrict", "title"),),
    parents={"subdistrict_id": "subdistricts"},
))

PLACES = register(Resource(
    name="places",
    label="Place",
    model=Place,
    schema=PlaceIn,
    upload_dir="places",
    image_field="featured_image",
    filters={"state_id": "state_id"},
    search_fields=("name", "short_description", "content"),
    order_by=("name",),
    names=(("state_name", "state", "name"),),
    parents={"state_id": "states"},
))

SEASONS = register(Resource(
    name="seasons",
    label="Season",
    model=Season,
    schema=SeasonIn,
    upload_dir="seasons",
    title_field="season_name",
    filters={"district_id": "district_id", "season": "season_name"},
    search_fields=("season_name", "description"),
    names=(("district_name", "district", "name"),),
    parents={"district_id": "districts"},
))


# ---- Union territories ----

TERRITORIES = register(Resource(
    name="territories",
    label="Territory",
    model=Territory,
    schema=TerritoryIn,
    upload_dir="territories",
    image_field="preview_image",
    title_field="title",
    search_fields=("title", "capital", "famous_for"),
    order_by=("title",),
    children=(("territory-districts", "territory_id"),),
))

TERRITORY_DISTRICTS = register(Resource(
    name="territory-districts",
    label="Territory district",
    model=TerritoryDistrict,
    schema=TerritoryDistrictIn,
    upload_dir="territory-districts",
    image_field="featured_image",
    filters={"territory_id": "territory_id"},
    search_fields=("name", "description"),
    order_by=("name",),
    names=(("territory_name", "territory", "title"),),
    parents={"territory_id": "territories"},
    children=(("territory-subdistricts", "territory_district_id"),),
))

TERRITORY_SUBDISTRICTS = register(Resource(
    name="territory-subdistricts",
    label="Territory subdistrict",
    model=TerritorySubdistrict,
    schema=TerritorySubdistrictIn,
    upload_dir="territory-subdistricts",
    image_field="featured_image",
    title_field="title",
    filters={"territory_district_id": "territory_district_id"},
    search_fields=("title", "description"),
    order_by=("title",),
    names=(("territory_district_name", "territory_district", "name"),),
    parents={"territory_district_id": "territory-districts"},
    children=(("territory-villages", "territory_subdistrict_id"),),
))

TERRITORY_VILLAGES = register(Resource(
    name="territory-villages",
    label="Territory village",
    model=TerritoryVillage,
    schema=TerritoryVillageIn,
    upload_dir="territory-villages",
    image_field="featured_image",
    filters={"territory_subdistrict_id": "territory_subdistrict_id"},
    search_fields=("name", "description", "highlights"),
    order_by=("name",),
    names=(("territory_subdistrict_name", "territory_subdistrict", "title"),),
    parents={"territory_subdistrict_id": "territory-subdistricts"},
))


# ---- Packages ----

TOUR_PACKAGES = register(Resource(
    name="tour-packages",
    label="Tour package",
    model=TourPackage,
    schema=TourPackageIn,
    upload_dir="packages",
    image_field="featured_image",
    filters={
        "state_id": "state_id",
        "category": "category",
        "is_featured": "is_featured",
        "is_active": "is_active",
    },
    search_fields=("name", "location", "category", "short_description"),
    order_by=("-id",),
    names=(("state_name", "state", "name"),),
    parents={"state_id": "states"},
    gallery_field="gallery_images",
    max_image_bytes=MAX_PACKAGE_IMAGE_BYTES,
    apply_relations=apply_package_amenities,
    serialize_extra=add_amenity_summary,
))

PACKAGE_AMENITIES = register(Resource(
    name="package-amenities",
    label="Amenity",
    model=PackageAmenity,
    schema=AmenityIn,
    search_fields=("name", "description"),
    order_by=("name",),
    before_delete=unlink_amenity,
))


# ---- Hotels ----

HOTELS = register(Resource(
    name="hotels",
    label="Hotel",
    model=Hotel,
    schema=HotelIn,
    upload_dir="hotels",
    image_field="featured_image",
    filters={"state_id": "state_id", "accommodation_type": "accommodation_type"},
    filter_choices={"accommodation_type": ACCOMMODATION_TYPES},
    search_fields=("name", "location", "address", "description"),
    order_by=("name",),
    names=(("state_name", "state", "name"),),
    parents={"state_id": "states"},
    children=(("hotel-rooms", "hotel_id"),),
))

HOTEL_ROOMS = register(Resource(
    name="hotel-rooms",
    label="Hotel room",
    model=HotelRoom,
    schema=HotelRoomIn,
    filters={"hotel_id": "hotel_id"},
    search_fields=("type", "description"),
    order_by=("type", "id"),
    names=(("hotel_name", "hotel", "name"),),
    parents={"hotel_id": "hotels"},
))


# ---- Subdistrict content ----

CULTURES = register(Resource(
    name="cultures",
    label="Culture",
    model=Culture,
    schema=CultureIn,
    upload_dir="cultures",
    image_field="featured_image",
    title_field="title",
    filters={"subdistrict_id": "subdistrict_id"},
    search_fields=("title", "description"),
    order_by=("title",),
    names=(("subdistrict_name", "subdistrict", "title"),),
    parents={"subdistrict_id": "subdistricts"},
))

INSTITUTIONS = register(Resource(
    name="education-healthcare",
    label="Institution",
    model=Institution,
    schema=InstitutionIn,
    upload_dir="institutions",
    image_field="featured_image",
    filters={"subdistrict_id": "subdistrict_id", "type": "kind"},
    filter_choices={"type": INSTITUTION_KINDS},
    search_fields=("name", "description", "address"),
    order_by=("name",),
    names=(("subdistrict_name", "subdistrict", "title"),),
    parents={"subdistrict_id": "subdistricts"},
))

SEASONAL_GUIDES = register(Resource(
    name="seasonal-guides",
    label="Seasonal guide",
    model=SeasonalGuide,
    schema=SeasonalGuideIn,
    upload_dir="weather/seasonal-guides",
    title_field="title",
    filters={"subdistrict_id": "subdistrict_id", "season": "season"},
    search_fields=("title", "description"),
    names=(("subdistrict_name", "subdistrict", "title"),),
    parents={"subdistrict_id": "subdistricts"},
))

WILDLIFE = register(Resource(
    name="wildlife",
    label="Wildlife sanctuary",
    model=WildlifeSanctuary,
    schema=WildlifeSanctuaryIn,
    upload_dir="wildlife",
    image_field="featured_image",
    title_field="title",
    search_fields=("title", "location", "description"),
    order_by=("title",),
))
