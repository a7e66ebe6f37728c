"""create_content_tables

Revision ID: 3f1c9a2d7b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _slug():
    return sa.Column("slug", sa.String(255), nullable=False)


def _seo():
    return [
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
        sa.Column("meta_keywords", sa.Text(), nullable=True),
    ]


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _content_table(name, *columns, slug=True, seo=True):
    cols = [sa.Column("id", sa.Integer(), nullable=False)]
    cols += list(columns)
    if slug:
        cols.append(_slug())
    if seo:
        cols += _seo()
    cols += _timestamps()
    op.create_table(name, *cols, sa.PrimaryKeyConstraint("id"))
    op.create_index(f"ix_{name}_id", name, ["id"])
    if slug:
        op.create_index(f"ix_{name}_slug", name, ["slug"], unique=True)


def _parent(column, parent_table, nullable=False):
    return [
        sa.Column(column, sa.Integer(), nullable=nullable),
        sa.ForeignKeyConstraint([column], [f"{parent_table}.id"]),
    ]


def _image_table(name, parent_key, parent_table, *extra):
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), nullable=False),
        *_parent(parent_key, parent_table),
        sa.Column("image_path", sa.String(255), nullable=False),
        sa.Column("alt_text", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        *extra,
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(f"ix_{name}_id", name, ["id"])
    op.create_index(f"ix_{name}_{parent_key}", name, [parent_key])


def _fk_index(table, column):
    op.create_index(f"ix_{table}_{column}", table, [column])


def upgrade() -> None:
    """Upgrade schema."""
    # ---- States and their hierarchy ----
    _content_table(
        "states",
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("capital", sa.String(255), nullable=True),
        sa.Column("emoji", sa.String(16), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("activities", sa.Text(), nullable=True),
        sa.Column("image", sa.String(255), nullable=True),
    )
    _image_table("state_images", "state_id", "states")

    _content_table(
        "districts",
        *_parent("state_id", "states"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("districts", "state_id")
    _image_table("district_images", "district_id", "districts")

    _content_table(
        "subdistricts",
        *_parent("district_id", "districts"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("subdistricts", "district_id")
    _image_table("subdistrict_images", "subdistrict_id", "subdistricts")

    _content_table(
        "villages",
        *_parent("subdistrict_id", "subdistricts"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("population", sa.Integer(), nullable=True),
        sa.Column("highlights", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
        seo=False,
    )
    _fk_index("villages", "subdistrict_id")
    _image_table("village_images", "village_id", "villages")

    _content_table(
        "places",
        *_parent("state_id", "states"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("places", "state_id")

    _content_table(
        "seasons",
        *_parent("district_id", "districts"),
        sa.Column("season_name", sa.String(64), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        slug=False,
        seo=False,
    )
    _fk_index("seasons", "district_id")
    _image_table("season_images", "season_id", "seasons", sa.Column("location", sa.String(255), nullable=True))

    # ---- Union territories ----
    _content_table(
        "territories",
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("capital", sa.String(255), nullable=False),
        sa.Column("famous_for", sa.Text(), nullable=True),
        sa.Column("preview_image", sa.String(255), nullable=True),
    )
    _image_table("territory_images", "territory_id", "territories")

    _content_table(
        "territory_districts",
        *_parent("territory_id", "territories"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("territory_districts", "territory_id")
    _image_table("territory_district_images", "territory_district_id", "territory_districts")

    _content_table(
        "territory_subdistricts",
        *_parent("territory_district_id", "territory_districts"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("territory_subdistricts", "territory_district_id")
    _image_table("territory_subdistrict_images", "territory_subdistrict_id", "territory_subdistricts")

    _content_table(
        "territory_villages",
        *_parent("territory_subdistrict_id", "territory_subdistricts"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("population", sa.Integer(), nullable=True),
        sa.Column("highlights", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
        seo=False,
    )
    _fk_index("territory_villages", "territory_subdistrict_id")
    _image_table("territory_village_images", "village_id", "territory_villages")

    # ---- Packages ----
    op.create_table(
        "package_amenities",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("icon", sa.String(64), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_package_amenities_id", "package_amenities", ["id"])

    _content_table(
        "tour_packages",
        *_parent("state_id", "states", nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("category", sa.String(128), nullable=True),
        sa.Column("short_description", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("quad_price", sa.Float(), nullable=True),
        sa.Column("double_price", sa.Float(), nullable=True),
        sa.Column("duration", sa.String(64), nullable=True),
        sa.Column("itinerary", sa.JSON(), nullable=True),
        sa.Column("hotels", sa.JSON(), nullable=True),
        sa.Column("inclusion", sa.Text(), nullable=True),
        sa.Column("exclusion", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("tour_packages", "state_id")
    _fk_index("tour_packages", "category")
    _image_table("package_images", "package_id", "tour_packages")

    op.create_table(
        "package_amenity_relations",
        sa.Column("package_id", sa.Integer(), nullable=False),
        sa.Column("amenity_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["package_id"], ["tour_packages.id"]),
        sa.ForeignKeyConstraint(["amenity_id"], ["package_amenities.id"]),
        sa.PrimaryKeyConstraint("package_id", "amenity_id"),
    )

    # ---- Hotels ----
    _content_table(
        "hotels",
        *_parent("state_id", "states", nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("accommodation_type", sa.String(32), nullable=False, server_default="hotel"),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("star_rating", sa.Float(), nullable=True),
        sa.Column("price_per_night", sa.Float(), nullable=True),
        sa.Column("total_rooms", sa.Integer(), nullable=True),
        sa.Column("available_rooms", sa.Integer(), nullable=True),
        sa.Column("check_in_time", sa.String(8), nullable=True),
        sa.Column("check_out_time", sa.String(8), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("hotels", "state_id")
    _fk_index("hotels", "accommodation_type")
    _image_table("hotel_images", "hotel_id", "hotels")

    _content_table(
        "hotel_rooms",
        *_parent("hotel_id", "hotels"),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("total_rooms", sa.Integer(), nullable=False),
        sa.Column("available_rooms", sa.Integer(), nullable=False),
        sa.Column("peak_season_price", sa.Float(), nullable=True),
        sa.Column("off_season_price", sa.Float(), nullable=True),
        sa.Column("amenities", sa.JSON(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        slug=False,
        seo=False,
    )
    _fk_index("hotel_rooms", "hotel_id")

    # ---- Subdistrict content ----
    _content_table(
        "cultures",
        *_parent("subdistrict_id", "subdistricts"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("cultures", "subdistrict_id")

    _content_table(
        "institutions",
        *_parent("subdistrict_id", "subdistricts"),
        sa.Column("kind", sa.String(32), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("contact", sa.String(255), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _fk_index("institutions", "subdistrict_id")
    _fk_index("institutions", "kind")

    _content_table(
        "seasonal_guides",
        *_parent("subdistrict_id", "subdistricts"),
        sa.Column("season", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        slug=False,
        seo=False,
    )
    _fk_index("seasonal_guides", "subdistrict_id")
    _fk_index("seasonal_guides", "season")
    _image_table("seasonal_guide_images", "guide_id", "seasonal_guides")

    _content_table(
        "wildlife_sanctuaries",
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(255), nullable=True),
    )
    _image_table("wildlife_images", "sanctuary_id", "wildlife_sanctuaries")


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "wildlife_images",
        "wildlife_sanctuaries",
        "seasonal_guide_images",
        "seasonal_guides",
        "institutions",
        "cultures",
        "hotel_rooms",
        "hotel_images",
        "hotels",
        "package_amenity_relations",
        "package_images",
        "tour_packages",
        "package_amenities",
        "territory_village_images",
        "territory_villages",
        "territory_subdistrict_images",
        "territory_subdistricts",
        "territory_district_images",
        "territory_districts",
        "territory_images",
        "territories",
        "season_images",
        "seasons",
        "places",
        "village_images",
        "villages",
        "subdistrict_images",
        "subdistricts",
        "district_images",
        "districts",
        "state_images",
        "states",
    ):
        op.drop_table(table)
