from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from .db import Base
from .mixins import Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, GalleryImageMixin


# ---- States and their hierarchy ----

class StateImage(GalleryImageMixin, Base):
    __tablename__ = "state_images"
    __parent_key__ = "state_id"

    state_id = Column(Integer, ForeignKey("states.id"), nullable=False, index=True)


class State(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "states"
    __gallery__ = StateImage

    name = Column(String(255), nullable=False, unique=True)
    capital = Column(String(255), nullable=True)
    emoji = Column(String(16), nullable=True)
    description = Column(Text, nullable=True)
    activities = Column(Text, nullable=True)
    image = Column(String(255), nullable=True)

    images = relationship(StateImage, order_by=[StateImage.display_order, StateImage.id], viewonly=True)


class DistrictImage(GalleryImageMixin, Base):
    __tablename__ = "district_images"
    __parent_key__ = "district_id"

    district_id = Column(Integer, ForeignKey("districts.id"), nullable=False, index=True)


class District(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "districts"
    __gallery__ = DistrictImage

    state_id = Column(Integer, ForeignKey("states.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    state = relationship("State")
    images = relationship(DistrictImage, order_by=[DistrictImage.display_order, DistrictImage.id], viewonly=True)


class SubdistrictImage(GalleryImageMixin, Base):
    __tablename__ = "subdistrict_images"
    __parent_key__ = "subdistrict_id"

    subdistrict_id = Column(Integer, ForeignKey("subdistricts.id"), nullable=False, index=True)


class Subdistrict(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "subdistricts"
    __gallery__ = SubdistrictImage

    district_id = Column(Integer, ForeignKey("districts.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    district = relationship("District")
    images = relationship(SubdistrictImage, order_by=[SubdistrictImage.display_order, SubdistrictImage.id], viewonly=True)


class VillageImage(GalleryImageMixin, Base):
    __tablename__ = "village_images"
    __parent_key__ = "village_id"

    village_id = Column(Integer, ForeignKey("villages.id"), nullable=False, index=True)


class Village(Identifiable, Sluggable, HasGallery, Timestamped, Base):
    __tablename__ = "villages"
    __gallery__ = VillageImage

    subdistrict_id = Column(Integer, ForeignKey("subdistricts.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    population = Column(Integer, nullable=True)
    highlights = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    subdistrict = relationship("Subdistrict")
    images = relationship(VillageImage, order_by=[VillageImage.display_order, VillageImage.id], viewonly=True)


class Place(Identifiable, Sluggable, Timestamped, SeoFields, Base):
    __tablename__ = "places"

    state_id = Column(Integer, ForeignKey("states.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    short_description = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="published")  # "draft" | "published"
    featured_image = Column(String(255), nullable=True)

    state = relationship("State")


class SeasonImage(GalleryImageMixin, Base):
    __tablename__ = "season_images"
    __parent_key__ = "season_id"

    season_id = Column(Integer, ForeignKey("seasons.id"), nullable=False, index=True)
    location = Column(String(255), nullable=True)


class Season(Identifiable, HasGallery, Timestamped, Base):
    __tablename__ = "seasons"
    __gallery__ = SeasonImage

    district_id = Column(Integer, ForeignKey("districts.id"), nullable=False, index=True)
    season_name = Column(String(64), nullable=False)
    description = Column(Text, nullable=True)

    district = relationship("District")
    images = relationship(SeasonImage, order_by=[SeasonImage.display_order, SeasonImage.id], viewonly=True)


# ---- Union territories and their hierarchy ----

class TerritoryImage(GalleryImageMixin, Base):
    __tablename__ = "territory_images"
    __parent_key__ = "territory_id"

    territory_id = Column(Integer, ForeignKey("territories.id"), nullable=False, index=True)


class Territory(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "territories"
    __gallery__ = TerritoryImage

    title = Column(String(255), nullable=False)
    capital = Column(String(255), nullable=False)
    famous_for = Column(Text, nullable=True)
    preview_image = Column(String(255), nullable=True)

    images = relationship(TerritoryImage, order_by=[TerritoryImage.display_order, TerritoryImage.id], viewonly=True)


class TerritoryDistrictImage(GalleryImageMixin, Base):
    __tablename__ = "territory_district_images"
    __parent_key__ = "territory_district_id"

    territory_district_id = Column(Integer, ForeignKey("territory_districts.id"), nullable=False, index=True)


class TerritoryDistrict(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "territory_districts"
    __gallery__ = TerritoryDistrictImage

    territory_id = Column(Integer, ForeignKey("territories.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    territory = relationship("Territory")
    images = relationship(
        TerritoryDistrictImage,
        order_by=[TerritoryDistrictImage.display_order, TerritoryDistrictImage.id],
        viewonly=True,
    )


class TerritorySubdistrictImage(GalleryImageMixin, Base):
    __tablename__ = "territory_subdistrict_images"
    __parent_key__ = "territory_subdistrict_id"

    territory_subdistrict_id = Column(Integer, ForeignKey("territory_subdistricts.id"), nullable=False, index=True)


class TerritorySubdistrict(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "territory_subdistricts"
    __gallery__ = TerritorySubdistrictImage

    territory_district_id = Column(Integer, ForeignKey("territory_districts.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    territory_district = relationship("TerritoryDistrict")
    images = relationship(
        TerritorySubdistrictImage,
        order_by=[TerritorySubdistrictImage.display_order, TerritorySubdistrictImage.id],
        viewonly=True,
    )


class TerritoryVillageImage(GalleryImageMixin, Base):
    __tablename__ = "territory_village_images"
    __parent_key__ = "village_id"

    village_id = Column(Integer, ForeignKey("territory_villages.id"), nullable=False, index=True)


class TerritoryVillage(Identifiable, Sluggable, HasGallery, Timestamped, Base):
    __tablename__ = "territory_villages"
    __gallery__ = TerritoryVillageImage

    territory_subdistrict_id = Column(Integer, ForeignKey("territory_subdistricts.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    population = Column(Integer, nullable=True)
    highlights = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    territory_subdistrict = relationship("TerritorySubdistrict")
    images = relationship(
        TerritoryVillageImage,
        order_by=[TerritoryVillageImage.display_order, TerritoryVillageImage.id],
        viewonly=True,
    )
