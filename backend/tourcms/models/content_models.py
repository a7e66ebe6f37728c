from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from .db import Base
from .mixins import Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, GalleryImageMixin


INSTITUTION_KINDS = ("education", "healthcare")


class Culture(Identifiable, Sluggable, Timestamped, SeoFields, Base):
    __tablename__ = "cultures"

    subdistrict_id = Column(Integer, ForeignKey("subdistricts.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    subdistrict = relationship("Subdistrict")


class Institution(Identifiable, Sluggable, Timestamped, SeoFields, Base):
    """Schools, colleges, hospitals and clinics of a subdistrict."""

    __tablename__ = "institutions"

    subdistrict_id = Column(Integer, ForeignKey("subdistricts.id"), nullable=False, index=True)
    kind = Column(String(32), nullable=False, index=True)  # see INSTITUTION_KINDS
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    contact = Column(String(255), nullable=True)
    featured_image = Column(String(255), nullable=True)

    subdistrict = relationship("Subdistrict")


class SeasonalGuideImage(GalleryImageMixin, Base):
    __tablename__ = "seasonal_guide_images"
    __parent_key__ = "guide_id"

    guide_id = Column(Integer, ForeignKey("seasonal_guides.id"), nullable=False, index=True)


class SeasonalGuide(Identifiable, HasGallery, Timestamped, Base):
    __tablename__ = "seasonal_guides"
    __gallery__ = SeasonalGuideImage

    subdistrict_id = Column(Integer, ForeignKey("subdistricts.id"), nullable=False, index=True)
    season = Column(String(64), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    subdistrict = relationship("Subdistrict")
    images = relationship(
        SeasonalGuideImage,
        order_by=[SeasonalGuideImage.display_order, SeasonalGuideImage.id],
        viewonly=True,
    )


class WildlifeImage(GalleryImageMixin, Base):
    __tablename__ = "wildlife_images"
    __parent_key__ = "sanctuary_id"

    sanctuary_id = Column(Integer, ForeignKey("wildlife_sanctuaries.id"), nullable=False, index=True)


class WildlifeSanctuary(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "wildlife_sanctuaries"
    __gallery__ = WildlifeImage

    title = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    featured_image = Column(String(255), nullable=True)

    images = relationship(WildlifeImage, order_by=[WildlifeImage.display_order, WildlifeImage.id], viewonly=True)
