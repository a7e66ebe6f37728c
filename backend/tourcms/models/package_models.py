from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, JSON, String, Table, Text
from sqlalchemy.orm import relationship

from .db import Base
from .mixins import Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, GalleryImageMixin


package_amenity_relations = Table(
    "package_amenity_relations",
    Base.metadata,
    Column("package_id", Integer, ForeignKey("tour_packages.id"), primary_key=True),
    Column("amenity_id", Integer, ForeignKey("package_amenities.id"), primary_key=True),
)


class PackageAmenity(Identifiable, Base):
    __tablename__ = "package_amenities"

    name = Column(String(255), nullable=False, unique=True)
    icon = Column(String(64), nullable=True)
    description = Column(Text, nullable=True)


class PackageImage(GalleryImageMixin, Base):
    __tablename__ = "package_images"
    __parent_key__ = "package_id"

    package_id = Column(Integer, ForeignKey("tour_packages.id"), nullable=False, index=True)


class TourPackage(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "tour_packages"
    __gallery__ = PackageImage

    state_id = Column(Integer, ForeignKey("states.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    category = Column(String(128), nullable=True, index=True)
    short_description = Column(Text, nullable=True)
    description = Column(Text, nullable=True)

    # ---- Prices ----
    price = Column(Float, nullable=False)
    quad_price = Column(Float, nullable=True)
    double_price = Column(Float, nullable=True)

    duration = Column(String(64), nullable=True)
    itinerary = Column(JSON, nullable=True)  # [{"day": 1, "title": ..., "description": ...}, ...]
    hotels = Column(JSON, nullable=True)
    inclusion = Column(Text, nullable=True)
    exclusion = Column(Text, nullable=True)

    status = Column(String(32), nullable=False, default="published")
    is_active = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    featured_image = Column(String(255), nullable=True)

    state = relationship("State")
    amenities = relationship(PackageAmenity, secondary=package_amenity_relations, order_by=PackageAmenity.name)
    images = relationship(PackageImage, order_by=[PackageImage.display_order, PackageImage.id], viewonly=True)
