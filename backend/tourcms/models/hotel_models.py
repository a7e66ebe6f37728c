from sqlalchemy import Column, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from .db import Base
from .mixins import Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, GalleryImageMixin


ACCOMMODATION_TYPES = ("hotel", "tent", "resort", "homestay", "hostel", "guesthouse", "cottage")


class HotelImage(GalleryImageMixin, Base):
    __tablename__ = "hotel_images"
    __parent_key__ = "hotel_id"

    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=False, index=True)


class Hotel(Identifiable, Sluggable, HasGallery, Timestamped, SeoFields, Base):
    __tablename__ = "hotels"
    __gallery__ = HotelImage

    state_id = Column(Integer, ForeignKey("states.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    accommodation_type = Column(String(32), nullable=False, default="hotel", index=True)
    location = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    phone_number = Column(String(20), nullable=True)
    description = Column(Text, nullable=True)

    star_rating = Column(Float, nullable=True)
    price_per_night = Column(Float, nullable=True)
    total_rooms = Column(Integer, nullable=True)
    available_rooms = Column(Integer, nullable=True)

    check_in_time = Column(String(8), nullable=True)   # "HH:MM"
    check_out_time = Column(String(8), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    featured_image = Column(String(255), nullable=True)

    state = relationship("State")
    images = relationship(HotelImage, order_by=[HotelImage.display_order, HotelImage.id], viewonly=True)


class HotelRoom(Identifiable, Timestamped, Base):
    __tablename__ = "hotel_rooms"

    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    total_rooms = Column(Integer, nullable=False)
    available_rooms = Column(Integer, nullable=False)
    peak_season_price = Column(Float, nullable=True)
    off_season_price = Column(Float, nullable=True)
    amenities = Column(JSON, nullable=True)  # ["Wifi", "Heater", ...]
    description = Column(Text, nullable=True)

    hotel = relationship("Hotel")
