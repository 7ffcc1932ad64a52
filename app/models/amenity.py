from sqlalchemy import Boolean, Column, ForeignKey, String
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class Amenity(ClubOwnedMixin, Base):
    """Servicios disponibles en las instalaciones (uno por club)."""
    __tablename__ = "amenity"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    restaurant = Column(Boolean, nullable=False, default=False)
    hotel = Column(Boolean, nullable=False, default=False)
    drinks = Column(Boolean, nullable=False, default=False)
    food = Column(Boolean, nullable=False, default=False)
    hot_shower = Column(Boolean, nullable=False, default=False)
    kids_room = Column(Boolean, nullable=False, default=False)
    wifi = Column(Boolean, nullable=False, default=False)
    bar = Column(Boolean, nullable=False, default=False)
    changing_room = Column(Boolean, nullable=False, default=False)

    club = relationship("Club", back_populates="amenity")
