from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class LocationContact(ClubOwnedMixin, Base):
    """Ubicación y datos de contacto del club (uno por club)."""
    __tablename__ = "location_contact"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)

    # Ubicación (obligatoria)
    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    country = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)  # cómo llegar

    # Contacto
    email = Column(String(255), nullable=True)
    phone_country_code = Column(String(10), nullable=True)
    phone_number = Column(String(30), nullable=True)

    # Web y redes sociales
    website_link = Column(String(500), nullable=True)
    instagram_link = Column(String(500), nullable=True)
    tiktok_link = Column(String(500), nullable=True)
    facebook_link = Column(String(500), nullable=True)

    club = relationship("Club", back_populates="location_contact")
