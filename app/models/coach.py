from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, Float, ForeignKey, JSON, String, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class CoachStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"
    suspended = "suspended"


class CoachGender(str, PyEnum):
    male = "male"
    female = "female"
    other = "other"


class LanguageLevel(str, PyEnum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"
    native = "native"


class PriceType(str, PyEnum):
    """Cálculo del precio de una clase"""
    per_class = "per_class"
    per_client = "per_client"


class Coach(ClubOwnedMixin, Base):
    """
    Entrenador del club.

    languages: [{"language": "es", "level": "native"}]
    experience_categories: [{"name": "Academia", "start_date": "2019-01-01", "end_date": null}]
    availability: [{"day": "monday", "is_open": true, "time_slots": [...]}]
    """
    __tablename__ = "coach"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone_country_code = Column(String(10), nullable=True)
    phone = Column(String(30), nullable=True)
    avatar = Column(String(500), nullable=True)
    gender = Column(SQLEnum(CoachGender, name="coach_gender_enum"), nullable=True)
    country = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    address = Column(String(255), nullable=True)

    languages = Column(JSON, nullable=True)
    services = Column(JSON, nullable=False, default=list)
    education = Column(Text, nullable=True)
    experience_categories = Column(JSON, nullable=True)
    work_experience = Column(Text, nullable=True)

    online_booking_enabled = Column(Boolean, nullable=True, default=False)
    availability = Column(JSON, nullable=True)
    resources = Column(Text, nullable=True)
    holiday_schedule = Column(Text, nullable=True)  # JSON serializado como texto
    status = Column(SQLEnum(CoachStatus, name="coach_status_enum"), nullable=False, default=CoachStatus.active)

    club = relationship("Club", back_populates="coaches")


class CoachClass(ClubOwnedMixin, Base):
    """
    Clase impartida por uno o varios entrenadores.

    coach: [{"coach_id": "...", "salary": 30.0, "add_to_balance": true}]
    """
    __tablename__ = "coach_classes"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    service = Column(JSON, nullable=False, default=list)
    group = Column(JSON, nullable=False, default=list)
    resource = Column(JSON, nullable=False, default=list)
    price_type = Column(SQLEnum(PriceType, name="price_type_enum"), nullable=False)
    price = Column(Float, nullable=False)
    coach = Column(JSON, nullable=False, default=list)

    club = relationship("Club")
