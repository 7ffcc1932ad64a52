from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, DateTime, JSON, String, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class ClubType(str, PyEnum):
    """Tipos de club soportados"""
    tennis = "tennis"
    padel = "padel"
    squash = "squash"
    badminton = "badminton"
    football = "football"
    basketball = "basketball"
    volleyball = "volleyball"
    fitness = "fitness"
    gym = "gym"
    swimming = "swimming"
    golf = "golf"
    multi_sport = "multi_sport"
    other = "other"


class SportsType(str, PyEnum):
    tennis = "tennis"
    padel = "padel"
    squash = "squash"
    badminton = "badminton"
    football = "football"
    basketball = "basketball"
    volleyball = "volleyball"
    fitness = "fitness"
    gym = "gym"
    swimming = "swimming"
    golf = "golf"
    other = "other"


class AdditionalService(str, PyEnum):
    """Servicios adicionales ofrecidos por el club"""
    restaurant = "restaurant"
    hotel = "hotel"
    drinks = "drinks"
    food = "food"
    hot_shower = "hot_shower"
    kids_room = "kids_room"
    wifi = "wifi"
    bar = "bar"
    changing_room = "changing_room"
    parking = "parking"
    locker_room = "locker_room"
    pro_shop = "pro_shop"
    coaching = "coaching"
    physiotherapy = "physiotherapy"
    massage = "massage"
    other = "other"


class SetupStatus(str, PyEnum):
    """Estado del proceso de configuración del club"""
    draft = "draft"
    in_progress = "in_progress"
    completed = "completed"
    abandoned = "abandoned"


class SetupStep(str, PyEnum):
    """Pasos de la configuración, en orden"""
    club_setup = "club_setup"
    location_contact = "location_contact"
    working_hours = "working_hours"
    resources = "resources"
    amenities = "amenities"
    memberships = "memberships"
    pricing = "pricing"
    user_groups = "user_groups"
    extras_integrations = "extras_integrations"
    coaches = "coaches"
    team_members = "team_members"  # paso final


class Club(ClubOwnedMixin, Base):
    """
    Registro de configuración de un club (raíz del agregado).
    Las entidades hijas referencian al club mediante club_id.
    """
    __tablename__ = "club"

    # Información general
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    type_of_club = Column(String(100), nullable=True)
    sports = Column(JSON, nullable=True)  # ["tennis", "padel"]
    additional_services = Column(JSON, nullable=True)
    is_part_of_chain = Column(Boolean, nullable=True, default=False)
    chain_id = Column(String(100), nullable=True)

    # Apariencia y galería
    logo = Column(String(500), nullable=True)
    gallery_images = Column(JSON, nullable=True)

    # Reservas
    enable_online_bookings = Column(Boolean, nullable=False, default=False)
    enable_class_bookings = Column(Boolean, nullable=False, default=False)
    enable_open_matches = Column(Boolean, nullable=False, default=False)
    enable_academy_management = Column(Boolean, nullable=False, default=False)
    enable_event_management = Column(Boolean, nullable=False, default=False)
    enable_league_tournament_management = Column(Boolean, nullable=False, default=False)

    # Pagos
    currency = Column(String(10), nullable=True)
    online_payment = Column(Boolean, nullable=False, default=False)
    onsite_payment = Column(Boolean, nullable=False, default=False)
    by_invoice = Column(Boolean, nullable=False, default=False)

    # Seguimiento de la configuración
    setup_status = Column(SQLEnum(SetupStatus, name="setup_status_enum"), nullable=True, default=SetupStatus.draft, index=True)
    current_step = Column(SQLEnum(SetupStep, name="setup_step_enum"), nullable=True)
    completed_steps = Column(JSON, nullable=True)  # lista sin duplicados de SetupStep
    last_saved_at = Column(DateTime, nullable=True)

    # Relaciones (sin borrado en cascada)
    location_contact = relationship("LocationContact", back_populates="club", uselist=False)
    working_hours_calendar = relationship("WorkingHoursCalendar", back_populates="club", uselist=False)
    amenity = relationship("Amenity", back_populates="club", uselist=False)
    resources = relationship("Resource", back_populates="club")
    coaches = relationship("Coach", back_populates="club")
    team_members = relationship("TeamMember", back_populates="club")
    memberships = relationship("Membership", back_populates="club")
    pricing = relationship("Pricing", back_populates="club")
    promocodes = relationship("PromoCode", back_populates="club")
    user_groups = relationship("UserGroup", back_populates="club")

    def __repr__(self):
        return f"<Club(id={self.id}, title='{self.title}', setup_status='{self.setup_status}')>"
