from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, ForeignKey, String, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class ResourceServiceType(str, PyEnum):
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


class ResourceType(str, PyEnum):
    indoor = "indoor"
    outdoor = "outdoor"


class ResourceProperty(str, PyEnum):
    """Superficie / material de la pista"""
    clay = "clay"
    hard = "hard"
    grass = "grass"
    carpet = "carpet"
    concrete = "concrete"
    wood = "wood"
    synthetic = "synthetic"
    other = "other"


class ResourceStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"
    maintenance = "maintenance"


class Resource(ClubOwnedMixin, Base):
    """Recurso reservable del club (pista, campo, sala...)."""
    __tablename__ = "resource"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    service = Column(SQLEnum(ResourceServiceType, name="resource_service_type_enum"), nullable=False, index=True)
    type = Column(SQLEnum(ResourceType, name="resource_type_enum"), nullable=False)
    property = Column(SQLEnum(ResourceProperty, name="resource_property_enum"), nullable=False)
    description = Column(Text, nullable=True)
    enable_online_booking = Column(Boolean, nullable=False, default=True)
    color = Column(String(20), nullable=False)
    status = Column(SQLEnum(ResourceStatus, name="resource_status_enum"), nullable=False, default=ResourceStatus.active, index=True)
    note = Column(Text, nullable=True)

    club = relationship("Club", back_populates="resources")
