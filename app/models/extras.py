from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, ForeignKey, JSON, String, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class ExtrasStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"
    suspended = "suspended"


class ExtrasUserType(str, PyEnum):
    default = "default"
    regular = "regular"
    premium = "premium"
    vip = "vip"


class ExtrasLimitType(str, PyEnum):
    hours = "hours"
    amount = "amount"
    percentage = "percentage"


class Extras(ClubOwnedMixin, Base):
    """
    Funcionalidades opcionales e integraciones del club.

    hour_bank_limits / wishlist_limits:
        [{"user_type": "vip", "limit_value": 10, "limit_type": "hours", "currency": null, "configuration": null}]
    """
    __tablename__ = "extras"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)

    # Bolsa de horas
    hour_bank = Column(Boolean, nullable=False, default=False)
    hour_bank_description = Column(Text, nullable=True)
    hour_bank_limits = Column(JSON, nullable=False, default=list)

    # Lista de espera
    wishlist = Column(Boolean, nullable=False, default=False)
    wishlist_description = Column(Text, nullable=True)
    wishlist_limits = Column(JSON, nullable=False, default=list)

    # Integraciones
    external_booking_system = Column(Text, nullable=True)
    payment_gateway = Column(Text, nullable=True)
    email_marketing = Column(Text, nullable=True)
    analytics_integration = Column(Text, nullable=True)
    social_media_integration = Column(Text, nullable=True)
    loyalty_program = Column(Text, nullable=True)
    notification_settings = Column(Text, nullable=True)
    api_keys = Column(Text, nullable=True)

    status = Column(SQLEnum(ExtrasStatus, name="extras_status_enum"), nullable=False, default=ExtrasStatus.active, index=True)
    notes = Column(Text, nullable=True)

    club = relationship("Club")
