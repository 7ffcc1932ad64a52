from enum import Enum as PyEnum

from sqlalchemy import Column, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class PromoPriceType(str, PyEnum):
    discount_percent = "discount_percent"
    discount_amount = "discount_amount"


class Pricing(ClubOwnedMixin, Base):
    """Regla de precio por franja horaria y días de la semana."""
    __tablename__ = "pricing"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    weekdays = Column(JSON, nullable=False, default=list)
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)  # HH:MM
    resource_ids = Column(JSON, nullable=True)
    user_group_ids = Column(JSON, nullable=True)
    membership_ids = Column(JSON, nullable=True)
    price = Column(Float, nullable=True)
    currency = Column(String(8), nullable=True)
    type = Column(String(20), nullable=False, default="single")
    period = Column(String(20), nullable=False, default="single")

    club = relationship("Club", back_populates="pricing")


class PromoCode(ClubOwnedMixin, Base):
    """Código promocional aplicable a servicios, recursos, grupos o membresías."""
    __tablename__ = "promocode"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    name = Column(Text, nullable=True)
    service_ids = Column(JSON, nullable=False, default=list)
    resource_ids = Column(JSON, nullable=True)
    user_group_ids = Column(JSON, nullable=True)
    membership_ids = Column(JSON, nullable=True)
    promo_period = Column(Text, nullable=True)
    custom_period_number = Column(Integer, nullable=True)
    custom_period_string = Column(Text, nullable=True)
    price_type = Column(String(30), nullable=True)  # PromoPriceType
    amount = Column(Float, nullable=True)

    club = relationship("Club", back_populates="promocodes")
