from enum import Enum as PyEnum

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, JSON, String, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class MembershipStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"


class Membership(ClubOwnedMixin, Base):
    """Plan de membresía ofrecido por el club."""
    __tablename__ = "membership"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    services = Column(JSON, nullable=False, default=list)
    price = Column(Float, nullable=True)
    currency = Column(String(10), nullable=True)
    number_of_booking_hours = Column(Integer, nullable=True)
    resources = Column(JSON, nullable=True)
    memberships_limit = Column(Integer, nullable=True)
    fixed_discount = Column(Float, nullable=True)  # porcentaje
    period_type = Column(String(50), nullable=True)
    start_at = Column(DateTime, nullable=True)
    end_at = Column(DateTime, nullable=True)
    status = Column(SQLEnum(MembershipStatus, name="membership_status_enum"), nullable=False, default=MembershipStatus.active)

    club = relationship("Club", back_populates="memberships")
