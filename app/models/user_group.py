from enum import Enum as PyEnum

from sqlalchemy import Column, ForeignKey, Integer, JSON, String, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class UserGroupStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"


class UserGroup(ClubOwnedMixin, Base):
    """Grupo de clientes con descuentos y límites propios."""
    __tablename__ = "user_group"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    color = Column(String(20), nullable=False)  # hexadecimal
    services = Column(JSON, nullable=False, default=list)
    fixed_discount = Column(Integer, nullable=True)
    max_customers = Column(Integer, nullable=True)
    status = Column(SQLEnum(UserGroupStatus, name="user_group_status_enum"), nullable=False, default=UserGroupStatus.active)

    club = relationship("Club", back_populates="user_groups")
