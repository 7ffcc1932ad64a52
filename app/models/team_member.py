from enum import Enum as PyEnum

from sqlalchemy import Column, Date, ForeignKey, JSON, String, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class TeamMemberGender(str, PyEnum):
    male = "male"
    female = "female"
    other = "other"


class TeamMemberStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"
    suspended = "suspended"


class PermissionType(str, PyEnum):
    """Permisos de gestión asignables a un miembro del equipo"""
    manage_bookings_matches = "manage_bookings_matches"
    manage_customers = "manage_customers"
    manage_finances = "manage_finances"
    manage_coaches = "manage_coaches"
    manage_classes = "manage_classes"
    manage_communities = "manage_communities"
    manage_news_galleries = "manage_news_galleries"
    manage_announcements_notifications = "manage_announcements_notifications"


class ClubOwnerType(str, PyEnum):
    owner = "owner"
    co_owner = "co_owner"
    manager = "manager"
    admin = "admin"
    member = "member"


class TeamMember(ClubOwnedMixin, Base):
    """Miembro del equipo de gestión del club."""
    __tablename__ = "team_member"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(30), nullable=True)
    country_code = Column(String(10), nullable=True)
    country = Column(String(100), nullable=True)
    gender = Column(SQLEnum(TeamMemberGender, name="team_member_gender_enum"), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    position = Column(String(100), nullable=True)
    bio = Column(Text, nullable=True)
    avatar = Column(String(500), nullable=True)
    status = Column(SQLEnum(TeamMemberStatus, name="team_member_status_enum"), nullable=False, default=TeamMemberStatus.active, index=True)
    permissions = Column(JSON, nullable=False, default=list)  # lista de PermissionType
    club_owner = Column(SQLEnum(ClubOwnerType, name="club_owner_type_enum"), nullable=True)
    notes = Column(Text, nullable=True)

    club = relationship("Club", back_populates="team_members")
