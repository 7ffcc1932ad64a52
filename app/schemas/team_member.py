from datetime import date
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.team_member import ClubOwnerType, PermissionType, TeamMemberGender, TeamMemberStatus
from app.schemas.common import DateRange, PaginationParams, SortOrder


class TeamMemberBase(BaseModel):
    phone: Optional[str] = Field(None, max_length=30)
    country_code: Optional[str] = Field(None, max_length=10)
    country: Optional[str] = None
    gender: Optional[TeamMemberGender] = None
    date_of_birth: Optional[date] = None
    position: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = None
    avatar: Optional[str] = Field(None, max_length=500)
    club_owner: Optional[ClubOwnerType] = None
    notes: Optional[str] = None


class TeamMemberCreate(TeamMemberBase):
    club_id: str
    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    status: TeamMemberStatus = TeamMemberStatus.active
    permissions: List[PermissionType] = Field(default_factory=list)


class TeamMemberUpdate(TeamMemberBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    surname: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    status: Optional[TeamMemberStatus] = None
    permissions: Optional[List[PermissionType]] = None


class TeamMemberFilter(BaseModel):
    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    position: Optional[str] = None
    statuses: Optional[List[TeamMemberStatus]] = None
    gender: Optional[TeamMemberGender] = None
    permissions: Optional[List[PermissionType]] = None
    club_owner: Optional[ClubOwnerType] = None
    club_id: Optional[str] = None
    search_text: Optional[str] = Field(None, title="Búsqueda en nombre, apellidos, email y puesto")
    created_at: Optional[DateRange] = None
    updated_at: Optional[DateRange] = None


class TeamMemberSort(BaseModel):
    field: str = Field(..., title="name | surname | email | position | createdAt | updatedAt | status")
    order: SortOrder = SortOrder.ASC


class TeamMemberQuery(BaseModel):
    filters: Optional[TeamMemberFilter] = None
    sort: Optional[List[TeamMemberSort]] = None
    pagination: Optional[PaginationParams] = None
