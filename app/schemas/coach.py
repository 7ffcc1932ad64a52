from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.coach import CoachGender, CoachStatus, LanguageLevel, PriceType
from app.schemas.common import PaginationParams, SortOrder
from app.schemas.working_hours import AvailableDay


class LanguageProficiency(BaseModel):
    language: str
    level: LanguageLevel


class ExperienceCategory(BaseModel):
    name: str
    start_date: str
    end_date: Optional[str] = None


class CoachBase(BaseModel):
    phone_country_code: Optional[str] = Field(None, max_length=10)
    phone: Optional[str] = Field(None, max_length=30)
    avatar: Optional[str] = Field(None, max_length=500)
    gender: Optional[CoachGender] = None
    country: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    languages: Optional[List[LanguageProficiency]] = None
    education: Optional[str] = None
    experience_categories: Optional[List[ExperienceCategory]] = None
    work_experience: Optional[str] = None
    online_booking_enabled: Optional[bool] = None
    availability: Optional[List[AvailableDay]] = None
    resources: Optional[str] = None
    holiday_schedule: Optional[str] = Field(None, title="Calendario de vacaciones (JSON como texto)")


class CoachCreate(CoachBase):
    club_id: str
    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    services: List[str] = Field(default_factory=list)
    status: CoachStatus = CoachStatus.active


class CoachUpdate(CoachBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    surname: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    services: Optional[List[str]] = None
    status: Optional[CoachStatus] = None


class CoachFilter(BaseModel):
    search_text: Optional[str] = None
    club_id: Optional[str] = None
    gender: Optional[CoachGender] = None
    country: Optional[str] = None
    city: Optional[str] = None
    services: Optional[List[str]] = None


class CoachSort(BaseModel):
    field: str = Field(..., title="name | surname | email | createdAt | updatedAt")
    order: SortOrder = SortOrder.ASC


class CoachQuery(BaseModel):
    filters: Optional[CoachFilter] = None
    sort: Optional[List[CoachSort]] = None
    pagination: Optional[PaginationParams] = None


class CoachAssignment(BaseModel):
    coach_id: str
    salary: float = Field(..., ge=0)
    add_to_balance: bool = False


class CoachClassCreate(BaseModel):
    club_id: str
    title: str = Field(..., min_length=1, max_length=255)
    service: List[str] = Field(default_factory=list)
    group: List[str] = Field(default_factory=list)
    resource: List[str] = Field(default_factory=list)
    price_type: PriceType
    price: float = Field(..., ge=0)
    coach: List[CoachAssignment] = Field(default_factory=list)


class CoachClassUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    service: Optional[List[str]] = None
    group: Optional[List[str]] = None
    resource: Optional[List[str]] = None
    price_type: Optional[PriceType] = None
    price: Optional[float] = Field(None, ge=0)
    coach: Optional[List[CoachAssignment]] = None


class CoachClassFilter(BaseModel):
    club_id: str
    title: Optional[str] = None
    service: Optional[List[str]] = None
    group: Optional[List[str]] = None
    resource: Optional[List[str]] = None
    price_type: Optional[PriceType] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    coach_ids: Optional[List[str]] = None
    limit: int = Field(10, ge=1, le=100)
    offset: int = Field(0, ge=0)
