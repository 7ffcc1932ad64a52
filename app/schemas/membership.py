from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from app.models.membership import MembershipStatus


class MembershipBase(BaseModel):
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, max_length=10)
    number_of_booking_hours: Optional[int] = Field(None, ge=0)
    resources: Optional[List[str]] = None
    memberships_limit: Optional[int] = Field(None, ge=0)
    fixed_discount: Optional[float] = Field(None, ge=0, le=100, title="Descuento fijo (%)")
    period_type: Optional[str] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_period(self):
        if self.start_at and self.end_at and self.end_at < self.start_at:
            raise ValueError("end_at no puede ser anterior a start_at")
        return self


class MembershipCreate(MembershipBase):
    club_id: str
    title: str = Field(..., min_length=1, max_length=255)
    services: List[str] = Field(default_factory=list)
    status: MembershipStatus = MembershipStatus.active


class MembershipUpdate(MembershipBase):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    services: Optional[List[str]] = None
    status: Optional[MembershipStatus] = None
