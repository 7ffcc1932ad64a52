from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.pricing import PromoPriceType
from app.models.working_hours import DayOfWeek

HHMM = r"^\d{2}:\d{2}$"


class PricingCreate(BaseModel):
    club_id: str
    weekdays: List[DayOfWeek] = Field(default_factory=list)
    start_time: str = Field(..., pattern=HHMM)
    end_time: str = Field(..., pattern=HHMM)
    resource_ids: Optional[List[str]] = None
    user_group_ids: Optional[List[str]] = None
    membership_ids: Optional[List[str]] = None
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, max_length=8)
    type: str = Field("single", max_length=20)
    period: str = Field("single", max_length=20)


class PricingUpdate(BaseModel):
    weekdays: Optional[List[DayOfWeek]] = None
    start_time: Optional[str] = Field(None, pattern=HHMM)
    end_time: Optional[str] = Field(None, pattern=HHMM)
    resource_ids: Optional[List[str]] = None
    user_group_ids: Optional[List[str]] = None
    membership_ids: Optional[List[str]] = None
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, max_length=8)
    type: Optional[str] = Field(None, max_length=20)
    period: Optional[str] = Field(None, max_length=20)


class PromoCodeBase(BaseModel):
    name: Optional[str] = None
    resource_ids: Optional[List[str]] = None
    user_group_ids: Optional[List[str]] = None
    membership_ids: Optional[List[str]] = None
    promo_period: Optional[str] = None
    custom_period_number: Optional[int] = Field(None, ge=0)
    custom_period_string: Optional[str] = None
    price_type: Optional[PromoPriceType] = None
    amount: Optional[float] = Field(None, ge=0)


class PromoCodeCreate(PromoCodeBase):
    club_id: str
    service_ids: List[str] = Field(default_factory=list)


class PromoCodeUpdate(PromoCodeBase):
    service_ids: Optional[List[str]] = None
