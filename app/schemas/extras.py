from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.extras import ExtrasLimitType, ExtrasStatus, ExtrasUserType
from app.schemas.common import DateRange, PaginationParams, SortOrder


class ExtrasUserLimit(BaseModel):
    user_type: ExtrasUserType
    limit_value: float = Field(..., ge=0)
    limit_type: ExtrasLimitType
    currency: Optional[str] = None
    configuration: Optional[str] = None


class ExtrasBase(BaseModel):
    hour_bank_description: Optional[str] = None
    wishlist_description: Optional[str] = None
    external_booking_system: Optional[str] = None
    payment_gateway: Optional[str] = None
    email_marketing: Optional[str] = None
    analytics_integration: Optional[str] = None
    social_media_integration: Optional[str] = None
    loyalty_program: Optional[str] = None
    notification_settings: Optional[str] = None
    api_keys: Optional[str] = None
    notes: Optional[str] = None


class ExtrasCreate(ExtrasBase):
    club_id: str
    hour_bank: bool = False
    hour_bank_limits: List[ExtrasUserLimit] = Field(default_factory=list)
    wishlist: bool = False
    wishlist_limits: List[ExtrasUserLimit] = Field(default_factory=list)
    status: ExtrasStatus = ExtrasStatus.active


class ExtrasUpdate(ExtrasBase):
    hour_bank: Optional[bool] = None
    hour_bank_limits: Optional[List[ExtrasUserLimit]] = None
    wishlist: Optional[bool] = None
    wishlist_limits: Optional[List[ExtrasUserLimit]] = None
    status: Optional[ExtrasStatus] = None


class ExtrasFilter(BaseModel):
    club_id: Optional[str] = None
    status: Optional[ExtrasStatus] = None
    hour_bank_enabled: Optional[bool] = None
    wishlist_enabled: Optional[bool] = None
    external_booking_system: Optional[str] = None
    payment_gateway: Optional[str] = None
    email_marketing: Optional[str] = None
    analytics_integration: Optional[str] = None
    social_media_integration: Optional[str] = None
    search_text: Optional[str] = Field(None, title="Búsqueda en descripciones y notas")
    created_at: Optional[DateRange] = None
    updated_at: Optional[DateRange] = None


class ExtrasSort(BaseModel):
    field: str = Field(..., title="createdAt | updatedAt | status | hourBankEnabled | wishlistEnabled")
    order: SortOrder = SortOrder.ASC


class ExtrasQuery(BaseModel):
    filters: Optional[ExtrasFilter] = None
    sort: Optional[List[ExtrasSort]] = None
    pagination: Optional[PaginationParams] = None


class IntegrationStats(BaseModel):
    hour_bank_enabled: int = 0
    wishlist_enabled: int = 0
    external_booking_count: int = 0
    payment_gateway_count: int = 0
    email_marketing_count: int = 0
    analytics_count: int = 0
    social_media_count: int = 0
