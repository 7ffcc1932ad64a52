from typing import Optional

from pydantic import BaseModel, Field

from app.models.resource import ResourceProperty, ResourceServiceType, ResourceStatus, ResourceType


class ResourceCreate(BaseModel):
    club_id: str
    title: str = Field(..., min_length=1, max_length=255)
    service: ResourceServiceType
    type: ResourceType
    property: ResourceProperty
    description: Optional[str] = None
    enable_online_booking: bool = True
    color: str = Field(..., max_length=20)
    status: ResourceStatus = ResourceStatus.active
    note: Optional[str] = None


class ResourceUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    service: Optional[ResourceServiceType] = None
    type: Optional[ResourceType] = None
    property: Optional[ResourceProperty] = None
    description: Optional[str] = None
    enable_online_booking: Optional[bool] = None
    color: Optional[str] = Field(None, max_length=20)
    status: Optional[ResourceStatus] = None
    note: Optional[str] = None
