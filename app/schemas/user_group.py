from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.user_group import UserGroupStatus

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class UserGroupCreate(BaseModel):
    club_id: str
    title: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., pattern=HEX_COLOR, title="Color hexadecimal")
    services: List[str] = Field(default_factory=list)
    fixed_discount: Optional[int] = Field(None, ge=0, le=100)
    max_customers: Optional[int] = Field(None, ge=0)
    status: UserGroupStatus = UserGroupStatus.active


class UserGroupUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    color: Optional[str] = Field(None, pattern=HEX_COLOR)
    services: Optional[List[str]] = None
    fixed_discount: Optional[int] = Field(None, ge=0, le=100)
    max_customers: Optional[int] = Field(None, ge=0)
    status: Optional[UserGroupStatus] = None
