from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class LocationContactBase(BaseModel):
    description: Optional[str] = Field(None, title="Cómo llegar")
    email: Optional[EmailStr] = Field(None, title="Email de contacto")
    phone_country_code: Optional[str] = Field(None, max_length=10)
    phone_number: Optional[str] = Field(None, max_length=30)
    website_link: Optional[str] = Field(None, max_length=500)
    instagram_link: Optional[str] = Field(None, max_length=500)
    tiktok_link: Optional[str] = Field(None, max_length=500)
    facebook_link: Optional[str] = Field(None, max_length=500)


class LocationContactCreate(LocationContactBase):
    club_id: str = Field(..., title="ID del club")
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)


class LocationContactUpdate(LocationContactBase):
    address: Optional[str] = Field(None, min_length=1, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    country: Optional[str] = Field(None, min_length=1, max_length=100)
