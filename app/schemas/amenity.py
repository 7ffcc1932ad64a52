from typing import Optional

from pydantic import BaseModel


class AmenityCreate(BaseModel):
    club_id: str
    restaurant: bool = False
    hotel: bool = False
    drinks: bool = False
    food: bool = False
    hot_shower: bool = False
    kids_room: bool = False
    wifi: bool = False
    bar: bool = False
    changing_room: bool = False


class AmenityUpdate(BaseModel):
    restaurant: Optional[bool] = None
    hotel: Optional[bool] = None
    drinks: Optional[bool] = None
    food: Optional[bool] = None
    hot_shower: Optional[bool] = None
    kids_room: Optional[bool] = None
    wifi: Optional[bool] = None
    bar: Optional[bool] = None
    changing_room: Optional[bool] = None
