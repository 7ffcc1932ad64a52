from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.amenity import AmenityCreate, AmenityUpdate
from app.services.amenity import amenity_service


@strawberry.federation.type(keys=["id"], name="Amenity")
class AmenityType:
    id: strawberry.ID
    club_id: str
    restaurant: bool
    hotel: bool
    drinks: bool
    food: bool
    hot_shower: bool
    kids_room: bool
    wifi: bool
    bar: bool
    changing_room: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return amenity_service.get(info.context["db"], id)


@strawberry.input
class CreateAmenityInput:
    club_id: str
    restaurant: Optional[bool] = None
    hotel: Optional[bool] = None
    drinks: Optional[bool] = None
    food: Optional[bool] = None
    hot_shower: Optional[bool] = None
    kids_room: Optional[bool] = None
    wifi: Optional[bool] = None
    bar: Optional[bool] = None
    changing_room: Optional[bool] = None


@strawberry.input
class UpdateAmenityInput:
    restaurant: Optional[bool] = strawberry.UNSET
    hotel: Optional[bool] = strawberry.UNSET
    drinks: Optional[bool] = strawberry.UNSET
    food: Optional[bool] = strawberry.UNSET
    hot_shower: Optional[bool] = strawberry.UNSET
    kids_room: Optional[bool] = strawberry.UNSET
    wifi: Optional[bool] = strawberry.UNSET
    bar: Optional[bool] = strawberry.UNSET
    changing_room: Optional[bool] = strawberry.UNSET


@strawberry.type
class AmenityQuery:
    @strawberry.field
    def get_amenities(self, info: Info) -> List[AmenityType]:
        return amenity_service.find_all(info.context["db"])

    @strawberry.field
    def get_amenity_by_club_id(self, info: Info, club_id: str) -> Optional[AmenityType]:
        return amenity_service.find_by_club_id(info.context["db"], club_id)

    @strawberry.field
    def get_amenity(self, info: Info, id: strawberry.ID) -> Optional[AmenityType]:
        return amenity_service.get(info.context["db"], id)


@strawberry.type
class AmenityMutation:
    @strawberry.mutation
    def create_amenity(self, info: Info, input: CreateAmenityInput) -> AmenityType:
        return amenity_service.create(info.context["db"], to_schema(AmenityCreate, input))

    @strawberry.mutation
    def update_amenity(self, info: Info, id: strawberry.ID, input: UpdateAmenityInput) -> AmenityType:
        return amenity_service.update(info.context["db"], id, to_update_schema(AmenityUpdate, input))

    @strawberry.mutation
    def update_amenity_by_club_id(self, info: Info, club_id: str, input: UpdateAmenityInput) -> AmenityType:
        return amenity_service.update_by_club_id(info.context["db"], club_id, to_update_schema(AmenityUpdate, input))

    @strawberry.mutation
    def delete_amenity(self, info: Info, id: strawberry.ID) -> str:
        deleted = amenity_service.remove(info.context["db"], id)
        return deleted_message(deleted, "Amenity", f"Amenity with ID {id} not found")

    @strawberry.mutation
    def delete_amenity_by_club_id(self, info: Info, club_id: str) -> str:
        deleted = amenity_service.remove_by_club_id(info.context["db"], club_id)
        return deleted_message(deleted, "Amenity", f"Amenity for club {club_id} not found")
