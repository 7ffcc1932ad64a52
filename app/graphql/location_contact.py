from datetime import datetime
from typing import Optional

import strawberry
from strawberry.types import Info

from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.location_contact import LocationContactCreate, LocationContactUpdate
from app.services.location_contact import location_contact_service


@strawberry.federation.type(keys=["id"], name="LocationContact")
class LocationContactType:
    id: strawberry.ID
    club_id: str
    address: str
    city: str
    country: str
    description: Optional[str]
    email: Optional[str]
    phone_country_code: Optional[str]
    phone_number: Optional[str]
    website_link: Optional[str]
    instagram_link: Optional[str]
    tiktok_link: Optional[str]
    facebook_link: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return location_contact_service.get(info.context["db"], id)


@strawberry.input
class CreateLocationContactInput:
    club_id: str
    address: str
    city: str
    country: str
    description: Optional[str] = None
    email: Optional[str] = None
    phone_country_code: Optional[str] = None
    phone_number: Optional[str] = None
    website_link: Optional[str] = None
    instagram_link: Optional[str] = None
    tiktok_link: Optional[str] = None
    facebook_link: Optional[str] = None


@strawberry.input
class UpdateLocationContactInput:
    address: Optional[str] = strawberry.UNSET
    city: Optional[str] = strawberry.UNSET
    country: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    phone_country_code: Optional[str] = strawberry.UNSET
    phone_number: Optional[str] = strawberry.UNSET
    website_link: Optional[str] = strawberry.UNSET
    instagram_link: Optional[str] = strawberry.UNSET
    tiktok_link: Optional[str] = strawberry.UNSET
    facebook_link: Optional[str] = strawberry.UNSET


@strawberry.type
class LocationContactQuery:
    @strawberry.field
    def get_location_contact(self, info: Info, club_id: str) -> LocationContactType:
        return location_contact_service.get_by_club_id(info.context["db"], club_id)


@strawberry.type
class LocationContactMutation:
    @strawberry.mutation
    def create_location_contact(self, info: Info, input: CreateLocationContactInput) -> LocationContactType:
        return location_contact_service.create(info.context["db"], to_schema(LocationContactCreate, input))

    @strawberry.mutation
    def update_location_contact(
        self, info: Info, club_id: str, input: UpdateLocationContactInput
    ) -> LocationContactType:
        return location_contact_service.update_by_club_id(
            info.context["db"], club_id, to_update_schema(LocationContactUpdate, input)
        )

    @strawberry.mutation
    def delete_location_contact(self, info: Info, club_id: str) -> str:
        deleted = location_contact_service.remove_by_club_id(info.context["db"], club_id)
        return deleted_message(deleted, "Location contact", f"Location contact for club {club_id} not found")
