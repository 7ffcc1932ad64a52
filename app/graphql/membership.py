from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.graphql.enums import MembershipStatus
from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.membership import MembershipCreate, MembershipUpdate
from app.services.membership import membership_service


@strawberry.federation.type(keys=["id"], name="Membership")
class MembershipType:
    id: strawberry.ID
    club_id: str
    title: str
    services: List[str]
    price: Optional[float]
    currency: Optional[str]
    number_of_booking_hours: Optional[int]
    resources: Optional[List[str]]
    memberships_limit: Optional[int]
    fixed_discount: Optional[float]
    period_type: Optional[str]
    start_at: Optional[datetime]
    end_at: Optional[datetime]
    status: MembershipStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return membership_service.get(info.context["db"], id)


@strawberry.input
class CreateMembershipInput:
    club_id: str
    title: str
    services: Optional[List[str]] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    number_of_booking_hours: Optional[int] = None
    resources: Optional[List[str]] = None
    memberships_limit: Optional[int] = None
    fixed_discount: Optional[float] = None
    period_type: Optional[str] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    status: Optional[MembershipStatus] = None


@strawberry.input
class UpdateMembershipInput:
    title: Optional[str] = strawberry.UNSET
    services: Optional[List[str]] = strawberry.UNSET
    price: Optional[float] = strawberry.UNSET
    currency: Optional[str] = strawberry.UNSET
    number_of_booking_hours: Optional[int] = strawberry.UNSET
    resources: Optional[List[str]] = strawberry.UNSET
    memberships_limit: Optional[int] = strawberry.UNSET
    fixed_discount: Optional[float] = strawberry.UNSET
    period_type: Optional[str] = strawberry.UNSET
    start_at: Optional[datetime] = strawberry.UNSET
    end_at: Optional[datetime] = strawberry.UNSET
    status: Optional[MembershipStatus] = strawberry.UNSET


@strawberry.type
class MembershipQuery:
    @strawberry.field
    def get_memberships(self, info: Info, club_id: Optional[str] = None) -> List[MembershipType]:
        return membership_service.find_all(info.context["db"], club_id)

    @strawberry.field
    def get_membership(self, info: Info, id: strawberry.ID) -> Optional[MembershipType]:
        return membership_service.get(info.context["db"], id)


@strawberry.type
class MembershipMutation:
    @strawberry.mutation
    def create_membership(self, info: Info, input: CreateMembershipInput) -> MembershipType:
        return membership_service.create(info.context["db"], to_schema(MembershipCreate, input))

    @strawberry.mutation
    def update_membership(self, info: Info, id: strawberry.ID, input: UpdateMembershipInput) -> MembershipType:
        return membership_service.update(info.context["db"], id, to_update_schema(MembershipUpdate, input))

    @strawberry.mutation
    def delete_membership(self, info: Info, id: strawberry.ID) -> str:
        deleted = membership_service.remove(info.context["db"], id)
        return deleted_message(deleted, "Membership", f"Membership with ID {id} not found")
