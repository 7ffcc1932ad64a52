from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.graphql.enums import UserGroupStatus
from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.user_group import UserGroupCreate, UserGroupUpdate
from app.services.user_group import user_group_service


@strawberry.federation.type(keys=["id"], name="UserGroup")
class UserGroupType:
    id: strawberry.ID
    club_id: str
    title: str
    color: str
    services: List[str]
    fixed_discount: Optional[int]
    max_customers: Optional[int]
    status: UserGroupStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return user_group_service.get(info.context["db"], id)


@strawberry.input
class CreateUserGroupInput:
    club_id: str
    title: str
    color: str
    services: Optional[List[str]] = None
    fixed_discount: Optional[int] = None
    max_customers: Optional[int] = None
    status: Optional[UserGroupStatus] = None


@strawberry.input
class UpdateUserGroupInput:
    title: Optional[str] = strawberry.UNSET
    color: Optional[str] = strawberry.UNSET
    services: Optional[List[str]] = strawberry.UNSET
    fixed_discount: Optional[int] = strawberry.UNSET
    max_customers: Optional[int] = strawberry.UNSET
    status: Optional[UserGroupStatus] = strawberry.UNSET


@strawberry.type
class UserGroupQuery:
    @strawberry.field
    def get_user_groups(self, info: Info, club_id: Optional[str] = None) -> List[UserGroupType]:
        return user_group_service.find_all(info.context["db"], club_id)

    @strawberry.field
    def get_user_group(self, info: Info, id: strawberry.ID) -> Optional[UserGroupType]:
        return user_group_service.get(info.context["db"], id)


@strawberry.type
class UserGroupMutation:
    @strawberry.mutation
    def create_user_group(self, info: Info, input: CreateUserGroupInput) -> UserGroupType:
        return user_group_service.create(info.context["db"], to_schema(UserGroupCreate, input))

    @strawberry.mutation
    def update_user_group(self, info: Info, id: strawberry.ID, input: UpdateUserGroupInput) -> UserGroupType:
        return user_group_service.update(info.context["db"], id, to_update_schema(UserGroupUpdate, input))

    @strawberry.mutation
    def delete_user_group(self, info: Info, id: strawberry.ID) -> str:
        deleted = user_group_service.remove(info.context["db"], id)
        return deleted_message(deleted, "User group", f"User group with ID {id} not found")
