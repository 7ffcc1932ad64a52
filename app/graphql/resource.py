from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.graphql.enums import ResourceProperty, ResourceServiceType, ResourceStatus, ResourceType
from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.resource import ResourceCreate, ResourceUpdate
from app.services.resource import resource_service


@strawberry.federation.type(keys=["id"], name="Resource")
class ResourceObjectType:
    id: strawberry.ID
    club_id: str
    title: str
    service: ResourceServiceType
    type: ResourceType
    property: ResourceProperty
    description: Optional[str]
    enable_online_booking: bool
    color: str
    status: ResourceStatus
    note: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return resource_service.get(info.context["db"], id)


@strawberry.input
class CreateResourceInput:
    club_id: str
    title: str
    service: ResourceServiceType
    type: ResourceType
    property: ResourceProperty
    color: str
    description: Optional[str] = None
    enable_online_booking: Optional[bool] = None
    status: Optional[ResourceStatus] = None
    note: Optional[str] = None


@strawberry.input
class UpdateResourceInput:
    title: Optional[str] = strawberry.UNSET
    service: Optional[ResourceServiceType] = strawberry.UNSET
    type: Optional[ResourceType] = strawberry.UNSET
    property: Optional[ResourceProperty] = strawberry.UNSET
    color: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    enable_online_booking: Optional[bool] = strawberry.UNSET
    status: Optional[ResourceStatus] = strawberry.UNSET
    note: Optional[str] = strawberry.UNSET


@strawberry.type
class ResourceQuery:
    @strawberry.field
    def get_resources(self, info: Info) -> List[ResourceObjectType]:
        return resource_service.find_all(info.context["db"])

    @strawberry.field
    def get_resources_by_club_id(self, info: Info, club_id: str) -> List[ResourceObjectType]:
        return resource_service.find_by_club_id(info.context["db"], club_id)

    @strawberry.field
    def get_resource(self, info: Info, id: strawberry.ID) -> ResourceObjectType:
        return resource_service.find_one(info.context["db"], id)

    @strawberry.field
    def get_resources_by_service(self, info: Info, service: ResourceServiceType) -> List[ResourceObjectType]:
        return resource_service.find_by_service(info.context["db"], service)

    @strawberry.field
    def get_resources_by_status(self, info: Info, status: ResourceStatus) -> List[ResourceObjectType]:
        return resource_service.find_by_status(info.context["db"], status)


@strawberry.type
class ResourceMutation:
    @strawberry.mutation
    def create_resource(self, info: Info, input: CreateResourceInput) -> ResourceObjectType:
        return resource_service.create(info.context["db"], to_schema(ResourceCreate, input))

    @strawberry.mutation
    def update_resource(self, info: Info, id: strawberry.ID, input: UpdateResourceInput) -> ResourceObjectType:
        return resource_service.update(info.context["db"], id, to_update_schema(ResourceUpdate, input))

    @strawberry.mutation
    def delete_resource(self, info: Info, id: strawberry.ID) -> str:
        deleted = resource_service.remove(info.context["db"], id)
        return deleted_message(deleted, "Resource", f"Resource with ID {id} not found")
