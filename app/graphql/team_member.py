"""
Miembros del equipo del club.

Crear un miembro cierra la configuración del club (`setupStatus=completed`).
"""
from datetime import date, datetime
from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.graphql.common import DateRangeInput, PaginationInput, SortInput
from app.graphql.enums import ClubOwnerType, PermissionType, TeamMemberGender, TeamMemberStatus
from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.team_member import TeamMemberCreate, TeamMemberQuery as TeamMemberQuerySchema, TeamMemberUpdate
from app.services.team_member import team_member_service


@strawberry.federation.type(keys=["id"], name="TeamMember")
class TeamMemberType:
    id: strawberry.ID
    club_id: str
    name: str
    surname: str
    email: str
    phone: Optional[str]
    country_code: Optional[str]
    country: Optional[str]
    gender: Optional[TeamMemberGender]
    date_of_birth: Optional[date]
    position: Optional[str]
    bio: Optional[str]
    avatar: Optional[str]
    status: TeamMemberStatus
    permissions: List[str]
    club_owner: Optional[ClubOwnerType]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

    @strawberry.field(description="Nombre y apellidos")
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()

    @strawberry.field(description="Teléfono con prefijo del país")
    def full_phone(self) -> str:
        if not self.phone:
            return ""
        return f"{self.country_code or ''}{self.phone}"

    @strawberry.field
    def is_active(self) -> bool:
        return self.status == TeamMemberStatus.active

    @strawberry.field
    def permission_count(self) -> int:
        return len(self.permissions or [])

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return team_member_service.get(info.context["db"], id)


@strawberry.type
class TeamMemberSearchResult:
    team_members: List[TeamMemberType]
    total: int
    page: int
    limit: int
    total_pages: int


@strawberry.input
class CreateTeamMemberInput:
    club_id: str
    name: str
    surname: str
    email: str
    phone: Optional[str] = None
    country_code: Optional[str] = None
    country: Optional[str] = None
    gender: Optional[TeamMemberGender] = None
    date_of_birth: Optional[date] = None
    position: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    status: Optional[TeamMemberStatus] = None
    permissions: Optional[List[PermissionType]] = None
    club_owner: Optional[ClubOwnerType] = None
    notes: Optional[str] = None


@strawberry.input
class UpdateTeamMemberInput:
    name: Optional[str] = strawberry.UNSET
    surname: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET
    country_code: Optional[str] = strawberry.UNSET
    country: Optional[str] = strawberry.UNSET
    gender: Optional[TeamMemberGender] = strawberry.UNSET
    date_of_birth: Optional[date] = strawberry.UNSET
    position: Optional[str] = strawberry.UNSET
    bio: Optional[str] = strawberry.UNSET
    avatar: Optional[str] = strawberry.UNSET
    status: Optional[TeamMemberStatus] = strawberry.UNSET
    permissions: Optional[List[PermissionType]] = strawberry.UNSET
    club_owner: Optional[ClubOwnerType] = strawberry.UNSET
    notes: Optional[str] = strawberry.UNSET


@strawberry.input
class TeamMemberFilterInput:
    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    position: Optional[str] = None
    statuses: Optional[List[TeamMemberStatus]] = None
    gender: Optional[TeamMemberGender] = None
    permissions: Optional[List[PermissionType]] = None
    club_owner: Optional[ClubOwnerType] = None
    club_id: Optional[str] = None
    search_text: Optional[str] = None
    created_at: Optional[DateRangeInput] = None
    updated_at: Optional[DateRangeInput] = None


@strawberry.input
class TeamMemberQueryInput:
    filters: Optional[TeamMemberFilterInput] = None
    sort: Optional[List[SortInput]] = None
    pagination: Optional[PaginationInput] = None


@strawberry.type
class TeamMemberQuery:
    @strawberry.field
    def get_team_members(self, info: Info, club_id: Optional[strawberry.ID] = None) -> List[TeamMemberType]:
        return team_member_service.find_all(info.context["db"], club_id)

    @strawberry.field
    def get_team_member(self, info: Info, id: strawberry.ID) -> TeamMemberType:
        return team_member_service.find_one(info.context["db"], id)

    @strawberry.field
    def get_team_members_by_club(self, info: Info, club_id: strawberry.ID) -> List[TeamMemberType]:
        return team_member_service.find_by_club_id(info.context["db"], club_id)

    @strawberry.field
    def get_team_members_by_status(
        self, info: Info, status: TeamMemberStatus, club_id: Optional[strawberry.ID] = None
    ) -> List[TeamMemberType]:
        return team_member_service.find_by_status(info.context["db"], status, club_id)

    @strawberry.field
    def get_team_members_by_position(
        self, info: Info, position: str, club_id: Optional[strawberry.ID] = None
    ) -> List[TeamMemberType]:
        return team_member_service.find_by_position(info.context["db"], position, club_id)

    @strawberry.field
    def get_team_members_by_permissions(
        self, info: Info, permissions: List[PermissionType], club_id: Optional[strawberry.ID] = None
    ) -> List[TeamMemberType]:
        return team_member_service.find_by_permissions(info.context["db"], permissions, club_id)

    @strawberry.field
    def search_team_members(self, info: Info, query: Optional[TeamMemberQueryInput] = None) -> TeamMemberSearchResult:
        page = team_member_service.advanced_search(info.context["db"], to_schema(TeamMemberQuerySchema, query))
        return TeamMemberSearchResult(
            team_members=page.items,
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
        )

    @strawberry.field
    def search_team_members_by_name(
        self, info: Info, search_term: str, limit: int = 20, club_id: Optional[strawberry.ID] = None
    ) -> List[TeamMemberType]:
        return team_member_service.search_by_name(info.context["db"], search_term, limit=limit, club_id=club_id)

    @strawberry.field
    def get_team_member_count(
        self, info: Info, status: Optional[TeamMemberStatus] = None, club_id: Optional[strawberry.ID] = None
    ) -> int:
        return team_member_service.get_count(info.context["db"], status=status, club_id=club_id)


@strawberry.type
class TeamMemberMutation:
    @strawberry.mutation
    def create_team_member(self, info: Info, input: CreateTeamMemberInput) -> TeamMemberType:
        return team_member_service.create(info.context["db"], to_schema(TeamMemberCreate, input))

    @strawberry.mutation
    def update_team_member(self, info: Info, id: strawberry.ID, input: UpdateTeamMemberInput) -> TeamMemberType:
        return team_member_service.update(info.context["db"], id, to_update_schema(TeamMemberUpdate, input))

    @strawberry.mutation
    def delete_team_member(self, info: Info, id: strawberry.ID) -> str:
        deleted = team_member_service.remove(info.context["db"], id)
        return deleted_message(deleted, "Team member", f"Team member with ID {id} not found")

    @strawberry.mutation
    def update_team_member_status(self, info: Info, id: strawberry.ID, status: TeamMemberStatus) -> TeamMemberType:
        return team_member_service.update_status(info.context["db"], id, status)

    @strawberry.mutation
    def update_team_member_permissions(
        self, info: Info, id: strawberry.ID, permissions: List[PermissionType]
    ) -> TeamMemberType:
        return team_member_service.update_permissions(info.context["db"], id, permissions)

    @strawberry.mutation
    def add_team_member_permission(self, info: Info, id: strawberry.ID, permission: PermissionType) -> TeamMemberType:
        return team_member_service.add_permission(info.context["db"], id, permission)

    @strawberry.mutation
    def remove_team_member_permission(
        self, info: Info, id: strawberry.ID, permission: PermissionType
    ) -> TeamMemberType:
        return team_member_service.remove_permission(info.context["db"], id, permission)

    @strawberry.mutation
    def bulk_update_team_member_status(
        self, info: Info, ids: List[strawberry.ID], status: TeamMemberStatus
    ) -> List[TeamMemberType]:
        return team_member_service.bulk_update_status(info.context["db"], ids, status)

    @strawberry.mutation
    def bulk_delete_team_members(self, info: Info, ids: List[strawberry.ID]) -> bool:
        return team_member_service.bulk_delete(info.context["db"], ids)
