"""
Operaciones GraphQL de la configuración del club.

`ClubSetup` es la raíz del agregado: expone las entidades hijas como
relaciones y el estado del seguimiento (`setupStatus`, `currentStep`,
`completedSteps`).
"""
import logging
import re
from datetime import datetime
from enum import Enum
from typing import List, Optional

import strawberry
from strawberry.file_uploads import Upload
from strawberry.types import Info

from app.core.exceptions import NotFoundError
from app.graphql.amenity import AmenityType
from app.graphql.coach import CoachType
from app.graphql.enums import AdditionalService, SetupStatus, SetupStep, SportsType
from app.graphql.location_contact import LocationContactType
from app.graphql.membership import MembershipType
from app.graphql.pricing import PricingType, PromoCodeType
from app.graphql.resource import ResourceObjectType
from app.graphql.team_member import TeamMemberType
from app.graphql.user_group import UserGroupType
from app.graphql.utils import deleted_message, optional_schema, to_schema, to_update_schema
from app.graphql.working_hours import WorkingHoursCalendarType
from app.schemas.club import ClubCreate, ClubFieldFilter, ClubFilter, ClubUpdate, CompleteClubSetup
from app.services.club import club_service
from app.services.storage import FileUpload

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@strawberry.enum(description="Campos de club permitidos en searchClubs y countClubs")
class ClubFilterField(Enum):
    id = "id"
    title = "title"
    description = "description"
    typeOfClub = "typeOfClub"
    chainId = "chainId"
    currency = "currency"
    sports = "sports"
    additionalServices = "additionalServices"
    createdAt = "createdAt"
    updatedAt = "updatedAt"
    isPartOfChain = "isPartOfChain"
    enableOnlineBookings = "enableOnlineBookings"
    enableClassBookings = "enableClassBookings"
    enableOpenMatches = "enableOpenMatches"
    enableAcademyManagement = "enableAcademyManagement"
    enableEventManagement = "enableEventManagement"
    enableLeagueTournamentManagement = "enableLeagueTournamentManagement"
    onlinePayment = "onlinePayment"
    onsitePayment = "onsitePayment"
    byInvoice = "byInvoice"


@strawberry.enum
class FilterOperator(Enum):
    equals = "equals"
    notEquals = "notEquals"
    contains = "contains"
    startsWith = "startsWith"
    endsWith = "endsWith"
    greaterThan = "greaterThan"
    lessThan = "lessThan"


@strawberry.federation.type(keys=["id"], name="ClubSetup")
class ClubSetupType:
    id: strawberry.ID
    title: Optional[str]
    type_of_club: Optional[str]
    additional_services: Optional[List[str]]
    is_part_of_chain: Optional[bool]
    chain_id: Optional[str]
    gallery_images: Optional[List[str]]

    enable_online_bookings: bool
    enable_class_bookings: bool
    enable_open_matches: bool
    enable_academy_management: bool
    enable_event_management: bool
    enable_league_tournament_management: bool

    currency: Optional[str]
    online_payment: bool
    onsite_payment: bool
    by_invoice: bool

    setup_status: Optional[SetupStatus]
    current_step: Optional[SetupStep]
    completed_steps: Optional[List[str]]
    last_saved_at: Optional[datetime]

    location_contact: Optional[LocationContactType]
    working_hours_calendar: Optional[WorkingHoursCalendarType]
    amenity: Optional[AmenityType]
    resources: List[ResourceObjectType]
    coaches: List[CoachType]
    team_members: List[TeamMemberType]
    memberships: List[MembershipType]
    pricing: List[PricingType]
    promocodes: List[PromoCodeType]
    user_groups: List[UserGroupType]

    # Nombres de campo que ya consumen los clientes del gateway
    @strawberry.field(name="clubDescription")
    def club_description(self) -> Optional[str]:
        return self.description

    @strawberry.field(name="setupSports")
    def setup_sports(self) -> Optional[List[str]]:
        return self.sports

    @strawberry.field(name="setupLogo")
    def setup_logo(self) -> Optional[str]:
        return self.logo

    @strawberry.field(name="setupCreatedAt")
    def setup_created_at(self) -> datetime:
        return self.created_at

    @strawberry.field(name="setupUpdatedAt")
    def setup_updated_at(self) -> datetime:
        return self.updated_at

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return club_service.find_club_by_id(info.context["db"], id)


@strawberry.input
class CreateClubSetupInput:
    title: str
    description: Optional[str] = None
    type_of_club: Optional[str] = None
    sports: Optional[List[SportsType]] = None
    additional_services: Optional[List[AdditionalService]] = None
    is_part_of_chain: Optional[bool] = None
    chain_id: Optional[str] = None
    logo: Optional[str] = None
    gallery_images: Optional[List[str]] = None
    enable_online_bookings: Optional[bool] = None
    enable_class_bookings: Optional[bool] = None
    enable_open_matches: Optional[bool] = None
    enable_academy_management: Optional[bool] = None
    enable_event_management: Optional[bool] = None
    enable_league_tournament_management: Optional[bool] = None
    currency: Optional[str] = None
    online_payment: Optional[bool] = None
    onsite_payment: Optional[bool] = None
    by_invoice: Optional[bool] = None


@strawberry.input
class UpdateClubSetupInput:
    title: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    type_of_club: Optional[str] = strawberry.UNSET
    sports: Optional[List[SportsType]] = strawberry.UNSET
    additional_services: Optional[List[AdditionalService]] = strawberry.UNSET
    is_part_of_chain: Optional[bool] = strawberry.UNSET
    chain_id: Optional[str] = strawberry.UNSET
    logo: Optional[str] = strawberry.UNSET
    gallery_images: Optional[List[str]] = strawberry.UNSET
    enable_online_bookings: Optional[bool] = strawberry.UNSET
    enable_class_bookings: Optional[bool] = strawberry.UNSET
    enable_open_matches: Optional[bool] = strawberry.UNSET
    enable_academy_management: Optional[bool] = strawberry.UNSET
    enable_event_management: Optional[bool] = strawberry.UNSET
    enable_league_tournament_management: Optional[bool] = strawberry.UNSET
    currency: Optional[str] = strawberry.UNSET
    online_payment: Optional[bool] = strawberry.UNSET
    onsite_payment: Optional[bool] = strawberry.UNSET
    by_invoice: Optional[bool] = strawberry.UNSET


@strawberry.input
class ClubFilterInput:
    id: Optional[str] = None
    club_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    type_of_club: Optional[str] = None
    chain_id: Optional[str] = None
    currency: Optional[str] = None
    setup_status: Optional[SetupStatus] = None
    current_step: Optional[SetupStep] = None
    sports: Optional[List[SportsType]] = None
    additional_services: Optional[List[AdditionalService]] = None
    completed_steps: Optional[List[SetupStep]] = None
    is_part_of_chain: Optional[bool] = None
    enable_online_bookings: Optional[bool] = None
    enable_class_bookings: Optional[bool] = None
    enable_open_matches: Optional[bool] = None
    enable_academy_management: Optional[bool] = None
    enable_event_management: Optional[bool] = None
    enable_league_tournament_management: Optional[bool] = None
    online_payment: Optional[bool] = None
    onsite_payment: Optional[bool] = None
    by_invoice: Optional[bool] = None
    amenity_id: Optional[str] = None
    location_contact_id: Optional[str] = None
    working_hours_calendar_id: Optional[str] = None
    coach_id: Optional[str] = None
    resource_ids: Optional[List[str]] = None


@strawberry.input
class ClubFieldFilterInput:
    field: ClubFilterField
    value: str
    operator: Optional[FilterOperator] = FilterOperator.equals


@strawberry.input
class ClubMultiFieldQueryInput:
    filters: List[ClubFieldFilterInput]
    relations: Optional[List[str]] = None


@strawberry.input
class CompleteClubSetupInput:
    club_id: str
    final_step: SetupStep


def _field_filters(filters: List[ClubFieldFilterInput]) -> List[ClubFieldFilter]:
    return [
        ClubFieldFilter(
            field=f.field.value,
            operator=(f.operator or FilterOperator.equals).value,
            value=f.value,
        )
        for f in filters
    ]


def _relation_names(relations: Optional[List[str]]) -> List[str]:
    # Los clientes envían las relaciones en camelCase (locationContact)
    return [_CAMEL_BOUNDARY.sub("_", relation).lower() for relation in relations or []]


async def _read_uploads(logo_file: Optional[Upload], gallery_files: Optional[List[Upload]]):
    logo = None
    if logo_file is not None:
        logo = FileUpload(logo_file.filename, await logo_file.read(), logo_file.content_type)

    gallery = []
    for upload in gallery_files or []:
        gallery.append(FileUpload(upload.filename, await upload.read(), upload.content_type))
    return logo, gallery


@strawberry.type
class ClubQuery:
    @strawberry.field
    def get_club(self, info: Info, id: str) -> Optional[ClubSetupType]:
        return club_service.get_club(info.context["db"], id)

    @strawberry.field
    def get_all_clubs(self, info: Info, filter: Optional[ClubFilterInput] = None) -> List[ClubSetupType]:
        return club_service.find_all(info.context["db"], optional_schema(ClubFilter, filter))

    @strawberry.field(description="Club con su ubicación y su calendario de horarios")
    def get_club_location(self, info: Info, id: str) -> Optional[ClubSetupType]:
        return club_service.get_values_by_field_value_and_relations(
            info.context["db"], "id", id, ["location_contact", "working_hours_calendar"]
        )

    @strawberry.field(description="Club con sus recursos y amenidades")
    def get_club_resources(self, info: Info, id: str) -> Optional[ClubSetupType]:
        return club_service.get_values_by_field_value_and_relations(
            info.context["db"], "id", id, ["resources", "amenity"]
        )

    @strawberry.field
    def search_clubs(self, info: Info, input: ClubMultiFieldQueryInput) -> List[ClubSetupType]:
        clubs = club_service.find_clubs_with_secure_query(
            info.context["db"], _field_filters(input.filters), _relation_names(input.relations)
        )
        if not clubs:
            raise NotFoundError("No clubs found")
        return clubs

    @strawberry.field
    def count_clubs(self, info: Info, filters: List[ClubFieldFilterInput]) -> int:
        return club_service.count_clubs_with_secure_query(info.context["db"], _field_filters(filters))

    @strawberry.field
    def get_clubs_by_setup_status(self, info: Info, status: SetupStatus) -> List[ClubSetupType]:
        return club_service.get_clubs_by_setup_status(info.context["db"], status)


@strawberry.type
class ClubMutation:
    @strawberry.mutation
    async def create_club_setup(
        self,
        info: Info,
        input: CreateClubSetupInput,
        logo_file: Optional[Upload] = None,
        gallery_files: Optional[List[Upload]] = None,
    ) -> ClubSetupType:
        logo, gallery = await _read_uploads(logo_file, gallery_files)
        return club_service.create_club(info.context["db"], to_schema(ClubCreate, input), logo, gallery)

    @strawberry.mutation
    async def update_club_setup(
        self,
        info: Info,
        id: str,
        input: UpdateClubSetupInput,
        logo_file: Optional[Upload] = None,
        gallery_files: Optional[List[Upload]] = None,
    ) -> ClubSetupType:
        logo, gallery = await _read_uploads(logo_file, gallery_files)
        club = club_service.update_club(info.context["db"], id, to_update_schema(ClubUpdate, input), logo, gallery)
        logger.info(f"Club actualizado desde GraphQL: {id}")
        return club

    @strawberry.mutation
    def delete_club(self, info: Info, id: str) -> str:
        deleted = club_service.delete_club(info.context["db"], id)
        return deleted_message(deleted, "Club", "Club not found")

    @strawberry.mutation
    def complete_club_setup(self, info: Info, input: CompleteClubSetupInput) -> ClubSetupType:
        return club_service.complete_club_setup(info.context["db"], to_schema(CompleteClubSetup, input))

    @strawberry.mutation
    def abandon_club_setup(self, info: Info, club_id: str) -> ClubSetupType:
        return club_service.abandon_club_setup(info.context["db"], club_id)
