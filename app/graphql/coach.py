"""
Entrenadores y clases de entrenadores.

Los nombres de las operaciones (`coaches`, `coachesCount`, `coachClass`...)
son los que consumen los clientes existentes.
"""
from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.scalars import JSON
from strawberry.types import Info

from app.graphql.common import PaginationInput, SortInput
from app.graphql.enums import CoachGender, CoachStatus, PriceType
from app.graphql.utils import to_schema, to_update_schema
from app.schemas.coach import CoachClassCreate, CoachClassFilter, CoachClassUpdate, CoachCreate, CoachUpdate
from app.schemas.coach import CoachQuery as CoachQuerySchema
from app.services.coach import coach_class_service, coach_service


@strawberry.federation.type(keys=["id"], name="Coach")
class CoachType:
    id: strawberry.ID
    club_id: str
    name: str
    surname: str
    email: str
    phone_country_code: Optional[str]
    phone: Optional[str]
    avatar: Optional[str]
    gender: Optional[CoachGender]
    country: Optional[str]
    city: Optional[str]
    address: Optional[str]
    languages: Optional[JSON]
    services: List[str]
    education: Optional[str]
    experience_categories: Optional[JSON]
    work_experience: Optional[str]
    online_booking_enabled: Optional[bool]
    availability: Optional[JSON]
    resources: Optional[str]
    holiday_schedule: Optional[str]
    status: CoachStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return coach_service.get(info.context["db"], id)


@strawberry.federation.type(keys=["id"], name="CoachClass")
class CoachClassType:
    id: strawberry.ID
    club_id: str
    title: str
    service: List[str]
    group: List[str]
    resource: List[str]
    price_type: PriceType
    price: float
    coach: JSON
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return coach_class_service.get(info.context["db"], id)


@strawberry.input
class CreateCoachInput:
    club_id: str
    name: str
    surname: str
    email: str
    services: Optional[List[str]] = None
    status: Optional[CoachStatus] = None
    phone_country_code: Optional[str] = None
    phone: Optional[str] = None
    avatar: Optional[str] = None
    gender: Optional[CoachGender] = None
    country: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    languages: Optional[JSON] = None
    education: Optional[str] = None
    experience_categories: Optional[JSON] = None
    work_experience: Optional[str] = None
    online_booking_enabled: Optional[bool] = None
    availability: Optional[JSON] = None
    resources: Optional[str] = None
    holiday_schedule: Optional[str] = None


@strawberry.input
class UpdateCoachInput:
    id: strawberry.ID
    name: Optional[str] = strawberry.UNSET
    surname: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    services: Optional[List[str]] = strawberry.UNSET
    status: Optional[CoachStatus] = strawberry.UNSET
    phone_country_code: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET
    avatar: Optional[str] = strawberry.UNSET
    gender: Optional[CoachGender] = strawberry.UNSET
    country: Optional[str] = strawberry.UNSET
    city: Optional[str] = strawberry.UNSET
    address: Optional[str] = strawberry.UNSET
    languages: Optional[JSON] = strawberry.UNSET
    education: Optional[str] = strawberry.UNSET
    experience_categories: Optional[JSON] = strawberry.UNSET
    work_experience: Optional[str] = strawberry.UNSET
    online_booking_enabled: Optional[bool] = strawberry.UNSET
    availability: Optional[JSON] = strawberry.UNSET
    resources: Optional[str] = strawberry.UNSET
    holiday_schedule: Optional[str] = strawberry.UNSET


@strawberry.input
class CoachFilterInput:
    search_text: Optional[str] = None
    club_id: Optional[str] = None
    gender: Optional[CoachGender] = None
    country: Optional[str] = None
    city: Optional[str] = None
    services: Optional[List[str]] = None


@strawberry.input
class CoachQueryInput:
    filters: Optional[CoachFilterInput] = None
    sort: Optional[List[SortInput]] = None
    pagination: Optional[PaginationInput] = None


@strawberry.input
class CreateCoachClassInput:
    club_id: str
    title: str
    price_type: PriceType
    price: float
    service: Optional[List[str]] = None
    group: Optional[List[str]] = None
    resource: Optional[List[str]] = None
    coach: Optional[JSON] = None


@strawberry.input
class UpdateCoachClassInput:
    id: strawberry.ID
    title: Optional[str] = strawberry.UNSET
    price_type: Optional[PriceType] = strawberry.UNSET
    price: Optional[float] = strawberry.UNSET
    service: Optional[List[str]] = strawberry.UNSET
    group: Optional[List[str]] = strawberry.UNSET
    resource: Optional[List[str]] = strawberry.UNSET
    coach: Optional[JSON] = strawberry.UNSET


@strawberry.input
class CoachClassFilterInput:
    club_id: str
    title: Optional[str] = None
    service: Optional[List[str]] = None
    group: Optional[List[str]] = None
    resource: Optional[List[str]] = None
    price_type: Optional[PriceType] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    coach_ids: Optional[List[str]] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@strawberry.type
class CoachQuery:
    @strawberry.field(name="coaches")
    def find_all_coaches(self, info: Info, query: Optional[CoachQueryInput] = None) -> List[CoachType]:
        items, _ = coach_service.search(info.context["db"], to_schema(CoachQuerySchema, query))
        return items

    @strawberry.field(name="coachesCount")
    def get_coaches_count(self, info: Info, query: Optional[CoachQueryInput] = None) -> int:
        _, total = coach_service.search(info.context["db"], to_schema(CoachQuerySchema, query))
        return total

    @strawberry.field(name="coach")
    def find_one_coach(self, info: Info, id: strawberry.ID) -> CoachType:
        return coach_service.find_one(info.context["db"], id)

    @strawberry.field(name="coachesByClub")
    def find_coaches_by_club(self, info: Info, club_id: str) -> List[CoachType]:
        return coach_service.find_by_club_id(info.context["db"], club_id)

    @strawberry.field(name="coachesByService")
    def find_coaches_by_service(
        self, info: Info, service_id: str, club_id: Optional[str] = None
    ) -> List[CoachType]:
        return coach_service.find_by_service(info.context["db"], service_id, club_id)

    @strawberry.field(name="coachClasses")
    def find_all_coach_classes(self, info: Info, filter: CoachClassFilterInput) -> List[CoachClassType]:
        items, _ = coach_class_service.search(info.context["db"], to_schema(CoachClassFilter, filter))
        return items

    @strawberry.field(name="coachClassesCount")
    def get_coach_classes_count(self, info: Info, filter: CoachClassFilterInput) -> int:
        _, total = coach_class_service.search(info.context["db"], to_schema(CoachClassFilter, filter))
        return total

    @strawberry.field(name="coachClass")
    def find_one_coach_class(self, info: Info, id: strawberry.ID, club_id: str) -> CoachClassType:
        return coach_class_service.find_one_in_club(info.context["db"], id, club_id)

    @strawberry.field(name="coachClassesByCoach")
    def find_coach_classes_by_coach(self, info: Info, coach_id: str, club_id: str) -> List[CoachClassType]:
        return coach_class_service.find_by_coach(info.context["db"], coach_id, club_id)


@strawberry.type
class CoachMutation:
    @strawberry.mutation
    def create_coach(self, info: Info, create_coach_input: CreateCoachInput) -> CoachType:
        return coach_service.create(info.context["db"], to_schema(CoachCreate, create_coach_input))

    @strawberry.mutation
    def update_coach(self, info: Info, update_coach_input: UpdateCoachInput) -> CoachType:
        coach_in = to_update_schema(CoachUpdate, update_coach_input)
        return coach_service.update(info.context["db"], update_coach_input.id, coach_in)

    @strawberry.mutation
    def remove_coach(self, info: Info, id: strawberry.ID) -> bool:
        return coach_service.remove(info.context["db"], id)

    @strawberry.mutation
    def create_coach_class(self, info: Info, create_coach_class_input: CreateCoachClassInput) -> CoachClassType:
        return coach_class_service.create(info.context["db"], to_schema(CoachClassCreate, create_coach_class_input))

    @strawberry.mutation
    def update_coach_class(
        self, info: Info, update_coach_class_input: UpdateCoachClassInput, club_id: str
    ) -> CoachClassType:
        class_in = to_update_schema(CoachClassUpdate, update_coach_class_input)
        return coach_class_service.update_in_club(info.context["db"], update_coach_class_input.id, club_id, class_in)

    @strawberry.mutation
    def remove_coach_class(self, info: Info, id: strawberry.ID, club_id: str) -> bool:
        return coach_class_service.remove_in_club(info.context["db"], id, club_id)
