"""
Horarios del club.

Los días disponibles, los días no disponibles y los ajustes del calendario
son estructuras anidadas; se exponen con el escalar JSON y se validan con
los esquemas Pydantic de `app.schemas.working_hours`.
"""
from datetime import datetime
from typing import Optional

import strawberry
from strawberry.scalars import JSON
from strawberry.types import Info

from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.working_hours import WorkingHoursCreate, WorkingHoursUpdate
from app.services.working_hours import working_hours_service


@strawberry.federation.type(keys=["id"], name="WorkingHoursCalendar")
class WorkingHoursCalendarType:
    id: strawberry.ID
    club_id: str
    timezone: Optional[str]
    available_days: JSON
    unavailable_days: Optional[JSON]
    calendar_settings: Optional[JSON]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return working_hours_service.get(info.context["db"], id)


@strawberry.input
class CreateWorkingHoursInput:
    club_id: str
    available_days: JSON
    timezone: Optional[str] = None
    unavailable_days: Optional[JSON] = None
    calendar_settings: Optional[JSON] = None


@strawberry.input
class UpdateWorkingHoursInput:
    available_days: Optional[JSON] = strawberry.UNSET
    timezone: Optional[str] = strawberry.UNSET
    unavailable_days: Optional[JSON] = strawberry.UNSET
    calendar_settings: Optional[JSON] = strawberry.UNSET


@strawberry.type
class WorkingHoursQuery:
    @strawberry.field
    def get_working_hours_calendar(self, info: Info, club_id: str) -> WorkingHoursCalendarType:
        return working_hours_service.get_by_club_id(info.context["db"], club_id)


@strawberry.type
class WorkingHoursMutation:
    @strawberry.mutation
    def create_working_hours_calendar(self, info: Info, input: CreateWorkingHoursInput) -> WorkingHoursCalendarType:
        return working_hours_service.create(info.context["db"], to_schema(WorkingHoursCreate, input))

    @strawberry.mutation
    def update_working_hours_calendar(
        self, info: Info, id: strawberry.ID, input: UpdateWorkingHoursInput
    ) -> WorkingHoursCalendarType:
        return working_hours_service.update(info.context["db"], id, to_update_schema(WorkingHoursUpdate, input))

    @strawberry.mutation
    def delete_working_hours_calendar(self, info: Info, club_id: str) -> str:
        deleted = working_hours_service.remove_by_club_id(info.context["db"], club_id)
        return deleted_message(deleted, "Working hours calendar", f"Working hours calendar for club {club_id} not found")
