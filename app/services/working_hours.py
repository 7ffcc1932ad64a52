from app.models.club import SetupStep
from app.models.working_hours import WorkingHoursCalendar
from app.repositories.working_hours import working_hours_repository
from app.schemas.working_hours import WorkingHoursCreate, WorkingHoursUpdate
from app.services.base import ClubSingletonService


class WorkingHoursService(ClubSingletonService[WorkingHoursCalendar, WorkingHoursCreate, WorkingHoursUpdate]):
    """Calendario de horarios de apertura del club"""

    entity_name = "WorkingHours"
    setup_step = SetupStep.working_hours


working_hours_service = WorkingHoursService(working_hours_repository)
