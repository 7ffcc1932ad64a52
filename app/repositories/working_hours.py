from app.models.working_hours import WorkingHoursCalendar
from app.repositories.base import BaseRepository
from app.schemas.working_hours import WorkingHoursCreate, WorkingHoursUpdate


class WorkingHoursRepository(BaseRepository[WorkingHoursCalendar, WorkingHoursCreate, WorkingHoursUpdate]):
    """Calendario de horarios (uno por club)"""


working_hours_repository = WorkingHoursRepository(WorkingHoursCalendar)
