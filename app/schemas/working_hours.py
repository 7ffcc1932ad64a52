from typing import List, Optional

import pytz
from pydantic import BaseModel, Field, field_validator

from app.models.working_hours import BookingTimeUnit, DayOfWeek


class TimeSlot(BaseModel):
    start: str = Field(..., pattern=r"^\d{2}:\d{2}$", title="Hora de inicio (HH:MM)")
    end: str = Field(..., pattern=r"^\d{2}:\d{2}$", title="Hora de fin (HH:MM)")
    is_available: Optional[bool] = None


class AvailableDay(BaseModel):
    day: DayOfWeek
    is_open: bool
    time_slots: Optional[List[TimeSlot]] = None


class UnavailableDay(BaseModel):
    date: str = Field(..., title="Fecha (YYYY-MM-DD)")
    is_closed: bool
    time_slots: Optional[List[TimeSlot]] = None


class TimeDuration(BaseModel):
    value: int = Field(..., ge=0)
    unit: BookingTimeUnit


class CalendarSettings(BaseModel):
    first_day_of_week: DayOfWeek
    default_interval_in_mins: int = Field(..., gt=0)
    min_booking_time_in_mins: int = Field(..., gt=0)
    cancellation_buffer_in_hours: int = Field(..., ge=0)
    show_booking_for_in_weeks: str
    booking_lead_time: Optional[TimeDuration] = None
    booking_advance_time: Optional[TimeDuration] = None


class WorkingHoursBase(BaseModel):
    timezone: Optional[str] = Field(None, title="Zona horaria del club", max_length=50)
    unavailable_days: Optional[List[UnavailableDay]] = None
    calendar_settings: Optional[CalendarSettings] = None

    @field_validator("timezone")
    def validate_timezone(cls, v):
        if v is not None and v not in pytz.all_timezones:
            raise ValueError(f"Zona horaria inválida: {v}. Debe ser una zona horaria válida de pytz.")
        return v


class WorkingHoursCreate(WorkingHoursBase):
    club_id: str
    available_days: List[AvailableDay]


class WorkingHoursUpdate(WorkingHoursBase):
    available_days: Optional[List[AvailableDay]] = None
