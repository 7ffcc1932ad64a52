from enum import Enum as PyEnum

from sqlalchemy import Column, ForeignKey, JSON, String
from sqlalchemy.orm import relationship

from app.db.base_class import Base, ClubOwnedMixin


class DayOfWeek(str, PyEnum):
    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"
    sunday = "sunday"


class BookingTimeUnit(str, PyEnum):
    """Unidades para los ajustes de antelación de reservas"""
    minutes = "minutes"
    hours = "hours"
    days = "days"
    weeks = "weeks"


class WorkingHoursCalendar(ClubOwnedMixin, Base):
    """
    Calendario de horarios del club (uno por club).

    available_days: [{"day": "monday", "is_open": true, "time_slots": [{"start": "08:00", "end": "22:00", "is_available": true}]}]
    unavailable_days: [{"date": "2025-12-25", "is_closed": true, "time_slots": []}]
    calendar_settings: {"first_day_of_week": "monday", "default_interval_in_mins": 60, ...}
    """
    __tablename__ = "working_hours"

    club_id = Column(String(36), ForeignKey("club.id"), nullable=False, index=True)
    timezone = Column(String(50), nullable=True, default=None)
    available_days = Column(JSON, nullable=False, default=list)
    unavailable_days = Column(JSON, nullable=True)
    calendar_settings = Column(JSON, nullable=True)

    club = relationship("Club", back_populates="working_hours_calendar")
