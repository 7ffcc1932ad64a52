from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.core.config import get_settings


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class PaginationParams(BaseModel):
    """Paginación por desplazamiento (skip/take)"""
    skip: int = Field(0, ge=0, title="Registros a omitir")
    take: int = Field(default_factory=lambda: get_settings().DEFAULT_PAGE_SIZE, ge=1, title="Registros a devolver")

    @field_validator("take")
    def clamp_take(cls, v: int) -> int:
        # Nunca devolver más de MAX_PAGE_SIZE registros por página
        return min(v, get_settings().MAX_PAGE_SIZE)


class DateRange(BaseModel):
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class SortParams(BaseModel):
    field: str
    order: SortOrder = SortOrder.ASC
