from datetime import datetime
from typing import Optional

import strawberry

from app.graphql.enums import SortOrder


@strawberry.input
class PaginationInput:
    skip: Optional[int] = 0
    take: Optional[int] = None


@strawberry.input
class SortInput:
    field: str
    order: Optional[SortOrder] = SortOrder.ASC


@strawberry.input
class DateRangeInput:
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
