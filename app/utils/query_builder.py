"""
Constructor de consultas con lista blanca de campos y operadores.

Recibe condiciones (campo, operador, valor) provenientes del cliente y las
convierte en predicados SQLAlchemy con parámetros enlazados. Cualquier campo u
operador fuera de la lista blanca se rechaza con BadRequestError.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type

from sqlalchemy import String, bindparam, cast, func, select
from sqlalchemy.orm import Session, aliased, selectinload
from sqlalchemy.sql import Select

from app.core.exceptions import BadRequestError
from app.models.club import Club
from app.models.coach import Coach
from app.models.extras import Extras
from app.models.team_member import TeamMember

logger = logging.getLogger(__name__)

ALLOWED_OPERATORS = (
    "equals",
    "notEquals",
    "contains",
    "startsWith",
    "endsWith",
    "greaterThan",
    "lessThan",
)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_]")


def sanitize_identifier(name: str) -> str:
    """Eliminar todo lo que no sea alfanumérico o guion bajo."""
    return _UNSAFE_CHARS.sub("", str(name))


class SecureQueryBuilder:
    """
    Builder por entidad.

    Args:
        model: Modelo SQLAlchemy
        alias: Alias de la entidad en la consulta
        allowed_fields: Nombre público (camelCase) -> atributo del modelo
        date_fields: Nombres públicos de columnas de fecha (se comparan como texto)
        array_fields: Nombres públicos de columnas JSON de tipo lista (se comparan como texto)
        boolean_fields: Nombres públicos de columnas booleanas ("true"/"false")
        sort_fields: Nombre público -> atributo permitido para ordenar
        relations: Relaciones que se pueden precargar
    """

    def __init__(
        self,
        model: Type,
        alias: str,
        allowed_fields: Dict[str, str],
        date_fields: Iterable[str] = (),
        array_fields: Iterable[str] = (),
        boolean_fields: Iterable[str] = (),
        sort_fields: Optional[Dict[str, str]] = None,
        relations: Iterable[str] = (),
    ):
        self.model = model
        self.alias = sanitize_identifier(alias)
        self.allowed_fields = dict(allowed_fields)
        self.date_fields = set(date_fields)
        self.array_fields = set(array_fields)
        self.boolean_fields = set(boolean_fields)
        self.sort_fields = dict(sort_fields or {"createdAt": "created_at", "updatedAt": "updated_at"})
        self.relations = set(relations)
        self.entity = aliased(model, name=self.alias)

    def select(self) -> Select:
        return select(self.entity)

    def _column(self, field: str):
        if field not in self.allowed_fields:
            raise BadRequestError(f"Invalid field name: {field}")

        attr = sanitize_identifier(self.allowed_fields[field])
        column = getattr(self.entity, attr)

        if field in self.date_fields or field in self.array_fields:
            return cast(column, String)
        return column

    def _coerce(self, field: str, value: Any) -> Any:
        if field in self.boolean_fields and isinstance(value, str):
            return value.strip().lower() == "true"
        return value

    def apply_operator(self, stmt: Select, field: str, operator: str, param_name: str, value: Any) -> Select:
        """
        Añadir un predicado AND a `stmt`.

        Raises:
            BadRequestError: Si el campo o el operador no están permitidos
        """
        column = self._column(field)
        if operator not in ALLOWED_OPERATORS:
            raise BadRequestError(f"Invalid operator: {operator}")

        param = sanitize_identifier(param_name)
        value = self._coerce(field, value)

        if operator == "equals":
            condition = column == bindparam(param, value)
        elif operator == "notEquals":
            condition = column != bindparam(param, value)
        elif operator == "contains":
            condition = column.ilike(bindparam(param, f"%{value}%"))
        elif operator == "startsWith":
            condition = column.ilike(bindparam(param, f"{value}%"))
        elif operator == "endsWith":
            condition = column.ilike(bindparam(param, f"%{value}"))
        elif operator == "greaterThan":
            condition = column > bindparam(param, value)
        else:
            condition = column < bindparam(param, value)

        return stmt.where(condition)

    def with_relations(self, stmt: Select, relations: Optional[Sequence[str]]) -> Select:
        for relation in relations or []:
            name = sanitize_identifier(relation)
            if name not in self.relations:
                logger.warning(f"Relación no permitida ignorada en {self.alias}: {relation}")
                continue
            stmt = stmt.options(selectinload(getattr(self.entity, name)))
        return stmt

    def build(self, filters: Optional[Sequence[Any]] = None, relations: Optional[Sequence[str]] = None) -> Select:
        """
        Construir la consulta a partir de una lista de condiciones.

        Cada condición expone `field`, `operator` y `value` (atributos o claves).
        """
        stmt = self.with_relations(self.select(), relations)

        for index, item in enumerate(filters or []):
            if isinstance(item, dict):
                field, operator, value = item.get("field"), item.get("operator", "equals"), item.get("value")
            else:
                field, operator, value = item.field, item.operator, item.value
            stmt = self.apply_operator(stmt, field, operator, f"param{index}", value)

        return stmt

    def apply_sort(self, stmt: Select, sort: Optional[Sequence[Tuple[str, str]]] = None) -> Select:
        """
        Ordenar por campos permitidos; por defecto created_at DESC.

        Args:
            sort: Pares (campo público, "ASC" | "DESC"); los campos no permitidos se ignoran
        """
        clauses = []
        for field, order in sort or []:
            attr = self.sort_fields.get(field)
            if attr is None:
                logger.warning(f"Campo de ordenación ignorado en {self.alias}: {field}")
                continue
            column = getattr(self.entity, sanitize_identifier(attr))
            direction = str(getattr(order, "value", order)).upper()
            clauses.append(column.desc() if direction == "DESC" else column.asc())

        if not clauses:
            clauses.append(self.entity.created_at.desc())

        return stmt.order_by(*clauses)

    def paginate(self, stmt: Select, skip: int = 0, take: Optional[int] = None) -> Select:
        stmt = stmt.offset(max(skip, 0))
        if take is not None:
            stmt = stmt.limit(take)
        return stmt

    def count(self, db: Session, stmt: Select) -> int:
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        return db.execute(count_stmt).scalar() or 0

    def all(self, db: Session, stmt: Select) -> List[Any]:
        return list(db.execute(stmt).scalars().unique().all())


_CLUB_BOOLEAN_FIELDS = {
    "isPartOfChain": "is_part_of_chain",
    "enableOnlineBookings": "enable_online_bookings",
    "enableClassBookings": "enable_class_bookings",
    "enableOpenMatches": "enable_open_matches",
    "enableAcademyManagement": "enable_academy_management",
    "enableEventManagement": "enable_event_management",
    "enableLeagueTournamentManagement": "enable_league_tournament_management",
    "onlinePayment": "online_payment",
    "onsitePayment": "onsite_payment",
    "byInvoice": "by_invoice",
}

club_query_builder = SecureQueryBuilder(
    Club,
    alias="club",
    allowed_fields={
        "id": "id",
        "title": "title",
        "description": "description",
        "typeOfClub": "type_of_club",
        "chainId": "chain_id",
        "currency": "currency",
        "sports": "sports",
        "additionalServices": "additional_services",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        **_CLUB_BOOLEAN_FIELDS,
    },
    date_fields=("createdAt", "updatedAt"),
    array_fields=("sports", "additionalServices"),
    boolean_fields=tuple(_CLUB_BOOLEAN_FIELDS),
    relations=(
        "location_contact",
        "working_hours_calendar",
        "resources",
        "amenity",
        "coaches",
        "team_members",
        "memberships",
        "pricing",
        "promocodes",
        "user_groups",
    ),
)

coach_query_builder = SecureQueryBuilder(
    Coach,
    alias="coach",
    allowed_fields={"name": "name", "surname": "surname", "email": "email", "createdAt": "created_at"},
    date_fields=("createdAt",),
    sort_fields={
        "name": "name",
        "surname": "surname",
        "email": "email",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)

team_member_query_builder = SecureQueryBuilder(
    TeamMember,
    alias="team_member",
    allowed_fields={"name": "name", "surname": "surname", "email": "email", "position": "position"},
    sort_fields={
        "name": "name",
        "surname": "surname",
        "email": "email",
        "position": "position",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "status": "status",
    },
)

extras_query_builder = SecureQueryBuilder(
    Extras,
    alias="extras",
    allowed_fields={"status": "status", "notes": "notes"},
    sort_fields={
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "status": "status",
        "hourBankEnabled": "hour_bank",
        "wishlistEnabled": "wishlist",
    },
)
