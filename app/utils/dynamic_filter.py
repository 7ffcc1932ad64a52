"""
Mapeo declarativo de filtros a condiciones SQLAlchemy.

Cada clave del filtro se asocia a un tipo de coincidencia y a una columna:

    partial  -> ilike('%valor%')
    exact    -> igualdad
    array    -> pertenencia (IN, o "alguno de" sobre columnas JSON)
    boolean / date / number -> igualdad con el valor tal cual

Las claves que no están configuradas se ignoran.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from sqlalchemy import JSON, String, cast, or_

logger = logging.getLogger(__name__)

MATCH_TYPES = ("partial", "exact", "array", "boolean", "date", "number")


@dataclass(frozen=True)
class FieldConfig:
    type: str
    field: str


def create_field_configs(
    partial: Iterable[str] = (),
    exact: Iterable[str] = (),
    array: Iterable[str] = (),
    boolean: Iterable[str] = (),
    date: Iterable[str] = (),
    number: Iterable[str] = (),
) -> Dict[str, FieldConfig]:
    """Construir la configuración clave -> FieldConfig; la columna tiene el mismo nombre que la clave."""
    configs: Dict[str, FieldConfig] = {}
    for match_type, keys in (
        ("partial", partial),
        ("exact", exact),
        ("array", array),
        ("boolean", boolean),
        ("date", date),
        ("number", number),
    ):
        for key in keys:
            configs[key] = FieldConfig(type=match_type, field=key)
    return configs


def json_text_contains(column, fragment: str):
    """
    El texto JSON de la columna contiene `fragment` de forma literal.

    `autoescape` escapa `%`, `_` y `/`, así los valores del usuario nunca
    actúan como comodines de LIKE.
    """
    return cast(column, String).contains(fragment, autoescape=True)


def json_array_contains(column, value: Any):
    """
    El array JSON contiene `value`.

    Compara sobre la representación textual del JSON serializado por
    SQLAlchemy (json.dumps), p. ej. '["tennis", "padel"]'. El valor buscado
    se serializa igual, incluido el escape de caracteres no ASCII
    ("Pádel" -> "P\\u00e1del").
    """
    raw = value.value if hasattr(value, "value") else value
    return json_text_contains(column, json.dumps(raw))


def json_array_overlaps(column, values: Iterable[Any]):
    """El array JSON contiene al menos uno de `values`."""
    return or_(*[json_array_contains(column, v) for v in values])


def _is_json_column(column) -> bool:
    return isinstance(getattr(column, "type", None), JSON)


def build_where_conditions(
    model,
    filter_values: Optional[Dict[str, Any]],
    field_configs: Dict[str, FieldConfig],
    relation_fields: Optional[Dict[str, Callable[[Any], Any]]] = None,
) -> List[Any]:
    """
    Traducir un filtro plano en una lista de condiciones para `.filter(*conds)`.

    Args:
        model: Modelo (o alias) sobre el que se construyen las columnas
        filter_values: Valores del filtro; None y claves desconocidas se ignoran
        field_configs: Configuración creada con `create_field_configs`
        relation_fields: Manejadores clave -> función(valor) que devuelven
            una condición sobre una relación

    Returns:
        Lista de condiciones combinables con AND
    """
    conditions: List[Any] = []
    if not filter_values:
        return conditions

    relation_fields = relation_fields or {}

    for key, value in filter_values.items():
        if value is None:
            continue

        if key in relation_fields:
            conditions.append(relation_fields[key](value))
            continue

        config = field_configs.get(key)
        if config is None:
            logger.debug(f"Clave de filtro ignorada: {key}")
            continue

        column = getattr(model, config.field)

        if config.type == "partial":
            conditions.append(column.ilike(f"%{value}%"))
        elif config.type == "array":
            values = list(value) if isinstance(value, (list, tuple, set)) else [value]
            if not values:
                continue
            if _is_json_column(column):
                conditions.append(json_array_overlaps(column, values))
            else:
                conditions.append(column.in_(values))
        else:
            # exact, boolean, date, number
            conditions.append(column == value)

    return conditions
