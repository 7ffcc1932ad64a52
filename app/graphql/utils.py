import dataclasses
from typing import Any, Dict, Optional, Type, TypeVar

import strawberry
from pydantic import BaseModel, ValidationError

from app.core.exceptions import BadRequestError, NotFoundError

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def _plain(value: Any, keep_null: bool = False) -> Any:
    """Convertir inputs (anidados) en dicts, sin campos UNSET ni None."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {
            key: _plain(item)
            for key, item in value.items()
            if item is not strawberry.UNSET and (keep_null or item is not None)
        }
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def input_to_dict(data: Any, keep_null: bool = False) -> Dict[str, Any]:
    """
    Convertir un input de Strawberry en dict, descartando los campos no enviados.

    Los inputs anidados también se convierten, así los valores por defecto
    de los esquemas Pydantic se aplican a los campos omitidos. Con
    `keep_null`, un `null` explícito en el primer nivel se conserva.
    """
    if data is None:
        return {}
    return _plain(data, keep_null=keep_null)


def to_schema(schema_cls: Type[SchemaType], data: Any = None, keep_null: bool = False, **extra: Any) -> SchemaType:
    """
    Validar un input GraphQL con su esquema Pydantic.

    Raises:
        BadRequestError: Si la validación falla
    """
    values = {**input_to_dict(data, keep_null), **{k: v for k, v in extra.items() if v is not None}}
    try:
        return schema_cls(**values)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise BadRequestError(f"Invalid input: {location}: {first.get('msg')}") from e


def to_update_schema(schema_cls: Type[SchemaType], data: Any) -> SchemaType:
    """
    Esquema de actualización: los campos omitidos (UNSET) quedan fuera de
    `exclude_unset` y un `null` explícito vacía la columna.
    """
    return to_schema(schema_cls, data, keep_null=True)


def optional_schema(schema_cls: Type[SchemaType], data: Optional[Any]) -> Optional[SchemaType]:
    return to_schema(schema_cls, data) if data is not None else None


def deleted_message(deleted: bool, entity: str, not_found: str) -> str:
    """Mensaje de confirmación de los borrados; NotFoundError si no se borró nada."""
    if not deleted:
        raise NotFoundError(not_found)
    return f"{entity} deleted successfully"
