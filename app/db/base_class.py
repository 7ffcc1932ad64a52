import uuid
from typing import Any

from sqlalchemy import Column, DateTime, String
from sqlalchemy.ext.declarative import declared_attr
from sqlalchemy.orm import DeclarativeBase

from app.core.timezone_utils import utcnow


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    id: Any
    __name__: str

    # Generar nombres de tablas automáticamente
    @declared_attr.directive
    def __tablename__(cls) -> str:
        return cls.__name__.lower()


class TimestampMixin:
    """Columnas de auditoría comunes a todas las tablas."""
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class ClubOwnedMixin(TimestampMixin):
    """Identificador UUID + auditoría para entidades de la configuración del club."""
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)
