import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, NotFoundError
from app.core.setup_events import SetupStepCompleted, setup_events
from app.models.club import SetupStep
from app.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def update_values(db_obj: Any, obj_in: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
    """
    Campos a actualizar (solo los enviados).

    Raises:
        BadRequestError: Si se envía null a una columna obligatoria
    """
    update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
    columns = sa_inspect(type(db_obj)).columns
    for field, value in update_data.items():
        if value is None and field in columns and not columns[field].nullable:
            raise BadRequestError(f"Field {field} cannot be null")
    return update_data


class ClubEntityService(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Servicio base para las entidades que pertenecen a un club.

    Si `setup_step` está definido, cada creación publica `SetupStepCompleted`
    después de confirmar la escritura, y el club avanza su seguimiento.
    """

    entity_name = "Entity"
    setup_step: Optional[SetupStep] = None
    final_step = False

    def __init__(self, repository: BaseRepository):
        self.repository = repository

    def _not_found(self, id: Any) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} with ID {id} not found")

    def notify_step(self, db: Session, club_id: str) -> None:
        if self.setup_step is None or not club_id:
            return
        setup_events.publish(
            db,
            SetupStepCompleted(
                club_id=club_id,
                step=self.setup_step.value,
                final=self.final_step,
                source=self.entity_name,
            ),
        )

    def create(self, db: Session, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Crear la entidad y notificar el paso de configuración correspondiente.

        La entidad queda confirmada aunque el seguimiento del club falle
        (por ejemplo, si el club no existe se propaga NotFoundError).
        """
        try:
            db_obj = self.repository.create(db, obj_in=obj_in)
        except SQLAlchemyError as e:
            logger.error(f"Error al crear {self.entity_name}: {str(e)}")
            raise

        logger.info(f"{self.entity_name} creado: {db_obj.id} (club {db_obj.club_id})")
        self.notify_step(db, db_obj.club_id)
        return db_obj

    def find_one(self, db: Session, id: str) -> ModelType:
        db_obj = self.repository.get(db, id)
        if not db_obj:
            raise self._not_found(id)
        return db_obj

    def get(self, db: Session, id: str) -> Optional[ModelType]:
        return self.repository.get(db, id)

    def find_all(self, db: Session, club_id: Optional[str] = None) -> List[ModelType]:
        return self.repository.get_multi(db, club_id=club_id)

    def find_by_club_id(self, db: Session, club_id: str) -> List[ModelType]:
        return self.repository.get_by_club(db, club_id)

    def update(self, db: Session, id: str, obj_in: Union[UpdateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Raises:
            NotFoundError: Si la entidad no existe
        """
        db_obj = self.find_one(db, id)
        try:
            db_obj = self.repository.update(db, db_obj=db_obj, obj_in=update_values(db_obj, obj_in))
        except SQLAlchemyError as e:
            logger.error(f"Error al actualizar {self.entity_name} {id}: {str(e)}")
            raise

        logger.info(f"{self.entity_name} actualizado: {id}")
        return db_obj

    def remove(self, db: Session, id: str) -> bool:
        """Eliminar por ID. Devuelve False si no existía."""
        try:
            deleted = self.repository.remove(db, id=id)
        except SQLAlchemyError as e:
            logger.error(f"Error al eliminar {self.entity_name} {id}: {str(e)}")
            raise

        if deleted:
            logger.info(f"{self.entity_name} eliminado: {id}")
        return deleted is not None

    def count(self, db: Session, club_id: Optional[str] = None) -> int:
        return self.repository.count(db, club_id=club_id)


class ClubSingletonService(ClubEntityService[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Entidades con una única fila por club (ubicación, horario, amenidades)."""

    def find_by_club_id(self, db: Session, club_id: str) -> Optional[ModelType]:
        return self.repository.get_one_by_club(db, club_id)

    def get_by_club_id(self, db: Session, club_id: str) -> ModelType:
        db_obj = self.find_by_club_id(db, club_id)
        if not db_obj:
            raise NotFoundError(f"{self.entity_name} for club {club_id} not found")
        return db_obj

    def update_by_club_id(self, db: Session, club_id: str, obj_in: Union[UpdateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Raises:
            NotFoundError: Si el club no tiene la entidad
        """
        db_obj = self.get_by_club_id(db, club_id)
        try:
            db_obj = self.repository.update(db, db_obj=db_obj, obj_in=update_values(db_obj, obj_in))
        except SQLAlchemyError as e:
            logger.error(f"Error al actualizar {self.entity_name} del club {club_id}: {str(e)}")
            raise

        logger.info(f"{self.entity_name} del club {club_id} actualizado")
        return db_obj

    def remove_by_club_id(self, db: Session, club_id: str) -> bool:
        db_obj = self.find_by_club_id(db, club_id)
        if not db_obj:
            return False
        try:
            self.repository.delete(db, db_obj=db_obj)
        except SQLAlchemyError as e:
            logger.error(f"Error al eliminar {self.entity_name} del club {club_id}: {str(e)}")
            raise

        logger.info(f"{self.entity_name} del club {club_id} eliminado")
        return True


@dataclass
class SearchPage(Generic[ModelType]):
    """Página de resultados de una búsqueda avanzada."""
    items: List[ModelType]
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def build(cls, items: List[ModelType], total: int, skip: int, take: int) -> "SearchPage[ModelType]":
        return cls(
            items=items,
            total=total,
            page=skip // take + 1,
            limit=take,
            total_pages=math.ceil(total / take),
        )
