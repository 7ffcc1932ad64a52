from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        Repository con operaciones CRUD por defecto y filtro opcional por club.
        """
        self.model = model

    def get(self, db: Session, id: Any, club_id: Optional[str] = None) -> Optional[ModelType]:
        """
        Obtener un objeto por su ID con filtro opcional de club.

        Args:
            db: Sesión de base de datos
            id: ID del objeto a obtener
            club_id: ID opcional del club propietario

        Returns:
            El objeto solicitado o None si no existe
        """
        query = db.query(self.model).filter(self.model.id == id)

        if club_id is not None and hasattr(self.model, "club_id"):
            query = query.filter(self.model.club_id == club_id)

        return query.first()

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: Optional[int] = None, club_id: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None
    ) -> List[ModelType]:
        """
        Obtener múltiples registros con filtros opcionales.

        Args:
            db: Sesión de base de datos
            skip: Número de registros a omitir
            limit: Número máximo de registros a devolver (None = sin límite)
            club_id: ID opcional del club para filtrar resultados
            filters: Diccionario de filtros de igualdad {campo: valor}

        Returns:
            Lista de objetos que coinciden con los criterios
        """
        query = db.query(self.model)

        if club_id is not None and hasattr(self.model, "club_id"):
            query = query.filter(self.model.club_id == club_id)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.filter(getattr(self.model, field) == value)

        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_by_club(self, db: Session, club_id: str) -> List[ModelType]:
        return db.query(self.model).filter(self.model.club_id == club_id).all()

    def get_one_by_club(self, db: Session, club_id: str) -> Optional[ModelType]:
        """Para entidades 1:1 con el club (ubicación, horario, amenidades)."""
        return db.query(self.model).filter(self.model.club_id == club_id).first()

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Crear un nuevo registro.

        Args:
            db: Sesión de base de datos
            obj_in: Datos del objeto a crear

        Returns:
            El objeto creado
        """
        # model_dump() conserva date/datetime, necesarios para columnas Date.
        # Los None se omiten para que actúen los default de las columnas.
        if isinstance(obj_in, dict):
            obj_in_data = obj_in
        else:
            obj_in_data = obj_in.model_dump(exclude_none=True)

        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Actualizar un registro con los campos enviados.

        Los campos no enviados (exclude_unset) se mantienen intactos.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: ModelType) -> ModelType:
        db.delete(db_obj)
        db.commit()
        return db_obj

    def remove(self, db: Session, *, id: Any, club_id: Optional[str] = None) -> Optional[ModelType]:
        """
        Eliminar un registro por ID.

        Returns:
            El objeto eliminado o None si no existía
        """
        obj = self.get(db, id=id, club_id=club_id)
        if not obj:
            return None

        return self.delete(db, db_obj=obj)

    def exists(self, db: Session, id: Any, club_id: Optional[str] = None) -> bool:
        query = db.query(self.model.id).filter(self.model.id == id)

        if club_id is not None and hasattr(self.model, "club_id"):
            query = query.filter(self.model.club_id == club_id)

        return db.query(query.exists()).scalar()

    def count(self, db: Session, club_id: Optional[str] = None) -> int:
        query = db.query(func.count(self.model.id))

        if club_id is not None and hasattr(self.model, "club_id"):
            query = query.filter(self.model.club_id == club_id)

        return query.scalar() or 0
