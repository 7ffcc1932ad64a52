from typing import List, Optional, Sequence

from sqlalchemy.orm import Session, selectinload

from app.models.club import Club, SetupStatus
from app.repositories.base import BaseRepository
from app.schemas.club import ClubCreate, ClubUpdate


class ClubRepository(BaseRepository[Club, ClubCreate, ClubUpdate]):
    """Repositorio para la configuración de clubes"""

    def get_with_relations(self, db: Session, id: str, relations: Sequence[str] = ()) -> Optional[Club]:
        """
        Obtener un club precargando las relaciones indicadas.

        Args:
            db: Sesión de base de datos
            id: ID del club
            relations: Nombres de relaciones del modelo (p. ej. "resources")

        Returns:
            El club o None si no existe
        """
        query = db.query(Club).filter(Club.id == id)
        for relation in relations:
            query = query.options(selectinload(getattr(Club, relation)))
        return query.first()

    def find(self, db: Session, conditions: Sequence = (), relations: Sequence[str] = ()) -> List[Club]:
        query = db.query(Club)
        for relation in relations:
            query = query.options(selectinload(getattr(Club, relation)))
        if conditions:
            query = query.filter(*conditions)
        return query.order_by(Club.created_at.desc()).all()

    def get_by_setup_status(self, db: Session, status: SetupStatus) -> List[Club]:
        return db.query(Club).filter(Club.setup_status == status).order_by(Club.last_saved_at.desc()).all()

    def save(self, db: Session, db_obj: Club) -> Club:
        """Persistir cambios hechos directamente sobre el objeto."""
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


club_repository = ClubRepository(Club)
