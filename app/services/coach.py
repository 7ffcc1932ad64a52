import logging
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.club import SetupStep
from app.models.coach import Coach, CoachClass
from app.repositories.coach import coach_assigned, coach_class_repository, coach_repository
from app.schemas.coach import CoachClassCreate, CoachClassFilter, CoachClassUpdate, CoachCreate, CoachQuery, CoachUpdate
from app.services.base import ClubEntityService, update_values
from app.utils.dynamic_filter import json_array_overlaps
from app.utils.query_builder import coach_query_builder

logger = logging.getLogger(__name__)

COACH_DEFAULT_TAKE = 10


class CoachService(ClubEntityService[Coach, CoachCreate, CoachUpdate]):
    """Servicio de entrenadores"""

    entity_name = "Coach"
    setup_step = SetupStep.coaches

    def search(self, db: Session, query: Optional[CoachQuery] = None) -> Tuple[List[Coach], int]:
        """
        Listado filtrado, ordenado y paginado de entrenadores.

        Args:
            db: Sesión de base de datos
            query: Filtros (texto, club, género, país, ciudad, servicios), orden y paginación

        Returns:
            Tupla (entrenadores de la página, total sin paginar)
        """
        query = query or CoachQuery()
        coach = coach_query_builder.entity
        stmt = coach_query_builder.select()

        filters = query.filters
        if filters:
            if filters.club_id:
                stmt = stmt.where(coach.club_id == filters.club_id)
            if filters.search_text:
                term = f"%{filters.search_text}%"
                stmt = stmt.where(or_(coach.name.ilike(term), coach.surname.ilike(term), coach.email.ilike(term)))
            if filters.gender:
                stmt = stmt.where(coach.gender == filters.gender)
            if filters.country:
                stmt = stmt.where(coach.country == filters.country)
            if filters.city:
                stmt = stmt.where(coach.city == filters.city)
            if filters.services:
                stmt = stmt.where(json_array_overlaps(coach.services, filters.services))

        try:
            total = coach_query_builder.count(db, stmt)

            sort = [(item.field, item.order) for item in query.sort or []]
            stmt = coach_query_builder.apply_sort(stmt, sort)

            skip = query.pagination.skip if query.pagination else 0
            take = query.pagination.take if query.pagination else COACH_DEFAULT_TAKE
            items = coach_query_builder.all(db, coach_query_builder.paginate(stmt, skip, take))
        except SQLAlchemyError as e:
            logger.error(f"Error al buscar entrenadores: {str(e)}")
            raise

        return items, total

    def find_by_service(self, db: Session, service: str, club_id: Optional[str] = None) -> List[Coach]:
        coaches = coach_repository.get_by_service(db, service)
        if club_id:
            coaches = [c for c in coaches if c.club_id == club_id]
        return coaches


class CoachClassService(ClubEntityService[CoachClass, CoachClassCreate, CoachClassUpdate]):
    """
    Clases de entrenadores. Todas las operaciones se acotan al club; la
    creación no forma parte del seguimiento de la configuración.
    """

    entity_name = "CoachClass"

    def search(self, db: Session, class_filter: CoachClassFilter) -> Tuple[List[CoachClass], int]:
        """
        Listado filtrado de clases de un club, ordenado por fecha de creación descendente.

        Los filtros de servicio, grupo y recurso devuelven las clases que
        comparten al menos un identificador con la lista indicada.
        """
        query = db.query(CoachClass).filter(CoachClass.club_id == class_filter.club_id)

        if class_filter.title:
            query = query.filter(CoachClass.title.ilike(f"%{class_filter.title}%"))
        if class_filter.service:
            query = query.filter(json_array_overlaps(CoachClass.service, class_filter.service))
        if class_filter.group:
            query = query.filter(json_array_overlaps(CoachClass.group, class_filter.group))
        if class_filter.resource:
            query = query.filter(json_array_overlaps(CoachClass.resource, class_filter.resource))
        if class_filter.price_type:
            query = query.filter(CoachClass.price_type == class_filter.price_type)
        if class_filter.min_price is not None:
            query = query.filter(CoachClass.price >= class_filter.min_price)
        if class_filter.max_price is not None:
            query = query.filter(CoachClass.price <= class_filter.max_price)
        if class_filter.coach_ids:
            query = query.filter(or_(*[coach_assigned(coach_id) for coach_id in class_filter.coach_ids]))

        try:
            total = query.count()
            items = (
                query.order_by(CoachClass.created_at.desc())
                .offset(class_filter.offset)
                .limit(class_filter.limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error al buscar clases del club {class_filter.club_id}: {str(e)}")
            raise

        return items, total

    def find_one_in_club(self, db: Session, id: str, club_id: str) -> CoachClass:
        coach_class = coach_class_repository.get(db, id, club_id=club_id)
        if not coach_class:
            raise NotFoundError(f"CoachClass with ID {id} not found in club {club_id}")
        return coach_class

    def update_in_club(self, db: Session, id: str, club_id: str, obj_in: CoachClassUpdate) -> CoachClass:
        coach_class = self.find_one_in_club(db, id, club_id)
        try:
            coach_class = coach_class_repository.update(db, db_obj=coach_class, obj_in=update_values(coach_class, obj_in))
        except SQLAlchemyError as e:
            logger.error(f"Error al actualizar la clase {id} del club {club_id}: {str(e)}")
            raise

        logger.info(f"Clase actualizada: {id} (club {club_id})")
        return coach_class

    def remove_in_club(self, db: Session, id: str, club_id: str) -> bool:
        try:
            deleted = coach_class_repository.remove(db, id=id, club_id=club_id)
        except SQLAlchemyError as e:
            logger.error(f"Error al eliminar la clase {id} del club {club_id}: {str(e)}")
            raise
        return deleted is not None

    def find_by_coach(self, db: Session, coach_id: str, club_id: str) -> List[CoachClass]:
        return [c for c in coach_class_repository.get_by_coach(db, coach_id) if c.club_id == club_id]


coach_service = CoachService(coach_repository)
coach_class_service = CoachClassService(coach_class_repository)
