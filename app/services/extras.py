import logging
from typing import List, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, NotFoundError
from app.models.extras import Extras, ExtrasStatus
from app.repositories.extras import extras_repository
from app.schemas.extras import ExtrasCreate, ExtrasQuery, ExtrasUpdate, IntegrationStats
from app.services.base import ClubEntityService, SearchPage
from app.utils.query_builder import extras_query_builder

logger = logging.getLogger(__name__)

EXTRAS_DEFAULT_TAKE = 20

# Nombre público de la funcionalidad -> columna booleana
FEATURE_COLUMNS = {
    "hourBank": "hour_bank",
    "wishlist": "wishlist",
}

INTEGRATION_FIELDS = (
    "external_booking_system",
    "payment_gateway",
    "email_marketing",
    "analytics_integration",
    "social_media_integration",
)


def _feature_column(feature: str) -> str:
    column = FEATURE_COLUMNS.get(feature)
    if column is None:
        raise BadRequestError(f"Invalid feature: {feature}. Allowed: {', '.join(FEATURE_COLUMNS)}")
    return column


class ExtrasService(ClubEntityService[Extras, ExtrasCreate, ExtrasUpdate]):
    """
    Servicio de extras del club: banco de horas, lista de deseos e
    integraciones externas. No forma parte del seguimiento de la configuración.
    """

    entity_name = "Extras"

    def _not_found(self, id):
        return NotFoundError(f"Extras configuration with ID {id} not found")

    def find_by_status(self, db: Session, status: ExtrasStatus, club_id: Optional[str] = None) -> List[Extras]:
        return extras_repository.get_by_status(db, status, club_id)

    def find_by_feature(self, db: Session, feature: str, enabled: bool, club_id: Optional[str] = None) -> List[Extras]:
        """
        Raises:
            BadRequestError: Si la funcionalidad no es hourBank ni wishlist
        """
        return extras_repository.get_by_feature(db, _feature_column(feature), enabled, club_id)

    def search_by_description(self, db: Session, term: str, limit: int = 20, club_id: Optional[str] = None) -> List[Extras]:
        return extras_repository.search_by_description(db, term, limit=limit, club_id=club_id)

    def get_count(self, db: Session, status: Optional[ExtrasStatus] = None, club_id: Optional[str] = None) -> int:
        return extras_repository.count_by(db, status=status, club_id=club_id)

    def get_integration_stats(self, db: Session, club_id: Optional[str] = None) -> IntegrationStats:
        try:
            stats = extras_repository.integration_stats(db, club_id)
        except SQLAlchemyError as e:
            logger.error(f"Error al calcular estadísticas de integraciones (club {club_id}): {str(e)}")
            raise
        return IntegrationStats(**stats)

    def advanced_search(self, db: Session, query: Optional[ExtrasQuery] = None) -> SearchPage[Extras]:
        """
        Búsqueda avanzada de extras con filtros, orden y paginación.

        Las integraciones se filtran por coincidencia parcial y `search_text`
        busca en las descripciones y en las notas.
        """
        query = query or ExtrasQuery()
        extras = extras_query_builder.entity
        stmt = extras_query_builder.select()

        filters = query.filters
        if filters:
            if filters.club_id:
                stmt = stmt.where(extras.club_id == filters.club_id)
            if filters.status:
                stmt = stmt.where(extras.status == filters.status)
            if filters.hour_bank_enabled is not None:
                stmt = stmt.where(extras.hour_bank == filters.hour_bank_enabled)
            if filters.wishlist_enabled is not None:
                stmt = stmt.where(extras.wishlist == filters.wishlist_enabled)

            for field in INTEGRATION_FIELDS:
                value = getattr(filters, field)
                if value:
                    stmt = stmt.where(getattr(extras, field).ilike(f"%{value}%"))

            if filters.search_text:
                term = f"%{filters.search_text}%"
                stmt = stmt.where(or_(
                    extras.hour_bank_description.ilike(term),
                    extras.wishlist_description.ilike(term),
                    extras.notes.ilike(term),
                ))

            for field in ("created_at", "updated_at"):
                date_range = getattr(filters, field)
                if not date_range:
                    continue
                column = getattr(extras, field)
                if date_range.start_date:
                    stmt = stmt.where(column >= date_range.start_date)
                if date_range.end_date:
                    stmt = stmt.where(column <= date_range.end_date)

        skip = query.pagination.skip if query.pagination else 0
        take = query.pagination.take if query.pagination else EXTRAS_DEFAULT_TAKE

        try:
            total = extras_query_builder.count(db, stmt)
            stmt = extras_query_builder.apply_sort(stmt, [(s.field, s.order) for s in query.sort or []])
            items = extras_query_builder.all(db, extras_query_builder.paginate(stmt, skip, take))
        except SQLAlchemyError as e:
            logger.error(f"Error en la búsqueda avanzada de extras: {str(e)}")
            raise

        return SearchPage.build(items, total, skip, take)

    def update_status(self, db: Session, id: str, status: ExtrasStatus) -> Extras:
        return self.update(db, id, {"status": status})

    def toggle_feature(self, db: Session, id: str, feature: str, enabled: bool) -> Extras:
        """
        Activar o desactivar hourBank / wishlist.

        Raises:
            BadRequestError: Funcionalidad no permitida
            NotFoundError: Si los extras no existen
        """
        column = _feature_column(feature)
        return self.update(db, id, {column: enabled})

    def bulk_update_status(self, db: Session, ids: Sequence[str], status: ExtrasStatus) -> List[Extras]:
        """El primer error interrumpe el resto; los ya actualizados no se revierten."""
        return [self.update_status(db, id, status) for id in ids]

    def bulk_delete(self, db: Session, ids: Sequence[str]) -> bool:
        for id in ids:
            self.remove(db, id)
        return True


extras_service = ExtrasService(extras_repository)
