from typing import Dict, List, Optional

from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session

from app.models.extras import Extras, ExtrasStatus
from app.repositories.base import BaseRepository
from app.schemas.extras import ExtrasCreate, ExtrasUpdate


class ExtrasRepository(BaseRepository[Extras, ExtrasCreate, ExtrasUpdate]):
    """Repositorio de extras (funcionalidades e integraciones)"""

    def _find(self, db: Session, condition, club_id: Optional[str] = None) -> List[Extras]:
        query = db.query(Extras).filter(condition)
        if club_id:
            query = query.filter(Extras.club_id == club_id)
        return query.order_by(Extras.created_at.desc()).all()

    def get_by_status(self, db: Session, status: ExtrasStatus, club_id: Optional[str] = None) -> List[Extras]:
        return self._find(db, Extras.status == status, club_id)

    def get_by_feature(self, db: Session, column: str, enabled: bool, club_id: Optional[str] = None) -> List[Extras]:
        """Extras con la funcionalidad booleana `column` activada o desactivada."""
        return self._find(db, getattr(Extras, column) == enabled, club_id)

    def count_by(self, db: Session, status: Optional[ExtrasStatus] = None, club_id: Optional[str] = None) -> int:
        query = db.query(Extras)
        if status:
            query = query.filter(Extras.status == status)
        if club_id:
            query = query.filter(Extras.club_id == club_id)
        return query.count()

    def search_by_description(
        self, db: Session, term: str, limit: int = 20, club_id: Optional[str] = None
    ) -> List[Extras]:
        pattern = f"%{term}%"
        query = db.query(Extras).filter(
            or_(
                Extras.hour_bank_description.ilike(pattern),
                Extras.wishlist_description.ilike(pattern),
                Extras.notes.ilike(pattern),
            )
        )
        if club_id:
            query = query.filter(Extras.club_id == club_id)
        return query.limit(limit).all()

    def integration_stats(self, db: Session, club_id: Optional[str] = None) -> Dict[str, int]:
        """
        Contar extras con cada funcionalidad activada o integración configurada.

        Returns:
            Diccionario con los contadores (0 cuando no hay filas)
        """
        def count_when(condition):
            return func.count(case((condition, 1)))

        query = db.query(
            count_when(Extras.hour_bank == True).label("hour_bank_enabled"),
            count_when(Extras.wishlist == True).label("wishlist_enabled"),
            count_when(Extras.external_booking_system.isnot(None)).label("external_booking_count"),
            count_when(Extras.payment_gateway.isnot(None)).label("payment_gateway_count"),
            count_when(Extras.email_marketing.isnot(None)).label("email_marketing_count"),
            count_when(Extras.analytics_integration.isnot(None)).label("analytics_count"),
            count_when(Extras.social_media_integration.isnot(None)).label("social_media_count"),
        )
        if club_id:
            query = query.filter(Extras.club_id == club_id)

        row = query.one()
        return {key: int(value or 0) for key, value in row._mapping.items()}


extras_repository = ExtrasRepository(Extras)
