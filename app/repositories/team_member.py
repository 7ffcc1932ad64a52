from typing import List, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.team_member import PermissionType, TeamMember, TeamMemberStatus
from app.repositories.base import BaseRepository
from app.schemas.team_member import TeamMemberCreate, TeamMemberUpdate
from app.utils.dynamic_filter import json_array_overlaps


class TeamMemberRepository(BaseRepository[TeamMember, TeamMemberCreate, TeamMemberUpdate]):
    """Repositorio de miembros del equipo"""

    def _find(self, db: Session, condition, club_id: Optional[str] = None) -> List[TeamMember]:
        query = db.query(TeamMember).filter(condition)
        if club_id:
            query = query.filter(TeamMember.club_id == club_id)
        return query.order_by(TeamMember.created_at.desc()).all()

    def get_by_status(self, db: Session, status: TeamMemberStatus, club_id: Optional[str] = None) -> List[TeamMember]:
        return self._find(db, TeamMember.status == status, club_id)

    def get_by_position(self, db: Session, position: str, club_id: Optional[str] = None) -> List[TeamMember]:
        return self._find(db, TeamMember.position.ilike(f"%{position}%"), club_id)

    def get_by_permissions(
        self, db: Session, permissions: Sequence[PermissionType], club_id: Optional[str] = None
    ) -> List[TeamMember]:
        """Miembros con al menos uno de los permisos indicados."""
        return self._find(db, json_array_overlaps(TeamMember.permissions, permissions), club_id)

    def count_by(self, db: Session, status: Optional[TeamMemberStatus] = None, club_id: Optional[str] = None) -> int:
        query = db.query(TeamMember)
        if status:
            query = query.filter(TeamMember.status == status)
        if club_id:
            query = query.filter(TeamMember.club_id == club_id)
        return query.count()

    def search_by_name(
        self, db: Session, term: str, limit: int = 20, club_id: Optional[str] = None
    ) -> List[TeamMember]:
        """
        Buscar por nombre, apellidos o email (coincidencia parcial, sin distinguir mayúsculas).

        Args:
            db: Sesión de base de datos
            term: Texto a buscar
            limit: Máximo de resultados
            club_id: Restringir la búsqueda a un club
        """
        pattern = f"%{term}%"
        query = db.query(TeamMember).filter(
            or_(TeamMember.name.ilike(pattern), TeamMember.surname.ilike(pattern), TeamMember.email.ilike(pattern))
        )
        if club_id:
            query = query.filter(TeamMember.club_id == club_id)
        return query.limit(limit).all()


team_member_repository = TeamMemberRepository(TeamMember)
