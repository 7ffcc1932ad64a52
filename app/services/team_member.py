"""
Servicio de miembros del equipo.

Cada alta de un miembro cierra la configuración del club (paso final
`team_members`), no solo la primera.
"""
import logging
from typing import List, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.club import SetupStep
from app.models.team_member import PermissionType, TeamMember, TeamMemberStatus
from app.repositories.team_member import team_member_repository
from app.schemas.team_member import TeamMemberCreate, TeamMemberQuery, TeamMemberUpdate
from app.services.base import ClubEntityService, SearchPage
from app.utils.dynamic_filter import json_array_overlaps
from app.utils.query_builder import team_member_query_builder

logger = logging.getLogger(__name__)

TEAM_MEMBER_DEFAULT_TAKE = 20


def _permission_value(permission) -> str:
    return permission.value if isinstance(permission, PermissionType) else PermissionType(permission).value


class TeamMemberService(ClubEntityService[TeamMember, TeamMemberCreate, TeamMemberUpdate]):
    """Servicio para gestionar el equipo del club"""

    entity_name = "TeamMember"
    setup_step = SetupStep.team_members
    final_step = True

    def _not_found(self, id):
        return NotFoundError(f"Team member with ID {id} not found")

    # === Búsquedas ===

    def find_by_status(self, db: Session, status: TeamMemberStatus, club_id: Optional[str] = None) -> List[TeamMember]:
        return team_member_repository.get_by_status(db, status, club_id)

    def find_by_position(self, db: Session, position: str, club_id: Optional[str] = None) -> List[TeamMember]:
        return team_member_repository.get_by_position(db, position, club_id)

    def find_by_permissions(
        self, db: Session, permissions: Sequence[PermissionType], club_id: Optional[str] = None
    ) -> List[TeamMember]:
        return team_member_repository.get_by_permissions(db, permissions, club_id)

    def search_by_name(self, db: Session, term: str, limit: int = 20, club_id: Optional[str] = None) -> List[TeamMember]:
        return team_member_repository.search_by_name(db, term, limit=limit, club_id=club_id)

    def get_count(self, db: Session, status: Optional[TeamMemberStatus] = None, club_id: Optional[str] = None) -> int:
        return team_member_repository.count_by(db, status=status, club_id=club_id)

    def advanced_search(self, db: Session, query: Optional[TeamMemberQuery] = None) -> SearchPage[TeamMember]:
        """
        Búsqueda avanzada con filtros, orden y paginación.

        Args:
            db: Sesión de base de datos
            query: Filtros, lista de ordenación y paginación (skip/take, take=20 por defecto)

        Returns:
            SearchPage con items, total, página actual, límite y número de páginas
        """
        query = query or TeamMemberQuery()
        member = team_member_query_builder.entity
        stmt = team_member_query_builder.select()

        filters = query.filters
        if filters:
            for field in ("name", "surname", "email", "phone", "country", "position"):
                value = getattr(filters, field)
                if value:
                    stmt = stmt.where(getattr(member, field).ilike(f"%{value}%"))

            if filters.statuses:
                stmt = stmt.where(member.status.in_(filters.statuses))
            if filters.gender:
                stmt = stmt.where(member.gender == filters.gender)
            if filters.permissions:
                stmt = stmt.where(json_array_overlaps(member.permissions, filters.permissions))
            if filters.club_owner:
                stmt = stmt.where(member.club_owner == filters.club_owner)
            if filters.club_id:
                stmt = stmt.where(member.club_id == filters.club_id)
            if filters.search_text:
                term = f"%{filters.search_text}%"
                stmt = stmt.where(or_(
                    member.name.ilike(term),
                    member.surname.ilike(term),
                    member.email.ilike(term),
                    member.position.ilike(term),
                ))

            for field in ("created_at", "updated_at"):
                date_range = getattr(filters, field)
                if not date_range:
                    continue
                column = getattr(member, field)
                if date_range.start_date:
                    stmt = stmt.where(column >= date_range.start_date)
                if date_range.end_date:
                    stmt = stmt.where(column <= date_range.end_date)

        skip = query.pagination.skip if query.pagination else 0
        take = query.pagination.take if query.pagination else TEAM_MEMBER_DEFAULT_TAKE

        try:
            total = team_member_query_builder.count(db, stmt)
            stmt = team_member_query_builder.apply_sort(stmt, [(s.field, s.order) for s in query.sort or []])
            items = team_member_query_builder.all(db, team_member_query_builder.paginate(stmt, skip, take))
        except SQLAlchemyError as e:
            logger.error(f"Error en la búsqueda avanzada de miembros del equipo: {str(e)}")
            raise

        return SearchPage.build(items, total, skip, take)

    # === Estado y permisos ===

    def update_status(self, db: Session, id: str, status: TeamMemberStatus) -> TeamMember:
        return self.update(db, id, {"status": status})

    def update_permissions(self, db: Session, id: str, permissions: Sequence[PermissionType]) -> TeamMember:
        return self.update(db, id, {"permissions": [_permission_value(p) for p in permissions]})

    def add_permission(self, db: Session, id: str, permission: PermissionType) -> TeamMember:
        member = self.find_one(db, id)
        permissions = list(member.permissions or [])
        value = _permission_value(permission)
        if value not in permissions:
            permissions.append(value)
        return self.update(db, id, {"permissions": permissions})

    def remove_permission(self, db: Session, id: str, permission: PermissionType) -> TeamMember:
        member = self.find_one(db, id)
        value = _permission_value(permission)
        permissions = [p for p in member.permissions or [] if p != value]
        return self.update(db, id, {"permissions": permissions})

    # === Operaciones masivas ===

    def bulk_update_status(self, db: Session, ids: Sequence[str], status: TeamMemberStatus) -> List[TeamMember]:
        """
        Cambiar el estado de varios miembros, uno a uno.

        El primer error interrumpe el resto; los ya actualizados no se revierten.
        """
        return [self.update_status(db, id, status) for id in ids]

    def bulk_delete(self, db: Session, ids: Sequence[str]) -> bool:
        """Eliminar varios miembros, uno a uno; los IDs inexistentes se ignoran."""
        for id in ids:
            self.remove(db, id)
        return True


team_member_service = TeamMemberService(team_member_repository)
