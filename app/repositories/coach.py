import json
from typing import List

from sqlalchemy.orm import Session

from app.models.coach import Coach, CoachClass
from app.repositories.base import BaseRepository
from app.schemas.coach import CoachClassCreate, CoachClassUpdate, CoachCreate, CoachUpdate
from app.utils.dynamic_filter import json_array_contains, json_text_contains


class CoachRepository(BaseRepository[Coach, CoachCreate, CoachUpdate]):
    """Repositorio de entrenadores"""

    def get_by_service(self, db: Session, service: str) -> List[Coach]:
        """Entrenadores cuya lista de servicios incluye `service`."""
        return db.query(Coach).filter(json_array_contains(Coach.services, service)).all()


def coach_assigned(coach_id: str):
    """La clase tiene asignado al entrenador `coach_id`."""
    # La lista `coach` guarda objetos {"coach_id": ..., "salary": ..., "add_to_balance": ...}
    return json_text_contains(CoachClass.coach, f'"coach_id": {json.dumps(coach_id)}')


class CoachClassRepository(BaseRepository[CoachClass, CoachClassCreate, CoachClassUpdate]):
    """Repositorio de clases impartidas por entrenadores"""

    def get_by_coach(self, db: Session, coach_id: str) -> List[CoachClass]:
        return (
            db.query(CoachClass)
            .filter(coach_assigned(coach_id))
            .order_by(CoachClass.created_at.desc())
            .all()
        )


coach_repository = CoachRepository(Coach)
coach_class_repository = CoachClassRepository(CoachClass)
