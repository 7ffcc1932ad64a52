from typing import List

from sqlalchemy.orm import Session

from app.models.resource import Resource, ResourceServiceType, ResourceStatus
from app.repositories.base import BaseRepository
from app.schemas.resource import ResourceCreate, ResourceUpdate


class ResourceRepository(BaseRepository[Resource, ResourceCreate, ResourceUpdate]):
    """Repositorio de recursos (pistas, campos, salas)"""

    def get_by_service(self, db: Session, service: ResourceServiceType) -> List[Resource]:
        return db.query(Resource).filter(Resource.service == service).all()

    def get_by_status(self, db: Session, status: ResourceStatus) -> List[Resource]:
        return db.query(Resource).filter(Resource.status == status).all()


resource_repository = ResourceRepository(Resource)
