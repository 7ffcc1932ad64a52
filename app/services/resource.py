from typing import List

from sqlalchemy.orm import Session

from app.models.club import SetupStep
from app.models.resource import Resource, ResourceServiceType, ResourceStatus
from app.repositories.resource import resource_repository
from app.schemas.resource import ResourceCreate, ResourceUpdate
from app.services.base import ClubEntityService


class ResourceService(ClubEntityService[Resource, ResourceCreate, ResourceUpdate]):
    """Recursos reservables del club (pistas, campos, salas)"""

    entity_name = "Resource"
    setup_step = SetupStep.resources

    def find_by_service(self, db: Session, service: ResourceServiceType) -> List[Resource]:
        return resource_repository.get_by_service(db, service)

    def find_by_status(self, db: Session, status: ResourceStatus) -> List[Resource]:
        return resource_repository.get_by_status(db, status)


resource_service = ResourceService(resource_repository)
