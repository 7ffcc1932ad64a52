from app.models.club import SetupStep
from app.models.user_group import UserGroup
from app.repositories.user_group import user_group_repository
from app.schemas.user_group import UserGroupCreate, UserGroupUpdate
from app.services.base import ClubEntityService


class UserGroupService(ClubEntityService[UserGroup, UserGroupCreate, UserGroupUpdate]):
    """Grupos de usuarios con descuento"""

    entity_name = "UserGroup"
    setup_step = SetupStep.user_groups


user_group_service = UserGroupService(user_group_repository)
