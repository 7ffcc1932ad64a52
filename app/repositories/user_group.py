from app.models.user_group import UserGroup
from app.repositories.base import BaseRepository
from app.schemas.user_group import UserGroupCreate, UserGroupUpdate


class UserGroupRepository(BaseRepository[UserGroup, UserGroupCreate, UserGroupUpdate]):
    """Grupos de usuarios con descuentos"""


user_group_repository = UserGroupRepository(UserGroup)
