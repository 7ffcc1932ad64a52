from app.models.membership import Membership
from app.repositories.base import BaseRepository
from app.schemas.membership import MembershipCreate, MembershipUpdate


class MembershipRepository(BaseRepository[Membership, MembershipCreate, MembershipUpdate]):
    """Planes de membresía del club"""


membership_repository = MembershipRepository(Membership)
