from app.models.club import SetupStep
from app.models.membership import Membership
from app.repositories.membership import membership_repository
from app.schemas.membership import MembershipCreate, MembershipUpdate
from app.services.base import ClubEntityService


class MembershipService(ClubEntityService[Membership, MembershipCreate, MembershipUpdate]):
    """Planes de membresía del club"""

    entity_name = "Membership"
    setup_step = SetupStep.memberships


membership_service = MembershipService(membership_repository)
