"""
Registro de los enums del dominio en el esquema GraphQL.

Los valores GraphQL coinciden con los valores almacenados (`draft`,
`club_setup`, `per_class`...).
"""
import strawberry

from app.models.club import AdditionalService, ClubType, SetupStatus, SetupStep, SportsType
from app.models.coach import CoachGender, CoachStatus, LanguageLevel, PriceType
from app.models.extras import ExtrasLimitType, ExtrasStatus, ExtrasUserType
from app.models.membership import MembershipStatus
from app.models.pricing import PromoPriceType
from app.models.resource import ResourceProperty, ResourceServiceType, ResourceStatus, ResourceType
from app.models.team_member import ClubOwnerType, PermissionType, TeamMemberGender, TeamMemberStatus
from app.models.user_group import UserGroupStatus
from app.models.working_hours import BookingTimeUnit, DayOfWeek
from app.schemas.common import SortOrder

for _enum in (
    ClubType,
    SportsType,
    AdditionalService,
    SetupStatus,
    SetupStep,
    DayOfWeek,
    BookingTimeUnit,
    ResourceServiceType,
    ResourceType,
    ResourceProperty,
    ResourceStatus,
    CoachStatus,
    CoachGender,
    LanguageLevel,
    PriceType,
    MembershipStatus,
    PromoPriceType,
    UserGroupStatus,
    TeamMemberGender,
    TeamMemberStatus,
    PermissionType,
    ClubOwnerType,
    ExtrasStatus,
    ExtrasUserType,
    ExtrasLimitType,
    SortOrder,
):
    strawberry.enum(_enum)
