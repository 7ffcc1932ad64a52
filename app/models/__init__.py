from app.models.club import Club, ClubType, SportsType, AdditionalService, SetupStatus, SetupStep
from app.models.location_contact import LocationContact
from app.models.working_hours import WorkingHoursCalendar, DayOfWeek, BookingTimeUnit
from app.models.resource import Resource, ResourceServiceType, ResourceType, ResourceProperty, ResourceStatus
from app.models.amenity import Amenity
from app.models.coach import Coach, CoachClass, CoachStatus, CoachGender, LanguageLevel, PriceType
from app.models.membership import Membership, MembershipStatus
from app.models.pricing import Pricing, PromoCode, PromoPriceType
from app.models.user_group import UserGroup, UserGroupStatus
from app.models.team_member import (
    TeamMember, TeamMemberGender, TeamMemberStatus, PermissionType, ClubOwnerType
)
from app.models.extras import Extras, ExtrasStatus, ExtrasUserType, ExtrasLimitType
