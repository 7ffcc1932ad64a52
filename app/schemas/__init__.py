from app.schemas.common import DateRange, PaginationParams, SortOrder, SortParams
from app.schemas.club import ClubCreate, ClubUpdate, ClubFilter, ClubFieldFilter, CompleteClubSetup
from app.schemas.location_contact import LocationContactCreate, LocationContactUpdate
from app.schemas.working_hours import WorkingHoursCreate, WorkingHoursUpdate, CalendarSettings
from app.schemas.resource import ResourceCreate, ResourceUpdate
from app.schemas.amenity import AmenityCreate, AmenityUpdate
from app.schemas.coach import (
    CoachCreate, CoachUpdate, CoachQuery, CoachClassCreate, CoachClassUpdate, CoachClassFilter
)
from app.schemas.membership import MembershipCreate, MembershipUpdate
from app.schemas.pricing import PricingCreate, PricingUpdate, PromoCodeCreate, PromoCodeUpdate
from app.schemas.user_group import UserGroupCreate, UserGroupUpdate
from app.schemas.team_member import TeamMemberCreate, TeamMemberUpdate, TeamMemberQuery
from app.schemas.extras import ExtrasCreate, ExtrasUpdate, ExtrasQuery, IntegrationStats
