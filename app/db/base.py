# Importar todos los modelos para que Base.metadata los conozca (create_all)
from app.db.base_class import Base  # noqa
from app.models.club import Club  # noqa
from app.models.location_contact import LocationContact  # noqa
from app.models.working_hours import WorkingHoursCalendar  # noqa
from app.models.resource import Resource  # noqa
from app.models.amenity import Amenity  # noqa
from app.models.coach import Coach, CoachClass  # noqa
from app.models.membership import Membership  # noqa
from app.models.pricing import Pricing, PromoCode  # noqa
from app.models.user_group import UserGroup  # noqa
from app.models.team_member import TeamMember  # noqa
from app.models.extras import Extras  # noqa
