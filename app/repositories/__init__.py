# Inicializador del paquete repositories
from app.repositories.base import BaseRepository

from app.repositories.club import club_repository
from app.repositories.location_contact import location_contact_repository
from app.repositories.working_hours import working_hours_repository
from app.repositories.resource import resource_repository
from app.repositories.amenity import amenity_repository
from app.repositories.coach import coach_repository, coach_class_repository
from app.repositories.membership import membership_repository
from app.repositories.pricing import pricing_repository, promo_code_repository
from app.repositories.user_group import user_group_repository
from app.repositories.team_member import team_member_repository
from app.repositories.extras import extras_repository

__all__ = [
    "BaseRepository",
    "club_repository",
    "location_contact_repository",
    "working_hours_repository",
    "resource_repository",
    "amenity_repository",
    "coach_repository",
    "coach_class_repository",
    "membership_repository",
    "pricing_repository",
    "promo_code_repository",
    "user_group_repository",
    "team_member_repository",
    "extras_repository",
]
