from app.models.amenity import Amenity
from app.models.club import SetupStep
from app.repositories.amenity import amenity_repository
from app.schemas.amenity import AmenityCreate, AmenityUpdate
from app.services.base import ClubSingletonService


class AmenityService(ClubSingletonService[Amenity, AmenityCreate, AmenityUpdate]):
    """Amenidades (restaurante, wifi, duchas...) del club"""

    entity_name = "Amenity"
    setup_step = SetupStep.amenities


amenity_service = AmenityService(amenity_repository)
