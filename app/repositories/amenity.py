from app.models.amenity import Amenity
from app.repositories.base import BaseRepository
from app.schemas.amenity import AmenityCreate, AmenityUpdate


class AmenityRepository(BaseRepository[Amenity, AmenityCreate, AmenityUpdate]):
    """Amenidades del club (una fila por club)"""


amenity_repository = AmenityRepository(Amenity)
