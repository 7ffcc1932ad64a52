from app.models.location_contact import LocationContact
from app.repositories.base import BaseRepository
from app.schemas.location_contact import LocationContactCreate, LocationContactUpdate


class LocationContactRepository(BaseRepository[LocationContact, LocationContactCreate, LocationContactUpdate]):
    """Ubicación y contacto (uno por club)"""


location_contact_repository = LocationContactRepository(LocationContact)
