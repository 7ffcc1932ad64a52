import logging

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError
from app.models.club import SetupStep
from app.models.location_contact import LocationContact
from app.repositories.location_contact import location_contact_repository
from app.schemas.location_contact import LocationContactCreate, LocationContactUpdate
from app.services.base import ClubSingletonService

logger = logging.getLogger(__name__)


class LocationContactService(ClubSingletonService[LocationContact, LocationContactCreate, LocationContactUpdate]):
    """Ubicación y datos de contacto del club"""

    entity_name = "LocationContact"
    setup_step = SetupStep.location_contact

    def update_by_club_id(self, db: Session, club_id: str, obj_in: LocationContactUpdate) -> LocationContact:
        """
        Actualizar la ubicación del club, o crearla si todavía no existe.

        Al crearla se notifica el paso `location_contact`.

        Raises:
            BadRequestError: Si hay que crearla y faltan dirección, ciudad o país
        """
        location_contact = self.find_by_club_id(db, club_id)
        if location_contact:
            return super().update_by_club_id(db, club_id, obj_in)

        logger.info(f"El club {club_id} no tiene ubicación, se crea una nueva")
        try:
            create_in = LocationContactCreate(club_id=club_id, **obj_in.model_dump(exclude_unset=True))
        except ValidationError as e:
            logger.error(f"Datos insuficientes para crear la ubicación del club {club_id}: {str(e)}")
            raise BadRequestError(f"Invalid location contact input: {e.errors()[0]['msg']}") from e
        return self.create(db, create_in)


location_contact_service = LocationContactService(location_contact_repository)
