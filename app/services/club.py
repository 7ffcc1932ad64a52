"""
Servicio de configuración de clubes.

Gestiona el CRUD del club, las búsquedas (filtro declarativo y consulta
segura por campo/operador) y la máquina de estados del seguimiento de la
configuración (`setup_status`, `current_step`, `completed_steps`).
"""
import logging
from typing import Any, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, NotFoundError
from app.core.setup_events import SetupStepCompleted, setup_events
from app.core.timezone_utils import utcnow
from app.models.amenity import Amenity
from app.models.club import Club, SetupStatus, SetupStep
from app.models.coach import Coach
from app.models.location_contact import LocationContact
from app.models.resource import Resource
from app.models.working_hours import WorkingHoursCalendar
from app.repositories.club import club_repository
from app.schemas.club import ClubCreate, ClubFieldFilter, ClubFilter, ClubUpdate, CompleteClubSetup
from app.services.base import update_values
from app.services.storage import FileUpload, StorageError, s3_upload_service
from app.utils.dynamic_filter import build_where_conditions, create_field_configs
from app.utils.query_builder import club_query_builder

logger = logging.getLogger(__name__)

# Relaciones que se cargan al obtener un club por ID
DETAIL_RELATIONS = ("location_contact", "working_hours_calendar", "resources", "amenity")

# Relaciones por defecto en los listados
DEFAULT_RELATIONS = (
    "location_contact",
    "working_hours_calendar",
    "resources",
    "amenity",
    "coaches",
    "team_members",
    "memberships",
    "pricing",
    "promocodes",
    "user_groups",
)

CLUB_FIELD_CONFIGS = create_field_configs(
    partial=["title", "description"],
    exact=["id", "type_of_club", "chain_id", "currency", "setup_status", "current_step"],
    array=["sports", "additional_services", "completed_steps"],
    boolean=[
        "is_part_of_chain",
        "enable_online_bookings",
        "enable_class_bookings",
        "enable_open_matches",
        "enable_academy_management",
        "enable_event_management",
        "enable_league_tournament_management",
        "online_payment",
        "onsite_payment",
        "by_invoice",
    ],
)

CLUB_RELATION_FIELDS = {
    "club_id": lambda value: Club.id == value,
    "amenity_id": lambda value: Club.amenity.has(Amenity.id == value),
    "location_contact_id": lambda value: Club.location_contact.has(LocationContact.id == value),
    "working_hours_calendar_id": lambda value: Club.working_hours_calendar.has(WorkingHoursCalendar.id == value),
    "resource_ids": lambda value: Club.resources.any(Resource.id.in_(value)),
    "coach_id": lambda value: Club.coaches.any(Coach.id == value),
}


def _step_value(step: Any) -> str:
    return step.value if isinstance(step, SetupStep) else SetupStep(step).value


class ClubSetupService:
    """Servicio para gestionar la configuración de clubes"""

    # === Subidas ===

    def process_logo_upload(self, file: Optional[FileUpload]) -> Optional[str]:
        """
        Subir un logo o imagen de galería y devolver su URL pública.

        Raises:
            BadRequestError: Si la subida falla
        """
        if not file:
            return None
        try:
            return s3_upload_service.upload_file(file.filename, file.content, file.content_type)
        except StorageError as e:
            logger.error(f"Error al subir el logo {file.filename}: {str(e)}")
            raise BadRequestError("Failed to upload logo") from e

    def _upload_gallery(self, files: Optional[Sequence[FileUpload]]) -> List[str]:
        urls = []
        for file in files or []:
            url = self.process_logo_upload(file)
            if url:
                urls.append(url)
        return urls

    # === CRUD ===

    def create_club(
        self,
        db: Session,
        club_in: ClubCreate,
        logo: Optional[FileUpload] = None,
        gallery_images: Optional[Sequence[FileUpload]] = None,
    ) -> Club:
        """
        Crear la configuración de un club en estado borrador.

        Args:
            db: Sesión de base de datos
            club_in: Datos del club
            logo: Logo a subir (opcional)
            gallery_images: Imágenes de galería a subir (opcional)

        Returns:
            El club creado con `setup_status=draft` y `current_step=club_setup`
        """
        club_data = club_in.model_dump(exclude_none=True)

        logo_url = self.process_logo_upload(logo)
        if logo_url:
            club_data["logo"] = logo_url

        gallery_urls = self._upload_gallery(gallery_images)
        if gallery_urls:
            club_data["gallery_images"] = gallery_urls

        club_data.update(
            setup_status=SetupStatus.draft,
            current_step=SetupStep.club_setup,
            completed_steps=[SetupStep.club_setup.value],
            last_saved_at=utcnow(),
        )

        try:
            club = club_repository.create(db, obj_in=club_data)
        except SQLAlchemyError as e:
            logger.error(f"Error al crear la configuración del club: {str(e)}")
            raise

        logger.info(f"Club creado: {club.title} (ID: {club.id})")
        return club

    def find_club_by_id(self, db: Session, club_id: str) -> Optional[Club]:
        if not club_id:
            raise BadRequestError("Club ID is required")
        return club_repository.get_with_relations(db, club_id, DETAIL_RELATIONS)

    def get_club(self, db: Session, club_id: str) -> Club:
        """Obtener un club o lanzar NotFoundError."""
        club = self.find_club_by_id(db, club_id)
        if not club:
            raise NotFoundError("Club not found")
        return club

    def find_all(
        self, db: Session, club_filter: Optional[ClubFilter] = None, relations: Sequence[str] = ()
    ) -> List[Club]:
        """
        Listar clubes aplicando el filtro declarativo.

        Las claves no configuradas se ignoran; `title` y `description` son
        coincidencias parciales sin distinguir mayúsculas.
        """
        filter_values = club_filter.model_dump(exclude_none=True) if club_filter else {}
        conditions = build_where_conditions(Club, filter_values, CLUB_FIELD_CONFIGS, CLUB_RELATION_FIELDS)
        logger.debug(f"Filtro de clubes recibido: {filter_values} ({len(conditions)} condiciones)")

        return club_repository.find(db, conditions, relations or DEFAULT_RELATIONS)

    def get_values_by_field_value_and_relations(
        self, db: Session, field: str, value: Any, relations: Sequence[str]
    ) -> Optional[Club]:
        """
        Obtener el primer club cuyo `field` es igual a `value`, con las relaciones indicadas.

        Raises:
            BadRequestError: Si el campo o alguna relación no existen en el modelo
        """
        if field not in Club.__table__.columns:
            raise BadRequestError(f"Invalid field name: {field}")
        for relation in relations:
            if relation not in DEFAULT_RELATIONS:
                raise BadRequestError(f"Invalid relation: {relation}")

        try:
            clubs = club_repository.find(db, [getattr(Club, field) == value], relations)
        except SQLAlchemyError as e:
            logger.error(f"Error al obtener club por {field}={value} con relaciones {list(relations)}: {str(e)}")
            raise
        return clubs[0] if clubs else None

    def find_clubs_with_secure_query(
        self, db: Session, filters: Sequence[ClubFieldFilter], relations: Sequence[str] = ()
    ) -> List[Club]:
        """
        Buscar clubes con condiciones campo/operador/valor validadas contra la lista blanca.

        Raises:
            BadRequestError: Campo u operador no permitido
        """
        stmt = club_query_builder.build(filters, relations)
        try:
            return club_query_builder.all(db, club_query_builder.apply_sort(stmt))
        except SQLAlchemyError as e:
            logger.error(f"Error en la búsqueda segura de clubes {[f.model_dump() for f in filters]}: {str(e)}")
            raise

    def count_clubs_with_secure_query(self, db: Session, filters: Sequence[ClubFieldFilter]) -> int:
        stmt = club_query_builder.build(filters)
        try:
            return club_query_builder.count(db, stmt)
        except SQLAlchemyError as e:
            logger.error(f"Error al contar clubes {[f.model_dump() for f in filters]}: {str(e)}")
            raise

    def get_clubs_by_setup_status(self, db: Session, status: SetupStatus) -> List[Club]:
        return club_repository.get_by_setup_status(db, status)

    def update_club(
        self,
        db: Session,
        club_id: str,
        club_in: ClubUpdate,
        logo: Optional[FileUpload] = None,
        gallery_images: Optional[Sequence[FileUpload]] = None,
    ) -> Club:
        """
        Actualizar un club; solo se modifican los campos enviados.

        Raises:
            NotFoundError: Si el club no existe
            BadRequestError: Si falla la subida del logo o la galería
        """
        club = self.get_club(db, club_id)
        update_data = update_values(club, club_in)

        logo_url = self.process_logo_upload(logo)
        if logo_url:
            update_data["logo"] = logo_url

        gallery_urls = self._upload_gallery(gallery_images)
        if gallery_urls:
            update_data["gallery_images"] = gallery_urls

        try:
            club = club_repository.update(db, db_obj=club, obj_in=update_data)
        except SQLAlchemyError as e:
            logger.error(f"Error al actualizar el club {club_id}: {str(e)}")
            raise

        logger.info(f"Club actualizado: {club_id}")
        return club

    def delete_club(self, db: Session, club_id: str) -> bool:
        """Eliminar un club. Devuelve False si no existía."""
        if not club_id:
            raise BadRequestError("Club ID is required")
        try:
            deleted = club_repository.remove(db, id=club_id)
        except SQLAlchemyError as e:
            logger.error(f"Error al eliminar el club {club_id}: {str(e)}")
            raise

        if deleted:
            logger.info(f"Club eliminado: {club_id}")
        return deleted is not None

    # === Seguimiento de la configuración ===

    def update_setup_tracking(self, db: Session, club_id: str, step: SetupStep) -> Club:
        """
        Marcar un paso como completado y pasar el club a `in_progress`.

        Repetir el mismo paso no duplica `completed_steps`; no se valida el
        orden de los pasos y un club abandonado vuelve a `in_progress`.

        Raises:
            NotFoundError: Si el club no existe
        """
        club = club_repository.get(db, club_id)
        if not club:
            logger.error(f"Error al actualizar el seguimiento: club {club_id} no encontrado (paso {step})")
            raise NotFoundError("Club not found")

        step_value = _step_value(step)
        completed_steps = list(club.completed_steps or [])
        if step_value not in completed_steps:
            completed_steps.append(step_value)

        club.setup_status = SetupStatus.in_progress
        club.current_step = SetupStep(step_value)
        # Reasignar la lista para que SQLAlchemy detecte el cambio en la columna JSON
        club.completed_steps = completed_steps
        club.last_saved_at = utcnow()

        club = club_repository.save(db, club)
        logger.info(f"Seguimiento actualizado para club {club_id}: paso {step_value}")
        return club

    def complete_club_setup(self, db: Session, complete_in: CompleteClubSetup) -> Club:
        """
        Cerrar la configuración del club en `final_step`.

        Raises:
            NotFoundError: Si el club no existe
        """
        club = club_repository.get(db, complete_in.club_id)
        if not club:
            logger.error(f"Error al completar la configuración: club {complete_in.club_id} no encontrado")
            raise NotFoundError("Club not found")

        final_step = _step_value(complete_in.final_step)
        completed_steps = list(dict.fromkeys([*(club.completed_steps or []), final_step]))

        club.setup_status = SetupStatus.completed
        club.current_step = SetupStep(final_step)
        club.completed_steps = completed_steps
        club.last_saved_at = utcnow()

        club = club_repository.save(db, club)
        logger.info(f"Configuración completada para club {complete_in.club_id}")
        return club

    def abandon_club_setup(self, db: Session, club_id: str) -> Club:
        """Marcar el club como abandonado sin tocar los pasos completados."""
        club = club_repository.get(db, club_id)
        if not club:
            logger.error(f"Error al abandonar la configuración: club {club_id} no encontrado")
            raise NotFoundError("Club not found")

        club.setup_status = SetupStatus.abandoned
        club.last_saved_at = utcnow()

        club = club_repository.save(db, club)
        logger.info(f"Configuración abandonada para club {club_id}")
        return club

    def handle_step_completed(self, db: Session, event: SetupStepCompleted) -> None:
        """Suscriptor de `SetupStepCompleted`."""
        if event.final:
            self.complete_club_setup(db, CompleteClubSetup(club_id=event.club_id, final_step=event.step))
        else:
            self.update_setup_tracking(db, event.club_id, event.step)


club_service = ClubSetupService()

setup_events.subscribe(SetupStepCompleted, club_service.handle_step_completed)
