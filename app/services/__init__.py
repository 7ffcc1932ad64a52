"""
Servicios del microservicio de configuración de clubes.

Importar este paquete registra el suscriptor de seguimiento del club en
`setup_events`, de modo que cualquier alta de una entidad hija actualiza el
progreso del club.
"""

# Inicializador del paquete services
from app.services.club import club_service
from app.services.location_contact import location_contact_service
from app.services.working_hours import working_hours_service
from app.services.resource import resource_service
from app.services.amenity import amenity_service
from app.services.coach import coach_service, coach_class_service
from app.services.membership import membership_service
from app.services.pricing import pricing_service, promo_code_service
from app.services.user_group import user_group_service
from app.services.team_member import team_member_service
from app.services.extras import extras_service
from app.services.storage import s3_upload_service
