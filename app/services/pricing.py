from app.models.club import SetupStep
from app.models.pricing import Pricing, PromoCode
from app.repositories.pricing import pricing_repository, promo_code_repository
from app.schemas.pricing import PricingCreate, PricingUpdate, PromoCodeCreate, PromoCodeUpdate
from app.services.base import ClubEntityService


class PricingService(ClubEntityService[Pricing, PricingCreate, PricingUpdate]):
    """Reglas de precio por día y franja horaria"""

    entity_name = "Pricing"
    setup_step = SetupStep.pricing


class PromoCodeService(ClubEntityService[PromoCode, PromoCodeCreate, PromoCodeUpdate]):
    """Códigos promocionales; no forman parte del seguimiento de la configuración"""

    entity_name = "PromoCode"


pricing_service = PricingService(pricing_repository)
promo_code_service = PromoCodeService(promo_code_repository)
