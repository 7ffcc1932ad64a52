from app.models.pricing import Pricing, PromoCode
from app.repositories.base import BaseRepository
from app.schemas.pricing import PricingCreate, PricingUpdate, PromoCodeCreate, PromoCodeUpdate


class PricingRepository(BaseRepository[Pricing, PricingCreate, PricingUpdate]):
    """Reglas de precio por franja horaria"""


class PromoCodeRepository(BaseRepository[PromoCode, PromoCodeCreate, PromoCodeUpdate]):
    """Códigos promocionales"""


pricing_repository = PricingRepository(Pricing)
promo_code_repository = PromoCodeRepository(PromoCode)
