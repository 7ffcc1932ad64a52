from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.graphql.enums import DayOfWeek, PromoPriceType
from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.pricing import PricingCreate, PricingUpdate, PromoCodeCreate, PromoCodeUpdate
from app.services.pricing import pricing_service, promo_code_service


@strawberry.federation.type(keys=["id"], name="Pricing")
class PricingType:
    id: strawberry.ID
    club_id: str
    weekdays: List[str]
    start_time: str
    end_time: str
    resource_ids: Optional[List[str]]
    user_group_ids: Optional[List[str]]
    membership_ids: Optional[List[str]]
    price: Optional[float]
    currency: Optional[str]
    type: str
    period: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return pricing_service.get(info.context["db"], id)


@strawberry.federation.type(keys=["id"], name="PromoCode")
class PromoCodeType:
    id: strawberry.ID
    club_id: str
    name: Optional[str]
    service_ids: List[str]
    resource_ids: Optional[List[str]]
    user_group_ids: Optional[List[str]]
    membership_ids: Optional[List[str]]
    promo_period: Optional[str]
    custom_period_number: Optional[int]
    custom_period_string: Optional[str]
    # Se guarda como texto; los valores válidos son los de PromoPriceType
    price_type: Optional[str]
    amount: Optional[float]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return promo_code_service.get(info.context["db"], id)


@strawberry.input
class CreatePricingInput:
    club_id: str
    start_time: str
    end_time: str
    weekdays: Optional[List[DayOfWeek]] = None
    resource_ids: Optional[List[str]] = None
    user_group_ids: Optional[List[str]] = None
    membership_ids: Optional[List[str]] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[str] = None
    period: Optional[str] = None


@strawberry.input
class UpdatePricingInput:
    start_time: Optional[str] = strawberry.UNSET
    end_time: Optional[str] = strawberry.UNSET
    weekdays: Optional[List[DayOfWeek]] = strawberry.UNSET
    resource_ids: Optional[List[str]] = strawberry.UNSET
    user_group_ids: Optional[List[str]] = strawberry.UNSET
    membership_ids: Optional[List[str]] = strawberry.UNSET
    price: Optional[float] = strawberry.UNSET
    currency: Optional[str] = strawberry.UNSET
    type: Optional[str] = strawberry.UNSET
    period: Optional[str] = strawberry.UNSET


@strawberry.input
class CreatePromoCodeInput:
    club_id: str
    service_ids: Optional[List[str]] = None
    name: Optional[str] = None
    resource_ids: Optional[List[str]] = None
    user_group_ids: Optional[List[str]] = None
    membership_ids: Optional[List[str]] = None
    promo_period: Optional[str] = None
    custom_period_number: Optional[int] = None
    custom_period_string: Optional[str] = None
    price_type: Optional[PromoPriceType] = None
    amount: Optional[float] = None


@strawberry.input
class UpdatePromoCodeInput:
    service_ids: Optional[List[str]] = strawberry.UNSET
    name: Optional[str] = strawberry.UNSET
    resource_ids: Optional[List[str]] = strawberry.UNSET
    user_group_ids: Optional[List[str]] = strawberry.UNSET
    membership_ids: Optional[List[str]] = strawberry.UNSET
    promo_period: Optional[str] = strawberry.UNSET
    custom_period_number: Optional[int] = strawberry.UNSET
    custom_period_string: Optional[str] = strawberry.UNSET
    price_type: Optional[PromoPriceType] = strawberry.UNSET
    amount: Optional[float] = strawberry.UNSET


@strawberry.type
class PricingQuery:
    @strawberry.field
    def get_pricings(self, info: Info, club_id: Optional[str] = None) -> List[PricingType]:
        return pricing_service.find_all(info.context["db"], club_id)

    @strawberry.field
    def get_pricing(self, info: Info, id: strawberry.ID) -> Optional[PricingType]:
        return pricing_service.get(info.context["db"], id)

    @strawberry.field
    def get_promo_codes(self, info: Info, club_id: Optional[str] = None) -> List[PromoCodeType]:
        return promo_code_service.find_all(info.context["db"], club_id)

    @strawberry.field
    def get_promo_code(self, info: Info, id: strawberry.ID) -> Optional[PromoCodeType]:
        return promo_code_service.get(info.context["db"], id)


@strawberry.type
class PricingMutation:
    @strawberry.mutation
    def create_pricing(self, info: Info, input: CreatePricingInput) -> PricingType:
        return pricing_service.create(info.context["db"], to_schema(PricingCreate, input))

    @strawberry.mutation
    def update_pricing(self, info: Info, id: strawberry.ID, input: UpdatePricingInput) -> PricingType:
        return pricing_service.update(info.context["db"], id, to_update_schema(PricingUpdate, input))

    @strawberry.mutation
    def delete_pricing(self, info: Info, id: strawberry.ID) -> str:
        deleted = pricing_service.remove(info.context["db"], id)
        return deleted_message(deleted, "Pricing", f"Pricing with ID {id} not found")

    @strawberry.mutation
    def create_promo_code(self, info: Info, input: CreatePromoCodeInput) -> PromoCodeType:
        return promo_code_service.create(info.context["db"], to_schema(PromoCodeCreate, input))

    @strawberry.mutation
    def update_promo_code(self, info: Info, id: strawberry.ID, input: UpdatePromoCodeInput) -> PromoCodeType:
        return promo_code_service.update(info.context["db"], id, to_update_schema(PromoCodeUpdate, input))

    @strawberry.mutation
    def delete_promo_code(self, info: Info, id: strawberry.ID) -> str:
        deleted = promo_code_service.remove(info.context["db"], id)
        return deleted_message(deleted, "Promo code", f"Promo code with ID {id} not found")
