from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.scalars import JSON
from strawberry.types import Info

from app.graphql.common import DateRangeInput, PaginationInput, SortInput
from app.graphql.enums import ExtrasStatus
from app.graphql.utils import deleted_message, to_schema, to_update_schema
from app.schemas.extras import ExtrasCreate, ExtrasQuery as ExtrasQuerySchema, ExtrasUpdate
from app.services.extras import extras_service


@strawberry.federation.type(keys=["id"], name="Extras")
class ExtrasType:
    id: strawberry.ID
    club_id: str
    hour_bank: bool
    hour_bank_description: Optional[str]
    hour_bank_limits: JSON
    wishlist: bool
    wishlist_description: Optional[str]
    wishlist_limits: JSON
    external_booking_system: Optional[str]
    payment_gateway: Optional[str]
    email_marketing: Optional[str]
    analytics_integration: Optional[str]
    social_media_integration: Optional[str]
    loyalty_program: Optional[str]
    notification_settings: Optional[str]
    api_keys: Optional[str]
    status: ExtrasStatus
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

    @strawberry.field
    def is_active(self) -> bool:
        return self.status == ExtrasStatus.active

    @strawberry.field
    def hour_bank_limit_count(self) -> int:
        return len(self.hour_bank_limits or [])

    @strawberry.field
    def wishlist_limit_count(self) -> int:
        return len(self.wishlist_limits or [])

    @strawberry.field(description="Integraciones externas configuradas")
    def integration_count(self) -> int:
        return len(_active_integrations(self))

    @strawberry.field
    def enabled_features(self) -> List[str]:
        features = []
        if self.hour_bank:
            features.append("hourBank")
        if self.wishlist:
            features.append("wishlist")
        return features

    @strawberry.field
    def active_integrations(self) -> List[str]:
        return _active_integrations(self)

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID):
        return extras_service.get(info.context["db"], id)


# Columna de integración -> nombre público
INTEGRATION_NAMES = (
    ("external_booking_system", "externalBooking"),
    ("payment_gateway", "paymentGateway"),
    ("email_marketing", "emailMarketing"),
    ("analytics_integration", "analytics"),
    ("social_media_integration", "socialMedia"),
)


def _active_integrations(extras) -> List[str]:
    return [name for column, name in INTEGRATION_NAMES if getattr(extras, column)]


@strawberry.type
class ExtrasSearchResponse:
    extras: List[ExtrasType]
    total: int
    page: int
    limit: int
    total_pages: int


@strawberry.type
class IntegrationStats:
    hour_bank_enabled: int
    wishlist_enabled: int
    external_booking_count: int
    payment_gateway_count: int
    email_marketing_count: int
    analytics_count: int
    social_media_count: int


@strawberry.input
class CreateExtrasInput:
    club_id: str
    hour_bank: Optional[bool] = None
    hour_bank_description: Optional[str] = None
    hour_bank_limits: Optional[JSON] = None
    wishlist: Optional[bool] = None
    wishlist_description: Optional[str] = None
    wishlist_limits: Optional[JSON] = None
    external_booking_system: Optional[str] = None
    payment_gateway: Optional[str] = None
    email_marketing: Optional[str] = None
    analytics_integration: Optional[str] = None
    social_media_integration: Optional[str] = None
    loyalty_program: Optional[str] = None
    notification_settings: Optional[str] = None
    api_keys: Optional[str] = None
    status: Optional[ExtrasStatus] = None
    notes: Optional[str] = None


@strawberry.input
class UpdateExtrasInput:
    hour_bank: Optional[bool] = strawberry.UNSET
    hour_bank_description: Optional[str] = strawberry.UNSET
    hour_bank_limits: Optional[JSON] = strawberry.UNSET
    wishlist: Optional[bool] = strawberry.UNSET
    wishlist_description: Optional[str] = strawberry.UNSET
    wishlist_limits: Optional[JSON] = strawberry.UNSET
    external_booking_system: Optional[str] = strawberry.UNSET
    payment_gateway: Optional[str] = strawberry.UNSET
    email_marketing: Optional[str] = strawberry.UNSET
    analytics_integration: Optional[str] = strawberry.UNSET
    social_media_integration: Optional[str] = strawberry.UNSET
    loyalty_program: Optional[str] = strawberry.UNSET
    notification_settings: Optional[str] = strawberry.UNSET
    api_keys: Optional[str] = strawberry.UNSET
    status: Optional[ExtrasStatus] = strawberry.UNSET
    notes: Optional[str] = strawberry.UNSET


@strawberry.input
class ExtrasFilterInput:
    club_id: Optional[str] = None
    status: Optional[ExtrasStatus] = None
    hour_bank_enabled: Optional[bool] = None
    wishlist_enabled: Optional[bool] = None
    external_booking_system: Optional[str] = None
    payment_gateway: Optional[str] = None
    email_marketing: Optional[str] = None
    analytics_integration: Optional[str] = None
    social_media_integration: Optional[str] = None
    search_text: Optional[str] = None
    created_at: Optional[DateRangeInput] = None
    updated_at: Optional[DateRangeInput] = None


@strawberry.input
class ExtrasQueryInput:
    filters: Optional[ExtrasFilterInput] = None
    sort: Optional[List[SortInput]] = None
    pagination: Optional[PaginationInput] = None


@strawberry.type
class ExtrasQuery:
    @strawberry.field
    def get_extras(self, info: Info, club_id: Optional[strawberry.ID] = None) -> List[ExtrasType]:
        return extras_service.find_all(info.context["db"], club_id)

    @strawberry.field
    def get_extras_by_id(self, info: Info, id: strawberry.ID) -> ExtrasType:
        return extras_service.find_one(info.context["db"], id)

    @strawberry.field
    def get_extras_by_club(self, info: Info, club_id: strawberry.ID) -> List[ExtrasType]:
        return extras_service.find_by_club_id(info.context["db"], club_id)

    @strawberry.field
    def get_extras_by_status(
        self, info: Info, status: ExtrasStatus, club_id: Optional[strawberry.ID] = None
    ) -> List[ExtrasType]:
        return extras_service.find_by_status(info.context["db"], status, club_id)

    @strawberry.field(description="feature: hourBank | wishlist")
    def get_extras_by_feature(
        self, info: Info, feature: str, enabled: bool, club_id: Optional[strawberry.ID] = None
    ) -> List[ExtrasType]:
        return extras_service.find_by_feature(info.context["db"], feature, enabled, club_id)

    @strawberry.field
    def search_extras(self, info: Info, query: Optional[ExtrasQueryInput] = None) -> ExtrasSearchResponse:
        page = extras_service.advanced_search(info.context["db"], to_schema(ExtrasQuerySchema, query))
        return ExtrasSearchResponse(
            extras=page.items,
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
        )

    @strawberry.field
    def search_extras_by_description(
        self, info: Info, search_term: str, limit: int = 20, club_id: Optional[strawberry.ID] = None
    ) -> List[ExtrasType]:
        return extras_service.search_by_description(info.context["db"], search_term, limit=limit, club_id=club_id)

    @strawberry.field
    def get_extras_count(
        self, info: Info, status: Optional[ExtrasStatus] = None, club_id: Optional[strawberry.ID] = None
    ) -> int:
        return extras_service.get_count(info.context["db"], status=status, club_id=club_id)

    @strawberry.field
    def get_integration_stats(self, info: Info, club_id: Optional[strawberry.ID] = None) -> IntegrationStats:
        stats = extras_service.get_integration_stats(info.context["db"], club_id)
        return IntegrationStats(**stats.model_dump())


@strawberry.type
class ExtrasMutation:
    @strawberry.mutation
    def create_extras(self, info: Info, input: CreateExtrasInput) -> ExtrasType:
        return extras_service.create(info.context["db"], to_schema(ExtrasCreate, input))

    @strawberry.mutation
    def update_extras(self, info: Info, id: strawberry.ID, input: UpdateExtrasInput) -> ExtrasType:
        return extras_service.update(info.context["db"], id, to_update_schema(ExtrasUpdate, input))

    @strawberry.mutation
    def delete_extras(self, info: Info, id: strawberry.ID) -> str:
        deleted = extras_service.remove(info.context["db"], id)
        return deleted_message(deleted, "Extras configuration", f"Extras configuration with ID {id} not found")

    @strawberry.mutation
    def update_extras_status(self, info: Info, id: strawberry.ID, status: ExtrasStatus) -> ExtrasType:
        return extras_service.update_status(info.context["db"], id, status)

    @strawberry.mutation
    def toggle_extras_feature(self, info: Info, id: strawberry.ID, feature: str, enabled: bool) -> ExtrasType:
        return extras_service.toggle_feature(info.context["db"], id, feature, enabled)

    @strawberry.mutation
    def bulk_update_extras_status(
        self, info: Info, ids: List[strawberry.ID], status: ExtrasStatus
    ) -> List[ExtrasType]:
        return extras_service.bulk_update_status(info.context["db"], ids, status)

    @strawberry.mutation
    def bulk_delete_extras(self, info: Info, ids: List[strawberry.ID]) -> bool:
        return extras_service.bulk_delete(info.context["db"], ids)
