"""
Tests del servicio de extras (banco de horas, lista de deseos e integraciones).
"""
import pytest

from app.core.exceptions import BadRequestError, NotFoundError
from app.models.extras import ExtrasStatus
from app.schemas.extras import ExtrasCreate, ExtrasQuery
from app.services.extras import extras_service


@pytest.fixture
def make_extras(db, club):
    def _make(**kwargs):
        return extras_service.create(db, ExtrasCreate(club_id=club.id, **kwargs))

    return _make


class TestExtrasService:
    def test_create_with_limits(self, make_extras):
        extras = make_extras(
            hour_bank=True,
            hour_bank_limits=[{"user_type": "premium", "limit_value": 10, "limit_type": "hours"}],
        )

        assert extras.status == ExtrasStatus.active
        assert extras.hour_bank is True
        assert extras.wishlist is False
        assert extras.hour_bank_limits[0]["user_type"] == "premium"
        assert extras.wishlist_limits == []

    def test_find_one_missing(self, db):
        with pytest.raises(NotFoundError) as exc_info:
            extras_service.find_one(db, "no-existe")

        assert exc_info.value.message == "Extras configuration with ID no-existe not found"

    def test_toggle_feature(self, db, make_extras):
        extras = make_extras()

        extras = extras_service.toggle_feature(db, extras.id, "hourBank", True)
        assert extras.hour_bank is True

        extras = extras_service.toggle_feature(db, extras.id, "wishlist", True)
        extras = extras_service.toggle_feature(db, extras.id, "hourBank", False)
        assert extras.hour_bank is False
        assert extras.wishlist is True

    def test_toggle_invalid_feature(self, db, make_extras):
        extras = make_extras()

        with pytest.raises(BadRequestError) as exc_info:
            extras_service.toggle_feature(db, extras.id, "loyalty", True)

        assert "Invalid feature: loyalty" in exc_info.value.message

    def test_find_by_feature(self, db, club, make_extras):
        enabled = make_extras(wishlist=True)
        make_extras()

        assert [e.id for e in extras_service.find_by_feature(db, "wishlist", True, club.id)] == [enabled.id]
        with pytest.raises(BadRequestError):
            extras_service.find_by_feature(db, "unknown", True)

    def test_integration_stats(self, db, club, make_extras):
        make_extras(hour_bank=True, payment_gateway="stripe", email_marketing="mailchimp")
        make_extras(hour_bank=True, wishlist=True, payment_gateway="paypal")
        make_extras()

        stats = extras_service.get_integration_stats(db, club.id)

        assert stats.hour_bank_enabled == 2
        assert stats.wishlist_enabled == 1
        assert stats.payment_gateway_count == 2
        assert stats.email_marketing_count == 1
        assert stats.external_booking_count == 0
        assert stats.analytics_count == 0
        assert stats.social_media_count == 0

    def test_integration_stats_without_rows(self, db):
        stats = extras_service.get_integration_stats(db, "sin-extras")

        assert stats.hour_bank_enabled == 0
        assert stats.payment_gateway_count == 0

    def test_search_by_description(self, db, make_extras):
        make_extras(hour_bank_description="Bono de 10 horas")
        make_extras(notes="Sin bono")
        make_extras(notes="Nada")

        assert len(extras_service.search_by_description(db, "bono")) == 2
        assert len(extras_service.search_by_description(db, "bono", limit=1)) == 1

    def test_get_count(self, db, club, make_extras):
        make_extras()
        make_extras(status=ExtrasStatus.suspended)

        assert extras_service.get_count(db, club_id=club.id) == 2
        assert extras_service.get_count(db, status=ExtrasStatus.suspended) == 1

    def test_bulk_operations(self, db, club, make_extras):
        ids = [make_extras().id, make_extras().id]

        updated = extras_service.bulk_update_status(db, ids, ExtrasStatus.inactive)
        assert {e.status for e in updated} == {ExtrasStatus.inactive}

        assert extras_service.bulk_delete(db, ids) is True
        assert extras_service.get_count(db, club_id=club.id) == 0


class TestExtrasAdvancedSearch:
    def test_filters_and_pagination(self, db, club, make_extras):
        make_extras(hour_bank=True, payment_gateway="Stripe Connect")
        make_extras(hour_bank=True, payment_gateway="PayPal")
        make_extras(wishlist=True, notes="Integración con Mailchimp")

        page = extras_service.advanced_search(
            db, ExtrasQuery(filters={"club_id": club.id, "hour_bank_enabled": True}, pagination={"take": 1})
        )
        assert page.total == 2
        assert page.total_pages == 2
        assert len(page.items) == 1

        page = extras_service.advanced_search(db, ExtrasQuery(filters={"payment_gateway": "stripe"}))
        assert [e.payment_gateway for e in page.items] == ["Stripe Connect"]

        page = extras_service.advanced_search(db, ExtrasQuery(filters={"search_text": "mailchimp"}))
        assert page.total == 1
        assert page.items[0].wishlist is True

    def test_default_page(self, db, make_extras):
        make_extras()

        page = extras_service.advanced_search(db)

        assert page.page == 1
        assert page.limit == 20
