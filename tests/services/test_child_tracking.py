"""
Tests del seguimiento de la configuración desde las entidades hijas.

Cada alta de una entidad con paso asociado publica `SetupStepCompleted` y el
club avanza su `current_step`.
"""
import pytest

from app.core.exceptions import BadRequestError, NotFoundError
from app.core.setup_events import SetupStepCompleted, setup_events
from app.models.club import SetupStatus, SetupStep
from app.schemas.amenity import AmenityCreate
from app.schemas.coach import CoachClassCreate, CoachCreate
from app.schemas.extras import ExtrasCreate
from app.schemas.location_contact import LocationContactCreate, LocationContactUpdate
from app.schemas.membership import MembershipCreate
from app.schemas.pricing import PricingCreate, PromoCodeCreate
from app.schemas.resource import ResourceCreate
from app.schemas.user_group import UserGroupCreate
from app.schemas.working_hours import WorkingHoursCreate
from app.services.amenity import amenity_service
from app.services.club import club_service
from app.services.coach import coach_class_service, coach_service
from app.services.extras import extras_service
from app.services.location_contact import location_contact_service
from app.services.membership import membership_service
from app.services.pricing import pricing_service, promo_code_service
from app.services.resource import resource_service
from app.services.user_group import user_group_service
from app.services.working_hours import working_hours_service


def _location(club_id):
    return LocationContactCreate(club_id=club_id, address="Calle Mayor 1", city="Madrid", country="Spain")


TRACKED_CHILDREN = [
    (location_contact_service, _location, SetupStep.location_contact),
    (
        working_hours_service,
        lambda club_id: WorkingHoursCreate(
            club_id=club_id,
            timezone="Europe/Madrid",
            available_days=[{"day": "monday", "is_open": True, "time_slots": [{"start": "08:00", "end": "22:00"}]}],
        ),
        SetupStep.working_hours,
    ),
    (
        resource_service,
        lambda club_id: ResourceCreate(
            club_id=club_id, title="Pista 1", service="padel", type="indoor", property="synthetic", color="#00AAFF"
        ),
        SetupStep.resources,
    ),
    (amenity_service, lambda club_id: AmenityCreate(club_id=club_id, wifi=True), SetupStep.amenities),
    (membership_service, lambda club_id: MembershipCreate(club_id=club_id, title="Socio anual"), SetupStep.memberships),
    (
        pricing_service,
        lambda club_id: PricingCreate(club_id=club_id, weekdays=["monday"], start_time="08:00", end_time="12:00", price=20),
        SetupStep.pricing,
    ),
    (
        user_group_service,
        lambda club_id: UserGroupCreate(club_id=club_id, title="Juniors", color="#FF0000"),
        SetupStep.user_groups,
    ),
    (
        coach_service,
        lambda club_id: CoachCreate(club_id=club_id, name="Ana", surname="López", email="ana@example.com"),
        SetupStep.coaches,
    ),
]


@pytest.mark.parametrize("service, build, step", TRACKED_CHILDREN)
def test_child_creation_advances_setup(db, club, service, build, step):
    entity = service.create(db, build(club.id))

    db.refresh(club)
    assert entity.club_id == club.id
    assert club.setup_status == SetupStatus.in_progress
    assert club.current_step == step
    assert club.completed_steps == ["club_setup", step.value]


def test_untracked_children_do_not_change_setup(db, club):
    extras_service.create(db, ExtrasCreate(club_id=club.id, hour_bank=True))
    promo_code_service.create(db, PromoCodeCreate(club_id=club.id, name="VERANO", amount=10))
    coach_class_service.create(
        db, CoachClassCreate(club_id=club.id, title="Clase grupal", price_type="per_class", price=15)
    )

    db.refresh(club)
    assert club.setup_status == SetupStatus.draft
    assert club.current_step == SetupStep.club_setup
    assert club.completed_steps == ["club_setup"]


def test_child_for_missing_club_propagates_not_found(db):
    with pytest.raises(NotFoundError):
        location_contact_service.create(db, _location("no-existe"))


def test_event_is_published_after_create(db, club):
    received = []

    def listener(session, event):
        received.append(event)

    setup_events.subscribe(SetupStepCompleted, listener)
    try:
        amenity_service.create(db, AmenityCreate(club_id=club.id))
    finally:
        setup_events.unsubscribe(SetupStepCompleted, listener)

    assert len(received) == 1
    assert received[0].club_id == club.id
    assert received[0].step == "amenities"
    assert received[0].final is False
    assert received[0].source == "Amenity"


class TestLocationContactUpdate:
    def test_update_existing_location(self, db, club):
        location_contact_service.create(db, _location(club.id))

        updated = location_contact_service.update_by_club_id(db, club.id, LocationContactUpdate(city="Sevilla"))

        assert updated.city == "Sevilla"
        assert updated.address == "Calle Mayor 1"

    def test_update_creates_location_when_missing(self, db, club):
        created = location_contact_service.update_by_club_id(
            db, club.id, LocationContactUpdate(address="Av. del Puerto 3", city="Valencia", country="Spain")
        )

        db.refresh(club)
        assert created.club_id == club.id
        assert club.current_step == SetupStep.location_contact

    def test_update_without_required_fields_when_missing(self, db, club):
        with pytest.raises(BadRequestError):
            location_contact_service.update_by_club_id(db, club.id, LocationContactUpdate(city="Valencia"))


class TestSingletons:
    def test_get_by_club_id_raises_when_missing(self, db, club):
        with pytest.raises(NotFoundError):
            working_hours_service.get_by_club_id(db, club.id)

    def test_remove_by_club_id(self, db, club):
        amenity_service.create(db, AmenityCreate(club_id=club.id, bar=True))

        assert amenity_service.remove_by_club_id(db, club.id) is True
        assert amenity_service.remove_by_club_id(db, club.id) is False

    def test_update_by_club_id(self, db, club):
        amenity_service.create(db, AmenityCreate(club_id=club.id))

        amenity = amenity_service.update_by_club_id(db, club.id, {"restaurant": True})

        assert amenity.restaurant is True
        assert amenity.wifi is False
