"""
Tests de la máquina de estados del seguimiento de la configuración del club.
"""
import pytest

from app.core.exceptions import BadRequestError, NotFoundError
from app.models.club import SetupStatus, SetupStep
from app.schemas.club import ClubCreate, ClubFilter, ClubUpdate, CompleteClubSetup
from app.services.club import club_service


class TestClubSetupService:
    def test_create_club_starts_in_draft(self, db):
        club = club_service.create_club(db, ClubCreate(title="Riverside Tennis Club"))

        assert club.id
        assert club.setup_status == SetupStatus.draft
        assert club.current_step == SetupStep.club_setup
        assert club.completed_steps == ["club_setup"]
        assert club.last_saved_at is not None
        # Los booleanos no enviados toman el valor por defecto de la columna
        assert club.enable_online_bookings is False
        assert club.by_invoice is False

    def test_get_club_raises_when_missing(self, db):
        with pytest.raises(NotFoundError) as exc_info:
            club_service.get_club(db, "no-existe")

        assert exc_info.value.message == "Club not found"

    def test_find_club_by_id_requires_id(self, db):
        with pytest.raises(BadRequestError):
            club_service.find_club_by_id(db, "")

    def test_update_club_only_changes_sent_fields(self, db, club):
        updated = club_service.update_club(db, club.id, ClubUpdate(currency="EUR"))

        assert updated.currency == "EUR"
        assert updated.title == "Riverside Tennis Club"
        assert updated.sports == ["tennis", "padel"]

    def test_update_club_missing_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            club_service.update_club(db, "no-existe", ClubUpdate(title="X"))

    def test_update_club_explicit_null_clears_column(self, db, club):
        club_service.update_club(db, club.id, ClubUpdate(chain_id="cadena-1", description="Club de barrio"))

        updated = club_service.update_club(db, club.id, ClubUpdate(chain_id=None))

        assert updated.chain_id is None
        assert updated.description == "Club de barrio"

    def test_update_club_null_on_required_column_is_bad_request(self, db, club):
        with pytest.raises(BadRequestError, match="enable_online_bookings"):
            club_service.update_club(db, club.id, ClubUpdate(enable_online_bookings=None))

        assert club_service.get_club(db, club.id).enable_online_bookings is False

    def test_delete_club(self, db, club):
        assert club_service.delete_club(db, club.id) is True
        assert club_service.find_club_by_id(db, club.id) is None

    def test_delete_missing_club_returns_false(self, db):
        assert club_service.delete_club(db, "no-existe") is False

    def test_update_setup_tracking_is_idempotent(self, db, club):
        club_service.update_setup_tracking(db, club.id, SetupStep.location_contact)
        club = club_service.update_setup_tracking(db, club.id, SetupStep.location_contact)

        assert club.setup_status == SetupStatus.in_progress
        assert club.current_step == SetupStep.location_contact
        assert club.completed_steps == ["club_setup", "location_contact"]

    def test_update_setup_tracking_does_not_enforce_order(self, db, club):
        club = club_service.update_setup_tracking(db, club.id, SetupStep.pricing)

        assert club.current_step == SetupStep.pricing
        assert club.completed_steps == ["club_setup", "pricing"]

    def test_update_setup_tracking_missing_club(self, db):
        with pytest.raises(NotFoundError):
            club_service.update_setup_tracking(db, "no-existe", SetupStep.resources)

    def test_complete_club_setup(self, db, club):
        club = club_service.complete_club_setup(
            db, CompleteClubSetup(club_id=club.id, final_step=SetupStep.team_members)
        )

        assert club.setup_status == SetupStatus.completed
        assert club.current_step == SetupStep.team_members
        assert club.completed_steps == ["club_setup", "team_members"]

    def test_abandon_keeps_completed_steps(self, db, club):
        club_service.update_setup_tracking(db, club.id, SetupStep.location_contact)
        club = club_service.abandon_club_setup(db, club.id)

        assert club.setup_status == SetupStatus.abandoned
        assert club.current_step == SetupStep.location_contact
        assert club.completed_steps == ["club_setup", "location_contact"]

    def test_new_step_after_abandon_resumes_setup(self, db, club):
        club_service.abandon_club_setup(db, club.id)
        club = club_service.update_setup_tracking(db, club.id, SetupStep.working_hours)

        assert club.setup_status == SetupStatus.in_progress
        assert club.current_step == SetupStep.working_hours

    def test_get_clubs_by_setup_status(self, db, club):
        other = club_service.create_club(db, ClubCreate(title="Otro"))
        club_service.abandon_club_setup(db, other.id)

        drafts = club_service.get_clubs_by_setup_status(db, SetupStatus.draft)
        abandoned = club_service.get_clubs_by_setup_status(db, SetupStatus.abandoned)

        assert [c.id for c in drafts] == [club.id]
        assert [c.id for c in abandoned] == [other.id]


class TestClubQueries:
    def test_find_all_filters_title_case_insensitively(self, db, club):
        club_service.create_club(db, ClubCreate(title="Hilltop Squash"))

        clubs = club_service.find_all(db, ClubFilter(title="riverside"))

        assert [c.id for c in clubs] == [club.id]

    def test_find_all_without_filter_returns_all(self, db, club):
        club_service.create_club(db, ClubCreate(title="Hilltop Squash"))

        assert len(club_service.find_all(db)) == 2

    def test_find_all_by_sports(self, db, club):
        club_service.create_club(db, ClubCreate(title="Golf", sports=["golf"]))

        clubs = club_service.find_all(db, ClubFilter(sports=["padel"]))

        assert [c.id for c in clubs] == [club.id]

    def test_get_values_by_field_rejects_unknown_field(self, db):
        with pytest.raises(BadRequestError) as exc_info:
            club_service.get_values_by_field_value_and_relations(db, "password", "x", [])

        assert "Invalid field name" in exc_info.value.message

    def test_get_values_by_field_rejects_unknown_relation(self, db, club):
        with pytest.raises(BadRequestError):
            club_service.get_values_by_field_value_and_relations(db, "id", club.id, ["owners"])

    def test_get_values_by_field_returns_first_match(self, db, club):
        found = club_service.get_values_by_field_value_and_relations(db, "id", club.id, ["resources", "amenity"])

        assert found.id == club.id
        assert found.resources == []
        assert found.amenity is None

    def test_get_values_by_field_returns_none_without_match(self, db):
        assert club_service.get_values_by_field_value_and_relations(db, "id", "no-existe", []) is None
