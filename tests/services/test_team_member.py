"""
Tests del servicio de miembros del equipo.
"""
import pytest

from app.core.exceptions import NotFoundError
from app.models.club import SetupStatus, SetupStep
from app.models.team_member import PermissionType, TeamMemberStatus
from app.schemas.team_member import TeamMemberCreate, TeamMemberQuery
from app.services.club import club_service
from app.services.team_member import team_member_service


@pytest.fixture
def make_member(db, club):
    def _make(name="Laura", surname="García", email=None, **kwargs):
        member_in = TeamMemberCreate(
            club_id=club.id,
            name=name,
            surname=surname,
            email=email or f"{name.lower()}@example.com",
            **kwargs,
        )
        return team_member_service.create(db, member_in)

    return _make


class TestTeamMemberService:
    def test_create_completes_club_setup(self, db, club, make_member):
        make_member(permissions=[PermissionType.manage_bookings_matches])

        db.refresh(club)
        assert club.setup_status == SetupStatus.completed
        assert club.current_step == SetupStep.team_members
        assert "team_members" in club.completed_steps

    def test_every_creation_completes_setup(self, db, club, make_member):
        make_member(name="Laura")
        club_service.abandon_club_setup(db, club.id)

        make_member(name="Pablo")

        db.refresh(club)
        assert club.setup_status == SetupStatus.completed
        assert club.completed_steps.count("team_members") == 1

    def test_find_one_missing(self, db):
        with pytest.raises(NotFoundError) as exc_info:
            team_member_service.find_one(db, "no-existe")

        assert exc_info.value.message == "Team member with ID no-existe not found"

    def test_find_by_status(self, db, club, make_member):
        make_member(name="Laura")
        make_member(name="Pablo", status=TeamMemberStatus.inactive)

        inactive = team_member_service.find_by_status(db, TeamMemberStatus.inactive, club.id)

        assert [m.name for m in inactive] == ["Pablo"]

    def test_find_by_permissions_matches_any(self, db, make_member):
        make_member(name="Laura", permissions=[PermissionType.manage_finances])
        make_member(name="Pablo", permissions=[PermissionType.manage_coaches])
        make_member(name="Marta")

        members = team_member_service.find_by_permissions(
            db, [PermissionType.manage_finances, PermissionType.manage_coaches]
        )

        assert sorted(m.name for m in members) == ["Laura", "Pablo"]

    def test_add_and_remove_permission(self, db, make_member):
        member = make_member(permissions=[PermissionType.manage_customers])

        member = team_member_service.add_permission(db, member.id, PermissionType.manage_classes)
        member = team_member_service.add_permission(db, member.id, PermissionType.manage_classes)
        assert member.permissions == ["manage_customers", "manage_classes"]

        member = team_member_service.remove_permission(db, member.id, PermissionType.manage_customers)
        assert member.permissions == ["manage_classes"]

    def test_update_permissions_replaces_list(self, db, make_member):
        member = make_member(permissions=[PermissionType.manage_customers])

        member = team_member_service.update_permissions(db, member.id, [PermissionType.manage_finances])

        assert member.permissions == ["manage_finances"]

    def test_search_by_name(self, db, club, make_member):
        make_member(name="Laura", surname="García")
        make_member(name="Pablo", surname="Martín")

        assert [m.name for m in team_member_service.search_by_name(db, "garc")] == ["Laura"]
        assert [m.name for m in team_member_service.search_by_name(db, "pablo@", club_id=club.id)] == ["Pablo"]
        assert len(team_member_service.search_by_name(db, "a", limit=1)) == 1

    def test_bulk_update_status(self, db, make_member):
        ids = [make_member(name=name).id for name in ("Laura", "Pablo")]

        members = team_member_service.bulk_update_status(db, ids, TeamMemberStatus.suspended)

        assert [m.status for m in members] == [TeamMemberStatus.suspended, TeamMemberStatus.suspended]

    def test_bulk_update_status_stops_on_missing_id(self, db, make_member):
        member = make_member()

        with pytest.raises(NotFoundError):
            team_member_service.bulk_update_status(db, [member.id, "no-existe"], TeamMemberStatus.inactive)

        assert team_member_service.find_one(db, member.id).status == TeamMemberStatus.inactive

    def test_bulk_delete_ignores_missing_ids(self, db, club, make_member):
        ids = [make_member(name=name).id for name in ("Laura", "Pablo")]

        assert team_member_service.bulk_delete(db, [*ids, "no-existe"]) is True
        assert team_member_service.get_count(db, club_id=club.id) == 0


class TestTeamMemberAdvancedSearch:
    def test_pagination(self, db, club, make_member):
        for index in range(5):
            make_member(name=f"Miembro{index}")

        page = team_member_service.advanced_search(
            db, TeamMemberQuery(pagination={"skip": 2, "take": 2}, sort=[{"field": "name", "order": "ASC"}])
        )

        assert page.total == 5
        assert page.page == 2
        assert page.limit == 2
        assert page.total_pages == 3
        assert [m.name for m in page.items] == ["Miembro2", "Miembro3"]

    def test_default_take(self, db, make_member):
        make_member()

        page = team_member_service.advanced_search(db)

        assert page.limit == 20
        assert page.page == 1
        assert page.total_pages == 1

    def test_filters(self, db, club, make_member):
        make_member(name="Laura", position="Recepción", permissions=[PermissionType.manage_customers])
        make_member(name="Pablo", position="Director", status=TeamMemberStatus.inactive)

        page = team_member_service.advanced_search(
            db, TeamMemberQuery(filters={"club_id": club.id, "statuses": ["active"], "position": "recep"})
        )
        assert [m.name for m in page.items] == ["Laura"]

        page = team_member_service.advanced_search(db, TeamMemberQuery(filters={"search_text": "director"}))
        assert [m.name for m in page.items] == ["Pablo"]

        page = team_member_service.advanced_search(
            db, TeamMemberQuery(filters={"permissions": ["manage_customers"]})
        )
        assert page.total == 1

    def test_empty_result(self, db):
        page = team_member_service.advanced_search(db, TeamMemberQuery(filters={"name": "nadie"}))

        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0
