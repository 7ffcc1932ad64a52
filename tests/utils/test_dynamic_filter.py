"""
Tests del mapeo declarativo de filtros a condiciones SQLAlchemy.
"""
from app.models.club import Club, SetupStatus
from app.schemas.club import ClubCreate
from app.services.club import CLUB_FIELD_CONFIGS, club_service
from app.utils.dynamic_filter import build_where_conditions, create_field_configs


class TestCreateFieldConfigs:
    def test_key_maps_to_column_with_same_name(self):
        configs = create_field_configs(partial=["title"], exact=["currency"], array=["sports"])

        assert configs["title"].type == "partial"
        assert configs["title"].field == "title"
        assert configs["currency"].type == "exact"
        assert configs["sports"].type == "array"


class TestBuildWhereConditions:
    def test_none_and_unknown_keys_are_ignored(self):
        conditions = build_where_conditions(
            Club,
            {"title": None, "unknown_field": "x", "currency": "EUR"},
            CLUB_FIELD_CONFIGS,
        )

        assert len(conditions) == 1

    def test_empty_filter_returns_no_conditions(self):
        assert build_where_conditions(Club, {}, CLUB_FIELD_CONFIGS) == []
        assert build_where_conditions(Club, None, CLUB_FIELD_CONFIGS) == []

    def test_partial_match_is_case_insensitive(self, db):
        club_service.create_club(db, ClubCreate(title="Riverside Padel"))
        club_service.create_club(db, ClubCreate(title="Hilltop Squash"))

        conditions = build_where_conditions(Club, {"title": "riverside"}, CLUB_FIELD_CONFIGS)
        clubs = db.query(Club).filter(*conditions).all()

        assert [c.title for c in clubs] == ["Riverside Padel"]

    def test_array_filter_matches_any_value(self, db):
        club_service.create_club(db, ClubCreate(title="A", sports=["tennis"]))
        club_service.create_club(db, ClubCreate(title="B", sports=["golf"]))
        club_service.create_club(db, ClubCreate(title="C", sports=["squash", "padel"]))

        conditions = build_where_conditions(Club, {"sports": ["tennis", "padel"]}, CLUB_FIELD_CONFIGS)
        titles = sorted(c.title for c in db.query(Club).filter(*conditions).all())

        assert titles == ["A", "C"]

    def test_exact_match_on_enum_column(self, db):
        club = club_service.create_club(db, ClubCreate(title="Abandonado"))
        club_service.abandon_club_setup(db, club.id)
        club_service.create_club(db, ClubCreate(title="Borrador"))

        conditions = build_where_conditions(Club, {"setup_status": SetupStatus.abandoned}, CLUB_FIELD_CONFIGS)
        clubs = db.query(Club).filter(*conditions).all()

        assert [c.id for c in clubs] == [club.id]

    def test_relation_handler_is_used_for_relation_keys(self):
        calls = []

        def handler(value):
            calls.append(value)
            return Club.id == value

        conditions = build_where_conditions(Club, {"club_id": "abc"}, CLUB_FIELD_CONFIGS, {"club_id": handler})

        assert calls == ["abc"]
        assert len(conditions) == 1
