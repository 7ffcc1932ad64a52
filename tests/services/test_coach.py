"""
Tests de entrenadores y clases de entrenadores.
"""
import pytest

from app.core.exceptions import NotFoundError
from app.schemas.club import ClubCreate
from app.schemas.coach import CoachClassCreate, CoachClassFilter, CoachClassUpdate, CoachCreate, CoachQuery
from app.services.club import club_service
from app.services.coach import coach_class_service, coach_service


@pytest.fixture
def make_coach(db, club):
    def _make(name, surname="Pérez", **kwargs):
        coach_in = CoachCreate(club_id=club.id, name=name, surname=surname, email=f"{name.lower()}@example.com", **kwargs)
        return coach_service.create(db, coach_in)

    return _make


@pytest.fixture
def make_class(db, club):
    def _make(title, club_id=None, **kwargs):
        kwargs.setdefault("price_type", "per_class")
        kwargs.setdefault("price", 10)
        return coach_class_service.create(db, CoachClassCreate(club_id=club_id or club.id, title=title, **kwargs))

    return _make


class TestCoachService:
    def test_search_with_filters_and_pagination(self, db, club, make_coach):
        make_coach("Ana", services=["padel"], city="Madrid")
        make_coach("Bruno", services=["tennis"], city="Madrid")
        make_coach("Carla", services=["golf"], city="Bilbao")

        coaches, total = coach_service.search(
            db,
            CoachQuery(
                filters={"club_id": club.id, "city": "Madrid"},
                sort=[{"field": "name", "order": "DESC"}],
                pagination={"skip": 0, "take": 1},
            ),
        )

        assert total == 2
        assert [c.name for c in coaches] == ["Bruno"]

    def test_search_by_services_and_text(self, db, make_coach):
        make_coach("Ana", services=["padel", "tennis"])
        make_coach("Bruno", services=["golf"])

        coaches, total = coach_service.search(db, CoachQuery(filters={"services": ["tennis", "squash"]}))
        assert [c.name for c in coaches] == ["Ana"]

        coaches, total = coach_service.search(db, CoachQuery(filters={"search_text": "bruno@"}))
        assert total == 1

    def test_find_by_service_scoped_to_club(self, db, club, make_coach):
        make_coach("Ana", services=["padel"])
        other = club_service.create_club(db, ClubCreate(title="Otro club"))
        coach_service.create(
            db, CoachCreate(club_id=other.id, name="Diego", surname="Ruiz", email="diego@example.com", services=["padel"])
        )

        assert len(coach_service.find_by_service(db, "padel")) == 2
        assert [c.name for c in coach_service.find_by_service(db, "padel", club.id)] == ["Ana"]

    def test_find_by_service_with_accents(self, db, make_coach):
        make_coach("Ana", services=["Pádel", "Fútbol sala"])

        assert [c.name for c in coach_service.find_by_service(db, "Pádel")] == ["Ana"]
        coaches, total = coach_service.search(db, CoachQuery(filters={"services": ["Fútbol sala"]}))
        assert total == 1

    def test_find_by_service_is_literal(self, db, make_coach):
        make_coach("Ana", services=["padel"])

        assert coach_service.find_by_service(db, "pa_el") == []
        assert coach_service.find_by_service(db, "%") == []
        coaches, total = coach_service.search(db, CoachQuery(filters={"services": ["p%"]}))
        assert total == 0


class TestCoachClassService:
    def test_filters(self, db, club, make_coach, make_class):
        ana = make_coach("Ana")
        make_class("Padel iniciación", service=["s1"], coach=[{"coach_id": ana.id, "salary": 20}], price=15)
        make_class("Tenis avanzado", service=["s2"], price=30, price_type="per_client")

        items, total = coach_class_service.search(db, CoachClassFilter(club_id=club.id, coach_ids=[ana.id]))
        assert total == 1
        assert items[0].title == "Padel iniciación"

        items, total = coach_class_service.search(db, CoachClassFilter(club_id=club.id, min_price=20))
        assert [c.title for c in items] == ["Tenis avanzado"]

        items, total = coach_class_service.search(db, CoachClassFilter(club_id=club.id, service=["s1", "s3"]))
        assert [c.title for c in items] == ["Padel iniciación"]

        items, total = coach_class_service.search(db, CoachClassFilter(club_id=club.id, title="TENIS"))
        assert total == 1

    def test_operations_are_scoped_to_club(self, db, club, make_class):
        other = club_service.create_club(db, ClubCreate(title="Otro club"))
        coach_class = make_class("Clase ajena", club_id=other.id)

        with pytest.raises(NotFoundError):
            coach_class_service.find_one_in_club(db, coach_class.id, club.id)
        with pytest.raises(NotFoundError):
            coach_class_service.update_in_club(db, coach_class.id, club.id, CoachClassUpdate(title="X"))
        assert coach_class_service.remove_in_club(db, coach_class.id, club.id) is False

        updated = coach_class_service.update_in_club(db, coach_class.id, other.id, CoachClassUpdate(title="Renombrada"))
        assert updated.title == "Renombrada"
        assert coach_class_service.remove_in_club(db, coach_class.id, other.id) is True

    def test_find_by_coach(self, db, club, make_coach, make_class):
        ana = make_coach("Ana")
        bruno = make_coach("Bruno")
        make_class("Con Ana", coach=[{"coach_id": ana.id, "salary": 20, "add_to_balance": True}])
        make_class("Con Bruno", coach=[{"coach_id": bruno.id, "salary": 25}])

        assert [c.title for c in coach_class_service.find_by_coach(db, ana.id, club.id)] == ["Con Ana"]
        assert coach_class_service.find_by_coach(db, ana.id, "otro-club") == []

    def test_find_by_coach_is_literal(self, db, club, make_coach, make_class):
        ana = make_coach("Ana")
        make_class("Con Ana", coach=[{"coach_id": ana.id, "salary": 20}])

        assert coach_class_service.find_by_coach(db, "%", club.id) == []
        assert coach_class_service.find_by_coach(db, "_" * len(ana.id), club.id) == []
        items, total = coach_class_service.search(db, CoachClassFilter(club_id=club.id, coach_ids=["%"]))
        assert total == 0

    def test_filters_with_accents(self, db, club, make_class):
        make_class("Pádel mañana", group=["Iniciación"])

        items, total = coach_class_service.search(db, CoachClassFilter(club_id=club.id, group=["Iniciación"]))
        assert [c.title for c in items] == ["Pádel mañana"]
