"""
Tests del constructor de consultas con lista blanca.
"""
import pytest

from app.core.exceptions import BadRequestError
from app.schemas.club import ClubCreate, ClubFieldFilter
from app.services.club import club_service
from app.utils.query_builder import club_query_builder, sanitize_identifier


def test_sanitize_identifier_strips_unsafe_characters():
    assert sanitize_identifier("title; DROP TABLE club--") == "titleDROPTABLEclub"
    assert sanitize_identifier("param_0") == "param_0"


def test_invalid_field_is_rejected():
    with pytest.raises(BadRequestError) as exc_info:
        club_query_builder.build([{"field": "password", "operator": "equals", "value": "x"}])

    assert "Invalid field name: password" in str(exc_info.value)


def test_invalid_operator_is_rejected():
    with pytest.raises(BadRequestError) as exc_info:
        club_query_builder.build([{"field": "title", "operator": "regex", "value": "x"}])

    assert "Invalid operator: regex" in str(exc_info.value)


def test_each_condition_adds_one_predicate():
    stmt = club_query_builder.build([
        {"field": "title", "operator": "contains", "value": "River"},
        {"field": "currency", "operator": "equals", "value": "EUR"},
    ])

    assert len(stmt.whereclause.clauses) == 2


def test_value_is_bound_not_interpolated():
    stmt = club_query_builder.build([{"field": "title", "operator": "equals", "value": "x' OR '1'='1"}])

    compiled = stmt.compile()
    assert "x' OR '1'='1" not in str(compiled)
    assert compiled.params["param0"] == "x' OR '1'='1"


def test_operators_against_data(db):
    club_service.create_club(db, ClubCreate(title="Riverside Tennis", currency="EUR"))
    club_service.create_club(db, ClubCreate(title="Lakeside Padel", currency="USD"))

    def titles(filters):
        return sorted(c.title for c in club_service.find_clubs_with_secure_query(db, filters))

    assert titles([ClubFieldFilter(field="title", operator="startsWith", value="river")]) == ["Riverside Tennis"]
    assert titles([ClubFieldFilter(field="title", operator="endsWith", value="padel")]) == ["Lakeside Padel"]
    assert titles([ClubFieldFilter(field="currency", operator="notEquals", value="EUR")]) == ["Lakeside Padel"]
    assert titles([ClubFieldFilter(field="title", operator="contains", value="side")]) == [
        "Lakeside Padel",
        "Riverside Tennis",
    ]


def test_contains_on_array_column_matches_text(db):
    club_service.create_club(db, ClubCreate(title="Tenis", sports=["tennis"]))
    club_service.create_club(db, ClubCreate(title="Golf", sports=["golf"]))

    clubs = club_service.find_clubs_with_secure_query(
        db, [ClubFieldFilter(field="sports", operator="contains", value="tenn")]
    )

    assert [c.title for c in clubs] == ["Tenis"]


def test_boolean_field_accepts_text_value(db):
    club_service.create_club(db, ClubCreate(title="Online", online_payment=True))
    club_service.create_club(db, ClubCreate(title="Offline", online_payment=False))

    count = club_service.count_clubs_with_secure_query(
        db, [ClubFieldFilter(field="onlinePayment", operator="equals", value="true")]
    )

    assert count == 1


def test_unknown_relation_is_ignored():
    stmt = club_query_builder.build([], relations=["location_contact", "password_hashes"])

    assert stmt is not None


def test_apply_sort_ignores_unknown_fields():
    stmt = club_query_builder.apply_sort(club_query_builder.select(), [("nope", "ASC")])

    assert "created_at DESC" in str(stmt)
