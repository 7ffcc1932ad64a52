"""
Tests de extremo a extremo de las entidades hijas expuestas por GraphQL.
"""
import pytest


@pytest.fixture
def club_id(graphql):
    body = graphql('mutation { createClubSetup(input: {title: "Riverside Tennis Club"}) { id } }')
    return body["data"]["createClubSetup"]["id"]


def test_coach_operations(graphql, club_id):
    body = graphql(
        """
        mutation($input: CreateCoachInput!) {
          createCoach(createCoachInput: $input) { id name services status }
        }
        """,
        {"input": {
            "clubId": club_id,
            "name": "Ana",
            "surname": "López",
            "email": "ana@example.com",
            "services": ["padel"],
            "languages": [{"language": "es", "level": "native"}],
        }},
    )
    assert "errors" not in body
    coach = body["data"]["createCoach"]
    assert coach["status"] == "active"

    body = graphql(
        """
        query($clubId: String!) {
          coaches(query: {filters: {clubId: $clubId}}) { id }
          coachesCount(query: {filters: {clubId: $clubId}})
          coachesByService(serviceId: "padel", clubId: $clubId) { name }
          getClub(id: $clubId) { currentStep }
        }
        """,
        {"clubId": club_id},
    )
    assert body["data"]["coaches"] == [{"id": coach["id"]}]
    assert body["data"]["coachesCount"] == 1
    assert body["data"]["coachesByService"] == [{"name": "Ana"}]
    assert body["data"]["getClub"]["currentStep"] == "coaches"

    body = graphql('mutation($id: ID!) { removeCoach(id: $id) }', {"id": coach["id"]})
    assert body["data"]["removeCoach"] is True


def test_coach_class_requires_matching_club(graphql, club_id):
    body = graphql(
        """
        mutation($input: CreateCoachClassInput!) {
          createCoachClass(createCoachClassInput: $input) { id priceType coach }
        }
        """,
        {"input": {
            "clubId": club_id,
            "title": "Padel iniciación",
            "priceType": "per_class",
            "price": 15,
            "coach": [{"coach_id": "c1", "salary": 20}],
        }},
    )
    assert "errors" not in body
    coach_class = body["data"]["createCoachClass"]
    assert coach_class["priceType"] == "per_class"
    assert coach_class["coach"] == [{"coach_id": "c1", "salary": 20.0, "add_to_balance": False}]

    body = graphql(
        'query($id: ID!) { coachClass(id: $id, clubId: "otro-club") { id } }',
        {"id": coach_class["id"]},
    )
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_extras_feature_toggle_and_stats(graphql, club_id):
    body = graphql(
        """
        mutation($input: CreateExtrasInput!) {
          createExtras(input: $input) { id isActive enabledFeatures activeIntegrations integrationCount }
        }
        """,
        {"input": {"clubId": club_id, "wishlist": True, "paymentGateway": "stripe"}},
    )
    assert "errors" not in body
    extras = body["data"]["createExtras"]
    assert extras["isActive"] is True
    assert extras["enabledFeatures"] == ["wishlist"]
    assert extras["activeIntegrations"] == ["paymentGateway"]
    assert extras["integrationCount"] == 1

    body = graphql(
        'mutation($id: ID!) { toggleExtrasFeature(id: $id, feature: "hourBank", enabled: true) { enabledFeatures } }',
        {"id": extras["id"]},
    )
    assert body["data"]["toggleExtrasFeature"]["enabledFeatures"] == ["hourBank", "wishlist"]

    body = graphql(
        'mutation($id: ID!) { toggleExtrasFeature(id: $id, feature: "loyalty", enabled: true) { id } }',
        {"id": extras["id"]},
    )
    assert body["errors"][0]["extensions"]["code"] == "BAD_REQUEST"

    body = graphql('{ getIntegrationStats { hourBankEnabled wishlistEnabled paymentGatewayCount } }')
    assert body["data"]["getIntegrationStats"] == {
        "hourBankEnabled": 1,
        "wishlistEnabled": 1,
        "paymentGatewayCount": 1,
    }

    # Los extras no forman parte del seguimiento de la configuración
    body = graphql('query($id: String!) { getClub(id: $id) { setupStatus } }', {"id": club_id})
    assert body["data"]["getClub"]["setupStatus"] == "draft"


def test_search_team_members_envelope(graphql, club_id):
    for name in ("Laura", "Pablo", "Marta"):
        body = graphql(
            'mutation($input: CreateTeamMemberInput!) { createTeamMember(input: $input) { id } }',
            {"input": {"clubId": club_id, "name": name, "surname": "Ruiz", "email": f"{name.lower()}@example.com"}},
        )
        assert "errors" not in body

    body = graphql(
        """
        {
          searchTeamMembers(query: {sort: [{field: "name", order: ASC}], pagination: {skip: 0, take: 2}}) {
            teamMembers { name }
            total
            page
            limit
            totalPages
          }
        }
        """
    )

    assert body["data"]["searchTeamMembers"] == {
        "teamMembers": [{"name": "Laura"}, {"name": "Marta"}],
        "total": 3,
        "page": 1,
        "limit": 2,
        "totalPages": 2,
    }


def test_delete_location_contact_by_club(graphql, club_id):
    body = graphql(
        'mutation($id: String!) { deleteLocationContact(clubId: $id) }',
        {"id": club_id},
    )
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"

    graphql(
        """
        mutation($input: CreateLocationContactInput!) { createLocationContact(input: $input) { id } }
        """,
        {"input": {"clubId": club_id, "address": "Calle Mayor 1", "city": "Madrid", "country": "Spain"}},
    )
    body = graphql('mutation($id: String!) { deleteLocationContact(clubId: $id) }', {"id": club_id})
    assert body["data"]["deleteLocationContact"] == "Location contact deleted successfully"
