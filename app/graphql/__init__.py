"""
Esquema GraphQL federado del servicio.

Cada módulo aporta su `Query` y su `Mutation`; aquí se combinan en un único
esquema y se expone el router que monta `main.py`.
"""
import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.tools import merge_types

from app.graphql.amenity import AmenityMutation, AmenityQuery
from app.graphql.club import ClubMutation, ClubQuery
from app.graphql.coach import CoachMutation, CoachQuery
from app.graphql.context import get_context
from app.graphql.extensions import ErrorCodeExtension
from app.graphql.extras import ExtrasMutation, ExtrasQuery
from app.graphql.location_contact import LocationContactMutation, LocationContactQuery
from app.graphql.membership import MembershipMutation, MembershipQuery
from app.graphql.pricing import PricingMutation, PricingQuery
from app.graphql.resource import ResourceMutation, ResourceQuery
from app.graphql.team_member import TeamMemberMutation, TeamMemberQuery
from app.graphql.user_group import UserGroupMutation, UserGroupQuery
from app.graphql.working_hours import WorkingHoursMutation, WorkingHoursQuery

Query = merge_types(
    "Query",
    (
        ClubQuery,
        LocationContactQuery,
        WorkingHoursQuery,
        AmenityQuery,
        ResourceQuery,
        CoachQuery,
        MembershipQuery,
        PricingQuery,
        UserGroupQuery,
        TeamMemberQuery,
        ExtrasQuery,
    ),
)

Mutation = merge_types(
    "Mutation",
    (
        ClubMutation,
        LocationContactMutation,
        WorkingHoursMutation,
        AmenityMutation,
        ResourceMutation,
        CoachMutation,
        MembershipMutation,
        PricingMutation,
        UserGroupMutation,
        TeamMemberMutation,
        ExtrasMutation,
    ),
)

schema = strawberry.federation.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[ErrorCodeExtension],
    enable_federation_2=True,
)


def create_graphql_router() -> GraphQLRouter:
    """Router de FastAPI para el endpoint GraphQL (admite subidas multipart)."""
    return GraphQLRouter(schema, context_getter=get_context, multipart_uploads_enabled=True)
