"""GraphQL route: one endpoint for queries and mutations."""
from strawberry.fastapi import GraphQLRouter

from postboard.core.config import Settings
from postboard.graphql import schema
from postboard.graphql.context import get_context


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    """GraphQL router with the per-request viewer context and optional GraphiQL."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
