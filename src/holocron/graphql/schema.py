"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLInterfaceType
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .extensions import DomainErrorExtension
from .mutations.root import Mutation
from .queries.root import Query
from .types.character import Droid, Human

logger = get_logger(__name__)

CHARACTER_VARIANTS = {"Human", "Droid"}

# Human and Droid are only reachable through the Character interface
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    types=[Human, Droid],
    extensions=[DomainErrorExtension],
)


def validate_schema(target: strawberry.Schema = schema) -> None:
    """Check the schema at startup so the server fails fast.

    Besides graphql-core's structural validation, both character variants
    must be registered as implementations of the ``Character`` interface,
    otherwise interface fields cannot resolve to a concrete type.

    Raises:
        RuntimeError: If the schema is invalid or a variant is not registered
    """
    graphql_schema = target._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        messages = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=messages)
        raise RuntimeError(f"GraphQL schema validation failed: {messages}")

    interface = graphql_schema.get_type("Character")
    if not isinstance(interface, GraphQLInterfaceType):
        raise RuntimeError("Character interface missing from schema")

    implementations = {t.name for t in graphql_schema.get_possible_types(interface)}
    missing = CHARACTER_VARIANTS - implementations
    if missing:
        logger.error("Character variants not registered", missing=sorted(missing))
        raise RuntimeError(f"Character variants not registered: {sorted(missing)}")

    logger.info("GraphQL schema validation successful", character_types=sorted(implementations))


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Resolvers find the entity store owned by the app in ``info.context``.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": request.app.state.store,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
