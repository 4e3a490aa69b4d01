"""
Store access for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ..store import EntityStore


def get_store_from_info(info: strawberry.Info) -> "EntityStore":
    """
    Extract the entity store from the GraphQL info object.

    Raises:
        RuntimeError: If the context was built without a store
    """
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("Entity store not found in GraphQL context")
    return store
