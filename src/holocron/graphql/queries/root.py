"""
Root GraphQL query definitions
"""

import strawberry

from ..types.character import Character
from ..types.enums import Episode
from ..types.review import Review
from ..types.starship import Starship


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def starship(self, info: strawberry.Info, id: strawberry.ID) -> Starship | None:
        """Get a starship by ID."""
        from ..resolvers.starship import resolve_starship_by_id

        return resolve_starship_by_id(info, id)

    @strawberry.field
    def character(self, info: strawberry.Info, id: strawberry.ID) -> Character | None:
        """Get a human or droid by ID."""
        from ..resolvers.character import resolve_character_by_id

        return resolve_character_by_id(info, id)

    @strawberry.field
    def characters(self, info: strawberry.Info) -> list[Character]:
        """Get all humans followed by all droids."""
        from ..resolvers.character import resolve_characters

        return resolve_characters(info)

    @strawberry.field
    def reviews(self, info: strawberry.Info, episode: Episode) -> list[Review]:
        """Get the reviews for an episode."""
        from ..resolvers.review import resolve_reviews

        return resolve_reviews(info, episode)

    @strawberry.field(name="allReviews")
    def all_reviews(self, info: strawberry.Info) -> list[Review]:
        """Get every review in creation order."""
        from ..resolvers.review import resolve_all_reviews

        return resolve_all_reviews(info)
