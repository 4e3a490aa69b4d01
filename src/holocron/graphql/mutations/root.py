"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.enums import Episode
from ..types.review import Review, ReviewInput


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Review mutations
    @strawberry.mutation(name="createReview")
    def create_review(
        self, info: strawberry.Info, episode: Episode, review: ReviewInput
    ) -> Review:
        """Add a review for an episode."""
        from ..resolvers.review import create_review

        return create_review(info, episode, review)

    @strawberry.mutation(name="updateReviewStars")
    def update_review_stars(
        self,
        info: strawberry.Info,
        episode: Episode,
        stars: int,
        comment: str | None = strawberry.UNSET,
    ) -> Review:
        """Update the stars (and optionally the comment) of an episode's first review."""
        from ..resolvers.review import update_review_stars

        return update_review_stars(info, episode, stars, comment)

    # Character mutations
    @strawberry.mutation(name="deleteCharacter")
    def delete_character(self, info: strawberry.Info, id: strawberry.ID) -> strawberry.ID:
        """Delete a character and remove it from every friend list."""
        from ..resolvers.character import delete_character

        return delete_character(info, id)
