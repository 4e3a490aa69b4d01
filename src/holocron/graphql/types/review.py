"""
Review GraphQL type definitions
"""

import strawberry

from ...store import models
from .enums import Episode


@strawberry.type
class Review:
    """Review type for GraphQL API."""

    episode: Episode
    stars: int
    comment: str | None

    @classmethod
    def from_record(cls, record: models.Review) -> "Review":
        return cls(episode=record.episode, stars=record.stars, comment=record.comment)


@strawberry.input
class ReviewInput:
    """Input for creating a review."""

    stars: int
    comment: str | None = None
