from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import HolocronError
from ...logging import get_logger
from ...store import MISSING, Episode, operations
from ..context import get_store_from_info
from ..types.review import Review

if TYPE_CHECKING:
    from ..types.review import ReviewInput

logger = get_logger(__name__)


# Query resolvers
def resolve_reviews(info: strawberry.Info, episode: Episode) -> list[Review]:
    store = get_store_from_info(info)
    return [Review.from_record(r) for r in store.list_reviews_for_episode(episode)]


def resolve_all_reviews(info: strawberry.Info) -> list[Review]:
    store = get_store_from_info(info)
    return [Review.from_record(r) for r in store.list_all_reviews()]


# Mutation resolvers
def create_review(info: strawberry.Info, episode: Episode, input: ReviewInput) -> Review:
    store = get_store_from_info(info)
    try:
        record = operations.create_review(store, episode, input.stars, input.comment)
    except HolocronError as e:
        logger.warning("Review create rejected", episode=episode.value, error=str(e))
        raise
    return Review.from_record(record)


def update_review_stars(
    info: strawberry.Info, episode: Episode, stars: int, comment: str | None
) -> Review:
    """Update stars, and the comment only when the argument was sent."""
    store = get_store_from_info(info)
    try:
        record = operations.update_review_stars(
            store,
            episode,
            stars,
            MISSING if comment is strawberry.UNSET else comment,
        )
    except HolocronError as e:
        logger.warning("Review update rejected", episode=episode.value, error=str(e))
        raise
    return Review.from_record(record)
