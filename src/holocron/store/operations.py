"""
Mutation handlers over the entity store.

Each handler validates its arguments before touching the store and runs
entirely under the store lock, so a failed call leaves the store unchanged.
"""

from ..errors import NotFoundError
from ..logging import get_logger
from .entity_store import EntityStore
from .models import MISSING, Episode, Missing, Review, validate_stars

logger = get_logger(__name__)


def create_review(
    store: EntityStore, episode: Episode, stars: int, comment: str | None = None
) -> Review:
    """Append a new review for ``episode``.

    Not idempotent: repeated calls append duplicate reviews.

    Raises:
        InvalidArgumentError: If stars is outside [0, 5]
    """
    validate_stars(stars)

    review = Review(episode=episode, stars=stars, comment=comment)
    with store.lock:
        store.append_review(review)

    logger.info("Review created", episode=episode.value, stars=stars)
    return review


def update_review_stars(
    store: EntityStore,
    episode: Episode,
    stars: int,
    comment: str | None | Missing = MISSING,
) -> Review:
    """Set the stars of the first review for ``episode``.

    The comment is only replaced when supplied; an explicit None clears it.

    Raises:
        InvalidArgumentError: If stars is outside [0, 5]
        NotFoundError: If the episode has no review
    """
    validate_stars(stars)

    with store.lock:
        review = store.first_review_for_episode(episode)
        if review is None:
            raise NotFoundError(f"no review found for episode: {episode.value}")

        review.stars = stars
        if comment is not MISSING:
            review.comment = comment

    logger.info(
        "Review updated",
        episode=episode.value,
        stars=stars,
        comment_updated=comment is not MISSING,
    )
    return review


def delete_character(store: EntityStore, id: str) -> str:
    """Remove a character and prune it from every friend list.

    Returns:
        The deleted id

    Raises:
        NotFoundError: If no human or droid has this id
    """
    with store.lock:
        if not store.remove_character(id):
            raise NotFoundError(f"no character found with id: {id}")
        store.prune_friend_reference(id)

    logger.info("Character deleted", character_id=id)
    return id
