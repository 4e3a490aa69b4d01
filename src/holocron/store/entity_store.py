"""In-memory entity store owning every character, starship and review."""

import threading
from collections.abc import Iterable

from .models import Character, Droid, Episode, Human, Review, Starship


class EntityStore:
    """Single source of truth for the process-resident dataset.

    Humans and droids live in separate insertion-ordered lists; lookups scan
    humans before droids. Starships are indexed by id once at construction
    since no operation mutates them. Mutations must hold ``lock``.
    """

    def __init__(
        self,
        humans: Iterable[Human] = (),
        droids: Iterable[Droid] = (),
        starships: Iterable[Starship] = (),
        reviews: Iterable[Review] = (),
    ):
        self._humans: list[Human] = list(humans)
        self._droids: list[Droid] = list(droids)
        self._starships: list[Starship] = list(starships)
        self._reviews: list[Review] = list(reviews)
        self._starships_by_id: dict[str, Starship] = {s.id: s for s in self._starships}
        self.lock = threading.RLock()

        seen: set[str] = set()
        for character in [*self._humans, *self._droids]:
            if character.id in seen:
                raise ValueError(f"Duplicate character id: {character.id}")
            seen.add(character.id)

        if len(self._starships_by_id) != len(self._starships):
            raise ValueError("Duplicate starship id in seed data")

    # Characters

    def find_character_by_id(self, id: str) -> Character | None:
        for human in self._humans:
            if human.id == id:
                return human
        for droid in self._droids:
            if droid.id == id:
                return droid
        return None

    def list_characters(self) -> list[Character]:
        """All humans followed by all droids, each in insertion order."""
        return [*self._humans, *self._droids]

    def remove_character(self, id: str) -> bool:
        """Remove the character from whichever collection holds it."""
        with self.lock:
            for collection in (self._humans, self._droids):
                for index, character in enumerate(collection):
                    if character.id == id:
                        del collection[index]
                        return True
        return False

    def prune_friend_reference(self, id: str) -> None:
        """Drop ``id`` from every remaining character's friend list.

        Only called as part of character deletion.
        """
        with self.lock:
            for character in self.list_characters():
                if id in character.friend_ids:
                    character.friend_ids = [fid for fid in character.friend_ids if fid != id]

    # Starships

    def find_starship_by_id(self, id: str) -> Starship | None:
        return self._starships_by_id.get(id)

    def list_starships(self) -> list[Starship]:
        return list(self._starships)

    # Reviews

    def list_reviews_for_episode(self, episode: Episode) -> list[Review]:
        return [review for review in self._reviews if review.episode == episode]

    def list_all_reviews(self) -> list[Review]:
        return list(self._reviews)

    def first_review_for_episode(self, episode: Episode) -> Review | None:
        for review in self._reviews:
            if review.episode == episode:
                return review
        return None

    def append_review(self, review: Review) -> None:
        with self.lock:
            self._reviews.append(review)

    def stats(self) -> dict[str, int]:
        return {
            "humans": len(self._humans),
            "droids": len(self._droids),
            "starships": len(self._starships),
            "reviews": len(self._reviews),
        }
