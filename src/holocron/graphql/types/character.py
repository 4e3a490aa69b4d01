"""
Character GraphQL type definitions

``Character`` is an interface implemented by ``Human`` and ``Droid``. Each
GraphQL object borrows its store record; nested references are resolved
against the store only when the query selects them.
"""

from typing import Optional

import strawberry

from ...store import models
from .enums import Episode
from .starship import Starship


@strawberry.interface
class Character:
    """A person or droid from the films."""

    id: strawberry.ID
    name: str
    appears_in: list[Episode]
    record: strawberry.Private[models.Human | models.Droid]

    @strawberry.field
    def friends(self, info: strawberry.Info) -> list[Optional["Character"]] | None:
        """Friends of this character; unknown ids resolve to null."""
        from ..resolvers.character import resolve_character_friends

        return resolve_character_friends(self, info)


@strawberry.type
class Human(Character):
    """Human type for GraphQL API."""

    credits: int | None

    @classmethod
    def from_record(cls, record: models.Human) -> "Human":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            appears_in=list(record.appears_in),
            credits=record.credits,
            record=record,
        )

    @strawberry.field
    def starships(self, info: strawberry.Info) -> list[Starship | None] | None:
        """Starships piloted by this human; unknown ids resolve to null."""
        from ..resolvers.character import resolve_human_starships

        return resolve_human_starships(self, info)


@strawberry.type
class Droid(Character):
    """Droid type for GraphQL API."""

    primary_function: str | None

    @classmethod
    def from_record(cls, record: models.Droid) -> "Droid":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            appears_in=list(record.appears_in),
            primary_function=record.primary_function,
            record=record,
        )
