from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import CharacterKind, operations, resolve_character_variant
from ...store import models as records
from ...store.relationships import resolve_friends, resolve_starships
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.character import Character, Human
    from ..types.starship import Starship

logger = get_logger(__name__)


def to_character_type(record: records.Character) -> Character:
    """Build the concrete GraphQL object for a store character."""
    from ..types.character import Droid, Human

    kind = resolve_character_variant(record)
    if kind == CharacterKind.HUMAN:
        return Human.from_record(record)
    return Droid.from_record(record)


def _optional_character(record: records.Character | None) -> Character | None:
    return to_character_type(record) if record is not None else None


# Query resolvers
def resolve_character_by_id(info: strawberry.Info, id: str) -> Character | None:
    store = get_store_from_info(info)
    return _optional_character(store.find_character_by_id(id))


def resolve_characters(info: strawberry.Info) -> list[Character]:
    store = get_store_from_info(info)
    return [to_character_type(record) for record in store.list_characters()]


# Field resolvers
def resolve_character_friends(
    character: Character, info: strawberry.Info
) -> list[Character | None]:
    store = get_store_from_info(info)
    friends = resolve_friends(store, character.record.friend_ids)
    return [_optional_character(friend) for friend in friends]


def resolve_human_starships(human: Human, info: strawberry.Info) -> list[Starship | None]:
    from ..types.starship import Starship

    store = get_store_from_info(info)
    ships = resolve_starships(store, human.record.starship_ids)
    return [Starship.from_record(ship) if ship is not None else None for ship in ships]


# Mutation resolvers
def delete_character(info: strawberry.Info, id: str) -> strawberry.ID:
    store = get_store_from_info(info)
    try:
        deleted_id = operations.delete_character(store, id)
    except NotFoundError as e:
        logger.warning("Character delete rejected", character_id=id, error=str(e))
        raise
    return strawberry.ID(deleted_id)
