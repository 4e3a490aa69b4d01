"""Expansion of id references into store entities.

Unknown or deleted ids resolve to ``None`` in place; the output always has the
same length and order as the input ids.
"""

from collections.abc import Sequence

from .entity_store import EntityStore
from .models import Character, Starship


def resolve_friends(store: EntityStore, friend_ids: Sequence[str]) -> list[Character | None]:
    return [store.find_character_by_id(fid) for fid in friend_ids]


def resolve_starships(store: EntityStore, starship_ids: Sequence[str]) -> list[Starship | None]:
    return [store.find_starship_by_id(sid) for sid in starship_ids]
