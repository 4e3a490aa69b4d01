"""In-memory entity store and the operations over it."""

from .entity_store import EntityStore
from .fields import resolve_character_variant, starship_length
from .models import (
    MISSING,
    Character,
    CharacterKind,
    Droid,
    Episode,
    Human,
    LengthUnit,
    Review,
    Starship,
)
from .operations import create_review, delete_character, update_review_stars
from .relationships import resolve_friends, resolve_starships
from .seed_data import DEFAULT_SEED, SeedData, build_store, create_store_from_settings

__all__ = [
    "MISSING",
    "DEFAULT_SEED",
    "Character",
    "CharacterKind",
    "Droid",
    "EntityStore",
    "Episode",
    "Human",
    "LengthUnit",
    "Review",
    "SeedData",
    "Starship",
    "build_store",
    "create_review",
    "create_store_from_settings",
    "delete_character",
    "resolve_character_variant",
    "resolve_friends",
    "resolve_starships",
    "starship_length",
    "update_review_stars",
]
