"""
Seed data for the entity store.

The built-in dataset is used unless ``settings.seed_data_path`` points at a
YAML file with ``starships``, ``humans``, ``droids`` and ``reviews`` lists.
Every store gets its own deep copy of the seed.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..config import settings
from ..errors import InvalidArgumentError
from ..logging import get_logger
from .entity_store import EntityStore
from .models import Droid, Episode, Human, Review, Starship, parse_episode, validate_stars

logger = get_logger(__name__)

ALL_EPISODES = [Episode.NEWHOPE, Episode.EMPIRE, Episode.JEDI]


@dataclass
class SeedData:
    humans: list[Human] = field(default_factory=list)
    droids: list[Droid] = field(default_factory=list)
    starships: list[Starship] = field(default_factory=list)
    reviews: list[Review] = field(default_factory=list)


DEFAULT_SEED = SeedData(
    starships=[
        Starship(id="falcon", name="Millennium Falcon", length_meters=34.75),
        Starship(id="xwing", name="T-65 X-wing", length_meters=12.5),
    ],
    humans=[
        Human(
            id="han",
            name="Han Solo",
            appears_in=list(ALL_EPISODES),
            friend_ids=["chewie"],
            starship_ids=["falcon"],
            credits=1000,
        ),
        Human(
            id="luke",
            name="Luke Skywalker",
            appears_in=list(ALL_EPISODES),
            friend_ids=["han", "r2"],
            starship_ids=["xwing"],
            credits=50,
        ),
    ],
    droids=[
        Droid(
            id="r2",
            name="R2-D2",
            appears_in=list(ALL_EPISODES),
            friend_ids=["luke"],
            primary_function="Astromech",
        ),
        Droid(
            id="chewie",
            name="Chewbacca",
            appears_in=list(ALL_EPISODES),
            friend_ids=["han", "luke"],
            primary_function="Co-pilot",
        ),
    ],
    reviews=[
        Review(episode=Episode.NEWHOPE, stars=0, comment="a new hope"),
        Review(episode=Episode.EMPIRE, stars=0, comment="the empire strikes back"),
        Review(episode=Episode.JEDI, stars=0, comment="return of the jedi"),
    ],
)


def _require(entry: dict[str, Any], key: str, section: str) -> Any:
    if key not in entry:
        raise InvalidArgumentError(f"Seed {section} entry missing '{key}': {entry}")
    return entry[key]


def _parse_episodes(values: list[Any] | None) -> list[Episode]:
    return [parse_episode(value) for value in values or []]


def _parse_human(entry: dict[str, Any]) -> Human:
    return Human(
        id=str(_require(entry, "id", "human")),
        name=_require(entry, "name", "human"),
        appears_in=_parse_episodes(entry.get("appears_in")),
        friend_ids=[str(fid) for fid in entry.get("friend_ids") or []],
        starship_ids=[str(sid) for sid in entry.get("starship_ids") or []],
        credits=entry.get("credits"),
    )


def _parse_droid(entry: dict[str, Any]) -> Droid:
    return Droid(
        id=str(_require(entry, "id", "droid")),
        name=_require(entry, "name", "droid"),
        appears_in=_parse_episodes(entry.get("appears_in")),
        friend_ids=[str(fid) for fid in entry.get("friend_ids") or []],
        primary_function=entry.get("primary_function"),
    )


def _parse_starship(entry: dict[str, Any]) -> Starship:
    length = _require(entry, "length_meters", "starship")
    if isinstance(length, bool) or not isinstance(length, (int, float)):
        raise InvalidArgumentError(f"Seed starship length_meters must be a number: {length!r}")
    return Starship(
        id=str(_require(entry, "id", "starship")),
        name=_require(entry, "name", "starship"),
        length_meters=float(length),
    )


def _parse_review(entry: dict[str, Any]) -> Review:
    stars = _require(entry, "stars", "review")
    # YAML gives 2.7 as a float and "yes" as a bool; neither is a star count
    if isinstance(stars, bool) or not isinstance(stars, int):
        raise InvalidArgumentError(f"Seed review stars must be an integer: {stars!r}")
    validate_stars(stars)
    return Review(
        episode=parse_episode(_require(entry, "episode", "review")),
        stars=stars,
        comment=entry.get("comment"),
    )


def _entries(data: dict[str, Any], section: str) -> list[dict[str, Any]]:
    entries = data.get(section) or []
    if not isinstance(entries, list):
        raise InvalidArgumentError(f"Seed section '{section}' must be a list")
    for entry in entries:
        if not isinstance(entry, dict):
            raise InvalidArgumentError(f"Seed {section} entry must be a mapping: {entry!r}")
    return entries


def load_seed_file(path: str | Path) -> SeedData:
    """Load seed data from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidArgumentError: If the file is not valid YAML, is not a mapping
            of lists of mappings, or an entry has a missing field, an unknown
            episode or bad stars
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidArgumentError(f"Seed file is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise InvalidArgumentError(
            f"Seed file must be a mapping of sections, got {type(data).__name__}"
        )

    seed = SeedData(
        humans=[_parse_human(e) for e in _entries(data, "humans")],
        droids=[_parse_droid(e) for e in _entries(data, "droids")],
        starships=[_parse_starship(e) for e in _entries(data, "starships")],
        reviews=[_parse_review(e) for e in _entries(data, "reviews")],
    )
    logger.info(
        "Loaded seed data from file",
        path=str(path),
        humans=len(seed.humans),
        droids=len(seed.droids),
        starships=len(seed.starships),
        reviews=len(seed.reviews),
    )
    return seed


def build_store(seed: SeedData | None = None) -> EntityStore:
    """Create a fresh store from ``seed`` (built-in data by default)."""
    data = copy.deepcopy(seed or DEFAULT_SEED)
    return EntityStore(
        humans=data.humans,
        droids=data.droids,
        starships=data.starships,
        reviews=data.reviews,
    )


def create_store_from_settings() -> EntityStore:
    """Create the application store, honouring ``settings.seed_data_path``."""
    if settings.seed_data_path:
        return build_store(load_seed_file(settings.seed_data_path))
    return build_store()
