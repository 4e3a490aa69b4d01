"""
Domain records for the in-memory Star Wars dataset.

Characters are a tagged union of ``Human`` and ``Droid``; the ``kind`` field
is the discriminant used for interface type resolution. References to other
entities are stored as ids and resolved at read time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Literal

from ..errors import InvalidArgumentError

MIN_STARS = 0
MAX_STARS = 5

FEET_PER_METER = 3.28084


class Episode(Enum):
    """Star Wars film episodes."""

    NEWHOPE = "NEWHOPE"
    EMPIRE = "EMPIRE"
    JEDI = "JEDI"


class LengthUnit(Enum):
    """Units for starship length."""

    METER = "METER"
    FOOT = "FOOT"


class CharacterKind(Enum):
    """Concrete variant tag of a character."""

    HUMAN = "Human"
    DROID = "Droid"


class _Missing(Enum):
    MISSING = "MISSING"


# Marks an optional argument the caller did not supply at all.
MISSING: Final = _Missing.MISSING
Missing = Literal[_Missing.MISSING]


@dataclass
class Human:
    id: str
    name: str
    appears_in: list[Episode] = field(default_factory=list)
    friend_ids: list[str] = field(default_factory=list)
    starship_ids: list[str] = field(default_factory=list)
    credits: int | None = None
    kind: CharacterKind = field(default=CharacterKind.HUMAN, init=False)


@dataclass
class Droid:
    id: str
    name: str
    appears_in: list[Episode] = field(default_factory=list)
    friend_ids: list[str] = field(default_factory=list)
    primary_function: str | None = None
    kind: CharacterKind = field(default=CharacterKind.DROID, init=False)


Character = Human | Droid


@dataclass
class Starship:
    id: str
    name: str
    length_meters: float


@dataclass
class Review:
    episode: Episode
    stars: int
    comment: str | None = None


def parse_episode(value: "Episode | str") -> Episode:
    """Coerce an externally supplied value into an Episode."""
    if isinstance(value, Episode):
        return value
    try:
        return Episode(value)
    except ValueError:
        raise InvalidArgumentError(f"invalid episode: {value!r}") from None


def validate_stars(stars: int) -> None:
    """Raise InvalidArgumentError unless stars is within [0, 5]."""
    if stars < MIN_STARS or stars > MAX_STARS:
        raise InvalidArgumentError(f"invalid number of stars [{MIN_STARS}, {MAX_STARS}]")
