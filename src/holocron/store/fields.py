"""Computed field values and character variant dispatch."""

from .models import FEET_PER_METER, Character, CharacterKind, Droid, Human, LengthUnit, Starship


def starship_length(ship: Starship | None, unit: LengthUnit = LengthUnit.METER) -> float | None:
    """Length of ``ship`` in the requested unit, or None without a ship."""
    if ship is None:
        return None
    if unit == LengthUnit.FOOT:
        return ship.length_meters * FEET_PER_METER
    return ship.length_meters


def resolve_character_variant(character: Character) -> CharacterKind:
    """Return the concrete variant tag of a store character.

    Raises:
        TypeError: If the value is not a tagged Human or Droid record.
    """
    if not isinstance(character, (Human, Droid)):
        raise TypeError(f"Not a character record: {type(character).__name__}")
    return character.kind
