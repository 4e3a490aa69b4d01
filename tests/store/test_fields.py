"""
Tests for computed fields and variant dispatch
"""

import pytest

from holocron.store import CharacterKind, LengthUnit, resolve_character_variant, starship_length
from holocron.store.models import Starship


@pytest.fixture
def falcon():
    return Starship(id="falcon", name="Millennium Falcon", length_meters=34.75)


def test_length_defaults_to_meters(falcon):
    assert starship_length(falcon) == 34.75


def test_length_in_meters_is_unchanged(falcon):
    assert starship_length(falcon, LengthUnit.METER) == 34.75


def test_length_in_feet(falcon):
    feet = starship_length(falcon, LengthUnit.FOOT)

    assert feet == pytest.approx(34.75 * 3.28084)
    assert round(feet, 2) == 114.01


def test_length_without_ship():
    assert starship_length(None, LengthUnit.FOOT) is None


def test_variant_for_every_stored_character(store):
    kinds = {c.id: resolve_character_variant(c) for c in store.list_characters()}

    assert kinds == {
        "han": CharacterKind.HUMAN,
        "luke": CharacterKind.HUMAN,
        "r2": CharacterKind.DROID,
        "chewie": CharacterKind.DROID,
    }


def test_variant_rejects_untagged_values():
    with pytest.raises(TypeError):
        resolve_character_variant({"id": "han", "name": "Han Solo"})  # type: ignore[arg-type]
