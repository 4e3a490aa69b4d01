from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...store import LengthUnit, starship_length
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.starship import Starship


def resolve_starship_by_id(info: strawberry.Info, id: str) -> Starship | None:
    from ..types.starship import Starship

    store = get_store_from_info(info)
    record = store.find_starship_by_id(id)
    if record is None:
        return None
    return Starship.from_record(record)


def resolve_starship_length(starship: Starship | None, unit: LengthUnit | None) -> float | None:
    record = starship.record if starship is not None else None
    return starship_length(record, unit or LengthUnit.METER)
