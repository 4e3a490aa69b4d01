"""
Starship GraphQL type definitions
"""

import strawberry

from ...store import models
from .enums import LengthUnit


@strawberry.type
class Starship:
    """Starship type for GraphQL API."""

    id: strawberry.ID
    name: str
    record: strawberry.Private[models.Starship]

    @classmethod
    def from_record(cls, record: models.Starship) -> "Starship":
        return cls(id=strawberry.ID(record.id), name=record.name, record=record)

    @strawberry.field
    def length(self, unit: LengthUnit | None = LengthUnit.METER) -> float | None:
        """Length of the starship in the requested unit (meters when null)."""
        from ..resolvers.starship import resolve_starship_length

        return resolve_starship_length(self, unit)
