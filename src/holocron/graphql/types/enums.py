"""
Enumeration types exposed by the GraphQL API
"""

import strawberry

from ...store import models

Episode = strawberry.enum(models.Episode, description="Star Wars film episode.")

LengthUnit = strawberry.enum(models.LengthUnit, description="Unit for starship length.")
