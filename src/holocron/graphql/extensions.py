"""
Strawberry extensions for the Holocron schema
"""

from collections.abc import Iterator

from strawberry.extensions import SchemaExtension

from ..errors import HolocronError


class DomainErrorExtension(SchemaExtension):
    """Expose the code of domain errors in GraphQL error extensions."""

    def on_operation(self) -> Iterator[None]:
        yield

        result = self.execution_context.result
        errors = getattr(result, "errors", None)
        if not errors:
            return

        for error in errors:
            original = error.original_error
            if isinstance(original, HolocronError):
                error.extensions = {**(error.extensions or {}), "code": original.code}
