"""
Domain error taxonomy surfaced through GraphQL operation failures
"""


class HolocronError(Exception):
    """Base exception for store operations."""

    code = "INTERNAL"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(HolocronError):
    """An argument is outside its accepted range or enumeration."""

    code = "INVALID_ARGUMENT"


class NotFoundError(HolocronError):
    """The targeted entity does not exist."""

    code = "NOT_FOUND"
