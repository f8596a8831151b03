"""
Error values returned by repositories and mapped to HTTP responses.

These are plain values rather than exceptions: repositories hand them back
inside ``Err`` and handlers turn them into responses with
:func:`task_api.routers.common.error_response`.  ``message`` is always safe
to show to the client; store and driver details are only ever logged.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple


@dataclass(frozen=True)
class ApiError:
    message: str = "Internal Server Error"
    status_code: ClassVar[int] = 500

    def to_body(self) -> dict:
        return {"message": self.message}


@dataclass(frozen=True)
class ValidationError(ApiError):
    """A required field is missing, blank, or has an unusable value."""

    fields: Tuple[str, ...] = ()
    status_code: ClassVar[int] = 400

    @classmethod
    def for_fields(cls, fields) -> "ValidationError":
        fields = tuple(fields)
        return cls(
            message=f"Missing or invalid fields: {', '.join(fields)}",
            fields=fields,
        )

    def to_body(self) -> dict:
        return {"message": self.message, "fields": list(self.fields)}


@dataclass(frozen=True)
class ConflictError(ApiError):
    """A unique key (user email) is already taken."""

    status_code: ClassVar[int] = 409


@dataclass(frozen=True)
class NotFoundError(ApiError):
    status_code: ClassVar[int] = 404


@dataclass(frozen=True)
class InternalError(ApiError):
    status_code: ClassVar[int] = 500
