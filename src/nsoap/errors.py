"""nsoap exception hierarchy and the routing error value.

Exceptions are for faults the caller must handle (bad configuration,
undecodable paths). ``RoutingError`` is different: it is *returned* by
``route()`` so transport code can branch on ``type`` without try/except.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class NsoapError(Exception):
    """Base for all nsoap-specific errors."""


class ConfigurationError(NsoapError):
    """Raised when route options are invalid.

    Typically raised from ``RouteOptions.__post_init__``.
    """


class PathDecodeError(NsoapError, ValueError):
    """Raised when a path expression cannot be percent-decoded.

    ``route()`` lets this propagate; callers that want a graceful
    response catch it and map it themselves.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Malformed percent-encoding in {path!r}{detail}")


class RoutingErrorType(StrEnum):
    """Machine-checkable routing failure kinds."""

    NOT_FOUND = "NOT_FOUND"
    NOT_A_FUNCTION = "NOT_A_FUNCTION"


# Suggested HTTP status per error type, for transport collaborators
_STATUS: dict[RoutingErrorType, int] = {
    RoutingErrorType.NOT_FOUND: 404,
    RoutingErrorType.NOT_A_FUNCTION: 400,
}


@dataclass(frozen=True, slots=True)
class RoutingError:
    """Terminal routing failure, returned as a value by ``route()``.

    Usage::

        result = await route(app, "users.find(bob)")
        if isinstance(result, RoutingError):
            if result.type == RoutingErrorType.NOT_FOUND:
                ...
    """

    message: str
    type: RoutingErrorType

    @classmethod
    def not_found(cls) -> "RoutingError":
        return cls("The requested path was not found.", RoutingErrorType.NOT_FOUND)

    @classmethod
    def not_a_function(cls, path: str, member: Any) -> "RoutingError":
        return cls(
            f"{path} is not a function. Was {type(member).__name__}.",
            RoutingErrorType.NOT_A_FUNCTION,
        )

    @property
    def status(self) -> int:
        """HTTP status code a transport layer would usually send."""
        return _STATUS[self.type]

    def __str__(self) -> str:
        return f"{self.type}: {self.message}"
