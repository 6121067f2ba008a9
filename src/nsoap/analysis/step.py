"""Step and Argument frozen dataclasses."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class StepKind(StrEnum):
    OBJECT = "object"
    FUNCTION = "function"


@dataclass(frozen=True, slots=True)
class Argument:
    """One resolved token from a function step's parameter list.

    Either carries a ``value`` (bool, number or str) or an ``error``
    message when the token was not a valid literal or identifier.
    """

    value: Any = None
    error: str | None = None

    @classmethod
    def of(cls, value: Any) -> "Argument":
        return cls(value=value)

    @classmethod
    def invalid(cls, message: str) -> "Argument":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def call_value(self) -> Any:
        """What the invoked function receives for this argument.

        Error arguments are passed through as-is; the receiving function
        decides whether to fail.
        """
        return self.value if self.ok else self


@dataclass(frozen=True, slots=True)
class Step:
    """One hop of a path expression.

    Object:    ``users``          (kind=OBJECT, args=())
    Function:  ``find("bob", 2)`` (kind=FUNCTION, args=(Argument("bob"), Argument(2)))
    """

    kind: StepKind
    identifier: str
    args: tuple[Argument, ...] = ()

    @property
    def is_function(self) -> bool:
        return self.kind is StepKind.FUNCTION

    @property
    def call_args(self) -> tuple[Any, ...]:
        return tuple(arg.call_value for arg in self.args)
