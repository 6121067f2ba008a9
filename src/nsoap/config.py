"""Route configuration.

RouteOptions is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from nsoap._internal.types import ModifyHandler, NextValueHook
from nsoap.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouteOptions:
    """Options for a single ``route()`` call. Immutable after creation.

    All fields are optional. Override what you need::

        options = RouteOptions(index="index", args=(request,), prepend_args=True)
    """

    # Called once per element streamed by an incremental result
    on_next_value: NextValueHook | None = None

    # Extra positional arguments passed to every invocation
    args: tuple[Any, ...] = ()
    prepend_args: bool = False  # Put extra args before path args instead of after

    # Replaces the object about to be accessed, before every lookup
    modify_handler: ModifyHandler | None = None

    # Default member resolved once the explicit path is exhausted
    index: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.args, (str, bytes)) or not isinstance(self.args, Sequence):
            msg = f"args must be a sequence of values, got {type(self.args).__name__}"
            raise ConfigurationError(msg)
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))
        for name in ("on_next_value", "modify_handler"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                msg = f"{name} must be callable, got {type(hook).__name__}"
                raise ConfigurationError(msg)
        if self.index is not None and not isinstance(self.index, str):
            msg = f"index must be a member name, got {type(self.index).__name__}"
            raise ConfigurationError(msg)

    def combine(self, path_args: Sequence[Any]) -> tuple[Any, ...]:
        """Merge path-supplied arguments with the configured extra args."""
        if self.prepend_args:
            return (*self.args, *path_args)
        return (*path_args, *self.args)
