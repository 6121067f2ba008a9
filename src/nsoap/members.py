"""Own-member lookup on the object graph.

A path may only reach members declared directly on the value being
walked: keys of a mapping, or names in an object's ``__dict__``.
Inherited class attributes, ``__slots__`` and dunder names never match,
so an expression cannot reach ``__class__``, ``mro`` or similar internals.
"""

from collections.abc import Mapping
from typing import Any


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def has_member(obj: Any, name: str | None) -> bool:
    """Whether *obj* declares *name* as its own member."""
    if not isinstance(name, str) or _is_dunder(name):
        return False
    if isinstance(obj, Mapping):
        return name in obj
    try:
        namespace = vars(obj)
    except TypeError:
        return False
    return name in namespace


def get_member(obj: Any, name: str) -> Any:
    """Read an own member. Call ``has_member`` first."""
    if isinstance(obj, Mapping):
        return obj[name]
    # getattr so class-level staticmethods/classmethods come back bound
    return getattr(obj, name)
