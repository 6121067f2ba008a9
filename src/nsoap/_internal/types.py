"""Shared type aliases used across nsoap modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Root object graph, or a zero-argument factory producing it
Root: TypeAlias = Any | Callable[[], Any]

# Dynamic argument resolver — name -> value, falsy when unresolved
Resolver: TypeAlias = Callable[[str], Any]

# Raw argument source as accepted by analyze_path() and route()
RawSource: TypeAlias = Mapping[str, Any] | Resolver

# Hook called with each streamed element of an incremental result
NextValueHook: TypeAlias = Callable[[Any], Any]

# Hook that may replace the object about to be accessed
ModifyHandler: TypeAlias = Callable[[Any, str], Any]
