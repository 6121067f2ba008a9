"""Argument sources — where bare identifiers in a call get their values.

Two variants, consulted in list order so earlier sources shadow later
ones:

- ``StaticMap``: a plain name -> value mapping (own keys only).
- ``DynamicResolver``: a function ``name -> value``; a falsy return
  means "no match", e.g. a lookup against request query parameters.

Raw mappings and callables are coerced with ``as_source()``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from nsoap._internal.types import RawSource, Resolver


@dataclass(frozen=True, slots=True)
class StaticMap:
    mapping: Mapping[str, Any]

    def lookup(self, name: str) -> tuple[bool, Any]:
        if name in self.mapping:
            return True, self.mapping[name]
        return False, None


@dataclass(frozen=True, slots=True)
class DynamicResolver:
    resolve: Resolver

    def lookup(self, name: str) -> tuple[bool, Any]:
        value = self.resolve(name)
        if value:
            return True, value
        return False, None


ArgSource = StaticMap | DynamicResolver


def as_source(source: ArgSource | RawSource) -> ArgSource:
    """Coerce a raw mapping or resolver function into an ``ArgSource``.

    Raises ``TypeError`` for anything else.
    """
    if isinstance(source, (StaticMap, DynamicResolver)):
        return source
    if isinstance(source, Mapping):
        return StaticMap(source)
    if callable(source):
        return DynamicResolver(source)
    msg = f"Argument source must be a mapping or a callable, got {type(source).__name__}"
    raise TypeError(msg)


def as_sources(sources: Iterable[ArgSource | RawSource] | None) -> tuple[ArgSource, ...]:
    if sources is None:
        return ()
    return tuple(as_source(source) for source in sources)


def lookup(sources: Iterable[ArgSource], name: str) -> tuple[bool, Any]:
    """First definite match across *sources*, in order."""
    for source in sources:
        found, value = source.lookup(name)
        if found:
            return True, value
    return False, None
