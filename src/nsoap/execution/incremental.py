"""Incremental results — draining streamed values down to a final value.

A member may return a value that is produced piece by piece. Each
intermediate element is reported through ``on_next_value`` and the
value attached to completion is what the walk continues with.

Protocol::

    More(value)   # an intermediate element, keep pulling
    Done(value)   # finished; value is the result of the step

Supported shapes:

- Subclasses of ``Incremental`` (``pull()`` returning ``More`` or
  ``Done``, or an awaitable of one).
- Sync generators and iterators. Yields are ``More``; a generator's
  ``return`` value is the ``Done`` payload.
- Async generators and iterators. Yields are ``More`` except a yielded
  ``Done(v)``, which ends the stream with ``v``. Async generators
  cannot ``return`` a value, so plain exhaustion is ``Done(None)``.

Elements and payloads that are awaitable are awaited before use.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

from nsoap._internal.invoke import invoke, settle
from nsoap._internal.types import NextValueHook


@dataclass(frozen=True, slots=True)
class More:
    value: Any


@dataclass(frozen=True, slots=True)
class Done:
    value: Any = None


Pulled = More | Done


class Incremental(ABC):
    """Pull-based stream whose completion carries a payload.

    Streams opt in by subclassing or with ``Incremental.register()``.
    Objects that merely have a ``pull`` attribute are plain values.
    """

    @abstractmethod
    def pull(self) -> Any:
        """Return ``More`` or ``Done``, or an awaitable of one."""


class _IteratorPuller(Incremental):
    __slots__ = ("_iterator",)

    def __init__(self, iterator: Iterator[Any]) -> None:
        self._iterator = iterator

    def pull(self) -> Pulled:
        try:
            item = next(self._iterator)
        except StopIteration as stop:
            return Done(stop.value)
        return item if isinstance(item, Done) else More(item)

    async def close(self) -> None:
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()


class _AsyncIteratorPuller(Incremental):
    __slots__ = ("_iterator",)

    def __init__(self, iterator: AsyncIterator[Any]) -> None:
        self._iterator = iterator

    async def pull(self) -> Pulled:
        try:
            item = await anext(self._iterator)
        except StopAsyncIteration:
            return Done()
        return item if isinstance(item, Done) else More(item)

    async def close(self) -> None:
        aclose = getattr(self._iterator, "aclose", None)
        if aclose is not None:
            await aclose()


def as_incremental(value: Any) -> Incremental | None:
    """Wrap *value* in a puller, or return ``None`` for plain values."""
    if isinstance(value, Incremental):
        return value
    if isinstance(value, Iterator):
        return _IteratorPuller(value)
    if isinstance(value, AsyncIterator):
        return _AsyncIteratorPuller(value)
    return None


async def drain(value: Any, on_next_value: NextValueHook | None = None) -> Any:
    """Pull *value* until it reports completion and return the payload.

    Plain values are settled and returned. For incremental values every
    intermediate element is awaited and passed to *on_next_value* in
    order; a failing hook propagates.
    """
    puller = as_incremental(value)
    if puller is None:
        return await settle(value)

    try:
        while True:
            pulled = await settle(puller.pull())
            if isinstance(pulled, Done):
                return await settle(pulled.value)
            if not isinstance(pulled, More):
                msg = f"pull() must return More or Done, got {type(pulled).__name__}"
                raise TypeError(msg)
            element = await settle(pulled.value)
            if on_next_value is not None:
                await invoke(on_next_value, element)
    finally:
        if isinstance(puller, (_IteratorPuller, _AsyncIteratorPuller)):
            await puller.close()
