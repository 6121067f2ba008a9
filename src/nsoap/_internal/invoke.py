"""Invoke helpers — call sync or async callables uniformly.

App members, argument resolvers and option hooks can all be ``def`` or
``async def``. This module keeps the sync/async check in one place.

Usage::

    from nsoap._internal.invoke import invoke, settle

    result = await invoke(member, *args)
    value = await settle(maybe_awaitable)
"""

import inspect
from typing import Any


async def settle(value: Any) -> Any:
    """Await *value* if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        value = await value
    return value


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine.

    Works with both sync and async callables::

        # sync — returns immediately, no await needed
        def greet(name):
            return f"Hello, {name}"

        # async — returns coroutine, awaited automatically
        async def find(name):
            return await db.users.get(name)
    """
    return await settle(handler(*args, **kwargs))
