"""Routing executor — walks analyzed steps against a live object graph.

The path *is* the call: ``users.find(bob).posts(10)`` reads ``users``
from the root, calls ``find("bob")`` on it, then ``posts(10)`` on the
result. There is no route table.

Failures are returned, not raised::

    result = await route(app, "users.find(bob)")
    if isinstance(result, RoutingError):
        ...

Exceptions raised by app code, hooks and path decoding propagate.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from nsoap._internal.invoke import invoke, settle
from nsoap._internal.types import RawSource, Root
from nsoap.analysis.analyzer import analyze_path
from nsoap.analysis.sources import ArgSource
from nsoap.analysis.step import Step
from nsoap.config import RouteOptions
from nsoap.errors import RoutingError
from nsoap.execution.incremental import drain
from nsoap.members import get_member, has_member

logger = logging.getLogger("nsoap.router")

_DEFAULT_OPTIONS = RouteOptions()


async def _resolve_root(root: Root) -> Any:
    """Call a zero-argument app factory, or return a ready app.

    Classes and mappings are apps, not factories.
    """
    if callable(root) and not isinstance(root, (Mapping, type)):
        return await invoke(root)
    return root


async def _modify(current: Any, identifier: str, options: RouteOptions) -> Any:
    if options.modify_handler is None:
        return current
    return await invoke(options.modify_handler, current, identifier)


async def _read(current: Any, identifier: str, options: RouteOptions) -> Any:
    """Resolve a member without path arguments: call it if callable."""
    member = get_member(current, identifier)
    if callable(member):
        result = await invoke(member, *options.args)
    else:
        result = await settle(member)
    return await drain(result, options.on_next_value)


async def _call(
    current: Any, step: Step, path: str, options: RouteOptions
) -> tuple[Any, RoutingError | None]:
    """Invoke a function step. Returns ``(result, error)``."""
    member = get_member(current, step.identifier)
    if member is None:
        return None, RoutingError.not_found()
    if not callable(member):
        return None, RoutingError.not_a_function(path, member)
    result = await invoke(member, *options.combine(step.call_args))
    return await drain(result, options.on_next_value), None


async def walk(
    root: Any, steps: Iterable[Step], options: RouteOptions = _DEFAULT_OPTIONS
) -> Any:
    """Walk *steps* from *root*, then apply the index member if any.

    Returns the final value or a ``RoutingError``. A ``None`` value
    mid-path ends the walk silently and ``None`` is returned; that is
    distinct from a missing member, which is ``NOT_FOUND``.
    """
    current = root
    path = ""

    for step in steps:
        if current is None:
            logger.debug("Walk stopped at %r: value is None", step.identifier)
            break

        path = f"{path}.{step.identifier}" if path else step.identifier
        logger.debug("Step %s %r", step.kind, path)
        current = await _modify(current, step.identifier, options)

        if not has_member(current, step.identifier):
            logger.debug("No member %r on %s", path, type(current).__name__)
            return RoutingError.not_found()

        if step.is_function:
            current, error = await _call(current, step, path, options)
            if error is not None:
                logger.debug("Routing failed at %r: %s", path, error)
                return error
        else:
            current = await _read(current, step.identifier, options)

    index = options.index
    if index is not None and has_member(current, index):
        logger.debug("Resolving index member %r", index)
        current = await _modify(current, index, options)
        # The hook may hand back an object without the index member
        if not has_member(current, index):
            logger.debug("Index member %r removed by modify_handler", index)
            return RoutingError.not_found()
        current = await _read(current, index, options)

    logger.debug("Resolved %r to %s", path, type(current).__name__)
    return current


async def route(
    root: Root,
    expression: str | None,
    sources: Iterable[ArgSource | RawSource] | None = None,
    options: RouteOptions | None = None,
) -> Any:
    """Resolve *expression* against *root*.

    Args:
        root: The app object graph, or a zero-argument factory (sync or
            async) producing it.
        expression: Percent-encoded dotted path, e.g.
            ``"users.find(%22bob%22).posts(10)"``. Empty or ``None``
            resolves the root itself (and its index member).
        sources: Ordered argument sources for bare identifiers in
            call arguments; mappings or resolver functions.
        options: ``RouteOptions``; defaults apply when omitted.

    Returns:
        The resolved value, or a ``RoutingError``.

    Raises:
        PathDecodeError: If *expression* has malformed percent-encoding.
    """
    options = options or _DEFAULT_OPTIONS
    app = await _resolve_root(root)
    steps = analyze_path(expression, sources) if expression else ()
    logger.debug("Routing %r (%d step(s))", expression, len(steps))
    return await walk(app, steps, options)
