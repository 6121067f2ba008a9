"""``nsoap call`` — resolve one expression against an app and print the result.

Exit codes map the routing outcome for shell scripts:

    0  resolved
    1  app could not be imported, or the expression could not be decoded
    3  NOT_FOUND
    4  NOT_A_FUNCTION
"""

import argparse
import json
import logging
import sys
from functools import partial
from typing import Any

import anyio

from nsoap.cli._resolve import resolve_app
from nsoap.config import RouteOptions
from nsoap.errors import PathDecodeError, RoutingError, RoutingErrorType
from nsoap.execution.router import route

logger = logging.getLogger("nsoap.cli")

EXIT_CODES: dict[RoutingErrorType, int] = {
    RoutingErrorType.NOT_FOUND: 3,
    RoutingErrorType.NOT_A_FUNCTION: 4,
}


def parse_value(raw: str) -> Any:
    """Parse a CLI value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def parse_assignments(pairs: list[str]) -> dict[str, Any]:
    """Turn ``["name=value", ...]`` into a mapping argument source."""
    variables: dict[str, Any] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            msg = f"Expected NAME=VALUE, got {pair!r}"
            raise argparse.ArgumentTypeError(msg)
        variables[name] = parse_value(raw)
    return variables


def format_result(result: Any) -> str:
    try:
        return json.dumps(result)
    except (TypeError, ValueError):
        return repr(result)


def _print_element(element: Any) -> None:
    print(format_result(element), flush=True)


def run_call(args: argparse.Namespace) -> None:
    """Route ``args.expression`` against the app named by ``args.app``.

    Prints the result (JSON when serialisable) and raises ``SystemExit``
    with the matching code on failure.
    """
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        app = resolve_app(args.app)
        variables = parse_assignments(args.arg or [])
    except (ModuleNotFoundError, AttributeError, argparse.ArgumentTypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    options = RouteOptions(
        on_next_value=_print_element if args.stream else None,
        args=tuple(parse_value(raw) for raw in args.extra or ()),
        prepend_args=args.prepend,
        index=args.index,
    )

    try:
        result = anyio.run(partial(route, app, args.expression, [variables], options))
    except PathDecodeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if isinstance(result, RoutingError):
        logger.debug("Routing failed: %s", result)
        print(f"Error: {result.message}", file=sys.stderr)
        raise SystemExit(EXIT_CODES[result.type])

    print(format_result(result))
