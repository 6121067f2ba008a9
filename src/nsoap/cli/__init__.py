"""nsoap CLI — resolve path expressions against an importable app.

Entry point registered as ``nsoap`` in ``pyproject.toml``::

    [project.scripts]
    nsoap = "nsoap.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``nsoap`` command."""
    parser = argparse.ArgumentParser(
        prog="nsoap",
        description="nsoap — the path is the API call.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- nsoap call -------------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Resolve an expression against an app")
    call_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app or myapp:create_app)",
    )
    call_parser.add_argument(
        "expression",
        help='Path expression (e.g. \'users.find("bob").posts(10)\')',
    )
    call_parser.add_argument("--index", default=None, help="Default member resolved at the end")
    call_parser.add_argument(
        "--arg",
        action="append",
        metavar="NAME=VALUE",
        help="Variable for bare identifiers in call arguments (repeatable)",
    )
    call_parser.add_argument(
        "--extra",
        action="append",
        metavar="VALUE",
        help="Extra argument passed to every invocation (repeatable)",
    )
    call_parser.add_argument(
        "--prepend",
        action="store_true",
        help="Pass --extra values before the path arguments",
    )
    call_parser.add_argument(
        "--stream",
        action="store_true",
        help="Print each streamed element as it is produced",
    )
    call_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "call":
        from nsoap.cli._call import run_call

        run_call(args)
