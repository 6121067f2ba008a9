"""Path analysis — turns an encoded path expression into typed steps.

Pure: no I/O, no access to the object graph. Argument sources are only
read, never written.

Grammar (flat, one level, no nested calls)::

    path     := segment ("." segment)*
    segment  := identifier | identifier "(" [token ("," token)*] ")"
    token    := true | false | number | "string" | 'string' | identifier
"""

import logging
import re
from collections.abc import Iterable
from urllib.parse import unquote

from nsoap._internal.types import RawSource
from nsoap.analysis.sources import ArgSource, as_sources, lookup
from nsoap.analysis.step import Argument, Step, StepKind
from nsoap.errors import PathDecodeError

logger = logging.getLogger("nsoap.analysis")

IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z_$0-9]*$")
NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
INTEGER = re.compile(r"^[+-]?\d+$")

_QUOTES = frozenset("\"'")


def decode_path(encoded_path: str) -> str:
    """Percent-decode a path expression.

    Raises ``PathDecodeError`` when the escapes decode to invalid UTF-8.
    Stray ``%`` signs that are not escapes are kept literally.
    """
    try:
        return unquote(encoded_path, errors="strict")
    except UnicodeDecodeError as exc:
        raise PathDecodeError(encoded_path, str(exc)) from exc


def _split(text: str, separator: str, *, quoted: bool = False) -> list[str]:
    """Split on *separator* outside parentheses and quotes.

    Quotes are only significant inside an argument list, or everywhere
    when *quoted* is set.
    """
    parts: list[str] = []
    buf: list[str] = []
    depth = 0
    quote: str | None = None
    for ch in text:
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in _QUOTES and (quoted or depth):
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == separator and not depth:
            parts.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    parts.append("".join(buf))
    return parts


def _closing_paren(text: str, start: int) -> int:
    """Index of the first unquoted ``)`` after *start*, or ``len(text)``."""
    quote: str | None = None
    for i in range(start, len(text)):
        ch = text[i]
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
        elif ch == ")":
            return i
    return len(text)


def resolve_token(token: str, sources: Iterable[ArgSource] = ()) -> Argument:
    """Resolve one raw argument token.

    Precedence, first match wins: boolean literal, number, quoted
    string, identifier found in *sources*, identifier as its own string.
    Anything else is an error argument.
    """
    if token == "true":
        return Argument.of(True)
    if token == "false":
        return Argument.of(False)
    if NUMBER.match(token):
        return Argument.of(int(token) if INTEGER.match(token) else float(token))
    if len(token) >= 2 and token[0] in _QUOTES and token[-1] == token[0]:
        return Argument.of(token[1:-1])
    if IDENTIFIER.match(token):
        found, value = lookup(sources, token)
        return Argument.of(value if found else token)
    return Argument.invalid(f"{token} is not a valid identifier.")


def _parse_segment(segment: str, sources: tuple[ArgSource, ...]) -> Step:
    opening = segment.find("(")
    if opening == -1:
        return Step(StepKind.OBJECT, segment)

    closing = _closing_paren(segment, opening + 1)
    args_text = segment[opening + 1 : closing]
    args: tuple[Argument, ...] = ()
    if args_text.strip():
        args = tuple(
            resolve_token(token.strip(), sources) for token in _split(args_text, ",", quoted=True)
        )
    return Step(StepKind.FUNCTION, segment[:opening], args)


def analyze_path(
    encoded_path: str,
    sources: Iterable[ArgSource | RawSource] | None = None,
) -> tuple[Step, ...]:
    """Split an encoded path expression into typed steps.

    Examples::

        analyze_path("users")          -> (Step(OBJECT, "users"),)
        analyze_path("sum(1,2)")       -> (Step(FUNCTION, "sum", (Argument(1), Argument(2))),)
        analyze_path("a.f(x)", [{"x": 5}])
            -> (Step(OBJECT, "a"), Step(FUNCTION, "f", (Argument(5),)))

    Raises ``PathDecodeError`` on malformed percent-encoding.
    """
    path = decode_path(encoded_path)
    if not path:
        return ()

    resolved_sources = as_sources(sources)
    steps = tuple(_parse_segment(segment, resolved_sources) for segment in _split(path, "."))
    logger.debug("Analyzed %r into %d step(s)", path, len(steps))
    return steps
