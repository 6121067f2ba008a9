"""Path analysis — expression string to an ordered tuple of steps."""

from nsoap.analysis.analyzer import analyze_path, decode_path, resolve_token
from nsoap.analysis.sources import ArgSource, DynamicResolver, StaticMap, as_source
from nsoap.analysis.step import Argument, Step, StepKind

__all__ = [
    "ArgSource",
    "Argument",
    "DynamicResolver",
    "StaticMap",
    "Step",
    "StepKind",
    "analyze_path",
    "as_source",
    "decode_path",
    "resolve_token",
]
