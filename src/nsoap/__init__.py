"""nsoap — the path is the API call.

Resolves URL-like expressions into property reads and function calls
against a plain Python object graph. No route table.

Basic usage::

    from nsoap import route

    app = {
        "greet": lambda name: f"Hello, {name}",
        "math": {"sum": lambda *xs: sum(xs)},
    }

    await route(app, 'greet("World")')      # "Hello, World"
    await route(app, "math.sum(1,2,3)")     # 6
    await route(app, "missing")             # RoutingError(type=NOT_FOUND)

Streaming (``on_next_value``)::

    def progress():
        yield "25%"
        yield "50%"
        return "done"

    await route({"job": progress}, "job", options=RouteOptions(on_next_value=print))
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ArgSource",
    "Argument",
    "ConfigurationError",
    "Done",
    "DynamicResolver",
    "Incremental",
    "More",
    "NsoapError",
    "PathDecodeError",
    "RouteOptions",
    "RoutingError",
    "RoutingErrorType",
    "StaticMap",
    "Step",
    "StepKind",
    "analyze_path",
    "route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nsoap`` fast while providing a clean top-level API.
    """
    if name in ("route", "walk"):
        from nsoap.execution import router as _router

        return getattr(_router, name)

    if name in ("Done", "Incremental", "More"):
        from nsoap.execution import incremental as _incremental

        return getattr(_incremental, name)

    if name == "RouteOptions":
        from nsoap.config import RouteOptions

        return RouteOptions

    if name in (
        "analyze_path",
        "ArgSource",
        "Argument",
        "DynamicResolver",
        "StaticMap",
        "Step",
        "StepKind",
    ):
        from nsoap import analysis as _analysis

        return getattr(_analysis, name)

    if name in (
        "ConfigurationError",
        "NsoapError",
        "PathDecodeError",
        "RoutingError",
        "RoutingErrorType",
    ):
        from nsoap import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
