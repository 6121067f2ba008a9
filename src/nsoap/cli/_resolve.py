"""App import resolution — resolves ``"module:attribute"`` strings to app objects.

Used by ``nsoap call`` to locate the object graph to route against.
"""

import importlib
from typing import Any


def resolve_app(import_string: str) -> Any:
    """Resolve an import string to an app object or app factory.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    Factories are returned uncalled; ``route()`` calls them.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:app"``, ``"myapp.main:create_app"``).

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    return getattr(module, attr_name)
