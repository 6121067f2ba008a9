"""Routing execution — the walk, incremental draining and error values."""

from nsoap.execution.incremental import Done, Incremental, More, as_incremental, drain
from nsoap.execution.router import route, walk

__all__ = [
    "Done",
    "Incremental",
    "More",
    "as_incremental",
    "drain",
    "route",
    "walk",
]
