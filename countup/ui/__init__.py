"""Terminal UI components."""

from .theme import PALETTE, console
from .display import LiveSink, render_counter, render_plan_table, render_error

__all__ = [
    "PALETTE",
    "console",
    "LiveSink",
    "render_counter",
    "render_plan_table",
    "render_error",
]
