"""Terminal rendering for counters and plans.

LiveSink adapts a rich Live region into an animator sink: each call
replaces the region's content without reprinting the rest of the screen.
"""

from typing import Optional

from rich.console import Console
from rich.live import Live
from rich.table import Table
from rich.text import Text

from ..errors import SinkUnavailable
from ..formatters import Formatter
from ..planner import AnimationPlan
from .theme import PALETTE, console as default_console


def render_counter(text: str, label: str = "value", direction: int = 0) -> Text:
    """Render a labelled counter line."""
    if direction > 0:
        value_style = f"bold {PALETTE.rising}"
    elif direction < 0:
        value_style = f"bold {PALETTE.falling}"
    else:
        value_style = f"bold {PALETTE.text_bright}"

    t = Text()
    t.append(f"  {label}: ", style=f"dim {PALETTE.text_dim}")
    t.append(text, style=value_style)
    return t


class LiveSink:
    """Animator sink that writes into a rich Live region.

    Usage:
        with LiveSink(label="tokens") as sink:
            animator = StepwiseAnimator(0, sink, scheduler)
            ...
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        label: str = "value",
        refresh_per_second: int = 60,
        transient: bool = False,
    ):
        self.label = label
        self.direction = 0
        self.last_text: Optional[str] = None
        self.updates = 0
        self._live = Live(
            console=console or default_console,
            refresh_per_second=refresh_per_second,
            transient=transient,
        )
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> "LiveSink":
        self._live.start()
        self._open = True
        return self

    def close(self) -> None:
        if self._open:
            self._open = False
            self._live.stop()

    def __enter__(self) -> "LiveSink":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    def __call__(self, text: str) -> None:
        if not self._open:
            raise SinkUnavailable("live display is closed")
        self.last_text = text
        self.updates += 1
        self._live.update(render_counter(text, self.label, self.direction), refresh=True)


def render_plan_table(animation_plan: AnimationPlan, formatter: Formatter = str) -> Table:
    """Tabulate every tick of a plan."""
    table = Table(
        title=f"{formatter(animation_plan.start)} → {formatter(animation_plan.target)}",
        title_style=f"bold {PALETTE.accent}",
        border_style=f"dim {PALETTE.border}",
    )
    table.add_column("tick", justify="right", style=PALETTE.text_dim)
    table.add_column("value", justify="right", style=f"bold {PALETTE.text_bright}")
    table.add_column("delta", justify="right", style=PALETTE.text)

    previous = animation_plan.start
    for index, value in enumerate(animation_plan.values(), 1):
        table.add_row(str(index), formatter(value), f"{value - previous:+d}")
        previous = value

    return table


def render_error(text: str, console: Optional[Console] = None) -> None:
    """Render an error message."""
    con = console or default_console
    err = Text()
    err.append("err ", style=f"bold {PALETTE.error}")
    err.append("| ", style=f"dim {PALETTE.text_muted}")
    err.append(text, style=PALETTE.error)
    con.print(err)
