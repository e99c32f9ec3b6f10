"""Value formatters: turn a counter value into display text."""

import math
from typing import Callable

Formatter = Callable[[int], str]

PADDED_WIDTH = 10


def plain(value: int) -> str:
    return str(value)


def thousands(value: int) -> str:
    if not math.isfinite(value):
        return str(value)
    return f"{int(value):,}"


def compact(value: int) -> str:
    """Short form: 1.2k, 3.4M."""
    n = abs(value)
    sign = "-" if value < 0 else ""
    if n < 1000 or not math.isfinite(n):
        return str(value)
    # Anything that would round up to 1000.0k reads as 1.0M instead
    if n < 999_950:
        return f"{sign}{n / 1000:.1f}k"
    return f"{sign}{n / 1_000_000:.1f}M"


def padded(value: int) -> str:
    """Zero-padded to a fixed odometer width."""
    if not math.isfinite(value):
        return str(value)
    return f"{int(value):0{PADDED_WIDTH}d}"


FORMATTERS: dict[str, Formatter] = {
    "plain": plain,
    "thousands": thousands,
    "compact": compact,
    "padded": padded,
}


def get_formatter(name: str) -> Formatter:
    """Look up a formatter by name."""
    try:
        return FORMATTERS[name]
    except KeyError:
        valid = ", ".join(sorted(FORMATTERS))
        raise KeyError(f"Unknown formatter '{name}' (expected one of: {valid})") from None
