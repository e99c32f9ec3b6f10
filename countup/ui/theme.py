"""countup theme: palette and the shared console."""

from dataclasses import dataclass
from rich.console import Console


@dataclass(frozen=True)
class ColorPalette:
    """Core UI color palette."""

    border: str = "#222233"
    text_bright: str = "#e8e8f0"
    text: str = "#b8b8cc"
    text_dim: str = "#4a4a60"
    text_muted: str = "#363648"
    accent: str = "#00d4e5"
    rising: str = "#34d399"
    falling: str = "#e55a9b"
    error: str = "#e55a6e"


PALETTE = ColorPalette()

console = Console()
