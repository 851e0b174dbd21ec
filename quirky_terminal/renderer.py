"""Lay the collected facts out beside the art and print them."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from .formatting import PALETTE, Style, colorize, strip_ansi
from .modules import SystemModule

ART_MARGIN = 5
BULLET = "●"


def info_lines(modules: Iterable[SystemModule]) -> List[str]:
    """Turn every module's items into display lines, keeping module order."""
    lines: List[str] = []
    for module in modules:
        for item in module.fetch():
            if item.is_header:
                lines.append(f"{Style.BOLD.value}{item.value}{Style.RESET.value}")
                lines.append("-" * len(strip_ansi(item.value)))
            else:
                lines.append(f"{colorize(item.key + ':', Style.CYAN)} {item.value}")

    lines.append("")
    lines.append(palette_line())
    return lines


def palette_line() -> str:
    return " ".join(colorize(BULLET, style) for style in PALETTE)


def compose_lines(art: str, info: Sequence[str]) -> List[str]:
    art_lines = art.split("\n")
    art_width = max((len(line) for line in art_lines), default=0)

    rows: List[str] = []
    for index in range(max(len(art_lines), len(info))):
        art_line = art_lines[index] if index < len(art_lines) else ""
        info_line = info[index] if index < len(info) else ""
        padding = " " * max(0, art_width + ART_MARGIN - len(art_line))
        rows.append(f"{colorize(art_line, Style.GREEN)}{padding}{info_line}")
    return rows


def draw(art: str, modules: Sequence[SystemModule], console: Optional[Console] = None) -> None:
    """Print the art with the module facts to its right."""
    console = console or Console(highlight=False)
    rows = compose_lines(art, info_lines(modules))

    console.print()
    for row in rows:
        console.print(Text.from_ansi(row), soft_wrap=True)
    console.print()
