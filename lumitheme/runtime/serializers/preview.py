# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Terminal preview of a theme.

Prints the 16 theme colors as background-colored swatches, two rows of
eight in role order, and optionally a table with one row per role.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from lumitheme.runtime.serializers.base import describe_color
from lumitheme.runtime.serializers.template import color_data
from lumitheme.schema import Theme

SWATCHES_PER_ROW = 8


def swatch_strip(theme: Theme, width: int = 2) -> Text:
    """Swatches for all roles, a line break after every eight."""
    strip = Text()
    for i, (_, color) in enumerate(theme.roles):
        if i and i % SWATCHES_PER_ROW == 0:
            strip.append("\n")
        strip.append(" " * width, style=Style(bgcolor=color.to_rgb().hex))
    return strip


def role_table(theme: Theme) -> Table:
    """One row per role: name, swatch, hex, OkLCh and a color name."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Role", style="cyan", no_wrap=True)
    table.add_column("Color")
    table.add_column("Hex")
    table.add_column("OkLCh")
    table.add_column("Name")

    for name, color in theme.roles:
        data = color_data(color)
        table.add_row(
            name,
            Text("    ", style=Style(bgcolor=data["hex"])),
            data["hex"],
            f"L{data['L']:.2f}/C{data['C']:.2f}/H{data['hue']:.0f}",
            describe_color(color),
        )
    return table


def print_preview(
    theme: Theme,
    console: Optional[Console] = None,
    *,
    detailed: bool = False,
) -> None:
    """Print the theme to the terminal.

    Args:
        theme: Theme in any color space.
        console: Console to print to (a new one on stdout if None).
        detailed: Also print the per-role table.
    """
    console = console or Console()
    console.print(swatch_strip(theme))
    if detailed:
        console.print(role_table(theme))
