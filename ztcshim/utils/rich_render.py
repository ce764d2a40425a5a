"""Helpers for rendering rich output within the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from rich.console import Console
from rich.table import Table

_CONSOLE: Console | None = None


@dataclass(slots=True)
class ColorPalette:
    """Color tokens used for mapping tables."""

    table_border: str = "cyan"
    table_header: str = "bold cyan"
    row_alt: str = "dim"


def get_console() -> Console:
    """Return a shared Rich console instance configured for plain output."""

    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(markup=False, highlight=False)
    return _CONSOLE


def style_table(table: Table, palette: ColorPalette | None = None) -> None:
    palette = palette or ColorPalette()
    table.border_style = palette.table_border
    table.header_style = palette.table_header
    table.row_styles = ["", palette.row_alt]


def build_table(
    title: str,
    columns: Sequence[str],
    rows: Iterable[Sequence[str]],
    *,
    caption: str | None = None,
) -> Table:
    """Build a styled table; only the last column may wrap."""

    table = Table(title=title, caption=caption)
    last = len(columns) - 1
    for index, column in enumerate(columns):
        table.add_column(column, no_wrap=index != last)
    for row in rows:
        table.add_row(*row)
    style_table(table)
    return table


def render_mapping_table(
    title: str,
    mapping: Mapping[str, Mapping[str, object]],
    *,
    caption: str | None = None,
    console: Console | None = None,
) -> None:
    """Render a legacy flag table as produced by ``mappings.describe``."""

    rows = [
        (
            legacy,
            str(entry.get("translated") or ""),
            str(entry.get("class") or ""),
            "yes" if entry.get("takes_value") else "",
            str(entry.get("warning") or ""),
        )
        for legacy, entry in mapping.items()
    ]
    table = build_table(
        title,
        ("Legacy flag", "ztc flag", "Class", "Value", "Warning"),
        rows,
        caption=caption,
    )
    (console or get_console()).print(table)


__all__ = [
    "ColorPalette",
    "build_table",
    "get_console",
    "render_mapping_table",
    "style_table",
]
