# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output for classified query segments."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sqlparam import __version__
from sqlparam.core.constants import SegmentKind
from sqlparam.models.segment import Segment

console = Console()

KIND_COLORS = {
    SegmentKind.TEXT: "white",
    SegmentKind.LITERAL: "cyan",
    SegmentKind.PLACEHOLDER: "bold yellow",
}


def format_segments(segments: list[Segment], source: str) -> None:
    """Print the classified segments of a query as a table."""
    console.print(f"[bold]sqlparam v{__version__}[/bold] - {source}")

    table = Table(show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Content", overflow="fold")

    number = 0
    for index, segment in enumerate(segments):
        color = KIND_COLORS.get(segment.kind, "white")
        if segment.is_placeholder:
            number += 1
            content = Text(f"-> parameter {number}", style=color)
        else:
            # repr keeps newlines and trailing whitespace visible
            content = Text(repr(segment.content), style=color)
        table.add_row(str(index), Text(segment.kind.value, style=color), content)

    console.print(table)
    console.print(f"{len(segments)} segments, {number} placeholders")
