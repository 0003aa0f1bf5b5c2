"""Tabular rendering of clusters for the ``inspect`` and ``at`` commands.

This module is responsible for:

* Turning :class:`~grapheme_nav.core.models.ClusterSlice` values into
  display rows (pure transforms).
* Rendering those rows as Rich tables on stdout.

No navigation logic lives here; callers pass in what the core services
computed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from grapheme_nav.cli.console import get_rich_console
from grapheme_nav.core.models import ClusterSlice
from grapheme_nav.exceptions import missing_dependency


def _import_rich() -> tuple[type[Any], type[Any]]:
    """Import Rich ``Table`` and ``Text`` lazily."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise missing_dependency("rich", extra="cli") from exc
    return Table, Text


# ---------------------------------------------------------------------------
# Row model + presentation helpers (pure)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClusterRow:
    """One rendered line: a cluster plus its measurements."""

    label: str
    start: int
    byte_len: int
    width: int
    text: str


def format_codepoints(text: str) -> str:
    """Render *text* as ``U+0065 U+0301``; a dash for the empty cluster."""
    if not text:
        return "—"
    return " ".join(f"U+{ord(char):04X}" for char in text)


def make_row(label: str, cluster: ClusterSlice, width: int) -> ClusterRow:
    """Build a :class:`ClusterRow` from a slice and its measured width."""
    return ClusterRow(
        label=label,
        start=cluster.start,
        byte_len=len(cluster),
        width=width,
        text=cluster.text,
    )


def summarize(rows: Sequence[ClusterRow]) -> tuple[int, int, int]:
    """Return ``(cluster_count, byte_total, width_total)`` for *rows*."""
    return (
        len(rows),
        sum(row.byte_len for row in rows),
        sum(row.width for row in rows),
    )


# ---------------------------------------------------------------------------
# Rich rendering
# ---------------------------------------------------------------------------

def render_cluster_table(title: str, label_header: str, rows: Iterable[ClusterRow]) -> None:
    """Print *rows* as a Rich table on stdout.

    Cluster text is wrapped in :class:`rich.text.Text` so that user input
    such as ``[bold]`` is shown literally rather than parsed as markup.
    """
    table_class, text_class = _import_rich()

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column(label_header, justify="right", style="dim")
    table.add_column("Start", justify="right")
    table.add_column("Bytes", justify="right")
    table.add_column("Width", justify="right")
    table.add_column("Cluster", justify="left")
    table.add_column("Codepoints", justify="left", style="cyan")

    for row in rows:
        table.add_row(
            row.label,
            str(row.start),
            str(row.byte_len),
            str(row.width),
            text_class(row.text),
            format_codepoints(row.text),
        )

    get_rich_console(stderr=False).print(table)
