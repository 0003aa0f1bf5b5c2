"""CLI application entry point and command routing for grapheme-nav.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~grapheme_nav.exceptions.GraphemeNavError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No navigation logic lives here; all work is delegated to the core
  services wired with the infrastructure oracles.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from grapheme_nav.cli import exit_codes
from grapheme_nav.cli.console import configure_logging, console
from grapheme_nav.core.models import BufferLike, WidthSettings
from grapheme_nav.exceptions import GraphemeNavError, InvalidBufferError
from grapheme_nav.version import __version__

STDIN_MARKER = "-"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``grapheme-nav inspect TEXT``         : every cluster with offsets/widths
    * ``grapheme-nav at TEXT OFFSET``       : prev/current/next at a byte offset
    * ``grapheme-nav doctor``               : environment diagnostics
    * ``grapheme-nav --version``
    """
    parser = argparse.ArgumentParser(
        prog="grapheme-nav",
        description="Inspect grapheme clusters of UTF-8 text by byte offset.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log engine decisions (offset resyncs) to stderr.",
    )
    parser.add_argument(
        "--ambiguous-width",
        type=int,
        choices=(1, 2),
        default=1,
        help="Columns for East Asian Ambiguous characters (default: 1).",
    )

    text_help = f"Text to examine, or '{STDIN_MARKER}' to read UTF-8 from stdin."
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    inspect = commands.add_parser("inspect", help="List every grapheme cluster.")
    inspect.add_argument("text", help=text_help)

    at = commands.add_parser("at", help="Show the clusters around a byte offset.")
    at.add_argument("text", help=text_help)
    at.add_argument("offset", type=int, help="Byte offset; clamped to the buffer.")

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


def _read_text(arg: str) -> BufferLike:
    """Return the buffer named by *arg*.

    ``-`` reads raw bytes from stdin with one trailing newline removed,
    so that ``echo`` output can be piped in.
    """
    if arg != STDIN_MARKER:
        return arg.encode("utf-8")
    data = sys.stdin.buffer.read()
    return data[:-1] if data.endswith(b"\n") else data


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_inspect(buffer: BufferLike, settings: WidthSettings) -> int:
    """List the clusters of *buffer* in order, with totals."""
    from grapheme_nav.api import navigator, scanner
    from grapheme_nav.cli.cluster_table import make_row, render_cluster_table, summarize

    nav = navigator(settings)
    rows = [
        make_row(str(ordinal), cluster, nav.measure(cluster))
        for ordinal, cluster in enumerate(scanner(settings).iter_clusters(buffer))
    ]

    render_cluster_table("Grapheme clusters", "#", rows)
    count, byte_total, width_total = summarize(rows)
    console.print(
        f"[bold]{count}[/bold] clusters, "
        f"[bold]{byte_total}[/bold] bytes, "
        f"[bold]{width_total}[/bold] columns"
    )
    return exit_codes.SUCCESS


def _handle_at(buffer: BufferLike, offset: int, settings: WidthSettings) -> int:
    """Show the previous, current and next cluster around *offset*."""
    from grapheme_nav.api import navigator
    from grapheme_nav.cli.cluster_table import make_row, render_cluster_table

    nav = navigator(settings)
    neighbours = (
        ("previous", nav.prev_cluster_slice(buffer, offset)),
        ("current", nav.cluster_slice_at(buffer, offset)),
        ("next", nav.next_cluster_slice(buffer, offset)),
    )
    rows = [make_row(label, cluster, nav.measure(cluster)) for label, cluster in neighbours]

    render_cluster_table(f"Clusters around byte {offset}", "Position", rows)
    console.print(
        f"offset {offset} → cluster start "
        f"[bold]{nav.cluster_start_at(buffer, offset)}[/bold] "
        f"of {len(buffer)} bytes"
    )
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from grapheme_nav.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the grapheme-nav CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor()

    settings = WidthSettings(ambiguous_width=args.ambiguous_width)
    buffer = _read_text(args.text)

    if args.command == "inspect":
        return _handle_inspect(buffer, settings)
    return _handle_at(buffer, args.offset, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GraphemeNavError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        if isinstance(exc, InvalidBufferError):
            sys.exit(exit_codes.INVALID_INPUT)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
