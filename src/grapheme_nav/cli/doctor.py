"""``grapheme-nav doctor``: environment diagnostics command.

Gathers version information for the interpreter and the Unicode
libraries the engine relies on, then renders a summary table.  Falls
back to plain text on stderr when Rich (the optional ``cli`` extra) is
not installed.
"""

from __future__ import annotations

import platform
import sys
import unicodedata
from importlib.metadata import PackageNotFoundError, version

from grapheme_nav.cli import exit_codes
from grapheme_nav.cli.console import console
from grapheme_nav.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    value = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", value, status


def _distribution_check(name: str, *, required: bool) -> Check:
    """Return a row for an installed distribution.

    A missing *required* distribution is a failure; a missing optional
    one is a warning.
    """
    try:
        return name, version(name), "[green]OK[/green]"
    except PackageNotFoundError:
        status = "[red]FAIL[/red]" if required else "[yellow]WARN[/yellow]"
        return name, "NOT INSTALLED", status


def _unicode_data_check() -> Check:
    """Return the row for the interpreter's Unicode database version."""
    return "unicodedata", unicodedata.unidata_version, "[green]OK[/green]"


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def collect_checks() -> list[Check]:
    """Run every check in display order."""
    return [
        ("grapheme-nav", __version__, "[green]OK[/green]"),
        _python_version_check(),
        _distribution_check("wcwidth", required=True),
        _distribution_check("rich", required=False),
        _unicode_data_check(),
        _os_check(),
    ]


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ngrapheme-nav doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<30} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<30} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print(
            "Some checks failed." if has_failure else "All checks passed.",
            file=sys.stderr,
        )
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="grapheme-nav doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=14)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
