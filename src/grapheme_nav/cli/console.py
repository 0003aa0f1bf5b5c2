"""CLI console and logging helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``, ``doctor``) keep working when Rich is not
installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from grapheme_nav.exceptions import EnvironmentError, missing_dependency

LOG_FORMAT = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise missing_dependency("rich", extra="cli") from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console; messages go to stderr, reports to stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(verbose: bool) -> None:
    """Route library ``DEBUG`` records to stderr when *verbose* is set.

    Uses :class:`rich.logging.RichHandler` when Rich is importable and
    a plain stream handler otherwise.  Without *verbose* only warnings
    are shown.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
        return
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[RichHandler(console=get_rich_console(), show_path=False)],
        force=True,
    )
