"""Exit-code constants used by the CLI layer.

Every exit path in :func:`grapheme_nav.cli.app.cli` returns one of these
values.  ``2`` is shared with argparse usage errors, which exit before
any command runs.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command completed, or every doctor check passed."""

GENERAL_ERROR: int = 1
"""A GraphemeNavError was caught, or a doctor check failed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

INVALID_INPUT: int = 65
"""The input text is not valid UTF-8 (sysexits ``EX_DATAERR``)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
