"""Allow ``python -m grapheme_nav`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m grapheme_nav`` behaves identically to the
``grapheme-nav`` console script.
"""

from __future__ import annotations

from grapheme_nav.cli.app import cli

if __name__ == "__main__":
    cli()
