"""Custom exception hierarchy for grapheme-nav.

The navigation operations themselves are total and never raise for an
out-of-range or misaligned offset.  The exceptions below cover what lies
outside that contract: a segmentation backend queried off a codepoint
boundary, a buffer that is not UTF-8, invalid settings, and missing
runtime dependencies.

Raw third-party exceptions (e.g. ``UnicodeDecodeError`` while decoding a
buffer) must NEVER propagate beyond the infrastructure layer; they are
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
GraphemeNavError
├── MisalignedOffsetError
├── InvalidBufferError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class GraphemeNavError(Exception):
    """Base exception for all grapheme-nav errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Boundary oracle -------------------------------------------------------

class MisalignedOffsetError(GraphemeNavError):
    """Raised when a boundary oracle is queried off a codepoint start.

    The navigation engine resyncs every offset before it reaches an
    oracle, so this only surfaces when an oracle is called directly.
    """

    def __init__(self, offset: int, *, hint: str | None = None) -> None:
        super().__init__(
            f"Byte offset {offset} is not on a codepoint boundary.",
            hint=hint,
        )
        self.offset: int = offset


# --- Buffer ----------------------------------------------------------------

class InvalidBufferError(GraphemeNavError):
    """Raised when a buffer is not bytes-like or not valid UTF-8."""


# --- Settings --------------------------------------------------------------

class ConfigurationError(GraphemeNavError):
    """Raised when engine or width settings are out of range."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GraphemeNavError):
    """Raised when a required runtime dependency is not available."""


def missing_dependency(package: str, *, extra: str | None = None) -> EnvironmentError:
    """Build the :class:`EnvironmentError` for an uninstalled *package*.

    When *package* ships with one of this project's extras, the hint
    names the extra instead of the bare distribution.
    """
    target = f"'grapheme-nav[{extra}]'" if extra else package
    return EnvironmentError(
        f"{package} is not installed. Install with: pip install {target}",
    )
