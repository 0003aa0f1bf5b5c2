"""Domain models for grapheme-nav.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from grapheme_nav.exceptions import ConfigurationError, InvalidBufferError

BufferLike = bytes | bytearray | memoryview
"""Any bytes-like object holding UTF-8 text."""


def coerce_buffer(data: str | BufferLike) -> BufferLike:
    """Return *data* as a bytes-like buffer the engine can borrow.

    ``bytes`` and ``bytearray`` are passed through untouched; a
    contiguous ``memoryview`` is cast to unsigned bytes; a ``str`` is
    encoded to UTF-8 once.

    Raises
    ------
    InvalidBufferError
        If *data* is neither text nor bytes-like, or is a strided
        ``memoryview`` whose bytes do not form one run.
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, memoryview):
        if not data.c_contiguous:
            raise InvalidBufferError(
                "memoryview is not contiguous.",
                hint="Pass bytes(view) or a view over one unbroken byte run.",
            )
        if data.format == "B" and data.ndim == 1:
            return data
        try:
            return data.cast("B")
        except TypeError as exc:
            raise InvalidBufferError(
                f"memoryview cannot be read as bytes: {exc}",
                hint="Pass bytes(view) instead.",
            ) from exc
    if isinstance(data, str):
        return data.encode("utf-8")
    raise InvalidBufferError(
        f"Expected str or a bytes-like buffer, got {type(data).__name__}.",
    )


# ---------------------------------------------------------------------------
# Cluster view
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClusterSlice:
    """A borrowed view of ``buffer[start:end]``.

    The slice keeps a reference to the caller's buffer plus the index
    pair; no bytes are copied until :attr:`text` or :func:`bytes` is
    asked for.  A zero-length slice is the "no such cluster" sentinel,
    so ``str(slice)`` can always be concatenated and ``bool(slice)``
    tells whether a cluster was found.
    """

    buffer: BufferLike = field(repr=False, hash=False)
    """The borrowed buffer.  Must outlive the slice."""

    start: int
    """Byte offset of the first byte of the cluster."""

    end: int
    """Byte offset one past the last byte of the cluster."""

    @classmethod
    def empty(cls, buffer: BufferLike, at: int) -> ClusterSlice:
        """Zero-length sentinel positioned at *at*."""
        return cls(buffer=buffer, start=at, end=at)

    @property
    def view(self) -> memoryview:
        """Zero-copy ``memoryview`` over the cluster bytes."""
        return memoryview(self.buffer)[self.start:self.end]

    @property
    def text(self) -> str:
        """The cluster decoded as ``str``."""
        return str(self.view, "utf-8")

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return self.end > self.start

    def __str__(self) -> str:
        return self.text

    def __bytes__(self) -> bytes:
        return self.view.tobytes()


# ---------------------------------------------------------------------------
# Width settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WidthSettings:
    """Knobs forwarded to the width oracle."""

    ambiguous_width: int = 1
    """Columns for East Asian Ambiguous characters: 1 (narrow) or 2 (CJK)."""

    def __post_init__(self) -> None:
        if self.ambiguous_width not in (1, 2):
            raise ConfigurationError(
                f"ambiguous_width must be 1 or 2, got {self.ambiguous_width!r}.",
                hint="Use 2 only for terminals that render ambiguous characters wide.",
            )
