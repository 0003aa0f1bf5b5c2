"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so any UAX #29 segmenter or width table can be
plugged in.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from grapheme_nav.core.models import BufferLike


class BoundaryOracle(Protocol):
    """Contract for grapheme-cluster segmentation backends.

    All offsets are byte offsets into the UTF-8 *buffer*.  Offsets 0 and
    ``len(buffer)`` are always boundaries.

    Every method that takes an *offset* requires it to sit on the first
    byte of a codepoint (or at ``len(buffer)``).  Implementations must
    raise :class:`~grapheme_nav.exceptions.MisalignedOffsetError`
    otherwise; callers are expected to resync before asking.
    """

    def is_boundary(self, buffer: BufferLike, offset: int) -> bool:
        """Return whether a grapheme cluster starts (or ends) at *offset*."""
        ...  # pragma: no cover

    def next_boundary(self, buffer: BufferLike, offset: int) -> int | None:
        """Return the first boundary strictly after *offset*.

        ``None`` when *offset* is already at the end of the buffer.
        """
        ...  # pragma: no cover

    def prev_boundary(self, buffer: BufferLike, offset: int) -> int | None:
        """Return the last boundary strictly before *offset*.

        ``None`` when *offset* is already at the start of the buffer.
        """
        ...  # pragma: no cover

    def first_cluster_len(self, buffer: BufferLike, offset: int) -> int:
        """Byte length of the first cluster of ``buffer[offset:]``.

        Returns ``0`` when the suffix is empty.
        """
        ...  # pragma: no cover

    def iter_clusters(self, buffer: BufferLike) -> Iterator[tuple[int, int]]:
        """Yield ``(start, end)`` byte spans of every cluster, left to right."""
        ...  # pragma: no cover


class WidthOracle(Protocol):
    """Contract for display-width backends."""

    def width(self, cluster: str) -> int:
        """Return the number of terminal columns *cluster* occupies.

        Must never be negative: control characters and zero-width marks
        measure ``0``.
        """
        ...  # pragma: no cover
