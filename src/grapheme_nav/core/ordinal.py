"""Ordinal scan: clusters addressed by position rather than byte offset.

Every query walks the buffer from the start.  Nothing is memoized
between calls: a buffer is cheap to rescan and callers typically ask
for one or two of these values per edit.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

from grapheme_nav.core.models import BufferLike, ClusterSlice, coerce_buffer
from grapheme_nav.core.protocols import BoundaryOracle, WidthOracle


class OrdinalScanner:
    """Stateless service for left-to-right cluster enumeration.

    Parameters
    ----------
    boundaries:
        Any object satisfying the :class:`BoundaryOracle` protocol.
    widths:
        Any object satisfying the :class:`WidthOracle` protocol.
    """

    def __init__(self, boundaries: BoundaryOracle, widths: WidthOracle) -> None:
        self._boundaries: BoundaryOracle = boundaries
        self._widths: WidthOracle = widths

    def iter_clusters(self, data: str | BufferLike) -> Iterator[ClusterSlice]:
        """Lazily yield every cluster of *data* in order.

        Each call starts a fresh scan.  The yielded slices tile the
        buffer: each one starts where the previous one ended, the first
        starts at ``0`` and the last ends at ``len(buffer)``.
        """
        buffer = coerce_buffer(data)
        for start, end in self._boundaries.iter_clusters(buffer):
            yield ClusterSlice(buffer=buffer, start=start, end=end)

    # ------------------------------------------------------------------
    # Positional lookups
    # ------------------------------------------------------------------

    def nth_cluster(self, data: str | BufferLike, n: int) -> ClusterSlice:
        """Cluster at ordinal *n*, or an empty slice at the end of the buffer."""
        buffer = coerce_buffer(data)
        found = self._nth(buffer, n)
        return found if found is not None else ClusterSlice.empty(buffer, len(buffer))

    def nth_cluster_start(self, data: str | BufferLike, n: int) -> int:
        """Start offset of ordinal *n*, or ``len(buffer)`` if out of range."""
        buffer = coerce_buffer(data)
        found = self._nth(buffer, n)
        return found.start if found is not None else len(buffer)

    def nth_cluster_width(self, data: str | BufferLike, n: int) -> int:
        """Display columns of ordinal *n*, or ``0`` if out of range."""
        found = self._nth(coerce_buffer(data), n)
        return self._widths.width(found.text) if found else 0

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    def cluster_count(self, data: str | BufferLike) -> int:
        """Number of clusters in *data* (``0`` only for an empty buffer)."""
        return sum(1 for _ in self.iter_clusters(data))

    def total_width(self, data: str | BufferLike) -> int:
        """Sum of the display widths of every cluster in *data*."""
        return sum(self._widths.width(cluster.text) for cluster in self.iter_clusters(data))

    def _nth(self, buffer: BufferLike, n: int) -> ClusterSlice | None:
        if n < 0:
            return None
        return next(islice(self.iter_clusters(buffer), n, None), None)
