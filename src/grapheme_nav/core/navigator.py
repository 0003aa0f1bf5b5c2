"""Core cluster navigator: resolve, step and slice at any byte offset.

This service answers "which grapheme cluster is at byte offset *n*?"
and "which cluster comes before / after it?" for offsets that may point
anywhere: inside a multi-byte codepoint, inside a multi-codepoint
cluster, before the start or past the end of the buffer.

It depends on a :class:`~grapheme_nav.core.protocols.BoundaryOracle`
and a :class:`~grapheme_nav.core.protocols.WidthOracle` injected at
construction time, keeping the core free of any Unicode-table imports.

Guarantees
----------
* Total: every method returns a value for every integer offset.
  Offsets below 0 behave like 0; offsets past the end behave like
  ``len(buffer)``.
* Every oracle query happens on a codepoint start (see
  :mod:`grapheme_nav.core.resync`).
* Stateless: nothing is cached between calls, so one navigator may be
  shared freely across threads.
"""

from __future__ import annotations

import logging

from grapheme_nav.core.models import BufferLike, ClusterSlice, coerce_buffer
from grapheme_nav.core.protocols import BoundaryOracle, WidthOracle
from grapheme_nav.core.resync import resync_backward, resync_forward

logger = logging.getLogger(__name__)


class ClusterNavigator:
    """Stateless service for offset-based grapheme navigation.

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

    # ------------------------------------------------------------------
    # Cluster starts
    # ------------------------------------------------------------------

    def cluster_start_at(self, data: str | BufferLike, offset: int) -> int:
        """Start offset of the cluster containing *offset*.

        Returns ``0`` for ``offset <= 0`` and ``len(buffer)`` for
        ``offset >= len(buffer)``.
        """
        return self._resolve_start(coerce_buffer(data), offset)

    def next_cluster_start(self, data: str | BufferLike, offset: int) -> int:
        """Start offset of the cluster after the one containing *offset*.

        Returns ``len(buffer)`` when there is no following cluster.
        """
        return self._next_start(coerce_buffer(data), offset)

    def prev_cluster_start(self, data: str | BufferLike, offset: int) -> int:
        """Start offset of the cluster before the one containing *offset*.

        Returns ``0`` when there is no preceding cluster.
        """
        return self._prev_start(coerce_buffer(data), offset)

    # ------------------------------------------------------------------
    # Cluster slices
    # ------------------------------------------------------------------

    def cluster_slice_at(self, data: str | BufferLike, offset: int) -> ClusterSlice:
        """The cluster containing *offset* (empty at the end of the buffer)."""
        buffer = coerce_buffer(data)
        return self._slice_from(buffer, self._resolve_start(buffer, offset))

    def prev_cluster_slice(self, data: str | BufferLike, offset: int) -> ClusterSlice:
        """The cluster before the one containing *offset* (empty if none)."""
        buffer = coerce_buffer(data)
        if offset <= 0:
            return ClusterSlice.empty(buffer, 0)
        start = self._prev_start(buffer, offset)
        return self._slice_from(buffer, self._resolve_start(buffer, start))

    def next_cluster_slice(self, data: str | BufferLike, offset: int) -> ClusterSlice:
        """The cluster after the one containing *offset* (empty if none)."""
        buffer = coerce_buffer(data)
        if offset >= len(buffer):
            return ClusterSlice.empty(buffer, len(buffer))
        return self._slice_from(buffer, self._next_start(buffer, offset))

    # ------------------------------------------------------------------
    # Measurements
    # ------------------------------------------------------------------

    def cluster_byte_len_at(self, data: str | BufferLike, offset: int) -> int:
        """UTF-8 byte length of the cluster containing *offset*."""
        return len(self.cluster_slice_at(data, offset))

    def cluster_width_at(self, data: str | BufferLike, offset: int) -> int:
        """Display columns of the cluster containing *offset*."""
        return self.measure(self.cluster_slice_at(data, offset))

    def measure(self, cluster: ClusterSlice) -> int:
        """Display columns of *cluster*; ``0`` for the empty sentinel."""
        if not cluster:
            return 0
        return self._widths.width(cluster.text)

    # ------------------------------------------------------------------
    # Internals (buffer already coerced)
    # ------------------------------------------------------------------

    def _resolve_start(self, buffer: BufferLike, offset: int) -> int:
        length = len(buffer)
        if offset <= 0:
            return 0
        if offset >= length:
            return length

        pos = offset
        while True:
            pos = resync_backward(buffer, pos)
            if pos == 0 or self._boundaries.is_boundary(buffer, pos):
                break
            pos -= 1

        if pos != offset:
            logger.debug("offset %d resolved to cluster start %d", offset, pos)
        return pos

    def _next_start(self, buffer: BufferLike, offset: int) -> int:
        length = len(buffer)
        if offset >= length:
            return length
        # Backward so the query re-enters the cluster holding ``offset``.
        pos = resync_backward(buffer, offset)
        following = self._boundaries.next_boundary(buffer, pos)
        return length if following is None else following

    def _prev_start(self, buffer: BufferLike, offset: int) -> int:
        if not buffer:
            return 0
        # Forward: the query point is an insertion point, so rounding down
        # would anchor inside the codepoint that belongs to ``offset``.
        pos = resync_forward(buffer, offset)
        preceding = self._boundaries.prev_boundary(buffer, pos)
        return 0 if preceding is None else preceding

    def _slice_from(self, buffer: BufferLike, start: int) -> ClusterSlice:
        size = self._boundaries.first_cluster_len(buffer, start)
        return ClusterSlice(buffer=buffer, start=start, end=start + size)
