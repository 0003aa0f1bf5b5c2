"""wcwidth backed implementation of :class:`~grapheme_nav.core.protocols.BoundaryOracle`.

Segmentation follows UAX #29 extended grapheme clusters as implemented
by :mod:`wcwidth.grapheme`.  Those functions work on ``str`` indices,
so this adapter decodes a small window of the buffer around each query
and maps the answer back to UTF-8 byte offsets.

Windows
-------
A window reaches :data:`LOOKBEHIND_BYTES` back from the query offset,
which always covers the codepoints
:func:`wcwidth.grapheme.grapheme_boundary_before` is allowed to scan.
Forward, it starts at :data:`LOOKAHEAD_BYTES` and doubles until the
cluster under the offset ends inside it.  A single query therefore
costs time proportional to the cluster it lands in, not to the buffer.
Only :meth:`WcwidthBoundaryOracle.iter_clusters` decodes everything.

Like the Unicode segmenters it stands in for, the oracle refuses to be
queried off a codepoint start: such queries raise
:class:`~grapheme_nav.exceptions.MisalignedOffsetError`.  Decoding
errors are re-raised as
:class:`~grapheme_nav.exceptions.InvalidBufferError`, so nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from types import ModuleType

from grapheme_nav.core.models import BufferLike
from grapheme_nav.core.resync import is_codepoint_start, resync_backward, resync_forward
from grapheme_nav.exceptions import InvalidBufferError, MisalignedOffsetError, missing_dependency

logger = logging.getLogger(__name__)

LOOKBEHIND_BYTES = 4 * 32
"""Bytes decoded before a query offset: 32 codepoints of up to 4 bytes,
the backward scan limit of ``wcwidth.grapheme``."""

LOOKAHEAD_BYTES = 64
"""Initial bytes decoded after a query offset."""


def load_wcwidth() -> ModuleType:
    """Import wcwidth lazily or raise ``EnvironmentError``."""
    try:
        import wcwidth
    except ModuleNotFoundError as exc:
        raise missing_dependency("wcwidth") from exc
    return wcwidth


def load_graphemes() -> ModuleType:
    """Import ``wcwidth.grapheme`` lazily or raise ``EnvironmentError``."""
    try:
        from wcwidth import grapheme
    except ModuleNotFoundError as exc:
        raise missing_dependency("wcwidth") from exc
    return grapheme


def _decode(buffer: BufferLike, start: int = 0, end: int | None = None) -> str:
    """Decode ``buffer[start:end]`` as strict UTF-8."""
    try:
        return str(memoryview(buffer)[start:end], "utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidBufferError(
            f"Buffer is not valid UTF-8: {exc.reason} at byte {start + exc.start}.",
            hint="Decode the source with the right codec and re-encode as UTF-8.",
        ) from exc


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class _Window:
    """Decoded slice ``buffer[start:end]`` with the query offset at ``index``."""

    __slots__ = ("start", "end", "text", "index")

    def __init__(self, buffer: BufferLike, offset: int, ahead: int) -> None:
        self.start = resync_backward(buffer, offset - LOOKBEHIND_BYTES)
        self.end = resync_forward(buffer, offset + ahead) if ahead else offset
        head = _decode(buffer, self.start, offset)
        self.text = head + _decode(buffer, offset, self.end)
        self.index = len(head)

    def byte_offset(self, index: int) -> int:
        """Buffer offset of the window's *index*-th codepoint."""
        return self.start + _byte_len(self.text[:index])


class WcwidthBoundaryOracle:
    """Concrete :class:`BoundaryOracle` backed by ``wcwidth.grapheme``.

    Usage::

        oracle = WcwidthBoundaryOracle()
        oracle.next_boundary("e\\u0301x".encode(), 0)   # -> 3

    The oracle keeps no state between calls.  This class satisfies the
    protocol structurally; no explicit inheritance required.
    """

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def is_boundary(self, buffer: BufferLike, offset: int) -> bool:
        self._require_aligned(buffer, offset)
        if offset in (0, len(buffer)):
            return True
        grapheme = load_graphemes()
        window = _Window(buffer, offset, 1)
        return grapheme.grapheme_boundary_before(window.text, window.index + 1) == window.index

    def next_boundary(self, buffer: BufferLike, offset: int) -> int | None:
        self._require_aligned(buffer, offset)
        if offset >= len(buffer):
            return None
        grapheme = load_graphemes()
        ahead = LOOKAHEAD_BYTES
        while True:
            window = _Window(buffer, offset, ahead)
            start = grapheme.grapheme_boundary_before(window.text, window.index + 1)
            end = start + len(next(grapheme.iter_graphemes(window.text, start)))
            if end < len(window.text) or window.end >= len(buffer):
                return window.byte_offset(end)
            ahead *= 2

    def prev_boundary(self, buffer: BufferLike, offset: int) -> int | None:
        self._require_aligned(buffer, offset)
        if offset == 0:
            return None
        grapheme = load_graphemes()
        window = _Window(buffer, offset, 0)
        return window.byte_offset(grapheme.grapheme_boundary_before(window.text, window.index))

    def first_cluster_len(self, buffer: BufferLike, offset: int) -> int:
        self._require_aligned(buffer, offset)
        if offset >= len(buffer):
            return 0
        grapheme = load_graphemes()
        ahead = LOOKAHEAD_BYTES
        while True:
            end = resync_forward(buffer, offset + ahead)
            suffix = _decode(buffer, offset, end)
            first: str = next(grapheme.iter_graphemes(suffix))
            if len(first) < len(suffix) or end >= len(buffer):
                return _byte_len(first)
            ahead *= 2

    def iter_clusters(self, buffer: BufferLike) -> Iterator[tuple[int, int]]:
        grapheme = load_graphemes()
        start = 0
        for cluster in grapheme.iter_graphemes(_decode(buffer)):
            end = start + _byte_len(cluster)
            yield start, end
            start = end

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require_aligned(buffer: BufferLike, offset: int) -> None:
        if not is_codepoint_start(buffer, offset):
            logger.debug("rejecting boundary query at misaligned offset %d", offset)
            raise MisalignedOffsetError(
                offset,
                hint="Resync the offset to a codepoint start before querying.",
            )
