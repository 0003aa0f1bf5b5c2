"""Codepoint resync scanner.

Every function in this module is a **pure** byte scan: it makes no oracle
calls and has no side effects.  They turn an untrusted byte offset into one
that sits on the first byte of a UTF-8 codepoint, which is the only
kind of offset a boundary oracle may be asked about.

UTF-8 lead bytes are ``0xxxxxxx``, ``110xxxxx``, ``1110xxxx`` and
``11110xxx``; every other byte of a codepoint is a continuation byte
``10xxxxxx``.
"""

from __future__ import annotations

from grapheme_nav.core.models import BufferLike

_CONTINUATION_MASK = 0xC0
_CONTINUATION_TAG = 0x80


def is_continuation_byte(byte: int) -> bool:
    """Return whether *byte* has the ``10xxxxxx`` continuation pattern."""
    return (byte & _CONTINUATION_MASK) == _CONTINUATION_TAG


def clamp_offset(buffer: BufferLike, offset: int) -> int:
    """Clamp *offset* into ``[0, len(buffer)]``."""
    if offset < 0:
        return 0
    return min(offset, len(buffer))


# ---------------------------------------------------------------------------
# Directional resync
# ---------------------------------------------------------------------------

def resync_backward(buffer: BufferLike, offset: int) -> int:
    """Return the nearest codepoint start at or before *offset*.

    Offsets past the end are clamped to ``len(buffer)``, which counts as
    aligned.  The scan stops at 0 even when the buffer starts with stray
    continuation bytes.
    """
    pos = clamp_offset(buffer, offset)
    while 0 < pos < len(buffer) and is_continuation_byte(buffer[pos]):
        pos -= 1
    return pos


def resync_forward(buffer: BufferLike, offset: int) -> int:
    """Return the nearest codepoint start at or after *offset*.

    The scan stops at ``len(buffer)``, which counts as aligned.
    """
    pos = clamp_offset(buffer, offset)
    while pos < len(buffer) and is_continuation_byte(buffer[pos]):
        pos += 1
    return pos


def is_codepoint_start(buffer: BufferLike, offset: int) -> bool:
    """Return whether *offset* is a legal oracle query point.

    True for ``len(buffer)`` and for any in-range byte that is not a
    continuation byte.
    """
    if offset < 0 or offset > len(buffer):
        return False
    return offset == len(buffer) or not is_continuation_byte(buffer[offset])
