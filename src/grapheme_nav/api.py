"""Module-level functions wired to the default wcwidth oracles.

This is the composition root for library callers: it instantiates the
infrastructure oracles and hands them to the core services, the same
way the CLI does.  Every function is a fresh, independent call.

Offsets are UTF-8 byte offsets; *text* may be ``str`` (encoded once per
call) or any bytes-like buffer (borrowed, never copied).

Example::

    >>> text = "hé🧑x"          # bytes: h=0, é=1..2, 🧑=3..6, x=7
    >>> next_cluster_slice(text, 2).text
    '🧑'
    >>> prev_cluster_start(text, 7)
    3
    >>> cluster_count(text)
    4
"""

from __future__ import annotations

from collections.abc import Iterator

from grapheme_nav.core.models import BufferLike, ClusterSlice, WidthSettings
from grapheme_nav.core.navigator import ClusterNavigator
from grapheme_nav.core.ordinal import OrdinalScanner
from grapheme_nav.infra.wcwidth_measure import WcwidthWidthOracle
from grapheme_nav.infra.wcwidth_segmenter import WcwidthBoundaryOracle

Text = str | BufferLike


def navigator(settings: WidthSettings | None = None) -> ClusterNavigator:
    """Build a :class:`ClusterNavigator` over the default oracles."""
    return ClusterNavigator(WcwidthBoundaryOracle(), WcwidthWidthOracle(settings))


def scanner(settings: WidthSettings | None = None) -> OrdinalScanner:
    """Build an :class:`OrdinalScanner` over the default oracles."""
    return OrdinalScanner(WcwidthBoundaryOracle(), WcwidthWidthOracle(settings))


# ---------------------------------------------------------------------------
# Offset-addressed
# ---------------------------------------------------------------------------

def cluster_start_at(text: Text, offset: int) -> int:
    """Start of the cluster containing *offset* (``len`` past the end)."""
    return navigator().cluster_start_at(text, offset)


def cluster_byte_len_at(text: Text, offset: int) -> int:
    """Byte length of the cluster containing *offset* (``0`` at the end)."""
    return navigator().cluster_byte_len_at(text, offset)


def cluster_slice_at(text: Text, offset: int) -> ClusterSlice:
    """The cluster containing *offset* (empty at the end)."""
    return navigator().cluster_slice_at(text, offset)


def cluster_width_at(
    text: Text,
    offset: int,
    *,
    settings: WidthSettings | None = None,
) -> int:
    """Display columns of the cluster containing *offset* (``0`` at the end)."""
    return navigator(settings).cluster_width_at(text, offset)


def prev_cluster_start(text: Text, offset: int) -> int:
    """Start of the cluster before the one containing *offset* (``0`` if none)."""
    return navigator().prev_cluster_start(text, offset)


def prev_cluster_slice(text: Text, offset: int) -> ClusterSlice:
    """The cluster before the one containing *offset* (empty if none)."""
    return navigator().prev_cluster_slice(text, offset)


def next_cluster_start(text: Text, offset: int) -> int:
    """Start of the cluster after the one containing *offset* (``len`` if none)."""
    return navigator().next_cluster_start(text, offset)


def next_cluster_slice(text: Text, offset: int) -> ClusterSlice:
    """The cluster after the one containing *offset* (empty if none)."""
    return navigator().next_cluster_slice(text, offset)


# ---------------------------------------------------------------------------
# Ordinal-addressed
# ---------------------------------------------------------------------------

def iter_clusters(text: Text) -> Iterator[ClusterSlice]:
    """Lazily yield every cluster of *text*, left to right."""
    return scanner().iter_clusters(text)


def nth_cluster(text: Text, n: int) -> ClusterSlice:
    """Cluster at ordinal *n* (empty if *n* is out of range)."""
    return scanner().nth_cluster(text, n)


def nth_cluster_start(text: Text, n: int) -> int:
    """Start offset of ordinal *n* (``len`` if out of range)."""
    return scanner().nth_cluster_start(text, n)


def nth_cluster_width(
    text: Text,
    n: int,
    *,
    settings: WidthSettings | None = None,
) -> int:
    """Display columns of ordinal *n* (``0`` if out of range)."""
    return scanner(settings).nth_cluster_width(text, n)


def cluster_count(text: Text) -> int:
    """Number of grapheme clusters in *text*."""
    return scanner().cluster_count(text)


def total_width(text: Text, *, settings: WidthSettings | None = None) -> int:
    """Display columns of the whole of *text*, cluster by cluster."""
    return scanner(settings).total_width(text)
