"""grapheme-nav: tolerant grapheme-cluster navigation over UTF-8 buffers.

Resolve any byte offset to its grapheme cluster, step to the previous or
next cluster, slice it, and measure its terminal width, without ever
failing on offsets that land mid-codepoint or mid-cluster.
"""

from grapheme_nav.api import (
    cluster_byte_len_at,
    cluster_count,
    cluster_slice_at,
    cluster_start_at,
    cluster_width_at,
    iter_clusters,
    next_cluster_slice,
    next_cluster_start,
    nth_cluster,
    nth_cluster_start,
    nth_cluster_width,
    prev_cluster_slice,
    prev_cluster_start,
    total_width,
)
from grapheme_nav.core.models import ClusterSlice, WidthSettings
from grapheme_nav.version import __version__

__all__: list[str] = [
    "ClusterSlice",
    "WidthSettings",
    "__version__",
    "cluster_byte_len_at",
    "cluster_count",
    "cluster_slice_at",
    "cluster_start_at",
    "cluster_width_at",
    "iter_clusters",
    "next_cluster_slice",
    "next_cluster_start",
    "nth_cluster",
    "nth_cluster_start",
    "nth_cluster_width",
    "prev_cluster_slice",
    "prev_cluster_start",
    "total_width",
]
