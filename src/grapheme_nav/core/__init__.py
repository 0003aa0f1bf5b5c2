"""Core / service layer: the navigation engine itself.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``; Unicode tables arrive through
  the protocols in :mod:`grapheme_nav.core.protocols`.
* No state shared between calls.
"""

from grapheme_nav.core.models import BufferLike, ClusterSlice, WidthSettings, coerce_buffer
from grapheme_nav.core.navigator import ClusterNavigator
from grapheme_nav.core.ordinal import OrdinalScanner
from grapheme_nav.core.protocols import BoundaryOracle, WidthOracle

__all__: list[str] = [
    "BoundaryOracle",
    "BufferLike",
    "ClusterNavigator",
    "ClusterSlice",
    "OrdinalScanner",
    "WidthOracle",
    "WidthSettings",
    "coerce_buffer",
]
