"""Infrastructure layer: Unicode table integration.

This layer wraps every interaction with the ``wcwidth`` library.  Every
raw third-party exception must be caught here and re-raised as a
:class:`~grapheme_nav.exceptions.GraphemeNavError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must satisfy the protocols in :mod:`grapheme_nav.core.protocols`.
"""

from grapheme_nav.infra.wcwidth_measure import WcwidthWidthOracle
from grapheme_nav.infra.wcwidth_segmenter import WcwidthBoundaryOracle, load_wcwidth

__all__: list[str] = [
    "WcwidthBoundaryOracle",
    "WcwidthWidthOracle",
    "load_wcwidth",
]
