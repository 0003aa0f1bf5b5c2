"""Shared pytest fixtures and configuration for the grapheme-nav test suite.

Guidelines
----------
* Segmentation tests use the real wcwidth-backed oracle: it refuses
  misaligned queries, so any resync bug surfaces as an exception.
* Exact column counts tied to one width table use ``reference_widths``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from samples import ReferenceWidthOracle

from grapheme_nav.core.navigator import ClusterNavigator
from grapheme_nav.core.ordinal import OrdinalScanner
from grapheme_nav.infra.wcwidth_measure import WcwidthWidthOracle
from grapheme_nav.infra.wcwidth_segmenter import WcwidthBoundaryOracle


@pytest.fixture
def reference_widths() -> ReferenceWidthOracle:
    return ReferenceWidthOracle()


@pytest.fixture
def boundary_oracle() -> WcwidthBoundaryOracle:
    return WcwidthBoundaryOracle()


@pytest.fixture
def wcwidth_navigator() -> ClusterNavigator:
    return ClusterNavigator(WcwidthBoundaryOracle(), WcwidthWidthOracle())


@pytest.fixture
def wcwidth_scanner() -> OrdinalScanner:
    return OrdinalScanner(WcwidthBoundaryOracle(), WcwidthWidthOracle())


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo the root-logger changes ``main()`` makes via ``configure_logging``."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
