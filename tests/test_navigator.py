"""Tests for ClusterNavigator: offset resolution, stepping and slicing."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
from samples import (
    DECOMPOSED_E,
    FARMER_HEAD,
    HI,
    NDI,
    PRECOMPOSED_E,
    SAMPLE,
    SAMPLE_BOUNDARIES,
    SHEAF,
    ReferenceWidthOracle,
)

from grapheme_nav.core.models import ClusterSlice
from grapheme_nav.core.navigator import ClusterNavigator
from grapheme_nav.infra.wcwidth_segmenter import WcwidthBoundaryOracle

SAMPLE_BYTES = SAMPLE.encode("utf-8")


@pytest.fixture
def nav(reference_widths: ReferenceWidthOracle) -> ClusterNavigator:
    return ClusterNavigator(WcwidthBoundaryOracle(), reference_widths)


# ---------------------------------------------------------------------------
# Worked scenarios
# ---------------------------------------------------------------------------

class TestSampleScenarios:
    def test_around_offset_18(self, nav: ClusterNavigator) -> None:
        assert nav.cluster_slice_at(SAMPLE, 18).text == "H"
        assert nav.prev_cluster_slice(SAMPLE, 18).text == NDI
        assert nav.next_cluster_slice(SAMPLE, 18).text == FARMER_HEAD
        assert nav.prev_cluster_start(SAMPLE, 18) == 6
        assert nav.next_cluster_start(SAMPLE, 18) == 19

    def test_around_offset_6(self, nav: ClusterNavigator) -> None:
        assert nav.cluster_slice_at(SAMPLE, 6).text == NDI
        assert nav.prev_cluster_slice(SAMPLE, 6).text == HI
        assert nav.next_cluster_slice(SAMPLE, 6).text == "H"

    def test_inside_conjunct_resolves_to_its_start(self, nav: ClusterNavigator) -> None:
        for offset in range(7, 18):
            assert nav.cluster_start_at(SAMPLE, offset) == 6
            assert nav.cluster_byte_len_at(SAMPLE, offset) == 12
            assert nav.cluster_width_at(SAMPLE, offset) == 3

    def test_emoji_without_joiner_are_separate(self, nav: ClusterNavigator) -> None:
        assert nav.cluster_slice_at(SAMPLE, 19).text == FARMER_HEAD
        assert nav.next_cluster_slice(SAMPLE, 19).text == SHEAF

    def test_both_spellings_of_e_are_one_cluster(self, nav: ClusterNavigator) -> None:
        assert nav.cluster_slice_at(SAMPLE, 42).text == PRECOMPOSED_E
        assert nav.cluster_slice_at(SAMPLE, 45).text == DECOMPOSED_E
        assert nav.cluster_byte_len_at(SAMPLE, 45) == 3

    def test_starts_follow_boundaries(self, nav: ClusterNavigator) -> None:
        starts = sorted({nav.cluster_start_at(SAMPLE, i) for i in range(len(SAMPLE_BYTES) + 1)})
        assert starts == SAMPLE_BOUNDARIES


# ---------------------------------------------------------------------------
# Edge offsets
# ---------------------------------------------------------------------------

class TestEdges:
    @pytest.mark.parametrize("offset", [-10, -1, 0, 1, 5])
    def test_empty_buffer_is_total(self, nav: ClusterNavigator, offset: int) -> None:
        assert nav.cluster_start_at(b"", offset) == 0
        assert nav.prev_cluster_start(b"", offset) == 0
        assert nav.next_cluster_start(b"", offset) == 0
        assert nav.cluster_byte_len_at(b"", offset) == 0
        assert nav.cluster_width_at(b"", offset) == 0
        for found in (
            nav.cluster_slice_at(b"", offset),
            nav.prev_cluster_slice(b"", offset),
            nav.next_cluster_slice(b"", offset),
        ):
            assert not found
            assert found.text == ""

    def test_negative_offset_behaves_like_zero(self, nav: ClusterNavigator) -> None:
        assert nav.cluster_start_at(SAMPLE, -7) == 0
        assert nav.cluster_slice_at(SAMPLE, -7).text == HI
        assert nav.next_cluster_start(SAMPLE, -7) == 6
        assert nav.prev_cluster_start(SAMPLE, -7) == 0
        assert not nav.prev_cluster_slice(SAMPLE, -7)

    def test_past_end_behaves_like_len(self, nav: ClusterNavigator) -> None:
        end = len(SAMPLE_BYTES)
        assert nav.cluster_start_at(SAMPLE, end + 100) == end
        assert nav.next_cluster_start(SAMPLE, end + 100) == end
        assert nav.prev_cluster_start(SAMPLE, end + 100) == 44
        assert nav.prev_cluster_slice(SAMPLE, end + 100).text == DECOMPOSED_E

    def test_sentinels_are_positioned(self, nav: ClusterNavigator) -> None:
        end = len(SAMPLE_BYTES)
        at_end = nav.next_cluster_slice(SAMPLE, end)
        assert (at_end.start, at_end.end) == (end, end)
        at_start = nav.prev_cluster_slice(SAMPLE, 0)
        assert (at_start.start, at_start.end) == (0, 0)

    def test_first_cluster_has_no_predecessor(self, nav: ClusterNavigator) -> None:
        assert nav.prev_cluster_start(SAMPLE, 0) == 0
        assert nav.prev_cluster_slice(SAMPLE, 0).text == ""

    def test_decomposed_only_buffer(self, nav: ClusterNavigator) -> None:
        for offset in range(4):
            assert nav.cluster_start_at(DECOMPOSED_E, offset) in (0, 3)
        assert nav.cluster_slice_at(DECOMPOSED_E, 2).text == DECOMPOSED_E
        assert nav.next_cluster_start(DECOMPOSED_E, 1) == 3


# ---------------------------------------------------------------------------
# Tolerance of misaligned offsets
# ---------------------------------------------------------------------------

class TestMisalignedOffsets:
    def test_every_offset_is_accepted(self, nav: ClusterNavigator) -> None:
        """The real oracle raises on misaligned queries, so none may reach it."""
        for offset in range(-2, len(SAMPLE_BYTES) + 3):
            nav.cluster_slice_at(SAMPLE, offset)
            nav.prev_cluster_slice(SAMPLE, offset)
            nav.next_cluster_slice(SAMPLE, offset)
            nav.cluster_width_at(SAMPLE, offset)

    def test_continuation_byte_matches_its_codepoint(self, nav: ClusterNavigator) -> None:
        # 🧑 occupies bytes 19..22; bytes 20..22 are continuation bytes.
        for offset in (20, 21, 22):
            assert nav.cluster_start_at(SAMPLE, offset) == nav.cluster_start_at(SAMPLE, 19)
            assert nav.next_cluster_start(SAMPLE, offset) == nav.next_cluster_start(SAMPLE, 19)

    def test_prev_inside_cluster_returns_own_start(self, nav: ClusterNavigator) -> None:
        # Stepping back from inside a cluster lands on that cluster's start.
        assert nav.prev_cluster_start(SAMPLE, 20) == 19
        assert nav.prev_cluster_start(SAMPLE, 19) == 18

    def test_round_trip_from_combining_mark(self, nav: ClusterNavigator) -> None:
        data = b"ae\xcc\x81"  # a, then e + U+0301 at bytes 1..3
        assert nav.prev_cluster_start(data, 2) == 1
        assert nav.next_cluster_start(data, nav.prev_cluster_start(data, 2)) == 4
        assert nav.cluster_start_at(data, 2) == 1

    def test_queries_reach_oracle_aligned(self, reference_widths: ReferenceWidthOracle) -> None:
        real = WcwidthBoundaryOracle()
        spy = MagicMock(wraps=real)
        nav = ClusterNavigator(spy, reference_widths)

        nav.cluster_start_at(SAMPLE, 21)
        nav.next_cluster_start(SAMPLE, 21)
        nav.prev_cluster_start(SAMPLE, 21)

        assert spy.is_boundary.call_args.args[1] == 19
        assert spy.next_boundary.call_args.args[1] == 19
        assert spy.prev_boundary.call_args.args[1] == 23

    def test_edges_skip_the_oracle(self, reference_widths: ReferenceWidthOracle) -> None:
        oracle = MagicMock()
        nav = ClusterNavigator(oracle, reference_widths)

        assert nav.cluster_start_at(SAMPLE, 0) == 0
        assert nav.cluster_start_at(SAMPLE, 500) == len(SAMPLE_BYTES)
        assert nav.next_cluster_start(SAMPLE, 500) == len(SAMPLE_BYTES)
        oracle.is_boundary.assert_not_called()
        oracle.next_boundary.assert_not_called()

    def test_missing_neighbour_maps_to_sentinel(
        self, reference_widths: ReferenceWidthOracle,
    ) -> None:
        oracle = MagicMock()
        oracle.next_boundary.return_value = None
        oracle.prev_boundary.return_value = None
        nav = ClusterNavigator(oracle, reference_widths)

        assert nav.next_cluster_start(b"abc", 1) == 3
        assert nav.prev_cluster_start(b"abc", 1) == 0


# ---------------------------------------------------------------------------
# Buffer kinds and measurement
# ---------------------------------------------------------------------------

class TestBuffersAndWidths:
    @pytest.mark.parametrize(
        "data",
        [SAMPLE, SAMPLE_BYTES, bytearray(SAMPLE_BYTES), memoryview(SAMPLE_BYTES)],
        ids=["str", "bytes", "bytearray", "memoryview"],
    )
    def test_all_buffer_kinds_agree(self, nav: ClusterNavigator, data: object) -> None:
        found = nav.cluster_slice_at(data, 30)  # type: ignore[arg-type]
        assert (found.start, found.end) == (28, 34)
        assert bytes(found) == SAMPLE_BYTES[28:34]

    def test_slice_borrows_caller_buffer(self, nav: ClusterNavigator) -> None:
        found = nav.cluster_slice_at(SAMPLE_BYTES, 20)
        assert found.buffer is SAMPLE_BYTES

    def test_measure_empty_is_zero(self, nav: ClusterNavigator) -> None:
        assert nav.measure(ClusterSlice.empty(SAMPLE_BYTES, 3)) == 0

    def test_width_oracle_sees_cluster_text(self) -> None:
        widths = MagicMock()
        widths.width.return_value = 7
        nav = ClusterNavigator(WcwidthBoundaryOracle(), widths)

        assert nav.cluster_width_at(SAMPLE, 45) == 7
        widths.width.assert_called_once_with(DECOMPOSED_E)

    def test_width_oracle_not_called_at_end(self) -> None:
        widths = MagicMock()
        nav = ClusterNavigator(WcwidthBoundaryOracle(), widths)

        assert nav.cluster_width_at(SAMPLE, len(SAMPLE_BYTES)) == 0
        widths.width.assert_not_called()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestLogging:
    def test_resync_is_logged_at_debug(
        self, nav: ClusterNavigator, caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="grapheme_nav.core.navigator")
        nav.cluster_start_at(SAMPLE, 21)
        assert "offset 21 resolved to cluster start 19" in caplog.text

    def test_aligned_offset_is_silent(
        self, nav: ClusterNavigator, caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="grapheme_nav.core.navigator")
        nav.cluster_start_at(SAMPLE, 19)
        assert caplog.text == ""
