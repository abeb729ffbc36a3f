"""
Tests for statistics aggregation.

Tests cover:
- StatsAggregator layer counting
- summarize() probability and expectation
- Invariant violations on bad weights
"""

import pytest

from hoptree.core.errors import InternalInvariantError
from hoptree.core.tree import HopNode, StatsAggregator, summarize


def _harmonic(n: int) -> float:
    return sum(1.0 / k for k in range(1, n + 1))


class TestStatsAggregator:
    """Tests for incremental layer aggregation."""

    def test_observe_counts_layers(self):
        stats = StatsAggregator()
        stats.observe(HopNode(id=0, position=0, depth=0, inverse_weight=1))
        stats.observe(HopNode(id=1, parent_id=0, position=1, depth=1, inverse_weight=2))
        stats.observe(HopNode(id=2, parent_id=0, position=2, depth=1, inverse_weight=2, terminal=True))

        assert stats.layer_stats[0].node_count == 1
        assert stats.layer_stats[0].terminating_count == 0
        assert stats.layer_stats[1].node_count == 2
        assert stats.layer_stats[1].terminating_count == 1
        assert stats.terminal_ids == [2]


class TestSummarize:
    """Tests for summarize()."""

    def test_zero_distance(self, small_trees):
        summary = summarize(small_trees[0].terminal_nodes)

        assert summary.total_probability == 1.0
        assert summary.expected_hop_count == 0.0
        assert summary.terminal_count == 1

    def test_distance_one(self, small_trees):
        summary = summarize(small_trees[1].terminal_nodes)

        assert summary.total_probability == 1.0
        assert summary.expected_hop_count == 1.0

    def test_distance_two(self, small_trees):
        summary = summarize(small_trees[2].terminal_nodes)

        assert summary.total_probability == 1.0
        assert summary.expected_hop_count == 1.5

    def test_total_probability_is_one(self, small_trees):
        for distance, tree in small_trees.items():
            summary = summarize(tree.terminal_nodes)
            assert summary.total_probability == pytest.approx(1.0, abs=1e-9), distance

    def test_expected_hops_is_harmonic_number(self, small_trees):
        """Expected hop count for D equals H_D = 1 + 1/2 + ... + 1/D."""
        for distance, tree in small_trees.items():
            summary = summarize(tree.terminal_nodes)
            assert summary.expected_hop_count == pytest.approx(_harmonic(distance), abs=1e-9)

    def test_terminal_count(self, small_trees):
        """D >= 1 has 2**(D-1) complete hop sequences."""
        summary = summarize(small_trees[6].terminal_nodes)

        assert summary.terminal_count == 32

    def test_empty_input(self):
        summary = summarize([])

        assert summary.total_probability == 0.0
        assert summary.terminal_count == 0

    def test_zero_weight_is_invariant_violation(self):
        """A zero weight can only come from a defect; it must not be swallowed."""
        bad = HopNode.model_construct(id=5, position=1, depth=1, inverse_weight=0, terminal=True)

        with pytest.raises(InternalInvariantError, match="non-positive weight"):
            summarize([bad])
