"""
Per-depth and whole-tree statistics for hop trees.

Layer counts are exact integers accumulated while the tree is expanded.
Floating point is used only in ``summarize``, once per terminal node, so the
rounding error is bounded by the number of terminal nodes rather than by the
depth of the tree.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List

from hoptree.core.errors import InternalInvariantError
from hoptree.core.tree.models import HopNode, LayerStats, RunSummary
from hoptree.utils.logging import log_calls


class StatsAggregator:
    """Accumulates layer statistics from the node stream produced during expansion."""

    def __init__(self) -> None:
        self.layer_stats: Dict[int, LayerStats] = {}
        self.terminal_ids: List[int] = []

    def observe(self, node: HopNode) -> None:
        """Count a freshly created node in its layer."""
        layer = self.layer_stats.get(node.depth)
        if layer is None:
            layer = LayerStats(depth=node.depth)
            self.layer_stats[node.depth] = layer
        layer.node_count += 1
        if node.terminal:
            layer.terminating_count += 1
            self.terminal_ids.append(node.id)


@log_calls()
def summarize(terminal_nodes: Iterable[HopNode]) -> RunSummary:
    """
    Compute total terminal probability and expected hop count.

    Args:
        terminal_nodes: Terminal nodes of one tree (only depth and weight are read)

    Returns:
        RunSummary for the tree

    Raises:
        InternalInvariantError: If a weight is not positive
    """
    probabilities: List[float] = []
    weighted_depths: List[float] = []

    for node in terminal_nodes:
        if node.inverse_weight <= 0:
            raise InternalInvariantError(f"node {node.id} has non-positive weight {node.inverse_weight}")
        probability = 1.0 / node.inverse_weight
        probabilities.append(probability)
        weighted_depths.append(node.depth * probability)

    return RunSummary(
        total_probability=math.fsum(probabilities),
        expected_hop_count=math.fsum(weighted_depths),
        terminal_count=len(probabilities),
    )


__all__ = ["StatsAggregator", "summarize"]
