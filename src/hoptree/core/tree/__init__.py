"""
Hop tree module.

Provides the data structures and the level-order builder for exhaustive hop
trees.

Components:
- HopNode: One position reached by a specific hop sequence
- LayerStats: Per-depth node and terminating counts
- RunSummary: Total terminal probability and expected hop count
- HopTree: Arena holding every node of one run
- TreeBuilder: Expands the tree for a target distance

Example:
    from hoptree.core.tree import TreeBuilder

    tree = TreeBuilder().build(3)
    for layer in tree.sorted_layers():
        print(layer.depth, layer.node_count, layer.terminating_count)
"""

from hoptree.core.tree.builder import TreeBuilder
from hoptree.core.tree.models import HopNode, HopTree, LayerStats, RunSummary
from hoptree.core.tree.stats import StatsAggregator, summarize

__all__ = [
    "HopNode",
    "HopTree",
    "LayerStats",
    "RunSummary",
    "StatsAggregator",
    "TreeBuilder",
    "summarize",
]
