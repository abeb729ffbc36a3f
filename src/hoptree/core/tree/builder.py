"""
Level-order hop tree builder.

Expands every hop sequence that covers a target distance D exactly. Each
layer of the frontier is expanded completely before the next one, so the
working set is one frontier rather than a recursion stack as deep as D.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from hoptree.core.arithmetic import checked_multiply
from hoptree.core.errors import InternalInvariantError, InvalidRangeError, NodeLimitExceededError
from hoptree.core.settings import BuilderSettings
from hoptree.core.tree.models import HopNode, HopTree
from hoptree.core.tree.stats import StatsAggregator

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds the exhaustive hop tree for one target distance at a time."""

    def __init__(self, settings: Optional[BuilderSettings] = None):
        self.settings = settings or BuilderSettings()

    # =========================================================================
    # Main Entry Point
    # =========================================================================

    def build(self, target_distance: int) -> HopTree:
        """
        Build the full hop tree for ``target_distance``.

        Args:
            target_distance: Distance D every complete hop sequence must cover

        Returns:
            HopTree with all nodes, terminal ids and layer statistics

        Raises:
            InvalidRangeError: If target_distance is negative
            WeightOverflowError: If a weight exceeds the configured width
            NodeLimitExceededError: If the tree exceeds ``max_nodes``
        """
        if target_distance < 0:
            raise InvalidRangeError(target_distance, target_distance)
        self._check_peak_weight(target_distance)

        tree = HopTree(target_distance=target_distance)
        stats = StatsAggregator()

        # D == 0: the root is already at the target
        root = HopNode(id=0, position=0, depth=0, inverse_weight=1, terminal=target_distance == 0)
        self._add(tree, stats, root)

        frontier: List[HopNode] = [] if root.terminal else [root]
        while frontier:
            batch, frontier = frontier, []
            for node in batch:
                frontier.extend(self._expand(tree, stats, node))
            logger.debug(
                "D=%d: expanded %d node(s), next frontier holds %d",
                target_distance,
                len(batch),
                len(frontier),
            )

        tree.layer_stats = stats.layer_stats
        tree.terminal_ids = stats.terminal_ids
        logger.info(
            "D=%d: built %d node(s), %d terminal",
            target_distance,
            tree.node_count,
            len(tree.terminal_ids),
        )
        return tree

    # =========================================================================
    # Expansion
    # =========================================================================

    def _check_peak_weight(self, target_distance: int) -> None:
        """
        Fail before expansion if the heaviest node would not fit the weight width.

        The all-ones hop path multiplies D, D-1, ..., 1, so its last node has
        weight D! and no other node is heavier.
        """
        weight = 1
        for remaining in range(target_distance, 0, -1):
            weight = checked_multiply(weight, remaining, self.settings.weight_bits, target_distance=target_distance)

    def _expand(self, tree: HopTree, stats: StatsAggregator, node: HopNode) -> List[HopNode]:
        """Create every child of ``node`` and return the non-terminal ones."""
        target = tree.target_distance
        remaining = target - node.position
        if remaining < 1:
            raise InternalInvariantError(
                f"node {node.id} at position {node.position} queued with remaining distance {remaining}",
                target_distance=target,
            )

        # Every child of a node shares the same weight
        weight = checked_multiply(
            node.inverse_weight,
            remaining,
            self.settings.weight_bits,
            target_distance=target,
        )

        pending: List[HopNode] = []
        for hop in range(1, remaining + 1):
            position = node.position + hop
            child = HopNode(
                id=tree.node_count,
                parent_id=node.id,
                position=position,
                depth=node.depth + 1,
                inverse_weight=weight,
                terminal=position == target,
            )
            self._add(tree, stats, child)
            if not child.terminal:
                pending.append(child)
        return pending

    def _add(self, tree: HopTree, stats: StatsAggregator, node: HopNode) -> None:
        if tree.node_count >= self.settings.max_nodes:
            raise NodeLimitExceededError(tree.target_distance, self.settings.max_nodes)
        tree.add_node(node)
        stats.observe(node)


__all__ = ["TreeBuilder"]
