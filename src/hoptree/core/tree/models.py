"""
Hop tree data models.

These models represent one exhaustive expansion for a target distance D:
- HopNode: A position reached by a specific hop sequence
- LayerStats: Per-depth node and terminating counts
- RunSummary: Whole-tree scalars computed from the terminal nodes
- HopTree: Arena that owns every node of one run

Storage:
--------
Nodes live in a single index-addressed list. Parent and children links are
arena indices, so a tree is released as a whole and a partially built tree
never holds a dangling reference.

Tree Structure (D = 2):
    pos0 (w=1)
    ├── pos1 (w=2)
    │   └── pos2 (w=2, terminal)
    └── pos2 (w=2, terminal)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class HopNode(BaseModel):
    """
    A node in the hop tree.

    ``inverse_weight`` is the exact product of the branching factors on the
    path from the root. The node's probability is its reciprocal and is only
    converted to a float when reported.
    """

    id: int
    parent_id: Optional[int] = None
    children_ids: List[int] = Field(default_factory=list)

    position: int = Field(ge=0)
    depth: int = Field(ge=0)
    inverse_weight: int = Field(ge=1)
    terminal: bool = False

    @property
    def is_leaf(self) -> bool:
        return len(self.children_ids) == 0

    @property
    def probability(self) -> float:
        """Probability of the hop sequence ending at this node."""
        return 1.0 / self.inverse_weight


class LayerStats(BaseModel):
    """Aggregate counts for all nodes sharing one depth."""

    depth: int
    node_count: int = 0
    terminating_count: int = 0


class RunSummary(BaseModel):
    """Whole-tree scalars for one target distance."""

    total_probability: float
    expected_hop_count: float
    terminal_count: int


class HopTree(BaseModel):
    """
    Complete hop tree for one target distance.

    The tree tracks:
    - All nodes in creation (breadth-first) order; index 0 is the root
    - Terminal node ids in the order they were reached
    - Layer statistics keyed by depth
    """

    target_distance: int = Field(ge=0)
    nodes: List[HopNode] = Field(default_factory=list)
    terminal_ids: List[int] = Field(default_factory=list)
    layer_stats: Dict[int, LayerStats] = Field(default_factory=dict)

    # =========================================================================
    # Node Access
    # =========================================================================

    @property
    def root(self) -> Optional[HopNode]:
        if not self.nodes:
            return None
        return self.nodes[0]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def terminal_nodes(self) -> List[HopNode]:
        return [self.get_node(i) for i in self.terminal_ids]

    def get_node(self, node_id: int) -> HopNode:
        """Get a node by arena index."""
        return self.nodes[node_id]

    def get_children(self, node_id: int) -> List[HopNode]:
        """Get all direct children of a node, in increasing position."""
        return [self.nodes[cid] for cid in self.nodes[node_id].children_ids]

    # =========================================================================
    # Node Management
    # =========================================================================

    def add_node(self, node: HopNode) -> None:
        """
        Append a node to the arena.

        The node's id must be the next free index. Non-root nodes are linked
        into their parent's children list.
        """
        self.nodes.append(node)
        if node.parent_id is not None:
            self.nodes[node.parent_id].children_ids.append(node.id)

    # =========================================================================
    # Statistics
    # =========================================================================

    def sorted_layers(self) -> List[LayerStats]:
        """Layer statistics in ascending depth order."""
        return [self.layer_stats[depth] for depth in sorted(self.layer_stats)]

    def get_depth(self) -> int:
        """Maximum depth reached by any node."""
        return max(self.layer_stats) if self.layer_stats else 0

    def to_dict(self) -> Dict[str, Any]:
        """Summary of the tree for YAML serialization (nodes excluded)."""
        return {
            "target_distance": self.target_distance,
            "node_count": self.node_count,
            "terminal_count": len(self.terminal_ids),
            "layers": [layer.model_dump() for layer in self.sorted_layers()],
        }


__all__ = [
    "HopNode",
    "HopTree",
    "LayerStats",
    "RunSummary",
]
