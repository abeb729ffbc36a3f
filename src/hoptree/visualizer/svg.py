"""
SVG diagram generator for hop trees.

Lays the tree out left to right: one column per depth, one row per terminal
node. Each node is a box annotated with its position and probability, and an
edge joins every node to each of its children. Children are stacked with the
highest position on top, so the single-hop path to the target is the first
row under the root.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from hoptree.core.tree.models import HopNode, HopTree

RECT_WIDTH = 175
RECT_HEIGHT = 50
LAYER_SPACING = 225
ROW_SPACING = 75
X_OFFSET = 10
Y_OFFSET = 10
FONT_SIZE = 12
TEXT_OFFSET = 10

TERMINAL_FILL = "aquamarine"
INNER_FILL = "dodgerblue"


def _column_x(depth: int) -> int:
    return (LAYER_SPACING * depth) + (X_OFFSET * (1 + depth))


def _draw_node(tree: HopTree, node: HopNode, y: int, lines: List[str]) -> int:
    """Draw ``node`` and its subtree with its top edge at ``y``; return the subtree height."""
    x = _column_x(node.depth)
    fill = TERMINAL_FILL if node.is_leaf else INNER_FILL
    lines.append("<g>")
    lines.append(f'<rect width="{RECT_WIDTH}" height="{RECT_HEIGHT}" x="{x}" y="{y}" fill="{fill}"/>')
    lines.append(
        f'<text x="{x + TEXT_OFFSET}" y="{y + RECT_HEIGHT // 2}" font-family="Verdana" '
        f'font-size="{FONT_SIZE}" fill="black">Pos: {node.position}, Prob: {node.probability:.3e}</text>'
    )
    lines.append("</g>")

    total_height = ROW_SPACING if node.is_leaf else 0
    child_y = y
    for child in reversed(tree.get_children(node.id)):
        height = _draw_node(tree, child, child_y, lines)
        lines.append(
            f'<line x1="{x + RECT_WIDTH}" y1="{y + RECT_HEIGHT // 2}" '
            f'x2="{_column_x(child.depth)}" y2="{child_y + RECT_HEIGHT // 2}" stroke="black"/>'
        )
        total_height += height
        child_y += height
    return total_height


def render_svg(tree: HopTree) -> str:
    """Render the whole tree as an SVG document."""
    root = tree.root
    if root is None:
        raise ValueError("Cannot render an empty tree")

    columns = tree.get_depth() + 1
    width = (LAYER_SPACING * columns) + (X_OFFSET * (1 + columns))
    height = ROW_SPACING * max(len(tree.terminal_ids), 1) + Y_OFFSET

    lines: List[str] = [f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">']
    _draw_node(tree, root, Y_OFFSET, lines)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_svg(tree: HopTree, output_path: str) -> str:
    """
    Write the SVG diagram for ``tree``.

    Args:
        tree: Built hop tree
        output_path: Destination file (parent directories are created)

    Returns:
        Path to the written file
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_svg(tree), encoding="utf-8")
    return str(path)


__all__ = ["render_svg", "write_svg"]
