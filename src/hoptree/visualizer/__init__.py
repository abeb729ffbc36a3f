"""
Tree Visualizer module.

Generates SVG diagrams for hop trees, one file per target distance.
"""

from hoptree.visualizer.svg import render_svg, write_svg

__all__ = ["render_svg", "write_svg"]
