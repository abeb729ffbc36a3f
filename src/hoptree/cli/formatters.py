"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from rich.table import Table

from hoptree.core.runner import DistanceRun
from hoptree.core.settings import BuilderSettings
from hoptree.core.tree.models import HopTree, RunSummary


def build_layer_table(tree: HopTree) -> Table:
    """Per-depth node and terminating counts, in ascending depth."""
    table = Table(title=f"Layers (D={tree.target_distance})")
    table.add_column("Depth", justify="right")
    table.add_column("Node Count", justify="right")
    table.add_column("Terminating Count", justify="right")

    for layer in tree.sorted_layers():
        table.add_row(str(layer.depth), str(layer.node_count), str(layer.terminating_count))

    return table


def format_summary(run: DistanceRun, summary: RunSummary) -> str:
    return (
        f"[bold]Distance: {run.target_distance}[/bold]\n"
        f"Total probability: {summary.total_probability:.6f}\n"
        f"Expected hop count: {summary.expected_hop_count:.6f}\n"
        f"Terminal paths: {summary.terminal_count}\n"
        f"[dim]Elapsed: {run.elapsed_seconds:.3f}s[/dim]"
    )


def build_settings_table(settings: BuilderSettings) -> Table:
    table = Table(title="Builder settings")
    table.add_column("Setting")
    table.add_column("Value", justify="right")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))
    return table


__all__ = ["build_layer_table", "format_summary", "build_settings_table"]
