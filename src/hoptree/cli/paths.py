from __future__ import annotations

"""Utilities for resolving diagram and report output paths."""

from pathlib import Path


def outputs_dir(base: str | None = None) -> Path:
    return Path(base) if base else Path.cwd() / "outputs"


def diagrams_dir(base: str | None = None) -> Path:
    return outputs_dir(base) / "diagrams"


def reports_dir(base: str | None = None) -> Path:
    return outputs_dir(base) / "reports"


def ensure_output_dirs(base: str | None = None) -> None:
    diagrams_dir(base).mkdir(parents=True, exist_ok=True)
    reports_dir(base).mkdir(parents=True, exist_ok=True)


def diagram_path(target_distance: int, base: str | None = None) -> str:
    """Path of the SVG diagram for one distance, e.g. ``outputs/diagrams/3_distance_tree.svg``."""
    ensure_output_dirs(base)
    return str(diagrams_dir(base) / f"{target_distance}_distance_tree.svg")


def report_path(target_distance: int, base: str | None = None) -> str:
    """Path of the YAML report for one distance."""
    ensure_output_dirs(base)
    return str(reports_dir(base) / f"{target_distance}_distance_report.yaml")


__all__ = [
    "outputs_dir",
    "diagrams_dir",
    "reports_dir",
    "ensure_output_dirs",
    "diagram_path",
    "report_path",
]
