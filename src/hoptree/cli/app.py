"""
Hoptree CLI: enumerate hop trees for a range of target distances.

For every distance in the range:
- Builds the exhaustive hop tree
- Prints total probability, expected hop count and per-depth counts
- Writes an SVG diagram and, optionally, a YAML report
"""

from __future__ import annotations

import typer
from rich.console import Console

from hoptree.cli.formatters import build_layer_table, build_settings_table, format_summary
from hoptree.cli.load_helpers import load_settings_or_exit
from hoptree.cli.paths import diagram_path, report_path
from hoptree.core.errors import InternalInvariantError, InvalidRangeError
from hoptree.core.runner import DistanceRunner
from hoptree.utils.logging import configure_logging

app = typer.Typer(help="Hoptree CLI: enumerate every hop sequence covering a target distance.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Enumerate hop trees and report exact path probabilities."""
    configure_logging(verbose)


@app.command()
def run(
    min_distance: int = typer.Argument(..., help="Smallest target distance (inclusive)"),
    max_distance: int = typer.Argument(..., help="Largest target distance (inclusive)"),
    config: str | None = typer.Option(None, "--config", help="Path to a settings YAML file"),
    weight_bits: int | None = typer.Option(None, "--weight-bits", min=1, max=1024, help="Width of the weight integer"),
    max_nodes: int | None = typer.Option(None, "--max-nodes", min=1, help="Node ceiling per tree"),
    svg: bool = typer.Option(True, "--svg/--no-svg", help="Write one SVG diagram per distance"),
    report: bool = typer.Option(False, "--report", help="Write one YAML report per distance"),
    out_dir: str | None = typer.Option(None, "--out-dir", help="Output folder (default: ./outputs)"),
) -> None:
    """Build, summarize and render the hop tree for each distance in a range."""
    builder_settings = load_settings_or_exit(config, console=console, weight_bits=weight_bits, max_nodes=max_nodes)
    runner = DistanceRunner(builder_settings)

    try:
        runs = runner.iter_range(min_distance, max_distance)
    except InvalidRangeError as err:
        console.print(f"[red]Invalid range[/red]: {err}")
        raise typer.Exit(code=2)

    failed: list[int] = []
    try:
        for distance_run in runs:
            if not distance_run.succeeded:
                failed.append(distance_run.target_distance)
                console.print(f"[red]Distance {distance_run.target_distance} failed[/red]: {distance_run.error}")
            else:
                console.print(format_summary(distance_run, distance_run.summary))
                console.print(build_layer_table(distance_run.tree))
                if svg:
                    from hoptree.visualizer import write_svg

                    svg_path = write_svg(distance_run.tree, diagram_path(distance_run.target_distance, out_dir))
                    console.print(f"[cyan]Diagram: {svg_path}[/cyan]")

            if report:
                path = report_path(distance_run.target_distance, out_dir)
                runner.save_report_to_yaml(distance_run, path)
                console.print(f"[cyan]Report: {path}[/cyan]")
            console.print()
    except InternalInvariantError as err:
        console.print(f"[red bold]Internal error[/red bold]: {err}")
        raise typer.Exit(code=3)

    if failed:
        console.print(f"[red]Failed distances: {', '.join(str(d) for d in failed)}[/red]")
        raise typer.Exit(code=1)


@app.command()
def settings(
    config: str | None = typer.Option(None, "--config", help="Path to a settings YAML file"),
    weight_bits: int | None = typer.Option(None, "--weight-bits", min=1, max=1024, help="Width of the weight integer"),
    max_nodes: int | None = typer.Option(None, "--max-nodes", min=1, help="Node ceiling per tree"),
) -> None:
    """Show the effective builder settings."""
    effective = load_settings_or_exit(config, console=console, weight_bits=weight_bits, max_nodes=max_nodes)
    console.print(build_settings_table(effective))


if __name__ == "__main__":
    app()
