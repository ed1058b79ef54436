"""Diagnose command: baseline metrics for an absolute LJPW coordinate."""

import typer
from rich.table import Table

from . import app
from ._common import console
from ..semantics.baselines import (
    AbsoluteCoordinate,
    Baselines,
    describe_composite_score,
    describe_distance_from_ne,
)


@app.command()
def diagnose(
    love: float = typer.Argument(..., help="Love (L)"),
    justice: float = typer.Argument(..., help="Justice (J)"),
    power: float = typer.Argument(..., help="Power (P)"),
    wisdom: float = typer.Argument(..., help="Wisdom (W)"),
):
    """
    Print baseline diagnostics for an absolute L J P W coordinate.

    [bold cyan]Examples:[/bold cyan]

      code-harmonizer diagnose 0.618 0.414 0.718 0.693

      code-harmonizer diagnose 0.9 0.8 0.7 0.95
    """
    coords = AbsoluteCoordinate(love, justice, power, wisdom)
    diag = Baselines.full_diagnostic(coords)
    metrics = diag["metrics"]
    distances = diag["distances"]

    console.print(
        f"[bold cyan]DIAGNOSTIC[/bold cyan] L={love:.3f} J={justice:.3f} "
        f"P={power:.3f} W={wisdom:.3f}"
    )
    console.print()

    effective = Table(title="Effective dimensions", title_justify="left")
    effective.add_column("Dimension")
    effective.add_column("Value", justify="right")
    for key, value in diag["effective_dimensions"].items():
        effective.add_row(key.replace("effective_", ""), f"{value:.4f}")
    console.print(effective)

    table = Table(title="Metrics", title_justify="left")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Distance from Anchor", f"{distances['from_anchor']:.4f}")
    table.add_row("Distance from Natural Equilibrium", f"{distances['from_natural_equilibrium']:.4f}")
    table.add_row("Harmonic mean", f"{metrics['harmonic_mean']:.4f}")
    table.add_row("Geometric mean", f"{metrics['geometric_mean']:.4f}")
    table.add_row("Coupling-aware sum", f"{metrics['coupling_aware_sum']:.4f}")
    table.add_row("Harmony index", f"{metrics['harmony_index']:.4f}")
    table.add_row("Composite score", f"{metrics['composite_score']:.4f}")
    console.print(table)

    console.print()
    console.print(f"[bold]Composite:[/bold]   {describe_composite_score(metrics['composite_score'])}")
    console.print(
        f"[bold]Equilibrium:[/bold] "
        f"{describe_distance_from_ne(distances['from_natural_equilibrium'])}"
    )
