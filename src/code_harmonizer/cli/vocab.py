"""Vocab command."""

from typing import Optional

import typer
from rich.table import Table

from . import app
from ._common import console
from ..semantics import DIMENSIONS, ActionVerbIndex, Dimension, Vocabulary


@app.command()
def vocab(
    dimension: Optional[Dimension] = typer.Option(
        None, "-d", "--dimension",
        help="List the verbs of one dimension",
        case_sensitive=False,
    ),
):
    """
    Show vocabulary statistics, or the verbs mapped to one dimension.

    [bold cyan]Examples:[/bold cyan]

      code-harmonizer vocab

      code-harmonizer vocab --dimension power
    """
    vocabulary = Vocabulary()

    if dimension is not None:
        verbs = sorted(vocabulary.verbs_for_dimension(dimension))
        console.print(f"[bold cyan]{dimension.label}[/bold cyan] ({len(verbs)} verbs)")
        console.print("  " + ", ".join(verbs))
        return

    stats = vocabulary.stats()
    index_stats = ActionVerbIndex().stats()

    table = Table(title="Vocabulary", title_justify="left")
    table.add_column("Dimension")
    table.add_column("Verbs", justify="right")
    table.add_column("Naming verbs", justify="right")
    for dim in DIMENSIONS:
        table.add_row(
            dim.label,
            str(stats["verbs_per_dimension"][dim.value]),
            str(index_stats["verbs_by_category"][dim.value]),
        )
    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{stats['total_verbs']}[/bold]",
        f"[bold]{index_stats['total_verbs']}[/bold]",
    )
    console.print(table)
    console.print(
        f"  {stats['total_compound_patterns']} compound patterns, "
        f"{stats['total_keywords']} language keywords"
    )
