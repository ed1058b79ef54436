"""Suggest command: rank function names for a description of behaviour."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from . import app
from ._common import console, format_coordinate, resolve_config
from ..exceptions import ConfigurationError
from ..logging_config import setup_logging
from ..semantics import ActionVerbIndex, Vocabulary


@app.command()
def suggest(
    text: str = typer.Argument(
        ...,
        help="What the function does, e.g. 'query database and return records'",
    ),
    top: Optional[int] = typer.Option(
        None, "-t", "--top",
        help="Number of suggestions (default: 5)",
        min=1,
    ),
    context: Optional[str] = typer.Option(
        None, "--context",
        help="Noun appended to each suggestion",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
):
    """
    Suggest function names for a plain-language description.

    [bold cyan]Examples:[/bold cyan]

      code-harmonizer suggest "delete the user and log it"

      code-harmonizer suggest "fetch records" --context user --top 3
    """
    logger = setup_logging(verbose=False, quiet=True)
    try:
        settings = resolve_config(config=config, top_suggestions=top, context_noun=context)
    except ConfigurationError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    coordinate = Vocabulary(settings.vocabulary).analyze_text(text)
    suggestions = ActionVerbIndex().suggest_names(
        coordinate,
        context_noun=settings.context_noun,
        top_n=settings.top_suggestions,
    )

    console.print(f"[bold cyan]Meaning[/bold cyan]  {format_coordinate(coordinate)}")
    console.print(f"[bold cyan]Dominant[/bold cyan] {coordinate.dominant_dimension().label}")
    console.print()

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Match", justify="right")
    table.add_column("Group")
    for rank, s in enumerate(suggestions, 1):
        table.add_row(str(rank), escape(s.name), f"{s.similarity:.0%}", s.category.label)
    console.print(table)
