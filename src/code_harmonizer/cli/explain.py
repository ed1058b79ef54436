"""Explain command: deep-dive on one function."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..analysis import FileStatus, FunctionReport, HarmonyAnalyzer
from ..exceptions import ConfigurationError
from ..logging_config import setup_logging
from . import app
from ._common import console, format_coordinate, resolve_config, severity_text

MAX_SUGGESTIONS = 3


def _explanation(fn: FunctionReport) -> tuple[str, str]:
    """Headline and follow-up for a disharmony score."""
    name = escape(fn.name)
    if fn.disharmony > 0.8:
        return (
            f'[red]The function name "{name}" strongly contradicts its implementation.[/red]',
            "This is a CRITICAL mismatch that will confuse developers and likely cause bugs.",
        )
    if fn.disharmony > 0.5:
        return (
            f'[yellow]The function name "{name}" somewhat mismatches its implementation.[/yellow]',
            "The name and behavior are not aligned, which can lead to confusion.",
        )
    if fn.disharmony > 0.3:
        return (
            f'[blue]The function name "{name}" has minor discrepancies with its implementation.[/blue]',
            "While mostly correct, the name could be more precise.",
        )
    return (
        f'[green]The function name "{name}" accurately matches its implementation.[/green]',
        "The name clearly describes what it does.",
    )


def _select(functions: list[FunctionReport], line: Optional[int]) -> FunctionReport:
    if line is not None:
        for fn in functions:
            if fn.line == line:
                return fn
        console.print(
            f"[yellow]No function found at line {line}, "
            f"explaining {escape(functions[0].name)} instead.[/yellow]"
        )
    return functions[0]


@app.command()
def explain(
    path: Path = typer.Argument(
        ...,
        help="Source file to explain",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    line: Optional[int] = typer.Option(
        None,
        "-l",
        "--line",
        help="Line where the function starts (default: first function)",
        min=1,
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
):
    """
    Explain why one function's name and body disagree, and how to fix it.

    [bold cyan]Examples:[/bold cyan]

      code-harmonizer explain src/users.js

      code-harmonizer explain src/users.js --line 42
    """
    logger = setup_logging(verbose=False, quiet=True)
    try:
        settings = resolve_config(config=config)
    except ConfigurationError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    report = HarmonyAnalyzer(settings).analyze_file(path)
    if report.status is not FileStatus.SUCCESS:
        console.print(f"[red]Failed to analyze {escape(str(path))}:[/red] {escape(report.error or '')}")
        raise typer.Exit(1)
    if not report.functions:
        console.print("[yellow]No functions found in this file.[/yellow]")
        return

    fn = _select(report.functions, line)
    reading = fn.interpretation()

    console.print()
    console.print(f"[bold]Function:[/bold] {escape(fn.name)}()")
    console.print(f"[dim]Location: {escape(str(path))}:{fn.line}[/dim]")
    console.print(f"Disharmony: [bold]{fn.disharmony:.3f}[/bold] ({severity_text(fn.severity)})")
    console.print()

    console.print("[bold cyan]What's wrong?[/bold cyan]")
    headline, detail = _explanation(fn)
    console.print(f"  {headline}")
    console.print(f"  [dim]{detail}[/dim]")
    console.print()
    console.print(f"  Intent (name and docs): {format_coordinate(fn.intent)}")
    console.print(f"  Execution (body):       {format_coordinate(fn.execution)}")
    console.print(f"  Primary drift: {reading.primary.label} {reading.magnitude:.2f} ({reading.severity})")
    for text in reading.lines():
        console.print(f"  {escape(text)}")
    console.print()

    console.print("[bold cyan]How to fix?[/bold cyan]")
    if fn.suggestions:
        console.print("  [bold green]Option 1 (Recommended): Rename to match behavior[/bold green]")
        for rank, s in enumerate(fn.suggestions[:MAX_SUGGESTIONS], 1):
            console.print(f"     {rank}. [cyan]{escape(s.name)}()[/cyan] [dim]({s.similarity:.0%} confidence)[/dim]")
    console.print("  [bold]Option 2: Fix the implementation to match the name[/bold]")
    console.print("  [bold]Option 3: Split into functions with one responsibility each[/bold]")
    console.print()

    if fn.disharmony > settings.disharmony_threshold:
        console.print(
            f"Run [cyan]code-harmonizer analyze {escape(str(path))} --verbose[/cyan] "
            "to see every function's trajectory."
        )
    else:
        console.print("[green]This function has low disharmony. No action needed.[/green]")
