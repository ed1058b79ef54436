"""Main analysis command."""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..analysis import FileReport, FileStatus, FunctionReport, HarmonyAnalyzer, ProjectReport
from ..config import AnalysisConfig
from ..exceptions import ConfigurationError, HarmonizerError
from ..logging_config import setup_logging
from ..semantics.models import Severity
from . import app
from ._common import console, format_coordinate, resolve_config, severity_text


class FailOn(str, Enum):
    """Severities accepted by --fail-on."""

    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@app.command()
def analyze(
    paths: list[Path] = typer.Argument(
        ...,
        help="Files or directories to analyze",
        exists=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    top: Optional[int] = typer.Option(
        None,
        "-t",
        "--top",
        help="Number of name suggestions per disharmonious function",
        min=1,
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        help="Noun appended to suggested names (e.g. user -> validateUser)",
    ),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        help="Disharmony above which a function is reported (default: 0.5)",
        min=0.0,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show every function and its intent/execution trajectory",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print the summary",
    ),
    fail_on: Optional[FailOn] = typer.Option(
        None,
        "--fail-on",
        help="Exit 1 if any function reaches this severity",
        case_sensitive=False,
    ),
):
    """
    Find functions whose names promise something their bodies don't do.

    Each function's name and docs (intent) and body (execution) are mapped
    onto Love, Justice, Power and Wisdom. The distance between the two is
    its disharmony. Disharmonious functions get ranked rename suggestions.

    [bold cyan]Examples:[/bold cyan]

      code-harmonizer analyze src/

      code-harmonizer analyze api.js --top 3 --context user

      code-harmonizer analyze src/ --verbose --threshold 0.3

      code-harmonizer analyze src/ --quiet --fail-on high
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config,
            top_suggestions=top,
            context_noun=context,
            disharmony_threshold=threshold,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
        )
    except ConfigurationError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    try:
        analyzer = HarmonyAnalyzer(settings)
        report = analyzer.analyze_paths(paths)

        _output_rich(report, settings, verbose=verbose, quiet=quiet)

        if fail_on is not None and _check_fail_condition(fail_on, report):
            raise typer.Exit(1)

    except typer.Exit:
        raise

    except HarmonizerError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Fail condition
# ---------------------------------------------------------------------------


def _check_fail_condition(fail_on: FailOn, report: ProjectReport) -> bool:
    """True if any function is at or above the given severity."""
    worst = report.worst_severity()
    if worst is None:
        return False
    return worst.rank >= Severity(fail_on.value).rank


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def _confident(fn: FunctionReport, settings: AnalysisConfig) -> list:
    return [s for s in fn.suggestions if s.similarity >= settings.min_confidence]


def _output_rich(report: ProjectReport, settings: AnalysisConfig, verbose: bool = False, quiet: bool = False):
    """Human-readable Rich terminal output, one table per file."""
    console.print()

    if not quiet:
        for file in report.files:
            _print_file(file, settings, verbose)

    _print_summary(report, settings)


def _print_file(file: FileReport, settings: AnalysisConfig, verbose: bool):
    if file.status is FileStatus.SKIPPED:
        if verbose:
            console.print(f"[dim]{escape(file.path)}: {escape(file.error or 'skipped')}[/dim]")
        return
    if file.status is FileStatus.ERROR:
        console.print(f"[red]{escape(file.path)}:[/red] {escape(file.error or 'Unknown error')}")
        return

    shown = [
        fn for fn in file.functions
        if verbose or fn.disharmony > settings.disharmony_threshold
    ]
    if not shown:
        return

    table = Table(title=escape(file.path), title_justify="left", show_lines=False)
    table.add_column("Function", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Disharmony", justify="right")
    table.add_column("Severity")
    table.add_column("Drift")
    table.add_column("Suggestions")

    for fn in shown:
        suggestions = ", ".join(
            f"{escape(s.name)} ({s.similarity:.0%})" for s in _confident(fn, settings)
        )
        table.add_row(
            escape(fn.name),
            str(fn.line),
            f"{fn.disharmony:.3f}",
            severity_text(fn.severity),
            fn.primary_misalignment.label,
            suggestions or "[dim]-[/dim]",
        )
    console.print(table)

    if verbose:
        for fn in shown:
            _print_trajectory(fn)
    console.print()


def _print_trajectory(fn: FunctionReport):
    console.print(f"  [bold]{escape(fn.name)}[/bold] (line {fn.line})")
    console.print(f"    intent:    {format_coordinate(fn.intent)}")
    console.print(f"    execution: {format_coordinate(fn.execution)}")
    for d in fn.trajectory:
        if d.magnitude == "negligible":
            continue
        console.print(
            f"    {d.dimension.label:<8} {d.intent:.2f} -> {d.execution:.2f} "
            f"({d.delta:+.2f}, {d.magnitude})"
        )
    reading = fn.interpretation()
    style = "green" if reading.aligned else "yellow"
    console.print(f"    drift: {reading.primary.label} {reading.magnitude:.2f} ({reading.severity})")
    for line in reading.lines():
        console.print(f"    [{style}]{escape(line)}[/{style}]")


def _print_summary(report: ProjectReport, settings: AnalysisConfig):
    summary = report.summary
    console.print("[bold cyan]CODE HARMONIZER[/bold cyan]")

    parts = [f"[bold]{summary.analyzed_files}[/bold] files"]
    if summary.skipped_files:
        parts.append(f"[dim]{summary.skipped_files} skipped[/dim]")
    if summary.error_files:
        parts.append(f"[red]{summary.error_files} errors[/red]")
    console.print("  " + ", ".join(parts))
    console.print(
        f"  [bold]{summary.total_functions}[/bold] functions, "
        f"[bold]{summary.disharmonious_functions}[/bold] above threshold "
        f"{settings.disharmony_threshold:.2f}"
    )
    console.print(
        f"  average disharmony {summary.average_disharmony:.3f}, "
        f"max {summary.max_disharmony:.3f} "
        f"[dim]({summary.elapsed_seconds:.2f}s)[/dim]"
    )

    if summary.total_functions and not summary.disharmonious_functions:
        console.print("[bold green]All functions are in harmony.[/bold green]")
    console.print()
