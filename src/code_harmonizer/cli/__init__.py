"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="code-harmonizer",
    help="Code Harmonizer - finds functions whose names promise something their bodies don't do",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]Code Harmonizer[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Semantic bug detection for JavaScript, TypeScript and Python."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .diagnose import diagnose as _diagnose  # noqa: F401, E402
from .explain import explain as _explain  # noqa: F401, E402
from .suggest import suggest as _suggest  # noqa: F401, E402
from .vocab import vocab as _vocab  # noqa: F401, E402
