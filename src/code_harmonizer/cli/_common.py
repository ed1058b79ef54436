"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..semantics.coordinates import Coordinate
from ..semantics.models import Severity

console = Console()

SEVERITY_STYLES = {
    Severity.EXCELLENT: "green",
    Severity.LOW: "green",
    Severity.MEDIUM: "yellow",
    Severity.HIGH: "red",
    Severity.CRITICAL: "bold red",
}


def resolve_config(config: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Build config from CLI options. Unset (None) options keep file values."""
    return load_config(config_file=config, **overrides)


def severity_text(severity: Severity) -> str:
    style = SEVERITY_STYLES[severity]
    return f"[{style}]{severity.value.upper()}[/{style}]"


def format_coordinate(coordinate: Coordinate) -> str:
    """Compact L/J/P/W rendering, e.g. L=0.00 J=0.25 P=0.50 W=0.25."""
    return " ".join(
        f"{label}={value:.2f}" for label, value in zip("LJPW", coordinate.as_tuple())
    )
