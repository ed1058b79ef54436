"""Public API for Code Harmonizer.

Example:
    >>> from code_harmonizer import analyze, analyze_code
    >>>
    >>> report = analyze("src/", top_suggestions=3)
    >>> for file_report, fn in report.functions():
    ...     print(file_report.path, fn.name, fn.severity.value)
    >>>
    >>> functions = analyze_code("function getUser(id) { db.delete(id); }", "javascript")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .analysis import FunctionReport, HarmonyAnalyzer, ProjectReport
from .config import load_config
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(
    *paths: Union[str, Path],
    config_file: Optional[Path] = None,
    **overrides,
) -> ProjectReport:
    """Analyze files and directories.

    Args:
        *paths: Files or directories (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g. disharmony_threshold=0.3)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = load_config(config_file=config_file, **overrides)
    targets = paths or (".",)
    logger.debug(f"Analyzing {len(targets)} path(s)")
    return HarmonyAnalyzer(config).analyze_paths(targets)


def analyze_code(
    code: str,
    language: str,
    path: str = "<string>",
    config_file: Optional[Path] = None,
    **overrides,
) -> list[FunctionReport]:
    """Analyze source text directly.

    Raises:
        UnsupportedLanguageError: No rules exist for the language
        ParseFailure: The source cannot be parsed
    """
    config = load_config(config_file=config_file, **overrides)
    return HarmonyAnalyzer(config).analyze_source(code, language, path)
