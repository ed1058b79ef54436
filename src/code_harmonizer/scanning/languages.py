"""Language detection and source file discovery.

Adding a new language:
  1. Add its extensions to LANGUAGE_EXTENSIONS below.
  2. Load its grammar in treesitter_parser.py.
  3. Give it a rule table in rules.py.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Union

from ..exceptions import InvalidPathError

logger = logging.getLogger(__name__)

LANGUAGE_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "javascript": (".js", ".jsx", ".mjs", ".cjs"),
    "typescript": (".ts", ".mts", ".cts"),
    "tsx": (".tsx",),
    "python": (".py", ".pyi"),
}

# Directory names never descended into during discovery.
SKIP_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        "vendor",
        "venv",
        ".venv",
        "__pycache__",
        ".git",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        "dist",
        "build",
        "coverage",
        ".eggs",
        "third_party",
    }
)

_EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ext: lang for lang, exts in LANGUAGE_EXTENSIONS.items() for ext in exts
}


def detect_language(filepath: Union[Path, str]) -> str:
    """Detect language from file extension.

    Returns:
        Language name (e.g., "javascript", "python") or "unknown"
    """
    return _EXTENSION_TO_LANGUAGE.get(Path(filepath).suffix.lower(), "unknown")


def should_skip_file(filepath: Path, exclude_patterns: Iterable[str]) -> bool:
    """True if the file matches any exclusion glob."""
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False


def find_source_files(
    paths: Iterable[Union[Path, str]], exclude_patterns: Iterable[str] = ()
) -> list[Path]:
    """Expand files and directories into a sorted list of supported sources.

    Explicitly named files are kept even if their extension is unknown, so
    the caller can report them. Directory contents are filtered by extension,
    SKIP_DIRS and exclude_patterns.

    Raises:
        InvalidPathError: A given path does not exist
    """
    patterns = list(exclude_patterns)
    found: set[Path] = set()

    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise InvalidPathError(path, "Path does not exist")
        if path.is_dir():
            found.update(_walk(path, patterns))
        elif not should_skip_file(path, patterns):
            found.add(path)

    return sorted(found)


def _walk(root: Path, patterns: list[str]) -> Iterator[Path]:
    for filepath in root.rglob("*"):
        if not filepath.is_file():
            continue
        if filepath.suffix.lower() not in _EXTENSION_TO_LANGUAGE:
            continue
        if any(part in SKIP_DIRS for part in filepath.relative_to(root).parts[:-1]):
            continue
        if should_skip_file(filepath, patterns):
            logger.debug(f"Skipped (pattern): {filepath}")
            continue
        yield filepath
