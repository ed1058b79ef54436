"""Exception hierarchy for Code Harmonizer."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    InvalidCoordinateInput,
    ParseFailure,
    UnsupportedLanguageError,
)
from .base import HarmonizerError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "HarmonizerError",
    "AnalysisError",
    "FileAccessError",
    "ParseFailure",
    "UnsupportedLanguageError",
    "InvalidCoordinateInput",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
