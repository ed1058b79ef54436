"""Analysis-related exceptions: file access, parsing, coordinate contracts."""

from pathlib import Path
from typing import List, Sequence, Union

from .base import HarmonizerError


class AnalysisError(HarmonizerError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Union[Path, str], reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParseFailure(AnalysisError):
    """Raised when source text cannot be parsed into a usable syntax tree.

    Scoped to a single file: the orchestrator records it against that file
    and keeps going with the rest of the batch.
    """

    def __init__(self, filepath: Union[Path, str], language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class UnsupportedLanguageError(AnalysisError):
    """Raised when attempting to analyze an unsupported language."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages


class InvalidCoordinateInput(AnalysisError, ValueError):
    """Raised when negative dimension counts reach the coordinate builder.

    This is a caller contract violation (a bug upstream in concept
    extraction), so it is never clamped away.
    """

    def __init__(self, values: Sequence[float]):
        super().__init__(
            "All coordinate values must be non-negative",
            details={"values": ", ".join(f"{v:g}" for v in values)},
        )
        self.values = tuple(values)
