"""Configuration loading and management for Code Harmonizer.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.code-harmonizer.toml)
    3. Project config (./code-harmonizer.toml)
    4. Explicit config file
    5. Environment variables (HARMONIZER_* prefix)
    6. CLI overrides (passed as kwargs)

A config file may carry a [vocabulary] table of project words:

    top_suggestions = 3
    context_noun = "order"

    [vocabulary]
    invoice = "wisdom"
    settle = "power"

Example:
    >>> config = load_config(verbose=True, top_suggestions=3)
    >>> config.verbosity
    'verbose'
    >>> config.top_suggestions
    3
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .semantics.models import Dimension

Verbosity = Literal["quiet", "normal", "verbose"]

CONFIG_FILENAME = "code-harmonizer.toml"
ENV_PREFIX = "HARMONIZER_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis execution.

    Attributes:
        Vocabulary:
            custom_vocabulary: Project words -> dimension name; these take
                precedence over the built-in vocabulary

        Naming suggestions:
            suggest_names: Suggest names for disharmonious functions
            top_suggestions: Suggestions kept per function
            context_noun: Noun appended to suggestions ("user" -> getUser)
            min_confidence: Minimum similarity of a displayed suggestion

        Scoring:
            disharmony_threshold: Functions above this are disharmonious

        Performance tuning:
            workers: Number of parallel workers (None = auto-detect)
            cache_enabled: Memoize text analysis
            cache_size: Maximum memoized texts

        File filtering:
            exclude_patterns: Glob patterns to exclude from analysis
            minified_line_length: Files whose average line length exceeds
                this are treated as minified and skipped

        Output control:
            verbosity: Logging verbosity level
    """

    custom_vocabulary: dict[str, str] = field(default_factory=dict)

    suggest_names: bool = True
    top_suggestions: int = 5
    context_noun: Optional[str] = None
    min_confidence: float = 0.7

    disharmony_threshold: float = 0.5

    workers: Optional[int] = None
    cache_enabled: bool = True
    cache_size: int = 4096

    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "*.min.js",
            "*.bundle.js",
            "*.d.ts",
            "*.generated.*",
        ]
    )
    minified_line_length: int = 500

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for word, dimension in self.custom_vocabulary.items():
            try:
                Dimension.parse(dimension)
            except ValueError as e:
                raise InvalidConfigError(f"vocabulary.{word}", dimension, str(e)) from None

        if self.top_suggestions < 1:
            raise InvalidConfigError("top_suggestions", self.top_suggestions, "must be at least 1")
        if not 0.0 <= self.min_confidence <= 1.0:
            raise InvalidConfigError(
                "min_confidence", self.min_confidence, "must be between 0.0 and 1.0"
            )
        if self.disharmony_threshold < 0:
            raise InvalidConfigError(
                "disharmony_threshold", self.disharmony_threshold, "must be non-negative"
            )
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.cache_size < 1:
            raise InvalidConfigError("cache_size", self.cache_size, "must be at least 1")
        if self.minified_line_length < 1:
            raise InvalidConfigError(
                "minified_line_length", self.minified_line_length, "must be at least 1"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "must be quiet, normal or verbose")

    @property
    def vocabulary(self) -> dict[str, Dimension]:
        """custom_vocabulary with parsed dimensions."""
        return {word: Dimension.parse(dim) for word, dim in self.custom_vocabulary.items()}


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). None values
            are ignored so unset CLI options keep file/env values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}
    vocabulary: dict[str, str] = {}

    sources = [Path.home() / f".{CONFIG_FILENAME}", Path.cwd() / CONFIG_FILENAME]
    for path in sources:
        if path.exists():
            _merge_file(path, merged, vocabulary)

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge_file(config_file, merged, vocabulary)

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    vocabulary.update(overrides.pop("custom_vocabulary", None) or {})
    merged.update({key: value for key, value in overrides.items() if value is not None})

    if vocabulary:
        merged["custom_vocabulary"] = vocabulary

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge_file(path: Path, merged: dict, vocabulary: dict[str, str]) -> None:
    try:
        data = _load_toml_file(path)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    for key in ("vocabulary", "custom_vocabulary"):
        table = data.pop(key, {})
        if not isinstance(table, dict):
            raise InvalidConfigError(key, table, "must be a table of word = dimension")
        vocabulary.update({str(word): str(dim) for word, dim in table.items()})
    merged.update(data)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from HARMONIZER_* environment variables.

    Supported environment variables:
        HARMONIZER_SUGGEST_NAMES: bool (true/false/1/0)
        HARMONIZER_TOP_SUGGESTIONS: int
        HARMONIZER_CONTEXT_NOUN: str
        HARMONIZER_MIN_CONFIDENCE: float
        HARMONIZER_DISHARMONY_THRESHOLD: float
        HARMONIZER_WORKERS: int
        HARMONIZER_CACHE_ENABLED: bool
        HARMONIZER_CACHE_SIZE: int
        HARMONIZER_MINIFIED_LINE_LENGTH: int
        HARMONIZER_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any HARMONIZER_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value, or None for types that cannot come from the
        environment (lists, dicts)

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Handle Optional[X] which is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    origin = getattr(type_hint, "__origin__", None)
    if origin in (list, dict) or type_hint in (list, dict):
        return None

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        ValueError: If TOML parsing fails (TOMLDecodeError)
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
