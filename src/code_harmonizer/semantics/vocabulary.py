"""Programming vocabulary: maps verbs and keywords to LJPW dimensions.

Lookup priority (first match wins):
    1. Custom overrides registered for the project
    2. Compound patterns ("get_data", "validate_input", ...)
    3. Programming verbs ("get", "validate", "delete", ...)
    4. Language keywords ("if", "return", "try", ...)

The word lists and their dimensions are empirical. They are kept exactly as
the scoring engine was calibrated with; do not "fix" individual entries.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Iterable, Mapping, Optional, Union

from .cache import TextCache
from .coordinates import Coordinate
from .models import DIMENSIONS, Dimension

logger = logging.getLogger(__name__)

_WISDOM_VERBS = (
    "get", "fetch", "read", "load", "retrieve", "query", "find", "search",
    "locate", "lookup", "calculate", "compute", "analyze", "evaluate",
    "assess", "measure", "count", "parse", "interpret", "decode",
    "understand", "represent", "return", "yield", "provide", "supply",
    "deliver", "extract", "derive", "infer", "deduce", "resolve",
    "determine", "identify", "recognize", "detect", "discover", "observe",
    "monitor", "track", "serialize", "deserialize",
)

_JUSTICE_VERBS = (
    "validate", "verify", "check", "test", "ensure", "confirm", "assert",
    "require", "expect", "enforce", "guard", "protect", "secure",
    "authorize", "authenticate", "permit", "allow", "deny", "reject",
    "accept", "approve", "compare", "match", "equal", "differ", "filter",
    "select", "exclude", "include", "order", "sort", "arrange", "organize",
    "structure", "format", "normalize", "sanitize", "escape", "unescape",
    "encode", "limit", "constrain", "restrict", "bound", "clamp",
    "throttle", "debounce", "batch", "group", "partition", "split", "slice",
)

_POWER_VERBS = (
    "create", "build", "generate", "make", "construct", "initialize",
    "init", "setup", "configure", "modify", "update", "change", "transform",
    "convert", "mutate", "alter", "edit", "revise", "delete", "remove",
    "destroy", "erase", "clear", "reset", "purge", "save", "store",
    "persist", "write", "insert", "append", "prepend", "push", "pop",
    "shift", "unshift", "execute", "run", "perform", "trigger", "fire",
    "emit", "dispatch", "invoke", "call", "apply", "start", "stop", "pause",
    "resume", "restart", "kill", "terminate", "abort", "cancel", "set",
    "unset", "toggle", "enable", "disable", "activate", "deactivate",
)

# "emit" also appears above; this later love entry is the effective one.
_LOVE_VERBS = (
    "connect", "disconnect", "link", "unlink", "bind", "unbind", "attach",
    "detach", "join", "leave", "merge", "combine", "unite", "integrate",
    "compose", "assemble", "aggregate", "collect", "gather", "accumulate",
    "send", "receive", "notify", "inform", "alert", "warn", "communicate",
    "broadcast", "publish", "subscribe", "unsubscribe", "listen", "emit",
    "signal", "print", "display", "show", "hide", "present", "render",
    "output", "log", "add", "extend", "augment", "enhance", "enrich",
    "decorate", "wrap", "unwrap", "handle", "catch",
)


def _build_table(*groups: tuple[Dimension, Iterable[str]]) -> dict[str, Dimension]:
    table: dict[str, Dimension] = {}
    for dimension, words in groups:
        for word in words:
            table[word] = dimension
    return table


PROGRAMMING_VERBS: Mapping[str, Dimension] = _build_table(
    (Dimension.WISDOM, _WISDOM_VERBS),
    (Dimension.JUSTICE, _JUSTICE_VERBS),
    (Dimension.POWER, _POWER_VERBS),
    (Dimension.LOVE, _LOVE_VERBS),
)

COMPOUND_PATTERNS: Mapping[str, Dimension] = _build_table(
    (
        Dimension.WISDOM,
        (
            "get_data", "fetch_data", "read_file", "load_config",
            "query_database", "find_by_id", "search_results",
            "calculate_total", "parse_json", "return_value",
        ),
    ),
    (
        Dimension.JUSTICE,
        (
            "validate_input", "verify_token", "check_permission",
            "test_condition", "assert_equal", "compare_values",
            "filter_items", "sort_array", "normalize_data", "sanitize_input",
        ),
    ),
    (
        Dimension.POWER,
        (
            "create_user", "build_object", "generate_id", "initialize_app",
            "update_record", "modify_state", "delete_file", "save_changes",
            "execute_command", "trigger_event",
        ),
    ),
    (
        Dimension.LOVE,
        (
            "connect_to_server", "send_notification", "notify_user",
            "broadcast_message", "publish_event", "subscribe_to_channel",
            "render_component", "display_result", "handle_error",
            "catch_exception",
        ),
    ),
)

LANGUAGE_KEYWORDS: Mapping[str, Dimension] = _build_table(
    (
        Dimension.WISDOM,
        ("const", "let", "var", "return", "yield", "await", "import", "export",
         "typeof", "instanceof"),
    ),
    (
        Dimension.JUSTICE,
        ("if", "else", "switch", "case", "default", "while", "for", "break", "continue"),
    ),
    (Dimension.POWER, ("function", "class", "new", "delete", "throw", "async")),
    (Dimension.LOVE, ("try", "catch", "finally", "extends", "implements", "with")),
)

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """Split text into lowercase tokens.

    Boundaries are underscores, camelCase/PascalCase transitions and any
    non-alphanumeric character.

    >>> split_words("getUserData")
    ['get', 'user', 'data']
    >>> split_words("parseHTTPResponse_now")
    ['parse', 'http', 'response', 'now']
    """
    current = _CAMEL_BOUNDARY.sub(r"\1 \2", text)
    current = _ACRONYM_BOUNDARY.sub(r"\1 \2", current)
    return [part.lower() for part in _NON_ALNUM.split(current) if part]


DimensionLike = Union[Dimension, str]


class Vocabulary:
    """Central authority for word -> dimension mappings.

    Built-in tables are shared and never mutated. Custom entries live on the
    instance, so each project can carry its own vocabulary.

    Args:
        custom: Optional word -> dimension overrides (names or Dimension)
        cache: Optional TextCache used by analyze_text()
    """

    def __init__(
        self,
        custom: Optional[Mapping[str, DimensionLike]] = None,
        cache: Optional[TextCache] = None,
    ) -> None:
        self._custom: dict[str, Dimension] = {}
        self._cache = cache
        if custom:
            self.register_many(custom)

    @property
    def cache(self) -> Optional[TextCache]:
        return self._cache

    @property
    def custom_words(self) -> dict[str, Dimension]:
        return dict(self._custom)

    def register(self, word: str, dimension: DimensionLike) -> None:
        """Add a custom entry that takes precedence over built-ins."""
        self._custom[word.lower()] = Dimension.parse(dimension)
        if self._cache is not None:
            self._cache.clear()

    def register_many(self, mapping: Mapping[str, DimensionLike]) -> None:
        for word, dimension in mapping.items():
            self.register(word, dimension)
        logger.debug(f"Vocabulary: {len(self._custom)} custom entries registered")

    def get_dimension(self, word: str) -> Optional[Dimension]:
        """Look up a single word. Returns None for unknown words."""
        lower = word.lower()
        for table in (self._custom, COMPOUND_PATTERNS, PROGRAMMING_VERBS, LANGUAGE_KEYWORDS):
            dimension = table.get(lower)
            if dimension is not None:
                return dimension
        return None

    def count_dimensions(self, words: Iterable[str]) -> Counter[Dimension]:
        """Count known dimensions over already-split words."""
        counts: Counter[Dimension] = Counter()
        for word in words:
            dimension = self.get_dimension(word)
            if dimension is not None:
                counts[dimension] += 1
        return counts

    def analyze_text(self, text: str) -> Coordinate:
        """Score a piece of text (identifier, phrase or sentence)."""
        if self._cache is not None:
            cached = self._cache.get(text)
            if cached is not None:
                return cached

        coordinate = Coordinate.from_mapping(self.count_dimensions(split_words(text)))

        if self._cache is not None:
            self._cache.put(text, coordinate)
        return coordinate

    def analyze_concepts(self, concepts: Iterable[str]) -> Coordinate:
        """Pool the token counts of a whole concept cluster into one point."""
        counts: Counter[Dimension] = Counter()
        for concept in concepts:
            counts.update(self.count_dimensions(split_words(concept)))
        return Coordinate.from_mapping(counts)

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()

    def verbs_for_dimension(self, dimension: DimensionLike) -> list[str]:
        """Built-in programming verbs mapped to a dimension."""
        target = Dimension.parse(dimension)
        return [verb for verb, dim in PROGRAMMING_VERBS.items() if dim is target]

    def stats(self) -> dict:
        """Summary of vocabulary sizes."""
        per_dimension = Counter(PROGRAMMING_VERBS.values())
        return {
            "total_verbs": len(PROGRAMMING_VERBS),
            "total_compound_patterns": len(COMPOUND_PATTERNS),
            "total_keywords": len(LANGUAGE_KEYWORDS),
            "total_custom": len(self._custom),
            "verbs_per_dimension": {dim.value: per_dimension.get(dim, 0) for dim in DIMENSIONS},
        }
