"""Semantic scoring package.

Maps words onto the four LJPW dimensions, measures the distance between what
a function promises and what it does, and suggests better names.

Usage:
    from code_harmonizer.semantics import ICEAnalyzer, Vocabulary

    ice = ICEAnalyzer(Vocabulary())
    result = ice.analyze(["getUserData"], ["javascript"], ["delete", "remove"])
    result.severity  # Severity.CRITICAL
"""

from .baselines import (
    ANCHOR_POINT,
    COUPLING_MATRIX,
    NATURAL_EQUILIBRIUM,
    NUMERICAL_EQUIVALENTS,
    AbsoluteCoordinate,
    Baselines,
    describe_composite_score,
    describe_distance_from_ne,
    interpret_composite_score,
    interpret_distance_from_ne,
)
from .cache import TextCache
from .coordinates import ANCHOR, Coordinate, centroid
from .ice import DISHARMONY_THRESHOLDS, ICEAnalyzer, classify_severity, threshold_for
from .models import DIMENSIONS, Dimension, DisharmonyResult, SemanticResult, Severity
from .naming import ActionVerbEntry, ActionVerbIndex, NamingSuggestion, compound_name
from .vocabulary import (
    COMPOUND_PATTERNS,
    LANGUAGE_KEYWORDS,
    PROGRAMMING_VERBS,
    Vocabulary,
    split_words,
)

__all__ = [
    # Core types
    "Coordinate",
    "Dimension",
    "DIMENSIONS",
    "Severity",
    "SemanticResult",
    "DisharmonyResult",
    "ANCHOR",
    "centroid",
    # Vocabulary
    "Vocabulary",
    "TextCache",
    "split_words",
    "PROGRAMMING_VERBS",
    "COMPOUND_PATTERNS",
    "LANGUAGE_KEYWORDS",
    # ICE
    "ICEAnalyzer",
    "DISHARMONY_THRESHOLDS",
    "classify_severity",
    "threshold_for",
    # Naming
    "ActionVerbIndex",
    "ActionVerbEntry",
    "NamingSuggestion",
    "compound_name",
    # Baselines
    "AbsoluteCoordinate",
    "Baselines",
    "NUMERICAL_EQUIVALENTS",
    "NATURAL_EQUILIBRIUM",
    "ANCHOR_POINT",
    "COUPLING_MATRIX",
    "interpret_composite_score",
    "describe_composite_score",
    "interpret_distance_from_ne",
    "describe_distance_from_ne",
]
