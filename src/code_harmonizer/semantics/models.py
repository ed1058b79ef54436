"""Semantic data models.

Dimension names the four semantic axes. SemanticResult and DisharmonyResult
are the immutable outputs of cluster analysis and ICE (Intent-Context-
Execution) analysis respectively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .coordinates import Coordinate


class Dimension(str, Enum):
    """Semantic axis of programming vocabulary.

    LOVE    - communication, connection, error handling
    JUSTICE - validation, ordering, control flow
    POWER   - creation, mutation, execution
    WISDOM  - retrieval, computation, returning knowledge
    """

    LOVE = "love"
    JUSTICE = "justice"
    POWER = "power"
    WISDOM = "wisdom"

    @classmethod
    def parse(cls, value: Union[str, Dimension]) -> Dimension:
        """Accept a Dimension or a case-insensitive dimension name."""
        if isinstance(value, Dimension):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown dimension '{value}' (expected one of: {valid})") from None

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Canonical L, J, P, W order. Also the tie-break precedence for dominance.
DIMENSIONS: tuple[Dimension, ...] = (
    Dimension.LOVE,
    Dimension.JUSTICE,
    Dimension.POWER,
    Dimension.WISDOM,
)


class Severity(Enum):
    """Disharmony severity, ordered from best to worst."""

    EXCELLENT = "excellent"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def collapsed(self) -> Severity:
        """Three-level form used by summary reports: low, medium or high."""
        if self in (Severity.EXCELLENT, Severity.LOW):
            return Severity.LOW
        if self is Severity.MEDIUM:
            return Severity.MEDIUM
        return Severity.HIGH


_SEVERITY_ORDER = (
    Severity.EXCELLENT,
    Severity.LOW,
    Severity.MEDIUM,
    Severity.HIGH,
    Severity.CRITICAL,
)


@dataclass(frozen=True)
class SemanticResult:
    """Result of analyzing one concept cluster.

    Attributes:
        coordinate: Centroid of the per-concept coordinates
        clarity: How focused the centroid is [0, 1]
        dominant: Dominant dimension of the centroid
        distance_from_anchor: Distance of the centroid from the Anchor
        concepts: The concepts that were analyzed
    """

    coordinate: Coordinate
    clarity: float
    dominant: Dimension
    distance_from_anchor: float
    concepts: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DisharmonyResult:
    """ICE analysis result for one function.

    Attributes:
        intent: What the name and docs promise
        context: Environmental signal (language, file name)
        execution: What the body actually does
        disharmony: Euclidean distance intent -> execution, 0..sqrt(2)
        coherence: Alignment of all three coordinates [0, 1]
        balance: Proximity of the ICE triangle to the Anchor [0, 1]
        benevolence: Constructive (L, W) versus destructive (P) weighting
        severity: Threshold classification of disharmony
    """

    intent: Coordinate
    context: Coordinate
    execution: Coordinate
    disharmony: float
    coherence: float
    balance: float
    benevolence: float
    severity: Severity

    @property
    def intent_execution_distance(self) -> float:
        return self.disharmony
