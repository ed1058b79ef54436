"""ICE (Intent-Context-Execution) disharmony analysis.

Detects semantic bugs by comparing three coordinates:
    Intent    - what the function name and documentation promise
    Context   - the environment (language, file name)
    Execution - what the body actually does

disharmony = distance(intent, execution), range [0, sqrt(2)].

Each word list is scored as a concept cluster: every concept is analyzed on
its own and the list's coordinate is the centroid of those points. A concept
with no known words therefore lands on the Anchor and pulls the cluster
towards balance.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

from .coordinates import ANCHOR, Coordinate, centroid
from .models import Dimension, DisharmonyResult, SemanticResult, Severity
from .vocabulary import Vocabulary

# Upper bounds (inclusive) per severity; anything above HIGH is CRITICAL.
DISHARMONY_THRESHOLDS: dict[Severity, float] = {
    Severity.EXCELLENT: 0.3,
    Severity.LOW: 0.5,
    Severity.MEDIUM: 0.8,
    Severity.HIGH: 1.2,
    Severity.CRITICAL: math.inf,
}

# Normalizer for coherence and balance. Kept at sqrt(3) as calibrated even
# though no two simplex points are further apart than sqrt(2).
_COHERENCE_SCALE = math.sqrt(3)

# Benevolence favors Love and Wisdom, is neutral on Justice, cautious on Power.
BENEVOLENCE_WEIGHTS: dict[Dimension, float] = {
    Dimension.LOVE: 0.4,
    Dimension.JUSTICE: 0.15,
    Dimension.POWER: 0.05,
    Dimension.WISDOM: 0.4,
}


def classify_severity(disharmony: float) -> Severity:
    """Map a disharmony score onto the fixed severity scale."""
    for severity, upper in DISHARMONY_THRESHOLDS.items():
        if disharmony <= upper:
            return severity
    return Severity.CRITICAL


def threshold_for(severity: Union[Severity, str]) -> float:
    """Upper disharmony bound of a severity level."""
    if not isinstance(severity, Severity):
        severity = Severity(str(severity).lower())
    return DISHARMONY_THRESHOLDS[severity]


def _benevolence(coordinate: Coordinate) -> float:
    return sum(coordinate[dim] * weight for dim, weight in BENEVOLENCE_WEIGHTS.items())


class ICEAnalyzer:
    """Performs cluster and ICE analysis against an injected vocabulary."""

    def __init__(self, vocabulary: Vocabulary) -> None:
        self.vocabulary = vocabulary

    def cluster_coordinate(self, concepts: Sequence[str]) -> Coordinate:
        """Centroid of per-concept coordinates (Anchor for an empty list)."""
        return centroid(self.vocabulary.analyze_text(concept) for concept in concepts)

    def analyze_cluster(self, concepts: Sequence[str]) -> SemanticResult:
        """Analyze a concept cluster into a SemanticResult."""
        coordinate = self.cluster_coordinate(concepts)
        return SemanticResult(
            coordinate=coordinate,
            clarity=coordinate.semantic_clarity() if concepts else 0.0,
            dominant=coordinate.dominant_dimension() if concepts else Dimension.WISDOM,
            distance_from_anchor=coordinate.distance_from_anchor(),
            concepts=tuple(concepts),
        )

    def analyze(
        self,
        intent_concepts: Sequence[str],
        context_concepts: Sequence[str],
        execution_concepts: Sequence[str],
    ) -> DisharmonyResult:
        """Run ICE analysis over three word lists."""
        return self.analyze_coordinates(
            self.cluster_coordinate(intent_concepts),
            self.cluster_coordinate(context_concepts),
            self.cluster_coordinate(execution_concepts),
        )

    def analyze_coordinates(
        self, intent: Coordinate, context: Coordinate, execution: Coordinate
    ) -> DisharmonyResult:
        """Run ICE analysis over already-built coordinates."""
        disharmony = intent.distance_to(execution)

        pairwise = (
            intent.distance_to(context),
            disharmony,
            context.distance_to(execution),
        )
        coherence = max(0.0, 1 - (sum(pairwise) / 3) / _COHERENCE_SCALE)

        from_anchor = (
            intent.distance_to(ANCHOR),
            context.distance_to(ANCHOR),
            execution.distance_to(ANCHOR),
        )
        balance = max(0.0, 1 - (sum(from_anchor) / 3) / _COHERENCE_SCALE)

        benevolence = (_benevolence(intent) + _benevolence(execution)) / 2

        return DisharmonyResult(
            intent=intent,
            context=context,
            execution=execution,
            disharmony=disharmony,
            coherence=coherence,
            balance=balance,
            benevolence=benevolence,
            severity=classify_severity(disharmony),
        )

    def semantic_similarity(self, text_a: str, text_b: str) -> float:
        """Cosine similarity of two texts' coordinates."""
        return self.vocabulary.analyze_text(text_a).cosine_similarity(
            self.vocabulary.analyze_text(text_b)
        )

    def is_harmonious(
        self,
        function_name: str,
        implementation_concepts: Sequence[str],
        threshold: float = DISHARMONY_THRESHOLDS[Severity.EXCELLENT],
    ) -> bool:
        """True if a name's intent is within threshold of its implementation."""
        intent = self.vocabulary.analyze_text(function_name)
        execution = self.cluster_coordinate(implementation_concepts)
        return intent.distance_to(execution) <= threshold
