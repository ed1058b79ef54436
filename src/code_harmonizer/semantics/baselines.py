"""Baseline diagnostics on absolute (unnormalized) LJPW coordinates.

Unlike Coordinate, an AbsoluteCoordinate is not projected onto the simplex:
each axis is an independent score, usually in [0, 1]. The metrics below
measure robustness, effectiveness, growth potential and balance against two
reference points, the Anchor (1, 1, 1, 1) and the Natural Equilibrium.

Natural Equilibrium constants:
    Love     phi^-1  = (sqrt(5) - 1) / 2 ~ 0.618034
    Justice  sqrt(2) - 1               ~ 0.414214
    Power    e - 2                     ~ 0.718282
    Wisdom   ln 2                      ~ 0.693147
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .models import DIMENSIONS, Dimension


@dataclass(frozen=True)
class AbsoluteCoordinate:
    """Raw LJPW scores. Not normalized, not validated."""

    love: float
    justice: float
    power: float
    wisdom: float

    def as_array(self) -> np.ndarray:
        return np.array([self.love, self.justice, self.power, self.wisdom], dtype=float)

    def to_dict(self) -> dict[str, float]:
        return {"L": self.love, "J": self.justice, "P": self.power, "W": self.wisdom}


NUMERICAL_EQUIVALENTS: dict[Dimension, float] = {
    Dimension.LOVE: 0.618034,
    Dimension.JUSTICE: 0.414214,
    Dimension.POWER: 0.718282,
    Dimension.WISDOM: 0.693147,
}

NATURAL_EQUILIBRIUM = AbsoluteCoordinate(*(NUMERICAL_EQUIVALENTS[dim] for dim in DIMENSIONS))
ANCHOR_POINT = AbsoluteCoordinate(1.0, 1.0, 1.0, 1.0)

# Row = source dimension, column = target, in L, J, P, W order.
COUPLING_MATRIX = np.array(
    [
        [1.0, 1.4, 1.3, 1.5],
        [0.9, 1.0, 0.7, 1.2],
        [0.6, 0.8, 1.0, 0.5],
        [1.3, 1.1, 1.0, 1.0],
    ]
)


def coupling(source: Dimension, target: Dimension) -> float:
    """Coupling coefficient from one dimension to another."""
    return float(COUPLING_MATRIX[DIMENSIONS.index(source), DIMENSIONS.index(target)])


_COMPOSITE_LEVELS = (
    (0.5, "Critical", "Critical - Multiple dimensions failing"),
    (0.7, "Struggling", "Struggling - Functional but inefficient"),
    (0.9, "Competent", "Competent - Solid baseline performance"),
    (1.1, "Strong", "Strong - Above-average effectiveness"),
    (1.3, "Excellent", "Excellent - High-performing, growth active"),
    (math.inf, "Elite", "Elite - Exceptional, Love multiplier engaged"),
)

_EQUILIBRIUM_LEVELS = (
    (0.2, "Near-optimal", "Near-optimal balance"),
    (0.5, "Good", "Good but improvable"),
    (0.8, "Moderate", "Moderate imbalance"),
    (math.inf, "Significant dysfunction", "Significant dysfunction"),
)


class Baselines:
    """Nonlinear scoring of absolute coordinates."""

    @staticmethod
    def distance(a: AbsoluteCoordinate, b: AbsoluteCoordinate) -> float:
        """Euclidean distance between two absolute coordinates."""
        return float(np.linalg.norm(a.as_array() - b.as_array()))

    @staticmethod
    def effective_dimensions(coords: AbsoluteCoordinate) -> dict[str, float]:
        """
        Coupling-adjusted dimensions.

        Love is the source and is not amplified; the others scale with
        Love's outgoing coefficients:
            J_eff = J * (1 + 1.4 L)
            P_eff = P * (1 + 1.3 L)
            W_eff = W * (1 + 1.5 L)
        """
        love = coords.love
        return {
            "effective_L": love,
            "effective_J": coords.justice * (1 + coupling(Dimension.LOVE, Dimension.JUSTICE) * love),
            "effective_P": coords.power * (1 + coupling(Dimension.LOVE, Dimension.POWER) * love),
            "effective_W": coords.wisdom * (1 + coupling(Dimension.LOVE, Dimension.WISDOM) * love),
        }

    @staticmethod
    def harmonic_mean(coords: AbsoluteCoordinate) -> float:
        """Robustness, limited by the weakest axis. 0 if any axis <= 0."""
        values = coords.as_array()
        if np.any(values <= 0):
            return 0.0
        return float(4.0 / np.sum(1.0 / values))

    @staticmethod
    def geometric_mean(coords: AbsoluteCoordinate) -> float:
        """Effectiveness: (L * J * P * W) ** 0.25."""
        return float(np.prod(coords.as_array()) ** 0.25)

    @staticmethod
    def coupling_aware_sum(coords: AbsoluteCoordinate) -> float:
        """Growth potential. Can exceed 1.0 through Love amplification."""
        eff = Baselines.effective_dimensions(coords)
        return (
            0.35 * coords.love
            + 0.25 * eff["effective_J"]
            + 0.2 * eff["effective_P"]
            + 0.2 * eff["effective_W"]
        )

    @staticmethod
    def harmony_index(coords: AbsoluteCoordinate) -> float:
        """Balance: 1 / (1 + distance to Anchor)."""
        return 1.0 / (1.0 + Baselines.distance(coords, ANCHOR_POINT))

    @staticmethod
    def composite_score(coords: AbsoluteCoordinate) -> float:
        """
        Weighted overall score.

        35% growth, 25% effectiveness, 25% robustness, 15% harmony.
        """
        return (
            0.35 * Baselines.coupling_aware_sum(coords)
            + 0.25 * Baselines.geometric_mean(coords)
            + 0.25 * Baselines.harmonic_mean(coords)
            + 0.15 * Baselines.harmony_index(coords)
        )

    @staticmethod
    def distance_from_natural_equilibrium(coords: AbsoluteCoordinate) -> float:
        return Baselines.distance(coords, NATURAL_EQUILIBRIUM)

    @staticmethod
    def full_diagnostic(coords: AbsoluteCoordinate) -> dict[str, Any]:
        """All metrics and distances in one nested dict."""
        return {
            "coordinates": coords.to_dict(),
            "effective_dimensions": Baselines.effective_dimensions(coords),
            "distances": {
                "from_anchor": Baselines.distance(coords, ANCHOR_POINT),
                "from_natural_equilibrium": Baselines.distance_from_natural_equilibrium(coords),
            },
            "metrics": {
                "harmonic_mean": Baselines.harmonic_mean(coords),
                "geometric_mean": Baselines.geometric_mean(coords),
                "coupling_aware_sum": Baselines.coupling_aware_sum(coords),
                "harmony_index": Baselines.harmony_index(coords),
                "composite_score": Baselines.composite_score(coords),
            },
        }


Level = tuple[float, str, str]


def _lookup(levels: tuple[Level, ...], value: float) -> Level:
    for level in levels:
        if value < level[0]:
            return level
    return levels[-1]


def interpret_composite_score(score: float) -> str:
    """Short label: Critical, Struggling, Competent, Strong, Excellent or Elite."""
    return _lookup(_COMPOSITE_LEVELS, score)[1]


def describe_composite_score(score: float) -> str:
    """Full interpretation, e.g. "Strong - Above-average effectiveness"."""
    return _lookup(_COMPOSITE_LEVELS, score)[2]


def interpret_distance_from_ne(distance: float) -> str:
    """Short label: Near-optimal, Good, Moderate or Significant dysfunction."""
    return _lookup(_EQUILIBRIUM_LEVELS, distance)[1]


def describe_distance_from_ne(distance: float) -> str:
    return _lookup(_EQUILIBRIUM_LEVELS, distance)[2]
