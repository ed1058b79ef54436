"""Points in the four-dimensional semantic space.

A Coordinate is a point on the 3-simplex: four non-negative components
(Love, Justice, Power, Wisdom) that always sum to 1.0. Raw dimension counts
are normalized on construction, so every Coordinate is comparable with every
other regardless of how many words produced it.

The Anchor is normalized (1, 1, 1, 1), i.e. (0.25, 0.25, 0.25, 0.25). The
all-zero fallback produces the very same point, so "perfect balance" and
"no signal" are indistinguishable here. That is a modeling choice of the
scoring engine and is preserved deliberately.

Example:
    >>> Coordinate.from_counts(3, 1, 0, 0).as_tuple()
    (0.75, 0.25, 0.0, 0.0)
    >>> Coordinate.from_counts(0, 0, 0, 0) == Coordinate.anchor()
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from ..exceptions import InvalidCoordinateInput
from .models import DIMENSIONS, Dimension

NEUTRAL_COMPONENT = 0.25

# Largest population standard deviation of four values summing to 1,
# reached at a pure-axis point such as (1, 0, 0, 0).
MAX_SIMPLEX_STDDEV = math.sqrt(3) / 4

# Largest distance between two points on the simplex (two distinct vertices).
MAX_SIMPLEX_DISTANCE = math.sqrt(2)


@dataclass(frozen=True)
class Coordinate:
    """Immutable normalized point in LJPW space.

    Construct with raw non-negative weights; they are normalized to sum to
    1.0. Negative weights raise InvalidCoordinateInput.
    """

    love: float
    justice: float
    power: float
    wisdom: float

    def __post_init__(self) -> None:
        values = (self.love, self.justice, self.power, self.wisdom)
        if any(v < 0 for v in values):
            raise InvalidCoordinateInput(values)

        total = sum(values)
        if total == 0:
            normalized = (NEUTRAL_COMPONENT,) * 4
        else:
            normalized = tuple(float(v) / total for v in values)

        for dim, value in zip(DIMENSIONS, normalized):
            object.__setattr__(self, dim.value, value)

    # ── Constructors ────────────────────────────────────────────────

    @classmethod
    def from_counts(cls, love: float, justice: float, power: float, wisdom: float) -> Coordinate:
        """Build a coordinate from per-dimension counts."""
        return cls(love, justice, power, wisdom)

    @classmethod
    def from_mapping(cls, counts: Mapping[Dimension, float]) -> Coordinate:
        """Build a coordinate from a Dimension -> count mapping (missing = 0)."""
        return cls(*(counts.get(dim, 0) for dim in DIMENSIONS))

    @classmethod
    def pure(cls, dimension: Dimension) -> Coordinate:
        """Vertex of the simplex for a single dimension."""
        return cls.from_mapping({dimension: 1})

    @classmethod
    def anchor(cls) -> Coordinate:
        """The Anchor Point: normalized (1, 1, 1, 1)."""
        return cls(1, 1, 1, 1)

    # ── Conversions ─────────────────────────────────────────────────

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.love, self.justice, self.power, self.wisdom)

    def to_dict(self) -> dict[str, float]:
        return {dim.value: self[dim] for dim in DIMENSIONS}

    def __getitem__(self, dimension: Dimension) -> float:
        return getattr(self, dimension.value)

    def __iter__(self):
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return (
            f"Coordinate(L={self.love:.2f}, J={self.justice:.2f}, "
            f"P={self.power:.2f}, W={self.wisdom:.2f})"
        )

    # ── Metrics ─────────────────────────────────────────────────────

    def distance_to(self, other: Coordinate) -> float:
        """Euclidean distance to another coordinate."""
        return math.sqrt(sum((a - b) ** 2 for a, b in zip(self, other)))

    def distance_from_anchor(self) -> float:
        return self.distance_to(ANCHOR)

    def cosine_similarity(self, other: Coordinate) -> float:
        """Cosine similarity; 0.0 if either vector has zero magnitude."""
        dot = sum(a * b for a, b in zip(self, other))
        mag_self = math.sqrt(sum(a * a for a in self))
        mag_other = math.sqrt(sum(b * b for b in other))
        if mag_self == 0 or mag_other == 0:
            return 0.0
        return dot / (mag_self * mag_other)

    def dominant_dimension(self) -> Dimension:
        """Arg-max dimension; ties resolve to the earliest of L, J, P, W."""
        best = DIMENSIONS[0]
        for dim in DIMENSIONS[1:]:
            if self[dim] > self[best]:
                best = dim
        return best

    def semantic_clarity(self) -> float:
        """How focused the point is: 0 (evenly spread) to 1 (pure axis)."""
        values = self.as_tuple()
        mean = sum(values) / 4
        variance = sum((v - mean) ** 2 for v in values) / 4
        return min(1.0, math.sqrt(variance) / MAX_SIMPLEX_STDDEV)

    def equals(self, other: Coordinate, epsilon: float = 1e-4) -> bool:
        """Component-wise equality within epsilon."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))


ANCHOR = Coordinate.anchor()


def centroid(coordinates: Iterable[Coordinate]) -> Coordinate:
    """Mean of a set of coordinates. Empty input yields the Anchor."""
    points = list(coordinates)
    if not points:
        return ANCHOR

    count = len(points)
    sums = [0.0, 0.0, 0.0, 0.0]
    for point in points:
        for i, value in enumerate(point):
            sums[i] += value
    return Coordinate(*(s / count for s in sums))
