"""Tests for semantics/coordinates.py - points on the LJPW simplex."""

import dataclasses
import math

import pytest

from code_harmonizer.exceptions import InvalidCoordinateInput
from code_harmonizer.semantics import ANCHOR, Coordinate, Dimension, centroid
from code_harmonizer.semantics.coordinates import MAX_SIMPLEX_DISTANCE


class TestNormalization:
    """Coordinates always sum to one."""

    def test_counts_are_normalized(self):
        """Raw counts become proportions."""
        assert Coordinate.from_counts(3, 1, 0, 0).as_tuple() == (0.75, 0.25, 0.0, 0.0)

    def test_sum_is_one(self):
        """Arbitrary weights sum to 1.0 after construction."""
        coord = Coordinate(0.2, 7, 1.3, 4)
        assert sum(coord) == pytest.approx(1.0)

    def test_zero_counts_give_anchor(self):
        """No signal lands on the Anchor."""
        assert Coordinate.from_counts(0, 0, 0, 0) == ANCHOR

    def test_anchor_is_uniform(self):
        """The Anchor is 0.25 on every axis."""
        assert ANCHOR.as_tuple() == (0.25, 0.25, 0.25, 0.25)

    def test_scale_invariant(self):
        """Multiplying all counts does not change the point."""
        assert Coordinate(1, 2, 3, 4) == Coordinate(10, 20, 30, 40)

    def test_negative_rejected(self):
        """Negative counts are a contract violation."""
        with pytest.raises(InvalidCoordinateInput):
            Coordinate(1, -1, 0, 0)

    def test_negative_is_value_error(self):
        """InvalidCoordinateInput is also a ValueError."""
        with pytest.raises(ValueError):
            Coordinate(0, 0, 0, -0.5)

    def test_immutable(self):
        """Coordinates cannot be mutated."""
        coord = Coordinate(1, 0, 0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            coord.love = 0.5  # type: ignore[misc]

    def test_from_mapping_missing_is_zero(self):
        """Missing dimensions count as zero."""
        coord = Coordinate.from_mapping({Dimension.POWER: 2, Dimension.WISDOM: 2})
        assert coord.as_tuple() == (0.0, 0.0, 0.5, 0.5)

    def test_pure(self):
        """pure() builds a simplex vertex."""
        assert Coordinate.pure(Dimension.JUSTICE).as_tuple() == (0.0, 1.0, 0.0, 0.0)

    def test_getitem_and_to_dict(self):
        """Dimension indexing and dict view agree."""
        coord = Coordinate(1, 0, 1, 0)
        assert coord[Dimension.LOVE] == 0.5
        assert coord.to_dict() == {"love": 0.5, "justice": 0.0, "power": 0.5, "wisdom": 0.0}


class TestMetrics:
    """Distance, similarity, dominance and clarity."""

    def test_distance_between_vertices(self, pure):
        """Two vertices are sqrt(2) apart, the simplex maximum."""
        assert pure("love").distance_to(pure("power")) == pytest.approx(math.sqrt(2))
        assert MAX_SIMPLEX_DISTANCE == pytest.approx(math.sqrt(2))

    def test_distance_symmetric(self):
        """distance(a, b) == distance(b, a)."""
        a = Coordinate(1, 2, 0, 1)
        b = Coordinate(0, 1, 3, 0)
        assert a.distance_to(b) == pytest.approx(b.distance_to(a))

    def test_anchor_distance_zero(self):
        """The Anchor is at distance 0 from itself."""
        assert ANCHOR.distance_from_anchor() == 0.0

    def test_vertex_distance_from_anchor(self, pure):
        """A vertex is sqrt(0.75) from the Anchor."""
        assert pure("wisdom").distance_from_anchor() == pytest.approx(math.sqrt(0.75))

    def test_cosine_identical(self):
        """Same direction has similarity 1."""
        coord = Coordinate(1, 2, 3, 4)
        assert coord.cosine_similarity(coord) == pytest.approx(1.0)

    def test_cosine_orthogonal(self, pure):
        """Distinct vertices are orthogonal."""
        assert pure("love").cosine_similarity(pure("justice")) == 0.0

    def test_dominant(self):
        """Largest component wins."""
        assert Coordinate(1, 0, 5, 2).dominant_dimension() is Dimension.POWER

    def test_dominant_tie_prefers_ljpw_order(self):
        """Ties resolve to the earliest of L, J, P, W."""
        assert Coordinate(0, 1, 1, 0).dominant_dimension() is Dimension.JUSTICE
        assert ANCHOR.dominant_dimension() is Dimension.LOVE

    def test_clarity_range(self, pure):
        """Clarity is 0 at the Anchor and 1 on a vertex."""
        assert ANCHOR.semantic_clarity() == pytest.approx(0.0)
        assert pure("power").semantic_clarity() == pytest.approx(1.0)

    def test_clarity_in_between(self):
        """A two-axis split is partly clear."""
        clarity = Coordinate(1, 1, 0, 0).semantic_clarity()
        assert 0.0 < clarity < 1.0

    def test_equals_epsilon(self):
        """equals() tolerates tiny differences."""
        a = Coordinate(1, 1, 1, 1)
        b = Coordinate(1, 1, 1, 1.0001)
        assert a.equals(b)
        assert not a.equals(Coordinate(2, 1, 1, 1))


class TestCentroid:
    """Mean of several coordinates."""

    def test_empty_is_anchor(self):
        """No points give the Anchor."""
        assert centroid([]) == ANCHOR

    def test_single_point(self):
        """Centroid of one point is that point."""
        coord = Coordinate(3, 1, 0, 0)
        assert centroid([coord]).equals(coord)

    def test_two_vertices(self, pure):
        """Midpoint of two vertices."""
        mid = centroid([pure("love"), pure("power")])
        assert mid.as_tuple() == pytest.approx((0.5, 0.0, 0.5, 0.0))

    def test_accepts_generator(self, pure):
        """Any iterable works."""
        mid = centroid(pure(name) for name in ("justice", "wisdom"))
        assert mid.as_tuple() == pytest.approx((0.0, 0.5, 0.0, 0.5))
