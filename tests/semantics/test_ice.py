"""Tests for semantics/ice.py - Intent-Context-Execution analysis."""

import math

import pytest

from code_harmonizer.semantics import (
    ANCHOR,
    DISHARMONY_THRESHOLDS,
    Coordinate,
    Dimension,
    ICEAnalyzer,
    Severity,
    Vocabulary,
    classify_severity,
    threshold_for,
)


class TestSeverity:
    """Disharmony to severity classification."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0.0, Severity.EXCELLENT),
            (0.3, Severity.EXCELLENT),
            (0.31, Severity.LOW),
            (0.5, Severity.LOW),
            (0.51, Severity.MEDIUM),
            (0.8, Severity.MEDIUM),
            (1.0, Severity.HIGH),
            (1.2, Severity.HIGH),
            (1.21, Severity.CRITICAL),
            (math.sqrt(2), Severity.CRITICAL),
        ],
    )
    def test_boundaries(self, score, expected):
        """Upper bounds are inclusive."""
        assert classify_severity(score) is expected

    def test_threshold_for(self):
        assert threshold_for("medium") == 0.8
        assert threshold_for(Severity.EXCELLENT) == 0.3
        assert threshold_for("CRITICAL") == math.inf

    def test_thresholds_increase(self):
        bounds = list(DISHARMONY_THRESHOLDS.values())
        assert bounds == sorted(bounds)

    def test_collapsed(self):
        """Five levels collapse to low, medium and high."""
        assert Severity.EXCELLENT.collapsed() is Severity.LOW
        assert Severity.LOW.collapsed() is Severity.LOW
        assert Severity.MEDIUM.collapsed() is Severity.MEDIUM
        assert Severity.HIGH.collapsed() is Severity.HIGH
        assert Severity.CRITICAL.collapsed() is Severity.HIGH

    def test_rank_order(self):
        assert Severity.EXCELLENT.rank < Severity.LOW.rank < Severity.CRITICAL.rank


class TestCluster:
    """Concept cluster coordinates."""

    def test_centroid_of_concepts(self, ice):
        """Each concept is a point; unknown concepts pull towards the Anchor."""
        coord = ice.cluster_coordinate(["get", "banana"])
        assert coord.as_tuple() == pytest.approx((0.125, 0.125, 0.125, 0.625))

    def test_empty_cluster_is_anchor(self, ice):
        assert ice.cluster_coordinate([]) == ANCHOR

    def test_analyze_cluster(self, ice):
        result = ice.analyze_cluster(["delete", "remove"])
        assert result.dominant is Dimension.POWER
        assert result.clarity == pytest.approx(1.0)
        assert result.concepts == ("delete", "remove")

    def test_analyze_empty_cluster(self, ice):
        """An empty cluster has no clarity."""
        result = ice.analyze_cluster([])
        assert result.clarity == 0.0
        assert result.coordinate == ANCHOR


class TestAnalyze:
    """Full ICE analysis."""

    def test_semantic_bug(self, ice):
        """A getter that deletes is maximally disharmonious."""
        result = ice.analyze(["getUserData"], ["javascript"], ["delete", "remove"])
        assert result.disharmony == pytest.approx(math.sqrt(2))
        assert result.severity is Severity.CRITICAL
        assert result.intent.dominant_dimension() is Dimension.WISDOM
        assert result.execution.dominant_dimension() is Dimension.POWER

    def test_harmonious(self, ice):
        result = ice.analyze(["deleteUser"], ["javascript"], ["delete", "remove"])
        assert result.disharmony == pytest.approx(0.0)
        assert result.severity is Severity.EXCELLENT

    def test_empty_execution_is_anchor(self, ice):
        result = ice.analyze(["getUser"], [], [])
        assert result.execution == ANCHOR
        assert result.disharmony == pytest.approx(math.sqrt(0.75))

    def test_disharmony_is_intent_execution_distance(self, ice):
        result = ice.analyze(["validate"], ["python"], ["send", "get"])
        assert result.disharmony == pytest.approx(result.intent.distance_to(result.execution))
        assert result.intent_execution_distance == result.disharmony

    def test_coherence_and_balance_at_anchor(self, ice):
        """All three at the Anchor: perfect coherence and balance."""
        result = ice.analyze_coordinates(ANCHOR, ANCHOR, ANCHOR)
        assert result.coherence == pytest.approx(1.0)
        assert result.balance == pytest.approx(1.0)

    def test_coherence_bounds(self, ice, pure):
        result = ice.analyze_coordinates(pure("love"), pure("justice"), pure("power"))
        assert 0.0 <= result.coherence <= 1.0
        assert 0.0 <= result.balance <= 1.0

    def test_benevolence_weights(self, ice, pure):
        """Love and Wisdom weigh 0.4, Power 0.05."""
        assert ice.analyze_coordinates(pure("love"), ANCHOR, pure("love")).benevolence == pytest.approx(0.4)
        assert ice.analyze_coordinates(pure("power"), ANCHOR, pure("power")).benevolence == pytest.approx(0.05)

    def test_custom_vocabulary_changes_result(self):
        """Project words change the verdict."""
        ice = ICEAnalyzer(Vocabulary({"settle": "power"}))
        result = ice.analyze(["settleInvoice"], [], ["delete"])
        assert result.disharmony == pytest.approx(0.0)


class TestHelpers:
    def test_semantic_similarity(self, ice):
        assert ice.semantic_similarity("get", "fetch") == pytest.approx(1.0)
        assert ice.semantic_similarity("get", "delete") == pytest.approx(0.0)

    def test_is_harmonious(self, ice):
        assert ice.is_harmonious("deleteUser", ["delete", "remove"])
        assert not ice.is_harmonious("getUser", ["delete"])

    def test_is_harmonious_threshold(self, ice):
        """A looser threshold accepts more."""
        assert ice.is_harmonious("getUser", ["delete"], threshold=2.0)

    def test_result_is_frozen(self, ice):
        result = ice.analyze(["get"], [], ["get"])
        with pytest.raises(AttributeError):
            result.disharmony = 1.0  # type: ignore[misc]

    def test_coordinates_are_normalized(self, ice):
        result = ice.analyze(["get fetch delete"], ["javascript"], ["save"])
        for coord in (result.intent, result.context, result.execution):
            assert isinstance(coord, Coordinate)
            assert sum(coord) == pytest.approx(1.0)
