"""Report models for function, file and project analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..scanning.models import ExecutionMapping
from ..semantics.coordinates import Coordinate
from ..semantics.models import DIMENSIONS, Dimension, DisharmonyResult, Severity
from ..semantics.naming import NamingSuggestion


class FileStatus(Enum):
    SUCCESS = "success"
    ERROR = "error"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class DimensionDelta:
    """Intent vs. execution on one axis. delta = execution - intent."""

    dimension: Dimension
    intent: float
    execution: float

    @property
    def delta(self) -> float:
        return self.execution - self.intent

    @property
    def magnitude(self) -> str:
        """negligible (< 0.1), moderate (< 0.3) or significant."""
        size = abs(self.delta)
        if size < 0.1:
            return "negligible"
        if size < 0.3:
            return "moderate"
        return "significant"


def trajectory(intent: Coordinate, execution: Coordinate) -> tuple[DimensionDelta, ...]:
    """Per-dimension drift from intent to execution, in L, J, P, W order."""
    return tuple(DimensionDelta(dim, intent[dim], execution[dim]) for dim in DIMENSIONS)


def primary_misalignment(deltas: tuple[DimensionDelta, ...]) -> Dimension:
    """Dimension with the largest absolute delta; ties keep the earlier one."""
    best = deltas[0]
    for candidate in deltas[1:]:
        if abs(candidate.delta) > abs(best.delta):
            best = candidate
    return best.dimension


def drift_severity(magnitude: float) -> str:
    """Label for the size of the primary drift."""
    if magnitude < 0.1:
        return "negligible"
    if magnitude < 0.2:
        return "minor"
    if magnitude < 0.3:
        return "moderate"
    if magnitude < 0.5:
        return "significant"
    return "severe"


# (lost dimension, gained dimension) -> what the mismatch usually means
_RECOMMENDATIONS = {
    (Dimension.WISDOM, Dimension.POWER): (
        "Name suggests data retrieval, but code modifies state.",
        "Consider renaming to reflect the actual transformation.",
    ),
    (Dimension.JUSTICE, Dimension.POWER): (
        "Name suggests validation, but code executes actions.",
        "Separate validation from execution logic.",
    ),
    (Dimension.POWER, Dimension.WISDOM): (
        "Name suggests action, but code primarily gathers information.",
        "Rename to reflect the information-gathering nature.",
    ),
}

ALIGNED_DISTANCE = 0.3
SHIFT_THRESHOLD = 0.1
RECOMMENDATION_SHIFT = 0.2


@dataclass(frozen=True)
class DriftInterpretation:
    """Human-readable reading of an intent/execution trajectory.

    Attributes:
        primary: Dimension that drifted furthest
        magnitude: Absolute delta of the primary dimension
        severity: negligible, minor, moderate, significant or severe
        increased: Dimensions the body has more of than the name suggests
        decreased: Dimensions the name promises but the body lacks
        aligned: True when intent and execution are close
        recommendation: Advice lines, empty when aligned
    """

    primary: Dimension
    magnitude: float
    severity: str
    increased: tuple[Dimension, ...]
    decreased: tuple[Dimension, ...]
    aligned: bool
    recommendation: tuple[str, ...] = ()

    def lines(self) -> list[str]:
        if self.aligned:
            return ["Name and implementation are well-aligned."]
        out = ["Significant semantic drift detected!"]
        if self.increased:
            names = ", ".join(d.value.upper() for d in self.increased)
            out.append(f"The code INCREASES {names} beyond what the name suggests.")
        if self.decreased:
            names = ", ".join(d.value.upper() for d in self.decreased)
            out.append(f"The code DECREASES {names} compared to what the name promises.")
        out.extend(self.recommendation)
        return out


def interpret_drift(deltas: tuple[DimensionDelta, ...], distance: float) -> DriftInterpretation:
    """Interpret a trajectory.

    The recommendation is keyed on the dimension the body lost most
    (the name's promise) and the dimension it gained most. Pairs without
    a specific reading fall back to pointing at the primary drift.
    """
    primary = primary_misalignment(deltas)
    magnitude = max(abs(d.delta) for d in deltas)
    increased = tuple(d.dimension for d in deltas if d.delta > SHIFT_THRESHOLD)
    decreased = tuple(d.dimension for d in deltas if d.delta < -SHIFT_THRESHOLD)
    aligned = distance < ALIGNED_DISTANCE

    recommendation: tuple[str, ...] = ()
    if not aligned:
        lost = min(deltas, key=lambda d: d.delta)
        gained = max(deltas, key=lambda d: d.delta)
        recommendation = _RECOMMENDATIONS.get((lost.dimension, gained.dimension), ())
        if recommendation and gained.delta <= RECOMMENDATION_SHIFT:
            recommendation = ()
        if not recommendation:
            recommendation = (
                f"Consider aligning the name with the {primary.value.upper()} dimension.",
            )

    return DriftInterpretation(
        primary=primary,
        magnitude=magnitude,
        severity=drift_severity(magnitude),
        increased=increased,
        decreased=decreased,
        aligned=aligned,
        recommendation=recommendation,
    )


@dataclass(frozen=True)
class FunctionReport:
    """Analysis of a single function.

    Attributes:
        name: Function name
        line: Start line (1-indexed)
        column: Start column (1-indexed)
        result: Full ICE result
        trajectory: Per-dimension intent/execution deltas
        primary_misalignment: Dimension that drifted furthest
        suggestions: Ranked names (only for disharmonious functions)
        execution_map: Which body constructs contributed what
    """

    name: str
    line: int
    column: int
    result: DisharmonyResult
    trajectory: tuple[DimensionDelta, ...]
    primary_misalignment: Dimension
    suggestions: tuple[NamingSuggestion, ...] = ()
    execution_map: tuple[ExecutionMapping, ...] = ()

    @property
    def disharmony(self) -> float:
        return self.result.disharmony

    @property
    def severity(self) -> Severity:
        return self.result.severity

    @property
    def collapsed_severity(self) -> Severity:
        return self.result.severity.collapsed()

    @property
    def intent(self) -> Coordinate:
        return self.result.intent

    @property
    def execution(self) -> Coordinate:
        return self.result.execution

    def interpretation(self) -> DriftInterpretation:
        return interpret_drift(self.trajectory, self.disharmony)


@dataclass(frozen=True)
class FileMetrics:
    total_functions: int = 0
    disharmonious_functions: int = 0
    average_disharmony: float = 0.0
    max_disharmony: float = 0.0
    severity_counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_functions(cls, functions: list[FunctionReport], threshold: float) -> FileMetrics:
        if not functions:
            return cls()
        scores = [f.disharmony for f in functions]
        counts = {severity.value: 0 for severity in Severity}
        for f in functions:
            counts[f.severity.value] += 1
        return cls(
            total_functions=len(functions),
            disharmonious_functions=sum(1 for s in scores if s > threshold),
            average_disharmony=sum(scores) / len(scores),
            max_disharmony=max(scores),
            severity_counts=counts,
        )


@dataclass
class FileReport:
    """Analysis of one source file.

    Error and skipped files carry no functions and are excluded from
    project statistics.
    """

    path: str
    language: str
    status: FileStatus
    functions: list[FunctionReport] = field(default_factory=list)
    metrics: FileMetrics = field(default_factory=FileMetrics)
    error: Optional[str] = None
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status is FileStatus.SUCCESS


@dataclass(frozen=True)
class ProjectSummary:
    total_files: int
    analyzed_files: int
    error_files: int
    skipped_files: int
    total_functions: int
    disharmonious_functions: int
    average_disharmony: float
    max_disharmony: float
    elapsed_seconds: float


@dataclass
class ProjectReport:
    """Analysis of a set of files."""

    files: list[FileReport] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def summary(self) -> ProjectSummary:
        analyzed = [f for f in self.files if f.status is FileStatus.SUCCESS]
        total_functions = sum(f.metrics.total_functions for f in analyzed)
        # Weighted by function count, so large files count proportionally
        total_disharmony = sum(
            f.metrics.average_disharmony * f.metrics.total_functions for f in analyzed
        )
        return ProjectSummary(
            total_files=len(self.files),
            analyzed_files=len(analyzed),
            error_files=sum(1 for f in self.files if f.status is FileStatus.ERROR),
            skipped_files=sum(1 for f in self.files if f.status is FileStatus.SKIPPED),
            total_functions=total_functions,
            disharmonious_functions=sum(f.metrics.disharmonious_functions for f in analyzed),
            average_disharmony=total_disharmony / total_functions if total_functions else 0.0,
            max_disharmony=max((f.metrics.max_disharmony for f in analyzed), default=0.0),
            elapsed_seconds=self.elapsed_seconds,
        )

    @property
    def errors(self) -> list[tuple[str, str]]:
        """(path, message) for every file that failed."""
        return [(f.path, f.error or "Unknown error") for f in self.files if f.status is FileStatus.ERROR]

    def functions(self) -> list[tuple[FileReport, FunctionReport]]:
        """All analyzed functions with their file, in file order."""
        return [(file, fn) for file in self.files for fn in file.functions]

    def worst_severity(self) -> Optional[Severity]:
        worst: Optional[Severity] = None
        for _, fn in self.functions():
            if worst is None or fn.severity.rank > worst.rank:
                worst = fn.severity
        return worst
