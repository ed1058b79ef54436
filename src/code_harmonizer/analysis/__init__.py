"""Function, file and project analysis."""

from .engine import HarmonyAnalyzer
from .models import (
    DimensionDelta,
    DriftInterpretation,
    FileMetrics,
    FileReport,
    FileStatus,
    FunctionReport,
    ProjectReport,
    ProjectSummary,
    drift_severity,
    interpret_drift,
    primary_misalignment,
    trajectory,
)

__all__ = [
    "HarmonyAnalyzer",
    "DimensionDelta",
    "DriftInterpretation",
    "FileMetrics",
    "FileReport",
    "FileStatus",
    "FunctionReport",
    "ProjectReport",
    "ProjectSummary",
    "drift_severity",
    "interpret_drift",
    "primary_misalignment",
    "trajectory",
]
