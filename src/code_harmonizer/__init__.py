"""
Code Harmonizer - semantic bug detection

Maps what a function's name promises (intent) and what its body does
(execution) onto four semantic dimensions (Love, Justice, Power, Wisdom)
and reports the distance between them. A function called getUserData
that deletes records is a semantic bug even when it type-checks.
"""

__version__ = "0.1.0"

from .analysis import FunctionReport, HarmonyAnalyzer, ProjectReport
from .api import analyze, analyze_code
from .config import AnalysisConfig, load_config
from .semantics import Coordinate, Dimension, ICEAnalyzer, Severity, Vocabulary

__all__ = [
    "analyze",  # Main entry point
    "analyze_code",
    "HarmonyAnalyzer",
    "ProjectReport",
    "FunctionReport",
    "AnalysisConfig",
    "load_config",
    "ICEAnalyzer",
    "Vocabulary",
    "Coordinate",
    "Dimension",
    "Severity",
]
