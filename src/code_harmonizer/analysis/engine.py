"""HarmonyAnalyzer: runs extraction, ICE scoring and naming over files.

Usage:
    analyzer = HarmonyAnalyzer(load_config())
    report = analyzer.analyze_paths(["src/"])
    for file_report, fn in report.functions():
        print(file_report.path, fn.name, fn.severity.value)
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Union

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, HarmonizerError, ParseFailure, UnsupportedLanguageError
from ..scanning.extractor import ConceptExtractor, context_concepts
from ..scanning.languages import detect_language, find_source_files
from ..scanning.models import FunctionConcepts
from ..semantics.cache import TextCache
from ..semantics.ice import ICEAnalyzer
from ..semantics.naming import ActionVerbIndex
from ..semantics.vocabulary import Vocabulary
from .models import (
    FileMetrics,
    FileReport,
    FileStatus,
    FunctionReport,
    ProjectReport,
    primary_misalignment,
    trajectory,
)

logger = logging.getLogger(__name__)

# Default worker count: use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

PathLike = Union[Path, str]


class HarmonyAnalyzer:
    """Facade over the extraction and scoring pipeline.

    Vocabulary, extractor, ICE analyzer and verb index are built once and
    shared by all workers; none of them is mutated during analysis.
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        vocabulary: Optional[Vocabulary] = None,
        verb_index: Optional[ActionVerbIndex] = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        if vocabulary is None:
            cache = TextCache(self.config.cache_size) if self.config.cache_enabled else None
            vocabulary = Vocabulary(self.config.vocabulary, cache=cache)
        self.vocabulary = vocabulary
        self.extractor = ConceptExtractor(vocabulary)
        self.ice = ICEAnalyzer(vocabulary)
        self.verb_index = verb_index or ActionVerbIndex()

    # ── Functions ──────────────────────────────────────────────────

    def analyze_function(self, concepts: FunctionConcepts, context: Sequence[str]) -> FunctionReport:
        """Score one extracted function."""
        result = self.ice.analyze(concepts.intent, context, concepts.execution)
        deltas = trajectory(result.intent, result.execution)

        suggestions: tuple = ()
        if self.config.suggest_names and result.disharmony > self.config.disharmony_threshold:
            suggestions = tuple(
                self.verb_index.suggest_names(
                    result.execution,
                    context_noun=self.config.context_noun,
                    top_n=self.config.top_suggestions,
                )
            )

        span = concepts.record.span
        return FunctionReport(
            name=concepts.name,
            line=span.start_line,
            column=span.start_column,
            result=result,
            trajectory=deltas,
            primary_misalignment=primary_misalignment(deltas),
            suggestions=suggestions,
            execution_map=concepts.execution_map,
        )

    def analyze_source(self, code: str, language: str, path: str = "<string>") -> list[FunctionReport]:
        """Analyze every function in a piece of source text.

        Raises:
            UnsupportedLanguageError: No rules exist for the language
            ParseFailure: The source cannot be parsed
        """
        context = context_concepts(language, path)
        return [
            self.analyze_function(concepts, context)
            for concepts in self.extractor.extract_source(code, language, path)
        ]

    # ── Files ──────────────────────────────────────────────────────

    def analyze_file(self, path: PathLike) -> FileReport:
        """Analyze one file. Never raises for per-file problems."""
        start = time.perf_counter()
        filepath = Path(path)
        language = detect_language(filepath)
        report = FileReport(path=str(filepath), language=language, status=FileStatus.SUCCESS)

        try:
            code = self._read(filepath)
            if self._looks_minified(code):
                report.status = FileStatus.SKIPPED
                report.error = "Skipped: appears to be minified or generated code"
                logger.info(f"Skipped (minified): {filepath}")
            else:
                report.functions = self.analyze_source(code, language, str(filepath))
                report.metrics = FileMetrics.from_functions(
                    report.functions, self.config.disharmony_threshold
                )
        except UnsupportedLanguageError as e:
            report.status = FileStatus.SKIPPED
            report.error = str(e)
            logger.info(f"Skipped (unsupported language): {filepath}")
        except (FileAccessError, ParseFailure) as e:
            report.status = FileStatus.ERROR
            report.error = str(e)
            logger.debug(f"Error analyzing {filepath}: {e}")

        report.elapsed_seconds = time.perf_counter() - start
        return report

    @staticmethod
    def _read(filepath: Path) -> str:
        try:
            return filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(filepath, str(e))

    def _looks_minified(self, code: str) -> bool:
        lines = code.split("\n")
        return len(code) / len(lines) > self.config.minified_line_length

    # ── Projects ───────────────────────────────────────────────────

    def analyze_paths(self, paths: Iterable[PathLike]) -> ProjectReport:
        """Analyze files and directories, in parallel.

        Directories are expanded to supported source files. Results are
        returned in sorted path order regardless of completion order.
        """
        start = time.perf_counter()
        files = find_source_files(paths, self.config.exclude_patterns)
        logger.debug(f"Found {len(files)} files to analyze")

        reports: dict[Path, FileReport] = {}
        workers = self.config.workers or _DEFAULT_WORKERS

        if workers == 1 or len(files) < 2:
            for filepath in files:
                try:
                    reports[filepath] = self.analyze_file(filepath)
                except Exception as e:
                    reports[filepath] = self._failed(filepath, e)
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {executor.submit(self.analyze_file, fp): fp for fp in files}
                for future in as_completed(futures):
                    fp = futures[future]
                    try:
                        reports[fp] = future.result()
                    except Exception as e:
                        reports[fp] = self._failed(fp, e)

        return ProjectReport(
            files=[reports[fp] for fp in files],
            elapsed_seconds=time.perf_counter() - start,
        )

    @staticmethod
    def _failed(filepath: Path, error: Exception) -> FileReport:
        """Error report for a file whose analysis raised unexpectedly."""
        if isinstance(error, HarmonizerError):
            logger.debug(f"Error analyzing {filepath}: {error}")
            message = str(error)
        else:
            logger.debug(f"Unexpected error analyzing {filepath}", exc_info=True)
            message = f"{error.__class__.__name__}: {error}"
        return FileReport(
            path=str(filepath),
            language=detect_language(filepath),
            status=FileStatus.ERROR,
            error=message,
        )
