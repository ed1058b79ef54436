"""Tests for HarmonyAnalyzer - source, file and project analysis."""

from pathlib import Path

import pytest

from code_harmonizer.analysis import FileStatus, HarmonyAnalyzer
from code_harmonizer.config import AnalysisConfig
from code_harmonizer.exceptions import InvalidPathError, UnsupportedLanguageError
from code_harmonizer.scanning.treesitter_parser import TREE_SITTER_AVAILABLE
from code_harmonizer.semantics import Dimension, Severity

requires_tree_sitter = pytest.mark.skipif(
    not TREE_SITTER_AVAILABLE, reason="tree-sitter not installed"
)


@pytest.fixture
def analyzer():
    return HarmonyAnalyzer(AnalysisConfig())


@pytest.fixture
def project(tmp_path, semantic_bug_js):
    root = tmp_path / "project"
    (root / "lib").mkdir(parents=True)
    (root / "b_users.js").write_text(semantic_bug_js)
    (root / "a_orders.js").write_text("function saveOrder(order) { db.insert(order); }\n")
    (root / "lib" / "tools.py").write_text("def read_config(path):\n    return open(path)\n")
    (root / "lib" / "broken.js").write_text("function broken( {\n")
    return root


class TestAnalyzeSource:
    def test_unsupported_language(self, analyzer):
        with pytest.raises(UnsupportedLanguageError):
            analyzer.analyze_source("x", "cobol")

    @requires_tree_sitter
    def test_semantic_bug(self, analyzer, semantic_bug_js):
        [fn] = analyzer.analyze_source(semantic_bug_js, "javascript")
        assert fn.name == "getUserData"
        assert fn.line == 4
        assert fn.column == 1
        assert fn.disharmony > 0.5
        assert fn.severity in (Severity.HIGH, Severity.CRITICAL)
        assert fn.execution.power == pytest.approx(1.0)
        assert fn.primary_misalignment is Dimension.POWER
        assert fn.suggestions
        assert len(fn.suggestions) <= 5
        assert len(fn.execution_map) == 2

    @requires_tree_sitter
    def test_getter_that_deletes_then_returns(self, analyzer):
        """Returning the id keeps half the body in wisdom; still a medium bug."""
        code = (
            "function getUserData(userId) {\n"
            "  database.delete(userId);\n"
            "  cache.remove(userId);\n"
            "  return userId;\n"
            "}\n"
        )
        [fn] = analyzer.analyze_source(code, "javascript")
        assert fn.intent.as_tuple() == (0.0, 0.0, 0.0, 1.0)
        assert fn.execution.as_tuple() == pytest.approx((0.0, 0.0, 0.5, 0.5))
        assert fn.disharmony == pytest.approx(0.7071067811865476)
        assert fn.disharmony > 0.5
        assert fn.severity is Severity.MEDIUM

    @requires_tree_sitter
    def test_suggestions_follow_execution(self, analyzer, semantic_bug_js):
        [fn] = analyzer.analyze_source(semantic_bug_js, "javascript")
        assert fn.suggestions[0].category is Dimension.POWER

    @requires_tree_sitter
    def test_no_suggestions_below_threshold(self, semantic_bug_js):
        analyzer = HarmonyAnalyzer(AnalysisConfig(disharmony_threshold=2.0))
        [fn] = analyzer.analyze_source(semantic_bug_js, "javascript")
        assert fn.suggestions == ()

    @requires_tree_sitter
    def test_suggestions_disabled(self, semantic_bug_js):
        analyzer = HarmonyAnalyzer(AnalysisConfig(suggest_names=False))
        [fn] = analyzer.analyze_source(semantic_bug_js, "javascript")
        assert fn.suggestions == ()

    @requires_tree_sitter
    def test_top_suggestions_and_context_noun(self, semantic_bug_js):
        config = AnalysisConfig(top_suggestions=2, context_noun="user")
        [fn] = HarmonyAnalyzer(config).analyze_source(semantic_bug_js, "javascript")
        assert len(fn.suggestions) == 2
        assert all(s.name.endswith("User") for s in fn.suggestions)

    @requires_tree_sitter
    def test_custom_vocabulary(self):
        """Project words change how bodies are scored."""
        code = "function getIt() { frobnicate(); }\n"
        plain = HarmonyAnalyzer(AnalysisConfig())
        custom = HarmonyAnalyzer(AnalysisConfig(custom_vocabulary={"frobnicate": "power"}))
        [before] = plain.analyze_source(code, "javascript")
        [after] = custom.analyze_source(code, "javascript")
        assert after.execution.power == pytest.approx(1.0)
        assert after.disharmony > before.disharmony

    @requires_tree_sitter
    def test_empty_source(self, analyzer):
        assert analyzer.analyze_source("", "javascript") == []


class TestAnalyzeFile:
    def test_minified_skipped(self, analyzer, tmp_path):
        path = tmp_path / "bundle.js"
        path.write_text("var a=1;" * 100)
        report = analyzer.analyze_file(path)
        assert report.status is FileStatus.SKIPPED
        assert "minified" in report.error
        assert report.functions == []

    def test_unknown_language_skipped(self, analyzer, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello\n")
        report = analyzer.analyze_file(path)
        assert report.status is FileStatus.SKIPPED
        assert report.language == "unknown"

    def test_undecodable_file(self, analyzer, tmp_path):
        path = tmp_path / "latin.js"
        path.write_bytes(b"// caf\xe9\nfunction f() {}\n")
        report = analyzer.analyze_file(path)
        assert report.status is FileStatus.ERROR
        assert not report.ok

    def test_missing_file(self, analyzer, tmp_path):
        report = analyzer.analyze_file(tmp_path / "gone.js")
        assert report.status is FileStatus.ERROR

    @requires_tree_sitter
    def test_syntax_error(self, analyzer, tmp_path):
        path = tmp_path / "broken.js"
        path.write_text("function broken( {\n")
        report = analyzer.analyze_file(path)
        assert report.status is FileStatus.ERROR
        assert report.error

    @requires_tree_sitter
    def test_success(self, analyzer, tmp_path, semantic_bug_js):
        path = tmp_path / "users.js"
        path.write_text(semantic_bug_js)
        report = analyzer.analyze_file(path)
        assert report.ok
        assert report.language == "javascript"
        assert report.metrics.total_functions == 1
        assert report.metrics.disharmonious_functions == 1
        assert report.elapsed_seconds >= 0


class TestAnalyzePaths:
    def test_missing_path(self, analyzer, tmp_path):
        with pytest.raises(InvalidPathError):
            analyzer.analyze_paths([tmp_path / "nope"])

    def test_empty_directory(self, analyzer, tmp_path):
        report = analyzer.analyze_paths([tmp_path])
        assert report.files == []
        assert report.summary.total_functions == 0

    @requires_tree_sitter
    def test_sorted_order(self, analyzer, project):
        report = analyzer.analyze_paths([project])
        names = [Path(f.path).name for f in report.files]
        assert names == ["a_orders.js", "b_users.js", "broken.js", "tools.py"]

    @requires_tree_sitter
    def test_workers_do_not_change_results(self, project):
        serial = HarmonyAnalyzer(AnalysisConfig(workers=1)).analyze_paths([project])
        parallel = HarmonyAnalyzer(AnalysisConfig(workers=4)).analyze_paths([project])
        assert [f.path for f in serial.files] == [f.path for f in parallel.files]
        assert [f.status for f in serial.files] == [f.status for f in parallel.files]
        assert [fn.disharmony for _, fn in serial.functions()] == [
            fn.disharmony for _, fn in parallel.functions()
        ]

    @requires_tree_sitter
    def test_summary(self, analyzer, project):
        summary = analyzer.analyze_paths([project]).summary
        assert summary.total_files == 4
        assert summary.analyzed_files == 3
        assert summary.error_files == 1
        assert summary.total_functions == 3
        assert summary.disharmonious_functions >= 1

    @requires_tree_sitter
    def test_errors_reported(self, analyzer, project):
        report = analyzer.analyze_paths([project])
        [(path, message)] = report.errors
        assert path.endswith("broken.js")
        assert message

    @requires_tree_sitter
    @pytest.mark.parametrize("workers", [1, 4])
    def test_unexpected_error_recorded(self, tmp_path, monkeypatch, workers):
        """A crash in one file becomes an error report; the rest still run."""
        root = tmp_path / "src"
        root.mkdir()
        for name in ("a.js", "b.js", "c.js"):
            (root / name).write_text("function saveOrder(order) { db.insert(order); }\n")
        analyzer = HarmonyAnalyzer(AnalysisConfig(workers=workers))
        real_analyze_file = analyzer.analyze_file

        def crash_on_b(path):
            if Path(path).name == "b.js":
                raise RuntimeError("grammar exploded")
            return real_analyze_file(path)

        monkeypatch.setattr(analyzer, "analyze_file", crash_on_b)
        report = analyzer.analyze_paths([root])

        assert [f.status for f in report.files] == [
            FileStatus.SUCCESS,
            FileStatus.ERROR,
            FileStatus.SUCCESS,
        ]
        [(path, message)] = report.errors
        assert path.endswith("b.js")
        assert message == "RuntimeError: grammar exploded"
        assert report.summary.total_functions == 2

    @requires_tree_sitter
    @pytest.mark.slow
    def test_large_project(self, tmp_path, semantic_bug_js):
        """Hundreds of files through the thread pool, in sorted order."""
        root = tmp_path / "big"
        for i in range(300):
            pkg = root / f"pkg{i % 10}"
            pkg.mkdir(parents=True, exist_ok=True)
            (pkg / f"users_{i:03d}.js").write_text(semantic_bug_js)
            (pkg / f"orders_{i:03d}.py").write_text(
                "def save_order(order):\n    db.insert(order)\n"
            )

        report = HarmonyAnalyzer(AnalysisConfig(workers=8)).analyze_paths([root])

        assert report.summary.total_files == 600
        assert report.summary.error_files == 0
        assert report.summary.total_functions == 600
        assert report.summary.disharmonious_functions >= 300
        assert [f.path for f in report.files] == sorted(f.path for f in report.files)
