"""Tests for the public Python API."""

import pytest

import code_harmonizer
from code_harmonizer import analyze, analyze_code
from code_harmonizer.exceptions import ConfigurationError, UnsupportedLanguageError
from code_harmonizer.scanning.treesitter_parser import TREE_SITTER_AVAILABLE
from code_harmonizer.semantics import Dimension

requires_tree_sitter = pytest.mark.skipif(
    not TREE_SITTER_AVAILABLE, reason="tree-sitter not installed"
)


class TestExports:
    def test_public_names(self):
        for name in (
            "analyze",
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
        ):
            assert hasattr(code_harmonizer, name), name

    def test_version(self):
        assert isinstance(code_harmonizer.__version__, str)


class TestAnalyzeCode:
    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError):
            analyze_code("x", "cobol")

    def test_bad_override(self):
        with pytest.raises(ConfigurationError):
            analyze_code("x", "javascript", top_suggestions=0)

    @requires_tree_sitter
    def test_semantic_bug(self, semantic_bug_js):
        [fn] = analyze_code(semantic_bug_js, "javascript", context_noun="user")
        assert fn.name == "getUserData"
        assert fn.primary_misalignment is Dimension.POWER
        assert all(s.name.endswith("User") for s in fn.suggestions)

    @requires_tree_sitter
    def test_python_source(self):
        code = "def delete_user(user_id):\n    db.delete(user_id)\n"
        [fn] = analyze_code(code, "python", path="users.py")
        assert fn.name == "delete_user"
        assert fn.disharmony < 0.5


class TestAnalyze:
    @requires_tree_sitter
    def test_paths(self, tmp_path, semantic_bug_js):
        (tmp_path / "users.js").write_text(semantic_bug_js)
        report = analyze(tmp_path)
        assert report.summary.total_functions == 1
        [(file_report, fn)] = report.functions()
        assert file_report.path.endswith("users.js")
        assert fn.name == "getUserData"

    @requires_tree_sitter
    def test_defaults_to_cwd(self, isolated_config, semantic_bug_js):
        (isolated_config / "users.js").write_text(semantic_bug_js)
        report = analyze()
        assert [fn.name for _, fn in report.functions()] == ["getUserData"]

    @requires_tree_sitter
    def test_config_file_applied(self, tmp_path, semantic_bug_js):
        (tmp_path / "users.js").write_text(semantic_bug_js)
        config = tmp_path / "custom.toml"
        config.write_text("disharmony_threshold = 2.0\n")
        report = analyze(tmp_path / "users.js", config_file=config)
        assert report.summary.disharmonious_functions == 0
        [(_, fn)] = report.functions()
        assert fn.suggestions == ()
