"""Shared test fixtures for Code Harmonizer tests."""

import os

import pytest

from code_harmonizer.analysis.models import FunctionReport, primary_misalignment, trajectory
from code_harmonizer.semantics import ANCHOR, Coordinate, Dimension, ICEAnalyzer, Vocabulary


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and HARMONIZER_* vars out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("HARMONIZER_"):
            monkeypatch.delenv(key)
    return tmp_path


@pytest.fixture
def vocabulary():
    """Vocabulary without custom words or cache."""
    return Vocabulary()


@pytest.fixture
def ice(vocabulary):
    return ICEAnalyzer(vocabulary)


@pytest.fixture
def make_function():
    """Factory for FunctionReports with given intent and execution points."""
    analyzer = ICEAnalyzer(Vocabulary())

    def _make(name="fn", intent=ANCHOR, execution=ANCHOR, line=1):
        result = analyzer.analyze_coordinates(intent, ANCHOR, execution)
        deltas = trajectory(result.intent, result.execution)
        return FunctionReport(
            name=name,
            line=line,
            column=1,
            result=result,
            trajectory=deltas,
            primary_misalignment=primary_misalignment(deltas),
        )

    return _make


@pytest.fixture
def pure():
    """Shorthand for simplex vertices: pure("power")."""

    def _pure(name):
        return Coordinate.pure(Dimension.parse(name))

    return _pure


@pytest.fixture
def semantic_bug_js():
    """The canonical semantic bug: a getter that deletes."""
    return (
        "/**\n"
        " * Fetch the user's profile data.\n"
        " */\n"
        "function getUserData(userId) {\n"
        "  database.delete(userId);\n"
        "  cache.remove(userId);\n"
        "}\n"
    )
