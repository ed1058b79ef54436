"""Tests for scanning/rules.py - body construct dispatch tables."""

from code_harmonizer.scanning.rules import (
    CONTRIBUTIONS,
    RULES,
    Construct,
    dispatch_table,
)
from code_harmonizer.semantics import Dimension


class TestContributions:
    def test_every_construct_has_contribution(self):
        assert set(CONTRIBUTIONS) == set(Construct)

    def test_dynamic_constructs(self):
        """Calls and declarations take their words from the node."""
        dynamic = {c for c, contribution in CONTRIBUTIONS.items() if contribution.is_dynamic}
        assert dynamic == {Construct.CALL, Construct.DECLARATION}

    def test_fixed_words(self):
        assert CONTRIBUTIONS[Construct.CONDITIONAL].concepts == ("if", "conditional", "check")
        assert CONTRIBUTIONS[Construct.TRY].concepts == ("try", "catch", "handle")
        assert CONTRIBUTIONS[Construct.ASSIGNMENT].concepts == ("assign", "set", "modify")
        assert CONTRIBUTIONS[Construct.RETURN].concepts == ("return", "yield")

    def test_dimensions(self):
        assert CONTRIBUTIONS[Construct.THROW].dimension is Dimension.POWER
        assert CONTRIBUTIONS[Construct.TRY].dimension is Dimension.LOVE
        assert CONTRIBUTIONS[Construct.AWAIT].dimension is Dimension.WISDOM
        assert CONTRIBUTIONS[Construct.CALL].dimension is None

    def test_descriptions(self):
        assert CONTRIBUTIONS[Construct.CALL].description.format(name="save") == "Call to save"
        assert CONTRIBUTIONS[Construct.DECLARATION].description.format(name="const") == (
            "Variable declaration (const)"
        )


class TestDispatch:
    def test_ecmascript(self):
        table = dispatch_table("javascript")
        assert table["call_expression"] is Construct.CALL
        assert table["if_statement"] is Construct.CONDITIONAL
        assert table["yield_expression"] is Construct.RETURN
        assert table["lexical_declaration"] is Construct.DECLARATION

    def test_typescript_shares_rules(self):
        assert dispatch_table("typescript") == dispatch_table("javascript")
        assert dispatch_table("tsx") == dispatch_table("javascript")

    def test_only_plain_loops(self):
        """for-in/of and do-while contribute nothing."""
        table = dispatch_table("javascript")
        assert "for_in_statement" not in table
        assert "do_statement" not in table

    def test_python(self):
        table = dispatch_table("python")
        assert table["call"] is Construct.CALL
        assert table["raise_statement"] is Construct.THROW
        assert table["elif_clause"] is Construct.CONDITIONAL
        assert table["match_statement"] is Construct.SWITCH

    def test_unknown_language(self):
        assert dispatch_table("cobol") == {}

    def test_languages(self):
        assert set(RULES) == {"javascript", "typescript", "tsx", "python"}
