"""Body construct rules: which syntax nodes add which execution concepts.

Each language maps tree-sitter node kinds onto a small set of Constructs.
Every Construct has exactly one Contribution describing the words it adds.
Node kinds that are not listed contribute nothing.

Two constructs take their words from the node itself:
    CALL         the callee name (identifier, or property of a member access)
    DECLARATION  the mutability keyword (const / let / var)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..semantics.models import Dimension


class Construct(Enum):
    CALL = "call"
    CONDITIONAL = "conditional"
    SWITCH = "switch"
    FOR_LOOP = "for_loop"
    WHILE_LOOP = "while_loop"
    RETURN = "return"
    THROW = "throw"
    TRY = "try"
    ASSIGNMENT = "assignment"
    DECLARATION = "declaration"
    AWAIT = "await"


@dataclass(frozen=True)
class Contribution:
    """Words and mapping entry added by one construct.

    Attributes:
        concepts: Fixed words; empty when the words come from the node
        dimension: Mapped dimension; None when resolved through the vocabulary
        description: Mapping description, may reference {name}
    """

    concepts: tuple[str, ...]
    dimension: Optional[Dimension]
    description: str

    @property
    def is_dynamic(self) -> bool:
        return not self.concepts


@dataclass(frozen=True)
class ConstructRule:
    node_kind: str
    construct: Construct


CONTRIBUTIONS: Mapping[Construct, Contribution] = {
    Construct.CALL: Contribution((), None, "Call to {name}"),
    Construct.CONDITIONAL: Contribution(
        ("if", "conditional", "check"), Dimension.JUSTICE, "Conditional logic"
    ),
    Construct.SWITCH: Contribution(("switch", "case", "conditional"), Dimension.JUSTICE, "Switch logic"),
    Construct.FOR_LOOP: Contribution(("for", "loop", "iterate"), Dimension.JUSTICE, "For loop"),
    Construct.WHILE_LOOP: Contribution(("while", "loop"), Dimension.JUSTICE, "While loop"),
    Construct.RETURN: Contribution(("return", "yield"), Dimension.WISDOM, "Return value"),
    Construct.THROW: Contribution(("throw", "error"), Dimension.POWER, "Throw exception"),
    Construct.TRY: Contribution(("try", "catch", "handle"), Dimension.LOVE, "Error handling"),
    Construct.ASSIGNMENT: Contribution(("assign", "set", "modify"), Dimension.POWER, "State mutation"),
    Construct.DECLARATION: Contribution((), Dimension.WISDOM, "Variable declaration ({name})"),
    Construct.AWAIT: Contribution(("await", "async"), Dimension.WISDOM, "Await async operation"),
}

# for...in, for...of and do...while contribute nothing.
_ECMASCRIPT_RULES = (
    ConstructRule("call_expression", Construct.CALL),
    ConstructRule("if_statement", Construct.CONDITIONAL),
    ConstructRule("switch_statement", Construct.SWITCH),
    ConstructRule("for_statement", Construct.FOR_LOOP),
    ConstructRule("while_statement", Construct.WHILE_LOOP),
    ConstructRule("return_statement", Construct.RETURN),
    ConstructRule("yield_expression", Construct.RETURN),
    ConstructRule("throw_statement", Construct.THROW),
    ConstructRule("try_statement", Construct.TRY),
    ConstructRule("assignment_expression", Construct.ASSIGNMENT),
    ConstructRule("augmented_assignment_expression", Construct.ASSIGNMENT),
    ConstructRule("lexical_declaration", Construct.DECLARATION),
    ConstructRule("variable_declaration", Construct.DECLARATION),
    ConstructRule("await_expression", Construct.AWAIT),
)

_PYTHON_RULES = (
    ConstructRule("call", Construct.CALL),
    ConstructRule("if_statement", Construct.CONDITIONAL),
    ConstructRule("elif_clause", Construct.CONDITIONAL),
    ConstructRule("match_statement", Construct.SWITCH),
    ConstructRule("for_statement", Construct.FOR_LOOP),
    ConstructRule("while_statement", Construct.WHILE_LOOP),
    ConstructRule("return_statement", Construct.RETURN),
    ConstructRule("yield", Construct.RETURN),
    ConstructRule("raise_statement", Construct.THROW),
    ConstructRule("try_statement", Construct.TRY),
    ConstructRule("assignment", Construct.ASSIGNMENT),
    ConstructRule("augmented_assignment", Construct.ASSIGNMENT),
    ConstructRule("await", Construct.AWAIT),
)

RULES: Mapping[str, tuple[ConstructRule, ...]] = {
    "javascript": _ECMASCRIPT_RULES,
    "typescript": _ECMASCRIPT_RULES,
    "tsx": _ECMASCRIPT_RULES,
    "python": _PYTHON_RULES,
}

_DISPATCH: dict[str, dict[str, Construct]] = {
    language: {rule.node_kind: rule.construct for rule in rules} for language, rules in RULES.items()
}


def dispatch_table(language: str) -> Mapping[str, Construct]:
    """Node kind -> Construct for a language (empty if unknown)."""
    return _DISPATCH.get(language, {})


def _check_rules() -> None:
    missing = [c for c in Construct if c not in CONTRIBUTIONS]
    if missing:
        raise RuntimeError(f"Constructs without contribution: {missing}")
    for language, rules in RULES.items():
        kinds = [rule.node_kind for rule in rules]
        if len(kinds) != len(set(kinds)):
            raise RuntimeError(f"Duplicate node kinds in {language} rules")


_check_rules()
