"""Models produced by concept extraction.

FunctionRecord describes one function-like construct as found in the
source. FunctionConcepts pairs it with the intent and execution word lists
that feed ICE analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..semantics.models import Dimension


@dataclass(frozen=True)
class SourceSpan:
    """Location of a construct. Lines and columns are 1-indexed."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int


@dataclass(frozen=True)
class FunctionRecord:
    """A function, method, arrow function or lambda.

    Attributes:
        name: Function name, or "anonymous"
        params: Parameter names ("param" for destructured parameters)
        is_async: Declared async
        is_generator: Generator function
        is_arrow: Arrow function or lambda
        docstring: JSDoc block or Python docstring, if any
        span: Source location
    """

    name: str
    params: tuple[str, ...]
    span: SourceSpan
    is_async: bool = False
    is_generator: bool = False
    is_arrow: bool = False
    docstring: Optional[str] = None


@dataclass(frozen=True)
class ExecutionMapping:
    """One body construct and the dimension it contributed."""

    node_kind: str
    dimension: Dimension
    description: str
    line: int


@dataclass(frozen=True)
class FunctionConcepts:
    """Extractor output for a single function.

    Attributes:
        record: The function as found in source
        intent: Name plus documentation words
        execution: Words contributed by the body
        execution_map: Diagnostic node -> dimension entries
    """

    record: FunctionRecord
    intent: tuple[str, ...]
    execution: tuple[str, ...]
    execution_map: tuple[ExecutionMapping, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.record.name
