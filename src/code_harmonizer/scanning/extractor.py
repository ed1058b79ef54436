"""ConceptExtractor: turns tree-sitter syntax trees into word lists.

For every function-like construct the extractor produces:
    intent     - the function name plus documentation words
    execution  - words contributed by the body, one traversal, via rules.py
    execution_map - which construct contributed which dimension, and where

Recognized functions (JavaScript / TypeScript):
    function foo() {}                  declarations, incl. generators
    const foo = function () {}         function expressions bound to a name
    const foo = () => {}               arrow functions bound to a name
    class A { foo() {} }, { foo() {} } methods with a plain identifier key

Recognized functions (Python):
    def foo(): ...                     functions and methods
    foo = lambda x: ...                lambdas bound to a name

Nested function bodies are part of the enclosing function's execution.

Usage:
    extractor = ConceptExtractor(Vocabulary())
    for concepts in extractor.extract_source(code, "javascript", "users.js"):
        print(concepts.name, concepts.execution)
"""

from __future__ import annotations

import logging
import re
import threading
from pathlib import PurePath
from typing import TYPE_CHECKING, Optional

from ..exceptions import ParseFailure, UnsupportedLanguageError
from ..semantics.vocabulary import Vocabulary
from .models import ExecutionMapping, FunctionConcepts, FunctionRecord, SourceSpan
from .rules import CONTRIBUTIONS, RULES, Construct, dispatch_table
from .treesitter_parser import TreeSitterParser

if TYPE_CHECKING:
    from .treesitter_parser import Node, Tree

logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"
DESTRUCTURED_PARAM = "param"

_DOC_MARKERS = re.compile(r"[*/]")
_PY_STRING_PREFIX = re.compile(r"^[rRuUbBfF]*")

_JS_DECLARATIONS = ("function_declaration", "generator_function_declaration")
_JS_EXPRESSIONS = ("function_expression", "function", "generator_function", "arrow_function")
_JS_GENERATORS = ("generator_function_declaration", "generator_function")
_JS_FUNCTION_NODES = _JS_DECLARATIONS + _JS_EXPRESSIONS + ("method_definition",)
_PY_FUNCTION_NODES = ("function_definition", "lambda")


def context_concepts(language: str, path: str) -> list[str]:
    """Context words for a file: language, "function" and the file name."""
    return [language, "function", PurePath(path).name]


def intent_concepts(name: str, docstring: Optional[str]) -> list[str]:
    """Function name followed by documentation words longer than 2 chars."""
    concepts = [name]
    if docstring:
        words = _DOC_MARKERS.sub("", docstring).split()
        concepts.extend(word for word in words if len(word) > 2)
    return concepts


def _text(node: Node, code: bytes) -> str:
    return code[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _span(node: Node) -> SourceSpan:
    return SourceSpan(
        start_line=node.start_point[0] + 1,
        start_column=node.start_point[1] + 1,
        end_line=node.end_point[0] + 1,
        end_column=node.end_point[1] + 1,
    )


def _has_token(node: Node, token: str) -> bool:
    return any(not child.is_named and child.type == token for child in node.children)


class ConceptExtractor:
    """Extracts intent and execution concepts from parsed source.

    Args:
        vocabulary: Used to resolve the dimension of called functions in
            the execution map
        parser: Optional parser to use for extract_source(); by default each
            thread lazily builds its own TreeSitterParser
    """

    def __init__(self, vocabulary: Vocabulary, parser: Optional[TreeSitterParser] = None) -> None:
        self.vocabulary = vocabulary
        self._shared_parser = parser
        self._local = threading.local()

    def _parser(self) -> TreeSitterParser:
        if self._shared_parser is not None:
            return self._shared_parser
        parser = getattr(self._local, "parser", None)
        if parser is None:
            parser = TreeSitterParser()
            self._local.parser = parser
        return parser

    # ── Entry points ───────────────────────────────────────────────

    def extract_source(
        self, code: str, language: str, path: str = "<string>"
    ) -> list[FunctionConcepts]:
        """Parse source text and extract every function.

        Raises:
            UnsupportedLanguageError: No rules exist for the language
            ParseFailure: Grammar unavailable or the source has syntax errors
        """
        self._require_language(language)
        code_bytes = code.encode("utf-8")

        tree = self._parser().parse(code_bytes, language)
        if tree is None:
            raise ParseFailure(path, language, "tree-sitter grammar not installed")
        return self.extract_tree(tree, code_bytes, language, path)

    def extract_tree(
        self, tree: Tree, code_bytes: bytes, language: str, path: str = "<string>"
    ) -> list[FunctionConcepts]:
        """Extract every function from an already-parsed tree, in source order."""
        self._require_language(language)
        root = tree.root_node
        if root.has_error:
            raise ParseFailure(path, language, "syntax error in source")

        results: list[FunctionConcepts] = []
        stack = [root]
        while stack:
            node = stack.pop()
            record = self._function_record(node, code_bytes, language)
            if record is not None:
                results.append(self._concepts_for(node, record, code_bytes, language))
            stack.extend(reversed(node.named_children))

        logger.debug(f"{path}: {len(results)} functions extracted")
        return results

    @staticmethod
    def _require_language(language: str) -> None:
        if language not in RULES:
            raise UnsupportedLanguageError(language, sorted(RULES))

    # ── Function discovery ─────────────────────────────────────────

    def _function_record(self, node: Node, code: bytes, language: str) -> Optional[FunctionRecord]:
        if language == "python":
            return self._python_record(node, code)
        return self._ecmascript_record(node, code)

    def _ecmascript_record(self, node: Node, code: bytes) -> Optional[FunctionRecord]:
        kind = node.type
        if kind not in _JS_FUNCTION_NODES:
            return None

        own_name = node.child_by_field_name("name")
        owner = node

        if kind in _JS_DECLARATIONS:
            name = _text(own_name, code) if own_name is not None else ANONYMOUS
        elif kind == "method_definition":
            if own_name is None or own_name.type != "property_identifier":
                return None
            name = _text(own_name, code)
        else:
            parent = node.parent
            if parent is not None and parent.type == "variable_declarator":
                target = parent.child_by_field_name("name")
                if target is None or target.type != "identifier":
                    return None
                name = _text(own_name, code) if own_name is not None else _text(target, code)
                owner = parent.parent if parent.parent is not None else parent
            elif parent is not None and parent.type == "export_statement" and kind != "arrow_function":
                # export default function () {}
                name = _text(own_name, code) if own_name is not None else ANONYMOUS
            else:
                return None

        if owner.parent is not None and owner.parent.type == "export_statement":
            owner = owner.parent

        return FunctionRecord(
            name=name,
            params=tuple(self._ecmascript_params(node, code)),
            span=_span(node),
            is_async=_has_token(node, "async"),
            is_generator=kind in _JS_GENERATORS or _has_token(node, "*"),
            is_arrow=kind == "arrow_function",
            docstring=self._jsdoc(owner, code),
        )

    def _python_record(self, node: Node, code: bytes) -> Optional[FunctionRecord]:
        if node.type == "function_definition":
            name_node = node.child_by_field_name("name")
            body = node.child_by_field_name("body")
            return FunctionRecord(
                name=_text(name_node, code) if name_node is not None else ANONYMOUS,
                params=tuple(self._python_params(node.child_by_field_name("parameters"), code)),
                span=_span(node),
                is_async=_has_token(node, "async"),
                is_generator=body is not None and self._contains_own_yield(body),
                docstring=self._python_docstring(body, code),
            )

        if node.type == "lambda":
            parent = node.parent
            if parent is None or parent.type != "assignment":
                return None
            target = parent.child_by_field_name("left")
            if target is None or target.type != "identifier":
                return None
            return FunctionRecord(
                name=_text(target, code),
                params=tuple(self._python_params(node.child_by_field_name("parameters"), code)),
                span=_span(node),
                is_arrow=True,
            )

        return None

    # ── Parameters ─────────────────────────────────────────────────

    def _ecmascript_params(self, node: Node, code: bytes) -> list[str]:
        single = node.child_by_field_name("parameter")
        if single is not None:
            return [_text(single, code)]

        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            return []
        return [
            self._ecmascript_param_name(child, code)
            for child in params_node.named_children
            if child.type != "comment"
        ]

    def _ecmascript_param_name(self, node: Node, code: bytes) -> str:
        kind = node.type
        if kind == "identifier":
            return _text(node, code)
        if kind == "rest_pattern":
            inner = node.named_children[0] if node.named_children else None
            if inner is not None and inner.type == "identifier":
                return _text(inner, code)
            return DESTRUCTURED_PARAM
        if kind in ("required_parameter", "optional_parameter"):
            # TypeScript: defaults and parameter properties count as patterns
            if node.child_by_field_name("value") is not None:
                return DESTRUCTURED_PARAM
            if any(child.type == "accessibility_modifier" for child in node.named_children):
                return DESTRUCTURED_PARAM
            pattern = node.child_by_field_name("pattern")
            if pattern is not None:
                return self._ecmascript_param_name(pattern, code)
        return DESTRUCTURED_PARAM

    def _python_params(self, params_node: Optional[Node], code: bytes) -> list[str]:
        if params_node is None:
            return []
        names: list[str] = []
        for child in params_node.named_children:
            if child.type in ("keyword_separator", "positional_separator", "comment"):
                continue
            names.append(self._python_param_name(child, code))
        return names

    def _python_param_name(self, node: Node, code: bytes) -> str:
        kind = node.type
        if kind == "identifier":
            return _text(node, code)
        if kind in ("default_parameter", "typed_default_parameter"):
            name = node.child_by_field_name("name")
            if name is not None:
                return self._python_param_name(name, code)
        elif kind in ("typed_parameter", "list_splat_pattern", "dictionary_splat_pattern"):
            if node.named_children:
                return self._python_param_name(node.named_children[0], code)
        return DESTRUCTURED_PARAM

    # ── Documentation ──────────────────────────────────────────────

    @staticmethod
    def _jsdoc(owner: Node, code: bytes) -> Optional[str]:
        """First /** block among the comments directly preceding owner."""
        comments: list[Node] = []
        sibling = owner.prev_named_sibling
        while sibling is not None and sibling.type == "comment":
            comments.append(sibling)
            sibling = sibling.prev_named_sibling

        for comment in reversed(comments):
            text = _text(comment, code)
            if text.startswith("/**"):
                return text[2:-2] if text.endswith("*/") else text[2:]
        return None

    @staticmethod
    def _python_docstring(body: Optional[Node], code: bytes) -> Optional[str]:
        if body is None or not body.named_children:
            return None
        first = body.named_children[0]
        if first.type != "expression_statement" or not first.named_children:
            return None
        literal = first.named_children[0]
        if literal.type != "string":
            return None
        raw = _PY_STRING_PREFIX.sub("", _text(literal, code))
        return raw.strip("\"'")

    @staticmethod
    def _contains_own_yield(body: Node) -> bool:
        stack = list(body.named_children)
        while stack:
            node = stack.pop()
            if node.type == "yield":
                return True
            if node.type in _PY_FUNCTION_NODES:
                continue
            stack.extend(node.named_children)
        return False

    # ── Execution ──────────────────────────────────────────────────

    def _concepts_for(
        self, node: Node, record: FunctionRecord, code: bytes, language: str
    ) -> FunctionConcepts:
        execution: list[str] = []
        mapping: list[ExecutionMapping] = []

        body = node.child_by_field_name("body")
        if body is not None:
            self._walk_body(body, code, language, execution, mapping)

        return FunctionConcepts(
            record=record,
            intent=tuple(intent_concepts(record.name, record.docstring)),
            execution=tuple(execution),
            execution_map=tuple(mapping),
        )

    def _walk_body(
        self,
        body: Node,
        code: bytes,
        language: str,
        execution: list[str],
        mapping: list[ExecutionMapping],
    ) -> None:
        table = dispatch_table(language)
        stack = [body]
        while stack:
            node = stack.pop()
            construct = table.get(node.type)
            if construct is not None and node.is_named:
                self._contribute(node, construct, code, execution, mapping)
            stack.extend(reversed(node.named_children))

    def _contribute(
        self,
        node: Node,
        construct: Construct,
        code: bytes,
        execution: list[str],
        mapping: list[ExecutionMapping],
    ) -> None:
        contribution = CONTRIBUTIONS[construct]
        line = node.start_point[0] + 1

        if construct is Construct.CALL:
            callee = self._callee_name(node, code)
            if not callee:
                return
            execution.append(callee)
            dimension = self.vocabulary.get_dimension(callee)
            if dimension is not None:
                mapping.append(
                    ExecutionMapping(
                        node.type, dimension, contribution.description.format(name=callee), line
                    )
                )
            return

        if construct is Construct.DECLARATION:
            keyword = self._declaration_keyword(node)
            execution.append(keyword)
            description = contribution.description.format(name=keyword)
        else:
            execution.extend(contribution.concepts)
            description = contribution.description

        if contribution.dimension is not None:
            mapping.append(ExecutionMapping(node.type, contribution.dimension, description, line))

    @staticmethod
    def _callee_name(node: Node, code: bytes) -> Optional[str]:
        callee = node.child_by_field_name("function")
        if callee is None:
            return None
        if callee.type == "identifier":
            return _text(callee, code)
        if callee.type == "member_expression":
            prop = callee.child_by_field_name("property")
            if prop is not None and prop.type == "property_identifier":
                return _text(prop, code)
        elif callee.type == "attribute":
            attr = callee.child_by_field_name("attribute")
            if attr is not None and attr.type == "identifier":
                return _text(attr, code)
        return None

    @staticmethod
    def _declaration_keyword(node: Node) -> str:
        if node.type == "variable_declaration":
            return "var"
        for child in node.children:
            if not child.is_named:
                return child.type
        return "let"
