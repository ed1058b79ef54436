"""Source scanning: tree-sitter parsing and concept extraction."""

from .extractor import ConceptExtractor, context_concepts, intent_concepts
from .languages import LANGUAGE_EXTENSIONS, detect_language, find_source_files
from .models import ExecutionMapping, FunctionConcepts, FunctionRecord, SourceSpan
from .rules import CONTRIBUTIONS, RULES, Construct, ConstructRule, Contribution, dispatch_table
from .treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser, get_supported_languages

__all__ = [
    "ConceptExtractor",
    "context_concepts",
    "intent_concepts",
    "detect_language",
    "find_source_files",
    "LANGUAGE_EXTENSIONS",
    "FunctionRecord",
    "FunctionConcepts",
    "ExecutionMapping",
    "SourceSpan",
    "Construct",
    "ConstructRule",
    "Contribution",
    "CONTRIBUTIONS",
    "RULES",
    "dispatch_table",
    "TreeSitterParser",
    "TREE_SITTER_AVAILABLE",
    "get_supported_languages",
]
