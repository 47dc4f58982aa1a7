"""sqlbatch core: statement splitting and parameter binding.

- lexer.py: Regex lexer with pluggable lexical rules
- splitter.py: Splits SQL text into statements
- parameters.py: ParameterSet and caller parameter classification
- markers.py: Bind marker extraction per statement
- binder.py: Per-statement parameter binding and the batch pipeline
"""

from sqlbatch.core.binder import BoundStatement, StatementBinder, bind_statement, bind_statements, prepare_batch
from sqlbatch.core.lexer import Lexer, LexicalRules, SQLiteLexicalRules, Token, TokenType, tokenize
from sqlbatch.core.markers import MarkerExtractor, StatementMarkers, extract_markers
from sqlbatch.core.parameters import (
    Named,
    ParameterEntry,
    ParameterKind,
    ParameterSet,
    build_parameter_entries,
    build_parameter_set,
    coerce_parameter_set,
    convert_entries,
)
from sqlbatch.core.splitter import StatementSplitter, split_statements

__all__ = (
    "BoundStatement",
    "Lexer",
    "LexicalRules",
    "MarkerExtractor",
    "Named",
    "ParameterEntry",
    "ParameterKind",
    "ParameterSet",
    "SQLiteLexicalRules",
    "StatementBinder",
    "StatementMarkers",
    "StatementSplitter",
    "Token",
    "TokenType",
    "bind_statement",
    "bind_statements",
    "build_parameter_entries",
    "build_parameter_set",
    "coerce_parameter_set",
    "convert_entries",
    "extract_markers",
    "prepare_batch",
    "split_statements",
    "tokenize",
)
