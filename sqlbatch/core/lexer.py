"""Regex-driven SQL lexer.

Converts SQL text into an ordered stream of typed tokens. Only three token
kinds matter to the rest of the package: statement separators, bind
parameters and everything else. The remaining kinds exist so that separators
and markers inside string literals, quoted identifiers and comments are never
reported as such.

Concatenating the ``value`` of every token reproduces the input exactly.
"""

import re
from collections.abc import Generator
from enum import Enum
from re import Pattern
from typing import ClassVar, Optional

from mypy_extensions import mypyc_attr
from typing_extensions import TypeAlias

from sqlbatch.exceptions import LexicalError

__all__ = ("Lexer", "LexicalRules", "SQLiteLexicalRules", "Token", "TokenType", "tokenize")

TOKEN_SLOTS = ("type", "value", "line", "column", "position")


class TokenType(Enum):
    """Types of tokens recognized by the lexer."""

    COMMENT_LINE = "COMMENT_LINE"
    COMMENT_BLOCK = "COMMENT_BLOCK"
    STRING_LITERAL = "STRING_LITERAL"
    QUOTED_IDENTIFIER = "QUOTED_IDENTIFIER"
    SEPARATOR = "SEPARATOR"
    BIND_PARAMETER = "BIND_PARAMETER"
    WHITESPACE = "WHITESPACE"
    OTHER = "OTHER"


@mypyc_attr(allow_interpreted_subclasses=True)
class Token:
    """A token with its verbatim text and location."""

    __slots__ = TOKEN_SLOTS

    def __init__(self, type: TokenType, value: str, line: int, column: int, position: int) -> None:
        self.type = type
        self.value = value
        self.line = line
        self.column = column
        self.position = position

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.position) == (other.type, other.value, other.position)

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.position))


TokenPattern: TypeAlias = "tuple[TokenType, str]"
CompiledTokenPattern: TypeAlias = "tuple[TokenType, Pattern[str]]"

# Unicode letters or underscore, then word characters or "$", as SQLite accepts.
IDENTIFIER = r"[^\W\d][\w$]*"


@mypyc_attr(allow_interpreted_subclasses=True)
class LexicalRules:
    """Base lexical rule set.

    Subclasses change the statement separators or the bind parameter syntax by
    overriding the class attributes. The order of the token patterns matters:
    comments, literals and identifiers are matched before separators and bind
    parameters so that neither is ever found inside them.
    """

    name: ClassVar[str] = "generic"
    statement_separators: ClassVar["tuple[str, ...]"] = (";",)
    bind_parameter_pattern: ClassVar[str] = r"\?[0-9]*|[:@$]" + IDENTIFIER
    # Openers that must have a matching closer; an unmatched one is a lexical error.
    unterminated_openers: ClassVar["tuple[str, ...]"] = ("'", '"', "`", "[")

    def get_all_token_patterns(self) -> "list[TokenPattern]":
        """Assembles the complete, ordered list of token regex patterns."""
        return [
            (TokenType.COMMENT_LINE, r"--[^\n]*"),
            (TokenType.COMMENT_BLOCK, r"/\*[\s\S]*?(?:\*/|\Z)"),
            (TokenType.STRING_LITERAL, r"'(?:[^']|'')*'"),
            (TokenType.QUOTED_IDENTIFIER, r'"(?:[^"]|"")*"|`(?:[^`]|``)*`|\[[^\]]*\]'),
            (TokenType.SEPARATOR, "|".join(re.escape(s) for s in self.statement_separators)),
            (TokenType.BIND_PARAMETER, self.bind_parameter_pattern),
            (TokenType.WHITESPACE, r"\s+"),
            (TokenType.OTHER, IDENTIFIER + r"|[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?|."),
        ]


class SQLiteLexicalRules(LexicalRules):
    """SQLite lexical rules: ``?NNN``, ``:AAA``, ``@AAA`` and ``$AAA`` bind parameters."""

    name: ClassVar[str] = "sqlite"


_compiled_patterns: "dict[type[LexicalRules], list[CompiledTokenPattern]]" = {}


def _get_compiled_patterns(rules: LexicalRules) -> "list[CompiledTokenPattern]":
    """Compile a rule set's patterns once per rule-set class."""
    rules_type = type(rules)
    compiled = _compiled_patterns.get(rules_type)
    if compiled is None:
        compiled = [
            (token_type, re.compile(pattern, re.DOTALL)) for token_type, pattern in rules.get_all_token_patterns()
        ]
        _compiled_patterns[rules_type] = compiled
    return compiled


@mypyc_attr(allow_interpreted_subclasses=False)
class Lexer:
    """Tokenizes SQL text according to a :class:`LexicalRules` instance."""

    __slots__ = ("_compiled_patterns", "_rules")

    def __init__(self, rules: Optional[LexicalRules] = None) -> None:
        self._rules = rules or SQLiteLexicalRules()
        self._compiled_patterns = _get_compiled_patterns(self._rules)

    @property
    def rules(self) -> LexicalRules:
        return self._rules

    def tokenize(self, sql: str) -> Generator[Token, None, None]:
        """Yield the tokens of ``sql`` in order.

        Raises:
            LexicalError: A string literal or quoted identifier is never closed.
        """
        pos = 0
        line = 1
        line_start = 0

        while pos < len(sql):
            if sql[pos] in self._rules.unterminated_openers:
                token_type, match = self._match_at(sql, pos, stop_before=TokenType.SEPARATOR)
                if match is None:
                    msg = f"unterminated literal starting with {sql[pos]!r}"
                    raise LexicalError(msg, position=pos)
            else:
                token_type, match = self._match_at(sql, pos)
                if match is None:
                    msg = f"unexpected character {sql[pos]!r}"
                    raise LexicalError(msg, position=pos)

            value = match.group(0)
            column = pos - line_start + 1
            yield Token(type=token_type, value=value, line=line, column=column, position=pos)

            newlines = value.count("\n")
            if newlines > 0:
                line += newlines
                line_start = pos + value.rfind("\n") + 1
            pos = match.end()

    def _match_at(
        self, sql: str, pos: int, stop_before: Optional[TokenType] = None
    ) -> "tuple[TokenType, Optional[re.Match[str]]]":
        for token_type, pattern in self._compiled_patterns:
            if token_type is stop_before:
                break
            match = pattern.match(sql, pos)
            if match and match.end() > pos:
                return token_type, match
        return TokenType.OTHER, None


_default_lexer = Lexer()


def tokenize(sql: str, lexer: Optional[Lexer] = None) -> "list[Token]":
    """Tokenize ``sql`` with ``lexer`` or the default SQLite lexer."""
    return list((lexer or _default_lexer).tokenize(sql))
