"""SQL statement splitter.

Splits a string holding several ``;``-separated statements into the
individual statements. Splitting is purely lexical: a separator inside a
string literal, quoted identifier or comment never ends a statement, because
the lexer never reports one there.
"""

from typing import Optional

from mypy_extensions import mypyc_attr

from sqlbatch.core.lexer import Lexer, TokenType

__all__ = ("StatementSplitter", "split_statements")


@mypyc_attr(allow_interpreted_subclasses=False)
class StatementSplitter:
    """Splits SQL text into trimmed, non-empty statements."""

    __slots__ = ("_lexer",)

    def __init__(self, lexer: Optional[Lexer] = None) -> None:
        self._lexer = lexer or Lexer()

    def split(self, sql: str) -> "list[str]":
        """Split ``sql`` into statements.

        Token text between separators is kept verbatim, including comments and
        inner whitespace; only the separators and the whitespace around each
        statement are dropped. Empty segments, such as the one after a trailing
        separator, are discarded.

        Raises:
            LexicalError: The lexer could not tokenize ``sql``.
        """
        statements: list[str] = []
        current_statement_chars: list[str] = []

        for token in self._lexer.tokenize(sql):
            if token.type is not TokenType.SEPARATOR:
                current_statement_chars.append(token.value)
                continue

            statement = "".join(current_statement_chars).strip()
            if statement:
                statements.append(statement)
            current_statement_chars = []

        statement = "".join(current_statement_chars).strip()
        if statement:
            statements.append(statement)

        return statements


def split_statements(sql: str, lexer: Optional[Lexer] = None) -> "list[str]":
    """Split a SQL script into individual statements.

    Args:
        sql: The SQL text to split
        lexer: Lexer to use; defaults to SQLite lexical rules

    Returns:
        The statements in source order, trimmed, without separators
    """
    return StatementSplitter(lexer).split(sql)
