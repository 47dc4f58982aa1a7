"""Bind marker extraction.

Reads a single statement's bind markers and reports the shape of parameters
it needs: the set of required names and the number of bare ``?`` slots.
"""

import re
from typing import ClassVar, Optional

from mypy_extensions import mypyc_attr

from sqlbatch.core.lexer import Lexer, TokenType
from sqlbatch.exceptions import InvalidNamedParameterPrefixError, UnsupportedIndexedPositionalError

__all__ = ("NAMED_PARAMETER_PREFIXES", "MarkerExtractor", "StatementMarkers", "extract_markers")

NAMED_PARAMETER_PREFIXES = (":", "@", "$")


@mypyc_attr(allow_interpreted_subclasses=False)
class StatementMarkers:
    """Parameter shape required by one statement.

    Attributes:
        names: Required parameter names, sigils stripped
        positional_count: Number of bare ``?`` markers
    """

    __slots__ = ("names", "positional_count")

    def __init__(self, names: "frozenset[str]" = frozenset(), positional_count: int = 0) -> None:
        self.names = names
        self.positional_count = positional_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatementMarkers):
            return NotImplemented
        return self.names == other.names and self.positional_count == other.positional_count

    def __hash__(self) -> int:
        return hash((self.names, self.positional_count))

    def __repr__(self) -> str:
        return f"StatementMarkers(names={set(self.names)!r}, positional_count={self.positional_count})"


@mypyc_attr(allow_interpreted_subclasses=False)
class MarkerExtractor:
    """Classifies the bind parameter tokens of a statement."""

    __slots__ = ("_lexer",)

    _POSITIONAL_PATTERN: ClassVar["re.Pattern[str]"] = re.compile(r"\?([0-9]*)")

    def __init__(self, lexer: Optional[Lexer] = None) -> None:
        self._lexer = lexer or Lexer()

    def extract(self, stmt: str) -> StatementMarkers:
        """Extract the required names and positional slot count of ``stmt``.

        Raises:
            UnsupportedIndexedPositionalError: A ``?NNN`` marker was found.
            InvalidNamedParameterPrefixError: A named marker has an unknown sigil.
            LexicalError: The lexer could not tokenize ``stmt``.
        """
        names: set[str] = set()
        positional_count = 0

        for token in self._lexer.tokenize(stmt):
            if token.type is not TokenType.BIND_PARAMETER:
                continue

            marker = token.value
            match = self._POSITIONAL_PATTERN.match(marker)
            if match is not None:
                if match.group(1):
                    raise UnsupportedIndexedPositionalError(marker, sql=stmt)
                positional_count += 1
                continue

            if not marker.startswith(NAMED_PARAMETER_PREFIXES):
                raise InvalidNamedParameterPrefixError(marker, sql=stmt)
            names.add(marker[1:])

        return StatementMarkers(frozenset(names), positional_count)


def extract_markers(stmt: str, lexer: Optional[Lexer] = None) -> StatementMarkers:
    """Extract the parameter shape of a single statement."""
    return MarkerExtractor(lexer).extract(stmt)
