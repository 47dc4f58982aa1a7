"""Per-statement parameter binding.

Given the parameters of a whole call and one statement of the batch, the
binder works out the exact parameters that statement receives:

- positional calls hand each statement the next contiguous slice of values,
  tracked by a running offset across the batch, so the Nth bare ``?`` in the
  batch binds to the Nth value;
- named calls hand each statement only the names it references.

:func:`prepare_batch` runs the full pipeline (classify, split, bind) and
either returns every bound statement or raises; there is no partial batch.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional

from mypy_extensions import mypyc_attr

from sqlbatch.core.lexer import Lexer
from sqlbatch.core.markers import MarkerExtractor
from sqlbatch.core.parameters import ParameterSet, coerce_parameter_set
from sqlbatch.core.splitter import StatementSplitter
from sqlbatch.exceptions import MissingNamedParametersError, MissingPositionalParametersError

if TYPE_CHECKING:
    from sqlbatch.config import BatchConfig

__all__ = ("BoundStatement", "StatementBinder", "bind_statement", "bind_statements", "prepare_batch")


@mypyc_attr(allow_interpreted_subclasses=False)
class BoundStatement:
    """A statement and the exact parameters it must be sent with."""

    __slots__ = ("parameters", "sql")

    def __init__(self, sql: str, parameters: ParameterSet) -> None:
        self.sql = sql
        self.parameters = parameters

    def __iter__(self) -> Any:
        return iter((self.sql, self.parameters))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundStatement):
            return NotImplemented
        return self.sql == other.sql and self.parameters == other.parameters

    def __hash__(self) -> int:
        return hash((self.sql, self.parameters))

    def __repr__(self) -> str:
        return f"BoundStatement({self.sql!r}, {self.parameters!r})"


@mypyc_attr(allow_interpreted_subclasses=False)
class StatementBinder:
    """Selects each statement's parameters from the call's parameters."""

    __slots__ = ("_extractor", "_strict_named_parameters")

    def __init__(self, extractor: Optional[MarkerExtractor] = None, strict_named_parameters: bool = False) -> None:
        self._extractor = extractor or MarkerExtractor()
        self._strict_named_parameters = strict_named_parameters

    def bind(self, stmt: str, parameters: ParameterSet, offset: int = 0) -> "tuple[ParameterSet, int]":
        """Bind one statement.

        Args:
            stmt: The statement text
            parameters: Parameters of the whole call
            offset: Positional values already consumed by earlier statements

        Returns:
            The statement's parameters and the new running offset

        Raises:
            MissingPositionalParametersError: Fewer positional values remain than the statement needs.
            MissingNamedParametersError: Strict mode only, a required name was not supplied.
        """
        markers = self._extractor.extract(stmt)
        new_offset = offset + markers.positional_count

        if self._strict_named_parameters and markers.names:
            missing = parameters.missing(markers.names)
            if missing:
                raise MissingNamedParametersError(missing, sql=stmt)

        if parameters.is_positional:
            if new_offset > len(parameters):
                raise MissingPositionalParametersError(
                    markers.positional_count, max(len(parameters) - offset, 0), sql=stmt
                )
            return parameters.slice(offset, new_offset), new_offset

        # Names absent from the call are left for the remote service to report.
        return parameters.select(markers.names), new_offset

    def bind_all(self, statements: Iterable[str], parameters: ParameterSet) -> "list[BoundStatement]":
        """Bind every statement of a batch, in order, with a running offset."""
        bound: list[BoundStatement] = []
        offset = 0
        for stmt in statements:
            stmt_parameters, offset = self.bind(stmt, parameters, offset)
            bound.append(BoundStatement(stmt, stmt_parameters))
        return bound


def bind_statement(
    stmt: str, parameters: ParameterSet, offset: int = 0, strict_named_parameters: bool = False
) -> "tuple[ParameterSet, int]":
    """Bind a single statement; see :meth:`StatementBinder.bind`."""
    return StatementBinder(strict_named_parameters=strict_named_parameters).bind(stmt, parameters, offset)


def bind_statements(
    statements: Iterable[str], parameters: ParameterSet, strict_named_parameters: bool = False
) -> "list[BoundStatement]":
    """Bind a list of statements; see :meth:`StatementBinder.bind_all`."""
    return StatementBinder(strict_named_parameters=strict_named_parameters).bind_all(statements, parameters)


def prepare_batch(sql: str, parameters: Any = None, config: "Optional[BatchConfig]" = None) -> "list[BoundStatement]":
    """Split ``sql`` into statements and bind each one.

    Args:
        sql: One or more ``;``-separated statements
        parameters: A :class:`ParameterSet`, or anything :func:`coerce_parameter_set` accepts
        config: Lexical rules and binding strictness

    Returns:
        The bound statements in source order

    Raises:
        MixedParameterKindsError: Named and positional parameters were mixed.
        LexicalError: ``sql`` could not be tokenized.
        ParameterError: A statement could not be bound; nothing is returned.
    """
    if config is None:
        from sqlbatch.config import BatchConfig

        config = BatchConfig()

    call_parameters = coerce_parameter_set(parameters)
    lexer = Lexer(config.lexical_rules)
    statements = StatementSplitter(lexer).split(sql)
    binder = StatementBinder(MarkerExtractor(lexer), strict_named_parameters=config.strict_named_parameters)
    return binder.bind_all(statements, call_parameters)
