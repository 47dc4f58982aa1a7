from collections.abc import Iterable
from typing import Any, Optional

__all__ = (
    "InvalidNamedParameterPrefixError",
    "LexicalError",
    "MissingNamedParametersError",
    "MissingPositionalParametersError",
    "MixedParameterKindsError",
    "ParameterError",
    "SQLBatchError",
    "StatementExecutionError",
    "UnsupportedIndexedPositionalError",
    "UnsupportedOperationError",
)


class SQLBatchError(Exception):
    """Base exception class from which all sqlbatch exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLBatchError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class LexicalError(SQLBatchError):
    """The tokenizer could not process the SQL text."""

    position: Optional[int]

    def __init__(self, message: Optional[str] = None, position: Optional[int] = None) -> None:
        if message is None:
            message = "Issues tokenizing SQL text."
        if position is not None:
            message = f"{message} (position {position})"
        super().__init__(message)
        self.position = position


# -- SQL Parameter Errors --
class ParameterError(SQLBatchError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MixedParameterKindsError(ParameterError):
    """Raised when positional and named parameters are supplied in one call."""

    def __init__(self, message: Optional[str] = None, sql: Optional[str] = None) -> None:
        if message is None:
            message = "cannot mix positional and named parameters in one call"
        super().__init__(message, sql)


class UnsupportedIndexedPositionalError(ParameterError):
    """Raised when a statement uses ``?NNN`` placeholders."""

    marker: str

    def __init__(self, marker: str, sql: Optional[str] = None) -> None:
        super().__init__(
            f"unsupported positional parameter {marker!r}: positional parameters with an explicit index "
            "(like ?<number>) are not accepted",
            sql,
        )
        self.marker = marker


class InvalidNamedParameterPrefixError(ParameterError):
    """Raised when a named placeholder does not start with ``:``, ``@`` or ``$``."""

    marker: str

    def __init__(self, marker: str, sql: Optional[str] = None) -> None:
        super().__init__(f"named parameters must start with one of ':', '@', '$' (got {marker!r})", sql)
        self.marker = marker


class MissingPositionalParametersError(ParameterError):
    """Raised when a statement needs more positional values than remain."""

    required: int
    available: int

    def __init__(self, required: int, available: int, sql: Optional[str] = None) -> None:
        super().__init__(
            f"missing positional parameters: statement needs {required}, only {available} remaining", sql
        )
        self.required = required
        self.available = available


class MissingNamedParametersError(ParameterError):
    """Raised in strict mode when required names were not supplied."""

    missing: "tuple[str, ...]"

    def __init__(self, missing: Iterable[str], sql: Optional[str] = None) -> None:
        self.missing = tuple(sorted(missing))
        super().__init__(f"missing named parameters: {', '.join(self.missing)}", sql)


# -- Driver boundary errors --
class StatementExecutionError(SQLBatchError):
    """The remote service reported a failure for a statement of the batch."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        detail_message = message
        if sql:
            detail_message = f"failed to execute SQL: {sql}\n{message}"
        super().__init__(detail=detail_message)
        self.sql = sql


class UnsupportedOperationError(SQLBatchError):
    """The driver boundary does not implement this operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} method not implemented")
        self.operation = operation
