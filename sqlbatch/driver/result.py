"""Per-statement results returned by a transport."""

from typing import Any, NamedTuple, Optional

from mypy_extensions import mypyc_attr

__all__ = ("ExecuteResult", "StatementResult")


@mypyc_attr(allow_interpreted_subclasses=False)
class StatementResult:
    """Outcome of one statement of a batch.

    Attributes:
        columns: Column names of the result set, if any
        rows: Row values, each a list aligned with ``columns``
        error: Error message reported by the remote service, if the statement failed
        has_result: Whether the service returned a result payload at all
    """

    __slots__ = ("columns", "error", "has_result", "rows")

    def __init__(
        self,
        columns: "Optional[list[str]]" = None,
        rows: "Optional[list[list[Any]]]" = None,
        error: Optional[str] = None,
        has_result: Optional[bool] = None,
    ) -> None:
        self.columns = columns or []
        self.rows = rows or []
        self.error = error
        self.has_result = (error is None) if has_result is None else has_result

    @classmethod
    def failed(cls, error: str) -> "StatementResult":
        return cls(error=error, has_result=False)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        if self.error is not None:
            return f"StatementResult(error={self.error!r})"
        return f"StatementResult(columns={self.columns!r}, rows={len(self.rows)})"


class ExecuteResult(NamedTuple):
    """Result of a checked ``execute`` call.

    Attributes:
        statement_count: Number of statements sent
        results: The per-statement results, all successful
    """

    statement_count: int
    results: "list[StatementResult]"
