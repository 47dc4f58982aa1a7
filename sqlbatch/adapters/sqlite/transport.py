"""Local transport executing bound batches on a ``sqlite3`` connection."""

import contextlib
import datetime
import sqlite3
from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from sqlbatch.core.parameters import ParameterSet
from sqlbatch.driver.result import StatementResult
from sqlbatch.utils.logging import get_logger
from sqlbatch.utils.serializers import to_json

if TYPE_CHECKING:
    from sqlbatch.core.binder import BoundStatement

__all__ = ("SqliteTransport", "sqlite_type_coercion_map")

logger = get_logger("adapters.sqlite")

sqlite_type_coercion_map: "dict[type, Callable[[Any], Any]]" = {
    bool: int,
    datetime.datetime: lambda v: v.isoformat(),
    datetime.date: lambda v: v.isoformat(),
    Decimal: str,
    dict: to_json,
    list: to_json,
    tuple: to_json,
}


class SqliteCursor:
    """Context manager for SQLite cursor management."""

    def __init__(self, connection: "sqlite3.Connection") -> None:
        self.connection = connection
        self.cursor: Optional[sqlite3.Cursor] = None

    def __enter__(self) -> "sqlite3.Cursor":
        self.cursor = self.connection.cursor()
        return self.cursor

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.cursor is not None:
            with contextlib.suppress(Exception):
                self.cursor.close()


class SqliteTransport:
    """Runs each bound statement of a batch, one at a time, like a remote service would.

    A failing statement is reported as an error result and the rest of the
    batch is not run.
    """

    def __init__(
        self,
        connection: "sqlite3.Connection",
        type_coercion_map: "Optional[dict[type, Callable[[Any], Any]]]" = None,
    ) -> None:
        self.connection = connection
        self.type_coercion_map = sqlite_type_coercion_map if type_coercion_map is None else type_coercion_map

    def send(self, statements: "Sequence[BoundStatement]") -> "list[StatementResult]":
        results: list[StatementResult] = []
        for statement in statements:
            result = self._execute_statement(statement.sql, statement.parameters)
            results.append(result)
            if result.error is not None:
                logger.debug("Statement failed, skipping %d remaining", len(statements) - len(results))
                break
        return results

    def _execute_statement(self, sql: str, parameters: ParameterSet) -> StatementResult:
        with SqliteCursor(self.connection) as cursor:
            try:
                cursor.execute(sql, self._prepare_parameters(parameters))
            except sqlite3.Error as exc:
                return StatementResult.failed(str(exc))
            if cursor.description is None:
                return StatementResult()
            columns = [column[0] for column in cursor.description]
            return StatementResult(columns=columns, rows=[list(row) for row in cursor.fetchall()])

    def _prepare_parameters(self, parameters: ParameterSet) -> "Union[list[Any], dict[str, Any]]":
        driver_parameters = parameters.to_driver_parameters()
        if isinstance(driver_parameters, dict):
            return {name: self._coerce(value) for name, value in driver_parameters.items()}
        return [self._coerce(value) for value in driver_parameters]

    def _coerce(self, value: Any) -> Any:
        converter = self.type_coercion_map.get(type(value))
        return converter(value) if converter is not None else value
