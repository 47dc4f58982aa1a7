"""Tests for the asynchronous batch driver."""

import logging
from collections.abc import Sequence
from typing import Optional

import pytest

from sqlbatch.core.binder import BoundStatement
from sqlbatch.core.parameters import ParameterSet
from sqlbatch.driver import AsyncBatchDriver, StatementResult
from sqlbatch.exceptions import MissingPositionalParametersError, StatementExecutionError, UnsupportedOperationError
from sqlbatch.protocols import AsyncTransportProtocol
from sqlbatch.utils.logging import get_correlation_id

pytestmark = pytest.mark.anyio


class AsyncRecordingTransport:
    def __init__(self, error: "Optional[str]" = None) -> None:
        self.batches: list[list[BoundStatement]] = []
        self.error = error

    async def send(self, statements: "Sequence[BoundStatement]") -> "list[StatementResult]":
        self.batches.append(list(statements))
        if self.error is not None:
            return [StatementResult.failed(self.error)]
        return [StatementResult(columns=["n"], rows=[[index]]) for index, _ in enumerate(statements)]


async def test_transport_satisfies_protocol() -> None:
    assert isinstance(AsyncRecordingTransport(), AsyncTransportProtocol)


async def test_execute() -> None:
    transport = AsyncRecordingTransport()
    driver = AsyncBatchDriver(transport)

    result = await driver.execute("SELECT :a; SELECT :b", a=1, b=2)

    assert result.statement_count == 2
    assert transport.batches[0] == [
        BoundStatement("SELECT :a", ParameterSet.from_mapping({"a": 1})),
        BoundStatement("SELECT :b", ParameterSet.from_mapping({"b": 2})),
    ]


async def test_query_returns_rows() -> None:
    driver = AsyncBatchDriver(AsyncRecordingTransport())
    results = await driver.query("SELECT 1; SELECT 2")
    assert [result.rows for result in results] == [[[0]], [[1]]]


async def test_binding_failure_sends_nothing() -> None:
    transport = AsyncRecordingTransport()
    driver = AsyncBatchDriver(transport)
    with pytest.raises(MissingPositionalParametersError):
        await driver.execute("SELECT ?, ?", 1)
    assert transport.batches == []


async def test_statement_error_raises() -> None:
    driver = AsyncBatchDriver(AsyncRecordingTransport(error="SQLITE_ERROR: no such table: t"))
    with pytest.raises(StatementExecutionError, match="no such table"):
        await driver.execute("SELECT * FROM t")


async def test_unsupported_operations_and_close() -> None:
    driver = AsyncBatchDriver(AsyncRecordingTransport())
    with pytest.raises(UnsupportedOperationError):
        driver.begin()
    await driver.close()


async def test_single_list_argument_is_one_value() -> None:
    transport = AsyncRecordingTransport()
    await AsyncBatchDriver(transport).query("SELECT ?", [1, 2])
    assert transport.batches[0][0].parameters == ParameterSet.from_values([[1, 2]])


async def test_execute_logs_under_one_correlation_id(caplog: pytest.LogCaptureFixture) -> None:
    driver = AsyncBatchDriver(AsyncRecordingTransport())
    with caplog.at_level(logging.DEBUG, logger="sqlbatch.driver"):
        await driver.execute("SELECT 1; SELECT 2")

    correlation_ids = {record.correlation_id for record in caplog.records}  # type: ignore[attr-defined]
    assert len(correlation_ids) == 1
    assert get_correlation_id() is None
