"""Asynchronous driver implementation."""

from typing import TYPE_CHECKING, Any, Optional

from sqlbatch.driver._common import CommonDriverAttributesMixin
from sqlbatch.driver.result import ExecuteResult
from sqlbatch.utils.logging import correlation_context, get_logger

if TYPE_CHECKING:
    from sqlbatch.config import BatchConfig
    from sqlbatch.driver.result import StatementResult
    from sqlbatch.protocols import AsyncTransportProtocol

logger = get_logger("driver")

__all__ = ("AsyncBatchDriver",)


class AsyncBatchDriver(CommonDriverAttributesMixin):
    """Sends multi-statement batches through an asynchronous transport.

    Splitting and binding run synchronously before the first await, so a
    cancelled caller still gets binding errors but never a partial send.
    """

    __slots__ = ()
    transport: "AsyncTransportProtocol"

    def __init__(self, transport: "AsyncTransportProtocol", config: "Optional[BatchConfig]" = None) -> None:
        super().__init__(transport, config)

    async def query(self, sql: str, *parameters: Any, **named_parameters: Any) -> "list[StatementResult]":
        """Send ``sql`` and return one result per statement, unchecked."""
        with correlation_context():
            statements = self.prepare_batch(sql, *parameters, **named_parameters)
            return await self.transport.send(statements)

    async def execute(self, sql: str, *parameters: Any, **named_parameters: Any) -> ExecuteResult:
        """Send ``sql`` and require every statement to succeed.

        Raises:
            StatementExecutionError: The remote service reported a failed statement.
        """
        with correlation_context():
            results = await self.query(sql, *parameters, **named_parameters)
            self.check_results(results, sql)
            logger.debug(
                "Executed %d statement(s)", len(results), extra={"extra_fields": {"statement_count": len(results)}}
            )
        return ExecuteResult(statement_count=len(results), results=results)

    async def close(self) -> None:
        """Nothing to release; the transport owns its connections."""
