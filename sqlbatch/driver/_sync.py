"""Synchronous driver implementation."""

from typing import TYPE_CHECKING, Any, Optional

from sqlbatch.driver._common import CommonDriverAttributesMixin
from sqlbatch.driver.result import ExecuteResult
from sqlbatch.utils.logging import correlation_context, get_logger

if TYPE_CHECKING:
    from sqlbatch.config import BatchConfig
    from sqlbatch.driver.result import StatementResult
    from sqlbatch.protocols import SyncTransportProtocol

logger = get_logger("driver")

__all__ = ("SyncBatchDriver",)


class SyncBatchDriver(CommonDriverAttributesMixin):
    """Sends multi-statement batches through a synchronous transport."""

    __slots__ = ()
    transport: "SyncTransportProtocol"

    def __init__(self, transport: "SyncTransportProtocol", config: "Optional[BatchConfig]" = None) -> None:
        super().__init__(transport, config)

    def query(self, sql: str, *parameters: Any, **named_parameters: Any) -> "list[StatementResult]":
        """Send ``sql`` and return one result per statement, unchecked."""
        with correlation_context():
            statements = self.prepare_batch(sql, *parameters, **named_parameters)
            return self.transport.send(statements)

    def execute(self, sql: str, *parameters: Any, **named_parameters: Any) -> ExecuteResult:
        """Send ``sql`` and require every statement to succeed.

        Raises:
            StatementExecutionError: The remote service reported a failed statement.
        """
        with correlation_context():
            results = self.query(sql, *parameters, **named_parameters)
            self.check_results(results, sql)
            logger.debug(
                "Executed %d statement(s)", len(results), extra={"extra_fields": {"statement_count": len(results)}}
            )
        return ExecuteResult(statement_count=len(results), results=results)

    def close(self) -> None:
        """Nothing to release; the transport owns its connections."""
