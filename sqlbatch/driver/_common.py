"""Common driver attributes shared by the sync and async drivers.

The driver boundary prepares a batch with the core pipeline, hands it to a
transport, and checks what comes back. Preparation happens entirely before
the transport is called, so a binding failure means nothing is sent.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional

from mypy_extensions import trait

from sqlbatch.config import BatchConfig
from sqlbatch.core.binder import prepare_batch
from sqlbatch.core.parameters import build_parameter_set
from sqlbatch.exceptions import StatementExecutionError, UnsupportedOperationError
from sqlbatch.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlbatch.core.binder import BoundStatement
    from sqlbatch.driver.result import StatementResult

__all__ = ("CommonDriverAttributesMixin",)

logger = get_logger("driver")


@trait
class CommonDriverAttributesMixin:
    """Configuration, batch preparation and result checking for drivers."""

    __slots__ = ("config", "transport")
    transport: "Any"
    config: "BatchConfig"

    def __init__(self, transport: "Any", config: "Optional[BatchConfig]" = None) -> None:
        """Initialize the driver.

        Args:
            transport: Object implementing the matching transport protocol
            config: Splitting and binding configuration
        """
        self.transport = transport
        self.config = config or BatchConfig()

    def prepare_batch(self, sql: str, *parameters: Any, **named_parameters: Any) -> "list[BoundStatement]":
        """Split and bind ``sql`` without sending it.

        Raises:
            MixedParameterKindsError: Named and positional parameters were mixed.
            ParameterError: A statement could not be bound.
            LexicalError: ``sql`` could not be tokenized.
        """
        call_parameters = build_parameter_set(*parameters, **named_parameters)
        statements = prepare_batch(sql, call_parameters, self.config)
        logger.debug(
            "Prepared batch of %d statement(s) with %d %s parameter(s)",
            len(statements),
            len(call_parameters),
            call_parameters.kind.value,
            extra={
                "extra_fields": {
                    "statement_count": len(statements),
                    "parameter_count": len(call_parameters),
                    "parameter_kind": call_parameters.kind.value,
                }
            },
        )
        return statements

    @staticmethod
    def check_results(results: "Sequence[StatementResult]", sql: str) -> None:
        """Require every statement result to be present and error-free.

        Raises:
            StatementExecutionError: A statement failed or returned no result.
        """
        for result in results:
            if result.error is not None:
                raise StatementExecutionError(result.error, sql=sql)
            if not result.has_result:
                raise StatementExecutionError("no results for statement", sql=sql)

    def prepare(self, sql: str) -> Any:
        """Prepared statements are not supported over this boundary."""
        raise UnsupportedOperationError("prepare")

    def begin(self) -> Any:
        """Transactions are not supported over this boundary."""
        raise UnsupportedOperationError("begin")
