"""Driver boundary between the core pipeline and a transport."""

from sqlbatch.driver._async import AsyncBatchDriver
from sqlbatch.driver._common import CommonDriverAttributesMixin
from sqlbatch.driver._sync import SyncBatchDriver
from sqlbatch.driver.result import ExecuteResult, StatementResult

__all__ = (
    "AsyncBatchDriver",
    "CommonDriverAttributesMixin",
    "ExecuteResult",
    "StatementResult",
    "SyncBatchDriver",
)
