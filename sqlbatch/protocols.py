"""Runtime-checkable protocols for the transport a driver sends batches to."""

from collections.abc import Awaitable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlbatch.core.binder import BoundStatement
    from sqlbatch.driver.result import StatementResult

__all__ = ("AsyncTransportProtocol", "SyncTransportProtocol")


@runtime_checkable
class SyncTransportProtocol(Protocol):
    """Sends a bound batch and returns one result per statement, in order."""

    def send(self, statements: "Sequence[BoundStatement]") -> "list[StatementResult]":
        """Execute the statements remotely."""
        ...


@runtime_checkable
class AsyncTransportProtocol(Protocol):
    """Asynchronous counterpart of :class:`SyncTransportProtocol`."""

    def send(self, statements: "Sequence[BoundStatement]") -> "Awaitable[list[StatementResult]]":
        """Execute the statements remotely."""
        ...
