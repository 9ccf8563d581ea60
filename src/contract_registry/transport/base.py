"""Abstract interface for registry transports.

The registry client depends on exactly one primitive: call a named remote
method with an encoded request and get back the encoded response, or a
TransportError. Connection management, deadlines and credentials belong to
the transport implementation.

Design Pattern: Strategy Pattern / Adapter Pattern
- Transport: Abstract interface
- GrpcTransport: gRPC unary calls over a grpc.aio channel
- MockTransport: In-process scripted responses (testing without a service)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


class Transport(ABC):
    """Abstract unary-call transport.

    Implementations must be safe to call concurrently from several tasks of
    one event loop; the registry client issues calls without any locking.

    Examples:
        ```python
        async with GrpcTransport(TransportConfig("registry:50051")) as transport:
            response = await transport.call(
                "contractregistry.ContractRegistry/GetCatalog", b""
            )
        ```
    """

    @abstractmethod
    async def call(self, method: str, request: bytes) -> bytes:
        """Perform one unary call.

        Args:
            method: Fully-qualified method path, e.g.
                "contractregistry.ContractRegistry/GetTags"
            request: Encoded request message

        Returns:
            Encoded response message

        Raises:
            TransportError: If the call fails (connectivity, deadline, or a
                failure status reported by the service)
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection. Safe to call more than once."""

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
