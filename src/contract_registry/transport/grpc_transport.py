"""gRPC transport for the contract registry service.

Requests and responses cross the channel as raw bytes: the registry client
does its own protobuf encoding, so the unary-unary callables are created
without serializers.
"""

from __future__ import annotations

import logging

import grpc

from ..exceptions import TransportError
from .base import Transport
from .config import TransportConfig

logger = logging.getLogger(__name__)


class GrpcTransport(Transport):
    """Unary calls over one shared grpc.aio channel.

    The channel is opened on the first call and reused by every later call,
    including calls issued concurrently. Connection setup uses an insecure
    channel; credentialed channels can be injected through ``channel``.

    Attributes:
        config: Transport configuration (target, deadline, channel options)

    Examples:
        ```python
        transport = GrpcTransport(TransportConfig("localhost:50051", timeout=5.0))
        try:
            data = await transport.call("contractregistry.ContractRegistry/GetCatalog", b"")
        finally:
            await transport.close()
        ```
    """

    def __init__(self, config: TransportConfig, channel: grpc.aio.Channel | None = None) -> None:
        """Initialize the transport.

        Args:
            config: Transport configuration
            channel: Pre-built channel to use instead of opening an insecure one
        """
        self.config = config
        self._channel = channel

    @property
    def channel(self) -> grpc.aio.Channel:
        """The shared channel, opened on first use."""
        if self._channel is None:
            logger.debug("Opening gRPC channel to %s", self.config.target)
            self._channel = grpc.aio.insecure_channel(
                self.config.target, options=self.config.channel_options()
            )
        return self._channel

    async def call(self, method: str, request: bytes) -> bytes:
        """Issue one unary call and return the raw response bytes.

        Raises:
            TransportError: With the gRPC status code name and details when
                the call fails
        """
        # grpc expects a leading slash in method paths
        path = method if method.startswith("/") else f"/{method}"
        callable_ = self.channel.unary_unary(path)

        logger.debug("Calling %s with %d request bytes", method, len(request))
        try:
            response = await callable_(request, timeout=self.config.timeout)
        except grpc.aio.AioRpcError as e:
            logger.debug("Call to %s failed: %s", method, e.code().name)
            raise TransportError(method, e.code().name, e.details() or "") from e

        logger.debug("Call to %s returned %d response bytes", method, len(response))
        return response

    async def close(self) -> None:
        """Close the channel if it was opened."""
        if self._channel is not None:
            logger.debug("Closing gRPC channel to %s", self.config.target)
            await self._channel.close()
            self._channel = None
