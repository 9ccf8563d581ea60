"""Mock transport for testing the registry client without a service.

MockTransport answers unary calls in-process. Every call is recorded, and the
answer for each method is scripted up front: raw bytes, a wire message (encoded
on the fly), an exception to raise, or a handler that computes the response
from the request bytes.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Dict, List, Tuple, Union

from ..codec import encode
from ..exceptions import TransportError
from ..models import WireMessage
from ..service import method_path
from .base import Transport
from .config import MockTransportConfig

logger = logging.getLogger(__name__)

Handler = Callable[[bytes], Union[bytes, Awaitable[bytes]]]
Response = Union[bytes, WireMessage, BaseException, Handler]


class MockTransport(Transport):
    """Scripted in-process transport.

    Methods may be named by their full path or by their short name within the
    registry service ("GetTags" is "contractregistry.ContractRegistry/GetTags").
    Calls to a method without a scripted response fail with an UNIMPLEMENTED
    TransportError, like a service that does not know the method.

    Attributes:
        config: Mock transport configuration
        calls: Every (method path, request bytes) pair, in call order
        closed: Whether close() has been called

    Examples:
        ```python
        from contract_registry.wire import GetTagsResponse

        transport = MockTransport()
        transport.set_response("GetTags", GetTagsResponse(tags=["tag1", "tag2"]))

        registry = ContractRegistry(transport=transport)
        assert await registry.get_tags("contract1") == ["tag1", "tag2"]
        assert transport.calls[0][0] == "contractregistry.ContractRegistry/GetTags"
        ```
    """

    def __init__(self, config: MockTransportConfig | None = None) -> None:
        """Initialize mock transport.

        Args:
            config: Mock transport configuration. If None, uses default config.
        """
        self.config = config if config is not None else MockTransportConfig()
        self.calls: List[Tuple[str, bytes]] = []
        self.closed = False
        self._responses: Dict[str, Response] = {}

    @staticmethod
    def _path(method: str) -> str:
        return method if "/" in method else method_path(method)

    def set_response(self, method: str, response: Response) -> None:
        """Script the answer for every later call to method.

        Args:
            method: Full method path or short method name
            response: Bytes to return, wire message to encode and return,
                exception to raise, or handler called with the request bytes
        """
        self._responses[self._path(method)] = response

    def calls_to(self, method: str) -> List[bytes]:
        """Return the request bytes of every call made to method."""
        path = self._path(method)
        return [request for called, request in self.calls if called == path]

    async def call(self, method: str, request: bytes) -> bytes:
        """Record the call and produce the scripted response.

        Raises:
            TransportError: If no response is scripted for method, or if the
                scripted response is a TransportError
        """
        method = self._path(method)
        self.calls.append((method, bytes(request)))
        logger.debug("Mock call to %s with %d request bytes", method, len(request))

        if self.config.latency:
            await asyncio.sleep(self.config.latency)

        if method not in self._responses:
            raise TransportError(method, "UNIMPLEMENTED", "no response scripted")

        response = self._responses[method]

        if isinstance(response, BaseException):
            raise response
        if isinstance(response, WireMessage):
            return encode(response)
        if isinstance(response, (bytes, bytearray)):
            return bytes(response)

        result = response(bytes(request))
        if inspect.isawaitable(result):
            result = await result
        return bytes(result)

    async def close(self) -> None:
        self.closed = True
