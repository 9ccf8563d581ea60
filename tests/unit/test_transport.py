"""Tests for transports and their configuration."""

from __future__ import annotations

import asyncio
import time
from typing import Any, List, Optional

import grpc
import pytest

from contract_registry import (
    GrpcTransport,
    MockTransport,
    MockTransportConfig,
    TransportConfig,
    TransportError,
)
from contract_registry.wire import GetTagsResponse


class FakeChannel:
    """Stands in for grpc.aio.Channel; answers every call with one outcome."""

    def __init__(self, outcome: Any) -> None:
        self.outcome = outcome
        self.paths: List[str] = []
        self.requests: List[bytes] = []
        self.timeouts: List[Optional[float]] = []
        self.closed = False

    def unary_unary(self, path: str) -> Any:
        self.paths.append(path)

        async def invoke(request: bytes, timeout: Optional[float] = None) -> bytes:
            self.requests.append(request)
            self.timeouts.append(timeout)
            if isinstance(self.outcome, BaseException):
                raise self.outcome
            return self.outcome

        return invoke

    async def close(self) -> None:
        self.closed = True


def rpc_error(code: grpc.StatusCode, details: Optional[str]) -> grpc.aio.AioRpcError:
    return grpc.aio.AioRpcError(code, grpc.aio.Metadata(), grpc.aio.Metadata(), details=details)


class TestTransportConfig:
    """Tests for TransportConfig validation."""

    def test_default_config(self) -> None:
        config = TransportConfig("localhost:50051")

        assert config.timeout is None
        assert config.max_message_length is None
        assert config.channel_options() == []

    def test_custom_config(self) -> None:
        config = TransportConfig(
            "registry:443",
            timeout=2.5,
            max_message_length=1024,
            options=(("grpc.enable_retries", 0),),
        )

        assert config.channel_options() == [
            ("grpc.enable_retries", 0),
            ("grpc.max_send_message_length", 1024),
            ("grpc.max_receive_message_length", 1024),
        ]

    def test_ipv6_target(self) -> None:
        assert TransportConfig("[::1]:50051").target == "[::1]:50051"

    @pytest.mark.parametrize("target", ["localhost", ":50051", "localhost:", "localhost:port"])
    def test_invalid_target_raises(self, target: str) -> None:
        with pytest.raises(ValueError, match="target must be host:port"):
            TransportConfig(target)

    def test_invalid_port_raises(self) -> None:
        with pytest.raises(ValueError, match="target port must be 1-65535"):
            TransportConfig("localhost:70000")

    def test_invalid_timeout_raises(self) -> None:
        with pytest.raises(ValueError, match="timeout must be > 0"):
            TransportConfig("localhost:50051", timeout=0)

    def test_invalid_message_length_raises(self) -> None:
        with pytest.raises(ValueError, match="max_message_length must be > 0"):
            TransportConfig("localhost:50051", max_message_length=-1)


class TestMockTransportConfig:
    """Tests for MockTransportConfig validation."""

    def test_default_config(self) -> None:
        assert MockTransportConfig().latency == 0.0

    def test_negative_latency_raises(self) -> None:
        with pytest.raises(ValueError, match="latency must be >= 0"):
            MockTransportConfig(latency=-1.0)


class TestMockTransport:
    """Tests for the scripted mock transport."""

    @pytest.mark.asyncio
    async def test_bytes_response(self) -> None:
        transport = MockTransport()
        transport.set_response("contractregistry.ContractRegistry/GetTags", b"\x0a\x01a")

        assert await transport.call("contractregistry.ContractRegistry/GetTags", b"x") == b"\x0a\x01a"
        assert transport.calls == [("contractregistry.ContractRegistry/GetTags", b"x")]

    @pytest.mark.asyncio
    async def test_short_method_name(self) -> None:
        transport = MockTransport()
        transport.set_response("GetTags", GetTagsResponse(tags=["a"]))

        response = await transport.call("contractregistry.ContractRegistry/GetTags", b"")

        assert response == b"\x0a\x01a"
        assert transport.calls_to("GetTags") == [b""]

    @pytest.mark.asyncio
    async def test_call_by_short_method_name(self) -> None:
        transport = MockTransport()
        transport.set_response("GetTags", GetTagsResponse(tags=["a"]))

        assert await transport.call("GetTags", b"") == b"\x0a\x01a"
        assert transport.calls == [("contractregistry.ContractRegistry/GetTags", b"")]

    @pytest.mark.asyncio
    async def test_sync_handler(self) -> None:
        transport = MockTransport()
        transport.set_response("Echo", lambda request: request[::-1])

        assert await transport.call("contractregistry.ContractRegistry/Echo", b"abc") == b"cba"

    @pytest.mark.asyncio
    async def test_async_handler(self) -> None:
        async def handler(request: bytes) -> bytes:
            await asyncio.sleep(0)
            return request + b"!"

        transport = MockTransport()
        transport.set_response("Echo", handler)

        assert await transport.call("contractregistry.ContractRegistry/Echo", b"hi") == b"hi!"

    @pytest.mark.asyncio
    async def test_exception_response(self) -> None:
        transport = MockTransport()
        transport.set_response("GetTags", TransportError("GetTags", "UNAVAILABLE"))

        with pytest.raises(TransportError, match="UNAVAILABLE"):
            await transport.call("contractregistry.ContractRegistry/GetTags", b"")

    @pytest.mark.asyncio
    async def test_unscripted_method(self) -> None:
        transport = MockTransport()

        with pytest.raises(TransportError) as exc_info:
            await transport.call("other.Service/Method", b"")

        assert exc_info.value.code == "UNIMPLEMENTED"
        assert transport.calls == [("other.Service/Method", b"")]

    @pytest.mark.asyncio
    async def test_latency(self) -> None:
        transport = MockTransport(MockTransportConfig(latency=0.05))
        transport.set_response("GetTags", b"")

        start = time.monotonic()
        await transport.call("contractregistry.ContractRegistry/GetTags", b"")

        assert time.monotonic() - start >= 0.04

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        async with MockTransport() as transport:
            assert transport.closed is False

        assert transport.closed is True


class TestGrpcTransport:
    """Tests for the gRPC transport against a fake channel."""

    @pytest.mark.asyncio
    async def test_call(self) -> None:
        channel = FakeChannel(b"\x0a\x01a")
        transport = GrpcTransport(TransportConfig("localhost:50051", timeout=3.0), channel=channel)

        response = await transport.call("contractregistry.ContractRegistry/GetTags", b"req")

        assert response == b"\x0a\x01a"
        assert channel.paths == ["/contractregistry.ContractRegistry/GetTags"]
        assert channel.requests == [b"req"]
        assert channel.timeouts == [3.0]

    @pytest.mark.asyncio
    async def test_rpc_error_mapped(self) -> None:
        channel = FakeChannel(rpc_error(grpc.StatusCode.NOT_FOUND, "no such contract"))
        transport = GrpcTransport(TransportConfig("localhost:50051"), channel=channel)

        with pytest.raises(TransportError) as exc_info:
            await transport.call("contractregistry.ContractRegistry/GetContract", b"")

        error = exc_info.value
        assert error.code == "NOT_FOUND"
        assert error.details == "no such contract"
        assert error.method == "contractregistry.ContractRegistry/GetContract"
        assert isinstance(error.__cause__, grpc.aio.AioRpcError)

    @pytest.mark.asyncio
    async def test_rpc_error_without_details(self) -> None:
        channel = FakeChannel(rpc_error(grpc.StatusCode.UNAVAILABLE, None))
        transport = GrpcTransport(TransportConfig("localhost:50051"), channel=channel)

        with pytest.raises(TransportError) as exc_info:
            await transport.call("contractregistry.ContractRegistry/GetCatalog", b"")

        assert exc_info.value.code == "UNAVAILABLE"
        assert exc_info.value.details == ""

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        channel = FakeChannel(b"")
        transport = GrpcTransport(TransportConfig("localhost:50051"), channel=channel)

        await transport.close()
        await transport.close()

        assert channel.closed is True

    @pytest.mark.asyncio
    async def test_channel_opened_lazily(self) -> None:
        transport = GrpcTransport(TransportConfig("localhost:50051"))

        channel = transport.channel

        assert transport.channel is channel
        await transport.close()
