"""Transports for the contract registry client.

A transport performs one primitive: a unary call carrying encoded bytes.

- **GrpcTransport**: gRPC unary calls over a shared grpc.aio channel
- **MockTransport**: In-process scripted responses for tests and examples
"""

from .base import Transport
from .config import MockTransportConfig, TransportConfig
from .grpc_transport import GrpcTransport
from .mock import MockTransport

__all__ = [
    "Transport",
    "GrpcTransport",
    "MockTransport",
    "TransportConfig",
    "MockTransportConfig",
]
