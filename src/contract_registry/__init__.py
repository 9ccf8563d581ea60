"""contract_registry: Contract Registry Client

An async Python client for the contractregistry.ContractRegistry gRPC service,
which stores smart-contract artifacts (ABI, bytecode, deployed bytecode) by
name and tag, plus bytecode artifacts addressed by hash.

Key Features:
- Pydantic-based wire schema with protobuf field numbers
- Protobuf wire format via runtime descriptors (no protoc step)
- Pluggable transports: gRPC for real services, a scripted mock for tests
- Typed errors: TransportError from the transport, DecodeError from the codec

Quick Start:
    >>> import asyncio
    >>> from contract_registry import ContractRegistry
    >>>
    >>> async def main():
    ...     async with ContractRegistry("localhost:50051") as registry:
    ...         await registry.register("myContract", "1", abi, "0xfefe", "0xdede")
    ...         contract = await registry.get("myContract", "1")
    ...         print(contract.deployed_bytecode)
    >>>
    >>> asyncio.run(main())
"""

from __future__ import annotations

from .client import ContractRegistry
from .codec import (
    bytes_to_hex,
    contract_from_wire,
    contract_to_wire,
    decode,
    decode_abi,
    encode,
    encode_abi,
    hex_to_bytes,
)
from .contract import Contract
from .exceptions import (
    ContractRegistryError,
    DecodeError,
    EncodeError,
    SchemaError,
    TransportError,
)
from .models import WireField, WireMessage
from .protobuf import registry_proto_schema, to_proto_schema
from .service import METHODS, SERVICE, RpcMethod, method_path
from .transport import (
    GrpcTransport,
    MockTransport,
    MockTransportConfig,
    Transport,
    TransportConfig,
)
from .wire import ContractId, ContractWire

__version__ = "0.1.0"

__all__ = [
    # Client
    "ContractRegistry",
    "Contract",
    "ContractId",
    "ContractWire",
    # Wire codec
    "WireMessage",
    "WireField",
    "encode",
    "decode",
    # Artifact codec
    "encode_abi",
    "decode_abi",
    "hex_to_bytes",
    "bytes_to_hex",
    "contract_to_wire",
    "contract_from_wire",
    # Service
    "SERVICE",
    "METHODS",
    "RpcMethod",
    "method_path",
    # Transports
    "Transport",
    "GrpcTransport",
    "MockTransport",
    "TransportConfig",
    "MockTransportConfig",
    # Exceptions
    "ContractRegistryError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "TransportError",
    # Protobuf
    "to_proto_schema",
    "registry_proto_schema",
    # Version
    "__version__",
]
