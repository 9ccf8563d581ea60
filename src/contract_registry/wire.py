"""Wire schema of the contractregistry.ContractRegistry service.

One request/response pair per RPC, plus the identity and contract structures
they carry. Field numbers follow the service's protobuf definition; see
``to_proto_schema()`` for the rendered .proto text.
"""

from __future__ import annotations

from typing import ClassVar

from .models import WireField, WireMessage

PROTO_PACKAGE = "contractregistry"


class RegistryMessage(WireMessage):
    """Base for messages declared in the contractregistry package."""

    proto_package: ClassVar[str] = PROTO_PACKAGE


class ContractId(RegistryMessage):
    """Identity of one registered contract: its name and tag.

    The empty tag is a valid identity, distinct from every non-empty tag.
    """

    name: str = WireField(1, default="")
    tag: str = WireField(2, default="")


class ContractWire(RegistryMessage):
    """Contract artifacts as carried on the wire (ABI as JSON bytes)."""

    proto_name: ClassVar[str | None] = "Contract"

    id: ContractId = WireField(1, default_factory=ContractId)
    abi: bytes = WireField(2, default=b"")
    bytecode: bytes = WireField(3, default=b"")
    deployed_bytecode: bytes = WireField(4, default=b"")


class RegisterContractRequest(RegistryMessage):
    contract: ContractWire = WireField(1, default_factory=ContractWire)


class RegisterContractResponse(RegistryMessage):
    pass


class DeregisterContractRequest(RegistryMessage):
    contract_id: ContractId = WireField(1, default_factory=ContractId)


class DeregisterContractResponse(RegistryMessage):
    pass


class DeleteArtifactRequest(RegistryMessage):
    bytecode_hash: bytes = WireField(1, default=b"")


class DeleteArtifactResponse(RegistryMessage):
    pass


class GetCatalogRequest(RegistryMessage):
    pass


class GetCatalogResponse(RegistryMessage):
    names: list[str] = WireField(1, default_factory=list)


class GetContractRequest(RegistryMessage):
    """Request shape shared by GetContract and its ABI/bytecode projections."""

    contract_id: ContractId = WireField(1, default_factory=ContractId)


class GetContractResponse(RegistryMessage):
    contract: ContractWire = WireField(1, default_factory=ContractWire)


# GetContractABI, GetContractBytecode and GetContractDeployedBytecode all take
# the GetContractRequest shape
GetContractABIRequest = GetContractRequest


class GetContractABIResponse(RegistryMessage):
    abi: bytes = WireField(1, default=b"")


class GetContractBytecodeResponse(RegistryMessage):
    bytecode: bytes = WireField(1, default=b"")


class GetContractDeployedBytecodeResponse(RegistryMessage):
    deployed_bytecode: bytes = WireField(1, default=b"")


class GetTagsRequest(RegistryMessage):
    name: str = WireField(1, default="")


class GetTagsResponse(RegistryMessage):
    tags: list[str] = WireField(1, default_factory=list)


WIRE_MESSAGES: tuple[type[WireMessage], ...] = (
    ContractId,
    ContractWire,
    RegisterContractRequest,
    RegisterContractResponse,
    DeregisterContractRequest,
    DeregisterContractResponse,
    DeleteArtifactRequest,
    DeleteArtifactResponse,
    GetCatalogRequest,
    GetCatalogResponse,
    GetContractRequest,
    GetContractResponse,
    GetContractABIResponse,
    GetContractBytecodeResponse,
    GetContractDeployedBytecodeResponse,
    GetTagsRequest,
    GetTagsResponse,
)
