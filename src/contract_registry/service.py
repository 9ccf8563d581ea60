"""RPC method table for the contractregistry.ContractRegistry service.

This module provides:
- RpcMethod: one unary method with its request and response message classes
- METHODS: every method the service exposes, keyed by method name
- method_path(): the fully-qualified path a transport is called with
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import WireMessage
from .wire import (
    PROTO_PACKAGE,
    DeleteArtifactRequest,
    DeleteArtifactResponse,
    DeregisterContractRequest,
    DeregisterContractResponse,
    GetCatalogRequest,
    GetCatalogResponse,
    GetContractABIRequest,
    GetContractABIResponse,
    GetContractBytecodeResponse,
    GetContractDeployedBytecodeResponse,
    GetContractRequest,
    GetContractResponse,
    GetTagsRequest,
    GetTagsResponse,
    RegisterContractRequest,
    RegisterContractResponse,
)

SERVICE_NAME = "ContractRegistry"
SERVICE = f"{PROTO_PACKAGE}.{SERVICE_NAME}"


@dataclass(frozen=True)
class RpcMethod:
    """A unary RPC method.

    Attributes:
        name: Method name within the service (e.g. "GetTags")
        request_type: Wire message class sent to the service
        response_type: Wire message class returned by the service
    """

    name: str
    request_type: type[WireMessage]
    response_type: type[WireMessage]

    @property
    def path(self) -> str:
        """Fully-qualified method path, e.g. "contractregistry.ContractRegistry/GetTags"."""
        return method_path(self.name)


def method_path(name: str) -> str:
    """Return the fully-qualified path for a method of the registry service."""
    return f"{SERVICE}/{name}"


REGISTER_CONTRACT = RpcMethod("RegisterContract", RegisterContractRequest, RegisterContractResponse)
DEREGISTER_CONTRACT = RpcMethod(
    "DeregisterContract", DeregisterContractRequest, DeregisterContractResponse
)
DELETE_ARTIFACT = RpcMethod("DeleteArtifact", DeleteArtifactRequest, DeleteArtifactResponse)
GET_CATALOG = RpcMethod("GetCatalog", GetCatalogRequest, GetCatalogResponse)
GET_CONTRACT = RpcMethod("GetContract", GetContractRequest, GetContractResponse)
GET_CONTRACT_ABI = RpcMethod("GetContractABI", GetContractABIRequest, GetContractABIResponse)
GET_CONTRACT_BYTECODE = RpcMethod(
    "GetContractBytecode", GetContractRequest, GetContractBytecodeResponse
)
GET_CONTRACT_DEPLOYED_BYTECODE = RpcMethod(
    "GetContractDeployedBytecode", GetContractRequest, GetContractDeployedBytecodeResponse
)
GET_TAGS = RpcMethod("GetTags", GetTagsRequest, GetTagsResponse)

METHODS: dict[str, RpcMethod] = {
    method.name: method
    for method in (
        REGISTER_CONTRACT,
        DEREGISTER_CONTRACT,
        DELETE_ARTIFACT,
        GET_CATALOG,
        GET_CONTRACT,
        GET_CONTRACT_ABI,
        GET_CONTRACT_BYTECODE,
        GET_CONTRACT_DEPLOYED_BYTECODE,
        GET_TAGS,
    )
}
