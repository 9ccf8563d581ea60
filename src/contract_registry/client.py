"""Contract registry client.

Each public operation performs exactly one unary call: it builds the request
message, encodes it, calls the transport with the method's fully-qualified
path and decodes the response. Transport failures and decode failures reach
the caller unchanged; the client neither retries nor substitutes defaults.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, List, Optional, Type, TypeVar

from pydantic import ValidationError

from .codec import (
    bytes_to_hex,
    contract_from_wire,
    contract_id,
    contract_to_wire,
    decode,
    decode_abi,
    encode,
    hex_to_bytes,
)
from .contract import Contract
from .exceptions import EncodeError
from .models import WireMessage
from .service import (
    DELETE_ARTIFACT,
    DEREGISTER_CONTRACT,
    GET_CATALOG,
    GET_CONTRACT,
    GET_CONTRACT_ABI,
    GET_CONTRACT_BYTECODE,
    GET_CONTRACT_DEPLOYED_BYTECODE,
    GET_TAGS,
    REGISTER_CONTRACT,
    RpcMethod,
)
from .transport import GrpcTransport, Transport, TransportConfig
from .wire import (
    ContractId,
    DeleteArtifactRequest,
    DeregisterContractRequest,
    GetCatalogRequest,
    GetCatalogResponse,
    GetContractABIResponse,
    GetContractBytecodeResponse,
    GetContractDeployedBytecodeResponse,
    GetContractRequest,
    GetContractResponse,
    GetTagsRequest,
    GetTagsResponse,
    RegisterContractRequest,
)

T = TypeVar("T", bound=WireMessage)


class ContractRegistry:
    """Async client for the contractregistry.ContractRegistry service.

    The client holds no state besides its transport, so concurrent operations
    from one event loop are independent of each other.

    Examples:
        ```python
        async with ContractRegistry("localhost:50051") as registry:
            await registry.register(
                "myContract", "1", abi, bytecode="0xfefe", deployed_bytecode="0xdede"
            )
            contract = await registry.get("myContract", "1")
            tags = await registry.get_tags("myContract")
        ```
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        config: Optional[TransportConfig] = None,
    ) -> None:
        """Create a client.

        Args:
            endpoint: Service address as "host:port"; opens a GrpcTransport
            transport: Transport to use instead of opening one
            config: Full gRPC transport configuration instead of an endpoint

        Raises:
            ValueError: Unless exactly one of endpoint, transport, config is given
        """
        given = [arg for arg in (endpoint, transport, config) if arg is not None]
        if len(given) != 1:
            raise ValueError("pass exactly one of endpoint, transport or config")

        if transport is None:
            if config is None:
                config = TransportConfig(str(endpoint))
            transport = GrpcTransport(config)
        self.transport = transport

    async def _call(self, method: RpcMethod, request: WireMessage, response_type: Type[T]) -> T:
        data = await self.transport.call(method.path, encode(request))
        return decode(response_type, data)

    async def register(
        self,
        name: str,
        tag: str,
        abi: Any,
        bytecode: str,
        deployed_bytecode: str,
    ) -> None:
        """Register contract artifacts under name and tag.

        Raises:
            EncodeError: If name is empty, the ABI is not JSON serializable or
                an argument has the wrong type
            DecodeError: If a bytecode string is not valid 0x-prefixed hex
            TransportError: If the call fails, including when the service
                rejects an identity that is already registered
        """
        try:
            contract = Contract(
                id=ContractId(name=name, tag=tag),
                abi=abi,
                bytecode=bytecode,
                deployed_bytecode=deployed_bytecode,
            )
        except ValidationError as e:
            raise EncodeError(f"Invalid contract: {e}") from e
        request = RegisterContractRequest(contract=contract_to_wire(contract))
        await self._call(REGISTER_CONTRACT, request, REGISTER_CONTRACT.response_type)

    async def deregister(self, name: str, tag: str) -> None:
        """Remove the name/tag entry. Artifact bytes may outlive it."""
        request = DeregisterContractRequest(contract_id=contract_id(name, tag))
        await self._call(DEREGISTER_CONTRACT, request, DEREGISTER_CONTRACT.response_type)

    async def delete_artifact(self, bytecode_hash: str) -> None:
        """Delete artifact bytes addressed by the hex hash of their bytecode."""
        request = DeleteArtifactRequest(bytecode_hash=hex_to_bytes(bytecode_hash))
        await self._call(DELETE_ARTIFACT, request, DELETE_ARTIFACT.response_type)

    async def get_catalog(self) -> List[str]:
        """Return the names of all registered contracts, in service order."""
        response = await self._call(GET_CATALOG, GetCatalogRequest(), GetCatalogResponse)
        return list(response.names)

    async def get(self, name: str, tag: str) -> Contract:
        """Return the full contract registered under name and tag."""
        request = GetContractRequest(contract_id=contract_id(name, tag))
        response = await self._call(GET_CONTRACT, request, GetContractResponse)
        return contract_from_wire(response.contract)

    async def get_abi(self, name: str, tag: str) -> Any:
        """Return the decoded ABI of a contract.

        Raises:
            DecodeError: If the service returns ABI bytes that are not UTF-8 JSON
        """
        request = GetContractRequest(contract_id=contract_id(name, tag))
        response = await self._call(GET_CONTRACT_ABI, request, GetContractABIResponse)
        return decode_abi(response.abi)

    async def get_bytecode(self, name: str, tag: str) -> str:
        """Return the hex creation bytecode of a contract."""
        request = GetContractRequest(contract_id=contract_id(name, tag))
        response = await self._call(GET_CONTRACT_BYTECODE, request, GetContractBytecodeResponse)
        return bytes_to_hex(response.bytecode)

    async def get_deployed_bytecode(self, name: str, tag: str) -> str:
        """Return the hex deployed bytecode of a contract."""
        request = GetContractRequest(contract_id=contract_id(name, tag))
        response = await self._call(
            GET_CONTRACT_DEPLOYED_BYTECODE, request, GetContractDeployedBytecodeResponse
        )
        return bytes_to_hex(response.deployed_bytecode)

    async def get_tags(self, name: str) -> List[str]:
        """Return every tag registered for name, in service order."""
        response = await self._call(GET_TAGS, GetTagsRequest(name=name), GetTagsResponse)
        return list(response.tags)

    async def close(self) -> None:
        """Close the underlying transport."""
        await self.transport.close()

    async def __aenter__(self) -> ContractRegistry:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
