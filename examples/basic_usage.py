"""Basic usage of the contract registry client.

Runs against a scripted MockTransport so no service is needed; swap the
transport for an endpoint ("localhost:50051") to talk to a real registry.
"""

from __future__ import annotations

import asyncio
import json

from contract_registry import ContractRegistry, MockTransport, decode, encode_abi
from contract_registry.wire import (
    GetContractABIResponse,
    GetTagsResponse,
    RegisterContractRequest,
    RegisterContractResponse,
)

ABI = [
    {
        "inputs": [],
        "name": "name",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    }
]


async def main() -> None:
    transport = MockTransport()
    transport.set_response("RegisterContract", RegisterContractResponse())
    transport.set_response("GetTags", GetTagsResponse(tags=["1", "2"]))
    transport.set_response("GetContractABI", GetContractABIResponse(abi=encode_abi(ABI)))

    async with ContractRegistry(transport=transport) as registry:
        print("=" * 60)
        print("Register")
        print("=" * 60)
        await registry.register("myContract", "1", ABI, "0xfefe", "0xdede")

        method, request = transport.calls[-1]
        sent = decode(RegisterContractRequest, request)
        print(f"  method:   {method}")
        print(f"  payload:  {len(request)} bytes")
        print(f"  identity: {sent.contract.id.name}:{sent.contract.id.tag}")
        print(f"  bytecode: {sent.contract.bytecode.hex()}")

        print()
        print("=" * 60)
        print("Query")
        print("=" * 60)
        print(f"  tags: {await registry.get_tags('myContract')}")
        abi = await registry.get_abi("myContract", "1")
        print(f"  abi:  {json.dumps(abi)}")


if __name__ == "__main__":
    asyncio.run(main())
