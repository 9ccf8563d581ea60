"""Client-side representation of a registered contract."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr

from .wire import ContractId


class Contract(BaseModel):
    """A contract as the client sees it: decoded ABI and hex bytecode.

    Attributes:
        id: Name and tag the contract is registered under
        abi: JSON value describing the contract interface
        bytecode: 0x-prefixed hex creation bytecode
        deployed_bytecode: 0x-prefixed hex runtime bytecode

    Example:
        >>> contract = Contract(
        ...     id=ContractId(name="myContract", tag="1"),
        ...     abi=[],
        ...     bytecode="0xfefe",
        ...     deployed_bytecode="0xdede",
        ... )
        >>> contract.name
        'myContract'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: ContractId
    abi: Any
    bytecode: StrictStr
    deployed_bytecode: StrictStr

    @property
    def name(self) -> str:
        return self.id.name

    @property
    def tag(self) -> str:
        return self.id.tag
