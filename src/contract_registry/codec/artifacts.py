"""Conversions between client-side contract values and wire fields.

ABIs travel as UTF-8 JSON text and bytecode travels as raw bytes; on the
client side an ABI is a plain JSON value and bytecode is a 0x-prefixed hex
string. Every function here is pure.
"""

from __future__ import annotations

import json
import re
from typing import Any

from ..contract import Contract
from ..exceptions import DecodeError, EncodeError
from ..wire import ContractId, ContractWire

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")
_SURROGATES = re.compile("[\ud800-\udfff]")


def encode_abi(abi: Any) -> bytes:
    """Serialize an ABI to UTF-8 JSON bytes.

    The JSON text is compact and keeps non-ASCII characters literal, matching
    what a JavaScript client produces with JSON.stringify. Unpaired surrogates
    have no UTF-8 form and are written as \\u escapes instead.

    Raises:
        EncodeError: If the ABI is not JSON serializable
    """
    try:
        text = json.dumps(abi, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"ABI is not JSON serializable: {e}") from e
    text = _SURROGATES.sub(lambda m: f"\\u{ord(m.group()):04x}", text)
    return text.encode("utf-8")


def decode_abi(data: bytes) -> Any:
    """Parse UTF-8 JSON bytes back into an ABI value.

    Raises:
        DecodeError: If data is not valid UTF-8 encoded JSON
    """
    try:
        return json.loads(bytes(data).decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DecodeError(f"ABI is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DecodeError(f"ABI is not valid JSON: {e}") from e


def hex_to_bytes(value: str) -> bytes:
    """Convert a 0x-prefixed hex string to bytes.

    Args:
        value: Hex string such as "0xfefe"; "0x" alone is the empty byte string

    Raises:
        DecodeError: If the prefix is missing, the digit count is odd, or a
            character is not a hex digit
    """
    if not isinstance(value, str):
        raise DecodeError(f"expected a hex string, got {type(value).__name__}")
    if value[:2] not in ("0x", "0X"):
        raise DecodeError(f"hex string must start with 0x: {value!r}")

    digits = value[2:]
    if len(digits) % 2:
        raise DecodeError(f"hex string has an odd number of digits: {value!r}")
    if not _HEX_DIGITS.fullmatch(digits):
        raise DecodeError(f"hex string contains non-hex characters: {value!r}")

    return bytes.fromhex(digits)


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to a lowercase 0x-prefixed hex string."""
    return "0x" + bytes(data).hex()


def contract_id(name: str, tag: str = "") -> ContractId:
    """Build the wire identity of a contract for a request.

    Raises:
        EncodeError: If name is empty
    """
    if not name:
        raise EncodeError("contract name must not be empty")
    return ContractId(name=name, tag=tag)


def contract_to_wire(contract: Contract) -> ContractWire:
    """Map a client-side Contract onto its wire representation."""
    return ContractWire(
        id=contract_id(contract.id.name, contract.id.tag),
        abi=encode_abi(contract.abi),
        bytecode=hex_to_bytes(contract.bytecode),
        deployed_bytecode=hex_to_bytes(contract.deployed_bytecode),
    )


def contract_from_wire(wire: ContractWire) -> Contract:
    """Map a wire contract back to the client-side Contract.

    Raises:
        DecodeError: If the ABI bytes are not valid UTF-8 encoded JSON
    """
    return Contract(
        id=ContractId(name=wire.id.name, tag=wire.id.tag),
        abi=decode_abi(wire.abi),
        bytecode=bytes_to_hex(wire.bytecode),
        deployed_bytecode=bytes_to_hex(wire.deployed_bytecode),
    )
