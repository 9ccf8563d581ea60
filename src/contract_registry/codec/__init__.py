"""Codec for contract_registry.

This module provides the protobuf wire codec for request/response messages and
the conversions between client-side contract values and their wire fields.
"""

from __future__ import annotations

from .artifacts import (
    bytes_to_hex,
    contract_from_wire,
    contract_id,
    contract_to_wire,
    decode_abi,
    encode_abi,
    hex_to_bytes,
)
from .decoder import decode
from .encoder import encode
from .schema import FieldSchema, MessageSchema

__all__ = [
    "encode",
    "decode",
    "MessageSchema",
    "FieldSchema",
    "encode_abi",
    "decode_abi",
    "hex_to_bytes",
    "bytes_to_hex",
    "contract_id",
    "contract_to_wire",
    "contract_from_wire",
]
