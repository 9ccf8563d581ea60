"""Protobuf binding for contract_registry wire messages.

This module builds protobuf descriptors from the Pydantic wire models at
runtime, converts between the two representations, and renders .proto text.
"""

from __future__ import annotations

from .convert import from_proto, registry_proto_schema, to_proto, to_proto_schema
from .descriptor import file_descriptor, message_class

__all__ = [
    "to_proto",
    "from_proto",
    "to_proto_schema",
    "registry_proto_schema",
    "file_descriptor",
    "message_class",
]
