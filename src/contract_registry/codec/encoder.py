"""Binary encoder for wire messages.

This module provides the encode() function that converts a wire message
instance to protobuf wire format.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from ..models import WireMessage


def encode(message: WireMessage) -> bytes:
    """Encode a wire message to protobuf binary format.

    Encoding is deterministic: equal messages always produce equal bytes.
    Empty scalar and repeated fields are omitted, as proto3 requires; nested
    messages are always written.

    Args:
        message: Wire message instance to encode

    Returns:
        Protobuf-encoded bytes

    Raises:
        SchemaError: If the message schema is invalid
        EncodeError: If a field value cannot be encoded

    Examples:
        ```python
        from contract_registry.codec import encode
        from contract_registry.wire import GetTagsRequest

        data = encode(GetTagsRequest(name="contract1"))
        assert data == b"\\x0a\\x09contract1"
        ```
    """
    if not isinstance(message, WireMessage):
        raise EncodeError(f"expected a WireMessage, got {type(message).__name__}")

    # Import here to avoid circular dependency
    from ..protobuf.convert import to_proto

    return to_proto(message).SerializeToString(deterministic=True)
