"""Binary decoder for wire messages.

This module provides the decode() function that converts protobuf binary data
back to a wire message instance.
"""

from __future__ import annotations

from typing import Type, TypeVar

from google.protobuf.message import DecodeError as ProtobufDecodeError
from pydantic import ValidationError

from ..exceptions import DecodeError
from ..models import WireMessage

T = TypeVar("T", bound=WireMessage)


def decode(message_class: Type[T], data: bytes) -> T:
    """Decode protobuf binary data to a wire message.

    Unknown fields are skipped and missing fields take their empty value, so a
    response from a newer service still decodes.

    Args:
        message_class: Wire message class to decode to
        data: Binary data to decode

    Returns:
        Decoded message instance

    Raises:
        SchemaError: If the message schema is invalid
        DecodeError: If data is truncated, corrupted, or doesn't match schema

    Examples:
        ```python
        from contract_registry.codec import decode
        from contract_registry.wire import GetTagsResponse

        response = decode(GetTagsResponse, b"\\x0a\\x04tag1\\x0a\\x04tag2")
        assert response.tags == ["tag1", "tag2"]
        ```
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(
            f"{message_class.__name__}: expected bytes, got {type(data).__name__}"
        )

    # Import here to avoid circular dependency
    from ..protobuf.convert import from_proto
    from ..protobuf.descriptor import message_class as proto_class

    pb_class = proto_class(message_class)

    try:
        pb = pb_class.FromString(bytes(data))
    except ProtobufDecodeError as e:
        raise DecodeError(f"Invalid {message_class.__name__} payload: {e}") from e

    try:
        return from_proto(message_class, pb)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {message_class.__name__}: {e}") from e
