"""Base wire message class and registry-specific Pydantic configuration.

This module provides the WireMessage class that every request, response and
nested wire structure inherits from.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class WireMessage(BaseModel):
    """Base class for all wire messages.

    Messages should inherit from this class and declare every field with
    WireField(), which records the protobuf field number used on the wire.
    Every field carries an empty default so that a response missing a field
    decodes to an empty value instead of failing.

    Example:
        >>> class GetTagsRequest(WireMessage):
        ...     name: str = WireField(1, default="")

    Attributes:
        proto_name: Protobuf message name when it differs from the class name
        proto_package: Protobuf package the message is declared in
    """

    model_config = ConfigDict(
        # Lax validation so bytearray/memoryview are accepted for bytes fields
        strict=False,
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    proto_name: ClassVar[str | None] = None
    proto_package: ClassVar[str] = ""

    @classmethod
    def wire_name(cls) -> str:
        """Return the protobuf message name for this class."""
        return cls.proto_name or cls.__name__

    @classmethod
    def full_name(cls) -> str:
        """Return the package-qualified protobuf message name."""
        if cls.proto_package:
            return f"{cls.proto_package}.{cls.wire_name()}"
        return cls.wire_name()
