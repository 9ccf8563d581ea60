"""Field helpers for wire messages.

This module provides the WireField() helper used to attach protobuf field
numbers to Pydantic fields.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

# Protobuf reserves 19000-19999 and caps field numbers at 2**29 - 1
MAX_FIELD_NUMBER = 2**29 - 1
_RESERVED_RANGE = range(19000, 20000)


def WireField(number: int, **kwargs: Any) -> FieldInfo:
    """Create a wire field carrying its protobuf field number.

    Args:
        number: Protobuf field number (1 to 2**29 - 1, outside 19000-19999)
        **kwargs: Additional Field() arguments (default, default_factory, ...)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Raises:
        ValueError: If the field number is outside the protobuf range

    Example:
        >>> class ContractId(WireMessage):
        ...     name: str = WireField(1, default="")
        ...     tag: str = WireField(2, default="")
    """
    if not 1 <= number <= MAX_FIELD_NUMBER or number in _RESERVED_RANGE:
        raise ValueError(f"invalid protobuf field number: {number}")

    return cast(FieldInfo, Field(json_schema_extra={"proto_number": number}, **kwargs))


def field_number(field_info: FieldInfo) -> int | None:
    """Return the protobuf field number attached by WireField(), if any."""
    extra = field_info.json_schema_extra
    if isinstance(extra, dict):
        number = extra.get("proto_number")
        if isinstance(number, int):
            return number
    return None
