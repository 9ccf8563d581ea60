"""Schema introspection for wire messages.

This module provides utilities to analyze WireMessage models and extract
encoding-relevant information such as field numbers, scalar kinds and nested
message types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Type, get_args, get_origin

from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from ..models import WireMessage, field_number

_SCALAR_KINDS = {str: "string", bytes: "bytes"}


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Field name
        number: Protobuf field number
        kind: "string", "bytes" or "message"
        repeated: Whether field is a list
        message_type: Nested WireMessage class if kind is "message"
    """

    name: str
    number: int
    kind: str
    repeated: bool
    message_type: Optional[Type[WireMessage]]

    @property
    def proto_type(self) -> str:
        """Protobuf type name as written in a .proto file."""
        if self.message_type is not None:
            return self.message_type.wire_name()
        return self.kind


class MessageSchema:
    """Schema information for an entire wire message.

    This class introspects a WireMessage model and extracts all encoding-relevant
    information for each field.

    Example:
        >>> schema = MessageSchema.from_model(ContractWire)
        >>> for field in schema.fields:
        ...     print(f"{field.number}: {field.proto_type} {field.name}")
    """

    def __init__(self, model_class: Type[WireMessage]) -> None:
        """Initialize schema from a wire message model.

        Args:
            model_class: WireMessage subclass to introspect

        Raises:
            SchemaError: If model_class is not a WireMessage or a field is invalid
        """
        if not (isinstance(model_class, type) and issubclass(model_class, WireMessage)):
            raise SchemaError(f"{model_class!r} is not a WireMessage subclass")

        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[WireMessage]) -> MessageSchema:
        """Create a schema from a wire message model.

        Args:
            model_class: WireMessage subclass

        Returns:
            MessageSchema instance
        """
        return cls(model_class)

    @property
    def name(self) -> str:
        return self.model_class.wire_name()

    def nested_types(self) -> List[Type[WireMessage]]:
        """Return nested message classes, in field order, without duplicates."""
        nested: List[Type[WireMessage]] = []
        for field in self.fields:
            if field.message_type is not None and field.message_type not in nested:
                nested.append(field.message_type)
        return nested

    def _introspect(self) -> None:
        """Introspect the model and populate field schemas."""
        seen: dict[int, str] = {}

        for field_name, field_info in self.model_class.model_fields.items():
            field_schema = self._extract_field_schema(field_name, field_info)

            if field_schema.number in seen:
                raise SchemaError(
                    f"{self.model_class.__name__}: fields {seen[field_schema.number]} and "
                    f"{field_name} share field number {field_schema.number}"
                )
            seen[field_schema.number] = field_name

            self.fields.append(field_schema)

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        """Extract schema information from a Pydantic FieldInfo.

        Args:
            name: Field name
            field_info: Pydantic FieldInfo object

        Returns:
            FieldSchema with extracted information
        """
        number = field_number(field_info)
        if number is None:
            raise SchemaError(
                f"{self.model_class.__name__}.{name}: declare the field with WireField(number)"
            )

        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        repeated = False
        if get_origin(annotation) is list:
            repeated = True
            args = get_args(annotation)
            if len(args) != 1:
                raise SchemaError(f"Field {name}: list fields need one element type")
            annotation = args[0]

        if annotation in _SCALAR_KINDS:
            return FieldSchema(name, number, _SCALAR_KINDS[annotation], repeated, None)

        if isinstance(annotation, type) and issubclass(annotation, WireMessage):
            return FieldSchema(name, number, "message", repeated, annotation)

        raise SchemaError(
            f"Field {name}: unsupported type {annotation}. "
            f"Supported: str, bytes, WireMessage, and lists of those."
        )
