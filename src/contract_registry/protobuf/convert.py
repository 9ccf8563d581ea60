"""Conversion between wire models and protobuf messages.

This module provides:
- to_proto(): Pydantic wire message -> protobuf message instance
- from_proto(): protobuf message instance -> Pydantic wire message
- to_proto_schema(): .proto text for a set of wire messages and an optional service
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Type, TypeVar

from ..codec.schema import MessageSchema
from ..exceptions import EncodeError
from ..models import WireMessage
from .descriptor import closure, message_class

T = TypeVar("T", bound=WireMessage)


def to_proto(message: WireMessage) -> Any:
    """Convert a wire message to an instance of its protobuf message class.

    Raises:
        SchemaError: If the message schema is invalid
        EncodeError: If a field value cannot be assigned to the protobuf field
    """
    pb = message_class(type(message))()
    _fill(pb, message)
    return pb


def _fill(pb: Any, message: WireMessage) -> None:
    for field in MessageSchema.from_model(type(message)).fields:
        value = getattr(message, field.name)
        target = getattr(pb, field.name)

        try:
            if field.message_type is not None:
                if field.repeated:
                    for item in value:
                        _fill(target.add(), item)
                else:
                    # Keep the sub-message present on the wire even when empty
                    target.SetInParent()
                    _fill(target, value)
            elif field.repeated:
                target.extend(value)
            else:
                setattr(pb, field.name, value)
        except (TypeError, ValueError) as e:
            raise EncodeError(
                f"Field {type(message).__name__}.{field.name}: cannot encode {value!r}: {e}"
            ) from e


def from_proto(model_class: Type[T], pb: Any) -> T:
    """Convert a protobuf message instance back to a wire model.

    Fields absent from the protobuf message take their empty value.
    """
    values: dict[str, Any] = {}

    for field in MessageSchema.from_model(model_class).fields:
        value = getattr(pb, field.name)

        if field.message_type is not None:
            if field.repeated:
                values[field.name] = [from_proto(field.message_type, item) for item in value]
            else:
                values[field.name] = from_proto(field.message_type, value)
        elif field.repeated:
            values[field.name] = list(value)
        else:
            values[field.name] = value

    return model_class(**values)


def to_proto_schema(
    message_classes: Iterable[Type[WireMessage]],
    *,
    package: str = "",
    syntax: str = "proto3",
    service: Optional[str] = None,
    methods: Sequence[Any] = (),
) -> str:
    """Generate .proto text for a set of wire messages.

    Nested message types are emitted even when not listed explicitly. Aliased
    classes (the same class listed twice) are emitted once.

    Args:
        message_classes: Wire message classes to render
        package: Optional protobuf package name
        syntax: Protobuf syntax version ("proto2" or "proto3")
        service: Optional service name; renders a service block when given
        methods: RpcMethod entries for the service block

    Returns:
        .proto schema as a string

    Raises:
        SchemaError: If a message contains unsupported types

    Example:
        >>> print(to_proto_schema([GetTagsRequest], package="contractregistry"))
        syntax = "proto3";
        package contractregistry;
        <BLANKLINE>
        message GetTagsRequest {
          string name = 1;
        }
    """
    lines = [f'syntax = "{syntax}";']
    if package:
        lines.append(f"package {package};")

    emitted: list[Type[WireMessage]] = []
    for root in message_classes:
        for cls in closure(root):
            if cls not in emitted:
                emitted.append(cls)

    for cls in emitted:
        lines.append("")
        lines.extend(_message_to_proto(cls))

    if service is not None:
        lines.append("")
        lines.append(f"service {service} {{")
        for method in methods:
            lines.append(
                f"  rpc {method.name}({method.request_type.wire_name()}) "
                f"returns ({method.response_type.wire_name()});"
            )
        lines.append("}")

    return "\n".join(lines) + "\n"


def _message_to_proto(model_class: Type[WireMessage]) -> list[str]:
    """Render one message definition."""
    schema = MessageSchema.from_model(model_class)

    if model_class.__doc__:
        summary = model_class.__doc__.strip().splitlines()[0]
        lines = [f"// {summary}", f"message {schema.name} {{"]
    else:
        lines = [f"message {schema.name} {{"]

    for field in schema.fields:
        label = "repeated " if field.repeated else ""
        lines.append(f"  {label}{field.proto_type} {field.name} = {field.number};")

    lines.append("}")
    return lines


def registry_proto_schema() -> str:
    """Return the .proto text of the contractregistry.ContractRegistry service."""
    from ..service import METHODS, SERVICE_NAME
    from ..wire import PROTO_PACKAGE, WIRE_MESSAGES

    return to_proto_schema(
        WIRE_MESSAGES,
        package=PROTO_PACKAGE,
        service=SERVICE_NAME,
        methods=list(METHODS.values()),
    )
