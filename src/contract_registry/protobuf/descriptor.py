"""Runtime protobuf descriptors for wire messages.

Wire messages are declared as Pydantic models; this module turns a model and
the messages it nests into a FileDescriptorProto, loads it into a private
DescriptorPool and hands back the generated protobuf message class. The
protobuf runtime then owns the actual wire format.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from ..codec.schema import FieldSchema, MessageSchema
from ..exceptions import SchemaError
from ..models import WireMessage

_FieldProto = descriptor_pb2.FieldDescriptorProto

_TYPES = {
    "string": _FieldProto.TYPE_STRING,
    "bytes": _FieldProto.TYPE_BYTES,
    "message": _FieldProto.TYPE_MESSAGE,
}

# Each root model gets its own pool, so independently declared models never
# collide on a protobuf name
_MESSAGE_CLASSES: Dict[Type[WireMessage], Any] = {}


def closure(model_class: Type[WireMessage]) -> List[Type[WireMessage]]:
    """Return model_class followed by every message type it nests, transitively.

    Raises:
        SchemaError: If two distinct classes share a protobuf message name
    """
    ordered: List[Type[WireMessage]] = []
    pending = [model_class]

    while pending:
        current = pending.pop(0)
        if current in ordered:
            continue
        ordered.append(current)
        pending.extend(MessageSchema.from_model(current).nested_types())

    names: Dict[str, Type[WireMessage]] = {}
    for cls in ordered:
        existing = names.setdefault(cls.wire_name(), cls)
        if existing is not cls:
            raise SchemaError(
                f"{existing.__name__} and {cls.__name__} both map to protobuf "
                f"message {cls.wire_name()}"
            )

    return ordered


def file_descriptor(model_class: Type[WireMessage]) -> descriptor_pb2.FileDescriptorProto:
    """Build a proto3 FileDescriptorProto holding model_class and its nested types."""
    package = model_class.proto_package
    file_proto = descriptor_pb2.FileDescriptorProto()
    file_proto.name = f"{model_class.full_name().replace('.', '/')}.proto"
    file_proto.syntax = "proto3"
    if package:
        file_proto.package = package

    for cls in closure(model_class):
        message_proto = file_proto.message_type.add()
        message_proto.name = cls.wire_name()
        for field in MessageSchema.from_model(cls).fields:
            _add_field(message_proto, field, package)

    return file_proto


def _add_field(
    message_proto: descriptor_pb2.DescriptorProto, field: FieldSchema, package: str
) -> None:
    field_proto = message_proto.field.add()
    field_proto.name = field.name
    field_proto.number = field.number
    field_proto.type = _TYPES[field.kind]  # type: ignore[assignment]
    field_proto.label = (  # type: ignore[assignment]
        _FieldProto.LABEL_REPEATED if field.repeated else _FieldProto.LABEL_OPTIONAL
    )

    if field.message_type is not None:
        prefix = f".{package}." if package else "."
        field_proto.type_name = f"{prefix}{field.message_type.wire_name()}"


def message_class(model_class: Type[WireMessage]) -> Any:
    """Return the protobuf message class generated for a wire model.

    Args:
        model_class: WireMessage subclass

    Returns:
        A google.protobuf Message subclass with the same fields and numbers

    Raises:
        SchemaError: If the model cannot be expressed as a protobuf message
    """
    cached = _MESSAGE_CLASSES.get(model_class)
    if cached is not None:
        return cached

    file_proto = file_descriptor(model_class)
    pool = descriptor_pool.DescriptorPool()
    try:
        pool.AddSerializedFile(file_proto.SerializeToString())
        descriptor = pool.FindMessageTypeByName(
            f"{file_proto.package}.{model_class.wire_name()}"
            if file_proto.package
            else model_class.wire_name()
        )
    except (TypeError, KeyError) as e:
        raise SchemaError(f"Cannot build protobuf descriptor for {model_class.__name__}: {e}") from e

    pb_class = message_factory.GetMessageClass(descriptor)
    _MESSAGE_CLASSES[model_class] = pb_class
    return pb_class
