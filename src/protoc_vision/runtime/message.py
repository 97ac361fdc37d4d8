"""Message base class plus the generic encode / decode / plain-object walks.

Generated message classes subclass :class:`Message` and declare their schema
as :class:`~protoc_vision.runtime.fields.Field` attributes::

    class KeyValue(Message):
        FULL_NAME = "google.cloud.vision.v1.Product.KeyValue"

        key = Field(1, "string")
        value = Field(2, "string")
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .fields import (
    Field,
    RepeatedContainer,
    add_to_repeated_field,
    clear_field,
    compute_oneof_case,
    get_field,
    get_repeated_field,
    get_wrapper_field,
    has_field,
    set_field,
    set_oneof_field,
    set_repeated_field,
    set_wrapper_field,
)
from .registry import default_registry
from .wire import BinaryReader, BinaryWriter, WireType

logger = logging.getLogger(__name__)

__all__ = [
    "Message",
    "RepeatedContainer",
    "add_to_repeated_field",
    "clear_field",
    "compute_oneof_case",
    "deserialize_binary_from_reader",
    "get_field",
    "get_repeated_field",
    "get_wrapper_field",
    "has_field",
    "serialize_binary_to_writer",
    "set_field",
    "set_oneof_field",
    "set_repeated_field",
    "set_wrapper_field",
    "to_plain_object",
]

INSTANCE_KEY = "$instance"


class Message:
    """Base for generated message types.

    Holds no state of its own; each instance owns a ``_values`` dict from
    field number to value, and each subclass gets read-only schema tables
    built once when the class is created.
    """

    FULL_NAME = ""

    _fields_by_number: Mapping[int, Field] = MappingProxyType({})
    _fields_by_name: Mapping[str, Field] = MappingProxyType({})
    _fields_by_json_name: Mapping[str, Field] = MappingProxyType({})
    _oneofs: Mapping[str, tuple] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declared = [v for v in vars(cls).values() if isinstance(v, Field)]
        by_number: Dict[int, Field] = {}
        for f in sorted(declared, key=lambda f: f.number):
            if f.number in by_number:
                raise TypeError(
                    f"{cls.__name__}: field number {f.number} used by "
                    f"{by_number[f.number].name!r} and {f.name!r}"
                )
            by_number[f.number] = f
        oneofs: Dict[str, list] = {}
        for f in by_number.values():
            if f.oneof:
                oneofs.setdefault(f.oneof, []).append(f.number)
        cls._fields_by_number = MappingProxyType(by_number)
        cls._fields_by_name = MappingProxyType({f.name: f for f in by_number.values()})
        cls._fields_by_json_name = MappingProxyType({f.json_name: f for f in by_number.values()})
        cls._oneofs = MappingProxyType({k: tuple(v) for k, v in oneofs.items()})
        if cls.FULL_NAME:
            default_registry.register(cls.FULL_NAME, cls)

    def __init__(self, **kwargs: Any):
        self._values: Dict[int, Any] = {}
        for name, value in kwargs.items():
            desc = self._fields_by_name.get(name)
            if desc is None:
                raise ValueError(f"{type(self).__name__} has no field named {name!r}")
            set_field(self, desc.number, value)

    # -- field helpers by name --

    def _field(self, name: str) -> Field:
        try:
            return self._fields_by_name[name]
        except KeyError:
            raise ValueError(f"{type(self).__name__} has no field named {name!r}") from None

    def has_field(self, name: str) -> bool:
        return has_field(self, self._field(name).number)

    def clear_field(self, name: str) -> None:
        clear_field(self, self._field(name).number)

    def which_oneof(self, group: str) -> Optional[str]:
        """Return the name of the member set in oneof ``group``, or None."""
        if group not in self._oneofs:
            raise ValueError(f"{type(self).__name__} has no oneof named {group!r}")
        number = compute_oneof_case(self, group)
        return self._fields_by_number[number].name if number else None

    def clear(self) -> None:
        self._values.clear()

    # -- codec --

    def serialize_binary(self) -> bytes:
        writer = BinaryWriter()
        serialize_binary_to_writer(self, writer)
        return writer.get_result_buffer()

    @classmethod
    def deserialize_binary(cls, data: bytes):
        msg = cls()
        deserialize_binary_from_reader(msg, BinaryReader(data))
        return msg

    def merge_from_binary(self, data: bytes):
        deserialize_binary_from_reader(self, BinaryReader(data))
        return self

    def to_dict(self, include_instance: bool = False, json_names: bool = False) -> Dict[str, Any]:
        return to_plain_object(self, include_instance, json_names)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Build an instance from a plain mapping keyed by field or JSON name."""
        kwargs = {}
        for key, value in data.items():
            if key == INSTANCE_KEY:
                continue
            desc = cls._fields_by_name.get(key) or cls._fields_by_json_name.get(key)
            if desc is None:
                raise ValueError(f"{cls.__name__} has no field named {key!r}")
            kwargs[desc.name] = value
        return cls(**kwargs)

    # -- python protocol --

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        for desc in self._fields_by_number.values():
            if desc.oneof and (desc.number in self._values) != (desc.number in other._values):
                return False
            if _read(self, desc) != _read(other, desc):
                return False
        return True

    __hash__ = None

    def __repr__(self) -> str:
        parts = []
        for desc in self._fields_by_number.values():
            if has_field(self, desc.number):
                parts.append(f"{desc.name}={desc.__get__(self)!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


def _read(msg: Message, desc: Field) -> Any:
    raw = msg._values.get(desc.number)
    if desc.repeated:
        return list(raw) if raw is not None else []
    if desc.is_message and raw is not None and not isinstance(raw, Message):
        return desc.message_class.from_dict(raw)
    return desc.default if raw is None else raw


# -- encode --

def serialize_binary_to_writer(msg: Message, writer: BinaryWriter) -> None:
    """Write every populated field of ``msg`` in ascending field-number order.

    Proto3 scalars holding their default value and absent message fields are
    omitted; oneof members are written whenever they are set.
    """
    values = msg._values
    for number, desc in msg._fields_by_number.items():
        if number not in values:
            continue
        if desc.repeated:
            items = values[number]
            if not items:
                continue
            if desc.is_message:
                for item in items:
                    writer.write_message(number, item, serialize_binary_to_writer)
            elif desc.packed:
                writer.write_packed(number, list(items), desc.scalar.encode_element)
            else:
                write = getattr(writer, desc.scalar.writer)
                for item in items:
                    write(number, item)
        elif desc.is_message:
            nested = values[number]
            if not isinstance(nested, Message):
                nested = desc.message_class.from_dict(nested)
            writer.write_message(number, nested, serialize_binary_to_writer)
        else:
            value = values[number]
            if not desc.oneof and value == desc.default:
                continue
            getattr(writer, desc.scalar.writer)(number, value)


# -- decode --

def deserialize_binary_from_reader(msg: Message, reader: BinaryReader) -> Message:
    """Read fields from ``reader`` into ``msg`` until the input is exhausted.

    Unknown field numbers, and known numbers arriving with an unexpected wire
    type, are skipped. Malformed input raises DecodeError.
    """
    fields = msg._fields_by_number
    while reader.next_field():
        number = reader.field_number
        desc = fields.get(number)
        if desc is None:
            logger.debug(
                "%s: skipping unknown field %d (wire type %s)",
                msg.FULL_NAME or type(msg).__name__, number, reader.wire_type.name,
            )
            reader.skip_field()
            continue
        if desc.repeated:
            _read_repeated(msg, desc, reader)
        elif reader.wire_type != desc.wire_type:
            logger.debug(
                "%s: field %d has wire type %s, expected %s; skipping",
                msg.FULL_NAME, number, reader.wire_type.name, desc.wire_type.name,
            )
            reader.skip_field()
        elif desc.is_message:
            existing = get_wrapper_field(msg, desc.message_class, number)
            if existing is None:
                existing = desc.message_class()
            reader.read_message(existing, deserialize_binary_from_reader)
            set_wrapper_field(msg, number, existing)
        else:
            value = getattr(reader, desc.scalar.reader)()
            if desc.oneof:
                set_oneof_field(msg, number, value)
            else:
                msg._values[number] = value
    return msg


def _read_repeated(msg: Message, desc: Field, reader: BinaryReader) -> None:
    container = get_repeated_field(msg, desc.number)
    if desc.is_message:
        if reader.wire_type != WireType.LENGTH_DELIMITED:
            reader.skip_field()
            return
        item = desc.message_class()
        reader.read_message(item, deserialize_binary_from_reader)
        container.append(item)
        return
    read = getattr(BinaryReader, desc.scalar.reader)
    if reader.wire_type == WireType.LENGTH_DELIMITED and desc.scalar.packable:
        container.extend(reader.read_packed(read))
    elif reader.wire_type == desc.scalar.wire_type:
        container.append(read(reader))
    else:
        reader.skip_field()


# -- plain objects --

def to_plain_object(
    msg: Message,
    include_instance: bool = False,
    json_names: bool = False,
) -> Dict[str, Any]:
    """Recursively convert ``msg`` into a dict keyed by field name.

    Unset scalars appear with their default, absent messages and unset oneof
    members as None, and repeated fields as lists. With ``json_names`` the
    keys are the lowerCamelCase JSON names. ``msg`` is not modified.
    """
    result: Dict[str, Any] = {}
    values = msg._values
    for number, desc in msg._fields_by_number.items():
        key = desc.json_name if json_names else desc.name
        raw = values.get(number)
        if desc.repeated:
            items = raw if raw is not None else ()
            if desc.is_message:
                result[key] = [to_plain_object(i, include_instance, json_names) for i in items]
            else:
                result[key] = list(items)
        elif raw is None:
            result[key] = None if desc.is_message or desc.oneof else desc.default
        elif desc.is_message:
            if not isinstance(raw, Message):
                # Unmaterialized mapping: build a throwaway instance.
                raw = desc.message_class.from_dict(raw)
            result[key] = to_plain_object(raw, include_instance, json_names)
        else:
            result[key] = raw
    if include_instance:
        result[INSTANCE_KEY] = msg
    return result

