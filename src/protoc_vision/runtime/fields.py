"""Field descriptors and per-field storage access for generated messages.

Each message instance keeps an explicit ``dict`` from field number to value
in ``_values``. The functions in this module are the only code that reads or
writes that mapping; generated classes reach them through :class:`Field`
descriptors, and callers may use them directly by field number.
"""

from __future__ import annotations

import numbers
import struct
from collections.abc import Mapping, MutableSequence
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from .registry import default_registry
from .wire import WireType, encode_varint, zigzag_encode

_INT32 = (-(1 << 31), (1 << 31) - 1)
_UINT32 = (0, (1 << 32) - 1)
_INT64 = (-(1 << 63), (1 << 63) - 1)
_UINT64 = (0, (1 << 64) - 1)

_FLOAT32_MAX = 3.4028234663852886e38


@dataclass(frozen=True)
class ScalarType:
    name: str
    wire_type: WireType
    default: Any
    writer: str
    reader: str
    packable: bool
    encode_element: Optional[Callable[[Any], bytes]] = None
    int_range: Optional[tuple] = None


def _varint(v: int) -> bytes:
    return encode_varint(v)


SCALAR_TYPES: Dict[str, ScalarType] = {
    t.name: t
    for t in (
        ScalarType("int32", WireType.VARINT, 0, "write_int32", "read_int32", True, _varint, _INT32),
        ScalarType("int64", WireType.VARINT, 0, "write_int64", "read_int64", True, _varint, _INT64),
        ScalarType("uint32", WireType.VARINT, 0, "write_uint32", "read_uint32", True, _varint, _UINT32),
        ScalarType("uint64", WireType.VARINT, 0, "write_uint64", "read_uint64", True, _varint, _UINT64),
        ScalarType("sint32", WireType.VARINT, 0, "write_sint32", "read_sint32", True,
                   lambda v: encode_varint(zigzag_encode(v, 32)), _INT32),
        ScalarType("sint64", WireType.VARINT, 0, "write_sint64", "read_sint64", True,
                   lambda v: encode_varint(zigzag_encode(v, 64)), _INT64),
        ScalarType("enum", WireType.VARINT, 0, "write_enum", "read_enum", True, _varint, _INT32),
        ScalarType("bool", WireType.VARINT, False, "write_bool", "read_bool", True,
                   lambda v: b"\x01" if v else b"\x00"),
        ScalarType("fixed32", WireType.FIXED32, 0, "write_fixed32", "read_fixed32", True,
                   lambda v: struct.pack("<I", v), _UINT32),
        ScalarType("sfixed32", WireType.FIXED32, 0, "write_sfixed32", "read_sfixed32", True,
                   lambda v: struct.pack("<i", v), _INT32),
        ScalarType("float", WireType.FIXED32, 0.0, "write_float", "read_float", True,
                   lambda v: struct.pack("<f", v)),
        ScalarType("fixed64", WireType.FIXED64, 0, "write_fixed64", "read_fixed64", True,
                   lambda v: struct.pack("<Q", v), _UINT64),
        ScalarType("sfixed64", WireType.FIXED64, 0, "write_sfixed64", "read_sfixed64", True,
                   lambda v: struct.pack("<q", v), _INT64),
        ScalarType("double", WireType.FIXED64, 0.0, "write_double", "read_double", True,
                   lambda v: struct.pack("<d", v)),
        ScalarType("string", WireType.LENGTH_DELIMITED, "", "write_string", "read_string", False),
        ScalarType("bytes", WireType.LENGTH_DELIMITED, b"", "write_bytes", "read_bytes", False),
    )
}

MESSAGE = "message"


def _round_float32(value: float) -> float:
    if value != value or value in (float("inf"), float("-inf")):
        return value
    if abs(value) > _FLOAT32_MAX:
        raise ValueError(f"Value {value!r} is out of range for a float field")
    return struct.unpack("<f", struct.pack("<f", value))[0]


def check_scalar(type_name: str, value: Any) -> Any:
    """Validate ``value`` for a scalar field type and return its stored form."""
    st = SCALAR_TYPES[type_name]
    if type_name == "string":
        if not isinstance(value, str):
            raise TypeError(f"Expected str for string field, got {type(value).__name__}")
        return value
    if type_name == "bytes":
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes for bytes field, got {type(value).__name__}")
        return bytes(value)
    if type_name == "bool":
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"Expected bool for bool field, got {type(value).__name__}")
        return bool(value)
    if type_name in ("float", "double"):
        if not isinstance(value, numbers.Real):
            raise TypeError(f"Expected a number for {type_name} field, got {type(value).__name__}")
        value = float(value)
        return _round_float32(value) if type_name == "float" else value
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"Expected int for {type_name} field, got {type(value).__name__}")
    value = int(value)
    lo, hi = st.int_range
    if not lo <= value <= hi:
        raise ValueError(f"Value {value} is out of range for {type_name} field")
    return value


# -- descriptors --

class Field:
    """Descriptor for one schema field on a generated message class.

    ``type_name`` is a scalar type name, ``"enum"`` or ``"message"``.
    """

    def __init__(
        self,
        number: int,
        type_name: str,
        *,
        repeated: bool = False,
        message_type: Optional[str] = None,
        enum_type: Optional[str] = None,
        oneof: Optional[str] = None,
        packed: Optional[bool] = None,
        json_name: Optional[str] = None,
    ):
        if type_name != MESSAGE and type_name not in SCALAR_TYPES:
            raise ValueError(f"Unknown field type {type_name!r}")
        if type_name == MESSAGE and not message_type:
            raise ValueError("Message fields need a message_type")
        self.number = number
        self.type_name = type_name
        self.repeated = repeated
        self.message_type = message_type.lstrip(".") if message_type else None
        self.enum_type = enum_type.lstrip(".") if enum_type else None
        self.oneof = oneof
        self.name: Optional[str] = None
        self._json_name = json_name
        self._message_class = None
        if packed is None:
            packed = repeated and type_name in SCALAR_TYPES and SCALAR_TYPES[type_name].packable
        self.packed = packed

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        type_ref = self.enum_type or self.message_type
        suffix = f", ref={type_ref!r}" if type_ref else ""
        return f"Field({self.name!r}, number={self.number}, type={self.type_name!r}{suffix})"

    # -- schema info --

    @property
    def is_message(self) -> bool:
        return self.type_name == MESSAGE

    @property
    def scalar(self) -> Optional[ScalarType]:
        return SCALAR_TYPES.get(self.type_name)

    @property
    def wire_type(self) -> WireType:
        if self.is_message:
            return WireType.LENGTH_DELIMITED
        return self.scalar.wire_type

    @property
    def default(self) -> Any:
        if self.is_message:
            return None
        return self.scalar.default

    @property
    def json_name(self) -> str:
        if self._json_name:
            return self._json_name
        head, *rest = (self.name or "").split("_")
        return head + "".join(p[:1].upper() + p[1:] for p in rest)

    @property
    def message_class(self):
        if self._message_class is None:
            self._message_class = default_registry.get(self.message_type)
        return self._message_class

    def check_element(self, value: Any) -> Any:
        """Validate one (non-repeated or element) value and return its stored form."""
        if self.is_message:
            cls = self.message_class
            if isinstance(value, cls):
                return value
            if isinstance(value, Mapping):
                return cls.from_dict(value)
            raise TypeError(
                f"Expected {self.message_type} for field {self.name!r}, got {type(value).__name__}"
            )
        return check_scalar(self.type_name, value)

    # -- attribute protocol --

    def __get__(self, msg, owner=None):
        if msg is None:
            return self
        if self.repeated:
            return get_repeated_field(msg, self.number)
        if self.is_message:
            return get_wrapper_field(msg, self.message_class, self.number)
        return get_field(msg, self.number, self.default)

    def __set__(self, msg, value) -> None:
        set_field(msg, self.number, value)

    def __delete__(self, msg) -> None:
        clear_field(msg, self.number)


class RepeatedContainer(MutableSequence):
    """List-like storage for a repeated field that validates every element.

    A container handed out for an unset field is detached: it joins its
    message's storage on the first write, so reads never modify the message.
    """

    def __init__(self, field: Field, values: Iterable = (), owner=None):
        self._field = field
        self._items: List[Any] = [field.check_element(v) for v in values]
        self._owner = owner

    def _attach(self) -> None:
        if self._owner is None:
            return
        stored = self._owner._values.setdefault(self._field.number, self)
        if stored is not self:
            # Another handle attached first; share its storage.
            self._items = stored._items
        self._owner = None

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            items = [self._field.check_element(v) for v in value]
        else:
            items = self._field.check_element(value)
        self._attach()
        self._items[index] = items

    def __delitem__(self, index) -> None:
        self._attach()
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value) -> None:
        item = self._field.check_element(value)
        self._attach()
        self._items.insert(index, item)

    def add(self, **kwargs):
        """Append a new message element built from keyword arguments and return it."""
        if not self._field.is_message:
            raise TypeError("add() is only available on repeated message fields")
        item = self._field.message_class(**kwargs)
        self._attach()
        self._items.append(item)
        return item

    def __eq__(self, other) -> bool:
        if isinstance(other, RepeatedContainer):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return repr(self._items)


# -- storage access by field number --

def _descriptor(msg, number: int) -> Field:
    try:
        return type(msg)._fields_by_number[number]
    except KeyError:
        raise ValueError(f"{type(msg).__name__} has no field number {number}") from None


def _checked_message_mapping(desc: Field, value: Any) -> Any:
    """Stored form of a message-field assignment.

    Mappings are validated against the message type now but kept as a dict
    until the field is first read.
    """
    if isinstance(value, Mapping):
        desc.message_class.from_dict(value)
        return dict(value)
    return desc.check_element(value)


def get_field(msg, number: int, default: Any = None) -> Any:
    """Return the stored value for ``number`` or ``default`` when unset."""
    return msg._values.get(number, default)


def set_field(msg, number: int, value: Any):
    """Store a value under ``number`` and return ``msg`` for chaining.

    ``None`` clears the field. Oneof members clear their siblings.
    """
    desc = _descriptor(msg, number)
    if desc.repeated:
        return set_repeated_field(msg, number, value)
    if desc.is_message:
        return set_wrapper_field(msg, number, value)
    if desc.oneof:
        return set_oneof_field(msg, number, value)
    if value is None:
        msg._values.pop(number, None)
    else:
        msg._values[number] = desc.check_element(value)
    return msg


def set_oneof_field(msg, number: int, value: Any):
    """Make ``number`` the active member of its oneof.

    ``None`` clears the member itself and leaves an active sibling alone.
    """
    desc = _descriptor(msg, number)
    if value is None:
        msg._values.pop(number, None)
        return msg
    stored = _checked_message_mapping(desc, value) if desc.is_message else desc.check_element(value)
    for sibling in type(msg)._oneofs.get(desc.oneof, ()):
        if sibling != number:
            msg._values.pop(sibling, None)
    msg._values[number] = stored
    return msg


def compute_oneof_case(msg, group: str) -> int:
    """Return the field number currently set in oneof ``group``, or 0."""
    for number in type(msg)._oneofs.get(group, ()):
        if number in msg._values:
            return number
    return 0


def get_repeated_field(msg, number: int) -> RepeatedContainer:
    """Return the container for a repeated field; an unset field gets a detached empty one."""
    container = msg._values.get(number)
    if container is None:
        container = RepeatedContainer(_descriptor(msg, number), owner=msg)
    return container


def set_repeated_field(msg, number: int, values: Optional[Iterable]):
    desc = _descriptor(msg, number)
    if isinstance(values, (str, bytes, Mapping)):
        raise TypeError(f"Repeated field {desc.name!r} needs an iterable of values")
    msg._values[number] = RepeatedContainer(desc, values or ())
    return msg


def add_to_repeated_field(msg, number: int, value: Any = None, index: Optional[int] = None):
    """Insert ``value`` into a repeated field and return the stored element.

    Without ``index`` the value is appended. For message fields ``value`` may
    be omitted, in which case a fresh empty message is added.
    """
    desc = _descriptor(msg, number)
    container = get_repeated_field(msg, number)
    if value is None:
        if not desc.is_message:
            raise TypeError(f"A value is required for scalar repeated field {desc.name!r}")
        value = desc.message_class()
    item = desc.check_element(value)
    if index is None:
        container.append(item)
    else:
        container.insert(index, item)
    return item


def get_wrapper_field(msg, ctor, number: int):
    """Return the nested message stored at ``number``, or ``None`` when absent.

    A plain mapping stored as the backing value is turned into a ``ctor``
    instance on first access and cached.
    """
    value = msg._values.get(number)
    if value is None:
        return None
    if isinstance(value, Mapping):
        value = ctor.from_dict(value)
        msg._values[number] = value
    return value


def set_wrapper_field(msg, number: int, value: Any):
    desc = _descriptor(msg, number)
    if desc.oneof:
        return set_oneof_field(msg, number, value)
    if value is None:
        msg._values.pop(number, None)
    else:
        msg._values[number] = _checked_message_mapping(desc, value)
    return msg


def has_field(msg, number: int) -> bool:
    desc = _descriptor(msg, number)
    if number not in msg._values:
        return False
    if desc.repeated:
        return len(msg._values[number]) > 0
    if desc.is_message or desc.oneof:
        return True
    return msg._values[number] != desc.default


def clear_field(msg, number: int):
    _descriptor(msg, number)
    msg._values.pop(number, None)
    return msg
