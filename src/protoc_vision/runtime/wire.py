"""Protocol-buffer binary wire format: varints, tags and fixed-width values.

BinaryWriter accumulates an encoded message; BinaryReader walks an encoded
buffer one field at a time. Neither knows anything about message schemas.
"""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Callable, List, Optional

MAX_FIELD_NUMBER = (1 << 29) - 1
_MAX_VARINT_BYTES = 10

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


class WireType(IntEnum):
    VARINT = 0
    FIXED64 = 1
    LENGTH_DELIMITED = 2
    START_GROUP = 3
    END_GROUP = 4
    FIXED32 = 5


class DecodeError(Exception):
    """Raised when an encoded buffer is malformed."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            super().__init__(f"Offset {offset}: {message}")
        else:
            super().__init__(message)
        self.offset = offset


# -- varint / zig-zag helpers --

def encode_varint(value: int) -> bytes:
    """Encode an integer as a base-128 varint.

    Negative values are encoded as their 64-bit two's complement, which
    always takes ten bytes.
    """
    if value < 0:
        value &= _MASK64
    out = bytearray()
    while True:
        bits = value & 0x7F
        value >>= 7
        if value:
            out.append(bits | 0x80)
        else:
            out.append(bits)
            return bytes(out)


def zigzag_encode(value: int, bits: int = 64) -> int:
    return ((value << 1) ^ (value >> (bits - 1))) & ((1 << bits) - 1)


def zigzag_decode(value: int) -> int:
    return (value >> 1) ^ -(value & 1)


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def make_tag(field_number: int, wire_type: WireType) -> int:
    return (field_number << 3) | int(wire_type)


# -- writer --

class BinaryWriter:
    """Append-only encoder for a single message."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def get_result_buffer(self) -> bytes:
        return bytes(self._buf)

    # -- primitives --

    def write_tag(self, field_number: int, wire_type: WireType) -> None:
        if not 1 <= field_number <= MAX_FIELD_NUMBER:
            raise ValueError(f"Invalid field number {field_number}")
        self.write_raw_varint(make_tag(field_number, wire_type))

    def write_raw_varint(self, value: int) -> None:
        self._buf += encode_varint(value)

    def write_raw_bytes(self, data: bytes) -> None:
        self._buf += data

    # -- varint types --

    def write_int32(self, field_number: int, value: int) -> None:
        self.write_tag(field_number, WireType.VARINT)
        self.write_raw_varint(value)

    write_int64 = write_int32
    write_uint32 = write_int32
    write_uint64 = write_int32
    write_enum = write_int32

    def write_sint32(self, field_number: int, value: int) -> None:
        self.write_tag(field_number, WireType.VARINT)
        self.write_raw_varint(zigzag_encode(value, 32))

    def write_sint64(self, field_number: int, value: int) -> None:
        self.write_tag(field_number, WireType.VARINT)
        self.write_raw_varint(zigzag_encode(value, 64))

    def write_bool(self, field_number: int, value: bool) -> None:
        self.write_tag(field_number, WireType.VARINT)
        self._buf.append(1 if value else 0)

    # -- fixed-width types --

    def write_fixed32(self, field_number: int, value: int) -> None:
        self.write_tag(field_number, WireType.FIXED32)
        self._buf += struct.pack("<I", value)

    def write_sfixed32(self, field_number: int, value: int) -> None:
        self.write_tag(field_number, WireType.FIXED32)
        self._buf += struct.pack("<i", value)

    def write_float(self, field_number: int, value: float) -> None:
        self.write_tag(field_number, WireType.FIXED32)
        self._buf += struct.pack("<f", value)

    def write_fixed64(self, field_number: int, value: int) -> None:
        self.write_tag(field_number, WireType.FIXED64)
        self._buf += struct.pack("<Q", value)

    def write_sfixed64(self, field_number: int, value: int) -> None:
        self.write_tag(field_number, WireType.FIXED64)
        self._buf += struct.pack("<q", value)

    def write_double(self, field_number: int, value: float) -> None:
        self.write_tag(field_number, WireType.FIXED64)
        self._buf += struct.pack("<d", value)

    # -- length-delimited types --

    def write_bytes(self, field_number: int, value: bytes) -> None:
        self.write_tag(field_number, WireType.LENGTH_DELIMITED)
        self.write_raw_varint(len(value))
        self._buf += value

    def write_string(self, field_number: int, value: str) -> None:
        self.write_bytes(field_number, value.encode("utf-8"))

    def write_message(
        self,
        field_number: int,
        value,
        serializer: Callable[[object, "BinaryWriter"], None],
    ) -> None:
        """Write a nested message as a length-delimited field."""
        sub = BinaryWriter()
        serializer(value, sub)
        self.write_bytes(field_number, sub.get_result_buffer())

    def write_packed(
        self,
        field_number: int,
        values: List,
        element_encoder: Callable[[object], bytes],
    ) -> None:
        """Write a packed repeated scalar field. Empty lists write nothing."""
        if not values:
            return
        payload = b"".join(element_encoder(v) for v in values)
        self.write_bytes(field_number, payload)


# -- reader --

class BinaryReader:
    """Sequential decoder over an encoded message buffer.

    Usage::

        reader = BinaryReader(data)
        while reader.next_field():
            if reader.field_number == 1:
                value = reader.read_string()
            else:
                reader.skip_field()
    """

    def __init__(self, data: bytes, start: int = 0, end: Optional[int] = None):
        self._data = bytes(data) if not isinstance(data, bytes) else data
        self._pos = start
        self._end = len(self._data) if end is None else end
        self.field_number = 0
        self.wire_type: Optional[WireType] = None
        self._field_start = start

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= self._end

    # -- tags --

    def next_field(self) -> bool:
        """Advance to the next field tag. Returns False once input is exhausted."""
        if self.at_end():
            return False
        self._field_start = self._pos
        tag = self.read_raw_varint()
        field_number = tag >> 3
        raw_wire_type = tag & 0x7
        if field_number == 0:
            raise DecodeError("Invalid field number 0", self._field_start)
        if field_number > MAX_FIELD_NUMBER:
            raise DecodeError(f"Invalid field number {field_number}", self._field_start)
        try:
            wire_type = WireType(raw_wire_type)
        except ValueError:
            raise DecodeError(f"Invalid wire type {raw_wire_type}", self._field_start) from None
        self.field_number = field_number
        self.wire_type = wire_type
        return True

    def skip_field(self) -> None:
        """Skip the value of the current field according to its wire type."""
        wt = self.wire_type
        if wt == WireType.VARINT:
            self.read_raw_varint()
        elif wt == WireType.FIXED64:
            self._take(8)
        elif wt == WireType.FIXED32:
            self._take(4)
        elif wt == WireType.LENGTH_DELIMITED:
            self._take(self._read_length())
        elif wt == WireType.START_GROUP:
            self._skip_group(self.field_number)
        else:
            raise DecodeError(f"Unexpected wire type {wt!r}", self._field_start)

    def _skip_group(self, group_number: int) -> None:
        while True:
            if self.at_end():
                raise DecodeError("Unterminated group", self._pos)
            self.next_field()
            if self.wire_type == WireType.END_GROUP:
                if self.field_number != group_number:
                    raise DecodeError("Mismatched end-group tag", self._field_start)
                return
            self.skip_field()

    # -- primitives --

    def _take(self, n: int) -> bytes:
        if n < 0 or self._pos + n > self._end:
            raise DecodeError(f"Truncated input: need {n} byte(s)", self._pos)
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk

    def read_raw_varint(self) -> int:
        result = 0
        shift = 0
        start = self._pos
        for _ in range(_MAX_VARINT_BYTES):
            if self._pos >= self._end:
                raise DecodeError("Truncated varint", start)
            byte = self._data[self._pos]
            self._pos += 1
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result & _MASK64
            shift += 7
        raise DecodeError("Varint exceeds 10 bytes", start)

    def _read_length(self) -> int:
        length = self.read_raw_varint()
        if self._pos + length > self._end:
            raise DecodeError(
                f"Length {length} exceeds remaining {self._end - self._pos} byte(s)",
                self._pos,
            )
        return length

    # -- varint types --

    def read_int32(self) -> int:
        return _to_signed(self.read_raw_varint(), 32)

    def read_int64(self) -> int:
        return _to_signed(self.read_raw_varint(), 64)

    def read_uint32(self) -> int:
        return self.read_raw_varint() & _MASK32

    def read_uint64(self) -> int:
        return self.read_raw_varint()

    def read_sint32(self) -> int:
        return zigzag_decode(self.read_raw_varint() & _MASK32)

    def read_sint64(self) -> int:
        return zigzag_decode(self.read_raw_varint())

    def read_bool(self) -> bool:
        return self.read_raw_varint() != 0

    read_enum = read_int32

    # -- fixed-width types --

    def read_fixed32(self) -> int:
        return struct.unpack("<I", self._take(4))[0]

    def read_sfixed32(self) -> int:
        return struct.unpack("<i", self._take(4))[0]

    def read_float(self) -> float:
        return struct.unpack("<f", self._take(4))[0]

    def read_fixed64(self) -> int:
        return struct.unpack("<Q", self._take(8))[0]

    def read_sfixed64(self) -> int:
        return struct.unpack("<q", self._take(8))[0]

    def read_double(self) -> float:
        return struct.unpack("<d", self._take(8))[0]

    # -- length-delimited types --

    def read_bytes(self) -> bytes:
        return self._take(self._read_length())

    def read_string(self) -> str:
        start = self._pos
        raw = self.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Invalid UTF-8 in string field: {e.reason}", start) from None

    def read_message(self, value, deserializer: Callable[[object, "BinaryReader"], object]):
        """Decode a length-delimited nested message into ``value``."""
        length = self._read_length()
        sub = BinaryReader(self._data, self._pos, self._pos + length)
        deserializer(value, sub)
        self._pos += length
        return value

    def read_packed(self, element_reader: Callable[["BinaryReader"], object]) -> List:
        """Decode a packed repeated scalar payload into a list."""
        length = self._read_length()
        sub = BinaryReader(self._data, self._pos, self._pos + length)
        values = []
        while not sub.at_end():
            values.append(element_reader(sub))
        self._pos += length
        return values
