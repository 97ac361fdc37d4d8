"""Helpers for google.protobuf well-known types.

``Any`` packs a message together with a type URL whose last path segment is
the message's fully-qualified name; unpacking looks that name up in a
:class:`~protoc_vision.runtime.registry.MessageRegistry`. Long-running
operations carry their metadata and response this way.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from protoc_vision.gen.google.protobuf.any_pb import Any
from protoc_vision.gen.google.protobuf.timestamp_pb import Timestamp

from .message import Message
from .registry import MessageRegistry, default_registry

TYPE_URL_PREFIX = "type.googleapis.com/"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS_PER_MICRO = 1000


def pack_any(msg: Message, type_url_prefix: str = TYPE_URL_PREFIX) -> Any:
    """Wrap ``msg`` in an ``Any``."""
    if not msg.FULL_NAME:
        raise ValueError(f"{type(msg).__name__} has no schema name and cannot be packed")
    if not type_url_prefix.endswith("/"):
        type_url_prefix += "/"
    return Any(type_url=type_url_prefix + msg.FULL_NAME, value=msg.serialize_binary())


def any_type_name(any_msg: Any) -> str:
    """Return the fully-qualified message name an ``Any`` refers to."""
    return any_msg.type_url.rpartition("/")[2]


def any_is(any_msg: Any, cls) -> bool:
    return any_type_name(any_msg) == cls.FULL_NAME


def unpack_any(any_msg: Any, registry: MessageRegistry = default_registry) -> Message:
    """Decode the payload of ``any_msg`` into a new instance of its type.

    Raises RegistryError if the type is not registered and DecodeError if
    the payload is malformed.
    """
    name = any_type_name(any_msg)
    if not name:
        raise ValueError("Any has an empty type_url")
    return registry.get(name).deserialize_binary(any_msg.value)


def timestamp_from_datetime(dt: datetime) -> Timestamp:
    """Convert ``dt`` to a Timestamp. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - _EPOCH
    return Timestamp(
        seconds=delta.days * 86400 + delta.seconds,
        nanos=delta.microseconds * _NANOS_PER_MICRO,
    )


def timestamp_to_datetime(ts: Timestamp) -> datetime:
    """Convert a Timestamp to an aware UTC datetime, truncating to microseconds."""
    if not 0 <= ts.nanos < 1_000_000_000:
        raise ValueError(f"Timestamp nanos out of range: {ts.nanos}")
    return _EPOCH + timedelta(seconds=ts.seconds, microseconds=ts.nanos // _NANOS_PER_MICRO)
