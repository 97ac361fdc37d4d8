from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import List, Optional, Tuple


def camel_case(name: str) -> str:
    """Convert a snake_case field name to its lowerCamelCase JSON name."""
    head, *rest = name.split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def module_name(source_file: str, suffix: str, module_prefix: str = "") -> str:
    """Dotted import path of the module generated from ``source_file``.

    ``google/rpc/status.proto`` with suffix ``_pb`` and prefix ``gen``
    becomes ``gen.google.rpc.status_pb``.
    """
    path = PurePosixPath(source_file)
    parts = [p for p in path.parent.parts if p not in (".", "")]
    parts.append(f"{path.stem}{suffix}")
    if module_prefix:
        parts.insert(0, module_prefix)
    return ".".join(parts)


@dataclass
class FieldSchema:
    name: str
    number: int
    type_name: str  # scalar type name, "enum" or "message"
    type_ref: Optional[str] = None  # fully-qualified name for enum and message types
    is_repeated: bool = False
    oneof: Optional[str] = None
    json_name: str = ""
    packed: Optional[bool] = None

    @property
    def is_message(self) -> bool:
        return self.type_name == "message"


@dataclass
class EnumSchema:
    name: str
    full_name: str
    values: List[Tuple[str, int]] = field(default_factory=list)


@dataclass
class MessageSchema:
    name: str
    full_name: str
    fields: List[FieldSchema] = field(default_factory=list)
    nested_messages: List[MessageSchema] = field(default_factory=list)
    enums: List[EnumSchema] = field(default_factory=list)
    oneofs: List[str] = field(default_factory=list)


@dataclass
class MethodSchema:
    name: str
    input_type: str
    output_type: str
    input_file: str = ""
    output_file: str = ""
    # Class path inside the defining module, e.g. "Product" or "Product.KeyValue".
    input_class: str = ""
    output_class: str = ""
    client_streaming: bool = False
    server_streaming: bool = False


@dataclass
class ServiceSchema:
    name: str
    full_name: str
    methods: List[MethodSchema] = field(default_factory=list)


@dataclass
class FileSchema:
    source_file: str  # import path relative to the proto root
    package: str = ""
    syntax: str = "proto3"
    # Proto files defining types this file references, in import order.
    dependencies: List[str] = field(default_factory=list)
    messages: List[MessageSchema] = field(default_factory=list)
    enums: List[EnumSchema] = field(default_factory=list)
    services: List[ServiceSchema] = field(default_factory=list)

    @property
    def stem(self) -> str:
        return PurePosixPath(self.source_file).stem

    def module_path(self, suffix: str, module_prefix: str = "") -> str:
        return module_name(self.source_file, suffix, module_prefix)
