"""AST node definitions for protobuf (.proto) files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ProtoField:
    """A field declaration: [repeated|optional] Type name = number [options];"""

    type_name: str
    field_name: str
    field_number: int
    is_repeated: bool = False
    is_optional: bool = False
    oneof_name: Optional[str] = None
    options: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProtoOneof:
    name: str
    field_names: List[str] = field(default_factory=list)


@dataclass
class ProtoEnumValue:
    name: str
    number: int


@dataclass
class ProtoEnum:
    name: str
    values: List[ProtoEnumValue] = field(default_factory=list)


@dataclass
class ProtoMessage:
    """A message definition, possibly containing nested messages and enums."""

    name: str
    fields: List[ProtoField] = field(default_factory=list)
    nested_messages: List[ProtoMessage] = field(default_factory=list)
    enums: List[ProtoEnum] = field(default_factory=list)
    oneofs: List[ProtoOneof] = field(default_factory=list)


@dataclass
class ProtoRpc:
    """rpc Name ([stream] Request) returns ([stream] Response)"""

    name: str
    input_type: str
    output_type: str
    client_streaming: bool = False
    server_streaming: bool = False


@dataclass
class ProtoService:
    name: str
    rpcs: List[ProtoRpc] = field(default_factory=list)


@dataclass
class ProtoFile:
    """Top-level parsed representation of a .proto file."""

    syntax: str = "proto2"
    package: str = ""
    imports: List[str] = field(default_factory=list)
    messages: List[ProtoMessage] = field(default_factory=list)
    enums: List[ProtoEnum] = field(default_factory=list)
    services: List[ProtoService] = field(default_factory=list)
