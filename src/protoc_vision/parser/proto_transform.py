"""Transform proto AST nodes into the generator's schema models.

Every type reference is resolved to a fully-qualified name using protobuf
scoping rules: the innermost enclosing scope is searched first, then each
outer scope up to the package root. A leading dot marks an absolute name.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from protoc_vision.models import (
    EnumSchema,
    FieldSchema,
    FileSchema,
    MessageSchema,
    MethodSchema,
    ServiceSchema,
    camel_case,
)

from .proto_ast import ProtoEnum, ProtoFile, ProtoMessage

logger = logging.getLogger(__name__)

# Proto scalar types; any other field type is a message or enum reference.
PROTO_PRIMITIVES = {
    "int32", "sint32", "sfixed32", "uint32", "fixed32",
    "int64", "sint64", "sfixed64", "uint64", "fixed64",
    "float", "double", "bool", "string", "bytes",
}


class SchemaError(Exception):
    """Raised when a type reference cannot be resolved."""


# full name -> (kind, defining source file, package of that file)
SymbolTable = Dict[str, Tuple[str, str, str]]


def _qualify(scope: str, name: str) -> str:
    return f"{scope}.{name}" if scope else name


def _local_name(full_name: str, package: str) -> str:
    """Dotted name of a type relative to its package: ``Product.KeyValue``."""
    return full_name[len(package) + 1:] if package else full_name


def build_symbol_table(files: Mapping[str, ProtoFile]) -> SymbolTable:
    """Index every message and enum declared in ``files`` by its full name."""
    symbols: SymbolTable = {}

    def add(full_name: str, kind: str, ast: ProtoFile, source: str) -> None:
        if full_name in symbols:
            other = symbols[full_name][1]
            raise SchemaError(f"{source}: {full_name!r} is already defined in {other}")
        symbols[full_name] = (kind, source, ast.package)

    def walk(msg: ProtoMessage, scope: str, ast: ProtoFile, source: str) -> None:
        full = _qualify(scope, msg.name)
        add(full, "message", ast, source)
        for e in msg.enums:
            add(_qualify(full, e.name), "enum", ast, source)
        for nested in msg.nested_messages:
            walk(nested, full, ast, source)

    for source, ast in files.items():
        for msg in ast.messages:
            walk(msg, ast.package, ast, source)
        for e in ast.enums:
            add(_qualify(ast.package, e.name), "enum", ast, source)
    return symbols


def resolve_type(type_name: str, scope: str, symbols: SymbolTable) -> Optional[str]:
    """Return the fully-qualified name ``type_name`` refers to from ``scope``."""
    if type_name.startswith("."):
        name = type_name[1:]
        return name if name in symbols else None
    parts = scope.split(".") if scope else []
    for i in range(len(parts), -1, -1):
        candidate = ".".join(parts[:i] + [type_name])
        if candidate in symbols:
            return candidate
    return None


def transform_proto(files: Mapping[str, ProtoFile]) -> List[FileSchema]:
    """Transform parsed files (keyed by import path) into FileSchema objects.

    All files are indexed together, so a file may reference types declared
    in any other file of the set.
    """
    symbols = build_symbol_table(files)
    loaded = set(files)
    return [_transform_file(source, ast, symbols, loaded) for source, ast in files.items()]


def _transform_file(source: str, ast: ProtoFile, symbols: SymbolTable, loaded: set) -> FileSchema:
    used_files: List[str] = []

    def resolve(type_name: str, scope: str, context: str) -> Tuple[str, str]:
        full = resolve_type(type_name, scope, symbols)
        if full is None:
            raise SchemaError(f"{source}: unknown type {type_name!r} in {context}")
        kind, defined_in, _ = symbols[full]
        if defined_in != source and defined_in not in used_files:
            used_files.append(defined_in)
        return kind, full

    messages = [
        _transform_message(m, ast.package, ast.syntax, resolve) for m in ast.messages
    ]
    enums = [_transform_enum(e, ast.package) for e in ast.enums]

    services: List[ServiceSchema] = []
    for svc in ast.services:
        full_name = _qualify(ast.package, svc.name)
        methods: List[MethodSchema] = []
        for rpc in svc.rpcs:
            _, input_type = resolve(rpc.input_type, ast.package, full_name)
            _, output_type = resolve(rpc.output_type, ast.package, full_name)
            methods.append(MethodSchema(
                name=rpc.name,
                input_type=input_type,
                output_type=output_type,
                input_file=symbols[input_type][1],
                output_file=symbols[output_type][1],
                input_class=_local_name(input_type, symbols[input_type][2]),
                output_class=_local_name(output_type, symbols[output_type][2]),
                client_streaming=rpc.client_streaming,
                server_streaming=rpc.server_streaming,
            ))
        services.append(ServiceSchema(name=svc.name, full_name=full_name, methods=methods))

    for imp in ast.imports:
        if imp in loaded:
            continue
        logger.debug("%s: import %s is not loaded; assuming it declares no referenced types", source, imp)

    # Keep import order for dependencies the file declares, then any others.
    dependencies = [imp for imp in ast.imports if imp in used_files]
    dependencies += [f for f in used_files if f not in dependencies]

    return FileSchema(
        source_file=source,
        package=ast.package,
        syntax=ast.syntax,
        dependencies=dependencies,
        messages=messages,
        enums=enums,
        services=services,
    )


def _transform_enum(node: ProtoEnum, scope: str) -> EnumSchema:
    return EnumSchema(
        name=node.name,
        full_name=_qualify(scope, node.name),
        values=[(v.name, v.number) for v in node.values],
    )


def _transform_message(node: ProtoMessage, scope: str, syntax: str, resolve) -> MessageSchema:
    """Transform a single ProtoMessage and, recursively, its nested types."""
    full_name = _qualify(scope, node.name)

    fields: List[FieldSchema] = []
    oneofs = [o.name for o in node.oneofs]
    for f in node.fields:
        oneof = f.oneof_name
        if f.is_optional and syntax == "proto3":
            # proto3 `optional` is a single-member oneof, as protoc models it.
            oneof = f"_{f.field_name}"
            oneofs.append(oneof)

        if f.type_name in PROTO_PRIMITIVES:
            type_name, type_ref = f.type_name, None
        else:
            kind, type_ref = resolve(f.type_name, full_name, full_name)
            type_name = "message" if kind == "message" else "enum"

        packed: Optional[bool] = None
        if "packed" in f.options:
            packed = f.options["packed"] == "true"
        elif f.is_repeated and syntax != "proto3":
            packed = False

        fields.append(FieldSchema(
            name=f.field_name,
            number=f.field_number,
            type_name=type_name,
            type_ref=type_ref,
            is_repeated=f.is_repeated,
            oneof=oneof,
            json_name=f.options.get("json_name", camel_case(f.field_name)),
            packed=packed,
        ))

    seen: Dict[int, str] = {}
    for f in fields:
        if f.number in seen:
            raise SchemaError(
                f"{full_name}: field number {f.number} used by both {seen[f.number]!r} and {f.name!r}"
            )
        seen[f.number] = f.name

    return MessageSchema(
        name=node.name,
        full_name=full_name,
        fields=fields,
        nested_messages=[_transform_message(m, full_name, syntax, resolve) for m in node.nested_messages],
        enums=[_transform_enum(e, full_name) for e in node.enums],
        oneofs=oneofs,
    )
