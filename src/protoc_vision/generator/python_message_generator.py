from __future__ import annotations

import keyword
import logging
import os
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List

from jinja2 import Environment, FileSystemLoader

from protoc_vision.models import EnumSchema, FieldSchema, FileSchema, MessageSchema, camel_case, module_name
from protoc_vision.runtime.fields import SCALAR_TYPES
from protoc_vision.runtime.message import Message

logger = logging.getLogger(__name__)

MESSAGE_SUFFIX = "_pb"

# Names a generated field attribute must not shadow.
RESERVED_ATTRS = set(keyword.kwlist) | {n for n in dir(Message) if not n.startswith("__")}


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def attr_name(field_name: str) -> str:
    """Python attribute name for a proto field; clashes get a trailing underscore."""
    if field_name in RESERVED_ATTRS:
        return f"{field_name}_"
    return field_name


def _field_args(f: FieldSchema) -> str:
    args = [str(f.number), f'"{f.type_name}"']
    if f.is_repeated:
        args.append("repeated=True")
    if f.type_name == "message":
        args.append(f'message_type="{f.type_ref}"')
    elif f.type_name == "enum":
        args.append(f'enum_type="{f.type_ref}"')
    if f.oneof:
        args.append(f'oneof="{f.oneof}"')
    packable = f.type_name in SCALAR_TYPES and SCALAR_TYPES[f.type_name].packable
    if f.is_repeated and packable and f.packed is not None:
        args.append(f"packed={f.packed}")
    if f.json_name and f.json_name != camel_case(f.name):
        args.append(f'json_name="{f.json_name}"')
    return ", ".join(args)


def _enum_context(e: EnumSchema) -> Dict:
    return {"name": e.name, "members": e.values}


def _message_context(m: MessageSchema) -> Dict:
    return {
        "name": m.name,
        "full_name": m.full_name,
        "enums": [_enum_context(e) for e in m.enums],
        "nested": [_message_context(n) for n in m.nested_messages],
        "fields": [{"attr": attr_name(f.name), "args": _field_args(f)} for f in m.fields],
    }


def _has_enums(messages: Iterable[MessageSchema]) -> bool:
    return any(m.enums or _has_enums(m.nested_messages) for m in messages)


def generate_messages(file_schema: FileSchema, module_prefix: str = "") -> str:
    """Generate the Python message module source for one .proto file."""
    env = _get_template_env()
    template = env.get_template("messages.py.j2")

    return template.render(
        source_file=file_schema.source_file,
        has_enums=bool(file_schema.enums) or _has_enums(file_schema.messages),
        imports=[module_name(dep, MESSAGE_SUFFIX, module_prefix) for dep in file_schema.dependencies],
        enums=[_enum_context(e) for e in file_schema.enums],
        messages=[_message_context(m) for m in file_schema.messages],
    )


def generate_message_modules(
    file_schemas: List[FileSchema],
    module_prefix: str,
    output_dir: str,
) -> List[str]:
    """Write a ``<stem>_pb.py`` module for every file schema.

    Returns list of generated file paths.
    """
    generated: List[str] = []
    for fs in file_schemas:
        source = generate_messages(fs, module_prefix)
        directory = os.path.join(output_dir, *PurePosixPath(fs.source_file).parent.parts)
        os.makedirs(directory, exist_ok=True)
        file_path = os.path.join(directory, f"{fs.stem}{MESSAGE_SUFFIX}.py")
        Path(file_path).write_text(source, encoding="utf-8")
        logger.info("Wrote %s", file_path)
        generated.append(file_path)

    return generated
