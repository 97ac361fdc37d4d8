from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Dict, List, Tuple

from protoc_vision.models import FileSchema, MethodSchema, module_name

from .python_message_generator import MESSAGE_SUFFIX, _get_template_env

logger = logging.getLogger(__name__)

GRPC_SUFFIX = "_grpc"

# (client_streaming, server_streaming) -> grpc multi-callable kind
_METHOD_KINDS: Dict[Tuple[bool, bool], str] = {
    (False, False): "unary_unary",
    (False, True): "unary_stream",
    (True, False): "stream_unary",
    (True, True): "stream_stream",
}


def module_alias(source_file: str) -> str:
    """Import alias for a message module, in the style protoc uses for _pb2 imports.

    ``google/protobuf/field_mask.proto`` -> ``google_dot_protobuf_dot_field__mask__pb``.
    """
    stem = source_file[:-len(".proto")] if source_file.endswith(".proto") else source_file
    return stem.replace("_", "__").replace("/", "_dot_") + MESSAGE_SUFFIX.replace("_", "__")


def _method_context(service_full_name: str, method: MethodSchema) -> Dict:
    return {
        "name": method.name,
        "kind": _METHOD_KINDS[(method.client_streaming, method.server_streaming)],
        "path": f"/{service_full_name}/{method.name}",
        "request": f"{module_alias(method.input_file)}.{method.input_class}",
        "response": f"{module_alias(method.output_file)}.{method.output_class}",
        "request_arg": "request_iterator" if method.client_streaming else "request",
    }


def generate_grpc(file_schema: FileSchema, module_prefix: str = "") -> str:
    """Generate the gRPC stub / servicer module source for one .proto file."""
    env = _get_template_env()
    template = env.get_template("grpc.py.j2")

    sources = set()
    for svc in file_schema.services:
        for m in svc.methods:
            sources.add(m.input_file)
            sources.add(m.output_file)

    imports = []
    for source in sorted(sources):
        package, _, module = module_name(source, MESSAGE_SUFFIX, module_prefix).rpartition(".")
        imports.append((package, module, module_alias(source)))

    services = [
        {
            "name": svc.name,
            "full_name": svc.full_name,
            "methods": [_method_context(svc.full_name, m) for m in svc.methods],
        }
        for svc in file_schema.services
    ]

    return template.render(
        source_file=file_schema.source_file,
        imports=imports,
        services=services,
    )


def generate_grpc_modules(
    file_schemas: List[FileSchema],
    module_prefix: str,
    output_dir: str,
) -> List[str]:
    """Write a ``<stem>_grpc.py`` module for every file that declares services.

    Returns list of generated file paths.
    """
    generated: List[str] = []
    for fs in file_schemas:
        if not fs.services:
            continue
        source = generate_grpc(fs, module_prefix)
        directory = os.path.join(output_dir, *PurePosixPath(fs.source_file).parent.parts)
        os.makedirs(directory, exist_ok=True)
        file_path = os.path.join(directory, f"{fs.stem}{GRPC_SUFFIX}.py")
        Path(file_path).write_text(source, encoding="utf-8")
        logger.info("Wrote %s", file_path)
        generated.append(file_path)

    return generated
