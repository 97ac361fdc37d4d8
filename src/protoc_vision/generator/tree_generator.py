from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from protoc_vision.models import FileSchema
from protoc_vision.parser.proto_parser import load_proto_tree

from .python_grpc_generator import generate_grpc_modules
from .python_message_generator import generate_message_modules

logger = logging.getLogger(__name__)


def write_modules(
    file_schemas: List[FileSchema],
    output_dir: str,
    module_prefix: str = "",
) -> Tuple[List[str], List[str]]:
    """Write message modules, then gRPC modules; returns both lists of paths."""
    message_files = generate_message_modules(file_schemas, module_prefix, output_dir)
    grpc_files = generate_grpc_modules(file_schemas, module_prefix, output_dir)
    return message_files, grpc_files


def generate_tree(
    proto_root: str,
    output_dir: str,
    module_prefix: str = "",
    files: Optional[Iterable[str]] = None,
) -> List[str]:
    """Generate message and gRPC modules for every .proto under ``proto_root``.

    Modules are laid out under ``output_dir`` following the proto import
    paths; ``module_prefix`` is the dotted import path of ``output_dir``
    itself and is used for cross-file imports. Returns the written paths.
    """
    file_schemas = load_proto_tree(proto_root, files)
    logger.debug("Resolved %d proto file(s) under %s", len(file_schemas), proto_root)

    message_files, grpc_files = write_modules(file_schemas, output_dir, module_prefix)
    return message_files + grpc_files
