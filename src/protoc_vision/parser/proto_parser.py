from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from protoc_vision.models import FileSchema

from .proto_ast import ProtoFile
from .proto_ast_parser import ProtoParseError, ProtoParser
from .proto_tokenizer import tokenize_proto
from .proto_transform import transform_proto

logger = logging.getLogger(__name__)


def parse_proto_text(text: str, source_file: Optional[str] = None) -> ProtoFile:
    """Parse proto source text into a ProtoFile AST.

    ``source_file`` names the input in ProtoParseError messages.
    """
    try:
        return ProtoParser(tokenize_proto(text)).parse()
    except ProtoParseError as e:
        if source_file is None:
            raise
        raise ProtoParseError(f"{source_file}: {e}") from e


def parse_proto_file(file_path: str) -> ProtoFile:
    """Parse a .proto file into a ProtoFile AST."""
    return parse_proto_text(Path(file_path).read_text(encoding="utf-8"), file_path)


def find_proto_files(proto_root: str) -> List[str]:
    """Return import paths (relative, '/'-separated) of every .proto under proto_root."""
    root = Path(proto_root)
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*.proto"))


def load_proto_tree(proto_root: str, files: Optional[Iterable[str]] = None) -> List[FileSchema]:
    """Parse and resolve .proto files under ``proto_root``.

    ``files`` limits the set to the given import paths; by default every
    .proto under the root is loaded. Types are resolved across the whole set.
    """
    root = Path(proto_root)
    names = list(files) if files is not None else find_proto_files(proto_root)
    asts: Dict[str, ProtoFile] = {}
    for name in names:
        asts[name] = parse_proto_file(str(root / name))
        logger.debug("Parsed %s", name)
    return transform_proto(asts)
