from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from jinja2 import TemplateError

from protoc_vision.generator.tree_generator import write_modules
from protoc_vision.parser.proto_ast_parser import ProtoParseError
from protoc_vision.parser.proto_parser import find_proto_files, load_proto_tree
from protoc_vision.parser.proto_transform import SchemaError

logger = logging.getLogger(__name__)

BUNDLED_PROTOS = str(Path(__file__).parent / "protos")


@dataclass
class GeneratorConfig:
    proto_path: str
    output_dir: str
    module_prefix: str = ""


def run(config: GeneratorConfig) -> List[str]:
    """Main pipeline: find, parse, resolve, generate."""
    # 1. Find input files
    proto_files = find_proto_files(config.proto_path)
    if not proto_files:
        print(f"No .proto files found under {config.proto_path}")
        sys.exit(1)

    print(f"Found {len(proto_files)} proto file(s)")

    # 2. Parse and resolve types across all files
    try:
        file_schemas = load_proto_tree(config.proto_path, proto_files)
    except (ProtoParseError, SchemaError) as e:
        print(f"FATAL: {e}", file=sys.stderr)
        sys.exit(1)

    for fs in file_schemas:
        print(
            f"  Parsed {fs.source_file}: {len(fs.messages)} message(s), "
            f"{len(fs.services)} service(s)"
        )

    # 3. Generate message modules, then gRPC modules for files with services
    logger.debug("Writing modules under %s", config.output_dir)
    try:
        message_files, grpc_files = write_modules(file_schemas, config.output_dir, config.module_prefix)
    except (TemplateError, OSError) as e:
        print(f"FATAL: cannot write modules to {config.output_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    for f in message_files:
        print(f"  Generated messages: {f}")
    for f in grpc_files:
        print(f"  Generated gRPC stubs: {f}")

    print("Done!")
    return message_files + grpc_files


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Protobuf to Python message and gRPC stub generator",
    )
    parser.add_argument(
        "--proto-path",
        default=BUNDLED_PROTOS,
        help="Root directory of the .proto tree (default: the bundled Vision protos)",
    )
    parser.add_argument(
        "--output-dir",
        required=True,
        help="Directory to write generated modules into",
    )
    parser.add_argument(
        "--module-prefix",
        default="",
        help="Dotted import path of the output directory, used for cross-file imports",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(GeneratorConfig(
        proto_path=args.proto_path,
        output_dir=args.output_dir,
        module_prefix=args.module_prefix,
    ))


if __name__ == "__main__":
    main()
