"""End-to-end runs of the generator CLI against temporary proto trees."""
import importlib
from pathlib import Path

import pytest

from protoc_vision.main import GeneratorConfig, main, run


def _write_tree(root: Path, files: dict):
    for name, text in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)


INVENTORY_PROTOS = {
    "clitest/inventory/item.proto": """\
syntax = "proto3";

package clitest.inventory;

import "clitest/common/stamp.proto";

message Item {
    string sku = 1;
    int64 quantity = 2;
    clitest.common.Stamp updated = 3;
}
""",
    "clitest/inventory/service.proto": """\
syntax = "proto3";

package clitest.inventory;

import "clitest/inventory/item.proto";

message LookupRequest { string sku = 1; }

service Inventory {
    rpc Lookup(LookupRequest) returns (Item);
    rpc Watch(LookupRequest) returns (stream Item);
}
""",
    "clitest/common/stamp.proto": """\
syntax = "proto3";

package clitest.common;

message Stamp {
    int64 seconds = 1;
    int32 nanos = 2;
}
""",
}


class TestCli:
    def test_generates_tree(self, tmp_path, capsys, monkeypatch):
        proto_root = tmp_path / "protos"
        _write_tree(proto_root, INVENTORY_PROTOS)
        output_dir = tmp_path / "clitest_out"

        main([
            "--proto-path", str(proto_root),
            "--output-dir", str(output_dir),
            "--module-prefix", "clitest_out",
        ])

        out = capsys.readouterr().out
        assert "Found 3 proto file(s)" in out
        assert "Parsed clitest/inventory/service.proto: 1 message(s), 1 service(s)" in out
        assert "Generated gRPC stubs:" in out
        assert out.rstrip().endswith("Done!")

        generated = sorted(p.relative_to(output_dir).as_posix() for p in output_dir.rglob("*.py"))
        assert generated == [
            "clitest/common/stamp_pb.py",
            "clitest/inventory/item_pb.py",
            "clitest/inventory/service_grpc.py",
            "clitest/inventory/service_pb.py",
        ]

        monkeypatch.syspath_prepend(str(tmp_path))
        item_pb = importlib.import_module("clitest_out.clitest.inventory.item_pb")
        service_grpc = importlib.import_module("clitest_out.clitest.inventory.service_grpc")

        item = item_pb.Item(sku="A-1", quantity=3, updated={"seconds": 60})
        assert item_pb.Item.deserialize_binary(item.serialize_binary()).updated.seconds == 60
        assert hasattr(service_grpc, "InventoryStub")
        assert hasattr(service_grpc, "add_InventoryServicer_to_server")

    def test_run_returns_paths(self, tmp_path):
        proto_root = tmp_path / "protos"
        _write_tree(proto_root, {"solo.proto": 'syntax = "proto3";\npackage clitest.solo;\nmessage Solo {}\n'})

        paths = run(GeneratorConfig(proto_path=str(proto_root), output_dir=str(tmp_path / "out")))

        assert paths == [str(tmp_path / "out" / "solo_pb.py")]

    def test_empty_directory_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            run(GeneratorConfig(proto_path=str(tmp_path), output_dir=str(tmp_path / "out")))

        assert exc.value.code == 1
        assert "No .proto files found" in capsys.readouterr().out

    def test_parse_error_exits(self, tmp_path, capsys):
        _write_tree(tmp_path, {"broken.proto": 'syntax = "proto3";\nmessage Broken {\n    int32 id = ;\n}\n'})

        with pytest.raises(SystemExit) as exc:
            run(GeneratorConfig(proto_path=str(tmp_path), output_dir=str(tmp_path / "out")))

        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("FATAL: ")

    def test_unresolved_type_exits(self, tmp_path, capsys):
        _write_tree(tmp_path, {"dangling.proto": 'syntax = "proto3";\nmessage A { Missing m = 1; }\n'})

        with pytest.raises(SystemExit):
            run(GeneratorConfig(proto_path=str(tmp_path), output_dir=str(tmp_path / "out")))

        assert "unknown type" in capsys.readouterr().err

    def test_unwritable_output_dir_exits(self, tmp_path, capsys):
        proto_root = tmp_path / "protos"
        _write_tree(proto_root, {"solo.proto": 'syntax = "proto3";\npackage clitest.blocked;\nmessage Solo {}\n'})
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")

        with pytest.raises(SystemExit) as exc:
            run(GeneratorConfig(proto_path=str(proto_root), output_dir=str(blocker)))

        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith(f"FATAL: cannot write modules to {blocker}")

    def test_output_dir_is_required(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])

        assert exc.value.code == 2
        assert "--output-dir" in capsys.readouterr().err
