import pytest

from protoc_vision.gen.google.cloud.vision.v1 import product_search_service_pb
from protoc_vision.runtime.registry import MessageRegistry, RegistryError, default_registry


def _make_class():
    class Reloaded:
        pass
    return Reloaded


class TestMessageRegistry:
    def test_register_and_get(self):
        registry = MessageRegistry()
        registry.register("pkg.Thing", dict)
        assert registry.get("pkg.Thing") is dict
        assert registry.get(".pkg.Thing") is dict
        assert "pkg.Thing" in registry
        assert ".pkg.Thing" in registry
        assert len(registry) == 1
        assert list(registry) == ["pkg.Thing"]

    def test_create(self):
        registry = MessageRegistry()
        registry.register("pkg.Thing", dict)
        assert registry.create("pkg.Thing") == {}

    def test_unknown_name(self):
        with pytest.raises(RegistryError, match="Unknown"):
            MessageRegistry().get("pkg.Missing")

    def test_conflicting_registration(self):
        registry = MessageRegistry()
        registry.register("pkg.Thing", dict)
        registry.register("pkg.Thing", dict)
        with pytest.raises(RegistryError, match="already registered"):
            registry.register("pkg.Thing", list)

    def test_same_class_recreated(self):
        registry = MessageRegistry()
        first, second = _make_class(), _make_class()
        assert first is not second
        registry.register("pkg.Reloaded", first)
        registry.register("pkg.Reloaded", second)
        assert registry.get("pkg.Reloaded") is second

    def test_freeze(self):
        registry = MessageRegistry()
        registry.register("pkg.Thing", dict)
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryError, match="frozen"):
            registry.register("pkg.Other", list)
        assert registry.get("pkg.Thing") is dict


class TestDefaultRegistry:
    def test_generated_classes_register_on_import(self):
        assert default_registry.get("google.cloud.vision.v1.Product") is product_search_service_pb.Product
        assert default_registry.get("google.cloud.vision.v1.Product.KeyValue") is product_search_service_pb.Product.KeyValue
        assert "google.longrunning.Operation" in default_registry
        assert "google.protobuf.Timestamp" in default_registry

    def test_create_by_name(self):
        msg = default_registry.create("google.cloud.vision.v1.PurgeProductsRequest")
        assert isinstance(msg, product_search_service_pb.PurgeProductsRequest)
        assert msg.serialize_binary() == b""
