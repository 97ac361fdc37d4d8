from datetime import datetime, timezone

import pytest

from protoc_vision.gen.google.cloud.vision.v1.product_search_service_pb import (
    BatchOperationMetadata,
    ImportProductSetsResponse,
    Product,
    ReferenceImage,
)
from protoc_vision.gen.google.longrunning.operations_pb import Operation
from protoc_vision.gen.google.protobuf.any_pb import Any
from protoc_vision.gen.google.protobuf.timestamp_pb import Timestamp
from protoc_vision.runtime.registry import MessageRegistry, RegistryError
from protoc_vision.runtime.well_known import (
    any_is,
    any_type_name,
    pack_any,
    timestamp_from_datetime,
    timestamp_to_datetime,
    unpack_any,
)


class TestAny:
    def test_pack(self):
        packed = pack_any(Product(name="products/1"))
        assert packed.type_url == "type.googleapis.com/google.cloud.vision.v1.Product"
        assert packed.value == b"\x0a\x0aproducts/1"
        assert any_type_name(packed) == "google.cloud.vision.v1.Product"
        assert any_is(packed, Product)
        assert not any_is(packed, ReferenceImage)

    def test_custom_prefix(self):
        packed = pack_any(Product(), type_url_prefix="example.com/types")
        assert packed.type_url == "example.com/types/google.cloud.vision.v1.Product"

    def test_unpack(self):
        product = Product(name="products/1", display_name="Shoe")
        assert unpack_any(pack_any(product)) == product

    def test_unpack_unknown_type(self):
        packed = Any(type_url="type.googleapis.com/example.Unknown", value=b"")
        with pytest.raises(RegistryError):
            unpack_any(packed)

    def test_unpack_with_other_registry(self):
        packed = pack_any(Product(name="p"))
        with pytest.raises(RegistryError):
            unpack_any(packed, registry=MessageRegistry())

    def test_empty_type_url(self):
        with pytest.raises(ValueError):
            unpack_any(Any())


class TestOperation:
    def test_metadata_and_response(self):
        metadata = BatchOperationMetadata(
            state=BatchOperationMetadata.State.SUCCESSFUL,
            submit_time=Timestamp(seconds=10),
            end_time=Timestamp(seconds=20),
        )
        result = ImportProductSetsResponse(reference_images=[ReferenceImage(uri="gs://b/o")])
        op = Operation(
            name="operations/1",
            metadata=pack_any(metadata),
            done=True,
            response=pack_any(result),
        )

        decoded = Operation.deserialize_binary(op.serialize_binary())

        assert decoded.done is True
        assert decoded.which_oneof("result") == "response"
        assert unpack_any(decoded.metadata) == metadata
        assert unpack_any(decoded.response).reference_images[0].uri == "gs://b/o"


class TestTimestamp:
    def test_round_trip(self):
        dt = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
        ts = timestamp_from_datetime(dt)
        assert ts.nanos == 678901000
        assert timestamp_to_datetime(ts) == dt

    def test_epoch_offsets(self):
        ts = timestamp_from_datetime(datetime(1970, 1, 2, tzinfo=timezone.utc))
        assert (ts.seconds, ts.nanos) == (86400, 0)

    def test_before_epoch(self):
        ts = timestamp_from_datetime(datetime(1969, 12, 31, 23, 59, 59, 500000))
        assert (ts.seconds, ts.nanos) == (-1, 500000000)

    def test_naive_is_utc(self):
        naive = datetime(2020, 5, 6, 7, 8, 9)
        assert timestamp_from_datetime(naive) == timestamp_from_datetime(naive.replace(tzinfo=timezone.utc))

    def test_result_is_aware(self):
        dt = timestamp_to_datetime(Timestamp(seconds=0))
        assert dt.tzinfo is not None
        assert dt.utcoffset().total_seconds() == 0

    def test_invalid_nanos(self):
        with pytest.raises(ValueError):
            timestamp_to_datetime(Timestamp(seconds=0, nanos=-1))
