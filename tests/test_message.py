import pytest

from protoc_vision.gen.google.cloud.vision.v1.geometry_pb import BoundingPoly, NormalizedVertex, Vertex
from protoc_vision.gen.google.cloud.vision.v1.product_search_pb import ProductSearchParams, ProductSearchResults
from protoc_vision.gen.google.cloud.vision.v1.product_search_service_pb import (
    BatchOperationMetadata,
    CreateProductRequest,
    ListProductsResponse,
    Product,
    ProductSet,
    ProductSetPurgeConfig,
    PurgeProductsRequest,
    ReferenceImage,
    UpdateProductRequest,
)
from protoc_vision.gen.google.protobuf.any_pb import Any
from protoc_vision.gen.google.protobuf.timestamp_pb import Timestamp
from protoc_vision.gen.google.rpc.status_pb import Status
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import (
    INSTANCE_KEY,
    Message,
    RepeatedContainer,
    add_to_repeated_field,
    get_field,
    get_repeated_field,
    get_wrapper_field,
    serialize_binary_to_writer,
    set_field,
    set_repeated_field,
    to_plain_object,
)
from protoc_vision.runtime.wire import BinaryWriter, DecodeError


class Sample(Message):
    FULL_NAME = "protoc_vision.tests.Sample"

    ids = Field(1, "int32", repeated=True)
    count = Field(2, "int32")
    delta = Field(3, "sint32")
    labels = Field(4, "string", repeated=True)
    ratio = Field(5, "double")
    big = Field(6, "uint64")
    unpacked = Field(7, "int32", repeated=True, packed=False)


# Extra fields a newer schema might add: 99 varint, 100 bytes, 101 fixed32, 102 group.
UNKNOWN_FIELDS = (
    b"\x98\x06\x01"
    b"\xa2\x06\x03abc"
    b"\xad\x06\x01\x02\x03\x04"
    b"\xb3\x06\x08\x05\xb4\x06"
)


class TestProductScenario:
    def test_name_and_display_name_survive_round_trip(self):
        product = Product(name="products/1", display_name="Shoe")
        data = product.serialize_binary()

        decoded = Product.deserialize_binary(data)

        assert decoded.name == "products/1"
        assert decoded.display_name == "Shoe"
        assert decoded == product

    def test_exact_wire_bytes(self):
        product = Product(name="products/1", display_name="Shoe")
        assert product.serialize_binary() == b"\x0a\x0aproducts/1\x12\x04Shoe"

    def test_field_number_accessors(self):
        product = Product()
        assert set_field(product, 1, "products/1") is product
        set_field(product, 2, "Shoe")
        assert get_field(product, 1) == "products/1"
        assert get_field(product, 2) == "Shoe"
        assert get_field(product, 3) is None
        assert get_field(product, 3, "") == ""


class TestRoundTrip:
    def test_nested_and_repeated_messages(self):
        image = ReferenceImage(
            name="products/1/referenceImages/2",
            uri="gs://bucket/shoe.jpg",
            bounding_polys=[
                BoundingPoly(vertices=[Vertex(x=1, y=2), Vertex(x=-3, y=0)]),
                BoundingPoly(normalized_vertices=[NormalizedVertex(x=0.1, y=0.9)]),
            ],
        )
        decoded = ReferenceImage.deserialize_binary(image.serialize_binary())
        assert decoded == image
        assert decoded.bounding_polys[0].vertices[1].x == -3
        assert len(decoded.bounding_polys[1].vertices) == 0

    def test_cross_module_types(self):
        product_set = ProductSet(
            name="productSets/9",
            display_name="Shoes",
            index_time=Timestamp(seconds=1700000000, nanos=5),
            index_error=Status(code=3, message="bad image", details=[Any(type_url="x/y", value=b"\x01")]),
        )
        decoded = ProductSet.deserialize_binary(product_set.serialize_binary())
        assert decoded == product_set
        assert decoded.index_error.details[0].value == b"\x01"

    def test_nested_class_types(self):
        results = ProductSearchResults(
            results=[ProductSearchResults.Result(product=Product(name="p"), score=0.5, image="i")],
            product_grouped_results=[
                ProductSearchResults.GroupedResult(
                    object_annotations=[ProductSearchResults.ObjectAnnotation(mid="/m/1", score=0.75)],
                ),
            ],
        )
        decoded = ProductSearchResults.deserialize_binary(results.serialize_binary())
        assert decoded == results
        assert decoded.product_grouped_results[0].object_annotations[0].mid == "/m/1"

    def test_enum_field(self):
        meta = BatchOperationMetadata(state=BatchOperationMetadata.State.PROCESSING)
        data = meta.serialize_binary()
        assert data == b"\x08\x01"
        decoded = BatchOperationMetadata.deserialize_binary(data)
        assert decoded.state == BatchOperationMetadata.State.PROCESSING

    def test_float_is_stored_at_single_precision(self):
        vertex = NormalizedVertex(x=0.1)
        assert vertex.x != 0.1
        assert abs(vertex.x - 0.1) < 1e-7
        assert NormalizedVertex.deserialize_binary(vertex.serialize_binary()) == vertex

    def test_scalar_edge_values(self):
        sample = Sample(count=-1, delta=-1, ratio=-0.5, big=(1 << 64) - 1)
        data = sample.serialize_binary()
        assert b"\x10" + b"\xff" * 9 + b"\x01" in data
        assert b"\x18\x01" in data
        assert Sample.deserialize_binary(data) == sample

    def test_deserialize_returns_fresh_instance(self):
        data = Product(name="a").serialize_binary()
        first = Product.deserialize_binary(data)
        second = Product.deserialize_binary(data)
        assert first is not second
        first.name = "b"
        assert second.name == "a"


class TestDefaultOmission:
    def test_empty_message_encodes_to_nothing(self):
        assert Product().serialize_binary() == b""

    def test_explicit_defaults_encode_to_nothing(self):
        sample = Sample(count=0, delta=0, ratio=0.0, ids=[], labels=[])
        assert sample.serialize_binary() == b""
        product = Product(name="", display_name="", product_labels=[])
        assert product.serialize_binary() == b""

    def test_empty_nested_message_is_written(self):
        request = CreateProductRequest(product=Product())
        assert request.serialize_binary() == b"\x12\x00"

    def test_has_field(self):
        product = Product(name="")
        assert not product.has_field("name")
        product.name = "x"
        assert product.has_field("name")
        request = CreateProductRequest()
        assert not request.has_field("product")
        request.product = Product()
        assert request.has_field("product")


class TestUnknownFields:
    def test_unknown_fields_are_skipped(self):
        data = Product(name="products/1", display_name="Shoe").serialize_binary() + UNKNOWN_FIELDS
        decoded = Product.deserialize_binary(data)
        assert decoded.name == "products/1"
        assert decoded.display_name == "Shoe"

    def test_unknown_fields_between_known_ones(self):
        data = b"\x0a\x01a" + UNKNOWN_FIELDS + b"\x12\x01b"
        decoded = Product.deserialize_binary(data)
        assert (decoded.name, decoded.display_name) == ("a", "b")

    def test_unknown_fields_are_not_reencoded(self):
        decoded = Product.deserialize_binary(b"\x0a\x01a" + UNKNOWN_FIELDS)
        assert decoded.serialize_binary() == b"\x0a\x01a"

    def test_mismatched_wire_type_is_skipped(self):
        # name (1) is a string but arrives as a varint
        decoded = Product.deserialize_binary(b"\x08\x07\x12\x01b")
        assert decoded.name == ""
        assert decoded.display_name == "b"


class TestDecodeErrors:
    def test_truncated_string(self):
        with pytest.raises(DecodeError):
            Product.deserialize_binary(b"\x0a\x0aprod")

    def test_truncated_nested_message(self):
        with pytest.raises(DecodeError):
            CreateProductRequest.deserialize_binary(b"\x12\x05\x0a\x09abc")

    def test_invalid_tag(self):
        with pytest.raises(DecodeError):
            Product.deserialize_binary(b"\x00")

    def test_truncated_varint(self):
        with pytest.raises(DecodeError):
            Sample.deserialize_binary(b"\x10\xff\xff")


class TestOneof:
    def test_setting_member_clears_sibling(self):
        request = PurgeProductsRequest(parent="projects/p/locations/l")
        request.product_set_purge_config = ProductSetPurgeConfig(product_set_id="s")
        assert request.which_oneof("target") == "product_set_purge_config"

        request.delete_orphan_products = True

        assert request.which_oneof("target") == "delete_orphan_products"
        assert request.product_set_purge_config is None
        assert not request.has_field("product_set_purge_config")
        assert request.parent == "projects/p/locations/l"

    def test_only_active_member_is_encoded(self):
        request = PurgeProductsRequest()
        request.product_set_purge_config = ProductSetPurgeConfig(product_set_id="s")
        request.delete_orphan_products = True
        assert request.serialize_binary() == b"\x18\x01"

    def test_member_at_default_is_still_encoded(self):
        request = PurgeProductsRequest(delete_orphan_products=False)
        assert request.which_oneof("target") == "delete_orphan_products"
        assert request.serialize_binary() == b"\x18\x00"

    def test_ordinary_fields_are_outside_the_group(self):
        request = PurgeProductsRequest(parent="p", force=True, delete_orphan_products=True)
        assert request.serialize_binary() == b"\x0a\x01p\x18\x01\x20\x01"
        request.product_set_purge_config = ProductSetPurgeConfig()
        assert request.parent == "p"
        assert request.force is True
        assert request.delete_orphan_products is False

    def test_last_member_on_the_wire_wins(self):
        config = b"\x12\x03\x0a\x01s"
        orphan = b"\x18\x01"

        decoded = PurgeProductsRequest.deserialize_binary(config + orphan)
        assert decoded.which_oneof("target") == "delete_orphan_products"
        assert decoded.product_set_purge_config is None

        decoded = PurgeProductsRequest.deserialize_binary(orphan + config)
        assert decoded.which_oneof("target") == "product_set_purge_config"
        assert decoded.product_set_purge_config.product_set_id == "s"

    def test_clearing_with_none(self):
        request = PurgeProductsRequest(delete_orphan_products=True)
        request.delete_orphan_products = None
        assert request.which_oneof("target") is None

    def test_clearing_inactive_member_keeps_active_one(self):
        request = PurgeProductsRequest(product_set_purge_config=ProductSetPurgeConfig(product_set_id="s"))
        request.delete_orphan_products = None
        assert request.which_oneof("target") == "product_set_purge_config"

    def test_unknown_group(self):
        with pytest.raises(ValueError):
            PurgeProductsRequest().which_oneof("source")


class TestRepeatedFields:
    def test_append_order_is_preserved(self):
        params = ProductSearchParams()
        for category in ("apparel", "homegoods", "toys"):
            add_to_repeated_field(params, 7, category)
        assert get_repeated_field(params, 7) == ["apparel", "homegoods", "toys"]
        decoded = ProductSearchParams.deserialize_binary(params.serialize_binary())
        assert list(decoded.product_categories) == ["apparel", "homegoods", "toys"]

    def test_insert_at_index(self):
        params = ProductSearchParams(product_categories=["a", "c"])
        add_to_repeated_field(params, 7, "b", index=1)
        assert params.product_categories == ["a", "b", "c"]

    def test_never_returns_none(self):
        product = Product()
        labels = get_repeated_field(product, 5)
        assert isinstance(labels, RepeatedContainer)
        assert len(labels) == 0
        assert product.product_labels == []

    def test_reading_unset_field_does_not_store(self):
        product = Product()
        labels = product.product_labels
        assert product._values == {}
        labels.append(Product.KeyValue(key="k"))
        assert product.product_labels[0].key == "k"
        assert product.has_field("product_labels")

    def test_detached_handles_share_storage(self):
        params = ProductSearchParams()
        first = params.product_categories
        second = params.product_categories
        first.append("a")
        second.append("b")
        assert params.product_categories == ["a", "b"]

    def test_add_message_element(self):
        product = Product()
        label = add_to_repeated_field(product, 5)
        label.key = "color"
        product.product_labels.add(key="size", value="9")
        assert [kv.key for kv in product.product_labels] == ["color", "size"]

    def test_set_repeated_field_replaces(self):
        response = ListProductsResponse(products=[Product(name="a")])
        set_repeated_field(response, 1, [Product(name="b"), {"name": "c"}])
        assert [p.name for p in response.products] == ["b", "c"]
        set_repeated_field(response, 1, None)
        assert response.products == []

    def test_elements_are_validated(self):
        params = ProductSearchParams()
        with pytest.raises(TypeError):
            params.product_categories.append(5)
        with pytest.raises(TypeError):
            params.product_categories = "apparel"

    def test_packed_encoding(self):
        sample = Sample(ids=[1, 2, 300])
        assert sample.serialize_binary() == b"\x0a\x04\x01\x02\xac\x02"

    def test_unpacked_encoding(self):
        sample = Sample(unpacked=[1, 2])
        assert sample.serialize_binary() == b"\x38\x01\x38\x02"

    def test_decoder_accepts_both_forms(self):
        unpacked = b"\x08\x01\x08\x02"
        packed = b"\x0a\x02\x03\x04"
        decoded = Sample.deserialize_binary(unpacked + packed + b"\x08\x05")
        assert decoded.ids == [1, 2, 3, 4, 5]
        decoded = Sample.deserialize_binary(b"\x3a\x02\x07\x08")
        assert decoded.unpacked == [7, 8]


class TestNestedMessages:
    def test_absent_is_not_empty(self):
        assert CreateProductRequest() != CreateProductRequest(product=Product())
        assert CreateProductRequest().product is None

    def test_dict_backing_value_materializes_lazily(self):
        request = CreateProductRequest()
        set_field(request, 2, {"name": "products/1", "display_name": "Shoe"})
        assert isinstance(request._values[2], dict)

        product = get_wrapper_field(request, Product, 2)

        assert isinstance(product, Product)
        assert product.display_name == "Shoe"
        assert get_wrapper_field(request, Product, 2) is product

    def test_reading_does_not_materialize(self):
        request = CreateProductRequest(product={"name": "products/1"})
        data = request.serialize_binary()
        plain = to_plain_object(request)
        assert request == CreateProductRequest(product=Product(name="products/1"))
        assert isinstance(request._values[2], dict)
        assert CreateProductRequest.deserialize_binary(data).product.name == "products/1"
        assert plain["product"]["name"] == "products/1"

    def test_singular_message_seen_twice_is_merged(self):
        data = b"\x12\x03\x0a\x01a" + b"\x12\x03\x12\x01b"
        decoded = CreateProductRequest.deserialize_binary(data)
        assert decoded.product.name == "a"
        assert decoded.product.display_name == "b"

    def test_mapping_is_validated_on_assignment(self):
        with pytest.raises(ValueError):
            UpdateProductRequest(product={"nmae": "x"})
        with pytest.raises(TypeError):
            UpdateProductRequest(product={"name": 1})
        with pytest.raises(ValueError):
            PurgeProductsRequest(product_set_purge_config={"id": "s"})

    def test_invalid_oneof_mapping_keeps_active_member(self):
        request = PurgeProductsRequest(delete_orphan_products=True)
        with pytest.raises(ValueError):
            request.product_set_purge_config = {"id": "s"}
        assert request.which_oneof("target") == "delete_orphan_products"

    def test_wrong_message_type(self):
        with pytest.raises(TypeError):
            CreateProductRequest(product=ProductSet())


class TestValidation:
    def test_wrong_scalar_type(self):
        with pytest.raises(TypeError):
            Product(name=1)
        with pytest.raises(TypeError):
            Sample(count="1")

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            Sample(count=1 << 31)
        with pytest.raises(ValueError):
            Sample(big=-1)

    def test_unknown_keyword(self):
        with pytest.raises(ValueError):
            Product(title="x")

    def test_unknown_field_number(self):
        with pytest.raises(ValueError):
            set_field(Product(), 42, "x")


class TestPlainObject:
    def test_to_plain_object(self):
        product = Product(name="products/1", product_labels=[Product.KeyValue(key="k", value="v")])
        assert to_plain_object(product) == {
            "name": "products/1",
            "display_name": "",
            "description": "",
            "product_category": "",
            "product_labels": [{"key": "k", "value": "v"}],
        }

    def test_absent_message_is_none(self):
        assert CreateProductRequest().to_dict()["product"] is None

    def test_include_instance(self):
        request = CreateProductRequest(product=Product(name="p"))
        plain = request.to_dict(include_instance=True)
        assert plain[INSTANCE_KEY] is request
        assert plain["product"][INSTANCE_KEY] is request.product

    def test_from_dict_round_trip(self):
        image = ReferenceImage(uri="gs://b/o", bounding_polys=[BoundingPoly(vertices=[Vertex(x=1)])])
        assert ReferenceImage.from_dict(image.to_dict()) == image
        assert ReferenceImage.from_dict(image.to_dict(include_instance=True)) == image

    def test_unset_oneof_members_are_none(self):
        plain = PurgeProductsRequest(parent="p").to_dict()
        assert plain["delete_orphan_products"] is None
        assert plain["product_set_purge_config"] is None
        assert plain["force"] is False

    def test_from_dict_round_trip_keeps_oneof_member(self):
        request = PurgeProductsRequest(
            parent="p",
            product_set_purge_config=ProductSetPurgeConfig(product_set_id="s"),
        )
        copy = PurgeProductsRequest.from_dict(request.to_dict())
        assert copy.which_oneof("target") == "product_set_purge_config"
        assert copy == request
        assert copy.serialize_binary() == request.serialize_binary()

        orphans = PurgeProductsRequest(parent="p", delete_orphan_products=False)
        assert PurgeProductsRequest.from_dict(orphans.to_dict()).which_oneof("target") == "delete_orphan_products"

    def test_from_dict_round_trip_without_oneof(self):
        request = PurgeProductsRequest(parent="p")
        copy = PurgeProductsRequest.from_dict(request.to_dict())
        assert copy.which_oneof("target") is None
        assert copy.serialize_binary() == b"\x0a\x01p"

    def test_json_names(self):
        product = Product(display_name="Shoe", product_labels=[Product.KeyValue(key="k")])
        plain = product.to_dict(json_names=True)
        assert plain["displayName"] == "Shoe"
        assert plain["productLabels"] == [{"key": "k", "value": ""}]
        assert Product.from_dict(plain) == product

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError):
            Product.from_dict({"title": "x"})

    def test_does_not_mutate(self):
        product = Product(name="p")
        before = dict(product._values)
        to_plain_object(product)
        assert product._values == before


class TestSerializeToWriter:
    def test_writer_api(self):
        writer = BinaryWriter()
        serialize_binary_to_writer(Product(name="a"), writer)
        assert writer.get_result_buffer() == b"\x0a\x01a"

    def test_serialization_does_not_mutate(self):
        request = CreateProductRequest(product={"name": "x"})
        before = dict(request._values)
        request.serialize_binary()
        request.serialize_binary()
        assert request._values == before


class TestMessageProtocol:
    def test_equality_treats_unset_as_default(self):
        assert Product(name="") == Product()
        assert Product(product_labels=[]) == Product()
        assert Product(name="a") != Product(name="b")
        assert Product() != ProductSet()

    def test_messages_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(Product())

    def test_repr(self):
        assert repr(Product(name="a")) == "Product(name='a')"

    def test_field_repr_names_referenced_type(self):
        assert repr(BatchOperationMetadata.state) == (
            "Field('state', number=1, type='enum', ref='google.cloud.vision.v1.BatchOperationMetadata.State')"
        )
        assert repr(Product.name) == "Field('name', number=1, type='string')"

    def test_clear_field_and_delete(self):
        product = Product(name="a", display_name="b")
        product.clear_field("name")
        del product.display_name
        assert product == Product()

    def test_merge_from_binary(self):
        product = Product(name="a")
        product.merge_from_binary(Product(display_name="b").serialize_binary())
        assert (product.name, product.display_name) == ("a", "b")

    def test_schema_tables_are_read_only(self):
        with pytest.raises(TypeError):
            Product._fields_by_number[99] = None
        assert list(Product._fields_by_number) == [1, 2, 3, 4, 5]
        assert PurgeProductsRequest._oneofs["target"] == (2, 3)

    def test_duplicate_field_numbers_rejected(self):
        with pytest.raises(TypeError):
            class Broken(Message):
                a = Field(1, "string")
                b = Field(1, "int32")
