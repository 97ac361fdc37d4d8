# Generated by protoc-vision from google/cloud/vision/v1/product_search_service.proto. DO NOT EDIT!
from enum import IntEnum

from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message
import protoc_vision.gen.google.cloud.vision.v1.geometry_pb  # noqa: F401
import protoc_vision.gen.google.longrunning.operations_pb  # noqa: F401
import protoc_vision.gen.google.protobuf.empty_pb  # noqa: F401
import protoc_vision.gen.google.protobuf.field_mask_pb  # noqa: F401
import protoc_vision.gen.google.protobuf.timestamp_pb  # noqa: F401
import protoc_vision.gen.google.rpc.status_pb  # noqa: F401


class Product(Message):
    FULL_NAME = "google.cloud.vision.v1.Product"

    class KeyValue(Message):
        FULL_NAME = "google.cloud.vision.v1.Product.KeyValue"

        key = Field(1, "string")
        value = Field(2, "string")

    name = Field(1, "string")
    display_name = Field(2, "string")
    description = Field(3, "string")
    product_category = Field(4, "string")
    product_labels = Field(5, "message", repeated=True, message_type="google.cloud.vision.v1.Product.KeyValue")


class ProductSet(Message):
    FULL_NAME = "google.cloud.vision.v1.ProductSet"

    name = Field(1, "string")
    display_name = Field(2, "string")
    index_time = Field(3, "message", message_type="google.protobuf.Timestamp")
    index_error = Field(4, "message", message_type="google.rpc.Status")


class ReferenceImage(Message):
    FULL_NAME = "google.cloud.vision.v1.ReferenceImage"

    name = Field(1, "string")
    uri = Field(2, "string")
    bounding_polys = Field(3, "message", repeated=True, message_type="google.cloud.vision.v1.BoundingPoly")


class CreateProductRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.CreateProductRequest"

    parent = Field(1, "string")
    product = Field(2, "message", message_type="google.cloud.vision.v1.Product")
    product_id = Field(3, "string")


class ListProductsRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.ListProductsRequest"

    parent = Field(1, "string")
    page_size = Field(2, "int32")
    page_token = Field(3, "string")


class ListProductsResponse(Message):
    FULL_NAME = "google.cloud.vision.v1.ListProductsResponse"

    products = Field(1, "message", repeated=True, message_type="google.cloud.vision.v1.Product")
    next_page_token = Field(2, "string")


class GetProductRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.GetProductRequest"

    name = Field(1, "string")


class UpdateProductRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.UpdateProductRequest"

    product = Field(1, "message", message_type="google.cloud.vision.v1.Product")
    update_mask = Field(2, "message", message_type="google.protobuf.FieldMask")


class DeleteProductRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.DeleteProductRequest"

    name = Field(1, "string")


class CreateProductSetRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.CreateProductSetRequest"

    parent = Field(1, "string")
    product_set = Field(2, "message", message_type="google.cloud.vision.v1.ProductSet")
    product_set_id = Field(3, "string")


class ListProductSetsRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.ListProductSetsRequest"

    parent = Field(1, "string")
    page_size = Field(2, "int32")
    page_token = Field(3, "string")


class ListProductSetsResponse(Message):
    FULL_NAME = "google.cloud.vision.v1.ListProductSetsResponse"

    product_sets = Field(1, "message", repeated=True, message_type="google.cloud.vision.v1.ProductSet")
    next_page_token = Field(2, "string")


class GetProductSetRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.GetProductSetRequest"

    name = Field(1, "string")


class UpdateProductSetRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.UpdateProductSetRequest"

    product_set = Field(1, "message", message_type="google.cloud.vision.v1.ProductSet")
    update_mask = Field(2, "message", message_type="google.protobuf.FieldMask")


class DeleteProductSetRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.DeleteProductSetRequest"

    name = Field(1, "string")


class CreateReferenceImageRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.CreateReferenceImageRequest"

    parent = Field(1, "string")
    reference_image = Field(2, "message", message_type="google.cloud.vision.v1.ReferenceImage")
    reference_image_id = Field(3, "string")


class ListReferenceImagesRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.ListReferenceImagesRequest"

    parent = Field(1, "string")
    page_size = Field(2, "int32")
    page_token = Field(3, "string")


class ListReferenceImagesResponse(Message):
    FULL_NAME = "google.cloud.vision.v1.ListReferenceImagesResponse"

    reference_images = Field(1, "message", repeated=True, message_type="google.cloud.vision.v1.ReferenceImage")
    page_size = Field(2, "int32")
    next_page_token = Field(3, "string")


class GetReferenceImageRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.GetReferenceImageRequest"

    name = Field(1, "string")


class DeleteReferenceImageRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.DeleteReferenceImageRequest"

    name = Field(1, "string")


class AddProductToProductSetRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.AddProductToProductSetRequest"

    name = Field(1, "string")
    product = Field(2, "string")


class RemoveProductFromProductSetRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.RemoveProductFromProductSetRequest"

    name = Field(1, "string")
    product = Field(2, "string")


class ListProductsInProductSetRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.ListProductsInProductSetRequest"

    name = Field(1, "string")
    page_size = Field(2, "int32")
    page_token = Field(3, "string")


class ListProductsInProductSetResponse(Message):
    FULL_NAME = "google.cloud.vision.v1.ListProductsInProductSetResponse"

    products = Field(1, "message", repeated=True, message_type="google.cloud.vision.v1.Product")
    next_page_token = Field(2, "string")


class ImportProductSetsGcsSource(Message):
    FULL_NAME = "google.cloud.vision.v1.ImportProductSetsGcsSource"

    csv_file_uri = Field(1, "string")


class ImportProductSetsInputConfig(Message):
    FULL_NAME = "google.cloud.vision.v1.ImportProductSetsInputConfig"

    gcs_source = Field(1, "message", message_type="google.cloud.vision.v1.ImportProductSetsGcsSource", oneof="source")


class ImportProductSetsRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.ImportProductSetsRequest"

    parent = Field(1, "string")
    input_config = Field(2, "message", message_type="google.cloud.vision.v1.ImportProductSetsInputConfig")


class ImportProductSetsResponse(Message):
    FULL_NAME = "google.cloud.vision.v1.ImportProductSetsResponse"

    reference_images = Field(1, "message", repeated=True, message_type="google.cloud.vision.v1.ReferenceImage")
    statuses = Field(2, "message", repeated=True, message_type="google.rpc.Status")


class BatchOperationMetadata(Message):
    FULL_NAME = "google.cloud.vision.v1.BatchOperationMetadata"

    class State(IntEnum):
        STATE_UNSPECIFIED = 0
        PROCESSING = 1
        SUCCESSFUL = 2
        FAILED = 3
        CANCELLED = 4

    state = Field(1, "enum", enum_type="google.cloud.vision.v1.BatchOperationMetadata.State")
    submit_time = Field(2, "message", message_type="google.protobuf.Timestamp")
    end_time = Field(3, "message", message_type="google.protobuf.Timestamp")


class ProductSetPurgeConfig(Message):
    FULL_NAME = "google.cloud.vision.v1.ProductSetPurgeConfig"

    product_set_id = Field(1, "string")


class PurgeProductsRequest(Message):
    FULL_NAME = "google.cloud.vision.v1.PurgeProductsRequest"

    product_set_purge_config = Field(2, "message", message_type="google.cloud.vision.v1.ProductSetPurgeConfig", oneof="target")
    delete_orphan_products = Field(3, "bool", oneof="target")
    parent = Field(1, "string")
    force = Field(4, "bool")
