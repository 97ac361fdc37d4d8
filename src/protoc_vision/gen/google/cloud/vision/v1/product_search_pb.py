# Generated by protoc-vision from google/cloud/vision/v1/product_search.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message
import protoc_vision.gen.google.cloud.vision.v1.geometry_pb  # noqa: F401
import protoc_vision.gen.google.cloud.vision.v1.product_search_service_pb  # noqa: F401
import protoc_vision.gen.google.protobuf.timestamp_pb  # noqa: F401


class ProductSearchParams(Message):
    FULL_NAME = "google.cloud.vision.v1.ProductSearchParams"

    bounding_poly = Field(9, "message", message_type="google.cloud.vision.v1.BoundingPoly")
    product_set = Field(6, "string")
    product_categories = Field(7, "string", repeated=True)
    filter = Field(8, "string")


class ProductSearchResults(Message):
    FULL_NAME = "google.cloud.vision.v1.ProductSearchResults"

    class Result(Message):
        FULL_NAME = "google.cloud.vision.v1.ProductSearchResults.Result"

        product = Field(1, "message", message_type="google.cloud.vision.v1.Product")
        score = Field(2, "float")
        image = Field(3, "string")

    class ObjectAnnotation(Message):
        FULL_NAME = "google.cloud.vision.v1.ProductSearchResults.ObjectAnnotation"

        mid = Field(1, "string")
        language_code = Field(2, "string")
        name = Field(3, "string")
        score = Field(4, "float")

    class GroupedResult(Message):
        FULL_NAME = "google.cloud.vision.v1.ProductSearchResults.GroupedResult"

        bounding_poly = Field(1, "message", message_type="google.cloud.vision.v1.BoundingPoly")
        results = Field(2, "message", repeated=True, message_type="google.cloud.vision.v1.ProductSearchResults.Result")
        object_annotations = Field(3, "message", repeated=True, message_type="google.cloud.vision.v1.ProductSearchResults.ObjectAnnotation")

    index_time = Field(2, "message", message_type="google.protobuf.Timestamp")
    results = Field(5, "message", repeated=True, message_type="google.cloud.vision.v1.ProductSearchResults.Result")
    product_grouped_results = Field(6, "message", repeated=True, message_type="google.cloud.vision.v1.ProductSearchResults.GroupedResult")
