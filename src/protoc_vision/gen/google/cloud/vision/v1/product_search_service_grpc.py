# Generated by protoc-vision from google/cloud/vision/v1/product_search_service.proto. DO NOT EDIT!
"""Client and server classes corresponding to protobuf-defined services."""
import grpc

from protoc_vision.gen.google.cloud.vision.v1 import product_search_service_pb as google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb
from protoc_vision.gen.google.longrunning import operations_pb as google_dot_longrunning_dot_operations__pb
from protoc_vision.gen.google.protobuf import empty_pb as google_dot_protobuf_dot_empty__pb


class ProductSearchStub:
    """Missing associated documentation comment in .proto file."""

    def __init__(self, channel):
        """Constructor.

        Args:
            channel: A grpc.Channel.
        """
        self.CreateProductSet = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/CreateProductSet",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.CreateProductSetRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ProductSet.deserialize_binary,
        )
        self.ListProductSets = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/ListProductSets",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductSetsRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductSetsResponse.deserialize_binary,
        )
        self.GetProductSet = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/GetProductSet",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.GetProductSetRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ProductSet.deserialize_binary,
        )
        self.UpdateProductSet = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/UpdateProductSet",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.UpdateProductSetRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ProductSet.deserialize_binary,
        )
        self.DeleteProductSet = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/DeleteProductSet",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.DeleteProductSetRequest.serialize_binary,
            response_deserializer=google_dot_protobuf_dot_empty__pb.Empty.deserialize_binary,
        )
        self.CreateProduct = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/CreateProduct",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.CreateProductRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.Product.deserialize_binary,
        )
        self.ListProducts = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/ListProducts",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsResponse.deserialize_binary,
        )
        self.GetProduct = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/GetProduct",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.GetProductRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.Product.deserialize_binary,
        )
        self.UpdateProduct = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/UpdateProduct",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.UpdateProductRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.Product.deserialize_binary,
        )
        self.DeleteProduct = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/DeleteProduct",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.DeleteProductRequest.serialize_binary,
            response_deserializer=google_dot_protobuf_dot_empty__pb.Empty.deserialize_binary,
        )
        self.CreateReferenceImage = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/CreateReferenceImage",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.CreateReferenceImageRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ReferenceImage.deserialize_binary,
        )
        self.DeleteReferenceImage = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/DeleteReferenceImage",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.DeleteReferenceImageRequest.serialize_binary,
            response_deserializer=google_dot_protobuf_dot_empty__pb.Empty.deserialize_binary,
        )
        self.ListReferenceImages = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/ListReferenceImages",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListReferenceImagesRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListReferenceImagesResponse.deserialize_binary,
        )
        self.GetReferenceImage = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/GetReferenceImage",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.GetReferenceImageRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ReferenceImage.deserialize_binary,
        )
        self.AddProductToProductSet = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/AddProductToProductSet",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.AddProductToProductSetRequest.serialize_binary,
            response_deserializer=google_dot_protobuf_dot_empty__pb.Empty.deserialize_binary,
        )
        self.RemoveProductFromProductSet = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/RemoveProductFromProductSet",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.RemoveProductFromProductSetRequest.serialize_binary,
            response_deserializer=google_dot_protobuf_dot_empty__pb.Empty.deserialize_binary,
        )
        self.ListProductsInProductSet = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/ListProductsInProductSet",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsInProductSetRequest.serialize_binary,
            response_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsInProductSetResponse.deserialize_binary,
        )
        self.ImportProductSets = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/ImportProductSets",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ImportProductSetsRequest.serialize_binary,
            response_deserializer=google_dot_longrunning_dot_operations__pb.Operation.deserialize_binary,
        )
        self.PurgeProducts = channel.unary_unary(
            "/google.cloud.vision.v1.ProductSearch/PurgeProducts",
            request_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.PurgeProductsRequest.serialize_binary,
            response_deserializer=google_dot_longrunning_dot_operations__pb.Operation.deserialize_binary,
        )


class ProductSearchServicer:
    """Missing associated documentation comment in .proto file."""

    def CreateProductSet(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def ListProductSets(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def GetProductSet(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def UpdateProductSet(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def DeleteProductSet(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def CreateProduct(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def ListProducts(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def GetProduct(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def UpdateProduct(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def DeleteProduct(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def CreateReferenceImage(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def DeleteReferenceImage(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def ListReferenceImages(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def GetReferenceImage(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def AddProductToProductSet(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def RemoveProductFromProductSet(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def ListProductsInProductSet(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def ImportProductSets(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def PurgeProducts(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")


def add_ProductSearchServicer_to_server(servicer, server):
    rpc_method_handlers = {
        "CreateProductSet": grpc.unary_unary_rpc_method_handler(
            servicer.CreateProductSet,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.CreateProductSetRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ProductSet.serialize_binary,
        ),
        "ListProductSets": grpc.unary_unary_rpc_method_handler(
            servicer.ListProductSets,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductSetsRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductSetsResponse.serialize_binary,
        ),
        "GetProductSet": grpc.unary_unary_rpc_method_handler(
            servicer.GetProductSet,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.GetProductSetRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ProductSet.serialize_binary,
        ),
        "UpdateProductSet": grpc.unary_unary_rpc_method_handler(
            servicer.UpdateProductSet,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.UpdateProductSetRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ProductSet.serialize_binary,
        ),
        "DeleteProductSet": grpc.unary_unary_rpc_method_handler(
            servicer.DeleteProductSet,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.DeleteProductSetRequest.deserialize_binary,
            response_serializer=google_dot_protobuf_dot_empty__pb.Empty.serialize_binary,
        ),
        "CreateProduct": grpc.unary_unary_rpc_method_handler(
            servicer.CreateProduct,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.CreateProductRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.Product.serialize_binary,
        ),
        "ListProducts": grpc.unary_unary_rpc_method_handler(
            servicer.ListProducts,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsResponse.serialize_binary,
        ),
        "GetProduct": grpc.unary_unary_rpc_method_handler(
            servicer.GetProduct,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.GetProductRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.Product.serialize_binary,
        ),
        "UpdateProduct": grpc.unary_unary_rpc_method_handler(
            servicer.UpdateProduct,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.UpdateProductRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.Product.serialize_binary,
        ),
        "DeleteProduct": grpc.unary_unary_rpc_method_handler(
            servicer.DeleteProduct,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.DeleteProductRequest.deserialize_binary,
            response_serializer=google_dot_protobuf_dot_empty__pb.Empty.serialize_binary,
        ),
        "CreateReferenceImage": grpc.unary_unary_rpc_method_handler(
            servicer.CreateReferenceImage,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.CreateReferenceImageRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ReferenceImage.serialize_binary,
        ),
        "DeleteReferenceImage": grpc.unary_unary_rpc_method_handler(
            servicer.DeleteReferenceImage,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.DeleteReferenceImageRequest.deserialize_binary,
            response_serializer=google_dot_protobuf_dot_empty__pb.Empty.serialize_binary,
        ),
        "ListReferenceImages": grpc.unary_unary_rpc_method_handler(
            servicer.ListReferenceImages,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListReferenceImagesRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListReferenceImagesResponse.serialize_binary,
        ),
        "GetReferenceImage": grpc.unary_unary_rpc_method_handler(
            servicer.GetReferenceImage,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.GetReferenceImageRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ReferenceImage.serialize_binary,
        ),
        "AddProductToProductSet": grpc.unary_unary_rpc_method_handler(
            servicer.AddProductToProductSet,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.AddProductToProductSetRequest.deserialize_binary,
            response_serializer=google_dot_protobuf_dot_empty__pb.Empty.serialize_binary,
        ),
        "RemoveProductFromProductSet": grpc.unary_unary_rpc_method_handler(
            servicer.RemoveProductFromProductSet,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.RemoveProductFromProductSetRequest.deserialize_binary,
            response_serializer=google_dot_protobuf_dot_empty__pb.Empty.serialize_binary,
        ),
        "ListProductsInProductSet": grpc.unary_unary_rpc_method_handler(
            servicer.ListProductsInProductSet,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsInProductSetRequest.deserialize_binary,
            response_serializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ListProductsInProductSetResponse.serialize_binary,
        ),
        "ImportProductSets": grpc.unary_unary_rpc_method_handler(
            servicer.ImportProductSets,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.ImportProductSetsRequest.deserialize_binary,
            response_serializer=google_dot_longrunning_dot_operations__pb.Operation.serialize_binary,
        ),
        "PurgeProducts": grpc.unary_unary_rpc_method_handler(
            servicer.PurgeProducts,
            request_deserializer=google_dot_cloud_dot_vision_dot_v1_dot_product__search__service__pb.PurgeProductsRequest.deserialize_binary,
            response_serializer=google_dot_longrunning_dot_operations__pb.Operation.serialize_binary,
        ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
        "google.cloud.vision.v1.ProductSearch", rpc_method_handlers
    )
    server.add_generic_rpc_handlers((generic_handler,))
