# Generated by protoc-vision from google/longrunning/operations.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message
import protoc_vision.gen.google.protobuf.any_pb  # noqa: F401
import protoc_vision.gen.google.rpc.status_pb  # noqa: F401


class Operation(Message):
    FULL_NAME = "google.longrunning.Operation"

    name = Field(1, "string")
    metadata = Field(2, "message", message_type="google.protobuf.Any")
    done = Field(3, "bool")
    error = Field(4, "message", message_type="google.rpc.Status", oneof="result")
    response = Field(5, "message", message_type="google.protobuf.Any", oneof="result")
