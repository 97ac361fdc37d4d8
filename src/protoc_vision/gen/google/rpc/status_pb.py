# Generated by protoc-vision from google/rpc/status.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message
import protoc_vision.gen.google.protobuf.any_pb  # noqa: F401


class Status(Message):
    FULL_NAME = "google.rpc.Status"

    code = Field(1, "int32")
    message = Field(2, "string")
    details = Field(3, "message", repeated=True, message_type="google.protobuf.Any")
