# Generated by protoc-vision from google/protobuf/any.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message


class Any(Message):
    FULL_NAME = "google.protobuf.Any"

    type_url = Field(1, "string")
    value = Field(2, "bytes")
