# Generated by protoc-vision from google/protobuf/timestamp.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message


class Timestamp(Message):
    FULL_NAME = "google.protobuf.Timestamp"

    seconds = Field(1, "int64")
    nanos = Field(2, "int32")
