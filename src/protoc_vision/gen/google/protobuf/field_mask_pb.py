# Generated by protoc-vision from google/protobuf/field_mask.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message


class FieldMask(Message):
    FULL_NAME = "google.protobuf.FieldMask"

    paths = Field(1, "string", repeated=True)
