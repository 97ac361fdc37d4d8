# Generated by protoc-vision from google/protobuf/empty.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message


class Empty(Message):
    FULL_NAME = "google.protobuf.Empty"
