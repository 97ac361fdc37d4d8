# Generated by protoc-vision from google/cloud/vision/v1/geometry.proto. DO NOT EDIT!
from protoc_vision.runtime.fields import Field
from protoc_vision.runtime.message import Message


class Vertex(Message):
    FULL_NAME = "google.cloud.vision.v1.Vertex"

    x = Field(1, "int32")
    y = Field(2, "int32")


class NormalizedVertex(Message):
    FULL_NAME = "google.cloud.vision.v1.NormalizedVertex"

    x = Field(1, "float")
    y = Field(2, "float")


class BoundingPoly(Message):
    FULL_NAME = "google.cloud.vision.v1.BoundingPoly"

    vertices = Field(1, "message", repeated=True, message_type="google.cloud.vision.v1.Vertex")
    normalized_vertices = Field(2, "message", repeated=True, message_type="google.cloud.vision.v1.NormalizedVertex")


class Position(Message):
    FULL_NAME = "google.cloud.vision.v1.Position"

    x = Field(1, "float")
    y = Field(2, "float")
    z = Field(3, "float")
