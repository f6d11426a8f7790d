"""Store value serializers."""

from .json_serializer import JSONSerializer, ExtendedJSONEncoder, decode_json_object

__all__ = [
    "JSONSerializer",
    "ExtendedJSONEncoder",
    "decode_json_object",
]
