"""JSON codec for row sets."""

from .json_codec import DEFAULT_INDENT, JsonDocument, JsonRowCodec

__all__ = ["DEFAULT_INDENT", "JsonDocument", "JsonRowCodec"]
