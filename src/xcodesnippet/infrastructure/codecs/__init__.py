"""Snippet format codecs."""

from xcodesnippet.infrastructure.codecs.factory import (
    DEFAULT_FORMATS,
    SnippetFormat,
    create_codec,
)
from xcodesnippet.infrastructure.codecs.front_matter import FrontMatterCodec
from xcodesnippet.infrastructure.codecs.property_list import PropertyListCodec

__all__ = [
    "DEFAULT_FORMATS",
    "FrontMatterCodec",
    "PropertyListCodec",
    "SnippetFormat",
    "create_codec",
]
