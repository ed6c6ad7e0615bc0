"""Factory for creating snippet format codecs."""

from enum import StrEnum

from xcodesnippet.infrastructure.codecs.front_matter import FrontMatterCodec
from xcodesnippet.infrastructure.codecs.property_list import PropertyListCodec


class SnippetFormat(StrEnum):
    """On-disk snippet formats."""

    CODESNIPPET = "codesnippet"
    FRONTMATTER = "frontmatter"


DEFAULT_FORMATS = (SnippetFormat.CODESNIPPET, SnippetFormat.FRONTMATTER)


def create_codec(
    snippet_format: SnippetFormat,
) -> PropertyListCodec | FrontMatterCodec:
    """Create the codec for a snippet format.

    Args:
        snippet_format: The format to read or write.

    Returns:
        A codec for the format.

    """
    match snippet_format:
        case SnippetFormat.CODESNIPPET:
            return PropertyListCodec()
        case SnippetFormat.FRONTMATTER:
            return FrontMatterCodec()
