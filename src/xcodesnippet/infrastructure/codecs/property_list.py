"""Xcode property list (.codesnippet) codec."""

import plistlib
from pathlib import Path
from xml.parsers.expat import ExpatError

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xcodesnippet.domain.entities import (
    CODESNIPPET_EXTENSION,
    CodeSnippet,
    CompletionScope,
    SourceLanguage,
)
from xcodesnippet.domain.errors import FileIsEmptyError, SnippetDecodeError


class PropertyListDocument(BaseModel):
    """Schema of a .codesnippet property list."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    contents: str = Field(alias="IDECodeSnippetContents")
    completion_prefix: str = Field(alias="IDECodeSnippetCompletionPrefix")
    language: str = Field(alias="IDECodeSnippetLanguage")
    title: str = Field(alias="IDECodeSnippetTitle")
    summary: str = Field(alias="IDECodeSnippetSummary")
    completion_scopes: list[str] = Field(alias="IDECodeSnippetCompletionScopes")
    identifier: str = Field(alias="IDECodeSnippetIdentifier")
    is_user_snippet: bool = Field(alias="IDECodeSnippetUserSnippet")
    version: int = Field(alias="IDECodeSnippetVersion")

    @classmethod
    def from_snippet(cls, snippet: CodeSnippet) -> "PropertyListDocument":
        """Build the document for a snippet."""
        return cls(
            contents=snippet.contents,
            completion_prefix=snippet.completion_prefix,
            language=str(snippet.language),
            title=snippet.title,
            summary=snippet.summary,
            completion_scopes=[str(scope) for scope in snippet.completion_scopes],
            identifier=snippet.identifier,
            is_user_snippet=snippet.is_user_snippet,
            version=snippet.version,
        )

    def to_snippet(self) -> CodeSnippet:
        """Convert the document to a snippet, normalizing its scopes."""
        return CodeSnippet(
            contents=self.contents,
            completion_prefix=self.completion_prefix,
            language=_language(self.language),
            title=self.title,
            summary=self.summary,
            completion_scopes=CompletionScope.validated(self.completion_scopes),
            identifier=self.identifier,
            is_user_snippet=self.is_user_snippet,
            version=self.version,
        )


class PropertyListCodec:
    """Reads and writes snippets in Xcode's native property list format."""

    format_name = "codesnippet"
    extension = CODESNIPPET_EXTENSION

    def __init__(self) -> None:
        """Initialize the codec."""
        self.log = structlog.get_logger(__name__)

    def can_decode(self, path: Path) -> bool:
        """Return True for .codesnippet files."""
        return path.suffix == f".{self.extension}"

    def decode(self, path: Path) -> CodeSnippet:
        """Read a snippet from a property list file."""
        try:
            data = path.read_bytes()
        except OSError as e:
            self.log.debug("Cannot read snippet file", path=str(path), error=str(e))
            raise FileIsEmptyError from e
        if not data:
            raise FileIsEmptyError

        try:
            raw = plistlib.loads(data)
        except (ValueError, ExpatError) as e:
            msg = f"Invalid property list: {path.name}"
            raise SnippetDecodeError(msg) from e

        try:
            document = PropertyListDocument.model_validate(raw)
        except ValidationError as e:
            msg = f"Invalid code snippet document: {path.name}"
            raise SnippetDecodeError(msg) from e

        return document.to_snippet()

    def encode(self, snippet: CodeSnippet, destination: Path) -> Path:
        """Write a snippet as ``<identifier>.codesnippet`` into a directory."""
        output_path = destination / snippet.file_name
        document = PropertyListDocument.from_snippet(snippet)
        data = plistlib.dumps(
            document.model_dump(by_alias=True),
            fmt=plistlib.FMT_XML,
            sort_keys=True,
        )
        output_path.write_bytes(data)
        self.log.debug(
            "Wrote code snippet",
            path=str(output_path),
            completion_prefix=snippet.completion_prefix,
        )
        return output_path


def _language(identifier: str) -> str:
    """Return the identifier if Xcode knows the language, else an empty string."""
    language = SourceLanguage.from_identifier(identifier)
    return language.value if language else ""
