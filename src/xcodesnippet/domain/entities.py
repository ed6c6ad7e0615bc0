"""Pure domain entities for code snippets."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

CODESNIPPET_EXTENSION = "codesnippet"


class SourceLanguage(StrEnum):
    """Source languages Xcode accepts for a code snippet."""

    SWIFT = "Xcode.SourceCodeLanguage.Swift"
    OBJECTIVE_C = "Xcode.SourceCodeLanguage.Objective-C"
    OBJECTIVE_CPP = "Xcode.SourceCodeLanguage.Objective-C++"

    @property
    def extension(self) -> str:
        """Return the source file extension for the language."""
        return _EXTENSIONS[self]

    @property
    def display_name(self) -> str:
        """Return the human readable language name."""
        return self.value.removeprefix("Xcode.SourceCodeLanguage.")

    @classmethod
    def from_extension(cls, extension: str) -> "SourceLanguage | None":
        """Return the language for a file extension, with or without the dot."""
        extension = extension.lstrip(".")
        for language, candidate in _EXTENSIONS.items():
            if candidate == extension:
                return language
        return None

    @classmethod
    def from_identifier(cls, identifier: str) -> "SourceLanguage | None":
        """Return the language for an Xcode language identifier."""
        try:
            return cls(identifier)
        except ValueError:
            return None


_EXTENSIONS = {
    SourceLanguage.SWIFT: "swift",
    SourceLanguage.OBJECTIVE_C: "m",
    SourceLanguage.OBJECTIVE_CPP: "mm",
}


class CompletionScope(StrEnum):
    """Places in the editor where a snippet completion is offered."""

    ALL = "All"
    CODE_EXPRESSION = "CodeExpression"
    CLASS_IMPLEMENTATION = "ClassImplementation"
    TOP_LEVEL = "TopLevel"
    STRING_OR_COMMENT = "StringOrComment"
    CODE_BLOCK = "CodeBlock"

    @classmethod
    def validated(cls, scopes: Iterable[object]) -> tuple[str, ...]:
        """Drop unknown scopes, keeping order.

        Falls back to ``("All",)`` when nothing valid remains.
        """
        allowed = {scope.value for scope in cls}
        valid = tuple(
            scope for scope in scopes if isinstance(scope, str) and scope in allowed
        )
        return valid or (cls.ALL.value,)


def new_identifier() -> str:
    """Mint a snippet identifier."""
    return str(uuid.uuid4()).upper()


@dataclass(frozen=True)
class CodeSnippet:
    """A reusable unit of source code with its Xcode metadata."""

    contents: str
    completion_prefix: str
    language: str
    title: str = ""
    summary: str = ""
    completion_scopes: tuple[str, ...] = field(default_factory=tuple)
    identifier: str = field(default_factory=new_identifier)
    is_user_snippet: bool = True
    version: int = 0

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        *,
        contents: str,
        completion_prefix: str,
        language: str,
        title: str = "",
        summary: str = "",
        completion_scopes: Iterable[str] = (),
    ) -> "CodeSnippet":
        """Create a new user snippet with a fresh identity."""
        return cls(
            contents=contents,
            completion_prefix=completion_prefix,
            language=str(language),
            title=title,
            summary=summary,
            completion_scopes=tuple(str(scope) for scope in completion_scopes),
            identifier=new_identifier(),
            is_user_snippet=True,
            version=0,
        )

    @property
    def file_name(self) -> str:
        """Return the storage file name, keyed by identifier."""
        return f"{self.identifier}.{CODESNIPPET_EXTENSION}"

    @property
    def source_language(self) -> SourceLanguage | None:
        """Return the language as an enum member, if it is a known one."""
        return SourceLanguage.from_identifier(self.language)
