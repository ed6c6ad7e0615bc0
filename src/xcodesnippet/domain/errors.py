"""Errors raised while reading, storing and exporting code snippets.

Every error carries a short message suitable for showing to a user as is.
"""


class CodeSnippetError(Exception):
    """Base class for code snippet errors."""

    default_message = "Code snippet operation failed."

    def __init__(self, message: str | None = None) -> None:
        """Initialize the error with its default message unless one is given."""
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        """Return the user facing message."""
        return str(self)


class FileFormatNotSupportedError(CodeSnippetError):
    """Raised when no registered format handles a file or format name."""

    default_message = "File format of the specified file is not supported."


class OutputFormatNotSupportedError(FileFormatNotSupportedError):
    """Raised when snippets are exported to a format that is not registered."""

    default_message = "The specified output format is not supported."


class FileNotExistsError(CodeSnippetError):
    """Raised when a snippet file does not exist."""

    default_message = "The specified file does not exist."


class FileIsEmptyError(CodeSnippetError):
    """Raised when a snippet file has no content."""

    default_message = "The specified file is empty."


class DuplicatedSnippetError(CodeSnippetError):
    """Raised when a snippet with the same completion prefix is installed."""

    default_message = "Duplicate code snippet already installed."


class FrontMatterNotDetectedError(CodeSnippetError):
    """Raised when a source file has no front matter header."""

    default_message = "FrontMatter not found in the specified file."


class SnippetDecodeError(CodeSnippetError):
    """Raised when a snippet file cannot be parsed."""

    default_message = "The specified file could not be decoded."


class SnippetNotFoundError(CodeSnippetError):
    """Raised when no installed snippet has the requested completion."""

    default_message = "The code snippet for the given completion not found."


class NoSnippetsInstalledError(CodeSnippetError):
    """Raised when the store holds no snippets."""

    default_message = "No code snippet installed."


class NoSnippetsFoundError(CodeSnippetError):
    """Raised when a remote repository contains no snippets."""

    default_message = "No code snippet found in the remote repository."


class OutputPathNotDirectoryError(CodeSnippetError):
    """Raised when an export destination exists but is not a directory."""

    default_message = "The specified output path is not a directory."


class RemoteCloneError(CodeSnippetError):
    """Raised when a remote repository cannot be cloned."""

    default_message = "Failed to clone the remote repository."
