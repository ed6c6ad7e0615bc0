"""Domain protocols."""

from pathlib import Path
from typing import Protocol

from xcodesnippet.domain.entities import CodeSnippet


class SnippetCodec(Protocol):
    """Reads and writes code snippets in one on-disk format."""

    format_name: str

    def can_decode(self, path: Path) -> bool:
        """Return True if the file looks like this format."""
        ...

    def decode(self, path: Path) -> CodeSnippet:
        """Read a snippet from a file."""
        ...

    def encode(self, snippet: CodeSnippet, destination: Path) -> Path:
        """Write a snippet into a directory and return the written path."""
        ...


class RemoteCloner(Protocol):
    """Fetches a remote snippet repository into a local directory."""

    def clone(self, url: str, destination: Path) -> Path:
        """Clone the repository and return the local path."""
        ...
