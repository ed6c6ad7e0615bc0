"""Directory backed store of installed code snippets."""

import os
from collections.abc import Iterator, Sequence
from pathlib import Path

import structlog

from xcodesnippet.domain.entities import CodeSnippet
from xcodesnippet.domain.errors import (
    CodeSnippetError,
    DuplicatedSnippetError,
    FileFormatNotSupportedError,
    FileNotExistsError,
    OutputFormatNotSupportedError,
)
from xcodesnippet.domain.protocols import SnippetCodec
from xcodesnippet.infrastructure.codecs.factory import (
    DEFAULT_FORMATS,
    SnippetFormat,
    create_codec,
)
from xcodesnippet.infrastructure.codecs.property_list import PropertyListCodec


class SnippetStore:
    """Owns the directory of installed snippets.

    Installed snippets are stored as ``<identifier>.codesnippet`` property
    lists. Files are read with the first input format that claims them, so the
    order of ``input_formats`` decides which codec wins.
    """

    def __init__(
        self,
        root: Path,
        input_formats: Sequence[SnippetFormat] = DEFAULT_FORMATS,
        export_formats: Sequence[SnippetFormat] = DEFAULT_FORMATS,
    ) -> None:
        """Initialize the store, creating the root directory if needed."""
        self.log = structlog.get_logger(__name__)
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self._storage_codec = PropertyListCodec()
        self._decoders: list[SnippetCodec] = [
            create_codec(snippet_format) for snippet_format in input_formats
        ]
        self._encoders: dict[str, SnippetCodec] = {
            snippet_format.value: create_codec(snippet_format)
            for snippet_format in export_formats
        }

    def load(self, path: Path) -> CodeSnippet:
        """Load a snippet from any supported file."""
        if not path.exists():
            raise FileNotExistsError

        codec = next((c for c in self._decoders if c.can_decode(path)), None)
        if codec is None:
            raise FileFormatNotSupportedError

        return codec.decode(path)

    def load_directory(
        self, path: Path, *, recursive: bool = False
    ) -> list[CodeSnippet]:
        """Load every readable snippet in a directory.

        Entries that fail to load are skipped, so one broken file never hides
        the rest of the directory.
        """
        if not path.exists():
            raise FileNotExistsError

        entries = self._walk(path) if recursive else sorted(path.iterdir())
        snippets = []
        for entry in entries:
            try:
                snippets.append(self.load(entry))
            except (CodeSnippetError, OSError) as e:
                self.log.debug("Skipping entry", path=str(entry), error=str(e))
        return snippets

    def installed(self) -> list[CodeSnippet]:
        """Return all snippets in the store."""
        return self.load_directory(self.root)

    def find(self, completion_prefix: str) -> CodeSnippet | None:
        """Return the installed snippet with the given completion prefix."""
        return next(
            (s for s in self.installed() if s.completion_prefix == completion_prefix),
            None,
        )

    def save(self, snippet: CodeSnippet, *, force: bool = False) -> Path:
        """Install a snippet into the store.

        A snippet with the same completion prefix counts as a duplicate; it is
        replaced when ``force`` is set and rejected otherwise.
        """
        duplicates = [
            s
            for s in self.installed()
            if s.completion_prefix == snippet.completion_prefix
        ]
        if duplicates and not force:
            raise DuplicatedSnippetError

        for duplicate in duplicates:
            self.log.info(
                "Replacing installed snippet",
                completion_prefix=duplicate.completion_prefix,
                identifier=duplicate.identifier,
            )
            self.remove(duplicate)

        return self._storage_codec.encode(snippet, self.root)

    def remove(self, snippet: CodeSnippet) -> None:
        """Delete a snippet's file from the store, if it is there."""
        path = self.root / snippet.file_name
        path.unlink(missing_ok=True)
        self.log.debug("Removed snippet file", path=str(path))

    def export(
        self, snippet: CodeSnippet, destination: Path, format_name: str
    ) -> Path:
        """Write a snippet into a directory using the named format."""
        codec = self._encoders.get(format_name.lower())
        if codec is None:
            raise OutputFormatNotSupportedError
        return codec.encode(snippet, destination)

    def supported_export_formats(self) -> list[str]:
        """Return the names of the formats snippets can be exported to."""
        return list(self._encoders)

    def _walk(self, path: Path) -> Iterator[Path]:
        """Yield every file below a directory, skipping unreadable ones."""

        def _on_error(error: OSError) -> None:
            self.log.debug(
                "Skipping unreadable directory",
                path=str(error.filename),
                error=str(error),
            )

        for dirpath, dirnames, filenames in os.walk(path, onerror=_on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename
