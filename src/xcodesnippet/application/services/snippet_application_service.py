"""Application service for managing installed code snippets."""

import tempfile
from collections.abc import Callable
from pathlib import Path

import structlog

from xcodesnippet.domain.entities import CodeSnippet
from xcodesnippet.domain.errors import (
    CodeSnippetError,
    FileNotExistsError,
    NoSnippetsFoundError,
    NoSnippetsInstalledError,
    OutputFormatNotSupportedError,
    OutputPathNotDirectoryError,
    SnippetNotFoundError,
)
from xcodesnippet.domain.protocols import RemoteCloner
from xcodesnippet.domain.value_objects import SnippetOperationResult
from xcodesnippet.infrastructure.filesystem.snippet_store import SnippetStore
from xcodesnippet.infrastructure.formatters.snippet_detail_formatter import (
    SnippetDetailFormatter,
)


class SnippetApplicationService:
    """Install, inspect, remove and export code snippets.

    Operations over many snippets handle each snippet on its own and report a
    result per snippet, so a single failure does not stop the rest.
    """

    def __init__(
        self,
        store: SnippetStore,
        cloner: RemoteCloner,
        formatter: SnippetDetailFormatter | None = None,
    ) -> None:
        """Initialize the snippet application service."""
        self.store = store
        self.cloner = cloner
        self.formatter = formatter or SnippetDetailFormatter()
        self.log = structlog.get_logger(__name__)

    @property
    def snippets_directory(self) -> Path:
        """Return the directory holding installed snippets."""
        return self.store.root

    def supported_export_formats(self) -> list[str]:
        """Return the names of the export formats."""
        return self.store.supported_export_formats()

    def install(
        self, path: Path, *, force: bool = False
    ) -> list[SnippetOperationResult]:
        """Install a snippet file or every snippet file in a directory."""
        if not path.exists():
            raise FileNotExistsError

        if path.is_dir():
            snippets = self.store.load_directory(path)
            self.log.info("Installing snippets", path=str(path), count=len(snippets))
            return self._each(snippets, lambda s: self.store.save(s, force=force))

        snippet = self.store.load(path)
        output_path = self.store.save(snippet, force=force)
        self.log.info(
            "Installed snippet",
            completion_prefix=snippet.completion_prefix,
            path=str(output_path),
        )
        return [SnippetOperationResult(snippet.completion_prefix, output_path)]

    def install_remote(
        self, url: str, *, force: bool = False
    ) -> list[SnippetOperationResult]:
        """Install every snippet found in a remote git repository."""
        with tempfile.TemporaryDirectory(ignore_cleanup_errors=True) as tmp_dir:
            clone_path = self.cloner.clone(url, Path(tmp_dir) / "repository")
            snippets = self.store.load_directory(clone_path, recursive=True)
            if not snippets:
                raise NoSnippetsFoundError

            self.log.info("Installing remote snippets", url=url, count=len(snippets))
            return self._each(snippets, lambda s: self.store.save(s, force=force))

    def list_completions(self) -> list[str]:
        """Return the completion prefixes of the installed snippets."""
        return [snippet.completion_prefix for snippet in self.store.installed()]

    def get(self, completion: str) -> CodeSnippet:
        """Return the installed snippet for a completion prefix."""
        snippet = self.store.find(completion)
        if snippet is None:
            raise SnippetNotFoundError
        return snippet

    def show(self, completion: str) -> str:
        """Return the description of an installed snippet."""
        return self.formatter.format(self.get(completion))

    def remove(self, completion: str) -> CodeSnippet:
        """Remove the installed snippet for a completion prefix."""
        snippet = self.get(completion)
        self.store.remove(snippet)
        self.log.info("Removed snippet", completion_prefix=completion)
        return snippet

    def remove_all(self) -> list[SnippetOperationResult]:
        """Remove every installed snippet."""

        def _remove(snippet: CodeSnippet) -> None:
            self.store.remove(snippet)

        return self._each(self.store.installed(), _remove)

    def export_all(
        self, output: Path, format_name: str
    ) -> list[SnippetOperationResult]:
        """Export every installed snippet into a directory."""
        snippets = self.store.installed()
        if not snippets:
            raise NoSnippetsInstalledError

        if output.exists() and not output.is_dir():
            raise OutputPathNotDirectoryError

        if format_name.lower() not in self.supported_export_formats():
            raise OutputFormatNotSupportedError

        output.mkdir(parents=True, exist_ok=True)
        self.log.info(
            "Exporting snippets",
            output=str(output),
            format=format_name,
            count=len(snippets),
        )
        return self._each(
            snippets, lambda s: self.store.export(s, output, format_name)
        )

    def _each(
        self,
        snippets: list[CodeSnippet],
        operation: Callable[[CodeSnippet], Path | None],
    ) -> list[SnippetOperationResult]:
        """Apply an operation to each snippet, collecting per snippet results."""
        results = []
        for snippet in snippets:
            try:
                path = operation(snippet)
            except (CodeSnippetError, OSError) as e:
                self.log.debug(
                    "Snippet operation failed",
                    completion_prefix=snippet.completion_prefix,
                    error=str(e),
                )
                results.append(
                    SnippetOperationResult(snippet.completion_prefix, error=e)
                )
                continue
            results.append(SnippetOperationResult(snippet.completion_prefix, path))
        return results
