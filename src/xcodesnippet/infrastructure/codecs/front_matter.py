"""Front matter codec.

A front matter snippet is an ordinary source file that starts with a YAML
header between ``---`` lines::

    ---
    title: Weak self guard
    completion-scopes:
      - CodeBlock
      - TopLevel
    ---

    guard let self else { return }

The file name without its extension becomes the completion prefix and the
extension selects the language.
"""

import re
from pathlib import Path
from typing import Any

import structlog
import yaml

from xcodesnippet.domain.entities import CodeSnippet, CompletionScope, SourceLanguage
from xcodesnippet.domain.errors import (
    FileIsEmptyError,
    FrontMatterNotDetectedError,
    SnippetDecodeError,
)

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n\n?(?P<header>.*?)^---[ \t]*(?:\n|\Z)\n?(?P<body>.*)",
    re.DOTALL | re.MULTILINE,
)

TITLE_KEY = "title"
SUMMARY_KEY = "summary"
SCOPE_KEY = "completion-scope"
SCOPES_KEY = "completion-scopes"


def split_front_matter(text: str) -> tuple[str, str]:
    """Split a document into its header and body."""
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        raise FrontMatterNotDetectedError
    return match.group("header"), match.group("body")


class FrontMatterCodec:
    """Reads and writes snippets as source files with a YAML header."""

    format_name = "frontmatter"

    def __init__(self) -> None:
        """Initialize the codec."""
        self.log = structlog.get_logger(__name__)

    def can_decode(self, path: Path) -> bool:
        """Return True for Swift and Objective-C source files."""
        return SourceLanguage.from_extension(path.suffix) is not None

    def decode(self, path: Path) -> CodeSnippet:
        """Read a snippet from a front matter source file."""
        try:
            data = path.read_bytes()
        except OSError as e:
            self.log.debug("Cannot read snippet file", path=str(path), error=str(e))
            raise FileIsEmptyError from e
        if not data:
            raise FileIsEmptyError

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Not a UTF-8 text file: {path.name}"
            raise SnippetDecodeError(msg) from e

        header, body = split_front_matter(text)
        variables = self._parse_header(header, path)

        language = SourceLanguage.from_extension(path.suffix)
        return CodeSnippet.create(
            contents=body,
            completion_prefix=path.stem,
            language=language.value if language else "",
            title=_string(variables.get(TITLE_KEY)),
            summary=_string(variables.get(SUMMARY_KEY)),
            completion_scopes=self._completion_scopes(variables),
        )

    def encode(self, snippet: CodeSnippet, destination: Path) -> Path:
        """Write a snippet as ``<completion_prefix>.<ext>`` into a directory."""
        language = snippet.source_language
        extension = language.extension if language else ""
        output_path = destination / f"{snippet.completion_prefix}.{extension}"
        output_path.write_text(self.render(snippet), encoding="utf-8")
        self.log.debug(
            "Wrote front matter snippet",
            path=str(output_path),
            completion_prefix=snippet.completion_prefix,
        )
        return output_path

    def render(self, snippet: CodeSnippet) -> str:
        """Return the front matter document for a snippet."""
        lines = []
        if snippet.title:
            lines.append(_scalar_line(TITLE_KEY, snippet.title))
        if snippet.summary:
            lines.append(_scalar_line(SUMMARY_KEY, snippet.summary))

        scopes = snippet.completion_scopes
        if len(scopes) == 1:
            lines.append(f"{SCOPE_KEY}: {scopes[0]}")
        elif len(scopes) > 1:
            lines.append(f"{SCOPES_KEY}:")
            lines.extend(f"  - {scope}" for scope in scopes)

        header = "".join(f"{line}\n" for line in lines)
        return f"---\n{header}---\n\n{snippet.contents}"

    def _parse_header(self, header: str, path: Path) -> dict[str, Any]:
        """Parse the YAML header, treating a broken header as empty."""
        try:
            variables = yaml.safe_load(header)
        except yaml.YAMLError as e:
            self.log.warning(
                "Ignoring unreadable front matter header", path=str(path), error=str(e)
            )
            return {}

        if variables is None:
            return {}
        if not isinstance(variables, dict):
            self.log.warning(
                "Ignoring front matter header that is not a mapping", path=str(path)
            )
            return {}
        return variables

    def _completion_scopes(self, variables: dict[str, Any]) -> tuple[str, ...]:
        """Return the validated completion scopes declared in the header."""
        scope = variables.get(SCOPE_KEY)
        if isinstance(scope, str):
            return CompletionScope.validated([scope])

        scopes = variables.get(SCOPES_KEY)
        if isinstance(scopes, list):
            return CompletionScope.validated(scopes)

        return CompletionScope.validated([])


def _string(value: object) -> str:
    return value if isinstance(value, str) else ""


def _scalar_line(key: str, value: str) -> str:
    """Return ``key: value``, quoting the value when YAML would misread it."""
    dumped = yaml.safe_dump(
        {key: value}, allow_unicode=True, default_flow_style=False, width=float("inf")
    )
    return dumped.rstrip("\n")
