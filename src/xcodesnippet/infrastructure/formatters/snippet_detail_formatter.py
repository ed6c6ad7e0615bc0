"""Human readable description of an installed snippet."""

from xcodesnippet.domain.entities import CodeSnippet, CompletionScope


class SnippetDetailFormatter:
    """Formats a snippet for the ``show`` command."""

    def format(self, snippet: CodeSnippet) -> str:
        """Return a front matter style description of the snippet."""
        language = snippet.source_language
        lines = [
            f"title: {snippet.title}",
            f"summary: {snippet.summary}",
            f"Language: {language.display_name if language else ''}",
            f"Completion: {snippet.completion_prefix}",
            self._availability(snippet.completion_scopes),
        ]
        header = "\n".join(lines)
        return f"---\n{header}\n---\n\n{snippet.contents}"

    def _availability(self, scopes: tuple[str, ...]) -> str:
        if not scopes:
            return f"Availability: {CompletionScope.ALL}"
        if len(scopes) == 1:
            return f"Availability: {scopes[0]}"
        items = "\n".join(f"  - {scope}" for scope in scopes)
        return f"Availability:\n{items}"
