"""Domain value objects."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SnippetOperationResult:
    """Outcome of installing, removing or exporting a single snippet."""

    completion_prefix: str
    path: Path | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        """Return True if the operation did not fail."""
        return self.error is None
