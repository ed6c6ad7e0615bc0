"""Clone remote snippet repositories with git."""

from pathlib import Path

import git
import structlog

from xcodesnippet.domain.errors import RemoteCloneError


class GitRemoteCloner:
    """Clones a remote git repository into a local directory."""

    def __init__(self, depth: int = 1) -> None:
        """Initialize the cloner."""
        self.depth = depth
        self.log = structlog.get_logger(__name__)

    def clone(self, url: str, destination: Path) -> Path:
        """Clone ``url`` into ``destination`` and return the clone path."""
        self.log.info("Cloning repository", url=url, destination=str(destination))
        try:
            git.Repo.clone_from(
                url, destination, multi_options=[f"--depth={self.depth}"]
            )
        except git.CommandError as e:
            self.log.warning("Failed to clone repository", url=url, error=str(e))
            raise RemoteCloneError from e
        return destination
