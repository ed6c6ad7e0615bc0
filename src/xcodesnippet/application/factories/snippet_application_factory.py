"""Factory for the snippet application service."""

from xcodesnippet.application.services.snippet_application_service import (
    SnippetApplicationService,
)
from xcodesnippet.config import AppContext
from xcodesnippet.infrastructure.cloning.git.remote_clone import GitRemoteCloner
from xcodesnippet.infrastructure.filesystem.snippet_store import SnippetStore
from xcodesnippet.infrastructure.formatters.snippet_detail_formatter import (
    SnippetDetailFormatter,
)


def create_snippet_application_service(
    app_context: AppContext,
) -> SnippetApplicationService:
    """Create the snippet application service for the configured store."""
    return SnippetApplicationService(
        store=SnippetStore(app_context.snippets_dir),
        cloner=GitRemoteCloner(depth=app_context.clone_depth),
        formatter=SnippetDetailFormatter(),
    )
