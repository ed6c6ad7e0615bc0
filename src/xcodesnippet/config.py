"""Global configuration for the xcodesnippet project."""

from pathlib import Path

import click
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from xcodesnippet.log import LogFormat

DEFAULT_SNIPPETS_DIR = (
    Path.home() / "Library" / "Developer" / "Xcode" / "UserData" / "CodeSnippets"
)


class AppContext(BaseSettings):
    """Global context for the xcodesnippet project."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    snippets_dir: Path = Field(default=DEFAULT_SNIPPETS_DIR)
    log_level: str = Field(default="WARNING")
    log_format: LogFormat = Field(default=LogFormat.PRETTY)
    clone_depth: int = Field(default=1, ge=1)


with_app_context = click.make_pass_decorator(AppContext)
