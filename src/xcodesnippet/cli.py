"""Command line interface for xcodesnippet."""

from collections.abc import Iterator
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from pathlib import Path

import click
import structlog

from xcodesnippet.application.factories.snippet_application_factory import (
    create_snippet_application_service,
)
from xcodesnippet.config import AppContext, with_app_context
from xcodesnippet.domain.errors import CodeSnippetError
from xcodesnippet.domain.value_objects import SnippetOperationResult
from xcodesnippet.infrastructure.codecs.factory import SnippetFormat
from xcodesnippet.log import configure_logging


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn snippet errors into click errors printed as ``Error: ...``."""
    try:
        yield
    except CodeSnippetError as e:
        raise click.ClickException(e.message) from e


def _echo_failures(results: list[SnippetOperationResult]) -> None:
    for result in results:
        if not result.succeeded:
            click.echo(f"Error: {result.error}", err=True)


def _echo_installed(results: list[SnippetOperationResult]) -> None:
    for result in results:
        if result.succeeded:
            click.echo("Installed code snippet")
            click.echo(str(result.path))
    _echo_failures(results)


@click.group(context_settings={"max_content_width": 100})
@click.option(
    "--env-file",
    help="Path to a .env file [default: .env]",
    type=click.Path(
        exists=True,
        dir_okay=False,
        resolve_path=True,
        path_type=Path,
    ),
)
@click.pass_context
def cli(
    ctx: click.Context,
    env_file: Path | None,
) -> None:
    """A command line utility for managing Code Snippets of Xcode."""
    config = AppContext()
    if env_file:
        config = AppContext(_env_file=env_file)  # type: ignore[call-arg]

    configure_logging(config)
    structlog.get_logger(__name__).debug(
        "Loaded configuration", snippets_dir=str(config.snippets_dir)
    )

    ctx.obj = config


@cli.command()
@click.option("-f", "--force", is_flag=True, help="Overwrite duplicate code snippet.")
@click.argument("file", type=click.Path(path_type=Path))
@with_app_context
def install(app_context: AppContext, file: Path, *, force: bool) -> None:
    """Install code snippet."""
    service = create_snippet_application_service(app_context)
    with _reported_errors():
        results = service.install(file, force=force)
    _echo_installed(results)


@cli.command("remote-install")
@click.option("-f", "--force", is_flag=True, help="Overwrite duplicate code snippet.")
@click.argument("url")
@with_app_context
def remote_install(app_context: AppContext, url: str, *, force: bool) -> None:
    """Install code snippet from remote repository."""
    service = create_snippet_application_service(app_context)
    with _reported_errors():
        results = service.install_remote(url, force=force)
    _echo_installed(results)


@cli.command()
@click.argument("completion")
@with_app_context
def show(app_context: AppContext, completion: str) -> None:
    """Shows a detail of code snippet."""
    service = create_snippet_application_service(app_context)
    with _reported_errors():
        click.echo(service.show(completion))


@cli.command()
@click.argument("completion", required=False, default="")
@click.option(
    "--all", "remove_all", is_flag=True, help="Remove all installed code snippets."
)
@with_app_context
def remove(app_context: AppContext, completion: str, *, remove_all: bool) -> None:
    """Remove code snippet."""
    service = create_snippet_application_service(app_context)
    if remove_all:
        results = service.remove_all()
        _echo_failures(results)
        click.echo("Removed code snippet")
        return

    if not completion:
        msg = "Specify the code snippet completion or use --all."
        raise click.UsageError(msg)

    with _reported_errors():
        service.remove(completion)
    click.echo("Removed code snippet")


@cli.command("list")
@with_app_context
def list_snippets(app_context: AppContext) -> None:
    """List installed code snippets."""
    service = create_snippet_application_service(app_context)
    for completion in service.list_completions():
        click.echo(completion)


@cli.command("open")
@with_app_context
def open_directory(app_context: AppContext) -> None:
    """Open code snippets location."""
    service = create_snippet_application_service(app_context)
    click.launch(str(service.snippets_directory))


@cli.command()
@click.argument("output", default=".", type=click.Path(path_type=Path))
@click.option(
    "-f",
    "--format",
    "format_name",
    default=SnippetFormat.FRONTMATTER.value,
    show_default=True,
    help=(
        "Specify the export file format "
        f"({', '.join(f.value for f in SnippetFormat)})."
    ),
)
@with_app_context
def export(app_context: AppContext, output: Path, format_name: str) -> None:
    """Export code snippets."""
    service = create_snippet_application_service(app_context)
    with _reported_errors():
        results = service.export_all(output, format_name)
    _echo_failures(results)
    click.echo("Exported code snippets")


@cli.command()
def version() -> None:
    """Show the version of xcodesnippet."""
    try:
        current = package_version("xcodesnippet")
    except PackageNotFoundError:
        current = "unknown"
    click.echo(f"xcodesnippet {current}")


if __name__ == "__main__":
    cli()
