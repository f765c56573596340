"""notty-imagetest CLI tools."""

from pathlib import Path
from typing import Annotated

import dotenv
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from notty_imagetest import __version__
from notty_imagetest.emitter import Emitter, inspect_capture
from notty_imagetest.exceptions import ImageTestError
from notty_imagetest.sequences.registry import registry
from notty_imagetest.settings import Settings
from notty_imagetest.utilities.logging import (
    configure_logging,
    get_logger,
    normalize_level,
)

logger = get_logger(__name__)
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="notty-imagetest",
    help="Print inline image escape sequences for natty/notty terminals",
    add_completion=False,
    no_args_is_help=True,
)


def _load_settings(**overrides) -> Settings:
    """Build settings, letting non-empty CLI values win over the environment."""
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        err_console.print(f"[red bold]Invalid settings[/red bold]: {escape(str(e))}")
        raise typer.Exit(1) from e


def _report(error: ImageTestError) -> None:
    """Print an error and its details to stderr."""
    err_console.print(f"[red bold]Error[/red bold]: {escape(error.message)}")
    for key, value in error.details.items():
        err_console.print(f"  {key}: {escape(str(value))}")


@app.command()
def version():
    """Show the notty-imagetest version."""
    typer.echo(f"notty-imagetest version {__version__}")


@app.command("list")
def list_fixtures():
    """List the available image fixtures."""
    table = Table(title="Fixtures")
    table.add_column("Name", style="cyan")
    table.add_column("Protocol")
    table.add_column("Description")

    for metadata in registry.list_fixtures():
        table.add_row(metadata.name, metadata.protocol, metadata.description or "")

    console.print(table)


@app.command()
def emit(
    fixture: Annotated[
        str | None,
        typer.Argument(help="Fixture to print (see `list`); default from settings"),
    ] = None,
    image: Annotated[
        Path | None,
        typer.Option("--image", "-i", help="Image file to embed"),
    ] = None,
    mime: Annotated[
        str | None,
        typer.Option("--mime", "-m", help="MIME type literal to send"),
    ] = None,
    term: Annotated[
        str | None,
        typer.Option("--term", "-t", help="Terminal name, overriding $TERM"),
    ] = None,
    env_file: Annotated[
        Path | None,
        typer.Option(
            "--env-file",
            "-f",
            help="Load environment variables from a .env file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
    ] = None,
):
    """Print one fixture's escape sequence for an image file."""
    if env_file:
        dotenv.load_dotenv(env_file)

    settings = _load_settings(
        fixture=fixture,
        image_path=image,
        mime_type=mime,
        term=term,
        log_level=normalize_level(log_level),
    )
    configure_logging(settings.log_level)
    if env_file:
        logger.info(f"Loaded environment from {env_file}")

    try:
        written = Emitter(settings).emit()
    except ImageTestError as e:
        _report(e)
        raise typer.Exit(e.exit_code)

    logger.info(f"Emitted fixture {settings.fixture} ({written} bytes)")


@app.command()
def inspect(
    capture: Annotated[
        Path,
        typer.Argument(help="File holding captured emitter output"),
    ],
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
    ] = None,
):
    """Decode a captured natty or notty sequence and summarize it."""
    settings = _load_settings(log_level=normalize_level(log_level))
    configure_logging(settings.log_level)

    try:
        frame = inspect_capture(capture)
    except ImageTestError as e:
        _report(e)
        raise typer.Exit(e.exit_code)

    table = Table(title=str(capture))
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("protocol", frame.protocol)
    table.add_row("command", f"0x{frame.command:x}" if frame.command is not None else "")
    table.add_row("arguments", ";".join(frame.args))
    if frame.attachments:
        mime = frame.attachments[0].decode("utf-8", errors="replace")
        table.add_row("mime type", mime)
    for index, attachment in enumerate(frame.attachments[1:], start=1):
        table.add_row(f"attachment {index}", f"{len(attachment)} bytes")

    console.print(table)
    logger.info(
        f"Decoded {frame.protocol} frame with {len(frame.attachments)} attachments"
    )


def main():
    """Main entry point for CLI."""
    app()
