"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from spotm4a.api.http import AiohttpTransport
from spotm4a.core.download_manager import DownloadManager
from spotm4a.exceptions import SpotM4aError
from spotm4a.models.config import RunConfig

from .formatters import format_error_with_suggestions, print_summary_panel

console = Console()
err_console = Console(stderr=True)

log = logging.getLogger("spotm4a")

app = typer.Typer(
    name="spotm4a",
    help="Download every track of a Spotify playlist as an .m4a file.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def setup_logging() -> None:
    """Routes the package's log records through a Rich console handler."""
    if any(isinstance(h, RichHandler) for h in log.handlers):
        return
    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_path=False,
        show_level=False,
        markup=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    log.addHandler(handler)
    log.setLevel(logging.INFO)


async def run_session(config: RunConfig) -> DownloadManager:
    """Runs one download session over a fresh HTTP transport."""
    async with AiohttpTransport() as transport:
        manager = DownloadManager(config, transport)
        await manager.run()
    return manager


@app.command()
def download(
    client_id: str = typer.Option(
        ..., "--client-id", help="Spotify application client id."
    ),
    client_secret: str = typer.Option(
        ..., "--client-secret", help="Spotify application client secret."
    ),
    playlist_id: str = typer.Option(
        ..., "-p", "--playlist-id", help="Id of the playlist to download."
    ),
):
    """Download a Spotify playlist into the current directory."""
    setup_logging()

    try:
        config = RunConfig.load(
            client_id=client_id,
            client_secret=client_secret,
            playlist_id=playlist_id,
            output_dir=Path.cwd(),
        )
        manager = asyncio.run(run_session(config))
    except SpotM4aError as e:
        err_console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e
    except KeyboardInterrupt:
        err_console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        raise typer.Exit(code=130) from None

    print_summary_panel(manager.stats, manager.elapsed, console)
