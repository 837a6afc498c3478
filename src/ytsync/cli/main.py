"""
Main CLI entry point for ytsync.
"""

from __future__ import annotations

import asyncio
import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ytsync import __version__
from ytsync.auth.states import Authorized
from ytsync.cli.errors import display_error_panel
from ytsync.cli.logging_config import configure_logging
from ytsync.client import YouTube
from ytsync.config.playlists import load_playlist_ids
from ytsync.config.settings import Settings, load_settings
from ytsync.exceptions import (
    EXIT_CODE_INTERRUPTED,
    ConfigurationError,
    YtsyncError,
    get_exit_code,
)
from ytsync.models.video import Video
from ytsync.services.playlist_fetcher import PlaylistFetcher
from ytsync.services.transport import HttpxTransport

console = Console()

app = typer.Typer(
    name="ytsync",
    help="YouTube playlist synchronizer",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


class OutputFormat(str, Enum):
    """Output format options for the fetch command."""

    TABLE = "table"
    JSON = "json"


async def fetch_playlists(
    youtube: YouTube[Authorized], playlist_ids: List[str], settings: Settings
) -> dict[str, list[Video]]:
    """Fetch every playlist over one pooled HTTP transport."""
    async with HttpxTransport(timeout=settings.request_timeout) as transport:
        fetcher = PlaylistFetcher(youtube, transport)
        return await fetcher.fetch_many(playlist_ids, settings.page_size)


def render_table(playlist_id: str, videos: list[Video]) -> Table:
    """Build a Rich table listing the videos of one playlist."""
    table = Table(title=f"Playlist {playlist_id} ({len(videos)} videos)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Author", style="green")
    table.add_column("URL", style="blue", no_wrap=True)
    for position, video in enumerate(videos, start=1):
        table.add_row(
            str(position),
            video.title or "-",
            video.author or "-",
            video.url,
        )
    return table


@app.command()
def fetch(
    playlist_ids: Optional[List[str]] = typer.Argument(
        None,
        help="Playlist IDs to fetch (default: the ids in the playlist file)",
    ),
    yt_api: Optional[str] = typer.Option(
        None, "--yt-api", help="YouTube API key", show_default=False
    ),
    yt_oauth_token: Optional[str] = typer.Option(
        None, "--yt-oauth-token", help="YouTube OAuth 2.0 access token", show_default=False
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="TOML configuration file"
    ),
    playlist_file: Optional[Path] = typer.Option(
        None, "--playlist-file", "-p", help="File listing playlist IDs, one per line"
    ),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", min=1, max=50, help="Items requested per page"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Fetch every video of one or more playlists.

    Examples:
        ytsync fetch PLbALbm1g5VzAqShkgKwo0NIVkwV9bZE8t --yt-api AIza...
        ytsync fetch --playlist-file ~/.config/ytsync/playlists --format json

    Exit Codes:
        0: Success
        1: Configuration error - missing credential, invalid config
        2: System error - request failed or response could not be decoded
        3: Quota exceeded
        130: Interrupted
    """
    try:
        settings = load_settings(
            config_file,
            yt_api=yt_api,
            yt_oauth_token=yt_oauth_token,
            playlist_file=playlist_file,
            page_size=page_size,
            log_level="DEBUG" if verbose else None,
        )
        configure_logging(settings.log_level, settings.log_file)

        # Fail before any network activity when no credential is configured
        youtube = settings.authorize(YouTube())

        ids = list(playlist_ids) if playlist_ids else load_playlist_ids(settings.playlist_file)
        if not ids:
            raise ConfigurationError(
                f"No playlists to fetch: pass playlist IDs or list them in "
                f"{settings.playlist_file}",
                config_file=str(settings.config_file),
            )

        results = asyncio.run(fetch_playlists(youtube, ids, settings))
    except YtsyncError as e:
        display_error_panel(e)
        raise typer.Exit(code=get_exit_code(e))
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        raise typer.Exit(code=EXIT_CODE_INTERRUPTED)

    if output_format == OutputFormat.JSON:
        payload = {
            playlist_id: [video.model_dump() for video in videos]
            for playlist_id, videos in results.items()
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for playlist_id, videos in results.items():
        console.print(render_table(playlist_id, videos))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold blue]ytsync[/bold blue] v{__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    ytsync - YouTube playlist synchronizer.

    Lists every video of your YouTube playlists using an API key or an
    OAuth access token.
    """
    if version:
        console.print(f"ytsync v{__version__}")
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'ytsync --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
