"""
Functions for formatting and displaying data in the console using Rich.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from spotm4a.models.stats import RunStats
from spotm4a.utils.formatting import format_duration, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "AuthenticationError": [
            "• Check --client-id and --client-secret against your Spotify app.",
            "• The app may have been deleted or its secret rotated.",
        ],
        "HttpStatusError": [
            "• A remote service rejected the request.",
            "• Long playlists can outlive the access token; run again to resume.",
            "• Check that the playlist id is correct and the playlist is public.",
        ],
        "TransportError": [
            "• A network connection issue occurred.",
            "• One of the remote services might be temporarily unavailable.",
        ],
        "ResponseDecodeError": [
            "• A remote service answered with an unexpected payload.",
            "• The search mirror or conversion proxy may have changed its API.",
        ],
        "NoSearchResultsError": [
            "• The search mirror found no video for this track.",
        ],
        "ConversionError": [
            "• The conversion proxy refused the video.",
            "• The video may be region-locked, age-restricted or too long.",
        ],
        "StorageError": [
            "• Check free disk space and write permissions in this directory.",
        ],
        "MissingFieldError": [
            "• The playlist contains an entry without a name or artist.",
        ],
        "PaginationStalledError": [
            "• The remaining playlist entries are unavailable or local-only.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Already downloaded files are kept; run again to resume."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_summary_panel(stats: RunStats, duration_s: float, console: Console):
    """Displays the final summary of the download session."""
    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=16)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row(
        "✓ Downloaded:", f"[bold green]{stats.tracks_downloaded}[/bold green]"
    )
    if stats.tracks_skipped_exists > 0:
        stats_table.add_row(
            "○ Skipped:", f"[yellow]{stats.tracks_skipped_exists} (exists)[/yellow]"
        )

    stats_table.add_row("", "")  # Spacer
    stats_table.add_row(
        "Total Size:", f"[cyan]{format_size(stats.total_size_downloaded)}[/cyan]"
    )
    avg_speed = stats.total_size_downloaded / duration_s if duration_s > 0 else 0
    stats_table.add_row(
        "Avg. Speed:", f"[magenta]{format_size(int(avg_speed))}/s[/magenta]"
    )
    stats_table.add_row("Time Elapsed:", f"[blue]{format_duration(duration_s)}[/blue]")

    console.print()
    console.print(
        Panel(
            stats_table,
            title="🎵 [bold]Playlist Complete![/bold]",
            border_style="green",
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )
