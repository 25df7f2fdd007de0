"""
Functions for formatting and displaying data in the console using Rich.
"""

from collections.abc import Sequence
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from djset_cli.core.recommender import Playable
from djset_cli.models.config import AppConfig
from djset_cli.utils.formatting import format_tempo

MENU_SECTIONS = (
    (
        "Set Library",
        (
            "Add a track to library",
            "View library summary",
            "Recommend next tracks (BPM/Energy rules)",
            "Save library report to file",
        ),
    ),
    (
        "Track Collection",
        (
            "Add file-backed track",
            "Add stream-backed track",
            "View collection",
            "Remove collection track by index",
            "Save collection report to file",
        ),
    ),
)
QUIT_CHOICE = 10


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `djset-cli init --force` to write a fresh default configuration.",
            "• Run `djset-cli --show-config` to see what is currently loaded.",
        ],
        "LibraryFullError": [
            "• Raise `max_tracks` in the configuration file.",
            "• Use the track collection, which grows as needed.",
        ],
        "InvalidTrackError": [
            "• Tempo must be a whole number and energy one of Low, Medium, High.",
            "• A track can only be held by one collection at a time.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_plain(console: Console, text: str) -> None:
    """Prints pre-formatted fixed-width text without markup or highlighting."""
    console.print(Text(text), end="", soft_wrap=True, highlight=False)


def print_banner(console: Console | None = None):
    console = console or Console()
    console.print(
        Panel(
            Text(
                "DJ SET ARCHITECT\nSet library + track collection planner",
                justify="center",
            ),
            border_style="cyan",
            box=box.DOUBLE,
            expand=False,
        )
    )


def print_menu(console: Console | None = None):
    """Displays the numbered session menu."""
    console = console or Console()
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()

    number = 1
    for section, entries in MENU_SECTIONS:
        table.add_row("", f"[bold]{section}[/bold]")
        for entry in entries:
            table.add_row(f"{number})", entry)
            number += 1
        table.add_row()
    table.add_row(f"{QUIT_CHOICE})", "Quit")

    console.print(Panel(table, title="[bold]Menu[/bold]", expand=False))


def print_prep_tips(tips: Sequence[str], console: Console | None = None):
    console = console or Console()
    console.print("\n[bold]Quick Set-Prep Tips:[/bold]")
    for i, tip in enumerate(tips, 1):
        console.print(f"  {i}) {tip}")


def print_library_stats(
    track_count: int,
    average: float,
    genre: str,
    genre_matches: int,
    console: Console | None = None,
):
    """Displays the derived library statistics."""
    console = console or Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()

    table.add_row("Tracks:", f"[green]{track_count}[/green]")
    table.add_row("Average BPM:", f"[magenta]{format_tempo(average)}[/magenta]")
    table.add_row(f'Genre "{genre}":', f"[green]{genre_matches}[/green]")

    console.print(Panel(table, title="[bold]Library Stats[/bold]", expand=False))


def print_recommendations(
    tracks: Sequence[Playable], bpm_range: int, console: Console | None = None
):
    """Displays the tracks that follow the current one well."""
    console = console or Console()
    console.print(
        f"\nSuggested tracks (within +/-{bpm_range} BPM and energy stays steady "
        "or rises):"
    )
    if not tracks:
        console.print("[yellow]No close matches found. Try adding more tracks.[/yellow]")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("Title", style="cyan")
    table.add_column("Artist / Source")
    table.add_column("BPM", justify="right", style="green")
    table.add_column("Energy")
    for track in tracks:
        source = (
            getattr(track, "artist", None)
            or getattr(track, "platform", None)
            or getattr(track, "file_path", "")
        )
        table.add_row(
            escape(track.title), escape(source), str(track.tempo), track.energy.label
        )
    console.print(table)


def print_config(config_path: Path, config: AppConfig, console: Console | None = None):
    """Displays the current configuration."""
    console = console or Console()
    content = ""
    for key in sorted(AppConfig.get_ini_keys()):
        content += f"{key} = {getattr(config, key)}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )


def print_validation_table(config: AppConfig, console: Console | None = None):
    """Displays a summary of the current settings."""
    console = console or Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("BPM Range:", f"{config.bpm_min}-{config.bpm_max}")
    table.add_row("Library Size:", f"{config.max_tracks} tracks")
    table.add_row("Collection Start:", f"{config.initial_capacity} slots")
    table.add_row("Match Window:", f"+/-{config.bpm_range} BPM")
    table.add_row("Library Report:", f"[dim]{config.library_report}[/dim]")
    table.add_row("Collection Report:", f"[dim]{config.collection_report}[/dim]")

    console.print(
        Panel(
            table,
            title="[bold green]✓ Validated Settings[/bold green]",
            border_style="green",
        )
    )
