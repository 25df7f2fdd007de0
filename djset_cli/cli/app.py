"""
Defines the command-line interface for the application using Typer.
"""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from djset_cli import __version__
from djset_cli.exceptions import DjSetError
from djset_cli.storage.config_manager import ConfigManager

from .formatters import print_config, print_validation_table
from .session import PlannerSession

console = Console()

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("djset_cli")

app = typer.Typer(
    name="djset-cli",
    help=(
        "Plan DJ sets: keep a track library, get next-track suggestions and save"
        " text reports. Use 'djset-cli <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "djset-cli"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """DJ Set Architect CLI"""
    if version:
        console.print(f"[bold]djset-cli[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "WARNING"
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("djset_cli").setLevel(log_level)

    if show_config:
        config_manager = ConfigManager(CONFIG_FILE)
        try:
            config = config_manager.load_config()
        except DjSetError as e:
            console.print(f"[red]✗ Configuration is invalid: {e}[/red]")
            raise typer.Exit(code=1) from e
        print_config(CONFIG_FILE, config, console)
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration file."
    ),
    max_tracks: int | None = typer.Option(
        None, "--max-tracks", help="Number of slots in the set library."
    ),
    bpm_range: int | None = typer.Option(
        None, "--bpm-range", help="Tempo window used for next-track suggestions."
    ),
):
    """Write a configuration file with default settings."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    settings = {
        key: value
        for key, value in {"max_tracks": max_tracks, "bpm_range": bpm_range}.items()
        if value is not None
    }
    try:
        config = ConfigManager(CONFIG_FILE).save_new_config(settings)
    except DjSetError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")
    print_validation_table(config, console)


@app.command()
def validate():
    """Validate the current configuration."""
    try:
        config = ConfigManager(CONFIG_FILE).load_config()
        print_validation_table(config, console)
    except DjSetError as e:
        console.print(f"[red]✗ Configuration is invalid: {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def session(
    report_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--report-dir",
        "-o",
        help="Directory where reports are written (default: current directory).",
        file_okay=False,
    ),
    max_tracks: int | None = typer.Option(
        None, "--max-tracks", help="Override the set library size for this session."
    ),
):
    """Start an interactive set-planning session."""
    cli_options = {"max_tracks": max_tracks} if max_tracks is not None else {}
    config = ConfigManager(CONFIG_FILE).load_config(cli_options)

    if report_dir is not None:
        report_dir.mkdir(parents=True, exist_ok=True)

    PlannerSession(config, console, report_dir=report_dir).run()
