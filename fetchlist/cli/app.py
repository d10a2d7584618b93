"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from fetchlist import __version__
from fetchlist.core.downloader import Downloader
from fetchlist.exceptions import FetchlistError
from fetchlist.storage.config_manager import ConfigManager

from .formatters import (
    format_error_with_suggestions,
    print_summary_panel,
    print_validation_table,
)
from .progress_manager import ProgressManager

console = Console()

logging.basicConfig(
    level="INFO",
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
log = logging.getLogger("fetchlist")

app = typer.Typer(
    name="fetchlist",
    help=(
        "Download every URL listed in a text file into a local directory. Use"
        " 'fetchlist <command> --help' for more info."
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
    return base_dir.expanduser() / "fetchlist"


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
        help="Increase terminal logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """Batch link downloader"""
    if version:
        console.print(f"[bold]fetchlist[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("fetchlist").setLevel(log_level)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing config file without asking."
    ),
    save_directory: str | None = typer.Option(
        None, "-o", "--output", help="Default directory for downloaded files."
    ),
    log_level: int | None = typer.Option(
        None, "-l", "--log-level", help="Default log file verbosity (0-3)."
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
        for key, value in {
            "save_directory": save_directory,
            "log_level": log_level,
        }.items()
        if value is not None
    }
    try:
        ConfigManager(CONFIG_FILE).save_new_config(settings)
    except FetchlistError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")


@app.command(name="download")
def download_command(
    links_file: Path | None = typer.Argument(  # noqa: B008
        None, help="Text file with one URL per line (default from config)."
    ),
    save_directory: str | None = typer.Argument(
        None, help="Directory in which files are saved (default from config)."
    ),
    log_level: int | None = typer.Option(
        None,
        "-l",
        "--log-level",
        help=(
            "Log file verbosity. 1: milestones and failures, 2: adds downloaded "
            "links, 3: adds size and HTTP code."
        ),
    ),
    log_dir: Path | None = typer.Option(  # noqa: B008
        None, "--log-dir", help="Directory in which the run's log file is created."
    ),
    no_progress: bool = typer.Option(
        False, "--no-progress", help="Do not show the progress bar."
    ),
):
    """Download every link listed in a file."""
    cli_options = {
        key: value
        for key, value in {
            "links_file": links_file,
            "save_directory": save_directory,
            "log_level": log_level,
            "log_dir": log_dir,
        }.items()
        if value is not None
    }

    try:
        config = ConfigManager(CONFIG_FILE).load_config(cli_options)
    except FetchlistError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    console.print(
        f"[bold cyan]Starting download from '{config.links_file}' into"
        f" '{config.save_directory}'...[/bold cyan]"
    )

    async def _download_async():
        if no_progress:
            return await Downloader(config).run()
        with ProgressManager(console) as progress:
            return await Downloader(config, progress=progress).run()

    report = asyncio.run(_download_async())

    if report.fatal_error is not None:
        console.print(format_error_with_suggestions(report.fatal_error))
        console.print(f"[dim]Details were written to '{report.log_file}'.[/dim]")
        raise typer.Exit(code=1)

    print_summary_panel(report)
    console.print("Download finished. Check the log file for details.")


@app.command()
def validate():
    """Validate and show the effective configuration."""
    try:
        config = ConfigManager(CONFIG_FILE).load_config()
    except FetchlistError as e:
        console.print(f"[red]✗ Configuration is invalid: {e}[/red]")
        raise typer.Exit(code=1) from e
    print_validation_table(config, CONFIG_FILE)
