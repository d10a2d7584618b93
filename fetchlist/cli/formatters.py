"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fetchlist.models.config import LOG_LEVELS, DownloaderConfig
from fetchlist.models.outcome import LinkOutcome, RunReport
from fetchlist.utils.formatting import format_duration, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "LinksFileNotFoundError": [
            "• Check the path of the links file.",
            "• Pass it explicitly: `fetchlist download <LINKS_FILE>`.",
        ],
        "LinksFileReadError": [
            "• Make sure the links file is a readable UTF-8 text file.",
            "• Check the file permissions.",
        ],
        "DirectoryCreateError": [
            "• Check that the parent of the output directory is writable.",
            "• Choose another output directory.",
        ],
        "ConfigurationError": [
            "• Run `fetchlist validate` to see the effective settings.",
            "• Run `fetchlist init --force` to recreate the config file.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
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


def print_validation_table(config: DownloaderConfig, config_path: Path):
    """Displays a summary of the current settings."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Links File:", str(config.links_file))
    table.add_row("Save Directory:", config.save_directory)
    table.add_row(
        "Log Level:", f"({config.log_level}) {LOG_LEVELS[config.log_level]}"
    )
    table.add_row("Log Directory:", str(config.log_dir))
    table.add_row("Config File:", f"[dim]{config_path}[/dim]")

    console.print(
        Panel(
            table,
            title="[bold green]✓ Validated Settings[/bold green]",
            border_style="green",
        )
    )


def print_summary_panel(report: RunReport):
    """Displays the final summary of a download run."""
    console = Console()
    stats = report.stats

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=16)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("✓ Downloaded:", f"[bold green]{stats.downloaded}[/bold green]")
    stats_table.add_row("○ Skipped:", f"[yellow]{stats.skipped}[/yellow]")
    if stats.errored > 0:
        stats_table.add_row("✗ Failed:", f"[bold red]{stats.errored}[/bold red]")

    stats_table.add_row("", "")  # Spacer
    stats_table.add_row(
        "Total Size:", f"[cyan]{format_size(stats.total_size_downloaded)}[/cyan]"
    )
    stats_table.add_row(
        "Time Elapsed:", f"[blue]{format_duration(report.duration_s)}[/blue]"
    )
    stats_table.add_row("Log File:", f"[dim]{report.log_file}[/dim]")

    console.print()
    console.print(
        Panel(
            stats_table,
            title="[bold]Download Complete![/bold]",
            border_style="green" if stats.errored == 0 else "yellow",
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )

    failed = [r for r in report.results if r.failed]
    if failed:
        failed_table = Table(title="Failed Links", box=box.ROUNDED)
        failed_table.add_column("Link", style="red")
        failed_table.add_column("Reason")
        for result in failed:
            reason = (
                f"HTTP code {result.status_code}"
                if result.outcome is LinkOutcome.FETCH_ERROR
                else "Could not save file"
            )
            failed_table.add_row(result.link, reason)
        console.print(failed_table)

    console.print()
