"""
Rich progress display for a running download.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from fetchlist.models.outcome import LinkOutcome, LinkResult

OUTCOME_STYLES = {
    LinkOutcome.DOWNLOADED: "green",
    LinkOutcome.SKIPPED: "yellow",
    LinkOutcome.FETCH_ERROR: "red",
    LinkOutcome.WRITE_ERROR: "red",
}


class ProgressManager:
    """Shows one overall bar that advances as links are processed."""

    def __init__(self, console: Console):
        self.console = console
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            "•",
            TimeElapsedColumn(),
            console=console,
            transient=True,
        )
        self._task_id: TaskID | None = None

    def start(self, total: int) -> None:
        self._task_id = self.progress.add_task("Downloading", total=total)

    def advance(self, result: LinkResult) -> None:
        if self._task_id is None:
            return
        style = OUTCOME_STYLES.get(result.outcome)
        if style:
            self.progress.update(
                self._task_id, description=f"[{style}]{result.outcome.value}[/{style}]"
            )
        self.progress.advance(self._task_id)

    def __enter__(self) -> "ProgressManager":
        self.progress.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.progress.stop()
        return False
