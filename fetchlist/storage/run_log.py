"""
Per-run log file with verbosity gating.

Each run writes to a fresh file named after the moment the run started, e.g.
``download_log_2024-05-01_12-30-00.txt``. Every entry is a single line prefixed
with the wall-clock time at which it was written.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

log = logging.getLogger(__name__)

LOG_FILENAME_FORMAT = "download_log_%Y-%m-%d_%H-%M-%S.txt"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class RunLog:
    """
    Appends timestamped lines to a run's log file.

    Usage:
        run_log = RunLog(Path("."), level=2)
        run_log.write("Links found: 3")
        run_log.write("Finished", force=True)
    """

    def __init__(
        self,
        log_dir: Path,
        level: int,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the run log.

        Args:
            log_dir: Directory in which the log file is created.
            level: Configured verbosity; lines are written when it is at least 1.
            clock: Source of the current time, used for the file name and lines.
        """
        self.level = level
        self.clock = clock
        self.path = log_dir / clock().strftime(LOG_FILENAME_FORMAT)

    def timestamp(self) -> str:
        """Returns the current time formatted for log lines."""
        return self.clock().strftime(TIMESTAMP_FORMAT)

    def write(self, message: str, force: bool = False) -> bool:
        """
        Appends a line to the log file if the verbosity allows it or it is forced.

        Returns:
            True if the line was written.
        """
        if not (self.level >= 1 or force):
            return False

        line = f"[{self.timestamp()}] {message}\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            log.warning(f"[yellow]Could not write to log file {self.path}:[/] {e}")
            return False

        log.debug(message)
        return True
