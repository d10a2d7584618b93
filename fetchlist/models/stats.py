"""
Dataclass for tracking download run statistics.
"""

from dataclasses import dataclass

from .outcome import LinkOutcome, LinkResult


@dataclass
class RunStats:
    """Tracks the counters of a single download run."""

    downloaded: int = 0
    skipped: int = 0
    errored: int = 0
    total_size_downloaded: int = 0

    def record(self, result: LinkResult) -> None:
        """Folds one per-link outcome into the counters."""
        if result.outcome is LinkOutcome.DOWNLOADED:
            self.downloaded += 1
            self.total_size_downloaded += result.size
        elif result.outcome is LinkOutcome.SKIPPED:
            self.skipped += 1
        elif result.outcome in (LinkOutcome.FETCH_ERROR, LinkOutcome.WRITE_ERROR):
            self.errored += 1
