"""
Result types produced while processing links and whole runs.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fetchlist.exceptions import FatalRunError

    from .stats import RunStats


class LinkOutcome(Enum):
    """What happened to a single link."""

    BLANK = "blank"
    SKIPPED = "skipped"
    DOWNLOADED = "downloaded"
    FETCH_ERROR = "fetch_error"
    WRITE_ERROR = "write_error"


@dataclass(frozen=True)
class LinkResult:
    """The outcome of processing one link."""

    link: str
    outcome: LinkOutcome
    path: Optional[Path] = None
    status_code: Optional[int] = None
    size: int = 0

    @property
    def failed(self) -> bool:
        return self.outcome in (LinkOutcome.FETCH_ERROR, LinkOutcome.WRITE_ERROR)


@dataclass
class RunReport:
    """Everything a caller needs to know once a run has finished."""

    stats: "RunStats"
    log_file: Path
    results: list[LinkResult] = field(default_factory=list)
    fatal_error: Optional["FatalRunError"] = None
    duration_s: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.fatal_error is None
