"""
Data Models Layer.

This package contains the Pydantic and dataclass models that define the core
data structures used throughout the application, such as configuration,
run statistics and per-link outcomes.
"""

from .config import DownloaderConfig
from .outcome import LinkOutcome, LinkResult, RunReport
from .stats import RunStats

__all__ = ["DownloaderConfig", "LinkOutcome", "LinkResult", "RunReport", "RunStats"]
