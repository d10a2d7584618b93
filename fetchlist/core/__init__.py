"""
Core application engine for orchestrating the download process.

This package contains the primary logic. The `Downloader` acts as the run
coordinator, delegating the handling of each individual link to the
`LinkProcessor`.
"""

from .downloader import Downloader
from .link_processor import LinkProcessor

__all__ = ["Downloader", "LinkProcessor"]
