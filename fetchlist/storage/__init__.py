"""
Storage Layer.

This package handles all data persistence: the configuration file, the links
file that drives a run, and the per-run log file.
"""

from .config_manager import ConfigManager
from .link_list import read_links
from .run_log import RunLog

__all__ = ["ConfigManager", "RunLog", "read_links"]
