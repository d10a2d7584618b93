"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# Documented verbosity levels; 0 keeps only forced log lines.
LOG_LEVELS = {
    0: "Forced lines only (start, end, summary, fatal errors)",
    1: "Run milestones, skipped and failed links",
    2: "Adds downloaded links",
    3: "Adds size and HTTP code of downloaded links",
}


class DownloaderConfig(BaseModel):
    """A validated configuration model for a download run."""

    links_file: Path
    save_directory: str
    log_level: int = 1
    log_dir: Path = Field(default_factory=lambda: Path("."))

    class Config:
        """Pydantic model configuration."""

        frozen = True
        str_strip_whitespace = True

    @field_validator("links_file")
    @classmethod
    def validate_links_file(cls, v: Path) -> Path:
        """Rejects an empty links file path."""
        if not str(v).strip() or str(v) == ".":
            raise ValueError("Links file path cannot be empty.")
        return v

    @field_validator("save_directory")
    @classmethod
    def validate_save_directory(cls, v: str) -> str:
        """Normalizes the output directory so it always ends with a separator."""
        if not v:
            raise ValueError("Save directory cannot be empty.")
        return v.rstrip("/" + os.sep) + os.sep

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: int) -> int:
        """Ensures the verbosity is one of the known levels."""
        if v not in LOG_LEVELS:
            raise ValueError("Log level must be one of 0, 1, 2 or 3.")
        return v

    @property
    def save_path(self) -> Path:
        return Path(self.save_directory)

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
