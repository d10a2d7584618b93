"""
Utilities for handling output directories and link-derived file names.
"""

from pathlib import Path

from pathvalidate import sanitize_filename


def create_dir(directory_path: Path) -> bool:
    """
    Creates a directory (and any missing parents) if it does not already exist.

    Returns:
        True if the directory was created, False if it was already there.

    Raises:
        OSError: If the directory cannot be created.
    """
    if directory_path.exists():
        return False
    directory_path.mkdir(parents=True, exist_ok=True)
    return True


def link_filename(link: str) -> str:
    """
    Returns the final path segment of a link, made safe for the local filesystem.

    Trailing slashes are ignored, so 'https://host/dir/' yields 'dir'.
    """
    basename = link.rstrip("/").rsplit("/", 1)[-1]
    return sanitize_filename(basename, platform="universal")


def link_target_path(save_directory: Path, link: str) -> Path:
    """Computes where a link's content is stored inside the output directory."""
    return save_directory / link_filename(link)
