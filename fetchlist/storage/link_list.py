"""
Reads the list of links to download from a plain text file.
"""

import logging
from pathlib import Path

from fetchlist.exceptions import LinksFileNotFoundError, LinksFileReadError

log = logging.getLogger(__name__)


def read_links(links_file: Path) -> list[str]:
    """
    Reads a links file and returns its non-blank lines in file order.

    The whole content is trimmed before splitting on newlines. Lines that are
    empty or contain only whitespace are dropped; the remaining lines are
    returned untouched.

    Raises:
        LinksFileNotFoundError: If the file does not exist.
        LinksFileReadError: If the file exists but cannot be read or decoded.
    """
    if not links_file.exists():
        raise LinksFileNotFoundError(f"Links file not found: {links_file}")

    try:
        content = links_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LinksFileReadError(f"Could not read links file: {links_file}") from e

    links = [line for line in content.strip().split("\n") if line.strip()]
    log.debug(f"Read {len(links)} links from {links_file}")
    return links
