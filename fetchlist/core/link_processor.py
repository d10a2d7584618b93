"""
Handles the processing of a single link, from existence check to saved file.
"""

import logging

import aiofiles

from fetchlist.models.config import DownloaderConfig
from fetchlist.models.outcome import LinkOutcome, LinkResult
from fetchlist.storage.run_log import RunLog
from fetchlist.utils.formatting import format_size
from fetchlist.utils.path import link_target_path

log = logging.getLogger(__name__)

# Reported when no response (and therefore no status line) was received.
DEFAULT_STATUS_CODE = 200


class LinkProcessor:
    """
    Skips, downloads or fails a single link and writes the matching log line.

    The fetcher is any object exposing ``async fetch(url)`` that returns a
    ``FetchResult`` or ``None``.
    """

    def __init__(self, config: DownloaderConfig, fetcher, run_log: RunLog):
        self.config = config
        self.fetcher = fetcher
        self.run_log = run_log

    async def process_link(self, raw_link: str) -> LinkResult:
        """Processes one raw line from the links file."""
        link = raw_link.strip()
        if not link:
            return LinkResult(link=link, outcome=LinkOutcome.BLANK)

        level = self.config.log_level
        filepath = link_target_path(self.config.save_path, link)

        if filepath.exists():
            self.run_log.write(
                f"Skipped: {link} (file already exists)", force=level >= 2
            )
            return LinkResult(link=link, outcome=LinkOutcome.SKIPPED, path=filepath)

        result = await self.fetcher.fetch(link)
        status_code = result.status if result is not None else DEFAULT_STATUS_CODE

        if result is None or status_code != 200:
            self.run_log.write(
                f"Error: {link} (HTTP code: {status_code})", force=level >= 2
            )
            return LinkResult(
                link=link,
                outcome=LinkOutcome.FETCH_ERROR,
                path=filepath,
                status_code=status_code,
            )

        try:
            async with aiofiles.open(filepath, "wb") as f:
                await f.write(result.body)
        except OSError as e:
            log.debug(f"Saving '{link}' to '{filepath}' failed: {e}")
            self.run_log.write(f"Save error: {link}", force=level >= 2)
            return LinkResult(
                link=link,
                outcome=LinkOutcome.WRITE_ERROR,
                path=filepath,
                status_code=status_code,
            )

        bytes_written = len(result.body)
        if level >= 2:
            status = f"Downloaded: {link}"
            if level >= 3:
                status += (
                    f" | Size: {format_size(bytes_written)}"
                    f" | HTTP code: {status_code}"
                )
            self.run_log.write(status, force=True)

        return LinkResult(
            link=link,
            outcome=LinkOutcome.DOWNLOADED,
            path=filepath,
            status_code=status_code,
            size=bytes_written,
        )
