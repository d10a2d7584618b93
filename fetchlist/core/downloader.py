"""
The main orchestrator for a download run: prepares the output directory, reads
the links file and hands every link to the LinkProcessor, one at a time.
"""

import logging
import time
from collections.abc import Callable
from datetime import datetime
from typing import Optional, Protocol

from fetchlist.exceptions import DirectoryCreateError, FatalRunError
from fetchlist.models.config import DownloaderConfig
from fetchlist.models.outcome import LinkResult, RunReport
from fetchlist.models.stats import RunStats
from fetchlist.net.fetcher import HttpFetcher
from fetchlist.storage.link_list import read_links
from fetchlist.storage.run_log import RunLog
from fetchlist.utils.path import create_dir

from .link_processor import LinkProcessor

log = logging.getLogger(__name__)


class RunProgress(Protocol):
    """Receives progress notifications while a run is in flight."""

    def start(self, total: int) -> None: ...

    def advance(self, result: LinkResult) -> None: ...


class Downloader:
    """Orchestrates a complete download run."""

    def __init__(
        self,
        config: DownloaderConfig,
        fetcher=None,
        clock: Callable[[], datetime] = datetime.now,
        progress: Optional[RunProgress] = None,
    ):
        self.config = config
        self.clock = clock
        self.progress = progress
        self.stats = RunStats()
        self._fetcher = fetcher

    def ensure_directory(self, run_log: RunLog) -> None:
        """
        Creates the output directory if it is missing.

        Raises:
            DirectoryCreateError: If the directory cannot be created.
        """
        directory = self.config.save_directory
        try:
            created = create_dir(self.config.save_path)
        except OSError as e:
            raise DirectoryCreateError(
                f"Could not create directory: {directory}"
            ) from e
        if created:
            run_log.write(f"Created directory: {directory}")

    async def run(self) -> RunReport:
        """
        Executes one full run and returns its report.

        Fatal conditions (output directory or links file problems) end the run
        early and are reported through ``RunReport.fatal_error``; failures of
        individual links are only counted.
        """
        self.stats = RunStats()
        run_log = RunLog(self.config.log_dir, self.config.log_level, self.clock)
        report = RunReport(stats=self.stats, log_file=run_log.path)
        start_time = time.monotonic()

        run_log.write(f"Started: {run_log.timestamp()}", force=True)

        try:
            self.ensure_directory(run_log)

            links = read_links(self.config.links_file)
            run_log.write(f"Links found: {len(links)}")
            if self.progress:
                self.progress.start(len(links))

            report.results = await self._process_links(links, run_log)

            run_log.write(f"Downloaded: {self.stats.downloaded}", force=True)
            run_log.write(f"Skipped: {self.stats.skipped}", force=True)
            run_log.write(f"Errors: {self.stats.errored}", force=True)
        except FatalRunError as e:
            log.error(f"[red]✗ {e}[/red]")
            log.debug("Fatal run error:", exc_info=True)
            run_log.write(f"Error: {e}", force=True)
            report.fatal_error = e

        run_log.write(f"Finished: {run_log.timestamp()}", force=True)
        report.duration_s = time.monotonic() - start_time
        return report

    async def _process_links(
        self, links: list[str], run_log: RunLog
    ) -> list[LinkResult]:
        """Processes links sequentially, in file order."""
        fetcher = self._fetcher or HttpFetcher()
        processor = LinkProcessor(self.config, fetcher, run_log)
        results = []
        try:
            for link in links:
                result = await processor.process_link(link)
                self.stats.record(result)
                results.append(result)
                if self.progress:
                    self.progress.advance(result)
        finally:
            if self._fetcher is None:
                await fetcher.close()
        return results
