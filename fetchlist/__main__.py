"""
Entry point for ``python -m fetchlist`` and the ``fetchlist`` console script.

Commands report their own expected failures (bad configuration, fatal run
errors) and exit with status 1 through ``typer.Exit``. Anything that still
escapes the application is reported here.
"""

import asyncio
import logging
import os
import sys

from rich.console import Console

from fetchlist.cli.app import app
from fetchlist.cli.formatters import format_error_with_suggestions
from fetchlist.exceptions import FetchlistError

log = logging.getLogger("fetchlist")


def _use_utf8_console() -> None:
    # The panels use symbols a legacy Windows code page cannot encode.
    if os.name != "nt":
        return
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass


def main() -> None:
    """Runs the CLI and turns escaping errors into an exit status."""
    _use_utf8_console()
    console = Console()

    try:
        app()
    except (KeyboardInterrupt, asyncio.CancelledError):
        console.print(
            "\n[yellow]Download cancelled. Files saved so far are kept.[/yellow]"
        )
        sys.exit(0)
    except FetchlistError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
