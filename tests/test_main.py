"""
Exit status tests for the console script entry point.
"""

import pytest

from fetchlist import __main__ as entry
from fetchlist.exceptions import ConfigurationError, LinksFileNotFoundError


def raising(error):
    def _app():
        raise error

    return _app


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (LinksFileNotFoundError("Links file not found: images.txt"), 1),
        (ConfigurationError("Configuration validation failed"), 1),
        (RuntimeError("boom"), 1),
        (KeyboardInterrupt(), 0),
    ],
)
def test_escaping_errors_map_to_exit_status(monkeypatch, error, code):
    monkeypatch.setattr(entry, "app", raising(error))

    with pytest.raises(SystemExit) as excinfo:
        entry.main()

    assert excinfo.value.code == code


def test_error_panel_names_the_error(monkeypatch, capsys):
    monkeypatch.setattr(
        entry, "app", raising(LinksFileNotFoundError("Links file not found: x.txt"))
    )

    with pytest.raises(SystemExit):
        entry.main()

    out = capsys.readouterr().out
    assert "LinksFileNotFoundError" in out
    assert "Links file not found: x.txt" in out


def test_clean_exit_is_left_to_the_app(monkeypatch):
    monkeypatch.setattr(entry, "app", lambda: None)

    entry.main()
