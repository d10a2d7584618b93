import pytest

from fetchlist.utils.formatting import format_duration, format_size


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 bytes"),
        (500, "500 bytes"),
        (1023, "1023 bytes"),
        (1024, "1.00 KB"),
        (2048, "2.00 KB"),
        (1536, "1.50 KB"),
        (5_242_880, "5.00 MB"),
        (3_221_225_472, "3.00 GB"),
    ],
)
def test_format_size_thresholds(size, expected):
    assert format_size(size) == expected


def test_format_size_groups_thousands():
    assert format_size(1024 * 1024**3) == "1,024.00 GB"


def test_format_size_rounds_to_two_decimals():
    assert format_size(1024 * 1024 + 1) == "1.00 MB"
    assert format_size(int(2.555 * 1024)) == "2.55 KB"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0.0s"),
        (0.42, "0.4s"),
        (59.9, "59.9s"),
        (65, "1m 5s"),
        (3600, "1h 0m 0s"),
        (3600 * 2 + 34 * 60 + 12.7, "2h 34m 12s"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected
