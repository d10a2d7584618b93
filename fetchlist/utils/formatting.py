"""
Helper functions for formatting data into human-readable strings.
"""

KB = 1024
MB = 1024**2
GB = 1024**3


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable size string (e.g., '5.00 MB')."""
    if bytes_size >= GB:
        return f"{bytes_size / GB:,.2f} GB"
    if bytes_size >= MB:
        return f"{bytes_size / MB:,.2f} MB"
    if bytes_size >= KB:
        return f"{bytes_size / KB:,.2f} KB"
    return f"{bytes_size} bytes"


def format_duration(seconds: float) -> str:
    """Formats a run's elapsed time, e.g. '0.4s', '1m 5s' or '2h 34m 12s'."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    return f"{minutes}m {secs}s"
