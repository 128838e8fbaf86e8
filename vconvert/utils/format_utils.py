"""
This module contains helper functions for formatting data into human-readable strings.
They are used in log messages to present elapsed times and file sizes consistently.
"""

from datetime import timedelta


def format_timedelta(td_object: timedelta) -> str:
    """
    Formats a timedelta object into a "HH:MM:SS" string.

    The duration is rounded to the nearest whole second, so 1.6 seconds becomes
    "00:00:02". Returns "00:00:00" if the input is not a timedelta.
    """
    if not isinstance(td_object, timedelta):
        return "00:00:00"

    # Halves round up, unlike the built-in round().
    total_seconds = int(max(0.0, td_object.total_seconds()) + 0.5)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def formatted_size(size_bytes: float) -> str:
    """
    Converts a size in bytes to a human-readable string (e.g., B, KB, MB, GB, TB).

    Args:
        size_bytes: The size of the file in bytes.

    Returns:
        A formatted string with the appropriate unit.
        For example, 1536 becomes "1.50 KB", and 2097152 becomes "2 MB".
    """
    if size_bytes < 0:
        size_bytes = 0

    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    factor = 1024.0

    if size_bytes == 0:
        return "0 B"

    for unit in units:
        if size_bytes < factor:
            if unit == "B":
                return f"{int(size_bytes)} {unit}"
            # Clean up ".00" for whole numbers (e.g., "2.00 MB" -> "2 MB").
            return f"{size_bytes:.2f} {unit}".replace(".00", "")
        size_bytes /= factor

    return f"{size_bytes:.2f} {units[-1]}".replace(".00", "")
