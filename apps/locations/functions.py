"""
Helper functions for location tracker
Size formatting and rounding used by the database endpoints
"""
import math

SIZE_UNITS = ['Bytes', 'KB', 'MB', 'GB', 'TB']


def round_half_up(value, digits=0):
    """
    Round halves away from zero for positive values (1.005 -> 1.01 style),
    unlike Python's round() which rounds halves to even.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _trim_number(value):
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_file_size(size_bytes):
    """
    Format a byte count with base-1024 units.

    Args:
        size_bytes: Size in bytes

    Returns:
        String like '0 Bytes', '1 KB', '1.5 KB' or '2.25 GB'
    """
    if not size_bytes or size_bytes <= 0:
        return '0 Bytes'

    # floor(log1024(size)), exact on powers of 1024
    index = 0
    while size_bytes >= 1024 ** (index + 1) and index < len(SIZE_UNITS) - 1:
        index += 1
    value = round_half_up(size_bytes / 1024 ** index, 2)
    return f"{_trim_number(value)} {SIZE_UNITS[index]}"


def bytes_to_mb(size_bytes):
    """Megabytes with two decimals, as a string."""
    return f"{size_bytes / (1024 * 1024):.2f}"
