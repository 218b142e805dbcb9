"""Readable formatting of integers with thousands separators."""


def format_integer(value: int) -> str:
    """Format value with its digits grouped in threes and separated by commas."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return f"{value:,}"