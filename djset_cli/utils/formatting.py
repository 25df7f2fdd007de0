"""
Helper functions for formatting data into fixed-width, human-readable strings.
"""

SEPARATOR_CHAR = "-"


def fit(text: str, width: int) -> str:
    """
    Cuts text so it fits a column of `width` characters, always leaving at least
    one trailing space as a column gap.
    """
    return text[: max(width - 1, 0)]


def left_column(text: str, width: int) -> str:
    """Left-aligns text in a fixed-width column, truncating if needed."""
    return f"{fit(text, width):<{width}}"


def separator(width: int) -> str:
    """Returns a separator line of `width` dashes, newline terminated."""
    return SEPARATOR_CHAR * width + "\n"


def format_tempo(tempo: float) -> str:
    """Formats a tempo value with one decimal place (e.g., '113.3')."""
    return f"{tempo:.1f}"
