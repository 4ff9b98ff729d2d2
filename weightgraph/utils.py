"""Miscellaneous utilities."""

from typing import Any, Iterable, Optional


def bracketed(items: Iterable[Any]) -> str:
    """Format items as a bracketed, comma-separated list: [A, B, C]."""
    return "[" + ", ".join(str(item) for item in items) + "]"


def or_na(value: Optional[Any]) -> str:
    """Format value, or "n/a" if it is None."""
    return "n/a" if value is None else str(value)


def parse_weight(text: str) -> Optional[float]:
    """Parse an edge weight given on the command line.

    Returns None if text is not a number. Accepts "inf" and "nan" like float.
    """
    try:
        return float(text)
    except ValueError:
        return None
