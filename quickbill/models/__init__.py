import math
import re

# ASCII digits only, no sign, no underscores, optional exponent.
_DECIMAL_RE = re.compile(r"([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def format_money(value: float) -> str:
    """Format a money value with grouping: 2050 -> '2,050.00'"""
    return f"{value:,.2f}"


def parse_amount(text: str) -> float | None:
    """Parse a money input field: '1000.50' -> 1000.5.

    Empty input parses as 0 (the field has simply not been filled yet).
    Returns None for anything that is not a finite, non-negative number.
    """
    text = text.strip()
    if not text:
        return 0.0
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value
