"""Locale-independent number formatting and lenient parsing for the codecs."""
from __future__ import annotations

from typing import Optional

FREQ_DIGITS = 2
GAIN_DIGITS = 6
Q_DIGITS = 4


def format_compact(value: float, digits: int) -> str:
    """Round half-even to at most ``digits`` decimals and drop trailing zeros."""
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_fixed(value: float, digits: int) -> str:
    return f"{value:.{digits}f}"


def parse_float(token: str) -> Optional[float]:
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def parse_int(token: str) -> Optional[int]:
    if "_" in token:
        return None
    try:
        return int(token)
    except ValueError:
        return None
