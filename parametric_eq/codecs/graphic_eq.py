"""GraphicEQ export of a sampled response curve."""
from __future__ import annotations

from typing import Iterable, Tuple

from .numbers import FREQ_DIGITS, GAIN_DIGITS, format_fixed


def to_graphic_eq_string(response: Iterable[Tuple[float, float]], preamp_offset: float = 0.0) -> str:
    """Format (frequency, dB) pairs as ``"GraphicEQ: f g; f g; "``.

    The curve is tabulated, so the result cannot be turned back into bands.
    """
    parts = ["GraphicEQ: "]
    for freq, gain in response:
        parts.append(f"{format_fixed(freq, FREQ_DIGITS)} {format_fixed(gain + preamp_offset, GAIN_DIGITS)}; ")
    return "".join(parts)
