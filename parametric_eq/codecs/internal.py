"""Compact ``PEQ:`` format used to persist a band list."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from parametric_eq.model import Band, BandList, FilterType
from .numbers import FREQ_DIGITS, GAIN_DIGITS, Q_DIGITS, format_compact, parse_float, parse_int

logger = logging.getLogger(__name__)

PREFIX = "PEQ:"

DEFAULT_PEQ = "PEQ: "


def serialize(bands: Iterable[Band]) -> str:
    """Format bands as ``"PEQ: freq gain q type; ..."``."""
    parts = ["PEQ: "]
    for band in bands:
        parts.append(
            f"{format_compact(band.frequency, FREQ_DIGITS)} "
            f"{format_compact(band.gain, GAIN_DIGITS)} "
            f"{format_compact(band.q, Q_DIGITS)} "
            f"{band.filter_type.code}; "
        )
    return "".join(parts)


def parse_bands(text: str) -> List[Band]:
    """Parse ``PEQ:`` text, silently dropping malformed records."""
    bands = []
    segments = text.replace(PREFIX, "").replace("\n", " ").split(";")
    for segment in segments:
        segment = segment.strip()
        if not segment:
            continue
        tokens = segment.split()
        band = _parse_record(tokens)
        if band is None:
            logger.debug("deserialize: dropping malformed record %r", segment)
            continue
        bands.append(band)
    return bands


def _parse_record(tokens: List[str]) -> Optional[Band]:
    if len(tokens) < 4:
        return None
    freq = parse_float(tokens[0])
    gain = parse_float(tokens[1])
    q = parse_float(tokens[2])
    code = parse_int(tokens[3])
    if freq is None or gain is None or q is None or code is None:
        return None
    return Band(freq, gain, q, FilterType.from_code(code))


def deserialize(text: str) -> BandList:
    return BandList(parse_bands(text))


def deserialize_into(band_list: BandList, text: str) -> None:
    """Replace the contents of ``band_list`` with the bands in ``text``."""
    band_list.set_bands(parse_bands(text))
