"""EqualizerAPO text import and export."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from parametric_eq.model import Band, BandList, FilterType
from .numbers import FREQ_DIGITS, GAIN_DIGITS, Q_DIGITS, format_compact, parse_float

logger = logging.getLogger(__name__)

PREAMP_MIN_DB = -30.0
PREAMP_MAX_DB = 0.0

FILTER_RE = re.compile(
    r"Filter\s+\d+:\s+ON\s+(\S+)\s+Fc\s+([\d.]+)\s+Hz\s+Gain\s+([-\d.]+)\s+dB\s+Q\s+([\d.]+)",
    re.IGNORECASE,
)
PREAMP_RE = re.compile(r"Preamp:\s*([-\d.]+)\s*dB", re.IGNORECASE)
# Lines end at \r\n, \r or \n only.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class ApoImportResult:
    """Bands read from EqualizerAPO text plus what the import had to drop.

    ``skipped_filters`` counts well-formed filter lines whose type is not
    supported. ``preamp_db`` is 0.0 when the text has no usable preamp line.
    """

    bands: BandList = field(default_factory=BandList)
    skipped_filters: int = 0
    preamp_db: float = 0.0


def clamp_preamp(value: float) -> float:
    return min(max(value, PREAMP_MIN_DB), PREAMP_MAX_DB)


def to_apo_string(bands: Iterable[Band], preamp_db: float = 0.0) -> str:
    lines = [f"Preamp: {format_compact(preamp_db, GAIN_DIGITS)} dB"]
    for i, band in enumerate(bands, start=1):
        lines.append(
            f"Filter {i}: ON {band.filter_type.apo_label} "
            f"Fc {format_compact(band.frequency, FREQ_DIGITS)} Hz "
            f"Gain {format_compact(band.gain, GAIN_DIGITS)} dB "
            f"Q {format_compact(band.q, Q_DIGITS)}"
        )
    return "".join(line + "\n" for line in lines)


def from_apo_string(text: str) -> ApoImportResult:
    """Parse EqualizerAPO text line by line.

    Blank lines and ``#`` comments are ignored, unrecognized lines are
    skipped, and the preamp is clamped to [-30, 0] dB. Never raises for
    malformed input.
    """
    result = ApoImportResult()
    for line in LINE_BREAK_RE.split(text):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        if trimmed.lower().startswith("preamp"):
            preamp = _parse_preamp(trimmed)
            if preamp is not None:
                result.preamp_db = preamp
            continue

        match = FILTER_RE.search(trimmed)
        if match is None:
            logger.debug("from_apo_string: skipping unrecognized line: %s", trimmed)
            continue

        type_label, freq_text, gain_text, q_text = match.groups()
        freq = parse_float(freq_text)
        gain = parse_float(gain_text)
        q = parse_float(q_text)
        if freq is None or gain is None or q is None:
            logger.debug("from_apo_string: bad number in line: %s", trimmed)
            continue

        filter_type = FilterType.from_apo_label(type_label)
        if filter_type is None:
            logger.debug("from_apo_string: unsupported filter type '%s', skipping", type_label)
            result.skipped_filters += 1
            continue

        result.bands.append(Band(freq, gain, q, filter_type))
    return result


def _parse_preamp(line: str) -> Optional[float]:
    match = PREAMP_RE.search(line)
    if match is None:
        logger.debug("from_apo_string: could not parse preamp line: %s", line)
        return None
    value = parse_float(match.group(1))
    if value is None:
        value = 0.0
    return clamp_preamp(value)


def from_apo_string_into(band_list: BandList, text: str) -> ApoImportResult:
    """Replace ``band_list`` contents with the imported bands."""
    result = from_apo_string(text)
    band_list.set_bands(result.bands)
    return result
