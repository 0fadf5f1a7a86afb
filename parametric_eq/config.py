"""Response sampling settings with environment overrides."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from parametric_eq.dsp.filters import DEFAULT_SAMPLE_RATE
from parametric_eq.dsp.response import DEFAULT_NUM_POINTS, MAX_FREQ, MIN_FREQ

logger = logging.getLogger(__name__)

ENV_PREFIX = "PEQ_"


@dataclass
class ResponseSettings:
    sample_rate: float = DEFAULT_SAMPLE_RATE
    num_points: int = DEFAULT_NUM_POINTS
    min_freq: float = MIN_FREQ
    max_freq: float = MAX_FREQ

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ResponseSettings":
        """Build settings from ``PEQ_SAMPLE_RATE``, ``PEQ_NUM_POINTS`` etc.

        Values that do not parse are ignored with a warning.
        """
        environ = os.environ if environ is None else environ
        settings = cls()
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            raw = environ.get(key)
            if raw is None:
                continue
            convert = int if f.name == "num_points" else float
            try:
                value = convert(raw)
            except ValueError:
                logger.warning("ignoring %s=%r: not a number", key, raw)
                continue
            if not math.isfinite(value):
                logger.warning("ignoring %s=%r: must be finite", key, raw)
                continue
            if value <= 0:
                logger.warning("ignoring %s=%r: must be positive", key, raw)
                continue
            setattr(settings, f.name, value)
        return settings
