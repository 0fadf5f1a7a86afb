"""Frequency response of single biquads and of a whole band list."""
from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from parametric_eq.model import Band
from .filters import DEFAULT_SAMPLE_RATE, BiquadCoefficients, design_band

ResponsePoint = Tuple[float, float]

DEFAULT_NUM_POINTS = 512
MIN_FREQ = 20.0
MAX_FREQ = 20000.0


def magnitude_response(
    coeffs: BiquadCoefficients,
    frequency: Union[float, np.ndarray],
    sample_rate: float = DEFAULT_SAMPLE_RATE,
) -> Union[float, np.ndarray]:
    """Return |H(e^jw)| in dB at ``frequency`` (scalar or array).

    Where the denominator magnitude is exactly zero the result is 0.0 dB.
    """
    freqs = np.asarray(frequency, dtype=np.float64)
    w = 2 * np.pi * freqs / sample_rate
    exp_1 = np.exp(-1j * w)
    exp_2 = np.exp(-2j * w)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        num = coeffs.b0 + coeffs.b1 * exp_1 + coeffs.b2 * exp_2
        den = coeffs.a0 + coeffs.a1 * exp_1 + coeffs.a2 * exp_2
        num_sq = np.square(num.real) + np.square(num.imag)
        den_sq = np.square(den.real) + np.square(den.imag)
        magnitude = np.where(den_sq > 0.0, 10 * np.log10(num_sq / den_sq), 0.0)
    if magnitude.ndim == 0:
        return float(magnitude)
    return magnitude


def log_frequencies(
    num_points: int = DEFAULT_NUM_POINTS,
    min_freq: float = MIN_FREQ,
    max_freq: float = MAX_FREQ,
) -> np.ndarray:
    """Log-uniform grid from ``min_freq`` to ``max_freq``, both included."""
    if num_points < 1:
        raise ValueError("num_points must be at least 1")
    if min_freq <= 0 or max_freq <= 0:
        raise ValueError("frequency bounds must be positive")
    if num_points == 1:
        return np.array([float(min_freq)])
    log_min = math.log(min_freq)
    log_max = math.log(max_freq)
    t = np.arange(num_points, dtype=np.float64) / (num_points - 1)
    return np.exp(log_min + t * (log_max - log_min))


def compute_combined_response(
    bands: Iterable[Band],
    num_points: int = DEFAULT_NUM_POINTS,
    min_freq: float = MIN_FREQ,
    max_freq: float = MAX_FREQ,
    sample_rate: float = DEFAULT_SAMPLE_RATE,
) -> List[ResponsePoint]:
    """Sample the cascaded response of ``bands`` as (frequency, dB) pairs.

    Cascaded sections multiply in the linear domain, so their dB magnitudes
    add. An empty band list yields an empty curve.
    """
    bands = list(bands)
    if not bands:
        return []
    freqs = log_frequencies(num_points, min_freq, max_freq)
    all_coeffs = [design_band(band, sample_rate) for band in bands]
    total = np.zeros_like(freqs)
    for coeffs in all_coeffs:
        total += magnitude_response(coeffs, freqs, sample_rate)
    return list(zip(freqs.tolist(), total.tolist()))


def curve_db_range(
    gains: Sequence[float],
    preamp_db: float = 0.0,
    floor_db: float = -15.0,
    ceiling_db: float = 15.0,
) -> Tuple[int, int]:
    """Integer dB window for plotting a curve shifted by ``preamp_db``.

    Non-finite gains are left out of the window.
    """
    values = np.asarray(gains, dtype=np.float64)
    values = values[np.isfinite(values)]
    low = (float(values.min()) if values.size else 0.0) + preamp_db
    high = (float(values.max()) if values.size else 0.0) + preamp_db
    return math.floor(min(low, floor_db)), math.ceil(max(high, ceiling_db))
