"""RBJ Audio EQ Cookbook coefficient design for parametric bands."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from parametric_eq.model import Band, FilterType

DEFAULT_SAMPLE_RATE = 48000.0


@dataclass(frozen=True)
class BiquadCoefficients:
    """Coefficients of H(z) = (b0 + b1 z^-1 + b2 z^-2) / (a0 + a1 z^-1 + a2 z^-2).

    Values are not normalized, so ``a0`` is generally not 1.
    """

    b0: float
    b1: float
    b2: float
    a0: float
    a1: float
    a2: float

    @property
    def numerator(self) -> np.ndarray:
        return np.array([self.b0, self.b1, self.b2], dtype=np.float64)

    @property
    def denominator(self) -> np.ndarray:
        return np.array([self.a0, self.a1, self.a2], dtype=np.float64)

    def normalized(self) -> "BiquadCoefficients":
        """Return the same filter scaled so that a0 == 1."""
        a0 = self.a0
        return BiquadCoefficients(
            self.b0 / a0, self.b1 / a0, self.b2 / a0, 1.0, self.a1 / a0, self.a2 / a0
        )


def compute_coefficients(
    frequency: float,
    gain: float,
    q: float,
    filter_type: FilterType = FilterType.PEAKING,
    sample_rate: float = DEFAULT_SAMPLE_RATE,
) -> BiquadCoefficients:
    """Return unnormalized RBJ biquad coefficients for one band.

    Parameters are not range-checked: a zero Q or an extreme gain gives
    inf/nan coefficients instead of raising.
    """
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return _rbj_coefficients(
            np.float64(frequency), np.float64(gain), np.float64(q), filter_type,
            np.float64(sample_rate),
        )


def _rbj_coefficients(
    frequency: np.float64,
    gain: np.float64,
    q: np.float64,
    filter_type: FilterType,
    sample_rate: np.float64,
) -> BiquadCoefficients:
    a_gain = np.power(10.0, gain / 40.0)
    omega = 2 * np.pi * frequency / sample_rate
    sin_w = np.sin(omega)
    cos_w = np.cos(omega)
    alpha = sin_w / (2 * q)

    if filter_type is FilterType.PEAKING:
        return BiquadCoefficients(
            b0=1 + alpha * a_gain,
            b1=-2 * cos_w,
            b2=1 - alpha * a_gain,
            a0=1 + alpha / a_gain,
            a1=-2 * cos_w,
            a2=1 - alpha / a_gain,
        )

    shelf = 2 * np.sqrt(a_gain) * alpha
    if filter_type is FilterType.LOW_SHELF:
        return BiquadCoefficients(
            b0=a_gain * ((a_gain + 1) - (a_gain - 1) * cos_w + shelf),
            b1=2 * a_gain * ((a_gain - 1) - (a_gain + 1) * cos_w),
            b2=a_gain * ((a_gain + 1) - (a_gain - 1) * cos_w - shelf),
            a0=(a_gain + 1) + (a_gain - 1) * cos_w + shelf,
            a1=-2 * ((a_gain - 1) + (a_gain + 1) * cos_w),
            a2=(a_gain + 1) + (a_gain - 1) * cos_w - shelf,
        )
    if filter_type is FilterType.HIGH_SHELF:
        return BiquadCoefficients(
            b0=a_gain * ((a_gain + 1) + (a_gain - 1) * cos_w + shelf),
            b1=-2 * a_gain * ((a_gain - 1) + (a_gain + 1) * cos_w),
            b2=a_gain * ((a_gain + 1) + (a_gain - 1) * cos_w - shelf),
            a0=(a_gain + 1) - (a_gain - 1) * cos_w + shelf,
            a1=2 * ((a_gain - 1) - (a_gain + 1) * cos_w),
            a2=(a_gain + 1) - (a_gain - 1) * cos_w - shelf,
        )
    raise ValueError(f"unsupported filter type: {filter_type!r}")


def design_band(band: Band, sample_rate: float = DEFAULT_SAMPLE_RATE) -> BiquadCoefficients:
    """Create coefficients from a :class:`Band` definition."""
    return compute_coefficients(band.frequency, band.gain, band.q, band.filter_type, sample_rate)
