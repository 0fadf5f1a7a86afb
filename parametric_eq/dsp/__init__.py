"""DSP package exports for the parametric EQ."""
from .filters import BiquadCoefficients, compute_coefficients, design_band
from .response import (
    ResponsePoint,
    compute_combined_response,
    curve_db_range,
    log_frequencies,
    magnitude_response,
)

__all__ = [
    "BiquadCoefficients",
    "ResponsePoint",
    "compute_coefficients",
    "compute_combined_response",
    "curve_db_range",
    "design_band",
    "log_frequencies",
    "magnitude_response",
]
