"""Parametric EQ design, response preview and text interchange."""
from .codecs import (
    ApoImportResult,
    deserialize,
    from_apo_string,
    serialize,
    to_apo_string,
    to_graphic_eq_string,
)
from .dsp import BiquadCoefficients, compute_coefficients, compute_combined_response, magnitude_response
from .model import Band, BandList, ChangeKind, FilterType, ListChange

__version__ = "0.1.0"

__all__ = [
    "ApoImportResult",
    "Band",
    "BandList",
    "BiquadCoefficients",
    "ChangeKind",
    "FilterType",
    "ListChange",
    "compute_coefficients",
    "compute_combined_response",
    "deserialize",
    "from_apo_string",
    "magnitude_response",
    "serialize",
    "to_apo_string",
    "to_graphic_eq_string",
]
