"""Text codecs: internal ``PEQ:``, EqualizerAPO and GraphicEQ."""
from .apo import ApoImportResult, clamp_preamp, from_apo_string, from_apo_string_into, to_apo_string
from .graphic_eq import to_graphic_eq_string
from .internal import DEFAULT_PEQ, deserialize, deserialize_into, parse_bands, serialize

__all__ = [
    "ApoImportResult",
    "DEFAULT_PEQ",
    "clamp_preamp",
    "deserialize",
    "deserialize_into",
    "from_apo_string",
    "from_apo_string_into",
    "parse_bands",
    "serialize",
    "to_apo_string",
    "to_graphic_eq_string",
]
