"""Band model exports."""
from .bands import Band, BandList, ChangeKind, FilterType, ListChange, Observer

__all__ = [
    "Band",
    "BandList",
    "ChangeKind",
    "FilterType",
    "ListChange",
    "Observer",
]
