"""Band value type and the observable band list."""
from __future__ import annotations

import dataclasses
import uuid
from collections.abc import MutableSequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional


class FilterType(Enum):
    """Biquad shapes a band can take."""

    PEAKING = (0, "PK", "PK")
    LOW_SHELF = (1, "LSC", "LS")
    HIGH_SHELF = (2, "HSC", "HS")

    def __init__(self, code: int, apo_label: str, display_label: str) -> None:
        self.code = code
        self.apo_label = apo_label
        self.display_label = display_label

    @classmethod
    def from_code(cls, code: int) -> "FilterType":
        for member in cls:
            if member.code == code:
                return member
        return cls.PEAKING

    @classmethod
    def from_apo_label(cls, label: str) -> Optional["FilterType"]:
        return _APO_LABELS.get(label.upper())


_APO_LABELS = {
    "PK": FilterType.PEAKING,
    "LSC": FilterType.LOW_SHELF,
    "LS": FilterType.LOW_SHELF,
    "HSC": FilterType.HIGH_SHELF,
    "HS": FilterType.HIGH_SHELF,
}


@dataclass(frozen=True)
class Band:
    """Describes a single parametric EQ band.

    ``id`` identifies this particular band across edits and is left out of
    equality and hashing: two bands with the same audio parameters compare
    equal whatever their ids.
    """

    frequency: float  # Hz
    gain: float  # dB boost/cut
    q: float  # quality factor
    filter_type: FilterType = FilterType.PEAKING
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def replace(self, **changes: Any) -> "Band":
        """Return an edited copy that keeps this band's id."""
        return dataclasses.replace(self, **changes)

    def describe(self) -> str:
        return (
            f"{self.filter_type.display_label} "
            f"{_trim(self.frequency, 1)}Hz {_trim(self.gain, 2)}dB Q{_trim(self.q, 2)}"
        )


def _trim(value: float, digits: int) -> str:
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class ChangeKind(Enum):
    CHANGED = "changed"
    INSERTED = "inserted"
    REMOVED = "removed"
    MOVED = "moved"
    RESET = "reset"


@dataclass(frozen=True)
class ListChange:
    """What a mutation did to a :class:`BandList`.

    ``RESET`` means the whole list may differ and ``start``/``count`` are
    meaningless. ``MOVED`` carries the destination index in ``target``.
    """

    kind: ChangeKind
    start: int = 0
    count: int = 0
    target: int = -1

    @property
    def is_bulk(self) -> bool:
        return self.kind is ChangeKind.RESET


Observer = Callable[["BandList", ListChange], None]

STATE_FREQ = "peq_freq"
STATE_GAIN = "peq_gain"
STATE_Q = "peq_q"
STATE_TYPE = "peq_type"
STATE_UUID = "peq_uuid"


class BandList(MutableSequence):
    """Ordered list of bands that notifies observers after every mutation.

    Observers run synchronously on the calling thread in registration order.
    Duplicate bands (by value or by id) are allowed.
    """

    def __init__(self, bands: Iterable[Band] = ()) -> None:
        self._bands: List[Band] = [_check_band(b) for b in bands]
        self._observers: List[Observer] = []

    # Observers ---------------------------------------------------------
    def register(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unregister(self, observer: Observer) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def _notify(self, change: ListChange) -> None:
        for observer in list(self._observers):
            observer(self, change)

    # Sequence protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self._bands)

    def __iter__(self) -> Iterator[Band]:
        return iter(self._bands)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._bands[index])
        return self._bands[index]

    def __setitem__(self, index, band) -> None:
        if isinstance(index, slice):
            raise TypeError("BandList does not support slice assignment")
        self.replace_at(index, band)

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            raise TypeError("BandList does not support slice deletion")
        self.remove_at(index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BandList):
            return self._bands == other._bands
        if isinstance(other, list):
            return self._bands == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BandList({self._bands!r})"

    # Mutations ---------------------------------------------------------
    def insert(self, index: int, band: Band) -> None:
        band = _check_band(band)
        size = len(self._bands)
        if index < 0:
            index = max(0, index + size)
        index = min(index, size)
        self._bands.insert(index, band)
        self._notify(ListChange(ChangeKind.INSERTED, index, 1))

    def remove_at(self, index: int) -> Band:
        index = self._position(index)
        band = self._bands.pop(index)
        self._notify(ListChange(ChangeKind.REMOVED, index, 1))
        return band

    def replace_at(self, index: int, band: Band) -> Band:
        band = _check_band(band)
        index = self._position(index)
        previous = self._bands[index]
        self._bands[index] = band
        self._notify(ListChange(ChangeKind.CHANGED, index, 1))
        return previous

    def remove_where(self, predicate: Callable[[Band], bool]) -> int:
        """Remove every band matching ``predicate``; return how many went.

        One ``REMOVED`` event is sent per contiguous run, last run first, so
        the reported positions are valid at the time each event fires.
        """
        hits = [i for i, band in enumerate(self._bands) if predicate(band)]
        runs: List[List[int]] = []
        for i in hits:
            if runs and runs[-1][1] == i:
                runs[-1][1] = i + 1
            else:
                runs.append([i, i + 1])
        for start, stop in reversed(runs):
            del self._bands[start:stop]
            self._notify(ListChange(ChangeKind.REMOVED, start, stop - start))
        return len(hits)

    def move(self, source: int, target: int) -> None:
        source = self._position(source)
        target = self._position(target)
        if source == target:
            return
        band = self._bands.pop(source)
        self._bands.insert(target, band)
        self._notify(ListChange(ChangeKind.MOVED, source, 1, target))

    def extend(self, bands: Iterable[Band]) -> None:
        new = [_check_band(b) for b in bands]
        if not new:
            return
        start = len(self._bands)
        self._bands.extend(new)
        self._notify(ListChange(ChangeKind.INSERTED, start, len(new)))

    def clear(self) -> None:
        self._bands.clear()
        self._notify(ListChange(ChangeKind.RESET))

    def set_bands(self, bands: Iterable[Band]) -> None:
        """Replace the whole contents with a single ``RESET`` notification."""
        self._bands = [_check_band(b) for b in bands]
        self._notify(ListChange(ChangeKind.RESET))

    # Queries -----------------------------------------------------------
    def index_of(self, band_id: uuid.UUID) -> int:
        for i, band in enumerate(self._bands):
            if band.id == band_id:
                return i
        return -1

    def is_empty(self) -> bool:
        return not self._bands

    def _position(self, index: int) -> int:
        size = len(self._bands)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"band index {index} out of range for {size} bands")
        return index

    # Snapshot ----------------------------------------------------------
    def to_state(self) -> Dict[str, list]:
        """Parallel-array snapshot that keeps band ids (JSON friendly)."""
        return {
            STATE_FREQ: [b.frequency for b in self._bands],
            STATE_GAIN: [b.gain for b in self._bands],
            STATE_Q: [b.q for b in self._bands],
            STATE_TYPE: [b.filter_type.code for b in self._bands],
            STATE_UUID: [str(b.id) for b in self._bands],
        }

    @classmethod
    def from_state(cls, state: Dict[str, Any]) -> "BandList":
        columns = [state.get(key) for key in (STATE_FREQ, STATE_GAIN, STATE_Q, STATE_TYPE)]
        if any(col is None for col in columns):
            return cls()
        freqs, gains, qs, types = columns
        ids = state.get(STATE_UUID) or []
        count = min(len(freqs), len(gains), len(qs), len(types))
        bands = []
        for i in range(count):
            band_id = uuid.UUID(str(ids[i])) if i < len(ids) else uuid.uuid4()
            bands.append(
                Band(
                    float(freqs[i]),
                    float(gains[i]),
                    float(qs[i]),
                    FilterType.from_code(int(types[i])),
                    band_id,
                )
            )
        return cls(bands)


def _check_band(band: Band) -> Band:
    if not isinstance(band, Band):
        raise TypeError(f"expected Band, got {type(band).__name__}")
    return band
