"""Editing session: band list, preamp and the single-band editor."""
from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from parametric_eq import codecs
from parametric_eq.config import ResponseSettings
from parametric_eq.dsp import ResponsePoint, compute_combined_response
from parametric_eq.model import Band, BandList, FilterType

logger = logging.getLogger(__name__)

NEW_BAND_FREQUENCY = 1000.0
NEW_BAND_GAIN = 0.0
NEW_BAND_Q = 1.41


class EqualizerSession:
    """Owns the bands being edited and tracks one band through the editor.

    The editor keys the tracked band by id, never by value, since several
    bands may share the same parameters.
    """

    def __init__(
        self,
        bands: Optional[BandList] = None,
        preamp_db: float = 0.0,
        settings: Optional[ResponseSettings] = None,
    ) -> None:
        self.bands = bands if bands is not None else BandList()
        self.preamp_db = preamp_db
        self.settings = settings or ResponseSettings()
        self._backup: Optional[Band] = None
        self._editing_id: Optional[uuid.UUID] = None
        self._editor_active = False

    @property
    def editor_active(self) -> bool:
        return self._editor_active

    @property
    def editing_id(self) -> Optional[uuid.UUID]:
        return self._editing_id

    # Editor ------------------------------------------------------------
    def begin_add(self) -> None:
        if self._editor_active:
            return
        self._backup = None
        self._editing_id = None
        self._editor_active = True

    def begin_edit(self, band: Band) -> None:
        self._backup = band
        self._editing_id = band.id
        self._editor_active = True

    def apply(
        self,
        frequency: float = NEW_BAND_FREQUENCY,
        gain: float = NEW_BAND_GAIN,
        q: float = NEW_BAND_Q,
        filter_type: FilterType = FilterType.PEAKING,
    ) -> Optional[Band]:
        """Push the editor values into the list.

        The first apply after :meth:`begin_add` appends a new band; later
        applies replace the tracked band in place, keeping its id.
        """
        if not self._editor_active:
            return None
        if self._editing_id is None:
            band = Band(frequency, gain, q, filter_type)
            self.bands.append(band)
            self._editing_id = band.id
            logger.debug(
                "apply: tracking new band %s for %s Hz %s dB Q%s %s",
                band.id, frequency, gain, q, filter_type.name,
            )
            return band

        logger.debug("apply: modifying band %s", self._editing_id)
        index = self.bands.index_of(self._editing_id)
        if index < 0:
            logger.error("apply: failed to find band %s", self._editing_id)
            return None
        band = Band(frequency, gain, q, filter_type, self._editing_id)
        self.bands.replace_at(index, band)
        return band

    def discard(self) -> None:
        band_id = self._editing_id
        if self._backup is not None and band_id is not None:
            logger.debug("discard: reverting modifications to band %s", band_id)
            index = self.bands.index_of(band_id)
            if index < 0:
                logger.error("discard: failed to find band %s", band_id)
            else:
                self.bands.replace_at(index, self._backup)
        elif band_id is not None:
            logger.debug("discard: reverting addition of band %s", band_id)
            self.bands.remove_where(lambda b: b.id == band_id)
        self._close_editor()

    def commit(self) -> None:
        logger.debug("commit: confirming changes to band %s", self._editing_id)
        self._close_editor()

    def _close_editor(self) -> None:
        self._backup = None
        self._editing_id = None
        self._editor_active = False

    # Whole-list operations ---------------------------------------------
    def reset(self) -> None:
        codecs.deserialize_into(self.bands, codecs.DEFAULT_PEQ)
        self.preamp_db = 0.0
        self._close_editor()

    def serialize(self) -> str:
        return codecs.serialize(self.bands)

    def restore(self, text: str, preamp_db: float = 0.0) -> None:
        codecs.deserialize_into(self.bands, text)
        self.preamp_db = preamp_db

    def import_apo(self, text: str) -> codecs.ApoImportResult:
        result = codecs.from_apo_string_into(self.bands, text)
        self.preamp_db = result.preamp_db
        return result

    def export_apo(self) -> str:
        return codecs.to_apo_string(self.bands, self.preamp_db)

    # Preview -----------------------------------------------------------
    def response(self) -> List[ResponsePoint]:
        s = self.settings
        return compute_combined_response(
            self.bands, s.num_points, s.min_freq, s.max_freq, s.sample_rate
        )

    def graphic_eq(self) -> str:
        return codecs.to_graphic_eq_string(self.response(), self.preamp_db)
