"""Helpers for visualising the EQ curve."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import numpy as np
from matplotlib.figure import Figure
from matplotlib.ticker import NullFormatter

from parametric_eq.config import ResponseSettings
from parametric_eq.dsp import compute_combined_response, curve_db_range
from parametric_eq.model import Band

FREQ_TICKS = (
    25.0, 40.0, 63.0, 100.0, 160.0, 250.0, 400.0, 630.0,
    1000.0, 1600.0, 2500.0, 4000.0, 6300.0, 10000.0, 16000.0,
)


def preview_curve(
    bands: Iterable[Band],
    preamp_db: float = 0.0,
    settings: Optional[ResponseSettings] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return (freqs, dB) to draw, offset by the preamp.

    With no bands the curve is a flat line at the preamp level across the
    displayed range.
    """
    settings = settings or ResponseSettings()
    response = compute_combined_response(
        bands, settings.num_points, settings.min_freq, settings.max_freq, settings.sample_rate
    )
    if not response:
        freqs = np.array([settings.min_freq, settings.max_freq])
        return freqs, np.full(2, float(preamp_db))
    freqs, gains = (np.array(col) for col in zip(*response))
    return freqs, gains + preamp_db


def _tick_label(freq: float) -> str:
    if freq >= 1000:
        return f"{freq / 1000:g}k"
    return f"{freq:g}"


def build_figure(
    bands: Iterable[Band],
    preamp_db: float = 0.0,
    settings: Optional[ResponseSettings] = None,
) -> Figure:
    settings = settings or ResponseSettings()
    freqs, magnitude = preview_curve(bands, preamp_db, settings)
    min_db, max_db = curve_db_range(magnitude)
    ticks = [f for f in FREQ_TICKS if settings.min_freq <= f <= settings.max_freq]

    fig = Figure(figsize=(5, 3), tight_layout=True)
    ax = fig.add_subplot(111)
    ax.set_xscale("log")
    ax.set_xlabel("Frequency (Hz)")
    ax.set_ylabel("Gain (dB)")
    ax.set_xticks(ticks)
    ax.set_xticklabels([_tick_label(f) for f in ticks])
    ax.xaxis.set_minor_formatter(NullFormatter())
    ax.set_yticks(range(min_db + (-min_db) % 3, max_db + 1, 3))
    ax.set_xlim(settings.min_freq, settings.max_freq)
    ax.set_ylim(min_db, max_db)
    ax.axhline(0.0, color="grey", lw=1.0)
    ax.plot(freqs, magnitude, color="orange")
    ax.fill_between(freqs, magnitude, min_db, color="orange", alpha=0.2)
    ax.grid(True, which="both", ls=":", lw=0.5)
    return fig


def render_preview(
    bands: Iterable[Band],
    path: Union[str, Path],
    preamp_db: float = 0.0,
    settings: Optional[ResponseSettings] = None,
    dpi: int = 100,
) -> Path:
    """Draw the combined response and save it to ``path``."""
    path = Path(path)
    fig = build_figure(bands, preamp_db, settings)
    fig.savefig(str(path), dpi=dpi)
    return path
