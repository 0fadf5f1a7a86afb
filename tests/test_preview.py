"""Tests for the matplotlib response preview."""

import numpy as np
import pytest

from parametric_eq.config import ResponseSettings
from parametric_eq.model import Band, FilterType
from parametric_eq.preview import build_figure, preview_curve, render_preview


class TestPreviewCurve:
    def test_empty_list_is_flat_at_preamp(self):
        freqs, gains = preview_curve([], preamp_db=-4.0)
        np.testing.assert_allclose(freqs, [20.0, 20000.0])
        np.testing.assert_allclose(gains, [-4.0, -4.0])

    def test_curve_is_offset_by_preamp(self):
        bands = [Band(1000.0, 6.0, 1.41)]
        settings = ResponseSettings(num_points=32)
        _, plain = preview_curve(bands, 0.0, settings)
        _, shifted = preview_curve(bands, -6.0, settings)
        np.testing.assert_allclose(shifted, plain - 6.0)


class TestFigure:
    def test_axes_cover_the_curve(self):
        fig = build_figure([Band(100.0, 18.0, 0.7, FilterType.LOW_SHELF)])
        ax = fig.axes[0]
        assert ax.get_xscale() == "log"
        low, high = ax.get_ylim()
        assert low == pytest.approx(-15)
        assert high > 15

    def test_render_to_file(self, tmp_path):
        path = render_preview([Band(1000.0, 3.0, 1.0)], tmp_path / "eq.png", preamp_db=-3.0)
        assert path.exists()
        assert path.read_bytes()[:4] == b"\x89PNG"
