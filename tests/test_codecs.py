"""Tests for the PEQ, EqualizerAPO and GraphicEQ text formats."""

import pytest

from parametric_eq.codecs import (
    deserialize,
    deserialize_into,
    from_apo_string,
    from_apo_string_into,
    serialize,
    to_apo_string,
    to_graphic_eq_string,
)
from parametric_eq.codecs.numbers import format_compact, parse_float, parse_int
from parametric_eq.dsp import compute_combined_response
from parametric_eq.model import Band, BandList, ChangeKind, FilterType


def sample_bands():
    return BandList([
        Band(105.337, 4.1234567, 0.70710678, FilterType.LOW_SHELF),
        Band(1000.0, -3.0, 1.41),
        Band(9876.543, 2.5, 0.5, FilterType.HIGH_SHELF),
        Band(1000.0, -3.0, 1.41),
    ])


def assert_close_bands(actual, expected, freq_tol, gain_tol, q_tol):
    assert len(actual) == len(expected)
    for got, want in zip(actual, expected):
        assert got.frequency == pytest.approx(want.frequency, abs=freq_tol)
        assert got.gain == pytest.approx(want.gain, abs=gain_tol)
        assert got.q == pytest.approx(want.q, abs=q_tol)
        assert got.filter_type is want.filter_type


class TestNumbers:
    def test_compact_formatting(self):
        assert format_compact(1000.0, 2) == "1000"
        assert format_compact(1.41, 4) == "1.41"
        assert format_compact(100.125, 2) == "100.12"
        assert format_compact(-0.5, 6) == "-0.5"
        assert format_compact(3.0000004, 6) == "3"

    def test_lenient_parsing(self):
        assert parse_float("1e3") == 1000.0
        assert parse_float("abc") is None
        assert parse_float("1_000") is None
        assert parse_int("2") == 2
        assert parse_int("2.0") is None


class TestInternalFormat:
    def test_serialize(self):
        bands = [Band(1000.0, 3.0, 1.41), Band(100.125, -2.5, 0.70710678, FilterType.LOW_SHELF)]
        assert serialize(bands) == "PEQ: 1000 3 1.41 0; 100.12 -2.5 0.7071 1; "

    def test_serialize_empty(self):
        assert serialize([]) == "PEQ: "
        assert deserialize("PEQ: ").is_empty()

    def test_round_trip_within_precision(self):
        bands = sample_bands()
        assert_close_bands(deserialize(serialize(bands)), bands, 0.005, 5e-7, 5e-5)

    def test_malformed_segments_are_dropped(self):
        text = "PEQ: 1000 3 1.41 0; bad; 200 1 0.5 x; 300 -1 2 7;\n 400 2 1 2; 500 1 ;"
        bands = deserialize(text)
        assert [(b.frequency, b.gain, b.q, b.filter_type) for b in bands] == [
            (1000.0, 3.0, 1.41, FilterType.PEAKING),
            (300.0, -1.0, 2.0, FilterType.PEAKING),
            (400.0, 2.0, 1.0, FilterType.HIGH_SHELF),
        ]

    def test_prefix_is_optional_and_whitespace_tolerated(self):
        bands = deserialize("  100   2\t0.7  1 ;;  ")
        assert len(bands) == 1
        assert bands[0].filter_type is FilterType.LOW_SHELF

    def test_deserialize_into_resets_once(self):
        bands = BandList([Band(50.0, 1.0, 1.0)])
        events = []
        bands.register(lambda bl, change: events.append(change.kind))
        deserialize_into(bands, "PEQ: 1000 3 1.41 0; 2000 1 1 0; ")
        assert events == [ChangeKind.RESET]
        assert [b.frequency for b in bands] == [1000.0, 2000.0]


class TestApoExport:
    def test_format(self):
        bands = [Band(1000.0, 3.0, 1.41), Band(100.0, 5.0, 0.71, FilterType.LOW_SHELF)]
        assert to_apo_string(bands, -3.0) == (
            "Preamp: -3 dB\n"
            "Filter 1: ON PK Fc 1000 Hz Gain 3 dB Q 1.41\n"
            "Filter 2: ON LSC Fc 100 Hz Gain 5 dB Q 0.71\n"
        )

    def test_empty(self):
        assert to_apo_string([]) == "Preamp: 0 dB\n"


class TestApoImport:
    def test_clamped_preamp_and_single_band(self):
        result = from_apo_string("Preamp: -45 dB\nFilter 1: ON PK Fc 1000 Hz Gain 3 dB Q 1.41")
        assert result.preamp_db == -30.0
        assert result.skipped_filters == 0
        assert len(result.bands) == 1
        band = result.bands[0]
        assert (band.frequency, band.gain, band.q, band.filter_type) == (1000.0, 3.0, 1.41, FilterType.PEAKING)

    def test_unsupported_filter_is_counted(self):
        text = (
            "Filter 1: ON PK Fc 1000 Hz Gain 3 dB Q 1.41\n"
            "Filter 2: ON BP Fc 100 Hz Gain 0 dB Q 0.7\n"
            "Filter 3: ON HSC Fc 8000 Hz Gain -2 dB Q 0.71\n"
        )
        result = from_apo_string(text)
        assert len(result.bands) == 2
        assert result.skipped_filters == 1
        assert result.bands[1].filter_type is FilterType.HIGH_SHELF

    def test_comments_blank_and_unknown_lines_ignored(self):
        text = (
            "# Filter 1: ON PK Fc 1000 Hz Gain 3 dB Q 1.41\n"
            "\n"
            "Device: Speakers\n"
            "Filter 2: ON LP Fc 100 Hz\n"
            "  filter 3: on ls fc 120 hz gain 4.5 db q 0.7  \n"
        )
        result = from_apo_string(text)
        assert result.skipped_filters == 0
        assert result.preamp_db == 0.0
        assert len(result.bands) == 1
        assert result.bands[0].filter_type is FilterType.LOW_SHELF
        assert result.bands[0].gain == 4.5

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("Preamp: 6 dB", 0.0),
            ("Preamp: -3.5dB", -3.5),
            ("preamp:-12 DB", -12.0),
            ("Preamp: -- dB", 0.0),
            ("Preamp: loud", 0.0),
        ],
    )
    def test_preamp_parsing(self, line, expected):
        assert from_apo_string(line).preamp_db == expected

    def test_only_newline_characters_split_lines(self):
        text = (
            "Preamp: -2 dB\r\n"
            "Filter 1: ON PK Fc 1000 Hz Gain 3 dB Q 1.41\r"
            "Filter 2: ON PK Fc 2000 Hz Gain 1 dB Q 1\x0cFilter 3: ON PK Fc 3000 Hz Gain 1 dB Q 1\n"
        )
        result = from_apo_string(text)
        assert result.preamp_db == -2.0
        assert [b.frequency for b in result.bands] == [1000.0, 2000.0]

    def test_bad_numbers_drop_line_without_counting(self):
        result = from_apo_string("Filter 1: ON XX Fc 1.0.0 Hz Gain 3 dB Q 1")
        assert len(result.bands) == 0
        assert result.skipped_filters == 0

    def test_round_trip(self):
        bands = sample_bands()
        result = from_apo_string(to_apo_string(bands, -4.25))
        assert result.preamp_db == -4.25
        assert_close_bands(result.bands, bands, 0.005, 5e-7, 5e-5)

    def test_round_trip_clamps_preamp(self):
        assert from_apo_string(to_apo_string(sample_bands(), -42.0)).preamp_db == -30.0

    def test_import_into_replaces_contents(self):
        bands = BandList([Band(50.0, 1.0, 1.0), Band(60.0, 1.0, 1.0)])
        events = []
        bands.register(lambda bl, change: events.append(change.kind))
        result = from_apo_string_into(bands, "Preamp: -2 dB\nFilter 1: ON HS Fc 8000 Hz Gain 2 dB Q 0.7")
        assert events == [ChangeKind.RESET]
        assert len(bands) == 1
        assert bands[0].filter_type is FilterType.HIGH_SHELF
        assert result.preamp_db == -2.0


class TestGraphicEq:
    def test_format(self):
        text = to_graphic_eq_string([(20.0, 1.5), (1000.126, -0.25)], preamp_offset=-1.0)
        assert text == "GraphicEQ: 20.00 0.500000; 1000.13 -1.250000; "

    def test_empty(self):
        assert to_graphic_eq_string([]) == "GraphicEQ: "

    def test_from_sampled_curve(self):
        response = compute_combined_response([Band(1000.0, 3.0, 1.41)], num_points=5)
        text = to_graphic_eq_string(response)
        entries = [e for e in text[len("GraphicEQ: "):].split("; ") if e]
        assert len(entries) == 5
        assert entries[0].startswith("20.00 ")
        assert entries[-1].startswith("20000.00 ")
