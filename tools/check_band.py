"""Quick check of a single band's response at a few probe frequencies."""
from __future__ import annotations

import argparse

from parametric_eq.dsp import compute_coefficients, magnitude_response
from parametric_eq.model import FilterType


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the response of one parametric band")
    parser.add_argument("--freq", type=float, default=1000.0, help="Band frequency in Hz")
    parser.add_argument("--gain", type=float, default=6.0, help="Band gain in dB")
    parser.add_argument("--q", type=float, default=1.5, help="Q factor for the band")
    parser.add_argument(
        "--type", choices=[t.name.lower() for t in FilterType], default="peaking", help="Filter shape"
    )
    parser.add_argument("--sample-rate", type=float, default=48000.0, help="Sample rate in Hz")
    args = parser.parse_args()

    filter_type = FilterType[args.type.upper()]
    coeffs = compute_coefficients(args.freq, args.gain, args.q, filter_type, args.sample_rate)
    print("b:", coeffs.b0, coeffs.b1, coeffs.b2)
    print("a:", coeffs.a0, coeffs.a1, coeffs.a2)
    for probe in (args.freq / 10, args.freq / 2, args.freq, args.freq * 2, args.freq * 10):
        if probe >= args.sample_rate / 2:
            continue
        print(f"{probe:10.1f} Hz: {magnitude_response(coeffs, probe, args.sample_rate):+.3f} dB")


if __name__ == "__main__":
    main()
