"""Command line front end for inspecting and converting EQ descriptions."""
from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import List, Optional

from parametric_eq import codecs
from parametric_eq.config import ResponseSettings
from parametric_eq.dsp import compute_combined_response

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    RUNTIME_ERROR = 10


def load_description(text: str) -> codecs.ApoImportResult:
    """Read either format; ``PEQ:`` text carries no preamp."""
    if text.lstrip().startswith(codecs.internal.PREFIX):
        return codecs.ApoImportResult(bands=codecs.deserialize(text))
    return codecs.from_apo_string(text)


def _read(path_text: str) -> Optional[codecs.ApoImportResult]:
    path = Path(path_text).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {path}: {exc}", file=sys.stderr)
        return None
    return load_description(text)


def _write(text: str, out: Optional[str]) -> None:
    if out is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    Path(out).expanduser().write_text(text, encoding="utf-8")
    logger.info("wrote %s", out)


def cmd_show(args: argparse.Namespace) -> int:
    loaded = _read(args.file)
    if loaded is None:
        return ExitCode.RUNTIME_ERROR
    print(f"Preamp: {loaded.preamp_db:+.1f} dB")
    if loaded.bands.is_empty():
        print("(no bands)")
    for i, band in enumerate(loaded.bands, start=1):
        print(f"{i:>3}  {band.describe()}")
    if loaded.skipped_filters:
        print(f"{loaded.skipped_filters} unsupported filters skipped")
    return ExitCode.OK


def cmd_convert(args: argparse.Namespace) -> int:
    loaded = _read(args.file)
    if loaded is None:
        return ExitCode.RUNTIME_ERROR
    preamp = loaded.preamp_db if args.preamp is None else args.preamp
    if args.to == "apo":
        text = codecs.to_apo_string(loaded.bands, preamp)
    else:
        text = codecs.serialize(loaded.bands)
    try:
        _write(text, args.output)
    except OSError as exc:
        print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
        return ExitCode.RUNTIME_ERROR
    return ExitCode.OK


def _settings(args: argparse.Namespace) -> ResponseSettings:
    settings = ResponseSettings.from_env()
    if getattr(args, "points", None) is not None:
        settings.num_points = args.points
    if getattr(args, "sample_rate", None) is not None:
        settings.sample_rate = args.sample_rate
    return settings


def cmd_graphic_eq(args: argparse.Namespace) -> int:
    loaded = _read(args.file)
    if loaded is None:
        return ExitCode.RUNTIME_ERROR
    s = _settings(args)
    response = compute_combined_response(
        loaded.bands, s.num_points, s.min_freq, s.max_freq, s.sample_rate
    )
    text = codecs.to_graphic_eq_string(response, loaded.preamp_db)
    try:
        _write(text, args.output)
    except OSError as exc:
        print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
        return ExitCode.RUNTIME_ERROR
    return ExitCode.OK


def cmd_plot(args: argparse.Namespace) -> int:
    from parametric_eq.preview import render_preview

    loaded = _read(args.file)
    if loaded is None:
        return ExitCode.RUNTIME_ERROR
    try:
        path = render_preview(loaded.bands, args.output, loaded.preamp_db, _settings(args))
    except (OSError, ValueError) as exc:
        print(f"error: cannot render {args.output}: {exc}", file=sys.stderr)
        return ExitCode.RUNTIME_ERROR
    print(f"Saved preview to {path}")
    return ExitCode.OK


COMMANDS = {
    "show": cmd_show,
    "convert": cmd_convert,
    "graphic-eq": cmd_graphic_eq,
    "plot": cmd_plot,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="parametric-eq", description="Parametric EQ tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser diagnostics")
    sub = parser.add_subparsers(dest="command")

    p_show = sub.add_parser("show", help="List the bands of a PEQ or EqualizerAPO file")
    p_show.add_argument("file")

    p_convert = sub.add_parser("convert", help="Convert between PEQ and EqualizerAPO text")
    p_convert.add_argument("file")
    p_convert.add_argument("--to", choices=["apo", "peq"], default="apo")
    p_convert.add_argument("-o", "--output", help="Output file (default: stdout)")
    p_convert.add_argument("--preamp", type=float, help="Override the preamp in dB")

    p_graphic = sub.add_parser("graphic-eq", help="Export the combined response as GraphicEQ")
    p_graphic.add_argument("file")
    p_graphic.add_argument("--points", type=int, help="Number of sampled frequencies")
    p_graphic.add_argument("--sample-rate", type=float, help="Sample rate in Hz")
    p_graphic.add_argument("-o", "--output", help="Output file (default: stdout)")

    p_plot = sub.add_parser("plot", help="Render the combined response to an image")
    p_plot.add_argument("file")
    p_plot.add_argument("-o", "--output", required=True, help="Image path (png, svg, pdf)")
    p_plot.add_argument("--sample-rate", type=float, help="Sample rate in Hz")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return ExitCode.USAGE
    if getattr(args, "points", None) is not None and args.points < 1:
        parser.error("--points must be at least 1")
    return COMMANDS[args.command](args)
