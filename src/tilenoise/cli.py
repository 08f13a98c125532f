"""
CLI entry point for the seamless noise texture generator.

Usage:
    tilenoise <width> <height> <path> [options]
    python -m tilenoise <width> <height> <path> [options]
"""

import argparse
import sys
import time
from pathlib import Path

from tilenoise.io.exporter import TextureExportError
from tilenoise.io.reader import PpmFormatError, read_ppm
from tilenoise.pipeline import TextureConfig, TexturePipeline


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad usage."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def with_suffix(path: str, suffix: str) -> Path:
    """Append ``suffix`` unless ``path`` already ends with it literally."""
    if not path.endswith(suffix):
        path += suffix
    return Path(path)


def _log(message: str, quiet: bool = False):
    if not quiet:
        print(message, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="tilenoise",
        description="Seamless multi-octave color noise texture generator (PPM output)",
    )

    parser.add_argument("width", type=_positive_int, help="Texture width in pixels")
    parser.add_argument("height", type=_positive_int, help="Texture height in pixels")
    parser.add_argument(
        "path",
        type=str,
        help="Output PPM path (.ppm is appended if missing; never overwrites)",
    )

    # Preview
    parser.add_argument(
        "--preview", type=str, default=None,
        help="Also write an 8-bit PNG preview to this path",
    )
    parser.add_argument(
        "--tile", type=_positive_int, default=1,
        help="Repeat the preview N x N to check seams (default: 1)",
    )

    parser.add_argument("--verify", action="store_true", help="Re-read the PPM and report channel ranges")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress output")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    quiet = args.quiet

    output = with_suffix(args.path, ".ppm")
    preview = with_suffix(args.preview, ".png") if args.preview else None

    config = TextureConfig(width=args.width, height=args.height, preview_tiles=args.tile)

    _log(f"width = {config.width}", quiet)
    _log(f"height = {config.height}", quiet)
    t0 = time.time()

    def _progress(octave: int, amplitude: int):
        _log(f"  octave {octave}: amplitude {amplitude}", quiet)

    pipeline = TexturePipeline(config)
    try:
        result = pipeline.process(output, preview_path=preview, progress_callback=_progress)
    except TextureExportError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    _log(f"Generated {len(result.amplitudes)} octaves in {time.time() - t0:.2f}s", quiet)
    _log(f"  Output: {result.ppm_path}", quiet)
    if result.preview_path is not None:
        _log(f"  Preview: {result.preview_path}", quiet)

    if args.verify:
        try:
            pixels, max_value = read_ppm(result.ppm_path)
        except PpmFormatError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        for channel, name in enumerate("RGB"):
            values = pixels[..., channel]
            print(f"{name}: min {values.min()} max {values.max()} (of {max_value})")


if __name__ == "__main__":
    main()
