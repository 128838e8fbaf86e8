"""
Command-Line Interface (CLI) setup for vconvert.

This module uses Python's `argparse` to define and parse the command-line
arguments, and turns the parsed arguments into the immutable `ConvertOptions`
that the rest of the application works with.
"""
import argparse
from typing import List, Optional, Sequence

from loguru import logger

from .config.common import DEFAULT_LOG_LEVEL, LOG_LEVELS
from .config.video import COMPRESSION_PRESETS, DEFAULT_OUTPUT_FORMAT, DEFAULT_QUALITY, QUALITY_LEVELS
from .domain.options import ConvertOptions
from .services.argument_translator import is_valid_target_size


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vconvert", description="Convert video files between formats using FFmpeg."
    )
    parser.add_argument(
        "-i", "--input", dest="input", action="append", required=True, metavar="FILE",
        help="Input video file. Repeat the flag or separate paths with commas for several files.",
    )
    parser.add_argument(
        "-f", "--format", default=DEFAULT_OUTPUT_FORMAT, help="Output format (mp4, mkv, avi, etc)."
    )
    parser.add_argument(
        "-q", "--quality", default=DEFAULT_QUALITY, help="Quality preset (low, medium, high)."
    )
    parser.add_argument(
        "-r", "--resolution", default="", help="Output resolution (e.g., 1920x1080)."
    )
    parser.add_argument(
        "-c", "--concurrent", action="store_true", help="Process files concurrently."
    )
    parser.add_argument(
        "-o", "--output-dir", default="",
        help="Output directory, created if missing (default: current directory).",
    )
    parser.add_argument(
        "-C", "--compress", default="", help="Compression preset (light, medium, heavy)."
    )
    parser.add_argument(
        "--target-size", default="", help="Target file size in MB (e.g., '100M'), assuming a 10-minute video."
    )
    parser.add_argument(
        "--vbitrate", default="", help="Video bitrate (e.g., '1M', '2M')."
    )
    parser.add_argument(
        "--abitrate", default="", help="Audio bitrate (e.g., '128k', '192k')."
    )
    parser.add_argument(
        "--max-workers", type=_positive_int, default=None,
        help="Limit the number of concurrent conversions (default: one per file).",
    )
    parser.add_argument(
        "--log-level", type=str, default=DEFAULT_LOG_LEVEL, choices=list(LOG_LEVELS),
        help="Set the logging level.",
    )
    return parser


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for vconvert.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed command-line arguments.
    """
    return build_parser().parse_args(argv)


def split_inputs(values: Sequence[str]) -> List[str]:
    """Flattens repeated and comma-separated `--input` values, dropping empty entries."""
    inputs: List[str] = []
    for value in values:
        inputs.extend(part.strip() for part in value.split(",") if part.strip())
    return inputs


def options_from_args(args: argparse.Namespace) -> ConvertOptions:
    """
    Builds the `ConvertOptions` for a run from parsed arguments.

    Option values outside the documented choices are accepted as they are, but a
    warning explains what they will do.
    """
    if args.quality not in QUALITY_LEVELS:
        logger.warning(f"Unknown quality preset '{args.quality}', using the medium preset.")
    if args.compress and args.compress not in COMPRESSION_PRESETS:
        logger.warning(f"Unknown compression preset '{args.compress}', no compression preset will be applied.")
    if args.target_size and not is_valid_target_size(args.target_size):
        logger.warning(f"Target size '{args.target_size}' is not a whole number of megabytes; the bitrate cap will be 0.")

    return ConvertOptions(
        input_files=tuple(split_inputs(args.input)),
        output_format=args.format,
        quality=args.quality,
        resolution=args.resolution,
        concurrent=args.concurrent,
        output_dir=args.output_dir,
        compression_level=args.compress,
        target_size=args.target_size,
        video_bitrate=args.vbitrate,
        audio_bitrate=args.abitrate,
        max_workers=args.max_workers,
    )
