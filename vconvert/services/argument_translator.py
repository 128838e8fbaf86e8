"""
Translates a `ConversionJob` into the argument list passed to FFmpeg.

Everything in this module is a pure function of its inputs: no I/O and no
logging. The argument order is fixed:

    -i <input>  [compression or quality preset]  [-b:v]  [-b:a]
    [-maxrate/-bufsize]  [-vf scale=...]  -y <output>

Conflicting directives are not reconciled. An explicit `-b:v` is appended after a
preset's `-crf` and an explicit `-b:a` after a preset's `-b:a`; FFmpeg's own
last-one-wins handling decides between them.
"""
import re
from typing import List

from ..config.video import (
    ASSUMED_DURATION_SECONDS,
    COMPRESSION_AUDIO_CODEC,
    COMPRESSION_PRESETS,
    COMPRESSION_SPEED_PRESET,
    COMPRESSION_VIDEO_CODEC,
    DEFAULT_QUALITY_CRF,
    QUALITY_CRF,
    TARGET_SIZE_SUFFIX,
)
from ..domain.job import ConversionJob

_TARGET_SIZE_NUMBER = re.compile(r"[+-]?\d+")


def _strip_size_suffix(target_size: str) -> str:
    if target_size.endswith(TARGET_SIZE_SUFFIX):
        return target_size[: -len(TARGET_SIZE_SUFFIX)]
    return target_size


def is_valid_target_size(target_size: str) -> bool:
    """Whether `target_size` is an integer number of megabytes, e.g. "100M" or "100"."""
    return _TARGET_SIZE_NUMBER.fullmatch(_strip_size_suffix(target_size)) is not None


def target_size_to_bitrate(target_size: str) -> int:
    """
    Converts a target file size into an average bitrate in bits per second.

    The size is read as whole megabytes with an optional "M" suffix. Every input
    is assumed to last `ASSUMED_DURATION_SECONDS` (ten minutes); the real duration
    of the media is not taken into account. A size that is not an integer is
    treated as 0 rather than rejected.

    >>> target_size_to_bitrate("100M")
    1398101
    """
    if not is_valid_target_size(target_size):
        return 0
    size_mb = int(_strip_size_suffix(target_size))
    total_bits = size_mb * 8 * 1024 * 1024
    # Truncate toward zero so negative sizes mirror positive ones.
    bitrate = abs(total_bits) // ASSUMED_DURATION_SECONDS
    return bitrate if total_bits >= 0 else -bitrate


def _kbps(bitrate: int, divisor: int) -> str:
    value = abs(bitrate) // divisor
    return f"{value if bitrate >= 0 else -value}k"


def _preset_args(job: ConversionJob) -> List[str]:
    if job.compression_level:
        preset = COMPRESSION_PRESETS.get(job.compression_level)
        if preset is None:
            # Unknown compression levels apply no preset at all.
            return []
        return [
            "-c:v", COMPRESSION_VIDEO_CODEC,
            "-crf", str(preset["crf"]),
            "-preset", COMPRESSION_SPEED_PRESET,
            "-c:a", COMPRESSION_AUDIO_CODEC,
            "-b:a", preset["audio_bitrate"],
        ]

    crf = QUALITY_CRF.get(job.quality, DEFAULT_QUALITY_CRF)
    return ["-crf", str(crf)]


def get_ffmpeg_args(job: ConversionJob) -> List[str]:
    """
    Builds the FFmpeg argument list (without the executable) for one job.

    The output path is always the last element, preceded by "-y", so callers can
    swap it for a temporary path.

    Args:
        job: The conversion job to translate.

    Returns:
        The ordered list of FFmpeg arguments.
    """
    args = ["-i", str(job.input_file)]
    args.extend(_preset_args(job))

    if job.video_bitrate:
        args.extend(["-b:v", job.video_bitrate])
    if job.audio_bitrate:
        args.extend(["-b:a", job.audio_bitrate])

    if job.target_size:
        bitrate = target_size_to_bitrate(job.target_size)
        args.extend(["-maxrate", _kbps(bitrate, 1000)])
        args.extend(["-bufsize", _kbps(bitrate, 2000)])

    if job.resolution:
        args.extend(["-vf", f"scale={job.resolution}"])

    args.extend(["-y", str(job.output_file)])
    return args
