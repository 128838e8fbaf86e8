"""
The option model: every user-facing conversion parameter in one immutable object.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.video import DEFAULT_OUTPUT_FORMAT, DEFAULT_QUALITY


@dataclass(frozen=True)
class ConvertOptions:
    """
    Conversion parameters shared by every file of a run.

    Built once from the parsed command line and passed by value to the job
    builder. String options use an empty string for "unset".

    Attributes:
        input_files: Input paths in the order they were given.
        output_format: Output container, used as the output file extension.
        quality: Quality preset name (low, medium, high).
        resolution: A WIDTHxHEIGHT string handed to FFmpeg's scale filter.
        concurrent: Whether jobs run in parallel.
        output_dir: Destination directory. Empty means the current directory.
        compression_level: Compression preset name (light, medium, heavy).
        target_size: Target size in megabytes, e.g. "100M".
        video_bitrate: Explicit video bitrate, e.g. "2M".
        audio_bitrate: Explicit audio bitrate, e.g. "128k".
        max_workers: Upper bound on parallel jobs. None starts one per job.
    """

    input_files: Tuple[str, ...] = ()
    output_format: str = DEFAULT_OUTPUT_FORMAT
    quality: str = DEFAULT_QUALITY
    resolution: str = ""
    concurrent: bool = False
    output_dir: str = ""
    compression_level: str = ""
    target_size: str = ""
    video_bitrate: str = ""
    audio_bitrate: str = ""
    max_workers: Optional[int] = None
