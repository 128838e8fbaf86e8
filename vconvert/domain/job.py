"""
Defines the `ConversionJob` value object handed from the job builder to the runner.
"""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConversionJob:
    """
    One independent file conversion with fully resolved paths.

    `output_file` is only ever written by renaming a finished temporary file onto
    it. The remaining fields are copied from `ConvertOptions`; an empty string
    means the option is unset.
    """

    input_file: Path
    output_file: Path
    quality: str = ""
    resolution: str = ""
    compression_level: str = ""
    target_size: str = ""
    video_bitrate: str = ""
    audio_bitrate: str = ""
