"""
Expands the input paths and shared options of a run into `ConversionJob` objects.
"""
from collections import Counter
from pathlib import Path
from typing import List

from loguru import logger

from ..domain.exceptions import OutputDirectoryException
from ..domain.job import ConversionJob
from ..domain.options import ConvertOptions


def resolve_output_file(input_file: Path, output_dir: str, output_format: str) -> Path:
    """
    Returns `<output_dir>/<input stem>.<output_format>`.

    An empty `output_dir` places the output in the current working directory.
    Only the last extension of the input is replaced, so "a.b.mkv" becomes "a.b.mp4".
    """
    return Path(output_dir) / f"{input_file.stem}.{output_format}"


def build_jobs(options: ConvertOptions) -> List[ConversionJob]:
    """
    Creates one job per existing input file, in input order.

    Inputs that do not exist are skipped with a warning. Two inputs that resolve
    to the same output file are both kept but reported, since they would overwrite
    each other.
    """
    jobs: List[ConversionJob] = []
    for input_str in options.input_files:
        input_file = Path(input_str)
        if not input_file.exists():
            logger.warning(f"Input file '{input_str}' does not exist, skipping")
            continue

        jobs.append(
            ConversionJob(
                input_file=input_file,
                output_file=resolve_output_file(input_file, options.output_dir, options.output_format),
                quality=options.quality,
                resolution=options.resolution,
                compression_level=options.compression_level,
                target_size=options.target_size,
                video_bitrate=options.video_bitrate,
                audio_bitrate=options.audio_bitrate,
            )
        )

    output_counts = Counter(job.output_file for job in jobs)
    for output_file, count in output_counts.items():
        if count > 1:
            logger.warning(f"{count} inputs convert to the same output file '{output_file}'; they will overwrite each other.")

    logger.debug(f"Built {len(jobs)} conversion job(s) from {len(options.input_files)} input(s).")
    return jobs


def ensure_output_dir(output_dir: str):
    """
    Creates `output_dir` and any missing parents. An empty value means the current
    directory and needs no action.

    Raises:
        OutputDirectoryException: If the directory cannot be created.
    """
    if not output_dir:
        return
    try:
        Path(output_dir).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryException(f"Error creating output directory '{output_dir}': {e}") from e
