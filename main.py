"""
Main entry point for vconvert.

This script parses the command-line arguments, configures logging, builds one
conversion job per existing input file and hands the jobs to the conversion
pipeline.

Exit status is 1 when the output directory cannot be created or when none of the
inputs exist. Otherwise it is 0, even if some conversions failed; the failures
are reported in the log output only.
"""

import sys
from typing import Optional, Sequence

from loguru import logger

from vconvert.cli import get_args, options_from_args
from vconvert.config.common import DEFAULT_LOG_LEVEL, LOGGER_FORMAT
from vconvert.domain.exceptions import NoValidInputException, OutputDirectoryException
from vconvert.pipeline.convert_pipeline import ConvertPipeline
from vconvert.services.job_builder import build_jobs, ensure_output_dir
from vconvert.utils.ffmpeg_utils import verify_ffmpeg


def configure_logger(level: str = DEFAULT_LOG_LEVEL):
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOGGER_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Runs one conversion batch.

    1. Parses the command-line arguments into `ConvertOptions`.
    2. Creates the output directory if one was requested.
    3. Builds the jobs, skipping inputs that do not exist.
    4. Checks that FFmpeg can be started.
    5. Runs the jobs sequentially or concurrently.

    Returns:
        The process exit status.
    """
    args = get_args(argv)
    configure_logger(args.log_level)
    logger.debug(f"Parsed arguments: {args}")

    options = options_from_args(args)

    try:
        ensure_output_dir(options.output_dir)
        jobs = build_jobs(options)
        if not jobs:
            raise NoValidInputException("No valid input files to process")
    except (OutputDirectoryException, NoValidInputException) as e:
        logger.error(str(e))
        return 1

    verify_ffmpeg()

    ConvertPipeline(jobs, concurrent=options.concurrent, max_workers=options.max_workers).run()

    logger.success("All conversions completed!")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
