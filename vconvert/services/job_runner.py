"""
Runs a single conversion job and commits its output atomically.

FFmpeg always writes to a temporary file next to the final output. Only after
FFmpeg exits with status 0 is an existing output removed and the temporary file
renamed into place. Any failure removes the temporary file and leaves the final
output path as it was.
"""
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..config.common import (
    JOB_STATUS_FAILED,
    JOB_STATUS_PENDING,
    JOB_STATUS_RUNNING,
    JOB_STATUS_SUCCEEDED,
    TEMP_FILE_PREFIX,
)
from ..domain.exceptions import ConversionException, OutputCommitException, SubprocessFailedException
from ..domain.job import ConversionJob
from ..utils.ffmpeg_utils import get_ffmpeg_path, run_cmd
from ..utils.format_utils import format_timedelta, formatted_size
from .argument_translator import get_ffmpeg_args


def temp_output_path(output_file: Path) -> Path:
    """The in-progress path FFmpeg writes to, in the same directory as `output_file`."""
    return output_file.with_name(TEMP_FILE_PREFIX + output_file.name)


class JobRunner:
    """
    Executes one `ConversionJob`.

    A runner is used exactly once. `status` moves from pending to running and
    ends as either succeeded or failed.
    """

    def __init__(self, job: ConversionJob):
        self.job = job
        self.temp_file = temp_output_path(job.output_file)
        self.status = JOB_STATUS_PENDING
        self.error: Optional[ConversionException] = None

    def build_command(self) -> List[str]:
        """The full FFmpeg command, writing to the temporary file instead of the output."""
        args = get_ffmpeg_args(self.job)
        args[-1] = str(self.temp_file)
        return [get_ffmpeg_path(), *args]

    def run(self) -> bool:
        """
        Converts the input and commits the result.

        Failures are logged and recorded on `self.error`; they never propagate,
        so one failing job cannot stop the others.

        Returns:
            True if the output file was committed.
        """
        logger.info(f"Converting {self.job.input_file} to {self.job.output_file}...")
        start_time = datetime.now()
        self.status = JOB_STATUS_RUNNING

        try:
            self._encode()
            self._commit()
        except ConversionException as e:
            self.status = JOB_STATUS_FAILED
            self.error = e
            self._log_failure(e)
            self._remove_temp_file()
            return False

        self.status = JOB_STATUS_SUCCEEDED
        elapsed = format_timedelta(datetime.now() - start_time)
        size = formatted_size(self.job.output_file.stat().st_size)
        logger.success(f"Successfully converted {self.job.input_file} (took {elapsed}, {size})")
        return True

    def _encode(self):
        result = run_cmd(self.build_command(), show_cmd=True)
        if result is None:
            raise SubprocessFailedException(f"Could not start FFmpeg for {self.job.input_file}")
        if result.returncode != 0:
            raise SubprocessFailedException(
                f"FFmpeg exited with status {result.returncode}",
                returncode=result.returncode,
                output=result.stdout or "",
            )

    def _commit(self):
        output_file = self.job.output_file
        if not self.temp_file.is_file():
            raise OutputCommitException(f"FFmpeg reported success but did not write {self.temp_file}")

        if output_file.exists():
            try:
                output_file.unlink()
            except OSError as e:
                raise OutputCommitException(f"Error removing existing file {output_file}: {e}") from e

        try:
            self.temp_file.rename(output_file)
        except OSError as e:
            raise OutputCommitException(f"Error moving temp file to final location {output_file}: {e}") from e

    def _log_failure(self, error: ConversionException):
        logger.error(f"Error converting {self.job.input_file}: {error}")
        if isinstance(error, SubprocessFailedException) and error.output:
            logger.error(f"FFmpeg output for {self.job.input_file}:\n{error.output}")

    def _remove_temp_file(self):
        try:
            self.temp_file.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not delete temporary file {self.temp_file}: {e}")


def run_job(job: ConversionJob) -> bool:
    """Runs `job` with a fresh `JobRunner` and returns whether it succeeded."""
    return JobRunner(job).run()
