"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants that are
used across the whole converter. It centralizes parameters for logging, temporary
file naming and job status tracking. It also handles the loading of user-specific
configuration from an external YAML file, so the location of FFmpeg can be changed
without modifying the source code.
"""
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Path Configuration ---
# This block loads user-specific paths from a 'config.user.yaml' file located
# at the project root. This allows users to point at a specific FFmpeg build
# without hardcoding paths.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# The directory containing the FFmpeg executable. This is loaded from
# 'config.user.yaml'. If not provided or None, the application assumes the
# executable is available in the system's PATH.
MODULE_PATH: Path | None = None

if USER_CONFIG_PATH.is_file():
    try:
        with USER_CONFIG_PATH.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
        if user_config and "paths" in user_config:
            paths_config = user_config.get("paths") or {}
            ffmpeg_dir_str = paths_config.get("ffmpeg_dir")
            if ffmpeg_dir_str:
                MODULE_PATH = Path(ffmpeg_dir_str)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{USER_CONFIG_PATH}': {e}")
else:
    logger.debug(f"User config '{USER_CONFIG_PATH}' not found. Relying on system PATH for executables.")


# --- Logging Configuration ---

# The format string for the Loguru logger. `{thread.name}` is shown instead of the
# process id because concurrent conversions run on worker threads.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "{thread.name} - <level>{message}</level>"
)

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# --- Temporary Output Files ---

# FFmpeg writes to `<output dir>/<TEMP_FILE_PREFIX><output name>` first. The file is
# renamed onto the final output path only after FFmpeg exits successfully, so the
# final path is never observed half-written. It lives next to the final output so
# that the rename never crosses a filesystem boundary.
TEMP_FILE_PREFIX = "tmp_"


# --- Job Status Constants ---
# A conversion job moves from pending to running, then to exactly one of the
# terminal states. Jobs are never retried or resumed.

JOB_STATUS_PENDING = "pending"  # Built, not yet handed to a runner.
JOB_STATUS_RUNNING = "running"  # FFmpeg has been started for the job.
JOB_STATUS_SUCCEEDED = "succeeded"  # Output committed to its final path.
JOB_STATUS_FAILED = "failed"  # FFmpeg or the commit step failed.
