"""
This module provides utility functions for interacting with FFmpeg.
It includes a wrapper for running command-line processes and helpers to locate
and verify the FFmpeg executable.
"""

import os
import shlex
import subprocess
import sys
from typing import List, Optional

from loguru import logger

from ..config.common import MODULE_PATH


def format_cmd(cmd_list: List[str]) -> str:
    """Returns a copy-pasteable representation of a command list."""
    if os.name == "nt":
        return subprocess.list2cmdline(cmd_list)
    return shlex.join(cmd_list)


def run_cmd(cmd_list: List[str], show_cmd: bool = False) -> Optional[subprocess.CompletedProcess]:
    """
    Executes an external command and captures its combined output.

    This is a wrapper around `subprocess.run` that merges stderr into stdout, so
    FFmpeg's diagnostics and regular output end up in `result.stdout` in the
    order they were written.

    Args:
        cmd_list: The command to execute as a list of arguments. No shell is used.
        show_cmd: If True, the command is logged at the DEBUG level before execution.

    Returns:
        A `subprocess.CompletedProcess` object once the command has finished,
        whatever its exit status. Returns `None` if the command could not be
        started at all (e.g. the executable does not exist).
    """
    if not cmd_list:
        logger.error("run_cmd received an empty command list.")
        return None

    display_cmd_str = format_cmd(cmd_list)
    if show_cmd:
        logger.debug(f"Executing command: {display_cmd_str}")

    try:
        result = subprocess.run(
            cmd_list,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            shell=False,
        )
    except FileNotFoundError:
        logger.error(
            f"Error: Command not found (e.g., '{cmd_list[0]}'). Ensure it's in your system's PATH or configured correctly."
        )
        return None
    except OSError as e:
        logger.error(f"Could not start command '{display_cmd_str}': {e}")
        return None

    if result.stdout and result.returncode != 0:
        logger.debug(f"Command output (rc={result.returncode}): {result.stdout}")
    elif result.stdout:
        logger.trace(f"Command output (rc={result.returncode}): {result.stdout}")
    return result


def get_ffmpeg_path() -> str:
    """
    Determines the FFmpeg executable to use.

    The `ffmpeg_dir` entry from the user configuration wins when it contains the
    executable. Otherwise 'ffmpeg' is returned, which relies on the executable
    being available in the system's PATH.
    """
    ffmpeg_exe_name = "ffmpeg.exe" if sys.platform == "win32" else "ffmpeg"

    if MODULE_PATH and MODULE_PATH.is_dir():
        configured_ffmpeg_path = MODULE_PATH / ffmpeg_exe_name
        if configured_ffmpeg_path.is_file():
            return str(configured_ffmpeg_path)
        logger.warning(f"`ffmpeg_dir` is configured, but '{ffmpeg_exe_name}' was not found there. Falling back to system PATH.")

    return "ffmpeg"


def verify_ffmpeg() -> bool:
    """
    Checks that FFmpeg can be executed by running `ffmpeg -version`.

    The first line of the version output is logged on success. A failure is only
    logged: the conversion jobs will then fail one by one with their own errors.

    Returns:
        True if FFmpeg answered with a zero exit status.
    """
    result = run_cmd([get_ffmpeg_path(), "-version"])
    if result is None:
        logger.error(
            "FFmpeg command not found. Please ensure FFmpeg is installed and accessible.\n"
            "You can either add it to your system's PATH or specify its location in the 'config.user.yaml' file."
        )
        return False
    if result.returncode != 0:
        logger.error(f"FFmpeg version command failed (return code {result.returncode}):\n{result.stdout}")
        return False

    version_output_lines = (result.stdout or "").splitlines()
    if version_output_lines:
        logger.info(f"FFmpeg version check successful: {version_output_lines[0]}")
    return True
