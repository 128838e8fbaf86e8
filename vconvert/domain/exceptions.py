"""
Defines custom exception types for vconvert.

These exceptions allow for more specific error handling throughout the converter.
Run-level problems (no usable input, an output directory that cannot be created)
stop the whole run, while the `ConversionException` family is contained by the
runner of the single job it belongs to.

All custom exceptions inherit from the base `VideoConvertException`.
"""


class VideoConvertException(Exception):
    """Base class for all custom exceptions in vconvert."""

    pass


# --- Run-level Exceptions ---
class OutputDirectoryException(VideoConvertException):
    """
    Raised when the requested output directory cannot be created.

    This is fatal to the whole run and is raised before any job is started.
    """

    pass


class NoValidInputException(VideoConvertException):
    """Raised when none of the given input files exist."""

    pass


# --- Job-level Exceptions ---
class ConversionException(VideoConvertException):
    """Base class for failures of a single conversion job."""

    pass


class SubprocessFailedException(ConversionException):
    """
    Raised when FFmpeg exits with a non-zero status or cannot be started at all.

    Attributes:
        returncode: The exit status of FFmpeg, or None if it never ran.
        output: Combined stdout and stderr captured from FFmpeg.
    """

    def __init__(self, message: str, returncode: int | None = None, output: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class OutputCommitException(ConversionException):
    """
    Raised when a successful conversion cannot be moved onto its final path.

    This covers both removing an already existing output file and renaming the
    temporary file into place.
    """

    pass
