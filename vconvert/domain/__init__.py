"""
This package contains the domain models of vconvert.

The domain layer holds the plain data the rest of the application passes around.
It does not run FFmpeg or touch the filesystem, which keeps the option model and
the job objects trivially testable.

Modules:
    exceptions.py: Custom exception types for run-level and job-level failures.
    options.py: `ConvertOptions`, the immutable set of user-facing parameters.
    job.py: `ConversionJob`, one input file with its resolved output path.
"""
