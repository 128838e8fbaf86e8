"""
vconvert: batch video conversion through FFmpeg.

The package builds FFmpeg command lines from a small set of user-facing options
and runs one FFmpeg process per input file, sequentially or concurrently. Each
output is written to a temporary file first and renamed into place only when
FFmpeg succeeded.
"""
