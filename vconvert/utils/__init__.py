"""
Utilities Package for vconvert.

Helper modules that support the services without belonging to any single one of
them.

Modules:
    - ffmpeg_utils.py: Runs external commands and locates and verifies FFmpeg.
    - format_utils.py: Formats elapsed times and file sizes for log output.
"""
