"""
Configuration settings related to video conversion.

This module defines the CLI defaults, the encoder presets selected by the
`--compress` and `--quality` options, and the constants used when a target file
size is turned into a bitrate cap.
"""

# --- CLI Defaults ---
DEFAULT_OUTPUT_FORMAT = "mp4"
DEFAULT_QUALITY = "medium"

# --- Compression Presets ---
# Each level selects a fixed (video codec, CRF, encoder speed preset, audio codec,
# audio bitrate) tuple. A lower CRF means higher visual quality.
COMPRESSION_VIDEO_CODEC = "libx264"
COMPRESSION_SPEED_PRESET = "medium"
COMPRESSION_AUDIO_CODEC = "aac"
COMPRESSION_PRESETS = {
    "light": {"crf": 23, "audio_bitrate": "128k"},
    "medium": {"crf": 28, "audio_bitrate": "96k"},
    "heavy": {"crf": 32, "audio_bitrate": "64k"},
}

# --- Quality Presets ---
# Only used when no compression level is given. Codec and audio settings are left
# to FFmpeg's own defaults in that case.
QUALITY_CRF = {
    "low": 28,
    "high": 18,
}
DEFAULT_QUALITY_CRF = 23
QUALITY_LEVELS = ("low", "medium", "high")

# --- Target Size ---
# The target size option is a number of megabytes with an optional "M" suffix.
TARGET_SIZE_SUFFIX = "M"
# The bitrate cap derived from a target size assumes every input is ten minutes
# long. The actual media duration is never probed.
ASSUMED_DURATION_SECONDS = 600
