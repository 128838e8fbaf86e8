"""
Services Package for vconvert.

This package contains the service layer. Each service performs one step of a
conversion, and the pipeline strings them together.

- **Job Builder (`build_jobs`):**
  Checks that the input files exist and turns them, together with the shared
  options, into `ConversionJob` objects with resolved output paths.

- **Argument Translator (`get_ffmpeg_args`):**
  A pure function mapping one job to the ordered FFmpeg argument list, applying
  option precedence and deriving the bitrate cap from a target size.

- **Job Runner (`JobRunner`):**
  Runs FFmpeg for one job against a temporary file and renames the result onto
  the final output path only when FFmpeg succeeded.
"""
