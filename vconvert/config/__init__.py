"""
Configuration Package for vconvert.

This package centralizes the static configuration settings for the application.
Keeping configuration apart from the application logic means presets and defaults
can be adjusted without touching the code that uses them.

This package includes settings for:
- Common application settings like the logging format, the temporary file prefix
  and job statuses.
- The user-overridable location of the FFmpeg executable.
- Video conversion defaults and the compression and quality presets.
"""
