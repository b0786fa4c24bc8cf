# epv:header:start
#
#   project      : EPV
#   file         : exit_codes.py
#   file_relpath : src/epv/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Exit codes for the EPV CLI.

EPV aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the EPV CLI.

    Attributes:
        SUCCESS: Every path was classified and no blocking diagnostic was raised.
        FAILURE: At least one path raised a fatal diagnostic, or an error-level
            diagnostic that blocks a clean exit.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE

    UNEXPECTED_ERROR = 255
