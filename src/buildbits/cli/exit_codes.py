# topmark:header:start
#
#   project      : BuildBits
#   file         : exit_codes.py
#   file_relpath : src/buildbits/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the BuildBits CLI.

BuildBits aligns with the BSD `sysexits` convention so that build scripts and
editors invoking it can tell a misconfiguration from a failing tool.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BuildBits CLI.

    Attributes:
        SUCCESS: Every job succeeded.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid flags/args. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_FILE_TYPE: No backend for an input's extension. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        BACKEND_ERROR: A backend failed or reported failure. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error around a job. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid input path or malformed configuration. Mirrors
            BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    BACKEND_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
