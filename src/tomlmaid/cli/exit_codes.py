# topmark:header:start
#
#   project      : TOML Maid
#   file         : exit_codes.py
#   file_relpath : src/tomlmaid/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Exit codes for the TOML Maid CLI.

Values follow the BSD `sysexits` convention where practical. The one deliberate
divergence is `WOULD_CHANGE=2`, signalling that ``--check`` found files that are
not formatted. Click's own usage errors also exit with 2, so tests must assert
``result.exception is None`` (or inspect the output) to tell them apart.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TOML Maid CLI.

    Attributes:
        SUCCESS: Every file is formatted (or was rewritten successfully).
        FAILURE: Generic failure.
        WOULD_CHANGE: ``--check`` found at least one file that would change.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: A file is not well-formed TOML (or not valid UTF-8).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid ``toml-maid.toml``. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
