# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : exit_codes.py
#   file_relpath : src/cargo_markdown_versions/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the cargo-markdown-versions CLI.

The values follow the BSD `sysexits` convention where practical, so that
shell scripts and CI jobs can tell a configuration problem from a network
outage without parsing the error message.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the cargo-markdown-versions CLI.

    Attributes:
        SUCCESS: The document was rendered and written to stdout.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: The registry answered with data that does not match the
            expected schema. Mirrors BSD ``EX_DATAERR (65)``.
        NO_INPUT: The manifest or the target package cannot be found. Mirrors
            BSD ``EX_NOINPUT (66)``.
        UNAVAILABLE: The registry could not be reached or refused the request.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: Reading the git repository or the readme failed. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid configuration or tags pattern. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    NO_INPUT = 66  # EX_NOINPUT
    UNAVAILABLE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
