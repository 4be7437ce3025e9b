# topmark:header:start
#
#   project      : MakeHelp
#   file         : exit_codes.py
#   file_relpath : src/makehelp/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the MakeHelp CLI.

MakeHelp aligns with the BSD ``sysexits`` convention so that build tooling can
tell a bad invocation from a bad model file or a failed write.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the MakeHelp CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; prefer a more specific code.
        USAGE_ERROR: Invalid flags or arguments (unknown format or target).
            Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: The documentation model is malformed. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        RENDER_ERROR: A renderer rejected its input. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: Writing the output failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration file or value. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    RENDER_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
