# topmark:header:start
#
#   project      : tgcom
#   file         : exit_codes.py
#   file_relpath : src/tgcom/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Exit codes returned by the tgcom CLI.

Codes above 1 follow the BSD ``sysexits.h`` conventions so scripts can tell
usage mistakes, bad input data, and I/O failures apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the tgcom CLI.

    Usage:
        ```python
        import subprocess
        from tgcom.cli.exit_codes import ExitCode

        result = subprocess.run(["tgcom", "apply", "-f", "main.go:3-5"])
        if result.returncode == ExitCode.DATA_ERROR:
            print("range or labels do not match the file")
        ```
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR (range/labels vs. content, undecodable text)
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_LANGUAGE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
