# topmark:header:start
#
#   project      : tgcom
#   file         : constants.py
#   file_relpath : src/tgcom/constants.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""tgcom Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TGCOM_VERSION: str = get_version("tgcom")
except PackageNotFoundError:  # running from a source checkout
    TGCOM_VERSION = "0.0.0"

# Transient siblings created next to a file while it is rewritten
BACKUP_SUFFIX: Final[str] = ".bak"
TEMP_SUFFIX: Final[str] = ".tmp"

# Sentinel used on the command line for standard input
STDIN_SENTINEL: Final[str] = "-"

# Config discovery
TGCOM_TOML_NAME: Final[str] = "tgcom.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Environment variable selecting the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "TGCOM_LOG_LEVEL"

DEFAULT_NEWLINE: Final[str] = "\n"
FILE_ENCODING: Final[str] = "utf-8"
