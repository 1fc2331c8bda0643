# topmark:header:start
#
#   project      : tgcom
#   file         : keys.py
#   file_relpath : src/tgcom/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""CLI command names, long option spellings, and argument keys.

Argument keys (``ArgKey``) are the Click destination names; they double as the
keys understood by `tgcom.config.model.MutableRunConfig.apply_cli_args`.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the tgcom CLI."""

    APPLY: Final[str] = "apply"
    LANGUAGES: Final[str] = "languages"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (short options live with the Click options)."""

    FILE: Final[str] = "--file"
    LINE: Final[str] = "--line"
    START_LABEL: Final[str] = "--start-label"
    END_LABEL: Final[str] = "--end-label"
    ACTION: Final[str] = "--action"
    LANGUAGE: Final[str] = "--language"
    MARKER: Final[str] = "--marker"
    DRY_RUN: Final[str] = "--dry-run"
    DIFF: Final[str] = "--diff"
    CONFIG: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"


class ArgKey:
    """Destination keys of parsed CLI arguments."""

    FILES: Final[str] = "files"
    TARGETS: Final[str] = "targets"
    LINE: Final[str] = "line"
    START_LABEL: Final[str] = "start_label"
    END_LABEL: Final[str] = "end_label"
    ACTION: Final[str] = "action"
    LANGUAGE: Final[str] = "language"
    MARKER: Final[str] = "marker"
    DRY_RUN: Final[str] = "dry_run"
    DIFF: Final[str] = "diff"
    CONFIG_PATHS: Final[str] = "config_paths"
    NO_CONFIG: Final[str] = "no_config"
