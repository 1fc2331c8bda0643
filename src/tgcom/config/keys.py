# topmark:header:start
#
#   project      : tgcom
#   file         : keys.py
#   file_relpath : src/tgcom/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""TOML section and key names for tgcom configuration.

These strings are the external configuration schema as it appears in
``tgcom.toml`` and in ``[tool.tgcom]`` inside ``pyproject.toml``. Renaming one is
a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by tgcom configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # pyproject.toml nesting: [tool.tgcom]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TGCOM: Final[str] = "tgcom"

    # [defaults]
    SECTION_DEFAULTS: Final[str] = "defaults"

    KEY_ACTION: Final[str] = "action"
    KEY_DRY_RUN: Final[str] = "dry_run"
    KEY_DIFF: Final[str] = "diff"

    # [languages]: custom language name -> marker string
    SECTION_LANGUAGES: Final[str] = "languages"

    # [extensions]: file extension -> language name
    SECTION_EXTENSIONS: Final[str] = "extensions"
