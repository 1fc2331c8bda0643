# topmark:header:start
#
#   project      : tgcom
#   file         : __init__.py
#   file_relpath : src/tgcom/languages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Language registry: language names and extensions to comment markers."""

from __future__ import annotations

from tgcom.languages.base import (
    CommentMarker,
    Language,
    PairedMarker,
    SimpleMarker,
    marker_from_string,
)
from tgcom.languages.registry import LanguageRegistry, get_language_registry, resolve_marker

__all__ = [
    "CommentMarker",
    "Language",
    "LanguageRegistry",
    "PairedMarker",
    "SimpleMarker",
    "get_language_registry",
    "marker_from_string",
    "resolve_marker",
]
