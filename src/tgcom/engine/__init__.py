# topmark:header:start
#
#   project      : tgcom
#   file         : __init__.py
#   file_relpath : src/tgcom/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Mutation engine: scan a source, transform selected lines, commit the result."""

from __future__ import annotations

from tgcom.engine.engine import apply
from tgcom.engine.result import LineChange, MutationResult, WriteStatus

__all__ = [
    "LineChange",
    "MutationResult",
    "WriteStatus",
    "apply",
]
