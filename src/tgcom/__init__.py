# topmark:header:start
#
#   project      : tgcom
#   file         : __init__.py
#   file_relpath : src/tgcom/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""tgcom package.

tgcom comments, uncomments, or toggles single-line comments on selected lines of
source files. Lines are selected by numeric range or by a pair of text labels, and
the comment marker is resolved from the language name or the file extension.

The engine is exposed as a small typed API (`tgcom.engine.apply`,
`tgcom.batch.apply_all`) and through the ``tgcom`` Click CLI.
"""

from __future__ import annotations
