# topmark:header:start
#
#   project      : tgcom
#   file         : __init__.py
#   file_relpath : src/tgcom/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Command-line interface for tgcom (Click)."""
