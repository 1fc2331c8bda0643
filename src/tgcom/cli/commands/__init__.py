# topmark:header:start
#
#   project      : tgcom
#   file         : __init__.py
#   file_relpath : src/tgcom/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Subcommands of the tgcom CLI."""
