# topmark:header:start
#
#   project      : tgcom
#   file         : __init__.py
#   file_relpath : src/tgcom/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Configuration: logging setup, TOML discovery and loading, and the run config model.

Import the submodules directly (`tgcom.config.model`, `tgcom.config.io`); this
package module stays empty because the language registry imports
`tgcom.config.logging` at import time.
"""
