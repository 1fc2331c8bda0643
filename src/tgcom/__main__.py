# topmark:header:start
#
#   project      : tgcom
#   file         : __main__.py
#   file_relpath : src/tgcom/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Module entry point for running tgcom via ``python -m tgcom``.

Delegates directly to :func:`tgcom.cli.main.cli` so there is a single CLI entry
point regardless of how tgcom is launched.

Examples:
    Toggle lines 3 to 7 of a Go file::

        python -m tgcom apply main.go -l 3-7
"""

from __future__ import annotations

from tgcom.cli.main import cli

if __name__ == "__main__":
    cli()
