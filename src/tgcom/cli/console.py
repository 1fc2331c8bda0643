# topmark:header:start
#
#   project      : tgcom
#   file         : console.py
#   file_relpath : src/tgcom/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Click-backed console for user-facing program output.

Summaries, previews, and error messages go through `ClickConsole`; internal
diagnostics go through `logging` (see `tgcom.config.logging`).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from tgcom.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, emit ANSI styles; otherwise plain text.
        out (TextIO | None): Stream for standard output (default ``sys.stdout``).
        err (TextIO | None): Stream for error output (default ``sys.stderr``).
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` (plain when color is off)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
