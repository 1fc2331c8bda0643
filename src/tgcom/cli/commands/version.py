# topmark:header:start
#
#   project      : tgcom
#   file         : version.py
#   file_relpath : src/tgcom/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""tgcom `version` command.

Prints the tgcom version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from tgcom.cli.keys import CliCmd
from tgcom.constants import TGCOM_VERSION

if TYPE_CHECKING:
    from tgcom.cli.console_api import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of tgcom.",
)
def version_command() -> None:
    """Show the current version of tgcom."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    if vlevel <= logging.INFO:
        console.print(console.styled("tgcom version:", bold=True, underline=True))
        console.print(f"    {console.styled(TGCOM_VERSION, bold=True)}")
    else:
        console.print(console.styled(TGCOM_VERSION, bold=True))
