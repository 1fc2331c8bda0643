# topmark:header:start
#
#   project      : tgcom
#   file         : main.py
#   file_relpath : src/tgcom/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""tgcom command-line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tgcom.cli.commands.apply import apply_command
from tgcom.cli.commands.languages import languages_command
from tgcom.cli.commands.version import version_command
from tgcom.cli.console import ClickConsole
from tgcom.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tgcom.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from tgcom.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on ``ctx.obj``."""
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment, not by -v/-q
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Toggle, comment, or uncomment lines in source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the tgcom CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tgcom apply -f FILE:LINES' to toggle comments.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(apply_command)

cli.add_command(languages_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
