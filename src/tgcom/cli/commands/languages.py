# topmark:header:start
#
#   project      : tgcom
#   file         : languages.py
#   file_relpath : src/tgcom/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""tgcom `languages` command.

Lists every known language with its comment marker and file extensions,
including custom languages and extension mappings from configuration files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tgcom.cli.errors import to_cli_error
from tgcom.cli.keys import CliCmd
from tgcom.cli.options import CONTEXT_SETTINGS, common_config_options
from tgcom.config.model import MutableRunConfig
from tgcom.errors import TgcomError

if TYPE_CHECKING:
    from tgcom.cli.console_api import ConsoleLike
    from tgcom.languages.registry import LanguageRegistry


@click.command(
    name=CliCmd.LANGUAGES,
    context_settings=CONTEXT_SETTINGS,
    help="List supported languages, their comment markers, and file extensions.",
)
@common_config_options
@click.pass_context
def languages_command(
    ctx: click.Context,
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """List the language registry, honoring config overlays."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    try:
        config = MutableRunConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        ).freeze()
    except TgcomError as exc:
        raise to_cli_error(exc) from exc
    registry: LanguageRegistry = config.registry
    extensions_by_language: dict[str, list[str]] = registry.extensions_by_language()

    if vlevel <= logging.INFO:
        console.print(console.styled(f"Supported languages ({len(registry)}):", bold=True))
        console.print()

    width: int = max((len(lang.name) for lang in registry), default=0)
    for lang in registry:
        exts: str = ", ".join(extensions_by_language.get(lang.name, [])) or "-"
        line = (
            f"{console.styled(lang.name.ljust(width), bold=True)}  "
            f"{console.styled(str(lang.marker).ljust(9), fg='cyan')}  {exts}"
        )
        if vlevel <= logging.DEBUG and lang.aliases:
            line += f"  (aliases: {', '.join(lang.aliases)})"
        console.print(line)
