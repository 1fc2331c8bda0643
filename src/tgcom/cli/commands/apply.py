# topmark:header:start
#
#   project      : tgcom
#   file         : apply.py
#   file_relpath : src/tgcom/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""tgcom `apply` command.

Comments, uncomments, or toggles the selected lines of one or more files, or of
standard input.

Examples:
    tgcom apply -f main.go:3-5
    tgcom apply -f main.go,script.py:4 -l 1-2 -a comment
    tgcom apply -f index.html -s "<!-- debug -->" -e "<!-- /debug -->" -d
    cat main.go | tgcom apply -l 1-3 -L go
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from tgcom.batch import apply_all, parse_targets
from tgcom.cli.errors import TgcomUsageError, to_cli_error
from tgcom.cli.keys import ArgKey, CliCmd, CliOpt
from tgcom.cli.options import CONTEXT_SETTINGS, common_config_options
from tgcom.config.logging import get_logger
from tgcom.config.model import MutableRunConfig
from tgcom.engine.result import WriteStatus
from tgcom.errors import BatchError, TgcomError
from tgcom.selection import Target, TargetSpec
from tgcom.transform import Action
from tgcom.utils.diff import render_patch

if TYPE_CHECKING:
    from tgcom.cli.console_api import ConsoleLike
    from tgcom.config.logging import TgcomLogger
    from tgcom.config.model import RunConfig
    from tgcom.engine.result import MutationResult

logger: TgcomLogger = get_logger(__name__)


def _check_exclusive_options(
    *,
    line: str | None,
    start_label: str | None,
    end_label: str | None,
    language: str | None,
    marker: str | None,
) -> None:
    if (start_label is None) != (end_label is None):
        raise TgcomUsageError(
            f"'{CliOpt.START_LABEL}' and '{CliOpt.END_LABEL}' must be given together."
        )
    if line is not None and start_label is not None:
        raise TgcomUsageError(
            f"Specify either '{CliOpt.LINE}' or "
            f"'{CliOpt.START_LABEL}'/'{CliOpt.END_LABEL}', not both."
        )
    if language is not None and marker is not None:
        raise TgcomUsageError(
            f"The '{CliOpt.LANGUAGE}' and '{CliOpt.MARKER}' options are mutually exclusive."
        )


def _collect_targets(targets: tuple[str, ...], files: tuple[str, ...]) -> list[TargetSpec]:
    specs: list[TargetSpec] = []
    for raw in (*files, *targets):
        specs.extend(parse_targets(raw))
    if not specs:
        if click.get_text_stream("stdin").isatty():
            raise TgcomUsageError(
                f"No input: pass '{CliOpt.FILE} FILE[:LINES]' or pipe content on stdin."
            )
        specs.append(TargetSpec(target=Target.stdin()))
    return specs


def _report(
    console: ConsoleLike,
    results: list[MutationResult],
    *,
    verbosity: int,
    color: bool,
) -> None:
    """Print diffs and (with ``-v``) one summary line per file target."""
    for result in results:
        if result.target.is_stdin:
            continue
        if result.diff:
            console.print(render_patch(result.diff) if color else result.diff, nl=False)
        if verbosity <= logging.INFO:
            status: WriteStatus = result.status
            status_text: str = status.render() if color else status.value
            console.print(
                f"{result.target}: {status_text} "
                f"({len(result.changes)} line(s) selected, {result.changed_count} changed)"
            )


@click.command(
    name=CliCmd.APPLY,
    context_settings=CONTEXT_SETTINGS,
    help="Comment, uncomment, or toggle lines by range or between two labels.",
    epilog="TARGETS are FILE or FILE:LINES entries (comma-separated lists allowed); "
    "'-' reads standard input and writes the result to standard output.",
)
@click.argument(ArgKey.TARGETS, nargs=-1, metavar="[TARGETS]...")
@click.option(
    "-f",
    CliOpt.FILE,
    ArgKey.FILES,
    multiple=True,
    metavar="FILE[:LINES],...",
    help="Comma-separated files to process, each with an optional line range. Repeatable.",
)
@click.option(
    "-l",
    CliOpt.LINE,
    ArgKey.LINE,
    default=None,
    metavar="N|N-M",
    help="Line or inclusive line range for targets without an inline range.",
)
@click.option(
    "-s",
    CliOpt.START_LABEL,
    ArgKey.START_LABEL,
    default=None,
    help="Transform the lines after the line containing this label.",
)
@click.option(
    "-e",
    CliOpt.END_LABEL,
    ArgKey.END_LABEL,
    default=None,
    help="Stop at the line containing this label.",
)
@click.option(
    "-a",
    CliOpt.ACTION,
    ArgKey.ACTION,
    type=click.Choice([a.value for a in Action], case_sensitive=False),
    default=None,
    help="What to do with the selected lines (default: toggle).",
)
@click.option(
    "-L",
    CliOpt.LANGUAGE,
    ArgKey.LANGUAGE,
    default=None,
    help="Language whose comment marker is used; required for stdin without --marker.",
)
@click.option(
    "-m",
    CliOpt.MARKER,
    ArgKey.MARKER,
    default=None,
    help="Explicit comment marker, e.g. '//' or '<!-- -->'.",
)
@click.option(
    "-d",
    CliOpt.DRY_RUN,
    ArgKey.DRY_RUN,
    is_flag=True,
    default=False,
    help="Print 'line N: old -> new' for each selected line instead of writing.",
)
@click.option(
    CliOpt.DIFF,
    ArgKey.DIFF,
    is_flag=True,
    default=False,
    help="Print a unified diff for each file.",
)
@common_config_options
@click.pass_context
def apply_command(
    ctx: click.Context,
    *,
    targets: tuple[str, ...],
    files: tuple[str, ...],
    line: str | None,
    start_label: str | None,
    end_label: str | None,
    action: str | None,
    language: str | None,
    marker: str | None,
    dry_run: bool,
    diff: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Apply a comment action to files or standard input."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", logging.WARNING)
    color: bool = bool(ctx.obj.get("color_enabled", False))

    _check_exclusive_options(
        line=line,
        start_label=start_label,
        end_label=end_label,
        language=language,
        marker=marker,
    )

    try:
        specs: list[TargetSpec] = _collect_targets(targets, files)
    except TgcomError as exc:
        raise to_cli_error(exc) from exc

    stdin_specs = [spec for spec in specs if spec.target.is_stdin]
    if len(stdin_specs) > 1:
        raise TgcomUsageError("Standard input can only be processed once per run.")
    if stdin_specs and language is None and marker is None:
        raise TgcomUsageError(
            f"Reading from stdin requires '{CliOpt.LANGUAGE}' or '{CliOpt.MARKER}'."
        )

    args: dict[str, Any] = {
        ArgKey.ACTION: action,
        ArgKey.LINE: line,
        ArgKey.START_LABEL: start_label,
        ArgKey.END_LABEL: end_label,
        ArgKey.LANGUAGE: language,
        ArgKey.MARKER: marker,
        ArgKey.DRY_RUN: dry_run,
        ArgKey.DIFF: diff,
    }
    try:
        draft = MutableRunConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        config: RunConfig = draft.apply_cli_args(args).freeze()
    except TgcomError as exc:
        raise to_cli_error(exc) from exc
    logger.debug("Effective run config: %s", config)

    try:
        results: list[MutationResult] = apply_all(specs, config)
    except BatchError as exc:
        _report(console, exc.completed, verbosity=verbosity, color=color)
        modified = [r for r in exc.completed if r.status == WriteStatus.WRITTEN]
        if modified:
            console.warn(f"{len(modified)} file(s) were modified before the failure.")
        raise to_cli_error(exc) from exc

    _report(console, results, verbosity=verbosity, color=color)
