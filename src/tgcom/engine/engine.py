# topmark:header:start
#
#   project      : tgcom
#   file         : engine.py
#   file_relpath : src/tgcom/engine/engine.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Mutation engine: apply a comment transform to one target.

`apply` wires the pieces together: it opens the source, builds a
`tgcom.engine.scanner.LineScanner` for the selection, and hands the scanned
lines to the sink chosen by `tgcom.engine.writer.select_sink`.
"""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, TextIO

from tgcom.config.logging import get_logger
from tgcom.constants import FILE_ENCODING
from tgcom.engine.result import MutationResult, WriteStatus
from tgcom.engine.scanner import LineScanner
from tgcom.engine.writer import select_sink
from tgcom.transform import Action, get_transform
from tgcom.utils.diff import build_unified_diff

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tgcom.config.logging import TgcomLogger
    from tgcom.engine.scanner import ScannedLine
    from tgcom.languages.base import CommentMarker
    from tgcom.selection import Selection, Target

logger: TgcomLogger = get_logger(__name__)


@contextmanager
def _open_stdin() -> Iterator[TextIO]:
    """Yield ``sys.stdin`` decoded as UTF-8 without newline translation."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        yield sys.stdin
        return
    # newline="" keeps "\r\n" and "\r" terminators intact
    wrapper = io.TextIOWrapper(buffer, encoding=FILE_ENCODING, newline="")
    try:
        yield wrapper
    finally:
        # leave sys.stdin's buffer open for the rest of the process
        wrapper.detach()


def _record(
    lines: Iterator[ScannedLine], original: list[str], updated: list[str]
) -> Iterator[ScannedLine]:
    for line in lines:
        original.append(line.original_text)
        updated.append(line.text)
        yield line


def apply(
    target: Target,
    selection: Selection,
    marker: CommentMarker,
    action: Action = Action.TOGGLE,
    dry_run: bool = False,
    *,
    out: TextIO | None = None,
    stdin: TextIO | None = None,
    diff: bool = False,
) -> MutationResult:
    """Apply ``action`` to the selected lines of ``target``.

    Args:
        target (Target): File to rewrite in place, or stdin.
        selection (Selection): Lines to transform.
        marker (CommentMarker): Comment marker of the target's language.
        action (Action): Comment, uncomment, or toggle.
        dry_run (bool): Report ``line N: old -> new`` for each selected line
            instead of writing anything.
        out (TextIO | None): Stream for previews and stdin output; defaults to
            ``sys.stdout``.
        stdin (TextIO | None): Stream read for stdin targets; defaults to
            ``sys.stdin`` read as UTF-8 with every line terminator kept.
        diff (bool): Attach a unified diff to the result (file targets only).

    Returns:
        MutationResult: What happened to the target.

    Raises:
        FileNotFoundError: If the file does not exist; nothing is created.
        OSError: On any other I/O failure; the original file survives intact.
        UnicodeDecodeError: If the file is not valid UTF-8; the original file
            is left untouched.
        RangeOutOfBoundsError: If the range ends after the last line.
        StartLabelNotFoundError: If the start label does not occur.
        EndLabelNotFoundError: If the end label does not follow the start label.
    """
    sink_out: TextIO = out if out is not None else sys.stdout
    transform = get_transform(action)
    scanner = LineScanner(selection, marker, transform, path=target.path)
    original_lines: list[str] = []
    updated_lines: list[str] = []

    logger.debug(
        "apply: target=%s selection=%s marker=%r action=%s dry_run=%s",
        target,
        selection,
        str(marker),
        action.value,
        dry_run,
    )

    if target.path is None:
        sink = select_sink(None, dry_run=dry_run, out=sink_out)
        if stdin is not None:
            status: WriteStatus = sink.write(scanner.scan(stdin))
        else:
            with _open_stdin() as source:
                status = sink.write(scanner.scan(source))
        return MutationResult(
            target=target,
            status=status,
            lines_scanned=scanner.lines_scanned,
            changes=scanner.changes,
        )

    # newline="" keeps "\r\n" and "\r" terminators intact
    with open(target.path, encoding=FILE_ENCODING, newline="") as source:
        sink = select_sink(target.path, dry_run=dry_run, out=sink_out, source=source)
        lines: Iterator[ScannedLine] = scanner.scan(source)
        if diff:
            lines = _record(lines, original_lines, updated_lines)
        status = sink.write(lines)

    result = MutationResult(
        target=target,
        status=status,
        lines_scanned=scanner.lines_scanned,
        changes=scanner.changes,
    )
    if diff:
        result.diff = build_unified_diff(original_lines, updated_lines, label=str(target.path))
    logger.info("%s: %s (%d line(s) selected)", target, status.value, len(scanner.changes))
    return result
