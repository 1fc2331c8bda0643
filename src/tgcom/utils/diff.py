# topmark:header:start
#
#   project      : tgcom
#   file         : diff.py
#   file_relpath : src/tgcom/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Unified diff helpers.

`build_unified_diff` compares the original lines of a file with the lines the
engine produced; `render_patch` formats the result for terminal display.
"""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from tgcom.config.logging import get_logger

logger = get_logger(__name__)


def build_unified_diff(
    original: Sequence[str],
    updated: Sequence[str],
    *,
    label: str,
) -> str:
    """Return a unified diff between ``original`` and ``updated``.

    Both sequences hold lines *with* their terminators, as read from the file.

    Args:
        original (Sequence[str]): Lines before the change.
        updated (Sequence[str]): Lines after the change.
        label (str): File name shown in the ``---``/``+++`` headers.

    Returns:
        str: The diff text, or ``""`` when both sides are identical.
    """
    diff_lines: list[str] = list(
        difflib.unified_diff(
            original,
            updated,
            fromfile=f"{label} (original)",
            tofile=f"{label} (updated)",
            n=3,
        )
    )
    logger.trace("Diff for %s has %d line(s)", label, len(diff_lines))
    return "".join(diff_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as either a sequence of lines or a multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        # Make stray carriage returns visible
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
