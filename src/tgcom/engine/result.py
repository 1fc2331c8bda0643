# topmark:header:start
#
#   project      : tgcom
#   file         : result.py
#   file_relpath : src/tgcom/engine/result.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Result types returned by the mutation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from yachalk import chalk

from tgcom.selection import Target
from tgcom.utils.colored_enum import ColoredStrEnum


class WriteStatus(ColoredStrEnum):
    """Where the transformed content of a target ended up."""

    WRITTEN = ("changes written to file", chalk.green)
    STREAMED = ("changes written to stdout", chalk.cyan)
    PREVIEWED = ("dry run, nothing written", chalk.yellow)


@dataclass(frozen=True, slots=True)
class LineChange:
    """A selected line before and after the transform (terminator excluded)."""

    lineno: int
    original: str
    updated: str

    @property
    def changed(self) -> bool:
        """Whether the transform altered the line."""
        return self.original != self.updated

    def format_preview(self) -> str:
        """Return the dry-run report line, e.g. ``line 2: foo -> // foo``."""
        return f"line {self.lineno}: {self.original} -> {self.updated}"


@dataclass(slots=True)
class MutationResult:
    """Outcome of applying a transform to one target.

    Attributes:
        target (Target): The file or stdin that was processed.
        status (WriteStatus): Where the transformed content went.
        lines_scanned (int): Number of lines read from the source.
        changes (list[LineChange]): Every selected line, in ascending order.
        diff (str | None): Unified diff of the file, when requested.
    """

    target: Target
    status: WriteStatus
    lines_scanned: int = 0
    changes: list[LineChange] = field(default_factory=list)
    diff: str | None = None

    @property
    def path(self) -> Path | None:
        """Path of the target, or None for stdin."""
        return self.target.path

    @property
    def changed_count(self) -> int:
        """Number of selected lines whose content actually changed."""
        return sum(1 for change in self.changes if change.changed)
