# topmark:header:start
#
#   project      : tgcom
#   file         : scanner.py
#   file_relpath : src/tgcom/engine/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Line scanner: decides which lines are selected and transforms them.

The scanner consumes a text stream one line at a time and yields a `ScannedLine`
per input line, so sinks can stream output without holding the whole file.

Selection rules:
    - `LineRange`: line ``n`` is selected iff ``start <= n <= end``.
    - `LabelSection`: for each line the end label is checked first (closing an
      open section), then the line is selected if a section is open, then the
      start label is checked (opening a section). Label lines themselves are
      therefore never selected, and several start/end pairs open several
      sections.

Line terminators (``\\n``, ``\\r\\n``, ``\\r``) are kept per line. A last line
without a terminator receives the first terminator seen in the source, or
``"\\n"`` when the source has none.

Validation happens once the source is exhausted: the generator raises
`RangeOutOfBoundsError`, `StartLabelNotFoundError`, or `EndLabelNotFoundError`
after the last line. Sinks that commit to disk rely on that to roll back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tgcom.config.logging import get_logger
from tgcom.constants import DEFAULT_NEWLINE
from tgcom.engine.result import LineChange
from tgcom.errors import EndLabelNotFoundError, RangeOutOfBoundsError, StartLabelNotFoundError
from tgcom.selection import LabelSection, LineRange

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from tgcom.config.logging import TgcomLogger
    from tgcom.languages.base import CommentMarker
    from tgcom.selection import Selection
    from tgcom.transform import Transform

logger: TgcomLogger = get_logger(__name__)


def split_terminator(raw: str) -> tuple[str, str]:
    """Split ``raw`` into its content and line terminator.

    >>> split_terminator("a\\r\\n")
    ('a', '\\r\\n')
    >>> split_terminator("last")
    ('last', '')
    """
    if raw.endswith("\r\n"):
        return raw[:-2], "\r\n"
    if raw.endswith(("\n", "\r")):
        return raw[:-1], raw[-1]
    return raw, ""


@dataclass(frozen=True, slots=True)
class ScannedLine:
    """One source line after scanning."""

    lineno: int
    original: str
    updated: str
    newline: str
    selected: bool

    @property
    def text(self) -> str:
        """Transformed content with its terminator, as written to the output."""
        return self.updated + self.newline

    @property
    def original_text(self) -> str:
        """Original content with the terminator used on output."""
        return self.original + self.newline

    @property
    def change(self) -> LineChange:
        """The line as a `LineChange` record."""
        return LineChange(self.lineno, self.original, self.updated)


class LineScanner:
    """Stateful scanner for a single source.

    Args:
        selection (Selection): Range or label section to transform.
        marker (CommentMarker): Comment marker of the target's language.
        transform (Transform): Function applied to every selected line.
        path (Path | None): Source path, attached to validation errors.

    Attributes:
        lines_scanned (int): Lines consumed so far.
        changes (list[LineChange]): Selected lines seen so far.
    """

    def __init__(
        self,
        selection: Selection,
        marker: CommentMarker,
        transform: Transform,
        *,
        path: Path | None = None,
    ) -> None:
        self.selection = selection
        self.marker = marker
        self.transform = transform
        self.path = path

        self.lines_scanned: int = 0
        self.changes: list[LineChange] = []

        self._first_newline: str | None = None
        self._in_section: bool = False
        self._start_found: bool = False
        self._end_found: bool = False

    def _is_selected(self, lineno: int, content: str) -> bool:
        match self.selection:
            case LineRange():
                return lineno in self.selection
            case LabelSection(start_label=start_label, end_label=end_label):
                if end_label in content and self._start_found:
                    self._end_found = True
                    self._in_section = False
                selected = self._in_section
                if start_label in content:
                    self._start_found = True
                    self._in_section = True
                return selected
        raise TypeError(f"unsupported selection: {self.selection!r}")

    def scan(self, source: Iterable[str]) -> Iterator[ScannedLine]:
        """Yield a `ScannedLine` for every line of ``source``.

        Raises:
            RangeOutOfBoundsError: If the range ends after the last line.
            StartLabelNotFoundError: If no line contains the start label.
            EndLabelNotFoundError: If no line after the start label contains the
                end label.
        """
        for raw in source:
            self.lines_scanned += 1
            lineno = self.lines_scanned
            content, newline = split_terminator(raw)
            if newline and self._first_newline is None:
                self._first_newline = newline
            if not newline:
                newline = self._first_newline or DEFAULT_NEWLINE

            selected = self._is_selected(lineno, content)
            updated = self.transform(content, self.marker) if selected else content
            scanned = ScannedLine(lineno, content, updated, newline, selected)
            if selected:
                self.changes.append(scanned.change)
                logger.trace("line %d: %r -> %r", lineno, content, updated)

            yield scanned

        self.validate()

    def validate(self) -> None:
        """Check the selection against what the scan has seen so far."""
        match self.selection:
            case LineRange(end=end):
                if end > self.lines_scanned:
                    raise RangeOutOfBoundsError(end, self.lines_scanned, path=self.path)
            case LabelSection(start_label=start_label, end_label=end_label):
                if not self._start_found:
                    raise StartLabelNotFoundError(start_label, path=self.path)
                if not self._end_found:
                    raise EndLabelNotFoundError(end_label, path=self.path)
        logger.debug(
            "Scanned %d line(s), %d selected (%s)",
            self.lines_scanned,
            len(self.changes),
            self.path or "<stdin>",
        )
