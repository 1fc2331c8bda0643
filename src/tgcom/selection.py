# topmark:header:start
#
#   project      : tgcom
#   file         : selection.py
#   file_relpath : src/tgcom/selection.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Line selection: numeric ranges, label sections, and target specs.

A selection decides which lines of a source are transformed:

- `LineRange`: an inclusive, 1-based interval ``start..end``.
- `LabelSection`: every line strictly between a line containing ``start_label``
  and the next line containing ``end_label``.

Exactly one form is active per target. Whether a `LineRange` fits the source and
whether the labels occur at all is only known after a full scan, so those checks
live in the engine (`tgcom.engine.scanner`).

Examples:
    >>> parse_range("5-10")
    LineRange(start=5, end=10)
    >>> parse_range("7")
    LineRange(start=7, end=7)
    >>> parse_target_spec("main.go:2-4").selection
    LineRange(start=2, end=4)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from tgcom.config.logging import get_logger
from tgcom.constants import STDIN_SENTINEL
from tgcom.errors import InvalidLabelError, InvalidRangeSyntaxError, InvalidTargetSpecError

logger = get_logger(__name__)

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:[\\/]")


@dataclass(frozen=True, slots=True)
class LineRange:
    """Inclusive range of 1-based line numbers.

    Raises:
        InvalidRangeSyntaxError: If ``start < 1`` or ``end < start``.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise InvalidRangeSyntaxError(f"invalid start line number: {self.start}")
        if self.end < self.start:
            raise InvalidRangeSyntaxError(
                f"invalid end line number: {self.end} (must be >= {self.start})"
            )

    def __contains__(self, lineno: object) -> bool:
        return isinstance(lineno, int) and self.start <= lineno <= self.end

    def __str__(self) -> str:
        return str(self.start) if self.start == self.end else f"{self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class LabelSection:
    """Section delimited by two substrings found in the source.

    Raises:
        InvalidLabelError: If either label is empty.
    """

    start_label: str
    end_label: str

    def __post_init__(self) -> None:
        if not self.start_label:
            raise InvalidLabelError("start label must not be empty")
        if not self.end_label:
            raise InvalidLabelError("end label must not be empty")

    def __str__(self) -> str:
        return f"{self.start_label!r}..{self.end_label!r}"


Selection = Union[LineRange, LabelSection]


def _parse_line_number(text: str, what: str) -> int:
    value = text.strip()
    if not (value.isascii() and value.isdecimal()):
        raise InvalidRangeSyntaxError(f"invalid {what} line number: {text!r}")
    number = int(value)
    if number < 1:
        raise InvalidRangeSyntaxError(f"invalid {what} line number: {text!r}")
    return number


def parse_range(spec: str) -> LineRange:
    """Parse ``"N"`` or ``"N-M"`` into a `LineRange`.

    Args:
        spec (str): Line selection string.

    Returns:
        LineRange: The parsed range.

    Raises:
        InvalidRangeSyntaxError: If the string is not a positive integer or a pair
            of positive integers with ``M >= N``.
    """
    text = spec.strip()
    if "-" in text:
        parts = text.split("-")
        if len(parts) != 2:
            raise InvalidRangeSyntaxError(f"invalid range format: {spec!r}. Use 'start-end'")
        start = _parse_line_number(parts[0], "start")
        end = _parse_line_number(parts[1], "end")
        return LineRange(start, end)
    if not text:
        raise InvalidRangeSyntaxError("empty line selection")
    number = _parse_line_number(text, "start")
    return LineRange(number, number)


@dataclass(frozen=True, slots=True)
class Target:
    """A file path, or standard input when ``path`` is None."""

    path: Path | None

    @classmethod
    def stdin(cls) -> Target:
        """Return the standard-input target."""
        return cls(path=None)

    @classmethod
    def from_arg(cls, raw: str | Path | None) -> Target:
        """Build a target from a CLI argument; ``None``, ``""`` and ``"-"`` mean stdin."""
        if raw is None or str(raw) in ("", STDIN_SENTINEL):
            return cls.stdin()
        return cls(path=Path(raw))

    @property
    def is_stdin(self) -> bool:
        """Whether this target reads from standard input."""
        return self.path is None

    def __str__(self) -> str:
        return "<stdin>" if self.path is None else str(self.path)


@dataclass(frozen=True, slots=True)
class TargetSpec:
    """A target and an optional inline selection (``path:selection``)."""

    target: Target
    selection: Selection | None = None


def parse_target_spec(raw: str) -> TargetSpec:
    """Parse a ``path`` or ``path:selection`` entry.

    A Windows drive prefix (``C:\\`` or ``C:/``) is part of the path. When the text
    after the last remaining ``:`` contains a path separator, the colon belongs to
    the path as well. Otherwise that text must be a valid range, and the path
    before it must not carry another ``:`` selection.

    Args:
        raw (str): One entry of a comma-separated target list.

    Returns:
        TargetSpec: The parsed target with its inline selection, if any.

    Raises:
        InvalidTargetSpecError: If the entry is empty, names no file, carries more
            than one selection (``a.go:1:2``), or has a malformed selection suffix
            (``file.go:abc``).
    """
    text = raw.strip()
    if not text:
        raise InvalidTargetSpecError("empty target entry. Use '<filename>[:<lines>]'")

    drive_match = _DRIVE_PREFIX.match(text)
    drive = drive_match.group(0) if drive_match else ""
    rest = text[len(drive) :]

    path_part, sep, sel_part = rest.rpartition(":")
    if not sep:
        return TargetSpec(target=Target.from_arg(text))

    if "/" in sel_part or "\\" in sel_part:
        # e.g. "dir:v2/main.go": the colon belongs to the path
        logger.trace("Treating %r as a plain path", text)
        return TargetSpec(target=Target.from_arg(text))

    if ":" in path_part:
        raise InvalidTargetSpecError(f"multiple selections in {raw!r}. Use '<filename>:<lines>'")

    try:
        selection = parse_range(sel_part)
    except InvalidRangeSyntaxError as exc:
        raise InvalidTargetSpecError(
            f"invalid syntax format in {raw!r}: {exc.message}. Use '<filename>:<lines>'"
        ) from exc

    if not path_part:
        raise InvalidTargetSpecError(f"missing file name in {raw!r}. Use '<filename>:<lines>'")
    return TargetSpec(target=Target.from_arg(drive + path_part), selection=selection)
