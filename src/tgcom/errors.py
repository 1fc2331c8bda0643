# topmark:header:start
#
#   project      : tgcom
#   file         : errors.py
#   file_relpath : src/tgcom/errors.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Exceptions raised by the tgcom engine.

The engine reports every failure as an exception. Errors that describe bad input
(unknown language, malformed range, missing label, ...) derive from `TgcomError`.
Filesystem failures are left as the built-in `OSError` subclasses
(`FileNotFoundError`, `PermissionError`, `FileExistsError`, ...) and text
decoding failures as `UnicodeDecodeError`, so callers can handle them with the
usual Python idioms.

All errors are terminal for the file being processed; nothing is retried.
The CLI maps each class to an exit code (see `tgcom.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from tgcom.engine.result import MutationResult


class TgcomError(Exception):
    """Base class for all tgcom engine errors.

    Attributes:
        message (str): Human-readable description of the failure.
        path (Path | None): File the error relates to, when known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


# --- Language resolution ---


class UnsupportedLanguageError(TgcomError):
    """An explicit language name is not present in the registry."""

    def __init__(self, language: str, *, path: Path | None = None) -> None:
        super().__init__(f"unsupported language: {language}", path=path)
        self.language = language


class UnsupportedExtensionError(TgcomError):
    """The file extension does not map to any known language."""

    def __init__(self, extension: str, *, path: Path | None = None) -> None:
        shown = extension or "<none>"
        super().__init__(f"unsupported file extension: {shown}", path=path)
        self.extension = extension


class InvalidMarkerError(TgcomError):
    """An explicit comment marker string is empty or malformed."""


# --- Selection parsing ---


class InvalidRangeSyntaxError(TgcomError):
    """A line selection string is not ``N`` or ``N-M`` with ``1 <= N <= M``."""


class InvalidLabelError(TgcomError):
    """A start or end label is empty."""


class InvalidTargetSpecError(TgcomError):
    """A ``path[:selection]`` target entry cannot be parsed."""


class MissingSelectionError(TgcomError):
    """Neither an inline nor a global selection applies to a target."""


# --- End-of-scan validation ---


class RangeOutOfBoundsError(TgcomError):
    """The selected range ends after the last line of the source."""

    def __init__(self, end: int, total_lines: int, *, path: Path | None = None) -> None:
        super().__init__(
            f"line number is out of range: {end} (source has {total_lines} line(s))",
            path=path,
        )
        self.end = end
        self.total_lines = total_lines


class StartLabelNotFoundError(TgcomError):
    """The start label never occurs in the source."""

    def __init__(self, label: str, *, path: Path | None = None) -> None:
        super().__init__(f"start label not found: {label!r}", path=path)
        self.label = label


class EndLabelNotFoundError(TgcomError):
    """The end label never occurs after the start label."""

    def __init__(self, label: str, *, path: Path | None = None) -> None:
        super().__init__(f"end label not found: {label!r}", path=path)
        self.label = label


# --- Configuration ---


class ConfigError(TgcomError):
    """A configuration file or value is invalid."""


# --- Batch processing ---


class BatchError(TgcomError):
    """A target in a batch failed; processing stopped at that target.

    Attributes:
        error (BaseException): The underlying failure (also set as ``__cause__``).
        completed (list[MutationResult]): Results of the targets processed before
            the failing one. Those files stay mutated.
    """

    def __init__(
        self,
        error: BaseException,
        *,
        path: Path | None,
        completed: list[MutationResult],
    ) -> None:
        detail = error.message if isinstance(error, TgcomError) else str(error)
        super().__init__(detail, path=path)
        self.error = error
        self.completed = completed
