# topmark:header:start
#
#   project      : tgcom
#   file         : errors.py
#   file_relpath : src/tgcom/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Exceptions for the tgcom CLI and the mapping from engine errors.

Commands convert every failure into a `TgcomCliError` (a `click.ClickException`)
through `to_cli_error`, so Click prints the message and exits with the matching
`ExitCode`.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from tgcom.cli.exit_codes import ExitCode
from tgcom.errors import (
    BatchError,
    ConfigError,
    EndLabelNotFoundError,
    InvalidLabelError,
    InvalidMarkerError,
    InvalidRangeSyntaxError,
    InvalidTargetSpecError,
    MissingSelectionError,
    RangeOutOfBoundsError,
    StartLabelNotFoundError,
    TgcomError,
    UnsupportedExtensionError,
    UnsupportedLanguageError,
)

if TYPE_CHECKING:
    from pathlib import Path


class TgcomCliError(click.ClickException):
    """Base class for all tgcom CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is added in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class TgcomUsageError(TgcomCliError):
    """Invalid flags, arguments, or selection syntax."""

    exit_code = ExitCode.USAGE_ERROR


class TgcomDataError(TgcomCliError):
    """The range or labels do not match the content, or the content is not text."""

    exit_code = ExitCode.DATA_ERROR


class TgcomFileNotFoundError(TgcomCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TgcomUnsupportedLanguageError(TgcomCliError):
    """No comment marker is known for the language or file extension."""

    exit_code = ExitCode.UNSUPPORTED_LANGUAGE


class TgcomIOError(TgcomCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class TgcomPermissionDeniedError(TgcomCliError):
    """Insufficient permissions to read or rewrite a file."""

    exit_code = ExitCode.PERMISSION_DENIED


class TgcomConfigError(TgcomCliError):
    """A configuration file or value is invalid."""

    exit_code = ExitCode.CONFIG_ERROR


class TgcomUnexpectedError(TgcomCliError):
    """Last-resort error for anything not classified above."""

    exit_code = ExitCode.UNEXPECTED_ERROR


_USAGE_ERRORS = (
    InvalidRangeSyntaxError,
    InvalidLabelError,
    InvalidTargetSpecError,
    InvalidMarkerError,
    MissingSelectionError,
)
_DATA_ERRORS = (RangeOutOfBoundsError, StartLabelNotFoundError, EndLabelNotFoundError)


def _describe(exc: BaseException, path: Path | None) -> str:
    if isinstance(exc, TgcomError):
        if exc.path is None and path is not None:
            return f"{path}: {exc.message}"
        return str(exc)
    if isinstance(exc, OSError):
        where = exc.filename if exc.filename is not None else path
        reason = exc.strerror or str(exc)
        return f"{where}: {reason}" if where is not None else reason
    if isinstance(exc, UnicodeDecodeError):
        return f"{path}: not valid UTF-8 text ({exc.reason})"
    return f"{path}: {exc}" if path is not None else str(exc)


def to_cli_error(exc: BaseException, *, path: Path | None = None) -> TgcomCliError:
    """Convert an engine, batch, or I/O exception into a `TgcomCliError`.

    Args:
        exc (BaseException): The exception raised by the core.
        path (Path | None): Path to mention when the exception carries none.

    Returns:
        TgcomCliError: The CLI error with the matching exit code.
    """
    if isinstance(exc, BatchError):
        return to_cli_error(exc.error, path=exc.path)

    message: str = _describe(exc, path)
    match exc:
        case ConfigError():
            return TgcomConfigError(message)
        case UnsupportedLanguageError() | UnsupportedExtensionError():
            return TgcomUnsupportedLanguageError(message)
        case _ if isinstance(exc, _USAGE_ERRORS):
            return TgcomUsageError(message)
        case _ if isinstance(exc, _DATA_ERRORS):
            return TgcomDataError(message)
        case UnicodeDecodeError():
            return TgcomDataError(message)
        case TgcomError():
            return TgcomCliError(message)
        case FileNotFoundError() | NotADirectoryError():
            return TgcomFileNotFoundError(message)
        case PermissionError():
            return TgcomPermissionDeniedError(message)
        case OSError():
            return TgcomIOError(message)
    return TgcomUnexpectedError(message)
