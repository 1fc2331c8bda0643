# topmark:header:start
#
#   project      : tgcom
#   file         : writer.py
#   file_relpath : src/tgcom/engine/writer.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Write sinks: where scanned lines go.

Sinks
-----
- FileSystemSink: rewrites the file in place through a backup and a temp file.
- StdoutSink: streams every produced line to an output stream (stdin mode).
- PreviewSink: writes one ``line N: old -> new`` report per selected line and
  nothing else (dry run).

Commit protocol of `FileSystemSink` for ``path``:

1. Exclusively create ``path.bak`` and copy the original bytes into it.
2. Exclusively create ``path.tmp`` and stream the transformed lines into it.
3. Flush and ``fsync`` the temp file, close it, and copy the original mode bits.
4. ``os.replace`` the temp file over ``path``, then delete the backup.

Any failure after step 1 removes the temp file (only if this sink created it)
and re-raises. Once step 4 has been attempted the backup is moved back over
``path``; before that the original is untouched and the backup is deleted.
Pre-existing ``.bak`` or ``.tmp`` siblings are never overwritten: creating them
fails with `FileExistsError` (or another `OSError`) instead.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO

from tgcom.config.logging import get_logger
from tgcom.constants import BACKUP_SUFFIX, FILE_ENCODING, TEMP_SUFFIX
from tgcom.engine.result import WriteStatus

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tgcom.config.logging import TgcomLogger
    from tgcom.engine.scanner import ScannedLine

logger: TgcomLogger = get_logger(__name__)


class WriteSink(Protocol):
    """Protocol for the sinks consuming the scanner's output."""

    def write(self, lines: Iterator[ScannedLine]) -> WriteStatus:
        """Consume every scanned line and return the resulting status.

        The iterator raises its validation errors after the last line; sinks must
        let those propagate (after undoing any partial work).
        """
        ...


class PreviewSink:
    """Dry-run sink: reports selected lines, writes nothing else."""

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def write(self, lines: Iterator[ScannedLine]) -> WriteStatus:
        for line in lines:
            if line.selected:
                self.out.write(line.change.format_preview() + "\n")
        return WriteStatus.PREVIEWED


class StdoutSink:
    """Streaming sink: every line is written as soon as it is produced."""

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def write(self, lines: Iterator[ScannedLine]) -> WriteStatus:
        for line in lines:
            self.out.write(line.text)
        self.out.flush()
        return WriteStatus.STREAMED


def backup_path(path: Path) -> Path:
    """Return the backup sibling of ``path`` (``main.go`` -> ``main.go.bak``)."""
    return path.with_name(path.name + BACKUP_SUFFIX)


def temp_path(path: Path) -> Path:
    """Return the temp sibling of ``path`` (``main.go`` -> ``main.go.tmp``)."""
    return path.with_name(path.name + TEMP_SUFFIX)


def _create_backup(path: Path, backup: Path) -> None:
    """Copy ``path`` byte for byte into a newly created ``backup``.

    Raises:
        FileExistsError: If ``backup`` already exists; it is left untouched.
    """
    dst = open(backup, "xb")
    try:
        with dst, open(path, "rb") as src:
            shutil.copyfileobj(src, dst)
        shutil.copymode(path, backup)
    except BaseException:
        backup.unlink(missing_ok=True)
        raise
    logger.debug("Created backup %s", backup)


def _restore_backup(backup: Path, path: Path) -> None:
    """Move ``backup`` back over ``path``."""
    os.replace(backup, path)
    logger.info("Restored %s from backup", path)


class FileSystemSink:
    """In-place rewrite of ``path`` with backup and atomic replace.

    Args:
        path (Path): File to rewrite.
        source (TextIO | None): Open handle on ``path`` that feeds the scanner; it
            is closed before the temp file replaces the original.
    """

    def __init__(self, path: Path, source: TextIO | None = None) -> None:
        self.path = path
        self.source = source

    def write(self, lines: Iterator[ScannedLine]) -> WriteStatus:
        path: Path = self.path
        backup: Path = backup_path(path)
        temp: Path = temp_path(path)

        _create_backup(path, backup)

        temp_created = False
        replacing = False
        try:
            with open(temp, "x", encoding=FILE_ENCODING, newline="") as tmp:
                temp_created = True
                for line in lines:
                    tmp.write(line.text)
                tmp.flush()
                os.fsync(tmp.fileno())
            if self.source is not None:
                self.source.close()
            shutil.copymode(path, temp)
            replacing = True
            os.replace(temp, path)
        except BaseException:
            logger.debug("Rolling back %s", path)
            if temp_created:
                temp.unlink(missing_ok=True)
            if replacing:
                _restore_backup(backup, path)
            else:
                # original never touched: keep its inode, owner and timestamps
                backup.unlink(missing_ok=True)
            raise

        backup.unlink()
        logger.debug("Rewrote %s", path)
        return WriteStatus.WRITTEN


def select_sink(
    path: Path | None,
    *,
    dry_run: bool,
    out: TextIO,
    source: TextIO | None = None,
) -> WriteSink:
    """Return the sink for a target.

    Args:
        path (Path | None): Target file, or None for stdin.
        dry_run (bool): Report instead of writing.
        out (TextIO): Stream for previews and stdin output.
        source (TextIO | None): Open source handle for file targets.

    Returns:
        WriteSink: ``PreviewSink`` for dry runs, ``StdoutSink`` for stdin,
        otherwise ``FileSystemSink``.
    """
    if dry_run:
        logger.debug("Selected preview sink (dry run)")
        return PreviewSink(out)
    if path is None:
        logger.debug("Selected stdout sink (stdin target)")
        return StdoutSink(out)
    logger.debug("Selected file system sink for %s", path)
    return FileSystemSink(path, source)
