# topmark:header:start
#
#   project      : tgcom
#   file         : batch.py
#   file_relpath : src/tgcom/batch.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Batch driver: apply one run configuration to several targets.

Targets are processed one after another in the order given. Processing stops at
the first failure: the failing target is reported through `BatchError`, targets
before it stay mutated, and targets after it are never touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from tgcom.config.logging import get_logger
from tgcom.engine import apply
from tgcom.errors import BatchError, MissingSelectionError
from tgcom.selection import parse_target_spec

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tgcom.config.logging import TgcomLogger
    from tgcom.config.model import RunConfig
    from tgcom.engine.result import MutationResult
    from tgcom.selection import Selection, TargetSpec

logger: TgcomLogger = get_logger(__name__)


def parse_targets(raw: str) -> list[TargetSpec]:
    """Parse a comma-separated ``path[:lines]`` list; empty entries are dropped.

    >>> [str(spec.target) for spec in parse_targets("a.go:1-2, ,b.py")]
    ['a.go', 'b.py']

    Raises:
        InvalidTargetSpecError: If an entry has a malformed selection suffix.
    """
    return [parse_target_spec(entry) for entry in raw.split(",") if entry.strip()]


def apply_all(
    specs: Iterable[TargetSpec],
    config: RunConfig,
    *,
    out: TextIO | None = None,
    stdin: TextIO | None = None,
) -> list[MutationResult]:
    """Apply ``config`` to every target in order, stopping at the first failure.

    Each target uses its inline selection when it has one, otherwise
    ``config.selection``. The comment marker is resolved per target.

    Args:
        specs (Iterable[TargetSpec]): Targets to process.
        config (RunConfig): Frozen run configuration.
        out (TextIO | None): Stream for previews and stdin output.
        stdin (TextIO | None): Stream read by a stdin target.

    Returns:
        list[MutationResult]: One result per target, in order.

    Raises:
        BatchError: On the first failing target. ``error`` (and ``__cause__``)
            is the underlying exception; ``completed`` holds earlier results.
    """
    completed: list[MutationResult] = []
    for spec in specs:
        path = spec.target.path
        try:
            selection: Selection | None = spec.selection or config.selection
            if selection is None:
                raise MissingSelectionError(
                    "no line range or labels given for this target", path=path
                )
            marker = config.resolve_marker(path)
            result: MutationResult = apply(
                spec.target,
                selection,
                marker,
                config.action,
                config.dry_run,
                out=out,
                stdin=stdin,
                diff=config.diff,
            )
        except Exception as exc:
            logger.debug(
                "Batch stopped at %s after %d target(s): %s", spec.target, len(completed), exc
            )
            raise BatchError(exc, path=path, completed=completed) from exc
        completed.append(result)
    logger.debug("Batch completed %d target(s)", len(completed))
    return completed
