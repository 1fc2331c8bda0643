# topmark:header:start
#
#   project      : tgcom
#   file         : transform.py
#   file_relpath : src/tgcom/transform.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Comment transform: comment, uncomment, or toggle a single line.

The functions here are pure and total: they never raise and never look beyond the
line they are given. A line passed in must not carry its line terminator; the
engine splits terminators off before calling a transform and re-attaches them
afterwards.

Simple markers (``//``):
    - ``comment`` prepends ``"// "``.
    - ``uncomment`` removes the first ``"// "`` (or bare ``"//"``) when the line,
      ignoring leading whitespace, starts with the marker; otherwise the line is
      returned unchanged.
    - ``toggle`` uncomments when the marker is present, comments otherwise.

Paired markers (``<!-- -->``):
    - ``comment`` wraps the line as ``"<!-- " + line + " -->"``.
    - ``uncomment`` only acts when the stripped line starts with the prefix *and*
      ends with the suffix. The delimiters and one adjacent space on each side are
      removed independently; indentation and trailing whitespace are kept.

Known limitation:
    A line whose own content already starts with the marker (``//x`` in a ``//``
    language) is treated as commented, so ``toggle`` is not an involution for it.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

from tgcom.languages.base import PairedMarker, SimpleMarker

if TYPE_CHECKING:
    from tgcom.languages.base import CommentMarker

Transform = Callable[[str, "CommentMarker"], str]


class Action(str, Enum):
    """What to do with each selected line.

    Attributes:
        COMMENT: Add the comment marker.
        UNCOMMENT: Remove the comment marker when present.
        TOGGLE: Uncomment commented lines and comment the others (default).
    """

    COMMENT = "comment"
    UNCOMMENT = "uncomment"
    TOGGLE = "toggle"

    @classmethod
    def from_name(cls, name: str | None) -> Action:
        """Return the action named ``name``; ``None`` or ``""`` mean `TOGGLE`.

        Raises:
            ValueError: If the name is not a known action.
        """
        if not name:
            return cls.TOGGLE
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(f"invalid action: {name!r} (expected one of: {valid})") from None


def _is_enveloped(trimmed: str, marker: PairedMarker) -> bool:
    return (
        len(trimmed) >= len(marker.prefix) + len(marker.suffix)
        and trimmed.startswith(marker.prefix)
        and trimmed.endswith(marker.suffix)
    )


def comment(line: str, marker: CommentMarker) -> str:
    """Return ``line`` with the comment marker added."""
    match marker:
        case PairedMarker(prefix=prefix, suffix=suffix):
            return f"{prefix} {line} {suffix}"
        case SimpleMarker(prefix=prefix):
            return f"{prefix} {line}"


def uncomment(line: str, marker: CommentMarker) -> str:
    """Return ``line`` with one comment marker removed, or unchanged if none is present."""
    match marker:
        case PairedMarker(prefix=prefix, suffix=suffix):
            trimmed = line.strip()
            if not _is_enveloped(trimmed, marker):
                return line
            lead = line[: len(line) - len(line.lstrip())]
            trail = line[len(line.rstrip()) :]
            body = trimmed[len(prefix) : len(trimmed) - len(suffix)]
            if body.startswith(" "):
                body = body[1:]
            if body.endswith(" "):
                body = body[:-1]
            return f"{lead}{body}{trail}"
        case SimpleMarker(prefix=prefix):
            trimmed = line.lstrip()
            if trimmed.startswith(prefix + " "):
                return line.replace(prefix + " ", "", 1)
            if trimmed.startswith(prefix):
                return line.replace(prefix, "", 1)
            return line


def toggle(line: str, marker: CommentMarker) -> str:
    """Uncomment ``line`` if it carries the marker, otherwise comment it."""
    match marker:
        case PairedMarker():
            commented = _is_enveloped(line.strip(), marker)
        case SimpleMarker(prefix=prefix):
            commented = line.lstrip().startswith(prefix)
    return uncomment(line, marker) if commented else comment(line, marker)


_TRANSFORMS: dict[Action, Transform] = {
    Action.COMMENT: comment,
    Action.UNCOMMENT: uncomment,
    Action.TOGGLE: toggle,
}


def get_transform(action: Action) -> Transform:
    """Return the transform function implementing ``action``."""
    return _TRANSFORMS[action]
