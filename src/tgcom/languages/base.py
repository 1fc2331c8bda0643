# topmark:header:start
#
#   project      : tgcom
#   file         : base.py
#   file_relpath : src/tgcom/languages/base.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Comment markers and language definitions.

A comment marker is modelled as a small tagged union:

- `SimpleMarker`: a single line prefix such as ``//`` or ``#``.
- `PairedMarker`: a prefix and a suffix that must both be present on the same
  line, such as HTML's ``<!--`` / ``-->``.

The comment transform functions match on the marker variant instead of comparing
marker strings (see `tgcom.transform`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from tgcom.errors import InvalidMarkerError


@dataclass(frozen=True, slots=True)
class SimpleMarker:
    """Single-line comment prefix (e.g. ``//``, ``#``, ``--``, ``%``).

    Attributes:
        prefix (str): The literal comment prefix.
    """

    prefix: str

    def __str__(self) -> str:
        return self.prefix


@dataclass(frozen=True, slots=True)
class PairedMarker:
    """Comment delimiters that wrap a whole line (e.g. ``<!-- ... -->``).

    Attributes:
        prefix (str): Opening delimiter.
        suffix (str): Closing delimiter.
    """

    prefix: str
    suffix: str

    def __str__(self) -> str:
        return f"{self.prefix} {self.suffix}"


CommentMarker = Union[SimpleMarker, PairedMarker]


def marker_from_string(text: str) -> CommentMarker:
    """Parse an explicit marker string into a `CommentMarker`.

    A string made of two whitespace-separated parts (``"<!-- -->"``) becomes a
    `PairedMarker`; a single token becomes a `SimpleMarker`.

    Args:
        text (str): Marker text as given on the command line or in a config file.

    Returns:
        CommentMarker: The parsed marker.

    Raises:
        InvalidMarkerError: If ``text`` is empty or has more than two parts.
    """
    parts: list[str] = text.split()
    if not parts:
        raise InvalidMarkerError(f"invalid comment marker: {text!r}")
    if len(parts) == 1:
        return SimpleMarker(parts[0])
    if len(parts) == 2:
        return PairedMarker(parts[0], parts[1])
    raise InvalidMarkerError(
        f"invalid comment marker: {text!r} (expected 'PREFIX' or 'PREFIX SUFFIX')"
    )


@dataclass(frozen=True, slots=True)
class Language:
    """A language known to tgcom.

    Attributes:
        name (str): Canonical, lower-case identifier (e.g. ``"python"``).
        marker (CommentMarker): Single-line comment marker used for this language.
        extensions (tuple[str, ...]): Filename extensions including the leading dot.
            Matching is case-sensitive first, so ``.R`` and ``.r`` can differ.
        aliases (tuple[str, ...]): Alternative lower-case names (e.g. ``"golang"``).
        description (str): Human-readable description.
    """

    name: str
    marker: CommentMarker
    extensions: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    description: str = field(default="", compare=False)

    @property
    def names(self) -> tuple[str, ...]:
        """Return the canonical name followed by all aliases."""
        return (self.name, *self.aliases)
