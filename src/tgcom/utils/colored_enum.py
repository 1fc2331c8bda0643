# topmark:header:start
#
#   project      : tgcom
#   file         : colored_enum.py
#   file_relpath : src/tgcom/utils/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""String enum carrying a yachalk colorizer for human-facing output.

Members are declared as ``NAME = ("text", chalk.style)``. The member's ``value``
stays the plain text so equality and hashing behave like a `str` enum; the
style is available separately as ``member.color``.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with ``yachalk.ChalkBuilder.__call__``."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """`str` enum whose members also know how to color themselves."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The member's display text."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with this member."""
        return self._color

    def render(self) -> str:
        """Return the display text decorated with the member's color."""
        return self._color(self._value_)
