"""Parsed configuration lines with character-offset spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class LineType(StrEnum):
    KEY_VALUE = "keyValue"
    COMMENT = "comment"
    EMPTY = "empty"
    INVALID = "invalid"


@dataclass(frozen=True)
class TextSpan:
    """Half-open ``[start, end)`` character offsets within one line."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ParsedLine:
    """One physical line of a configuration document.

    ``key`` and ``value`` are only set for ``keyValue`` lines. ``value`` is
    the raw text after the separator, whitespace included.
    """

    line_number: int
    raw: str
    type: LineType
    key: str | None = None
    value: str | None = None
    key_range: TextSpan | None = None
    value_range: TextSpan | None = None

    @property
    def is_key_value(self) -> bool:
        return self.type == LineType.KEY_VALUE and bool(self.key)

    @property
    def whole_line(self) -> TextSpan:
        return TextSpan(0, len(self.raw))
