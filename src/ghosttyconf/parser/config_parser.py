"""Line-oriented parser for Ghostty configuration text with span tracking."""

from __future__ import annotations

from ghosttyconf.models.document import LineType, ParsedLine, TextSpan

_SEPARATOR = "="
_ESCAPE = "\\"
_COMMENT = "#"
_BOM = "\ufeff"


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` terminators to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def find_separator(line: str) -> int:
    """Index of the first ``=`` not escaped by an odd run of backslashes, or -1."""
    backslashes = 0
    for index, char in enumerate(line):
        if char == _ESCAPE:
            backslashes += 1
            continue
        if char == _SEPARATOR and backslashes % 2 == 0:
            return index
        backslashes = 0
    return -1


class ConfigParser:
    """Classifies every line of a document as key/value, comment, empty or invalid.

    Stateless; never raises.  The number of returned lines always equals the
    number of ``\\n``-separated lines in the normalized text.
    """

    def parse(self, text: str) -> list[ParsedLine]:
        lines = normalize_newlines(text.removeprefix(_BOM)).split("\n")
        return [self.parse_line(raw, number) for number, raw in enumerate(lines)]

    def parse_line(self, raw: str, line_number: int) -> ParsedLine:
        stripped = raw.strip()
        if not stripped:
            return ParsedLine(line_number=line_number, raw=raw, type=LineType.EMPTY)
        if stripped.startswith(_COMMENT):
            return ParsedLine(line_number=line_number, raw=raw, type=LineType.COMMENT)

        separator = find_separator(raw)
        if separator < 0:
            return ParsedLine(line_number=line_number, raw=raw, type=LineType.INVALID)

        key_part = raw[:separator]
        key = key_part.strip()
        if not key:
            # "= value" and "   = value" alike
            return ParsedLine(line_number=line_number, raw=raw, type=LineType.INVALID)

        key_start = len(key_part) - len(key_part.lstrip())
        value_start = separator + 1
        return ParsedLine(
            line_number=line_number,
            raw=raw,
            type=LineType.KEY_VALUE,
            key=key,
            value=raw[value_start:],
            key_range=TextSpan(key_start, key_start + len(key)),
            value_range=TextSpan(value_start, len(raw)),
        )


_parser = ConfigParser()


def parse_document(text: str) -> list[ParsedLine]:
    """Parse ``text`` into one ``ParsedLine`` per line, in order."""
    return _parser.parse(text)
