"""Tests for the line parser."""

from __future__ import annotations

import pytest

from ghosttyconf.models.document import LineType, TextSpan
from ghosttyconf.parser.config_parser import ConfigParser, find_separator, parse_document


class TestClassification:
    def test_key_value_line(self) -> None:
        [line] = parse_document("font-size = 14")
        assert line.type is LineType.KEY_VALUE
        assert line.key == "font-size"
        assert line.value == " 14"
        assert line.line_number == 0

    def test_comment_line(self) -> None:
        [line] = parse_document("   # font-size = 14")
        assert line.type is LineType.COMMENT
        assert line.key is None
        assert line.value is None

    @pytest.mark.parametrize("raw", ["", "   ", "\t"])
    def test_empty_line(self, raw: str) -> None:
        [line] = parse_document(raw)
        assert line.type is LineType.EMPTY

    def test_line_without_separator_is_invalid(self) -> None:
        [line] = parse_document("font-size 14")
        assert line.type is LineType.INVALID
        assert line.key_range is None

    @pytest.mark.parametrize("raw", ["=", "= nothing", "   = value", " \t= x"])
    def test_empty_key_is_invalid(self, raw: str) -> None:
        [line] = parse_document(raw)
        assert line.type is LineType.INVALID
        assert line.key is None

    def test_whitespace_around_separator_is_insignificant(self) -> None:
        tight, loose = parse_document("font-size=14\n  font-size   =   14  ")
        assert tight.key == loose.key == "font-size"
        assert tight.value.strip() == loose.value.strip() == "14"

    def test_value_keeps_later_separators(self) -> None:
        [line] = parse_document("keybind = ctrl+c=copy")
        assert line.key == "keybind"
        assert line.value == " ctrl+c=copy"

    def test_empty_value_is_key_value(self) -> None:
        first, second = parse_document("font-size =\nfont-size = ")
        assert first.type is LineType.KEY_VALUE
        assert first.value == ""
        assert second.value == " "

    def test_escaped_separator_is_skipped(self) -> None:
        [line] = parse_document("a\\=b = c")
        assert line.type is LineType.KEY_VALUE
        assert line.key == "a\\=b"
        assert line.value == " c"

    def test_escaped_separator_only_is_invalid(self) -> None:
        [line] = parse_document("title\\=x")
        assert line.type is LineType.INVALID


class TestSpans:
    def test_key_range_covers_trimmed_key(self) -> None:
        [line] = parse_document("  font-size  = 14")
        assert line.key_range == TextSpan(2, 11)
        assert line.raw[line.key_range.start : line.key_range.end] == "font-size"

    def test_value_range_includes_whitespace(self) -> None:
        raw = "font-size =  14  "
        [line] = parse_document(raw)
        assert line.value_range == TextSpan(11, len(raw))
        assert raw[line.value_range.start : line.value_range.end] == "  14  "

    def test_empty_value_range(self) -> None:
        [line] = parse_document("font-size =")
        assert line.value_range == TextSpan(11, 11)
        assert len(line.value_range) == 0

    def test_whole_line_span(self) -> None:
        [line] = parse_document("bogus")
        assert line.whole_line == TextSpan(0, 5)


class TestLineEndings:
    def test_one_entry_per_line(self) -> None:
        lines = parse_document("a = 1\n# c\n\nbroken\n")
        assert [line.type for line in lines] == [
            LineType.KEY_VALUE,
            LineType.COMMENT,
            LineType.EMPTY,
            LineType.INVALID,
            LineType.EMPTY,
        ]
        assert [line.line_number for line in lines] == [0, 1, 2, 3, 4]

    def test_crlf_does_not_leak(self) -> None:
        lines = parse_document("font-size = 14\r\nbackground = #000\r\n")
        assert len(lines) == 3
        assert lines[0].raw == "font-size = 14"
        assert lines[0].value == " 14"
        assert lines[1].value_range == TextSpan(12, 17)

    def test_lone_carriage_return(self) -> None:
        lines = parse_document("a = 1\rb = 2")
        assert [line.key for line in lines] == ["a", "b"]

    def test_empty_document(self) -> None:
        [line] = parse_document("")
        assert line.type is LineType.EMPTY

    def test_leading_bom_is_dropped(self) -> None:
        first, second = parse_document("\ufefffont-size = 14\nfont-size = 15")
        assert first.key == "font-size"
        assert first.raw == "font-size = 14"
        assert first.key_range == TextSpan(0, 9)
        assert second.key == "font-size"


class TestTotality:
    @pytest.mark.parametrize(
        "text",
        [
            "==\n\\\\=x\n#\n  \n=a=b\nk=v",
            "\n\n\n",
            "no separator here\nstill none",
            "x = \"unterminated\n# trailing",
        ],
    )
    def test_every_line_is_classified(self, text: str) -> None:
        lines = parse_document(text)
        assert len(lines) == text.count("\n") + 1
        assert all(line.type in set(LineType) for line in lines)
        for line in lines:
            has_kv = line.key is not None
            assert has_kv == (line.type is LineType.KEY_VALUE)

    def test_parser_is_stateless(self) -> None:
        parser = ConfigParser()
        assert parser.parse("a = 1") == parser.parse("a = 1")


class TestFindSeparator:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("a=b", 1),
            ("no separator", -1),
            ("a\\=b=c", 4),
            ("a\\\\=b", 3),
            ("\\=", -1),
        ],
    )
    def test_find_separator(self, line: str, expected: int) -> None:
        assert find_separator(line) == expected
