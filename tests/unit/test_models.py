"""Tests for model types and the severity lookup."""

from __future__ import annotations

import pytest

from ghosttyconf.models.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    Severity,
    TextRange,
    ValidationResult,
    parse_severity,
)
from ghosttyconf.models.document import LineType
from ghosttyconf.models.schema import ConfigSchema, OptionInfo, Platform


class TestEnums:
    def test_severity_values(self) -> None:
        assert Severity.ERROR == "error"
        assert Severity.INFO == "info"

    def test_line_type_values(self) -> None:
        assert LineType.KEY_VALUE == "keyValue"
        assert LineType.INVALID == "invalid"

    def test_platform_values(self) -> None:
        assert Platform.MACOS == "macos"
        assert Platform.LINUX == "linux"


class TestParseSeverity:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Error", Severity.ERROR),
            ("Warning", Severity.WARNING),
            ("Information", Severity.INFO),
            ("info", Severity.INFO),
            ("Hint", Severity.HINT),
            (" ERROR ", Severity.ERROR),
            (Severity.HINT, Severity.HINT),
        ],
    )
    def test_known_names(self, name: str, expected: Severity) -> None:
        assert parse_severity(name) is expected

    @pytest.mark.parametrize("name", ["", None, "fatal", "Critical"])
    def test_falls_back_to_default(self, name: str | None) -> None:
        assert parse_severity(name) is Severity.WARNING
        assert parse_severity(name, default=Severity.ERROR) is Severity.ERROR


class TestValidationResult:
    def test_ok(self) -> None:
        result = ValidationResult.ok()
        assert result.is_valid
        assert result.message is None

    def test_effective_severity_defaults_to_warning(self) -> None:
        result = ValidationResult(is_valid=False, message="bad")
        assert result.effective_severity is Severity.WARNING

    def test_fail(self) -> None:
        result = ValidationResult.fail("bad", Severity.HINT)
        assert not result.is_valid
        assert result.effective_severity is Severity.HINT


class TestDiagnostic:
    def test_host_shape(self) -> None:
        diag = Diagnostic(
            range=TextRange(line=3, start=2, end=7),
            message="Unknown configuration key: 'bogus'",
            severity=Severity.WARNING,
            code=DiagnosticCode.UNKNOWN_KEY,
        )
        assert diag.as_tuple() == (3, 2, 7, "Unknown configuration key: 'bogus'", "warning")
        assert (diag.line_number, diag.start, diag.end) == (3, 2, 7)

    def test_frozen(self) -> None:
        diag = Diagnostic(
            range=TextRange(line=0, start=0, end=1),
            message="x",
            severity=Severity.ERROR,
            code=DiagnosticCode.INVALID_LINE,
        )
        with pytest.raises(Exception):
            diag.message = "y"  # type: ignore[misc]


class TestSchemaModel:
    def test_aliases(self) -> None:
        schema = ConfigSchema.model_validate({"repeatableKeys": ["keybind"]})
        assert schema.repeatable_keys == ["keybind"]

    def test_option_defaults(self) -> None:
        option = OptionInfo()
        assert option.type == "string"
        assert option.deprecated is False
        assert option.platforms == []
        assert option.constraints.min is None

    def test_empty_schema(self) -> None:
        schema = ConfigSchema.empty()
        assert schema.options == {}
        assert schema.types == {}
        assert schema.repeatable_keys == []
        assert schema.description == "Fallback schema"
