"""Diagnostic and validation result models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


class DiagnosticCode(StrEnum):
    INVALID_LINE = "INVALID_LINE"
    UNKNOWN_KEY = "UNKNOWN_KEY"
    DEPRECATED_KEY = "DEPRECATED_KEY"
    PLATFORM_MISMATCH = "PLATFORM_MISMATCH"
    INVALID_VALUE = "INVALID_VALUE"
    DUPLICATE_KEY = "DUPLICATE_KEY"


# Editor setting strings and schema constraint strings -> Severity.
_SEVERITY_NAMES: dict[str, Severity] = {
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "information": Severity.INFO,
    "info": Severity.INFO,
    "hint": Severity.HINT,
}


def parse_severity(value: str | Severity | None, default: Severity = Severity.WARNING) -> Severity:
    """Map a severity name (``"Error"``, ``"Information"``, ``"hint"`` ...) to ``Severity``.

    Unrecognised or missing names fall back to ``default``.
    """
    if isinstance(value, Severity):
        return value
    if not value:
        return default
    return _SEVERITY_NAMES.get(value.strip().lower(), default)


class ValidationResult(BaseModel):
    """Outcome of checking a single value against its option type."""

    is_valid: bool
    message: str | None = None
    severity: Severity | None = None

    @property
    def effective_severity(self) -> Severity:
        return self.severity or Severity.WARNING

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str, severity: Severity = Severity.ERROR) -> ValidationResult:
        return cls(is_valid=False, message=message, severity=severity)


class TextRange(BaseModel):
    """A span on a single zero-based line."""

    line: int
    start: int
    end: int

    model_config = {"frozen": True}


class Diagnostic(BaseModel):
    """A located, severity-tagged problem in a configuration document."""

    range: TextRange
    message: str
    severity: Severity
    code: DiagnosticCode

    model_config = {"frozen": True}

    @property
    def line_number(self) -> int:
        return self.range.line

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    def as_tuple(self) -> tuple[int, int, int, str, str]:
        """``(lineNumber, startOffset, endOffset, message, severity)`` for the host."""
        return (self.range.line, self.range.start, self.range.end, self.message, str(self.severity))
