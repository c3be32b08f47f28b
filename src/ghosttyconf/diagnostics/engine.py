"""Diagnostic engine: checks parsed lines against the option schema."""

from __future__ import annotations

import logging

from pydantic import BaseModel, field_validator

from ghosttyconf.models.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    Severity,
    TextRange,
    parse_severity,
)
from ghosttyconf.models.document import LineType, ParsedLine, TextSpan
from ghosttyconf.models.schema import ConfigSchema, OptionInfo, Platform
from ghosttyconf.parser.config_parser import parse_document
from ghosttyconf.platform import detect_platform
from ghosttyconf.schema.loader import is_repeatable_key
from ghosttyconf.settings import Settings
from ghosttyconf.validation.values import validate_value

logger = logging.getLogger("ghosttyconf.diagnostics")

INVALID_LINE_MESSAGE = "Invalid line format. Expected: key = value or # comment"


class DiagnosticOptions(BaseModel):
    """Per-pass toggles supplied by the host."""

    enable_diagnostics: bool = True
    show_platform_hints: bool = True
    # Severity of unknown-key diagnostics only.
    diagnostic_severity: Severity = Severity.WARNING
    # None disables platform checks.
    current_platform: Platform | None = None

    @field_validator("diagnostic_severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> Severity:
        if isinstance(value, str) or value is None:
            return parse_severity(value)
        return Severity.WARNING

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> DiagnosticOptions:
        """Build options from ``Settings`` and the detected host platform."""
        settings = settings or Settings()
        return cls(
            enable_diagnostics=settings.enable_diagnostics,
            show_platform_hints=settings.show_platform_hints,
            diagnostic_severity=settings.diagnostic_severity,
            current_platform=detect_platform(),
        )


def _range(line: ParsedLine, span: TextSpan | None) -> TextRange:
    if span is None:
        span = line.whole_line
    return TextRange(line=line.line_number, start=span.start, end=span.end)


class DiagnosticEngine:
    """Produces the ordered diagnostics for one document.

    Per-line checks run first, in line order; duplicate-key diagnostics
    follow, grouped by key in first-seen order.
    """

    def __init__(self, schema: ConfigSchema, options: DiagnosticOptions | None = None) -> None:
        self.schema = schema
        self.options = options or DiagnosticOptions()

    def validate(self, text: str) -> list[Diagnostic]:
        if not self.options.enable_diagnostics:
            return []
        lines = parse_document(text)
        diagnostics: list[Diagnostic] = []
        for line in lines:
            try:
                diagnostics.extend(self.check_line(line))
            except Exception:
                logger.exception("Skipping line %d after an unexpected error", line.line_number)
        diagnostics.extend(self.check_duplicates(lines))
        logger.debug("Validated %d lines: %d diagnostics", len(lines), len(diagnostics))
        return diagnostics

    # -- per-line checks -----------------------------------------------------

    def check_line(self, line: ParsedLine) -> list[Diagnostic]:
        if line.type == LineType.INVALID:
            return [
                Diagnostic(
                    range=_range(line, None),
                    message=INVALID_LINE_MESSAGE,
                    severity=Severity.ERROR,
                    code=DiagnosticCode.INVALID_LINE,
                )
            ]
        if not line.is_key_value:
            return []

        key = line.key or ""
        option = self.schema.options.get(key)
        if option is None:
            return [
                Diagnostic(
                    range=_range(line, line.key_range),
                    message=f"Unknown configuration key: '{key}'",
                    severity=self.options.diagnostic_severity,
                    code=DiagnosticCode.UNKNOWN_KEY,
                )
            ]

        diagnostics: list[Diagnostic] = []
        if option.deprecated:
            diagnostics.append(
                Diagnostic(
                    range=_range(line, line.key_range),
                    message=f"'{key}' is deprecated and may be removed in future versions",
                    severity=Severity.HINT,
                    code=DiagnosticCode.DEPRECATED_KEY,
                )
            )
        platform_diagnostic = self._check_platform(line, key, option)
        if platform_diagnostic is not None:
            diagnostics.append(platform_diagnostic)

        value = line.value or ""
        # An empty value resets the option to its default.
        if value.strip():
            result = validate_value(self.schema, key, value)
            if not result.is_valid and result.message:
                diagnostics.append(
                    Diagnostic(
                        range=_range(line, line.value_range),
                        message=result.message,
                        severity=result.effective_severity,
                        code=DiagnosticCode.INVALID_VALUE,
                    )
                )
        return diagnostics

    def _check_platform(self, line: ParsedLine, key: str, option: OptionInfo) -> Diagnostic | None:
        current = self.options.current_platform
        if not option.platforms or not self.options.show_platform_hints or current is None:
            return None
        if current in option.platforms:
            return None
        return Diagnostic(
            range=_range(line, line.key_range),
            message=(
                f"'{key}' is only available on {', '.join(option.platforms)} "
                f"(current: {current})"
            ),
            severity=Severity.INFO,
            code=DiagnosticCode.PLATFORM_MISMATCH,
        )

    # -- whole-document checks -----------------------------------------------

    def check_duplicates(self, lines: list[ParsedLine]) -> list[Diagnostic]:
        occurrences: dict[str, list[ParsedLine]] = {}
        for line in lines:
            if line.is_key_value and line.key:
                occurrences.setdefault(line.key, []).append(line)

        diagnostics: list[Diagnostic] = []
        for key, group in occurrences.items():
            if len(group) <= 1 or is_repeatable_key(self.schema, key):
                continue
            first_line = group[0].line_number + 1
            for line in group[1:]:
                diagnostics.append(
                    Diagnostic(
                        range=_range(line, line.key_range),
                        message=f"Duplicate key '{key}' (first defined on line {first_line})",
                        severity=Severity.WARNING,
                        code=DiagnosticCode.DUPLICATE_KEY,
                    )
                )
        return diagnostics


def validate_document(
    schema: ConfigSchema,
    text: str,
    options: DiagnosticOptions | None = None,
) -> list[Diagnostic]:
    """Return every diagnostic for ``text`` under ``schema``."""
    return DiagnosticEngine(schema, options).validate(text)
