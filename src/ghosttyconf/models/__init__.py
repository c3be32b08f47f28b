"""Pydantic and dataclass models for ghosttyconf."""

from ghosttyconf.models.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    Severity,
    TextRange,
    ValidationResult,
    parse_severity,
)
from ghosttyconf.models.document import LineType, ParsedLine, TextSpan
from ghosttyconf.models.schema import (
    ConfigSchema,
    OptionConstraints,
    OptionInfo,
    OptionType,
    Platform,
    TypeDefinition,
)

__all__ = [
    "ConfigSchema",
    "Diagnostic",
    "DiagnosticCode",
    "LineType",
    "OptionConstraints",
    "OptionInfo",
    "OptionType",
    "ParsedLine",
    "Platform",
    "Severity",
    "TextRange",
    "TextSpan",
    "TypeDefinition",
    "ValidationResult",
    "parse_severity",
]
