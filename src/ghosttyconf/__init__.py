"""Schema-driven parsing and diagnostics for Ghostty config files."""

from ghosttyconf.diagnostics.engine import DiagnosticOptions, validate_document
from ghosttyconf.models.diagnostics import Diagnostic, Severity, ValidationResult
from ghosttyconf.models.document import LineType, ParsedLine, TextSpan
from ghosttyconf.models.schema import ConfigSchema, OptionInfo, Platform
from ghosttyconf.parser.config_parser import parse_document
from ghosttyconf.schema.loader import (
    SchemaHandle,
    SchemaLoadError,
    is_repeatable_key,
    load_schema,
    load_schema_from_path,
)
from ghosttyconf.settings import Settings
from ghosttyconf.validation.values import validate_value

__version__ = "0.3.0"

__all__ = [
    "ConfigSchema",
    "Diagnostic",
    "DiagnosticOptions",
    "LineType",
    "OptionInfo",
    "ParsedLine",
    "Platform",
    "SchemaHandle",
    "SchemaLoadError",
    "Settings",
    "Severity",
    "TextSpan",
    "ValidationResult",
    "is_repeatable_key",
    "load_schema",
    "load_schema_from_path",
    "parse_document",
    "validate_document",
    "validate_value",
]
