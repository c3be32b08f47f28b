"""Schema-driven diagnostics for configuration documents."""

from ghosttyconf.diagnostics.engine import (
    INVALID_LINE_MESSAGE,
    DiagnosticEngine,
    DiagnosticOptions,
    validate_document,
)

__all__ = [
    "INVALID_LINE_MESSAGE",
    "DiagnosticEngine",
    "DiagnosticOptions",
    "validate_document",
]
