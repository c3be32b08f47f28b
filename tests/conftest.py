"""Shared test fixtures for ghosttyconf."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from ghosttyconf.diagnostics.engine import DiagnosticOptions
from ghosttyconf.models.schema import ConfigSchema
from ghosttyconf.schema.loader import bundled_schema_path, read_schema, reset_default_schema

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_CONFIG = FIXTURES_DIR / "sample.config"

TEST_SCHEMA_DATA = {
    "version": "1.0.0",
    "description": "Test schema",
    "repeatableKeys": ["palette", "font-family"],
    "types": {
        "cursor-style": {"values": ["block", "bar", "underline"]},
        "padding": {"pattern": "\\d+(,\\d+)?"},
    },
    "options": {
        "font-size": {"type": "number", "constraints": {"min": 1, "max": 255}},
        "font-family": {"type": "font-family"},
        "background": {"type": "color"},
        "palette": {"type": "palette"},
        "keybind": {"type": "keybind", "repeatable": True},
        "cursor-style": {"type": "cursor-style"},
        "window-padding-x": {"type": "padding"},
        "window-theme": {"type": "enum", "values": ["auto", "light", "dark"]},
        "link-url": {"type": "boolean"},
        "minimum-contrast": {
            "type": "number",
            "constraints": {"min": 1, "max": 21, "severity": "info"},
        },
        "resize-overlay-duration": {"type": "duration"},
        "config-file": {"type": "path"},
        "title": {"type": "string"},
        "gtk-adwaita": {"type": "boolean", "deprecated": True, "platforms": ["linux"]},
        "macos-titlebar-style": {
            "type": "enum",
            "values": ["native", "transparent", "tabs", "hidden"],
            "platforms": ["macos"],
        },
    },
}


@pytest.fixture
def schema() -> ConfigSchema:
    """Small schema covering every built-in value type."""
    return ConfigSchema.model_validate(TEST_SCHEMA_DATA)


@pytest.fixture
def bundled_schema() -> ConfigSchema:
    return read_schema(bundled_schema_path())


@pytest.fixture
def options() -> DiagnosticOptions:
    """Default options with platform checks pinned to Linux."""
    return DiagnosticOptions(current_platform="linux")


@pytest.fixture(autouse=True)
def _reset_schema_cache() -> Iterator[None]:
    reset_default_schema()
    yield
    reset_default_schema()
