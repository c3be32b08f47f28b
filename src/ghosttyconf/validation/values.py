"""Type-directed validation of configuration values."""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import lru_cache

from ghosttyconf.models.diagnostics import Severity, ValidationResult, parse_severity
from ghosttyconf.models.schema import ConfigSchema, OptionInfo, OptionType
from ghosttyconf.validation.colors import is_color_name

# A checker returns a failure message, or None when the value is acceptable.
Checker = Callable[[str, OptionInfo, ConfigSchema], str | None]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_HEX_COLOR_RE = re.compile(r"#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_DURATION_RE = re.compile(r"(?:\d+(?:\.\d+)?(?:ns|us|ms|s|m|h|d)\s*)+")
_PALETTE_RE = re.compile(r"(\d+)\s*=\s*(.*)")
_ACTION_RE = re.compile(r"[a-z][a-z0-9_]*(?::.*)?")

_KEYBIND_PREFIXES = frozenset({"global", "all", "unconsumed", "performable"})
_PALETTE_SIZE = 256


@lru_cache(maxsize=128)
def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error:
        # A broken pattern in the schema disables that check.
        return None


def _unquote(text: str) -> str | None:
    """Strip one pair of surrounding double quotes; None if quotes are unbalanced."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    if text.startswith('"') or text.endswith('"'):
        return None
    return text


def _matches(pattern: str, text: str) -> bool:
    compiled = _compile(pattern)
    return compiled is None or compiled.fullmatch(text) is not None


# ---------------------------------------------------------------------------
# Per-type checkers
# ---------------------------------------------------------------------------


def _check_boolean(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    if text in ("true", "false"):
        return None
    return f"Expected a boolean (true or false), got '{text}'"


def _check_number(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    if not _NUMBER_RE.fullmatch(text):
        return f"Expected a number, got '{text}'"
    number = float(text)
    limits = option.constraints
    if limits.integer and not number.is_integer():
        return f"Expected a whole number, got '{text}'"
    if limits.min is not None and number < limits.min:
        return f"Value {text} is below the minimum of {limits.min:g}"
    if limits.max is not None and number > limits.max:
        return f"Value {text} is above the maximum of {limits.max:g}"
    return None


def _check_string(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    if _unquote(text) is None:
        return f"Unbalanced quotes in '{text}'"
    return None


def _enum_values(option: OptionInfo, schema: ConfigSchema) -> list[str]:
    if option.values:
        return option.values
    type_def = schema.types.get(option.type)
    return type_def.values if type_def is not None else []


def _check_enum(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    allowed = _enum_values(option, schema)
    if not allowed:
        return None
    value = _unquote(text)
    if value in allowed:
        return None
    return f"Invalid value '{text}'. Expected one of: {', '.join(allowed)}"


def _is_color(text: str) -> bool:
    return bool(_HEX_COLOR_RE.fullmatch(text) or is_color_name(text))


def _check_color(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    value = _unquote(text)
    if value is not None and _is_color(value):
        return None
    return f"Invalid color '{text}'. Expected #RRGGBB, #RGB or a color name"


def _check_font_family(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    # An empty quoted string resets the fallback list.
    if _unquote(text) is None:
        return f"Unbalanced quotes in font family '{text}'"
    return None


def _check_trigger(trigger: str) -> bool:
    while ":" in trigger:
        prefix, _, rest = trigger.partition(":")
        if prefix not in _KEYBIND_PREFIXES:
            break
        trigger = rest
    for step in trigger.split(">"):
        keys = step.split("+")
        if not all(key and not any(ch.isspace() for ch in key) for key in keys):
            return False
    return True


def _check_keybind(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    if text == "clear":
        return None
    trigger, separator, action = text.partition("=")
    if not separator:
        return f"Keybind '{text}' must have the form trigger=action"
    trigger = trigger.strip()
    action = action.strip()
    if not trigger or not _check_trigger(trigger):
        return f"Invalid keybind trigger '{trigger}'. Expected keys joined by '+', e.g. ctrl+shift+c"
    if not _ACTION_RE.fullmatch(action):
        return f"Invalid keybind action '{action}'. Expected an action name, e.g. copy_to_clipboard"
    return None


def _check_palette(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    match = _PALETTE_RE.fullmatch(text)
    if match is None:
        return f"Palette entry '{text}' must have the form N=color"
    index, color = int(match.group(1)), match.group(2).strip()
    if index >= _PALETTE_SIZE:
        return f"Palette index {index} is out of range (0-{_PALETTE_SIZE - 1})"
    if not _is_color(color):
        return f"Invalid palette color '{color}'. Expected #RRGGBB, #RGB or a color name"
    return None


def _check_duration(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    if _DURATION_RE.fullmatch(text):
        return None
    return f"Invalid duration '{text}'. Expected e.g. 500ms, 2s or 1h30m"


def _check_path(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    value = _unquote(text)
    if value is None:
        return f"Unbalanced quotes in path '{text}'"
    # A leading '?' marks an optional file.
    if not value.removeprefix("?").strip():
        return "Path cannot be empty"
    return None


def _check_custom(text: str, option: OptionInfo, schema: ConfigSchema) -> str | None:
    type_def = schema.types.get(option.type)
    if type_def is None:
        return None
    if type_def.values:
        return _check_enum(text, option, schema)
    if type_def.pattern and not _matches(type_def.pattern, text):
        return f"Invalid {option.type} value '{text}'"
    return None


_CHECKERS: dict[str, Checker] = {
    OptionType.BOOLEAN: _check_boolean,
    OptionType.NUMBER: _check_number,
    OptionType.STRING: _check_string,
    OptionType.ENUM: _check_enum,
    OptionType.COLOR: _check_color,
    OptionType.FONT_FAMILY: _check_font_family,
    OptionType.KEYBIND: _check_keybind,
    OptionType.PALETTE: _check_palette,
    OptionType.DURATION: _check_duration,
    OptionType.PATH: _check_path,
}


def check_option_value(option: OptionInfo, schema: ConfigSchema, value: str) -> str | None:
    """Failure message for ``value`` under ``option``, or None if it is valid."""
    text = value.strip()
    checker = _CHECKERS.get(option.type, _check_custom)
    message = checker(text, option, schema)
    if message is None and option.constraints.pattern:
        if not _matches(option.constraints.pattern, text):
            message = f"Value '{text}' does not match the expected format"
    return message


def validate_value(schema: ConfigSchema, key: str, value: str) -> ValidationResult:
    """Check ``value`` against the declared type of ``key``.

    ``key`` must exist in the schema (``KeyError`` otherwise); unknown keys
    are reported by the diagnostic engine.
    """
    option = schema.options[key]
    message = check_option_value(option, schema, value)
    if message is None:
        return ValidationResult.ok()
    severity = parse_severity(option.constraints.severity, default=Severity.ERROR)
    return ValidationResult.fail(message, severity)
