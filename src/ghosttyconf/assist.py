"""Schema queries backing editor completion and hover."""

from __future__ import annotations

from dataclasses import dataclass

from ghosttyconf.models.document import ParsedLine
from ghosttyconf.models.schema import ConfigSchema, OptionType
from ghosttyconf.schema.loader import is_repeatable_key


@dataclass
class KeyCompletion:
    """A completion candidate for a configuration key."""

    name: str
    detail: str
    deprecated: bool = False


def complete_keys(
    schema: ConfigSchema, prefix: str = "", include_deprecated: bool = False
) -> list[KeyCompletion]:
    """Options whose name starts with ``prefix``, sorted by name."""
    prefix = prefix.strip()
    completions = [
        KeyCompletion(name=name, detail=option.type, deprecated=option.deprecated)
        for name, option in schema.options.items()
        if name.startswith(prefix) and (include_deprecated or not option.deprecated)
    ]
    return sorted(completions, key=lambda c: c.name)


def complete_values(schema: ConfigSchema, key: str) -> list[str]:
    """Suggested values for ``key``; empty for unknown keys and free-form types."""
    option = schema.options.get(key)
    if option is None:
        return []
    if option.type == OptionType.BOOLEAN:
        candidates = ["true", "false"]
    elif option.values:
        candidates = list(option.values)
    elif option.type in schema.types:
        type_def = schema.types[option.type]
        candidates = list(type_def.values or type_def.examples)
    else:
        candidates = []
    default = option.default
    if default is not None and default != "":
        text = str(default).lower() if isinstance(default, bool) else str(default)
        if text not in candidates:
            candidates.append(text)
    return candidates


def describe_option(schema: ConfigSchema, key: str) -> str | None:
    """Markdown hover text for ``key``, or None when the key is unknown."""
    option = schema.options.get(key)
    if option is None:
        return None
    parts = [f"**{key}** `{option.type}`"]
    if option.description:
        parts.append(option.description)
    details: list[str] = []
    if option.default is not None and option.default != "":
        default = str(option.default).lower() if isinstance(option.default, bool) else option.default
        details.append(f"Default: `{default}`")
    if option.values:
        details.append("Values: " + ", ".join(f"`{v}`" for v in option.values))
    if option.platforms:
        details.append(f"Platforms: {', '.join(option.platforms)}")
    if is_repeatable_key(schema, key):
        details.append("May be specified multiple times")
    if option.deprecated:
        details.append("*Deprecated*")
    if details:
        parts.append("\n".join(f"- {d}" for d in details))
    return "\n\n".join(parts)


def key_at(line: ParsedLine, character: int) -> str | None:
    """The key under ``character`` on a key/value line, if any."""
    if not line.is_key_value or line.key_range is None:
        return None
    if line.key_range.start <= character <= line.key_range.end:
        return line.key
    return None
