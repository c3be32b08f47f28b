"""Option schema types: option catalogue, custom types, repeatability."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class Platform(StrEnum):
    MACOS = "macos"
    LINUX = "linux"


class OptionType(StrEnum):
    """Value types with a built-in syntactic rule."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ENUM = "enum"
    COLOR = "color"
    FONT_FAMILY = "font-family"
    KEYBIND = "keybind"
    PALETTE = "palette"
    DURATION = "duration"
    PATH = "path"


class OptionConstraints(BaseModel):
    """Extra rules applied on top of an option's declared type."""

    min: float | None = None
    max: float | None = None
    integer: bool = False
    pattern: str | None = None
    # Overrides the default ``error`` severity of a failed value check.
    severity: str | None = None


class OptionInfo(BaseModel):
    """A single configuration key as declared by the schema."""

    type: str = "string"
    description: str = ""
    default: Any = None
    deprecated: bool = False
    # Platform tags; see ``Platform``. Unknown tags never match the host.
    platforms: list[str] = []
    repeatable: bool = False
    values: list[str] = []
    constraints: OptionConstraints = Field(default_factory=OptionConstraints)


class TypeDefinition(BaseModel):
    """A named value type declared in the schema's ``types`` section."""

    description: str = ""
    values: list[str] = []
    pattern: str | None = None
    examples: list[str] = []


class ConfigSchema(BaseModel):
    """The option catalogue for one schema artifact."""

    version: str = "0.0.0"
    description: str = ""
    options: dict[str, OptionInfo] = {}
    types: dict[str, TypeDefinition] = {}
    repeatable_keys: list[str] = Field([], alias="repeatableKeys")

    model_config = {"populate_by_name": True}

    @classmethod
    def empty(cls) -> ConfigSchema:
        """Schema used when the artifact cannot be loaded."""
        return cls(version="0.0.0", description="Fallback schema")
