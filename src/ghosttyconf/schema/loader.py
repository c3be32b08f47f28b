"""Schema artifact loading with a write-once, process-wide cache."""

from __future__ import annotations

import logging
import threading
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ghosttyconf.models.schema import ConfigSchema, OptionInfo
from ghosttyconf.settings import Settings

logger = logging.getLogger("ghosttyconf.schema")

SCHEMA_FILENAME = "ghostty-syntax.schema.json"

_MAX_ARTIFACT_SIZE = 10_000_000  # 10M characters


class SchemaLoadError(Exception):
    """Raised when a schema artifact is missing, unparsable or ill-shaped."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot load schema '{path}': {reason}")


def bundled_schema_path() -> Path:
    """Path of the schema artifact shipped with the package."""
    return Path(str(resources.files("ghosttyconf.schema.data").joinpath(SCHEMA_FILENAME)))


class SchemaLoader:
    """Reads schema artifacts (JSON, or YAML) into ``ConfigSchema``.

    JSON is a subset of YAML 1.2, so ruamel.yaml's safe loader handles both.
    """

    def __init__(self) -> None:
        self._yaml = YAML(typ="safe", pure=True)

    def load(self, path: Path | str) -> ConfigSchema:
        """Load and validate the artifact at ``path``; raises ``SchemaLoadError``."""
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except OSError as exc:
            raise SchemaLoadError(path, exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise SchemaLoadError(path, "artifact is not valid UTF-8") from exc
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> ConfigSchema:
        if len(content) > _MAX_ARTIFACT_SIZE:
            raise SchemaLoadError(
                filename,
                f"artifact exceeds maximum size ({len(content):,} chars)",
            )
        try:
            data: Any = self._yaml.load(content)
        except YAMLError as exc:
            raise SchemaLoadError(filename, f"unparsable artifact: {exc}") from exc
        if not isinstance(data, dict):
            raise SchemaLoadError(filename, "top level must be a mapping")
        try:
            return ConfigSchema.model_validate(data)
        except ValidationError as exc:
            raise SchemaLoadError(
                filename, f"{exc.error_count()} schema validation error(s)"
            ) from exc


_loader = SchemaLoader()


def read_schema(path: Path | str) -> ConfigSchema:
    """Strict load: raises ``SchemaLoadError`` instead of degrading."""
    return _loader.load(path)


def load_schema_from_path(path: Path | str) -> ConfigSchema:
    """Load a schema from an explicit source, bypassing any cache.

    A missing or corrupt artifact yields ``ConfigSchema.empty()``.
    """
    try:
        schema = read_schema(path)
    except SchemaLoadError as exc:
        logger.warning("%s; falling back to an empty schema", exc)
        return ConfigSchema.empty()
    logger.debug("Loaded schema %s from %s (%d options)", schema.version, path, len(schema.options))
    return schema


class SchemaHandle:
    """Lazily loaded schema, stored at most once per handle.

    Owned by the host and passed to every core call.  Only a successful load
    is kept; after a failure ``get()`` returns an empty schema and the next
    call tries again.  Concurrent first calls converge on a single instance.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._schema: ConfigSchema | None = None

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else bundled_schema_path()

    @property
    def loaded(self) -> bool:
        return self._schema is not None

    def get(self) -> ConfigSchema:
        schema = self._schema
        if schema is not None:
            return schema
        with self._lock:
            if self._schema is not None:
                return self._schema
            try:
                loaded = read_schema(self.path)
            except SchemaLoadError as exc:
                logger.warning("%s; falling back to an empty schema", exc)
                return ConfigSchema.empty()
            logger.debug("Cached schema %s (%d options)", loaded.version, len(loaded.options))
            self._schema = loaded
            return loaded


_default_handle: SchemaHandle | None = None
_default_lock = threading.Lock()


def load_schema(path: Path | str | None = None) -> ConfigSchema:
    """Return the process-wide schema, loading it on first use.

    ``path`` only takes effect on the call that creates the default handle;
    later calls return the cached instance.
    """
    global _default_handle  # noqa: PLW0603
    with _default_lock:
        if _default_handle is None:
            if path is None:
                path = Settings().schema_path
            _default_handle = SchemaHandle(path)
        handle = _default_handle
    return handle.get()


def reset_default_schema() -> None:
    """Forget the process-wide schema handle (for tests)."""
    global _default_handle  # noqa: PLW0603
    with _default_lock:
        _default_handle = None


def lookup(schema: ConfigSchema, key: str) -> OptionInfo | None:
    return schema.options.get(key)


def is_repeatable_key(schema: ConfigSchema, key: str) -> bool:
    """True when ``key`` may appear more than once in a document.

    Either a ``repeatableKeys`` entry or ``repeatable: true`` on the option
    is sufficient.
    """
    if key in schema.repeatable_keys:
        return True
    option = schema.options.get(key)
    return option is not None and option.repeatable
