"""Map the host operating system to a schema platform tag."""

from __future__ import annotations

import platform as _platform

from ghosttyconf.models.schema import Platform

_SYSTEM_MAP: dict[str, Platform] = {
    "Darwin": Platform.MACOS,
    "Linux": Platform.LINUX,
}


def detect_platform(system: str | None = None) -> Platform | None:
    """Return the platform tag for ``system`` (default: the running host).

    Hosts outside the known set yield ``None``, which disables platform checks.
    """
    if system is None:
        system = _platform.system()
    return _SYSTEM_MAP.get(system)
