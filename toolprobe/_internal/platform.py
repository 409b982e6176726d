"""Host platform detection."""

from __future__ import annotations

import sys
from typing import Optional

from ..errors import UnsupportedPlatformError


def _classify(value: str) -> Optional[str]:
    value = value.lower()
    # Cygwin and MSYS run on a Windows host where `where.exe` and `magick.exe` are on PATH.
    if value.startswith("win") or value.startswith("cygwin") or value.startswith("msys"):
        return "windows"
    if value.startswith("darwin"):
        return "macos"
    if value.startswith("linux"):
        return "linux"
    return None


def detect(platform: Optional[str] = None) -> str:
    """
    Classify the host as "windows", "macos" or "linux".

    `platform` defaults to `sys.platform` and exists so tests can pass a fixed value.
    """

    value = platform if platform is not None else sys.platform
    kind = _classify(value)
    if kind is None:
        raise UnsupportedPlatformError(
            f"Unable to detect platform (sys.platform={value!r}). Supported platforms: Windows, macOS, Linux"
        )
    return kind


def is_windows(platform: Optional[str] = None) -> bool:
    """Same classification as detect(), but other POSIX hosts (e.g. FreeBSD) count as not Windows."""
    value = platform if platform is not None else sys.platform
    return _classify(value) == "windows"
