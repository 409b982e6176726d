"""
Error types raised by toolprobe.

Argument problems are reported with plain `ValueError`; the classes below cover lookup, availability
and external-command failures so callers can catch them precisely.
"""

from __future__ import annotations


class ToolprobeError(Exception):
    """Base class for toolprobe errors."""


class ToolNotFoundError(ToolprobeError, LookupError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tool not found: {name}")
        self.name = name


class ToolUnavailableError(ToolprobeError):
    """Raised when a registered tool has no usable executable on this system."""


class ImageResizeError(ToolprobeError, RuntimeError):
    """Raised when the external image tool fails to resize a fixture."""

    def __init__(self, message: str, *, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class UnsupportedPlatformError(ToolprobeError):
    """Raised when the host platform cannot be classified."""
