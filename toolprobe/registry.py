"""
Registry of external command-line tools.

Each tool is described by a `ToolDefinition`: the executable names to look for (primary first, then
aliases), the arguments that make it print its version, and a regex that extracts the version from
that output. `get_tool()` resolves a name to a `Tool` handle; the handle re-discovers its executable
on every call, so results always reflect the current PATH and environment.
"""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ._internal import binaries, config, platform
from .errors import ToolNotFoundError, ToolUnavailableError


VERSION_TIMEOUT_S = 30


@dataclass(frozen=True)
class ToolDefinition:
    """Static description of an external tool."""

    name: str
    executables: Tuple[str, ...]
    windows_executables: Optional[Tuple[str, ...]] = None
    version_args: Tuple[str, ...] = ("--version",)
    version_pattern: str = r"(\d+(?:\.\d+)+)"
    install_hint: str = ""

    def candidates(self) -> Tuple[str, ...]:
        if platform.is_windows() and self.windows_executables:
            return self.windows_executables
        return self.executables


TOOLS: Dict[str, ToolDefinition] = {
    "imagemagick": ToolDefinition(
        name="imagemagick",
        executables=("magick", "convert"),
        # `convert` on Windows is the filesystem converter, not ImageMagick.
        windows_executables=("magick",),
        version_args=("-version",),
        version_pattern=r"ImageMagick (\d+\.\d+\.\d+(?:-\d+)?)",
        install_hint="macOS: brew install imagemagick; Ubuntu/Debian: apt-get install imagemagick",
    ),
    "ffmpeg": ToolDefinition(
        name="ffmpeg",
        executables=("ffmpeg",),
        version_args=("-version",),
        version_pattern=r"ffmpeg version n?(\d+(?:\.\d+)+)",
        install_hint="macOS: brew install ffmpeg; Ubuntu/Debian: apt-get install ffmpeg",
    ),
    "pandoc": ToolDefinition(
        name="pandoc",
        executables=("pandoc",),
        version_pattern=r"pandoc(?:\.exe)? (\d+(?:\.\d+)+)",
        install_hint="macOS: brew install pandoc; Ubuntu/Debian: apt-get install pandoc",
    ),
    "jpegoptim": ToolDefinition(
        name="jpegoptim",
        executables=("jpegoptim",),
        version_pattern=r"jpegoptim v?(\d+(?:\.\d+)+)",
        install_hint="macOS: brew install jpegoptim; Ubuntu/Debian: apt-get install jpegoptim",
    ),
    "optipng": ToolDefinition(
        name="optipng",
        executables=("optipng",),
        version_pattern=r"OptiPNG version (\d+(?:\.\d+)+)",
        install_hint="macOS: brew install optipng; Ubuntu/Debian: apt-get install optipng",
    ),
    "ghostscript": ToolDefinition(
        name="ghostscript",
        executables=("gs",),
        windows_executables=("gswin64c", "gswin32c", "gs"),
        install_hint="macOS: brew install ghostscript; Ubuntu/Debian: apt-get install ghostscript",
    ),
    "inkscape": ToolDefinition(
        name="inkscape",
        executables=("inkscape",),
        version_pattern=r"Inkscape (\d+(?:\.\d+)+)",
        install_hint="Download from https://inkscape.org/release/",
    ),
}


class Tool:
    """Handle for a registered tool."""

    def __init__(self, definition: ToolDefinition) -> None:
        self.definition = definition

    def __repr__(self) -> str:
        return f"Tool({self.definition.name!r})"

    @property
    def name(self) -> str:
        return self.definition.name

    def executable(self) -> Optional[str]:
        """
        Locate the tool's executable.

        A TOOLPROBE_<NAME>_PATH override wins over PATH discovery. An override that does not resolve
        to an executable makes the tool unavailable instead of silently falling back to PATH.
        """

        pinned = config.executable_override(self.name)
        if pinned:
            path = binaries.resolve_override(pinned)
            binaries.debug(f"{self.name}: override {pinned!r} -> {path!r}")
            return path
        return binaries.find_binary(self.definition.candidates())

    def available(self) -> bool:
        return self.executable() is not None

    def version(self, executable: Optional[str] = None) -> Optional[str]:
        """
        Return the version string the tool reports, or None.

        None covers a missing executable, a failing or hanging version command, and output that does
        not match the definition's version pattern. Pass `executable` to query an already resolved
        path instead of running discovery again.
        """

        exe = executable if executable is not None else self.executable()
        if exe is None:
            return None
        try:
            result = binaries.run_capture([exe, *self.definition.version_args], timeout_s=VERSION_TIMEOUT_S)
        except subprocess.TimeoutExpired:
            binaries.debug(f"{self.name}: version command timed out")
            return None
        except OSError as e:
            binaries.debug(f"{self.name}: version command failed: {e}")
            return None

        output = f"{result.stdout or ''}\n{result.stderr or ''}"
        match = re.search(self.definition.version_pattern, output)
        if not match:
            return None
        return match.group(1)

    def verify(self) -> str:
        """Return the executable path, raising ToolUnavailableError when the tool is missing."""
        exe = self.executable()
        if exe is None:
            hint = self.definition.install_hint
            message = f"{self.name} is not available on this system."
            if hint:
                message = f"{message} Please install it ({hint})."
            raise ToolUnavailableError(message)
        return exe


def get_tool(name: object) -> Tool:
    """Resolve a tool name to a Tool handle; raise ToolNotFoundError for unknown names."""
    key = str(name)
    definition = TOOLS.get(key)
    if definition is None:
        raise ToolNotFoundError(key)
    return Tool(definition)


def list_tools() -> List[str]:
    return sorted(TOOLS)


def register_tool(definition: ToolDefinition) -> None:
    """Add a tool definition, replacing any existing definition with the same name."""
    if not definition.name:
        raise ValueError("definition.name must be a non-empty string")
    if not definition.executables:
        raise ValueError("definition.executables must list at least one executable name")
    TOOLS[definition.name] = definition
