"""
Helpers for tests that exercise external command-line tools.

These functions let a test suite ask whether a tool is installed, read its version, provision
fixture images (optionally resized with ImageMagick), create scratch directories, and skip tests
whose tool is missing. Nothing is cached: every call re-checks the system.
"""

from __future__ import annotations

import os
import re
import shutil
import subprocess
import tempfile
from typing import Dict, Optional, Tuple

import cv2
import pytest

from . import registry
from ._internal import binaries, config, platform
from .errors import ImageResizeError, ToolNotFoundError


DEFAULT_IMAGE_SIZE = "100x100"

SUMMARY_TOOLS = ("imagemagick", "ffmpeg", "pandoc", "jpegoptim", "optipng")

_SIZE_RE = re.compile(r"^\d+x\d+$")


def get_tool(name: object) -> registry.Tool:
    return registry.get_tool(name)


def tool_available(name: object) -> bool:
    """Return True if the tool is registered and its executable can be found."""
    try:
        tool = get_tool(name)
    except ToolNotFoundError:
        return False
    return tool.available()


def tool_version(name: object) -> Optional[str]:
    """Return the tool's version when it is available, else None."""
    tool = get_tool(name)
    if not tool.available():
        return None
    return tool.version()


def available_tools() -> Dict[str, bool]:
    """Map each summary tool name to its current availability."""
    return {name: tool_available(name) for name in SUMMARY_TOOLS}


def command_exists(cmd: str) -> bool:
    return binaries.probe_command(cmd)


def fixture_path(color: str = "blue") -> str:
    """Path of the pre-built 100x100 fixture for `color` ("red", anything else means blue)."""
    fixtures_dir = config.load_env_config().fixtures_dir
    name = "test_red.png" if str(color).strip().lower() == "red" else "test_blue.png"
    return os.path.join(fixtures_dir, name)


def _resize_command_base() -> str:
    magick = "magick.exe" if platform.is_windows() else "magick"
    return "magick" if command_exists(magick) else "convert"


def create_test_image(path: str, size: str = DEFAULT_IMAGE_SIZE, color: str = "blue") -> str:
    """
    Create a test image at `path` from a fixture PNG.

    Fixtures are copied rather than generated so the helper does not depend on ImageMagick's
    built-in image formats, which are missing from some builds.

    Args:
        path: Destination file path.
        size: "<width>x<height>". Anything other than the fixture size (100x100) is produced by
            force-resizing the fixture, ignoring its aspect ratio.
        color: "red" or "blue"; unknown colors fall back to blue.

    Returns:
        The destination path.
    """

    size = str(size).strip()
    if not _SIZE_RE.match(size):
        raise ValueError(f"size must look like <width>x<height>, got {size!r}")

    fixture_file = fixture_path(color)
    dest = os.fspath(path)

    if size == DEFAULT_IMAGE_SIZE:
        shutil.copyfile(fixture_file, dest)
        return path

    cmd = [_resize_command_base(), fixture_file, "-resize", f"{size}!", dest]
    binaries.debug(f"resizing fixture: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ImageResizeError(f"Failed to resize test image: {e}", stderr=str(e)) from e
    if result.returncode != 0:
        raise ImageResizeError(f"Failed to resize test image: {result.stderr}", stderr=result.stderr)
    return path


def image_dimensions(path: str) -> Tuple[int, int]:
    """Return (width, height) of an image file."""
    image = cv2.imread(os.fspath(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ValueError(f"Failed to read image: {path}")
    height, width = image.shape[:2]
    return int(width), int(height)


def create_temp_dir(prefix: str = "toolprobe_test") -> str:
    """Create a uniquely named temp directory. Removing it is the caller's job."""
    return tempfile.mkdtemp(prefix=prefix)


def skip_display_name(name: object) -> str:
    tool_name = str(name)
    # ImageMagick keeps its lowercase registry name in skip messages.
    if tool_name != "imagemagick":
        tool_name = tool_name.capitalize()
    return tool_name


def skip_unless_tool_available(name: object) -> None:
    """Skip the running test when the tool is not available."""
    if not tool_available(name):
        pytest.skip(f"{skip_display_name(name)} is not available on this system")
