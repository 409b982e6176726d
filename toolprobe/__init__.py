"""Locate external command-line tools and provide test helpers that depend on them."""

from importlib.metadata import version

from toolprobe.errors import (
    ImageResizeError,
    ToolNotFoundError,
    ToolprobeError,
    ToolUnavailableError,
    UnsupportedPlatformError,
)
from toolprobe.registry import Tool, ToolDefinition, list_tools, register_tool
from toolprobe.tool_helper import (
    available_tools,
    command_exists,
    create_temp_dir,
    create_test_image,
    fixture_path,
    get_tool,
    image_dimensions,
    skip_unless_tool_available,
    tool_available,
    tool_version,
)

try:
    __version__ = version(__name__)
except Exception:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "ImageResizeError",
    "Tool",
    "ToolDefinition",
    "ToolNotFoundError",
    "ToolUnavailableError",
    "ToolprobeError",
    "UnsupportedPlatformError",
    "available_tools",
    "command_exists",
    "create_temp_dir",
    "create_test_image",
    "fixture_path",
    "get_tool",
    "image_dimensions",
    "list_tools",
    "register_tool",
    "skip_unless_tool_available",
    "tool_available",
    "tool_version",
]
