"""
pytest integration for toolprobe.

Enable it from a conftest.py:

    pytest_plugins = ["toolprobe.pytest_plugin"]

It provides:
  - `@pytest.mark.requires_tool("imagemagick", ...)`: skip unless every named tool is available
  - `fixture_image` fixture: factory writing fixture images into the test's tmp_path
  - `temp_dir` fixture: a create_temp_dir() directory removed after the test
  - a session header line listing which summary tools are available
"""

from __future__ import annotations

import os
import shutil
from typing import Callable, Iterator

import pytest

from . import tool_helper


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "requires_tool(*names): skip the test unless every named external tool is available",
    )


def pytest_report_header(config: pytest.Config) -> str:
    tools = tool_helper.available_tools()
    status = ", ".join(f"{name}={'yes' if ok else 'no'}" for name, ok in tools.items())
    return f"toolprobe: {status}"


def pytest_runtest_setup(item: pytest.Item) -> None:
    for marker in item.iter_markers(name="requires_tool"):
        if not marker.args:
            raise ValueError("requires_tool marker needs at least one tool name")
        for name in marker.args:
            tool_helper.skip_unless_tool_available(name)


@pytest.fixture()
def fixture_image(tmp_path) -> Callable[..., str]:
    """
    Factory for fixture images inside tmp_path.

    Usage:
        path = fixture_image("in.png", size="200x150", color="red")
    """

    def _make(filename: str = "test.png", *, size: str = tool_helper.DEFAULT_IMAGE_SIZE, color: str = "blue") -> str:
        dest = os.path.join(str(tmp_path), filename)
        return tool_helper.create_test_image(dest, size=size, color=color)

    return _make


@pytest.fixture()
def temp_dir() -> Iterator[str]:
    path = tool_helper.create_temp_dir()
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
