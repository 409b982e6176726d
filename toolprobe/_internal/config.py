"""
Environment-based configuration for toolprobe.

Values are read from the process environment on every call so that tests can change them with
`monkeypatch.setenv`. A local `.env` file is loaded once per process and never overrides variables
that are already set.

Recognized variables:
- TOOLPROBE_FIXTURES_DIR: directory holding test_blue.png / test_red.png
- TOOLPROBE_DEBUG: print executable discovery traces to stderr
- TOOLPROBE_<NAME>_PATH: pin the executable used for tool <NAME> (e.g. TOOLPROBE_IMAGEMAGICK_PATH)
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_FIXTURES_DIR = os.path.join(_PACKAGE_DIR, "fixtures", "images")


@lru_cache(maxsize=1)
def _load_local_dotenv_once() -> None:
    """
    Load a local .env file once per process.

    This uses python-dotenv to find `.env` by walking up from the current working directory. It
    does not override existing environment variables by default.
    """

    load_dotenv(override=False)


def coerce_bool(value: object) -> Optional[bool]:
    """
    Convert common truthy/falsey values into a boolean.

    Returns None when the value is None or cannot be interpreted.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "t", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "f", "no", "n", "off"}:
            return False
    return None


@dataclass(frozen=True)
class ToolprobeEnvConfig:
    """Hold toolprobe configuration resolved from environment variables."""

    fixtures_dir: str
    debug: bool


def load_env_config() -> ToolprobeEnvConfig:
    _load_local_dotenv_once()

    fixtures_dir = os.environ.get("TOOLPROBE_FIXTURES_DIR") or DEFAULT_FIXTURES_DIR
    debug = coerce_bool(os.environ.get("TOOLPROBE_DEBUG")) or False
    return ToolprobeEnvConfig(fixtures_dir=fixtures_dir, debug=debug)


def override_env_var(tool_name: str) -> str:
    """Name of the variable that pins a tool's executable, e.g. TOOLPROBE_IMAGEMAGICK_PATH."""
    slug = re.sub(r"[^A-Za-z0-9]+", "_", tool_name).strip("_").upper()
    return f"TOOLPROBE_{slug}_PATH"


def executable_override(tool_name: str) -> Optional[str]:
    _load_local_dotenv_once()
    return os.environ.get(override_env_var(tool_name)) or None
