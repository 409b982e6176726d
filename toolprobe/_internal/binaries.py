"""
Helpers for locating and probing external executables.

Centralizes the PATH lookup and the where/which existence probe used by the registry and the test
helpers.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from typing import List, Optional, Sequence

from . import config, platform


def debug(message: str) -> None:
    """Print a discovery trace to stderr when TOOLPROBE_DEBUG is enabled."""
    if config.load_env_config().debug:
        print(f"[toolprobe] {message}", file=sys.stderr)


def find_binary(candidates: Sequence[str]) -> Optional[str]:
    """
    Find the first candidate executable on PATH.

    Candidates are tried in order (primary name first, then aliases). Returns the resolved path or
    None when none of them can be found.
    """

    for name in candidates:
        path = shutil.which(name)
        if path:
            debug(f"found {name}: {path}")
            return path
    debug(f"no executable found among {list(candidates)}")
    return None


def resolve_override(value: str) -> Optional[str]:
    """
    Resolve a pinned executable.

    Accepts either a path to an executable file or a bare command name looked up on PATH.
    """

    return shutil.which(value)


def existence_query(cmd: str) -> List[str]:
    if platform.is_windows():
        return ["where", cmd]
    return ["which", cmd]


def probe_command(cmd: str) -> bool:
    """
    Report whether `cmd` can be located by the platform's where/which command.

    Output is discarded and no timeout is applied. A missing where/which binary counts as "not
    found" rather than an error.
    """

    query = existence_query(cmd)
    try:
        result = subprocess.run(query, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)
    except (OSError, ValueError) as e:
        # ValueError: the name cannot be passed to a process (e.g. an embedded NUL).
        debug(f"{query[0]} could not be run: {e}")
        return False
    return result.returncode == 0


def run_capture(cmd: Sequence[str], *, timeout_s: Optional[int] = None) -> subprocess.CompletedProcess:
    """Run a command and capture text stdout/stderr without raising on a non-zero exit."""
    return subprocess.run(list(cmd), capture_output=True, text=True, check=False, timeout=timeout_s)
