"""
Internal shared utilities for toolprobe.

This package is intentionally **not** part of the public surface. It exists so the registry, the
test helpers and the status command can reuse platform detection, binary discovery and environment
configuration without copying code.
"""

# Intentionally do not import submodules here to avoid side effects at import time.
# Callers should import the needed module explicitly, e.g.:
#   from . import binaries
#   from . import config

__all__ = ["binaries", "config", "platform"]
