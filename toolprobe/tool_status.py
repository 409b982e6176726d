"""
Report which external tools are installed.

For each requested tool this prints whether it is available, which executable was found and the
version it reports, as JSON on stdout.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, Iterable, Optional

from . import registry


def collect_tool_status(names: Optional[Iterable[str]] = None, *, include_version: bool = True) -> Dict:
    """
    Collect availability details for tools.

    Args:
        names: Tool names to report. Defaults to every registered tool.
        include_version: If False, skip running each tool's version command.

    Returns:
        JSON-serializable dict keyed by tool name.
    """

    selected = list(names) if names else registry.list_tools()
    # Resolve every name first so an unknown name fails before any tool is spawned.
    tools = [registry.get_tool(name) for name in selected]

    status: Dict[str, Dict] = {}
    for tool in tools:
        exe = tool.executable()
        version = tool.version(exe) if include_version and exe else None
        status[tool.name] = {
            "available": exe is not None,
            "executable": exe,
            "version": version,
        }
    return status


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolprobe-status",
        description="Report availability and version of external command-line tools.",
    )
    parser.add_argument(
        "names",
        nargs="*",
        help=f"Tool names to check (default: all). Known: {', '.join(registry.list_tools())}.",
    )
    parser.add_argument(
        "--skip-version",
        action="store_true",
        help="Do not run each tool's version command.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    try:
        result = collect_tool_status(args.names, include_version=not args.skip_version)
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
