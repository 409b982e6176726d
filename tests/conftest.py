import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import pytest

pytest_plugins = ["pytester", "toolprobe.pytest_plugin"]


@dataclass(frozen=True)
class DummyCompletedProcess:
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


@pytest.fixture(autouse=True)
def clean_toolprobe_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Drop TOOLPROBE_* variables inherited from the developer's shell so tests see defaults.
    """
    for key in list(os.environ):
        if key.startswith("TOOLPROBE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def force_posix(monkeypatch: pytest.MonkeyPatch) -> None:
    from toolprobe._internal import platform

    monkeypatch.setattr(platform, "is_windows", lambda: False)


@pytest.fixture()
def force_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    from toolprobe._internal import platform

    monkeypatch.setattr(platform, "is_windows", lambda: True)


@pytest.fixture()
def fake_which(monkeypatch: pytest.MonkeyPatch):
    """
    Patch shutil.which used by binary discovery with a fixed name -> path mapping.

    Usage:
        fake_which({"magick": "/usr/bin/magick"})
    """

    def _apply(mapping: Dict[str, str]) -> None:
        from toolprobe._internal import binaries

        monkeypatch.setattr(binaries.shutil, "which", lambda name: mapping.get(name))

    return _apply


@pytest.fixture()
def fake_subprocess_run(monkeypatch: pytest.MonkeyPatch):
    """
    Patch subprocess.run with a configurable fake.
    """

    def _apply(
        handler: Callable[..., DummyCompletedProcess],
        *,
        target_module: Optional[Any] = None,
    ) -> None:
        import subprocess

        def _fake_run(*args, **kwargs):
            cp = handler(*args, **kwargs)
            # Mimic subprocess.CompletedProcess attributes used by code.
            return cp

        if target_module is None:
            monkeypatch.setattr(subprocess, "run", _fake_run)
        else:
            monkeypatch.setattr(target_module.subprocess, "run", _fake_run)

    return _apply


def assert_json_stdout(capsys: pytest.CaptureFixture[str]) -> Any:
    out = capsys.readouterr().out.strip()
    assert out, "expected stdout to contain JSON"
    return json.loads(out)
