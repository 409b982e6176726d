import pytest

from tests.conftest import DummyCompletedProcess, assert_json_stdout


def test_collect_tool_status_reports_available_and_missing(force_posix, fake_which, fake_subprocess_run):
    from toolprobe import tool_status
    from toolprobe._internal import binaries

    fake_which({"ffmpeg": "/usr/bin/ffmpeg"})
    fake_subprocess_run(
        lambda cmd, **kw: DummyCompletedProcess(stdout="ffmpeg version 5.1.4-0+deb12u1 Copyright\n"),
        target_module=binaries,
    )

    out = tool_status.collect_tool_status(["ffmpeg", "pandoc"])
    assert out == {
        "ffmpeg": {"available": True, "executable": "/usr/bin/ffmpeg", "version": "5.1.4"},
        "pandoc": {"available": False, "executable": None, "version": None},
    }


def test_collect_tool_status_defaults_to_all_tools(fake_which):
    from toolprobe import registry, tool_status

    fake_which({})
    out = tool_status.collect_tool_status(include_version=False)
    assert sorted(out) == registry.list_tools()


def test_collect_tool_status_skip_version_does_not_spawn(fake_which, fake_subprocess_run):
    from toolprobe import tool_status
    from toolprobe._internal import binaries

    fake_which({"optipng": "/usr/bin/optipng"})

    def _handler(*args, **kwargs):
        raise AssertionError("version command must not run")

    fake_subprocess_run(_handler, target_module=binaries)
    out = tool_status.collect_tool_status(["optipng"], include_version=False)
    assert out["optipng"]["available"] is True
    assert out["optipng"]["version"] is None


def test_collect_tool_status_unknown_name_raises(fake_which):
    from toolprobe import tool_status
    from toolprobe.errors import ToolNotFoundError

    fake_which({})
    with pytest.raises(ToolNotFoundError):
        tool_status.collect_tool_status(["ffmpeg", "bogus"])


def test_tool_status_main_prints_json(capsys, monkeypatch):
    from toolprobe import tool_status

    seen = {}

    def _collect(names, *, include_version):
        seen["names"] = names
        seen["include_version"] = include_version
        return {"ffmpeg": {"available": True}}

    monkeypatch.setattr(tool_status, "collect_tool_status", _collect)
    code = tool_status.main(["ffmpeg", "--skip-version"])
    assert code == 0
    assert assert_json_stdout(capsys) == {"ffmpeg": {"available": True}}
    assert seen == {"names": ["ffmpeg"], "include_version": False}


def test_tool_status_main_unknown_tool_exits_nonzero(capsys, fake_which):
    from toolprobe import tool_status

    fake_which({})
    code = tool_status.main(["bogus"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.startswith("Error: Tool not found: bogus")


def test_collect_tool_status_reports_version_of_the_reported_executable(monkeypatch, fake_subprocess_run):
    from toolprobe import tool_status
    from toolprobe._internal import binaries

    lookups = []

    def _which(name):
        lookups.append(name)
        return "/usr/bin/ffmpeg" if name == "ffmpeg" else None

    monkeypatch.setattr(binaries.shutil, "which", _which)
    spawned = []

    def _handler(cmd, **kwargs):
        spawned.append(cmd[0])
        return DummyCompletedProcess(stdout="ffmpeg version 6.0\n")

    fake_subprocess_run(_handler, target_module=binaries)

    out = tool_status.collect_tool_status(["ffmpeg"])
    assert out["ffmpeg"]["executable"] == "/usr/bin/ffmpeg"
    assert out["ffmpeg"]["version"] == "6.0"
    assert lookups == ["ffmpeg"]
    assert spawned == ["/usr/bin/ffmpeg"]
