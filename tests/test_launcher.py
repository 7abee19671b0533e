"""Tests for detached browser launching."""

import gc
import subprocess
import sys
import warnings

import pytest

from webopen import launcher
from webopen.browser import LaunchCommand, Platform
from webopen.launcher import DETACHED, LaunchError, SpawnOptions, open_in_browser, spawn


class FakePopen:
    """Records Popen calls instead of starting processes."""

    calls = []

    def __init__(self, args, **kwargs):
        FakePopen.calls.append((args, kwargs))


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.calls = []
    monkeypatch.setattr(launcher.subprocess, "Popen", FakePopen)
    return FakePopen


def _failing_popen(exc):
    def popen(args, **kwargs):
        raise exc

    return popen


def test_open_in_browser_spawns_resolved_command(monkeypatch, fake_popen):
    monkeypatch.setattr(sys, "platform", "darwin")

    assert open_in_browser("/tmp/report.html", "firefox") is True

    [(args, kwargs)] = fake_popen.calls
    assert args == ["open", "-a", "Firefox", "/tmp/report.html"]
    assert kwargs["start_new_session"] is True
    assert kwargs["stdin"] == kwargs["stdout"] == kwargs["stderr"] == subprocess.DEVNULL


def test_open_in_browser_defaults_to_system_opener(monkeypatch, fake_popen):
    monkeypatch.setattr(sys, "platform", "linux")

    assert open_in_browser("/home/u/x.html") is True

    [(args, _)] = fake_popen.calls
    assert args == ["xdg-open", "/home/u/x.html"]


def test_open_in_browser_detaches_on_windows(monkeypatch, fake_popen):
    monkeypatch.setattr(sys, "platform", "win32")

    assert open_in_browser("C:\\out\\index.html", "edge") is True

    [(args, kwargs)] = fake_popen.calls
    assert args == ["cmd", "/c", "start", "msedge", "C:\\out\\index.html"]
    assert kwargs["creationflags"] == 0x00000008 | 0x00000200
    assert "start_new_session" not in kwargs


@pytest.mark.parametrize("exc", [FileNotFoundError("no such file"), PermissionError("denied"), OSError("boom")])
def test_open_in_browser_returns_false_when_spawn_fails(monkeypatch, exc):
    monkeypatch.setattr(launcher.subprocess, "Popen", _failing_popen(exc))

    assert open_in_browser("/tmp/report.html", "chrome") is False


def test_open_in_browser_returns_false_when_resolution_fails(monkeypatch, fake_popen):
    def broken_resolve(browser, file_path, platform):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(launcher, "resolve_command", broken_resolve)

    assert open_in_browser("/tmp/report.html") is False
    assert fake_popen.calls == []


def test_open_in_browser_with_missing_executable_returns_false(tmp_path):
    missing = tmp_path / "no-such-browser"

    assert open_in_browser(str(tmp_path / "index.html"), str(missing)) is False


def test_open_in_browser_succeeds_even_if_child_fails_later(tmp_path):
    # The interpreter starts fine and then exits with an error on the bad script
    assert open_in_browser(str(tmp_path / "missing.py"), sys.executable) is True


def test_spawn_wraps_os_errors(monkeypatch):
    monkeypatch.setattr(launcher.subprocess, "Popen", _failing_popen(FileNotFoundError("missing")))
    command = LaunchCommand("google-chrome", ("/tmp/report.html",))

    with pytest.raises(LaunchError) as exc_info:
        spawn(command, platform=Platform.OTHER)

    assert exc_info.value.command == command
    assert "google-chrome" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_spawn_does_not_wait(fake_popen):
    spawn(LaunchCommand("firefox", ("/tmp/a.html",)), platform=Platform.OTHER)

    [(args, kwargs)] = fake_popen.calls
    assert args == ["firefox", "/tmp/a.html"]
    assert kwargs["close_fds"] is True


def test_default_spawn_options_detach_and_silence():
    assert DETACHED.detached is True
    assert DETACHED.silence_streams is True


def test_spawn_options_can_inherit_streams():
    kwargs = SpawnOptions(detached=False, silence_streams=False).popen_kwargs(Platform.OTHER)

    assert kwargs == {"close_fds": True}


def test_spawn_drops_running_child_without_resource_warning():
    command = LaunchCommand(sys.executable, ("-c", "import time; time.sleep(2)"))

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        spawn(command)
        gc.collect()

    assert not [w for w in caught if issubclass(w.category, ResourceWarning)]
