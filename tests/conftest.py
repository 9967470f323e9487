"""
Shared pytest fixtures for voicify-vscode tests.
"""

import logging
import subprocess
from typing import Any

import pytest

from voicify_vscode.config import LOGGER_NAME, ENV_PREFIX
from voicify_vscode.injection.process import StreamResult


class FakeRunner:
    """Scripted stand-in for ProcessRunner that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.responses: dict[tuple, Any] = {}
        self.tools: dict[str, str] = {}
        self.stream_result: Any = StreamResult(returncode=0)

    def script(self, args: list[str], stdout: str = "", returncode: int = 0,
               stderr: str = "", error: BaseException | None = None) -> None:
        if error is not None:
            self.responses[tuple(args)] = error
        else:
            self.responses[tuple(args)] = subprocess.CompletedProcess(args, returncode, stdout, stderr)

    def install(self, *names: str) -> None:
        for name in names:
            self.tools[name] = f"/usr/bin/{name}"

    def which(self, name: str) -> str | None:
        self.calls.append(("which", name))
        return self.tools.get(name)

    def run(self, args: list[str], input: str | None = None,
            timeout: float | None = None, check: bool = False,
            encoding: str = "utf-8") -> subprocess.CompletedProcess:
        self.calls.append(("run", list(args), input))
        response = self.responses.get(tuple(args), subprocess.CompletedProcess(args, 0, "", ""))
        if isinstance(response, BaseException):
            raise response
        if check and response.returncode != 0:
            raise subprocess.CalledProcessError(response.returncode, args, response.stdout, response.stderr)
        return response

    def stream(self, args: list[str], text: str, encoding: str = "utf-8") -> StreamResult:
        self.calls.append(("stream", list(args), text))
        if isinstance(self.stream_result, BaseException):
            raise self.stream_result
        return self.stream_result

    def commands(self) -> list[list[str]]:
        """Arguments of every run/stream call, in order."""
        return [call[1] for call in self.calls if call[0] in ("run", "stream")]


class FakeKeys:
    """Key strategy that appends to a shared event list."""

    def __init__(self, events: list, commit_delay: float = 0.0,
                 paste_error: BaseException | None = None,
                 commit_error: BaseException | None = None) -> None:
        self.events = events
        self.commit_delay = commit_delay
        self.paste_error = paste_error
        self.commit_error = commit_error

    def paste(self) -> None:
        self.events.append("paste")
        if self.paste_error is not None:
            raise self.paste_error

    def commit(self) -> None:
        self.events.append("commit")
        if self.commit_error is not None:
            raise self.commit_error


@pytest.fixture
def runner() -> FakeRunner:
    """Fake process runner with nothing installed."""
    return FakeRunner()


@pytest.fixture
def events() -> list:
    """Ordered record of clipboard, key and sleep events."""
    return []


@pytest.fixture
def make_keys(events: list):
    """Factory for FakeKeys sharing the events list."""
    def _factory(**kwargs: Any) -> FakeKeys:
        return FakeKeys(events, **kwargs)
    return _factory


@pytest.fixture
def record_sleep(events: list):
    """Sleep replacement that records the delay instead of waiting."""
    def _sleep(seconds: float) -> None:
        events.append(("sleep", seconds))
    return _sleep


@pytest.fixture
def linux_session(monkeypatch: pytest.MonkeyPatch):
    """Pretend to run on Linux; returns a setter for XDG_SESSION_TYPE."""
    monkeypatch.setattr("voicify_vscode.injection.backend.platform.system", lambda: "Linux")

    def _set(session_type: str | None) -> None:
        if session_type is None:
            monkeypatch.delenv("XDG_SESSION_TYPE", raising=False)
        else:
            monkeypatch.setenv("XDG_SESSION_TYPE", session_type)
    return _set


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point settings at an empty temp config and clear plugin env vars."""
    config_file = tmp_path / "vscode.json"
    monkeypatch.setattr("voicify_vscode.config.settings.CONFIG_FILE", config_file)
    for key in ("WINDOW_SIGNATURE", "COMMIT_DELAY", "LOG_LEVEL"):
        monkeypatch.delenv(f"{ENV_PREFIX}{key}", raising=False)
    return config_file


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers that setup_logging attached during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
