"""Focused window detection."""

import logging
import subprocess
from dataclasses import dataclass

from voicify_vscode.config import LOGGER_NAME, XDOTOOL, OSASCRIPT
from voicify_vscode.injection.backend import DisplayBackend, resolve_backend
from voicify_vscode.injection.errors import EnvironmentQueryFailed
from voicify_vscode.injection.process import ProcessRunner

FRONTMOST_PROCESS_SCRIPT = (
    'tell application "System Events" to get name of first process whose frontmost is true'
)
FRONT_WINDOW_SCRIPT = '''
tell application "System Events"
    tell (first process whose frontmost is true)
        if (count of windows) is 0 then return ""
        return name of front window
    end tell
end tell
'''


@dataclass(frozen=True)
class FocusedWindow:
    """Snapshot of the window holding keyboard focus at query time."""

    title: str
    app_name: str | None = None


def _query(runner: ProcessRunner, args: list[str], what: str) -> str:
    """Run a query command and return its stripped stdout."""
    try:
        result = runner.run(args)
    except OSError as e:
        raise EnvironmentQueryFailed(f"Could not run {args[0]} to get {what}: {e}") from e
    if result.returncode != 0:
        cause = subprocess.CalledProcessError(result.returncode, args, result.stdout, result.stderr)
        stderr = (result.stderr or "").strip()
        raise EnvironmentQueryFailed(
            f"{args[0]} failed to get {what} (exit {result.returncode}){': ' + stderr if stderr else ''}"
        ) from cause
    return (result.stdout or "").strip()


def _xdotool_focused_window(runner: ProcessRunner, logger: logging.Logger) -> FocusedWindow:
    window_id = _query(runner, [XDOTOOL, "getactivewindow"], "active window")
    if not window_id:
        raise EnvironmentQueryFailed("xdotool reported no active window")

    title = _query(runner, [XDOTOOL, "getwindowname", window_id], "window title")

    # Class name only fills in app_name; older xdotool builds lack the command
    app_name = None
    try:
        app_name = _query(runner, [XDOTOOL, "getwindowclassname", window_id], "window class") or None
    except EnvironmentQueryFailed as e:
        logger.debug("No class name for window %s: %s", window_id, e)

    return FocusedWindow(title=title, app_name=app_name)


def _macos_focused_window(runner: ProcessRunner, logger: logging.Logger) -> FocusedWindow:
    app_name = _query(runner, [OSASCRIPT, "-e", FRONTMOST_PROCESS_SCRIPT], "frontmost application")
    title = _query(runner, [OSASCRIPT, "-e", FRONT_WINDOW_SCRIPT], "front window title")
    return FocusedWindow(title=title, app_name=app_name or None)


def _windows_focused_window(runner: ProcessRunner, logger: logging.Logger) -> FocusedWindow:
    try:
        import pygetwindow as gw
        active = gw.getActiveWindow()
    except Exception as e:
        raise EnvironmentQueryFailed(f"pygetwindow could not query the active window: {e}") from e
    if active is None:
        raise EnvironmentQueryFailed("No window has focus")
    return FocusedWindow(title=(active.title or "").strip())


_WINDOW_QUERIES = {
    DisplayBackend.X11: _xdotool_focused_window,
    DisplayBackend.XWAYLAND: _xdotool_focused_window,
    DisplayBackend.MACOS: _macos_focused_window,
    DisplayBackend.WINDOWS: _windows_focused_window,
}


class WindowInspector:
    """Reports which window currently has input focus.

    Nothing is cached: every call re-reads live desktop state. A fixed
    ``backend`` pins the query strategy, otherwise it is resolved per call.
    """

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        backend: DisplayBackend | None = None,
        logger: logging.Logger | None = None,
    ):
        self.runner = runner or ProcessRunner()
        self.backend = backend
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def get_focused_window(self) -> FocusedWindow:
        backend = self.backend or resolve_backend()
        window = _WINDOW_QUERIES[backend](self.runner, self.logger)
        self.logger.debug("Focused window on %s: %r (%s)", backend.value, window.title, window.app_name)
        return window
