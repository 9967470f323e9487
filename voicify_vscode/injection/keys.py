"""Keystroke synthesis, one strategy per display backend."""

import subprocess

from voicify_vscode.config import XDOTOOL, OSASCRIPT, DEFAULT_COMMIT_DELAY
from voicify_vscode.injection.backend import DisplayBackend
from voicify_vscode.injection.errors import KeySynthesisError
from voicify_vscode.injection.process import ProcessRunner

MACOS_PASTE_SCRIPT = 'tell application "System Events" to keystroke "v" using command down'
MACOS_RETURN_SCRIPT = 'tell application "System Events" to key code 36'


class PyAutoGuiKeys:
    """Direct key events through pyautogui (X11 and Windows)."""

    def __init__(self, commit_delay: float = 0.0):
        self.commit_delay = commit_delay

    def _pyautogui(self):
        # Imported on use: pyautogui connects to the display at import time
        try:
            import pyautogui
        except Exception as e:
            raise KeySynthesisError(f"pyautogui is unavailable: {e}") from e
        return pyautogui

    def paste(self) -> None:
        gui = self._pyautogui()
        try:
            gui.hotkey("ctrl", "v", _pause=False)
        except Exception as e:
            raise KeySynthesisError(f"pyautogui could not send ctrl+v: {e}") from e

    def commit(self) -> None:
        gui = self._pyautogui()
        try:
            gui.press("enter", _pause=False)
        except Exception as e:
            raise KeySynthesisError(f"pyautogui could not send enter: {e}") from e


class _CommandKeys:
    """Keys sent by running a helper command once per keystroke."""

    paste_args: list[str] = []
    commit_args: list[str] = []

    def __init__(self, runner: ProcessRunner | None = None, commit_delay: float = DEFAULT_COMMIT_DELAY):
        self.runner = runner or ProcessRunner()
        self.commit_delay = commit_delay

    def _send(self, args: list[str]) -> None:
        try:
            self.runner.run(args, check=True)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise KeySynthesisError(
                f"{args[0]} exited with status {e.returncode}{': ' + stderr if stderr else ''}"
            ) from e
        except OSError as e:
            raise KeySynthesisError(f"Could not run {args[0]}: {e}") from e

    def paste(self) -> None:
        self._send(self.paste_args)

    def commit(self) -> None:
        self._send(self.commit_args)


class XdotoolKeys(_CommandKeys):
    """xdotool through the XWayland compatibility layer."""

    paste_args = [XDOTOOL, "key", "ctrl+v"]
    commit_args = [XDOTOOL, "key", "Return"]


class AppleScriptKeys(_CommandKeys):
    """System Events keystrokes via osascript (macOS)."""

    paste_args = [OSASCRIPT, "-e", MACOS_PASTE_SCRIPT]
    commit_args = [OSASCRIPT, "-e", MACOS_RETURN_SCRIPT]


def keys_for_backend(
    backend: DisplayBackend,
    runner: ProcessRunner | None = None,
    commit_delay: float = DEFAULT_COMMIT_DELAY,
):
    """Build the key strategy for a backend.

    X11 sends paste and Enter back to back. Every other backend waits
    ``commit_delay`` between them.
    """
    if backend is DisplayBackend.X11:
        return PyAutoGuiKeys(commit_delay=0.0)
    if backend is DisplayBackend.XWAYLAND:
        return XdotoolKeys(runner, commit_delay=commit_delay)
    if backend is DisplayBackend.MACOS:
        return AppleScriptKeys(runner, commit_delay=commit_delay)
    return PyAutoGuiKeys(commit_delay=commit_delay)
