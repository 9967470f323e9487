"""External tool checks for the Voicify VSCode plugin."""

import logging
from dataclasses import dataclass

from voicify_vscode.config import LOGGER_NAME, XDOTOOL, XCLIP, PBCOPY, OSASCRIPT, CLIP_EXE
from voicify_vscode.injection.backend import DisplayBackend
from voicify_vscode.injection.process import ProcessRunner

logger = logging.getLogger(LOGGER_NAME)

# X11 sends keys through pyautogui, so xdotool is only needed for the window query there
REQUIRED_TOOLS = {
    DisplayBackend.X11: [XDOTOOL, XCLIP],
    DisplayBackend.XWAYLAND: [XDOTOOL, XCLIP],
    DisplayBackend.MACOS: [OSASCRIPT, PBCOPY],
    DisplayBackend.WINDOWS: [CLIP_EXE],
}


@dataclass(frozen=True)
class ToolStatus:
    name: str
    path: str | None

    @property
    def available(self) -> bool:
        return self.path is not None


def required_tools(backend: DisplayBackend) -> list[str]:
    return list(REQUIRED_TOOLS[backend])


def check_tools(backend: DisplayBackend, runner: ProcessRunner | None = None) -> list[ToolStatus]:
    """Check which of the backend's external tools are on PATH."""
    runner = runner or ProcessRunner()
    statuses = [ToolStatus(name, runner.which(name)) for name in required_tools(backend)]
    for status in statuses:
        if not status.available:
            logger.warning("%s not found on PATH (needed for %s)", status.name, backend.value)
    return statuses
