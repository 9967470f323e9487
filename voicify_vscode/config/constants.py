"""Constants for the Voicify VSCode plugin."""

from pathlib import Path

LOGGER_NAME = "voicify_vscode"
ENV_PREFIX = "VOICIFY_VSCODE_"

VOICIFY_DIR = Path.home() / ".voicify"
CONFIG_FILE = VOICIFY_DIR / "vscode.json"
LOG_FILE = VOICIFY_DIR / "vscode.log"
DEFAULT_LOG_LEVEL = "INFO"

# Display session indicator set by the login manager (x11, wayland, tty, ...)
SESSION_TYPE_ENV = "XDG_SESSION_TYPE"

# Substring of the window title that identifies the editor
DEFAULT_WINDOW_SIGNATURE = "VSC"

# Pause between paste and Enter on compositor sessions, in seconds
DEFAULT_COMMIT_DELAY = 0.05

XDOTOOL = "xdotool"
XCLIP = "xclip"
PBCOPY = "pbcopy"
OSASCRIPT = "osascript"
CLIP_EXE = "clip.exe"

XCLIP_ARGS = [XCLIP, "-selection", "clipboard"]
