"""Display backend detection."""

import enum
import os
import platform
from collections.abc import Mapping

from voicify_vscode.config import SESSION_TYPE_ENV


class DisplayBackend(enum.Enum):
    X11 = "x11"
    XWAYLAND = "xwayland"  # compositor session driven through the X11 compatibility layer
    MACOS = "macos"
    WINDOWS = "windows"

    @property
    def is_linux(self) -> bool:
        return self in (DisplayBackend.X11, DisplayBackend.XWAYLAND)


def is_x11_session(session_type: str | None) -> bool:
    """Check if the session type names the legacy X11 protocol.

    Only an exact, case-insensitive "x11" counts. Unset, empty, "wayland" and
    anything unrecognised go down the compatibility path.
    """
    if not session_type:
        return False
    return session_type.lower() == "x11"


def resolve_backend(system: str | None = None, environ: Mapping[str, str] | None = None) -> DisplayBackend:
    """Work out which backend the current session needs."""
    system = system if system is not None else platform.system()
    if system == "Darwin":
        return DisplayBackend.MACOS
    if system == "Windows":
        return DisplayBackend.WINDOWS

    environ = environ if environ is not None else os.environ
    if is_x11_session(environ.get(SESSION_TYPE_ENV)):
        return DisplayBackend.X11
    return DisplayBackend.XWAYLAND
