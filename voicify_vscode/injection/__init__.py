"""Injection module for the Voicify VSCode plugin."""

from .backend import DisplayBackend, is_x11_session, resolve_backend

from .clipboard import Clipboard

from .detection import FocusedWindow, WindowInspector

from .errors import (
    InjectionError,
    EnvironmentQueryFailed,
    ClipboardUnavailable,
    ClipboardWriteFailed,
    KeySynthesisError,
    PasteSynthesisFailed,
    CommitSynthesisFailed,
)

from .inject import InjectionRequest, InjectionState, TextInjector

from .keys import PyAutoGuiKeys, XdotoolKeys, AppleScriptKeys, keys_for_backend

from .process import ProcessRunner, StreamResult

__all__ = [
    # Backend
    "DisplayBackend",
    "is_x11_session",
    "resolve_backend",
    # Clipboard
    "Clipboard",
    # Detection
    "FocusedWindow",
    "WindowInspector",
    # Errors
    "InjectionError",
    "EnvironmentQueryFailed",
    "ClipboardUnavailable",
    "ClipboardWriteFailed",
    "KeySynthesisError",
    "PasteSynthesisFailed",
    "CommitSynthesisFailed",
    # Inject
    "InjectionRequest",
    "InjectionState",
    "TextInjector",
    # Keys
    "PyAutoGuiKeys",
    "XdotoolKeys",
    "AppleScriptKeys",
    "keys_for_backend",
    # Process
    "ProcessRunner",
    "StreamResult",
]
