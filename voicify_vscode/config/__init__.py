"""Configuration for the Voicify VSCode plugin."""

from .constants import (
    LOGGER_NAME,
    ENV_PREFIX,
    VOICIFY_DIR,
    CONFIG_FILE,
    LOG_FILE,
    DEFAULT_LOG_LEVEL,
    SESSION_TYPE_ENV,
    DEFAULT_WINDOW_SIGNATURE,
    DEFAULT_COMMIT_DELAY,
    XDOTOOL,
    XCLIP,
    PBCOPY,
    OSASCRIPT,
    CLIP_EXE,
    XCLIP_ARGS,
)

from .settings import (
    load_config,
    get_config,
    get_window_signature,
    get_commit_delay,
    get_log_level,
)

__all__ = [
    # Constants
    "LOGGER_NAME",
    "ENV_PREFIX",
    "VOICIFY_DIR",
    "CONFIG_FILE",
    "LOG_FILE",
    "DEFAULT_LOG_LEVEL",
    "SESSION_TYPE_ENV",
    "DEFAULT_WINDOW_SIGNATURE",
    "DEFAULT_COMMIT_DELAY",
    "XDOTOOL",
    "XCLIP",
    "PBCOPY",
    "OSASCRIPT",
    "CLIP_EXE",
    "XCLIP_ARGS",
    # Settings
    "load_config",
    "get_config",
    "get_window_signature",
    "get_commit_delay",
    "get_log_level",
]
