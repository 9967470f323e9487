"""Configuration settings for the Voicify VSCode plugin."""

import json
import logging
import os

from .constants import (
    CONFIG_FILE,
    ENV_PREFIX,
    LOGGER_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WINDOW_SIGNATURE,
    DEFAULT_COMMIT_DELAY,
)

logger = logging.getLogger(LOGGER_NAME)


def load_config() -> dict:
    """Load configuration from ~/.voicify/vscode.json if it exists."""
    if CONFIG_FILE.exists():
        try:
            data = json.loads(CONFIG_FILE.read_text())
        except (OSError, ValueError) as e:
            logger.warning("Failed to load config: %s", e)
            return {}
        if isinstance(data, dict):
            return data
        logger.warning("Ignoring config %s: expected a JSON object", CONFIG_FILE)
    return {}


def get_config(key: str, default=None):
    """Get config value from file, falling back to env var, then default."""
    config = load_config()
    if key in config:
        return config[key]
    env_val = os.getenv(f"{ENV_PREFIX}{key.upper()}")
    if env_val is not None:
        return env_val
    return default


def get_window_signature() -> str:
    """Title substring that marks the focused window as the editor."""
    val = get_config("window_signature", DEFAULT_WINDOW_SIGNATURE)
    if isinstance(val, str) and val:
        return val
    return DEFAULT_WINDOW_SIGNATURE


def get_commit_delay() -> float:
    """Seconds to wait between paste and Enter on compositor sessions.

    Compositor sessions apply the paste asynchronously, so an Enter sent
    straight after Ctrl+V can reach the editor before the pasted text does.
    """
    val = get_config("commit_delay", DEFAULT_COMMIT_DELAY)
    try:
        delay = float(val)
    except (TypeError, ValueError):
        logger.warning("Invalid commit_delay %r, using %s", val, DEFAULT_COMMIT_DELAY)
        return DEFAULT_COMMIT_DELAY
    if delay < 0:
        logger.warning("Negative commit_delay %r, using %s", val, DEFAULT_COMMIT_DELAY)
        return DEFAULT_COMMIT_DELAY
    return delay


def get_log_level() -> str:
    val = get_config("log_level", DEFAULT_LOG_LEVEL)
    if isinstance(val, str) and val.strip():
        return val.strip().upper()
    return DEFAULT_LOG_LEVEL
