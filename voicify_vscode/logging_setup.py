"""Logging setup for the Voicify VSCode plugin."""

import logging
from pathlib import Path

from voicify_vscode.config import LOGGER_NAME, get_log_level


def setup_logging(level: str | None = None, log_file: Path | None = None) -> logging.Logger:
    """Set up logging for the plugin.

    Console output always; a file handler only when ``log_file`` is given.
    Calling it again replaces the handlers instead of stacking them.
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(file_handler)

    logger.setLevel(numeric_level)
    return logger
