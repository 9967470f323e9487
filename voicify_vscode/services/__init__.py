"""Services module for the Voicify VSCode plugin."""

from .health import (
    ToolStatus,
    required_tools,
    check_tools,
)

__all__ = [
    "ToolStatus",
    "required_tools",
    "check_tools",
]
