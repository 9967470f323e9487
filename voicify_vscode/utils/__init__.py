"""Utility functions for the Voicify VSCode plugin."""

from .text import (
    title_matches,
    title_abbreviations,
    preview,
)

__all__ = [
    "title_matches",
    "title_abbreviations",
    "preview",
]
