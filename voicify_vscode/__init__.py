"""Voicify plugin that pastes dictated text into Visual Studio Code."""

__version__ = "1.0.0"
