"""Voicify plugin contract and the VSCode plugin."""

from .api import ActionMetadata, PluginAction, PluginMetadata, VoicifyPlugin
from .vscode import VSCodeAction, VSCodePlugin, create_plugin

__all__ = [
    "ActionMetadata",
    "PluginAction",
    "PluginMetadata",
    "VoicifyPlugin",
    "VSCodeAction",
    "VSCodePlugin",
    "create_plugin",
]
