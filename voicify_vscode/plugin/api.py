"""Plugin contract shared with the Voicify host."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PluginMetadata:
    name: str
    version: str
    description: str
    author: str


@dataclass(frozen=True)
class ActionMetadata:
    """Describes an action to the host's dispatcher.

    ``match_commands`` lists trigger phrases in order; None means the action
    decides for itself whether to run. ``priority`` is ranked by the host.
    """

    name: str
    description: str
    match_commands: tuple[str, ...] | None = None
    priority: int = 0


class PluginAction(ABC):
    """One thing a plugin can do with a transcription."""

    @abstractmethod
    def execute(self, transcription: str) -> None:
        """Act on the transcription. Raises on failure; returning means success."""

    @abstractmethod
    def get_metadata(self) -> ActionMetadata:
        """Describe this action to the host."""


class VoicifyPlugin(ABC):
    """Interface every Voicify plugin implements."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the plugin after loading."""

    @abstractmethod
    def get_metadata(self) -> PluginMetadata:
        """Describe the plugin."""

    @abstractmethod
    def get_actions(self, transcription: str) -> list[PluginAction]:
        """Return the actions offered for this transcription."""
