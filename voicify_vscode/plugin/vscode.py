"""Visual Studio Code plugin: paste dictation into the focused editor."""

import logging

from voicify_vscode import __version__
from voicify_vscode.config import LOGGER_NAME, get_window_signature
from voicify_vscode.injection import TextInjector, WindowInspector, InjectionError
from voicify_vscode.plugin.api import ActionMetadata, PluginAction, PluginMetadata, VoicifyPlugin
from voicify_vscode.utils.text import title_matches, preview

ACTION_PRIORITY = 2


class VSCodeAction(PluginAction):
    """Pastes the transcription into VSCode when VSCode has focus."""

    def __init__(
        self,
        transcription: str = "",
        inspector: WindowInspector | None = None,
        injector: TextInjector | None = None,
        signature: str | None = None,
        logger: logging.Logger | None = None,
    ):
        self.transcription = transcription
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.inspector = inspector or WindowInspector(logger=self.logger)
        self.injector = injector or TextInjector(logger=self.logger)
        self.signature = signature

    def execute(self, transcription: str) -> None:
        self.logger.debug("Checking if VSCode should handle transcription: %s", preview(transcription))
        try:
            window = self.inspector.get_focused_window()
        except InjectionError as e:
            self.logger.error("Error getting focused window: %s", e)
            raise

        signature = self.signature or get_window_signature()
        self.logger.debug("Checking window title: %s", window.title)
        if not title_matches(window.title, signature):
            self.logger.debug("VSCode is not focused, skipping action")
            return

        try:
            self.injector.paste_with_return(transcription)
        except InjectionError as e:
            self.logger.error("Failed to paste into VSCode: %s", e)
            raise
        self.logger.info("Pasted into VSCode: %s", preview(transcription))

    def get_metadata(self) -> ActionMetadata:
        return ActionMetadata(
            name="vscode",
            description="Paste the dictated text into the Visual Studio Code editor",
            match_commands=None,
            priority=ACTION_PRIORITY,
        )


class VSCodePlugin(VoicifyPlugin):
    """Plugin for Visual Studio Code."""

    def __init__(
        self,
        inspector: WindowInspector | None = None,
        injector: TextInjector | None = None,
        logger: logging.Logger | None = None,
    ):
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.inspector = inspector
        self.injector = injector

    def initialize(self) -> None:
        self.inspector = self.inspector or WindowInspector(logger=self.logger)
        self.injector = self.injector or TextInjector(logger=self.logger)
        self.logger.debug("VSCode plugin initialized")

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="vscode",
            version=__version__,
            description="Plugin for Visual Studio Code",
            author="Voicify Team",
        )

    def get_actions(self, transcription: str) -> list[PluginAction]:
        return [
            VSCodeAction(
                transcription,
                inspector=self.inspector,
                injector=self.injector,
                logger=self.logger,
            )
        ]


def create_plugin() -> VoicifyPlugin:
    """Entry point the Voicify plugin manager looks up."""
    return VSCodePlugin()
