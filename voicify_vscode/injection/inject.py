"""Injection utilities for the Voicify VSCode plugin."""

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from voicify_vscode.config import LOGGER_NAME, get_commit_delay
from voicify_vscode.injection.backend import DisplayBackend, resolve_backend
from voicify_vscode.injection.clipboard import Clipboard
from voicify_vscode.injection.errors import (
    InjectionError,
    KeySynthesisError,
    PasteSynthesisFailed,
    CommitSynthesisFailed,
)
from voicify_vscode.injection.keys import keys_for_backend
from voicify_vscode.injection.process import ProcessRunner
from voicify_vscode.utils.text import preview


class InjectionState(enum.Enum):
    IDLE = "idle"
    CLIPBOARD_SET = "clipboard_set"
    PASTE_SYNTHESIZED = "paste_synthesized"
    COMMIT_SYNTHESIZED = "commit_synthesized"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class InjectionRequest:
    """Text to deliver verbatim, followed by Enter."""

    text: str


class TextInjector:
    """Pastes text into the focused window and presses Enter.

    The clipboard carries the text; only Ctrl+V and Enter are synthesized.
    Each call resolves the display backend afresh and keeps no state between
    calls, so one injector can serve concurrent utterances.
    """

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        clipboard: Clipboard | None = None,
        keys_factory: Callable | None = None,
        sleep: Callable[[float], None] = time.sleep,
        commit_delay: float | None = None,
        logger: logging.Logger | None = None,
    ):
        self.runner = runner or ProcessRunner()
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.clipboard = clipboard or Clipboard(self.runner, logger=self.logger)
        self.keys_factory = keys_factory or keys_for_backend
        self.sleep = sleep
        self.commit_delay = commit_delay

    def copy_to_clipboard(self, text: str, backend: DisplayBackend | None = None) -> None:
        self.clipboard.copy_to_clipboard(text, backend or resolve_backend())

    def paste_with_return(self, text: str) -> None:
        """Copy text to the clipboard, then send Ctrl+V and Enter.

        A clipboard failure propagates as-is and no keys are sent. Key
        failures surface as PasteSynthesisFailed or CommitSynthesisFailed.
        """
        backend = resolve_backend()
        commit_delay = self.commit_delay if self.commit_delay is not None else get_commit_delay()
        state = InjectionState.IDLE
        self.logger.info("Injecting on %s: %s", backend.value, preview(text))

        try:
            self.copy_to_clipboard(text, backend)
            state = self._advance(state, InjectionState.CLIPBOARD_SET)

            keys = self.keys_factory(backend, self.runner, commit_delay)
            try:
                keys.paste()
            except KeySynthesisError as e:
                raise PasteSynthesisFailed(f"failed to paste: {e}") from e
            state = self._advance(state, InjectionState.PASTE_SYNTHESIZED)

            if keys.commit_delay:
                self.sleep(keys.commit_delay)

            try:
                keys.commit()
            except KeySynthesisError as e:
                raise CommitSynthesisFailed(f"failed to press enter: {e}") from e
            state = self._advance(state, InjectionState.COMMIT_SYNTHESIZED)
        except InjectionError as e:
            self._advance(state, InjectionState.FAILED)
            self.logger.debug("Injection aborted: %s", e)
            raise

        self._advance(state, InjectionState.DONE)

    def inject(self, request: InjectionRequest) -> None:
        self.paste_with_return(request.text)

    def _advance(self, current: InjectionState, new: InjectionState) -> InjectionState:
        self.logger.debug("Injection state %s -> %s", current.value, new.value)
        return new
