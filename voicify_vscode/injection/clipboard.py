"""Clipboard utilities for the Voicify VSCode plugin."""

import logging

from voicify_vscode.config import LOGGER_NAME, XCLIP, XCLIP_ARGS, PBCOPY, CLIP_EXE
from voicify_vscode.injection.backend import DisplayBackend, resolve_backend
from voicify_vscode.injection.errors import ClipboardUnavailable, ClipboardWriteFailed
from voicify_vscode.injection.process import ProcessRunner


class Clipboard:
    """Places text on the system clipboard (cross-platform)."""

    def __init__(self, runner: ProcessRunner | None = None, logger: logging.Logger | None = None):
        self.runner = runner or ProcessRunner()
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def copy_to_clipboard(self, text: str, backend: DisplayBackend | None = None) -> None:
        """Copy text to the clipboard verbatim.

        Raises ClipboardUnavailable when the platform tool is missing and
        ClipboardWriteFailed when it runs but fails.
        """
        backend = backend or resolve_backend()
        if backend.is_linux:
            self._copy_xclip(text)
        elif backend is DisplayBackend.MACOS:
            self._copy_native([PBCOPY], text)
        else:
            self._copy_native([CLIP_EXE], text)
        self.logger.debug("Copied %d chars to clipboard", len(text))

    def _copy_native(self, args: list[str], text: str) -> None:
        try:
            result = self.runner.run(args, input=text)
        except FileNotFoundError as e:
            raise ClipboardUnavailable(f"{args[0]} is not available") from e
        except OSError as e:
            raise ClipboardWriteFailed(f"Could not run {args[0]}: {e}") from e
        except UnicodeError as e:
            raise ClipboardWriteFailed(f"Text cannot be sent to {args[0]}: {e}") from e
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ClipboardWriteFailed(
                f"{args[0]} exited with status {result.returncode}{': ' + stderr if stderr else ''}"
            )

    def _copy_xclip(self, text: str) -> None:
        # Checked up front so a missing tool is reported before anything is spawned
        if not self.runner.which(XCLIP):
            raise ClipboardUnavailable("xclip is not installed")
        try:
            result = self.runner.stream(XCLIP_ARGS, text)
        except OSError as e:
            raise ClipboardWriteFailed(f"Could not run xclip: {e}") from e
        except UnicodeError as e:
            raise ClipboardWriteFailed(f"Text cannot be sent to xclip: {e}") from e
        if result.returncode != 0:
            raise ClipboardWriteFailed(
                f"xclip exited with status {result.returncode}"
            ) from result.write_error
        if result.write_error is not None:
            raise ClipboardWriteFailed(
                f"xclip did not accept the whole text: {result.write_error}"
            ) from result.write_error
