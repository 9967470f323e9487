"""External process helpers used for window queries, clipboard and keystrokes."""

import logging
import shutil
import subprocess
import threading
from dataclasses import dataclass

from voicify_vscode.config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class StreamResult:
    """Outcome of feeding text to a process through its stdin."""

    returncode: int
    write_error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.write_error is None


class ProcessRunner:
    """Runs short-lived helper processes.

    Everything that talks to the desktop goes through one of these, so tests
    can swap in a scripted fake instead of driving a real session.
    """

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def run(
        self,
        args: list[str],
        input: str | None = None,
        timeout: float | None = None,
        check: bool = False,
        encoding: str = "utf-8",
    ) -> subprocess.CompletedProcess:
        """Run a command to completion and capture its output as text.

        Input and output use ``encoding`` rather than the locale codec, so
        dictated text survives a C or cp1252 locale. Raises FileNotFoundError
        if the binary does not exist and UnicodeEncodeError, before anything
        is spawned, if ``input`` cannot be encoded.
        """
        if input is not None:
            input.encode(encoding)
        logger.debug("Running %s", args)
        return subprocess.run(
            args,
            input=input,
            capture_output=True,
            encoding=encoding,
            timeout=timeout,
            check=check,
        )

    def stream(self, args: list[str], text: str, encoding: str = "utf-8") -> StreamResult:
        """Run a command while a worker thread writes ``text`` to its stdin.

        The write and the process run side by side so a payload larger than
        the pipe buffer cannot stall either end. Returns once the process has
        exited and the writer has finished; a writer cut short by an early
        exit is reported in ``write_error``.

        The child's output goes to /dev/null: xclip forks a background owner
        of the selection which keeps inherited pipes open. Text that cannot be
        encoded raises UnicodeEncodeError before the process is started.
        """
        payload = text.encode(encoding)
        logger.debug("Streaming %d chars to %s", len(text), args)
        proc = subprocess.Popen(
            args,
            stdin=subprocess.PIPE,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        errors: list[OSError] = []

        def _write():
            try:
                proc.stdin.write(payload)
            except OSError as e:
                errors.append(e)
            finally:
                try:
                    proc.stdin.close()
                except OSError as e:
                    if not errors:
                        errors.append(e)

        writer = threading.Thread(target=_write, name="stdin-writer", daemon=True)
        writer.start()
        returncode = proc.wait()
        writer.join()

        write_error = errors[0] if errors else None
        if write_error is not None:
            logger.debug("Writer for %s failed: %s", args[0], write_error)
        return StreamResult(returncode=returncode, write_error=write_error)
