"""Errors raised by window inspection and text injection."""


class InjectionError(Exception):
    """Base class for every failure in this package."""


class EnvironmentQueryFailed(InjectionError):
    """The focused window could not be queried (tool missing, no window, query error)."""


class ClipboardUnavailable(InjectionError):
    """The platform clipboard tool is not installed."""


class ClipboardWriteFailed(InjectionError):
    """The clipboard tool ran but did not accept the text."""


class KeySynthesisError(InjectionError):
    """A keystroke could not be synthesized."""


class PasteSynthesisFailed(KeySynthesisError):
    """Ctrl+V could not be delivered to the focused window."""


class CommitSynthesisFailed(KeySynthesisError):
    """Enter could not be delivered after the paste."""
