"""Text helpers for the Voicify VSCode plugin."""

import re

CAPITALIZED_RUN_PATTERN = re.compile(r'\b[A-Z]\w*(?:\s+[A-Z]\w*)+')
TITLE_SEPARATOR = " - "


def title_abbreviations(title: str) -> list[str]:
    """Initials of each run of capitalized words in the title's app-name part.

    Editors put their own name after the last " - ", so only that segment is
    abbreviated ("file.py - Visual Studio Code" -> ["VSC"]).
    """
    app_part = title.rsplit(TITLE_SEPARATOR, 1)[-1]
    return ["".join(word[0] for word in run.split()) for run in CAPITALIZED_RUN_PATTERN.findall(app_part)]


def title_matches(title: str, signature: str) -> bool:
    """Check if a window title carries the editor signature.

    Case-sensitive. The signature may appear anywhere in the title itself, or
    in the abbreviation of a run of capitalized words in the last " - "
    segment, so "VSC" matches both "main.go - VSCode" and
    "main.go - Visual Studio Code" but not "Video Stream Capture - Firefox".
    An empty title or signature never matches.
    """
    if not title or not signature:
        return False
    if signature in title:
        return True
    return any(signature in abbreviation for abbreviation in title_abbreviations(title))


def preview(text: str, limit: int = 50) -> str:
    """Shorten text for log lines."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
