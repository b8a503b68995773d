# open_notes/core/filenames.py

from __future__ import annotations

import re

from open_notes.settings import FALLBACK_TITLE, NOTE_EXT


# everything outside ASCII letters, digits, space, underscore, hyphen
DISALLOWED_CHARS_RE = re.compile(r"[^A-Za-z0-9 _-]")


def sanitize_title(title: str | None) -> str:
    """
    Convert a user-entered note title into a filesystem-safe base name.

    - Disallowed characters are dropped, not replaced
    - Empty result falls back to ``FALLBACK_TITLE``
    - No length limit here; NoteStore rejects names the filesystem can't hold
    """
    if not title:
        return FALLBACK_TITLE

    name = DISALLOWED_CHARS_RE.sub("", str(title))
    if not name:
        return FALLBACK_TITLE
    return name


def note_filename(sanitized_title: str) -> str:
    return f"{sanitized_title}{NOTE_EXT}"


def display_name(filename: str) -> str:
    """Filename without its last extension: ``"My Note.txt" -> "My Note"``."""
    base, dot, _ext = filename.rpartition(".")
    if not dot:
        return filename
    return base
