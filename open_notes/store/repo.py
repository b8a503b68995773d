from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from open_notes.core.filenames import note_filename, sanitize_title
from open_notes.logging_setup import log
from open_notes.settings import NOTES_DIR_MODE

# POSIX NAME_MAX, in bytes of the encoded name
MAX_NAME_BYTES = 255


@dataclass(frozen=True)
class NoteStore:
    """
    The only place that touches the notes directory.

    Operations never raise: failures are logged and reported through the
    return value, so the UI can abort the current action and carry on.
    """
    notes_dir: Path

    def ensure(self) -> bool:
        try:
            self.notes_dir.mkdir(mode=NOTES_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            log.error("DirectoryCreateFailure: %s (%s)", self.notes_dir, e)
            return False
        return True

    def list_notes(self) -> list[str]:
        """Entry names in directory order, dotfiles skipped. Not cached."""
        try:
            with os.scandir(self.notes_dir) as it:
                return [entry.name for entry in it if not entry.name.startswith(".")]
        except OSError as e:
            log.error("Cannot list notes directory: %s (%s)", self.notes_dir, e)
            return []

    def note_path(self, filename: str) -> Path | None:
        """Path inside the notes directory, or None if the name can't be one."""
        if not filename or filename in (".", "..") or "\x00" in filename:
            return None
        if "/" in filename or (os.sep != "/" and os.sep in filename):
            return None
        if os.altsep and os.altsep in filename:
            return None
        if len(os.fsencode(filename)) > MAX_NAME_BYTES:
            return None
        return self.notes_dir / filename

    def read(self, filename: str) -> str | None:
        path = self.note_path(filename)
        if path is None:
            log.error("FileReadFailure: invalid note filename %r", filename)
            return None

        try:
            # newline="" keeps \r\n as written
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except MemoryError:
            log.error("MemoryAllocationFailure: note too large to load: %s", path)
        except (OSError, UnicodeDecodeError) as e:
            log.error("FileReadFailure: %s (%s)", path, e)
        return None

    def write(self, title: str, content: str) -> str | None:
        """
        Save ``content`` under the sanitized ``title``.
        Returns the filename written, or None on failure.
        """
        filename = note_filename(sanitize_title(title))
        path = self.note_path(filename)
        if path is None:
            log.error("FileWriteFailure: note filename too long: %r", filename)
            return None

        if path.exists():
            # same sanitized title -> same file, the old content is replaced
            log.info("Overwriting existing note: %s", path)

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            log.error("FileWriteFailure: %s (%s)", path, e)
            return None

        log.info("Note saved: %s", path)
        return filename

    def delete(self, filename: str) -> bool:
        path = self.note_path(filename)
        if path is None:
            log.error("FileDeleteFailure: invalid note filename %r", filename)
            return False

        try:
            path.unlink()
        except OSError as e:
            log.error("FileDeleteFailure: %s (%s)", path, e)
            return False

        log.info("Note deleted: %s", path)
        return True
