from __future__ import annotations
from pathlib import Path

APP_NAME = "open-notes"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

# Хранилище заметок: плоская папка рядом с рабочей директорией
NOTES_DIR = Path("notes")
NOTES_DIR_MODE = 0o755
NOTE_EXT = ".txt"
FALLBACK_TITLE = "untitled"

WINDOW_TITLE = "Open Notes"
PREVIEW_PLACEHOLDER = "Select a note"
PREVIEW_DELETED = "Note Deleted"
EDITOR_TITLE_PLACEHOLDER = "Note title..."
