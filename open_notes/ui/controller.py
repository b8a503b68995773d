from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from open_notes.core.filenames import display_name, note_filename, sanitize_title
from open_notes.logging_setup import log
from open_notes.settings import PREVIEW_DELETED, PREVIEW_PLACEHOLDER
from open_notes.store.repo import NoteStore
from open_notes.ui.actions import Action, DeleteNote, OpenNote, SaveNote


@dataclass
class AppState:
    """Everything the window shows. The window only renders this."""
    entries: list[str] = field(default_factory=list)
    preview_title: str = PREVIEW_PLACEHOLDER
    preview_body: str = ""
    editor_title: str = ""
    editor_body: str = ""
    status: str = ""


class NotesController:
    """
    Runs user actions against the NoteStore and keeps AppState in sync.

    Every action is synchronous and complete; failures are logged, shown in
    ``state.status`` and abort the action without touching the rest of the state.
    """

    def __init__(self, store: NoteStore, *, on_changed: Optional[Callable[[AppState], None]] = None):
        self.store = store
        self.state = AppState()
        self.on_changed = on_changed

    def start(self) -> None:
        self.store.ensure()
        self._refresh_entries()
        log.info("Notes directory ready: %s (%d notes)", self.store.notes_dir, len(self.state.entries))
        self._notify()

    def dispatch(self, action: Action) -> None:
        log.debug("dispatch: %r", action)
        if isinstance(action, OpenNote):
            self._open(action.filename)
        elif isinstance(action, SaveNote):
            self._save()
        elif isinstance(action, DeleteNote):
            self._delete(action.filename)
        else:
            raise TypeError(f"Unknown action: {action!r}")
        self._notify()

    def set_editor(self, title: str, body: str) -> None:
        """Editor widgets push their current text here before each action."""
        self.state.editor_title = title
        self.state.editor_body = body

    def _open(self, filename: str) -> None:
        content = self.store.read(filename)
        if content is None:
            self.state.status = f"Could not open {filename}"
            return

        title = display_name(filename)
        self.state.preview_title = title
        self.state.preview_body = content
        # open doubles as "load for editing"
        self.state.editor_title = title
        self.state.editor_body = content
        self.state.status = ""

    def _save(self) -> None:
        user_title = self.state.editor_title
        if not user_title:
            log.warning("EmptyTitleOnSave: note title cannot be empty")
            self.state.status = "Note title cannot be empty"
            return

        sanitized = sanitize_title(user_title)
        written = self.store.write(sanitized, self.state.editor_body)
        if written is None:
            self.state.status = f"Could not save {note_filename(sanitized)}"
            return

        self._refresh_entries()
        # show what was actually persisted
        self.state.editor_title = sanitized
        self.state.status = f"Saved {written}"

    def _delete(self, filename: str) -> None:
        ok = self.store.delete(filename)
        self._refresh_entries()
        self.state.preview_title = PREVIEW_DELETED
        self.state.preview_body = ""
        self.state.status = "" if ok else f"Could not delete {filename}"

    def _refresh_entries(self) -> None:
        self.state.entries = self.store.list_notes()

    def _notify(self) -> None:
        if self.on_changed is not None:
            self.on_changed(self.state)
