from __future__ import annotations

from PySide6.QtWidgets import QApplication

from open_notes.settings import NOTES_DIR
from open_notes.store.repo import NoteStore
from open_notes.ui.main_window import NotesWindow
from open_notes.logging_setup import install_global_exception_hooks, log, setup_logging, SESSION_ID


def main() -> int:
    setup_logging()
    install_global_exception_hooks()
    app = QApplication([])
    win = NotesWindow(NoteStore(NOTES_DIR))
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
