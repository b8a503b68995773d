from .actions import Action, DeleteNote, OpenNote, SaveNote
from .controller import AppState, NotesController

# main_window is imported directly: it needs PySide6 and a display
__all__ = ["Action",
           "DeleteNote",
           "OpenNote",
           "SaveNote",
           "AppState",
           "NotesController",
           ]
