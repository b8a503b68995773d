from .core.filenames import display_name, note_filename, sanitize_title
from .store.repo import NoteStore

__version__ = "0.1.0"

__all__ = ["display_name",
           "note_filename",
           "sanitize_title",
           "NoteStore",
           ]
