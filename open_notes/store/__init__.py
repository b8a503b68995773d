from .repo import NoteStore

__all__ = ["NoteStore"]
