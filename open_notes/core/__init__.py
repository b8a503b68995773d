from .filenames import display_name, note_filename, sanitize_title
from .sanitize import sanitize_rendered_html

__all__ = ["display_name",
           "note_filename",
           "sanitize_title",
           "sanitize_rendered_html",
           ]
