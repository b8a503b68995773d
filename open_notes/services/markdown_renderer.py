from __future__ import annotations

import markdown as md

from open_notes.core.sanitize import sanitize_rendered_html


class MarkdownRenderer:
    """Preview body as sanitized HTML for a QTextBrowser."""

    def render_page(self, text: str) -> str:
        rendered = md.markdown(text or "", extensions=["fenced_code", "tables"])
        rendered = sanitize_rendered_html(rendered)

        return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <style>
    body {{ font-family: sans-serif; font-size: 15px; line-height: 1.5; }}
    code, pre {{ background: #f5f5f5; }}
    pre {{ padding: 12px; }}
  </style>
</head>
<body>{rendered}</body>
</html>
"""
