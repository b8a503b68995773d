from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit,
    QTextEdit, QTextBrowser, QPushButton, QScrollArea, QSplitter, QCheckBox,
)

from open_notes.settings import WINDOW_TITLE, EDITOR_TITLE_PLACEHOLDER
from open_notes.logging_setup import log
from open_notes.core.filenames import display_name
from open_notes.services.markdown_renderer import MarkdownRenderer
from open_notes.store.repo import NoteStore
from open_notes.ui.actions import Action, DeleteNote, OpenNote, SaveNote
from open_notes.ui.controller import AppState, NotesController

STYLESHEET = """
QMainWindow { background: #f4f4f7; }
#sidebar { background: #ffffff; border-right: 1px solid #e0e0e0; }
#rightpane { background: #f8f8fa; }
QLabel { font-size: 15px; }
QLineEdit, QTextEdit, QTextBrowser {
    font-size: 15px; padding: 6px; border-radius: 8px; border: 1px solid #ccc;
}
QPushButton { background: #eaeaea; border-radius: 8px; padding: 6px; }
QPushButton:hover { background: #dcdcdc; }
"""


class NoteRow(QWidget):
    """Sidebar row: label + Open + Delete, bound to one filename."""

    def __init__(self, filename: str, dispatch):
        super().__init__()
        self.filename = filename

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        layout.setSpacing(8)

        self.label = QLabel(display_name(filename))
        self.open_btn = QPushButton("Open")
        self.delete_btn = QPushButton("Delete")
        layout.addWidget(self.label, 1)
        layout.addWidget(self.open_btn)
        layout.addWidget(self.delete_btn)

        self.open_btn.clicked.connect(lambda: dispatch(OpenNote(filename)))
        self.delete_btn.clicked.connect(lambda: dispatch(DeleteNote(filename)))


class NotesWindow(QMainWindow):
    def __init__(self, store: NoteStore):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 600)
        self.setStyleSheet(STYLESHEET)

        self.renderer = MarkdownRenderer()
        self._rows: list[NoteRow] = []

        # ---- sidebar ----
        left = QWidget()
        left.setObjectName("sidebar")
        left.setMinimumWidth(250)
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(8, 8, 8, 8)

        self.rows_host = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_host)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.rows_host)
        left_layout.addWidget(scroll)

        # ---- preview + editor ----
        right = QWidget()
        right.setObjectName("rightpane")
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(10, 10, 10, 10)
        right_layout.setSpacing(10)

        self.preview_title = QLabel()
        self.preview_title.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.markdown_toggle = QCheckBox("Render Markdown")
        title_row = QHBoxLayout()
        title_row.addWidget(self.preview_title, 1)
        title_row.addWidget(self.markdown_toggle)

        self.preview_body = QTextBrowser()
        self.preview_body.setReadOnly(True)
        self.preview_body.setOpenExternalLinks(False)

        self.editor_title = QLineEdit()
        self.editor_title.setPlaceholderText(EDITOR_TITLE_PLACEHOLDER)
        self.editor_body = QTextEdit()
        self.editor_body.setAcceptRichText(False)
        self.save_btn = QPushButton("Save Note")

        right_layout.addLayout(title_row)
        right_layout.addWidget(self.preview_body, 1)
        right_layout.addWidget(self.editor_title)
        right_layout.addWidget(self.editor_body, 1)
        right_layout.addWidget(self.save_btn)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(left)
        self.splitter.addWidget(right)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)
        self.setCentralWidget(self.splitter)

        # Signals
        self.save_btn.clicked.connect(lambda: self.dispatch(SaveNote()))
        self.markdown_toggle.toggled.connect(self._on_markdown_toggled)

        self.controller = NotesController(store, on_changed=self.render)
        self.controller.start()

    def dispatch(self, action: Action) -> None:
        # unsaved editor text goes into the state first, so actions that
        # don't load a note leave it as typed
        self.controller.set_editor(
            self.editor_title.text(), self.editor_body.toPlainText()
        )
        self.controller.dispatch(action)

    def render(self, state: AppState) -> None:
        self._rebuild_rows(state.entries)
        self._render_preview(state)

        if self.editor_title.text() != state.editor_title:
            self.editor_title.setText(state.editor_title)
        if self.editor_body.toPlainText() != state.editor_body:
            self.editor_body.setPlainText(state.editor_body)

        if state.status:
            self.statusBar().showMessage(state.status)
        else:
            self.statusBar().clearMessage()

    def _rebuild_rows(self, entries: list[str]) -> None:
        # whole list from scratch: old rows go, fresh rows from the new listing
        for row in self._rows:
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        self._rows = []

        for filename in entries:
            row = NoteRow(filename, self.dispatch)
            # before the trailing stretch
            self.rows_layout.insertWidget(self.rows_layout.count() - 1, row)
            self._rows.append(row)
        log.debug("Sidebar rebuilt: rows=%d", len(self._rows))

    def _render_preview(self, state: AppState) -> None:
        self.preview_title.setText(state.preview_title)
        if self.markdown_toggle.isChecked():
            self.preview_body.setHtml(self.renderer.render_page(state.preview_body))
        else:
            self.preview_body.setPlainText(state.preview_body)

    def _on_markdown_toggled(self, checked: bool) -> None:
        self._render_preview(self.controller.state)
