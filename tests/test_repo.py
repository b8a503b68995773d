import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from open_notes.store.repo import NoteStore


def make_store(tmp_path):
    store = NoteStore(tmp_path / "notes")
    assert store.ensure()
    return store


def test_ensure_creates_missing_dir(tmp_path):
    store = NoteStore(tmp_path / "notes")
    assert not store.notes_dir.exists()
    assert store.ensure()
    assert store.notes_dir.is_dir()
    # already exists is fine
    assert store.ensure()


def test_ensure_failure_is_logged(tmp_path, caplog):
    blocker = tmp_path / "notes"
    blocker.write_text("not a dir", encoding="utf-8")
    store = NoteStore(blocker)

    with caplog.at_level(logging.ERROR):
        assert store.ensure() is False
    assert "DirectoryCreateFailure" in caplog.text


def test_empty_store_lists_nothing(tmp_path):
    assert make_store(tmp_path).list_notes() == []


def test_missing_dir_lists_nothing(tmp_path, caplog):
    store = NoteStore(tmp_path / "nope")
    with caplog.at_level(logging.ERROR):
        assert store.list_notes() == []


def test_write_then_list_and_read(tmp_path):
    store = make_store(tmp_path)
    assert store.write("My Note!", "hello\nworld") == "My Note.txt"
    assert store.list_notes() == ["My Note.txt"]
    assert store.read("My Note.txt") == "hello\nworld"


def test_round_trip_exact_content(tmp_path):
    store = make_store(tmp_path)
    for content in ["", "line1\r\nline2\r\n", "tab\tend ", "ünïcödé ✓"]:
        name = store.write("exact", content)
        assert store.read(name) == content


def test_write_same_title_overwrites(tmp_path):
    store = make_store(tmp_path)
    store.write("Same", "first")
    store.write("Same", "second")
    assert store.list_notes() == ["Same.txt"]
    assert store.read("Same.txt") == "second"


def test_colliding_titles_share_one_file(tmp_path, caplog):
    store = make_store(tmp_path)
    store.write("Plan", "a")
    with caplog.at_level(logging.INFO):
        store.write("Plan?", "b")
    assert store.list_notes() == ["Plan.txt"]
    assert store.read("Plan.txt") == "b"
    assert "Overwriting existing note" in caplog.text


def test_all_invalid_title_uses_fallback(tmp_path):
    store = make_store(tmp_path)
    assert store.write("???", "x") == "untitled.txt"


def test_dotfiles_hidden(tmp_path):
    store = make_store(tmp_path)
    (store.notes_dir / ".hidden.txt").write_text("secret", encoding="utf-8")
    store.write("Visible", "v")
    assert store.list_notes() == ["Visible.txt"]


def test_foreign_files_listed_verbatim(tmp_path):
    store = make_store(tmp_path)
    (store.notes_dir / "from outside.md").write_text("md", encoding="utf-8")
    assert store.list_notes() == ["from outside.md"]
    assert store.read("from outside.md") == "md"


def test_read_missing_returns_none(tmp_path, caplog):
    store = make_store(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert store.read("ghost.txt") is None
    assert "FileReadFailure" in caplog.text


def test_read_undecodable_returns_none(tmp_path, caplog):
    store = make_store(tmp_path)
    (store.notes_dir / "bin.txt").write_bytes(b"\xff\xfe\xfa")
    with caplog.at_level(logging.ERROR):
        assert store.read("bin.txt") is None
    assert "FileReadFailure" in caplog.text


def test_read_rejects_path_traversal(tmp_path):
    store = make_store(tmp_path)
    (tmp_path / "outside.txt").write_text("nope", encoding="utf-8")
    assert store.read("../outside.txt") is None
    assert store.read("..") is None


def test_delete(tmp_path):
    store = make_store(tmp_path)
    store.write("Gone", "x")
    assert store.delete("Gone.txt")
    assert store.list_notes() == []


def test_delete_missing_only_logs(tmp_path, caplog):
    store = make_store(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert store.delete("ghost.txt") is False
    assert "FileDeleteFailure" in caplog.text


def test_overlong_title_is_write_failure(tmp_path, caplog):
    store = make_store(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert store.write("a" * 300, "x") is None
    assert "FileWriteFailure" in caplog.text
    assert store.list_notes() == []


def test_write_into_missing_dir_fails(tmp_path, caplog):
    store = NoteStore(tmp_path / "never-created")
    with caplog.at_level(logging.ERROR):
        assert store.write("Note", "x") is None
    assert "FileWriteFailure" in caplog.text


def test_null_byte_filenames_rejected(tmp_path, caplog):
    store = make_store(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert store.read("bad\x00.txt") is None
        assert store.delete("bad\x00.txt") is False
    assert store.note_path("bad\x00.txt") is None
    assert "FileReadFailure" in caplog.text
    assert "FileDeleteFailure" in caplog.text
