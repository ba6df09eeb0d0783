"""
Tests for the JSON file store against a temporary directory.
"""
from __future__ import annotations

from pydantic import BaseModel

from objectlibrary.repositories import FileStore, StoreProtocol, directory, directory_in_user_library


class Note(BaseModel):
    title: str
    tags: list[str] = []


class Other(BaseModel):
    value: int


def make_store(tmp_path, file_type="json"):
    return FileStore(tmp_path / "notes", Note, file_type=file_type)


def test_save_then_read_round_trip(tmp_path):
    store = make_store(tmp_path)
    note = Note(title="groceries", tags=["milk", "eggs"])
    assert store.save(note, "n1") is True
    assert store.read("n1") == note
    assert (tmp_path / "notes" / "n1.json").exists()


def test_directory_created_lazily(tmp_path):
    store = make_store(tmp_path)
    assert not (tmp_path / "notes").exists()
    assert store.list() == []
    assert store.read("missing") is None
    assert not (tmp_path / "notes").exists()
    store.save(Note(title="x"), "x")
    assert (tmp_path / "notes").is_dir()


def test_last_writer_wins(tmp_path):
    store = make_store(tmp_path)
    store.save(Note(title="first"), "same")
    store.save(Note(title="second"), "same")
    assert store.read("same").title == "second"
    assert store.list() == ["same"]


def test_remove_then_read_is_empty(tmp_path):
    store = make_store(tmp_path)
    store.save(Note(title="bye"), "gone")
    assert store.remove("gone") is True
    assert store.read("gone") is None
    assert store.remove("gone") is False


def test_list_only_matches_extension(tmp_path):
    store = make_store(tmp_path)
    store.save(Note(title="a"), "a")
    store.save(Note(title="b"), "b.with.dots")
    (tmp_path / "notes" / "stray.txt").write_text("ignored")
    (tmp_path / "notes" / "c.json.tmp").write_text("{}")
    (tmp_path / "notes" / "sub.json").mkdir()
    assert sorted(store.list()) == ["a", "b.with.dots"]


def test_custom_extension(tmp_path):
    store = make_store(tmp_path, file_type="note")
    store.save(Note(title="a"), "a")
    assert (tmp_path / "notes" / "a.note").exists()
    assert store.list() == ["a"]
    assert make_store(tmp_path).list() == []


def test_corrupt_file_reads_as_empty(tmp_path):
    store = make_store(tmp_path)
    store.directory.joinpath("bad.json").write_text("{not json", encoding="utf-8")
    store.directory.joinpath("wrong.json").write_text('{"value": 3}', encoding="utf-8")
    assert store.read("bad") is None
    assert store.read("wrong") is None


def test_save_rejects_wrong_type_and_bad_ids(tmp_path):
    store = make_store(tmp_path)
    assert store.save(Other(value=1), "o") is False
    assert store.save(Note(title="x"), "") is False
    assert store.save(Note(title="x"), "../escape") is False
    assert store.read("../escape") is None
    assert store.remove("..") is False
    assert not (tmp_path / "escape.json").exists()


def test_save_failure_returns_false(tmp_path):
    blocker = tmp_path / "notes"
    blocker.write_text("a file where the directory should be")
    store = FileStore(blocker, Note)
    assert store.save(Note(title="x"), "x") is False
    assert store.list() == []


def test_no_temporary_file_left_behind(tmp_path):
    store = make_store(tmp_path)
    store.save(Note(title="x"), "x")
    assert sorted(p.name for p in store.directory.iterdir()) == ["x.json"]


def test_file_name_and_path(tmp_path):
    store = make_store(tmp_path)
    path = store.file_path("abc")
    assert path == tmp_path / "notes" / "abc.json"
    assert store.file_name(path) == "abc"


def test_directory_helpers(tmp_path, data_root):
    created = directory(tmp_path / "base", "things")
    assert created.is_dir()
    assert directory(tmp_path / "base", "things") == created

    library = directory_in_user_library("Contacts")
    assert library == data_root / "Contacts"
    assert library.is_dir()


def test_file_store_satisfies_store_protocol(tmp_path):
    assert isinstance(make_store(tmp_path), StoreProtocol)


def test_unencodable_id_never_raises(tmp_path):
    store = make_store(tmp_path)
    assert store.save(Note(title="a"), "\ud800") is False
    assert store.read("\ud800") is None
    assert store.remove("\ud800") is False
