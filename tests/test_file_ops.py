from pathlib import Path

import pytest

from autocrab.file_ops import AccessDeniedError, FileEntry, FileOps


@pytest.fixture
def root(tmp_path):
    base = (tmp_path / "root").resolve()
    base.mkdir()
    return base


def test_write_then_read_round_trip(root):
    ops = FileOps([root])
    target = root / "note.txt"
    ops.write_file(str(target), "héllo wörld")
    assert ops.read_file(str(target)) == "héllo wörld"


def test_write_creates_parent_directories(root):
    ops = FileOps([root])
    target = root / "a" / "b" / "c.txt"
    ops.write_file(str(target), "data")
    assert target.read_text(encoding="utf-8") == "data"


def test_read_outside_roots_is_denied(root, tmp_path):
    outside = tmp_path / "outside.txt"
    outside.write_text("secret stuff", encoding="utf-8")
    ops = FileOps([root])
    with pytest.raises(AccessDeniedError):
        ops.read_file(str(outside))


def test_write_outside_roots_is_denied_and_writes_nothing(root, tmp_path):
    outside = tmp_path / "elsewhere" / "x.txt"
    ops = FileOps([root])
    with pytest.raises(AccessDeniedError):
        ops.write_file(str(outside), "x")
    assert not outside.exists()


def test_parent_escape_is_denied(root, tmp_path):
    (tmp_path / "sibling.txt").write_text("x", encoding="utf-8")
    ops = FileOps([root])
    with pytest.raises(AccessDeniedError):
        ops.read_file(str(root / ".." / "sibling.txt"))


def test_empty_roots_allow_everything(tmp_path):
    target = tmp_path / "any.txt"
    target.write_text("free", encoding="utf-8")
    assert FileOps([]).read_file(str(target)) == "free"


def test_list_directory_puts_directories_first_sorted_by_name(root):
    (root / "b.txt").write_text("12345", encoding="utf-8")
    (root / "a.txt").write_text("1", encoding="utf-8")
    (root / "zdir").mkdir()
    (root / "cdir").mkdir()
    entries = FileOps([root]).list_directory(str(root))
    assert [e.name for e in entries] == ["cdir", "zdir", "a.txt", "b.txt"]
    assert [e.is_dir for e in entries] == [True, True, False, False]


def test_list_directory_reports_sizes_and_paths(root):
    (root / "f.bin").write_bytes(b"x" * 17)
    entries = FileOps([root]).list_directory(str(root))
    assert entries == [FileEntry(name="f.bin", path=str(root / "f.bin"), is_dir=False, size=17)]


def test_delete_file_removes_it(root):
    target = root / "gone.txt"
    target.write_text("bye", encoding="utf-8")
    FileOps([root]).delete_file(str(target))
    assert not target.exists()


def test_delete_missing_file_raises(root):
    with pytest.raises(FileNotFoundError):
        FileOps([root]).delete_file(str(root / "missing.txt"))


def test_expand_path_replaces_tilde(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert FileOps.expand_path("~/docs/a.txt") == tmp_path / "docs" / "a.txt"


def test_expand_path_leaves_plain_paths():
    assert FileOps.expand_path("/var/data/file") == Path("/var/data/file")