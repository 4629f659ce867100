import os
from datetime import datetime

from fbrowser.models.dir_entry import DirEntry


def _scan_one(directory, name):
    """Build the DirEntry for name the way a directory scan does."""
    with os.scandir(directory) as it:
        (child,) = [c for c in it if c.name == name]
    return DirEntry.from_scandir(str(directory), child)


def test_file_entry(tmp_path):
    p = tmp_path / "a.txt"
    p.write_text("hello world")

    entry = _scan_one(tmp_path, "a.txt")
    assert entry.name == "a.txt"
    assert entry.path == str(p)
    assert entry.size == os.path.getsize(p)
    assert not entry.is_dir
    assert entry.is_file
    assert isinstance(entry.modified, datetime)
    assert isinstance(entry.created, datetime)


def test_directory_entry(tmp_path):
    (tmp_path / "sub").mkdir()

    entry = _scan_one(tmp_path, "sub")
    assert entry.is_dir
    assert not entry.is_file


def test_path_joins_directory_and_name(tmp_path):
    (tmp_path / "x.bin").write_bytes(b"1234")

    entry = _scan_one(tmp_path, "x.bin")
    assert entry.path == os.path.join(str(tmp_path), "x.bin")
    assert entry.size == 4


def test_dangling_symlink_is_a_plain_file(tmp_path):
    (tmp_path / "broken").symlink_to(tmp_path / "does-not-exist")

    entry = _scan_one(tmp_path, "broken")
    assert entry.name == "broken"
    assert entry.is_file
    assert entry.size == 0
    assert entry.modified == datetime.fromtimestamp(0)


def test_symlink_to_directory_counts_as_directory(tmp_path):
    target = tmp_path / "real"
    target.mkdir()
    (tmp_path / "link").symlink_to(target, target_is_directory=True)

    assert _scan_one(tmp_path, "link").is_dir
